"""
Barramento de eventos de ponteiro (pointer-down) do processo.
"""

from dataclasses import dataclass, field
from typing import Callable, FrozenSet, Iterable, List, Optional
import logging
import threading

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Element:
    """Nó da árvore de interface, com os marcadores (classes) que carrega"""
    markers: FrozenSet[str] = field(default_factory=frozenset)
    parent: Optional["Element"] = None

    def closest(self, marker: str) -> Optional["Element"]:
        """Primeiro nó (ele mesmo ou ancestral) que carrega o marcador."""
        node = self
        while node is not None:
            if marker in node.markers:
                return node
            node = node.parent
        return None

    @classmethod
    def from_path(cls, path: Iterable[Iterable[str]]) -> "Element":
        """
        Monta o alvo a partir do caminho raiz -> alvo.

        Args:
            path: Lista de marcadores por nível, da raiz até o alvo
        """
        node = None
        for markers in path:
            node = cls(markers=frozenset(markers), parent=node)
        return node if node is not None else cls()


@dataclass(frozen=True)
class PointerEvent:
    target: Element


Listener = Callable[[PointerEvent], None]


class PointerEventBus:
    """Lista de ouvintes de pointer-down; cada ouvinte é registrado no máximo uma vez."""

    def __init__(self):
        self._listeners: List[Listener] = []
        self._lock = threading.Lock()

    def add_listener(self, listener: Listener) -> None:
        with self._lock:
            if listener in self._listeners:
                return
            self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def dispatch(self, event: PointerEvent) -> None:
        # um ouvinte pode se remover durante o despacho; chamados fora do lock
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            listener(event)

    @property
    def listener_count(self) -> int:
        with self._lock:
            return len(self._listeners)


# barramento global do processo
pointer_events = PointerEventBus()
