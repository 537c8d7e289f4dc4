"""
Fecha o dropdown de filtro quando há um clique fora dele.
"""

from contextlib import contextmanager
from typing import Callable, Iterator, Optional
import logging

from orderdesk.utils.pointer_events import PointerEvent, PointerEventBus, pointer_events

logger = logging.getLogger(__name__)

FILTER_DROPDOWN_MARKER = "filter-dropdown"


class DropdownDismissalWatcher:
    """
    Inscrição com escopo no barramento de pointer-down.

    Enquanto inscrito, um pointer-down fora da região marcada com `marker`
    chama `on_dismiss` se `is_open()` for verdadeiro. Nada além do flag do
    dropdown é alterado.
    """

    def __init__(self, is_open: Callable[[], bool], on_dismiss: Callable[[], None],
                 marker: str = FILTER_DROPDOWN_MARKER, bus: Optional[PointerEventBus] = None):
        self.is_open = is_open
        self.on_dismiss = on_dismiss
        self.marker = marker
        self.bus = bus if bus is not None else pointer_events
        self.subscribed = False

    def handle_pointer_down(self, event: PointerEvent) -> None:
        if self.is_open() and event.target.closest(self.marker) is None:
            logger.debug("Clique fora do dropdown; fechando")
            self.on_dismiss()

    def subscribe(self) -> None:
        if self.subscribed:
            return
        self.bus.add_listener(self.handle_pointer_down)
        self.subscribed = True

    def unsubscribe(self) -> None:
        if not self.subscribed:
            return
        self.bus.remove_listener(self.handle_pointer_down)
        self.subscribed = False

    @contextmanager
    def subscription(self) -> Iterator["DropdownDismissalWatcher"]:
        """Inscreve ao entrar e sempre remove a inscrição ao sair."""
        self.subscribe()
        try:
            yield self
        finally:
            self.unsubscribe()
