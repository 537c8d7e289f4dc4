"""
Controle de seleção de pedidos (checkboxes da tabela).
"""

from typing import Any, Iterable, List
import logging

logger = logging.getLogger(__name__)


class SelectionController:
    """
    Conjunto de ids selecionados.

    A seleção não é reconciliada quando o filtro muda: ids selecionados que
    saem da visão continuam selecionados.
    """

    def __init__(self):
        # dict preserva a ordem de seleção
        self._selected = {}

    def toggle(self, order_id: Any) -> bool:
        """
        Marca ou desmarca um pedido.

        Returns:
            bool: True se o pedido ficou selecionado
        """
        if order_id in self._selected:
            del self._selected[order_id]
            return False
        self._selected[order_id] = True
        return True

    def select_all(self, filtered_ids: Iterable[Any]) -> None:
        """
        Seleciona todos os pedidos da visão filtrada, ou limpa a seleção se ela
        já for exatamente esse conjunto.
        """
        filtered_ids = list(dict.fromkeys(filtered_ids))
        if set(self._selected) == set(filtered_ids):
            self.clear()
            return
        self._selected = dict.fromkeys(filtered_ids, True)
        logger.debug(f"{len(self._selected)} pedidos selecionados")

    def replace(self, order_ids: Iterable[Any]) -> None:
        self._selected = dict.fromkeys(order_ids, True)

    def clear(self) -> None:
        self._selected = {}

    def is_selected(self, order_id: Any) -> bool:
        return order_id in self._selected

    @property
    def selected_ids(self) -> List[Any]:
        return list(self._selected)

    def __len__(self) -> int:
        return len(self._selected)

    def __contains__(self, order_id: Any) -> bool:
        return order_id in self._selected
