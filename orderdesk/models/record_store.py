"""
Store canônico de pedidos em memória.
Inicializado uma única vez a partir de um snapshot e alterado apenas por inserção no topo.
"""

from typing import Any, Dict, Iterable, List, Tuple, Union
import logging
import threading

from orderdesk.exceptions import DuplicateOrderError, SnapshotPreconditionError
from orderdesk.models.order import Order

logger = logging.getLogger(__name__)


def _snapshot_data(snapshot: Any) -> Iterable:
    if snapshot is None:
        raise SnapshotPreconditionError("Snapshot de pedidos não informado")
    if isinstance(snapshot, dict):
        if "data" not in snapshot:
            raise SnapshotPreconditionError("Snapshot sem a chave 'data'")
        data = snapshot["data"]
    else:
        if not hasattr(snapshot, "data"):
            raise SnapshotPreconditionError("Snapshot sem o atributo 'data'")
        data = snapshot.data
    if data is None:
        raise SnapshotPreconditionError("Coleção de pedidos do snapshot é nula")
    return data


def _as_order(item: Union[Order, Dict[str, Any]]) -> Order:
    if isinstance(item, Order):
        return item
    return Order.from_dict(item)


class RecordStore:
    """
    Sequência mutável de pedidos, com uma única operação de escrita (add_order).
    Não há remoção nem atualização no lugar. Seguro para uso entre threads.
    """

    def __init__(self, snapshot: Any):
        self._orders: List[Order] = [_as_order(item) for item in _snapshot_data(snapshot)]
        self._ids = {order.id for order in self._orders}
        self._lock = threading.Lock()
        self.version = 0
        if len(self._ids) != len(self._orders):
            raise SnapshotPreconditionError("Snapshot contém ids de pedido repetidos")
        logger.info(f"Store de pedidos inicializado com {len(self._orders)} registros")

    def add_order(self, order: Union[Order, Dict[str, Any]]) -> None:
        """
        Insere um novo pedido no início do store.

        Args:
            order: Pedido (ou dicionário no formato de troca)
        """
        order = _as_order(order)
        with self._lock:
            # checagem e inserção sob o mesmo lock
            if order.id in self._ids:
                raise DuplicateOrderError(f"Pedido com id {order.id!r} já existe")
            self._orders.insert(0, order)
            self._ids.add(order.id)
            self.version += 1
        logger.info(f"Pedido {order.order_id} adicionado (id={order.id})")

    @property
    def records(self) -> Tuple[Order, ...]:
        with self._lock:
            return tuple(self._orders)

    @property
    def unique_statuses(self) -> List[str]:
        """Status presentes no store, na ordem em que aparecem."""
        return list(dict.fromkeys(order.status for order in self.records))

    def __contains__(self, order_id: Any) -> bool:
        with self._lock:
            return order_id in self._ids

    def __len__(self) -> int:
        with self._lock:
            return len(self._orders)

    def __iter__(self):
        return iter(self.records)
