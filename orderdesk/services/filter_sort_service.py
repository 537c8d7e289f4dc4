"""
Filtragem e ordenação dos pedidos exibidos na tabela.

Funções puras: dado o conteúdo do store e os parâmetros de busca, status e
ordenação, devolvem a visão filtrada e ordenada. Não alteram o store.
"""

from datetime import datetime, timedelta
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence
import logging
import re

from dateutil import parser as date_parser

from orderdesk.models.order import Order, SEARCHABLE_FIELDS, WIRE_FIELDS

logger = logging.getLogger(__name__)

STATUS_ALL = "all"
SORT_ASC = "asc"
SORT_DESC = "desc"
SORT_DIRECTIONS = (SORT_ASC, SORT_DESC)

ORDER_ID_PREFIX_LENGTH = 3  # "#CM"

# datas inválidas ficam antes de qualquer data válida na ordem crescente
INVALID_DATE_TIMESTAMP = float("-inf")

_RELATIVE_DATE_RE = re.compile(r"^(\d+)\s+(minute|hour|day)s?\s+ago$", re.IGNORECASE)
_RELATIVE_UNITS = {
    "minute": timedelta(minutes=1),
    "hour": timedelta(hours=1),
    "day": timedelta(days=1),
}


def matches_search(order: Order, search_term: str) -> bool:
    """Busca por substring, sem diferenciar maiúsculas, em orderId/user/project/address/status."""
    if not search_term:
        return True
    needle = search_term.lower()
    return any(needle in _search_text(order.get_field(field)) for field in SEARCHABLE_FIELDS)


def _search_text(value: Any) -> str:
    # campo ausente não deve casar com a busca "none"
    return "" if value is None else str(value).lower()


def matches_status(order: Order, status_filter: str) -> bool:
    return status_filter == STATUS_ALL or order.status == status_filter


def order_number(order_id: str) -> int:
    """
    Converte '#CM001' em 1.

    Args:
        order_id: Identificador de exibição do pedido

    Returns:
        int: Parte numérica após o prefixo fixo de 3 caracteres
    """
    digits = order_id[ORDER_ID_PREFIX_LENGTH:]
    return int(digits)


def date_timestamp(value: str, now: Optional[datetime] = None) -> float:
    """
    Converte a data exibida em um timestamp numérico para ordenação.

    Reconhece as frases relativas ('Just now', 'N minutes ago', 'N hours ago',
    'Yesterday', 'N days ago') em relação a `now`; demais valores passam pelo
    parser genérico do dateutil. Valores não reconhecidos viram INVALID_DATE_TIMESTAMP.
    """
    if now is None:
        now = datetime.now()
    text = (value or "").strip() if isinstance(value, str) else ""
    lowered = text.lower()

    if lowered == "just now":
        return now.timestamp()
    if lowered == "yesterday":
        return (now - timedelta(days=1)).timestamp()

    match = _RELATIVE_DATE_RE.match(text)
    if match:
        amount = int(match.group(1))
        unit = _RELATIVE_UNITS[match.group(2).lower()]
        return (now - amount * unit).timestamp()

    if not text:
        return INVALID_DATE_TIMESTAMP
    try:
        return date_parser.parse(text).timestamp()
    except (ValueError, OverflowError, OSError) as e:
        logger.warning(f"Data não reconhecida {value!r}: {e}")
        return INVALID_DATE_TIMESTAMP


def _order_id_key(order: Order, now: datetime) -> Any:
    try:
        return (1, order_number(order.order_id))
    except (TypeError, ValueError):
        # sem dígitos válidos: antes dos numéricos, por texto
        return (0, str(order.order_id).lower())


def _date_key(order: Order, now: datetime) -> Any:
    return date_timestamp(order.date, now)


def _field_key(field: str) -> Callable[[Order, datetime], Any]:
    def key(order: Order, now: datetime) -> Any:
        value = order.get_field(field)
        if isinstance(value, str):
            return value.lower()
        return value
    return key


_SORT_KEYS: Dict[str, Callable[[Order, datetime], Any]] = {
    "orderId": _order_id_key,
    "date": _date_key,
}


# nome do atributo (order_id) -> nome de troca (orderId)
_ATTRIBUTE_TO_WIRE = {attribute: wire for wire, attribute in WIRE_FIELDS.items()}


def normalize_sort_field(sort_field: str) -> str:
    """
    Converte o campo de ordenação para o nome de troca.

    Aceita tanto 'orderId' quanto 'order_id'; campos desconhecidos geram ValueError.
    """
    if sort_field in WIRE_FIELDS:
        return sort_field
    if sort_field in _ATTRIBUTE_TO_WIRE:
        return _ATTRIBUTE_TO_WIRE[sort_field]
    raise ValueError(f"Campo de ordenação desconhecido: {sort_field}")


def sort_key_for(sort_field: str) -> Callable[[Order, datetime], Any]:
    """Retorna a função de chave de ordenação para o campo pedido."""
    sort_field = normalize_sort_field(sort_field)
    return _SORT_KEYS.get(sort_field) or _field_key(sort_field)


def filter_orders(records: Iterable[Order], search_term: str = "", status_filter: str = STATUS_ALL) -> List[Order]:
    if records is None:
        raise TypeError("Coleção de pedidos não pode ser None")
    return [
        order for order in records
        if matches_search(order, search_term) and matches_status(order, status_filter)
    ]


def sort_orders(orders: Sequence[Order], sort_field: str, sort_direction: str = SORT_ASC,
                now: Optional[datetime] = None) -> List[Order]:
    """
    Ordena os pedidos pelo campo informado.

    A ordenação é estável: pedidos com chaves iguais mantêm a ordem do store
    nas duas direções.
    """
    if sort_direction not in SORT_DIRECTIONS:
        raise ValueError(f"Direção de ordenação inválida: {sort_direction}")
    if not sort_field:
        return list(orders)
    if now is None:
        now = datetime.now()
    key = sort_key_for(sort_field)
    return sorted(orders, key=lambda order: key(order, now), reverse=sort_direction == SORT_DESC)


def compute_view(records: Iterable[Order], search_term: str = "", status_filter: str = STATUS_ALL,
                 sort_field: str = "", sort_direction: str = SORT_ASC,
                 now: Optional[datetime] = None) -> List[Order]:
    """
    Calcula a visão filtrada e ordenada.

    Args:
        records: Conteúdo atual do store
        search_term: Texto da busca livre ('' desativa a busca)
        status_filter: 'all' ou um status exato
        sort_field: Campo de ordenação ('' mantém a ordem do store)
        sort_direction: 'asc' ou 'desc'
        now: Instante de referência para datas relativas

    Returns:
        List[Order]: Pedidos que passam nos filtros, na ordem pedida
    """
    filtered = filter_orders(records, search_term, status_filter)
    ordered = sort_orders(filtered, sort_field, sort_direction, now)
    logger.debug(
        f"Visão recalculada: {len(ordered)} pedidos "
        f"(busca={search_term!r}, status={status_filter!r}, ordem={sort_field or '-'} {sort_direction})"
    )
    return ordered
