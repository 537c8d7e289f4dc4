"""
Estado da tela de pedidos: busca, filtro de status, ordenação, paginação,
seleção e dropdown de filtro. Todos os valores derivados são recalculados a
partir do estado atual a cada leitura.

Uma instância pode ser compartilhada entre as threads do servidor: alterações
e leituras do estado passam pelo `lock` (reentrante).
"""

from datetime import datetime
from typing import Any, Callable, Dict, Iterable, List, Optional, Union
import logging
import threading

from orderdesk.models.order import Order
from orderdesk.models.record_store import RecordStore
from orderdesk.services.dropdown_watcher import DropdownDismissalWatcher
from orderdesk.services.filter_sort_service import (
    SORT_ASC,
    SORT_DESC,
    SORT_DIRECTIONS,
    STATUS_ALL,
    compute_view,
    normalize_sort_field,
)
from orderdesk.services.pagination_service import DEFAULT_PAGE_SIZE, Page, paginate
from orderdesk.services.selection_service import SelectionController
from orderdesk.utils.pointer_events import PointerEventBus
from orderdesk.utils.status_colors import FIELD_MAP

logger = logging.getLogger(__name__)


def resolve_sort_field(sort_field: Optional[str]) -> str:
    """Rótulo de coluna ou nome de campo -> nome de troca ('' desativa a ordenação)."""
    sort_field = FIELD_MAP.get(sort_field, sort_field or "")
    return normalize_sort_field(sort_field) if sort_field else ""


def _check_direction(sort_direction: str) -> str:
    if sort_direction not in SORT_DIRECTIONS:
        raise ValueError(f"Direção de ordenação inválida: {sort_direction}")
    return sort_direction


def _check_page(page: int) -> int:
    if page < 1:
        raise ValueError(f"Página inválida: {page}")
    return page


class OrdersBrowser:
    """
    Navegador de pedidos de um único ator.

    Args:
        snapshot: Objeto ou dict com a coleção `data` de pedidos
        items_per_page: Tamanho fixo da página
        event_bus: Barramento de pointer-down (padrão: o global do processo)
        clock: Fonte do instante atual, usada nas datas relativas
    """

    def __init__(self, snapshot: Any, items_per_page: int = DEFAULT_PAGE_SIZE,
                 event_bus: Optional[PointerEventBus] = None,
                 clock: Optional[Callable[[], datetime]] = None):
        if items_per_page <= 0:
            raise ValueError(f"Tamanho de página inválido: {items_per_page}")
        self.store = RecordStore(snapshot)
        self.selection = SelectionController()
        self.items_per_page = items_per_page
        self.clock = clock or datetime.now
        self.lock = threading.RLock()

        self.search_term = ""
        self.status_filter = STATUS_ALL
        self.sort_field = ""
        self.sort_direction = SORT_ASC
        self.current_page = 1
        self.show_filter_dropdown = False

        self.dropdown_watcher = DropdownDismissalWatcher(
            is_open=lambda: self.show_filter_dropdown,
            on_dismiss=self.close_filter_dropdown,
            bus=event_bus,
        )

    # --- setters -----------------------------------------------------------

    def set_search_term(self, search_term: str) -> None:
        search_term = search_term or ""
        with self.lock:
            if search_term != self.search_term:
                self.search_term = search_term
                self.current_page = 1

    def set_status_filter(self, status_filter: str) -> None:
        status_filter = status_filter or STATUS_ALL
        with self.lock:
            if status_filter != self.status_filter:
                self.status_filter = status_filter
                self.current_page = 1

    def set_sort_field(self, sort_field: str) -> None:
        sort_field = resolve_sort_field(sort_field)
        with self.lock:
            self.sort_field = sort_field

    def set_sort_direction(self, sort_direction: str) -> None:
        sort_direction = _check_direction(sort_direction)
        with self.lock:
            self.sort_direction = sort_direction

    def set_current_page(self, page: int) -> None:
        page = _check_page(page)
        with self.lock:
            self.current_page = page

    def set_selected_orders(self, order_ids: Iterable[Any]) -> None:
        with self.lock:
            self.selection.replace(order_ids)

    def apply_view_params(self, search_term: Optional[str] = None, status_filter: Optional[str] = None,
                          sort_field: Optional[str] = None, sort_direction: Optional[str] = None,
                          page: Optional[int] = None) -> None:
        """
        Aplica vários parâmetros de visão de uma vez.

        Todos são validados antes de qualquer alteração: um valor inválido gera
        ValueError e deixa o estado como estava. Parâmetros None não mudam.
        A busca e o status são aplicados antes da página, então uma mudança de
        filtro seguida de `page` termina na página pedida.
        """
        if sort_field is not None:
            sort_field = resolve_sort_field(sort_field)
        if sort_direction is not None:
            _check_direction(sort_direction)
        if page is not None:
            _check_page(page)

        with self.lock:
            if search_term is not None:
                self.set_search_term(search_term)
            if status_filter is not None:
                self.set_status_filter(status_filter)
            if sort_field is not None:
                self.sort_field = sort_field
            if sort_direction is not None:
                self.sort_direction = sort_direction
            if page is not None:
                self.current_page = page

    # --- ações da tabela ---------------------------------------------------

    def handle_sort(self, field: str) -> None:
        """Mesmo campo inverte a direção; campo novo começa em ordem crescente."""
        field = resolve_sort_field(field)
        with self.lock:
            if field == self.sort_field:
                self.sort_direction = SORT_DESC if self.sort_direction == SORT_ASC else SORT_ASC
            else:
                self.sort_field = field
                self.sort_direction = SORT_ASC

    def handle_select_order(self, order_id: Any) -> bool:
        with self.lock:
            return self.selection.toggle(order_id)

    def handle_select_all(self) -> None:
        with self.lock:
            self.selection.select_all(order.id for order in self.filtered_and_sorted_orders)

    def add_order(self, order: Union[Order, Dict[str, Any]]) -> None:
        with self.lock:
            self.store.add_order(order)

    # --- dropdown de filtro ------------------------------------------------

    def open_filter_dropdown(self) -> None:
        with self.lock:
            if self.show_filter_dropdown:
                return
            self.show_filter_dropdown = True
            self.dropdown_watcher.subscribe()

    def close_filter_dropdown(self) -> None:
        with self.lock:
            self.show_filter_dropdown = False
            self.dropdown_watcher.unsubscribe()

    def toggle_filter_dropdown(self) -> None:
        with self.lock:
            if self.show_filter_dropdown:
                self.close_filter_dropdown()
            else:
                self.open_filter_dropdown()

    def close(self) -> None:
        """Encerra a tela: remove a inscrição no barramento."""
        self.close_filter_dropdown()

    def __enter__(self) -> "OrdersBrowser":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # --- valores derivados -------------------------------------------------

    @property
    def orders(self) -> List[Order]:
        return list(self.store.records)

    @property
    def selected_orders(self) -> List[Any]:
        with self.lock:
            return self.selection.selected_ids

    @property
    def unique_statuses(self) -> List[str]:
        return self.store.unique_statuses

    @property
    def filtered_and_sorted_orders(self) -> List[Order]:
        with self.lock:
            return compute_view(
                self.store.records,
                self.search_term,
                self.status_filter,
                self.sort_field,
                self.sort_direction,
                now=self.clock(),
            )

    @property
    def pagination(self) -> Page:
        with self.lock:
            return paginate(self.filtered_and_sorted_orders, self.current_page, self.items_per_page)

    @property
    def total_pages(self) -> int:
        return self.pagination.total_pages

    @property
    def start_index(self) -> int:
        return (self.current_page - 1) * self.items_per_page

    @property
    def end_index(self) -> int:
        return self.start_index + self.items_per_page

    @property
    def current_orders(self) -> List[Order]:
        return self.pagination.page_records

    def snapshot(self) -> Dict[str, Any]:
        """Estado e valores derivados em formato serializável, lidos de forma consistente."""
        with self.lock:
            view = self.filtered_and_sorted_orders
            page = paginate(view, self.current_page, self.items_per_page)
            return {
                "searchTerm": self.search_term,
                "statusFilter": self.status_filter,
                "sortField": self.sort_field,
                "sortDirection": self.sort_direction,
                "currentPage": self.current_page,
                "itemsPerPage": self.items_per_page,
                "showFilterDropdown": self.show_filter_dropdown,
                "uniqueStatuses": self.unique_statuses,
                "selectedOrders": self.selected_orders,
                "totalFiltered": len(view),
                "pagination": page.to_dict(),
                "orders": [order.to_dict() for order in page.page_records],
            }
