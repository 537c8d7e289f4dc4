"""
Paginação de tamanho fixo sobre a visão filtrada e ordenada.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence
import math

from orderdesk.models.order import Order

DEFAULT_PAGE_SIZE = 10


@dataclass
class Page:
    """Metadados de paginação e os pedidos da página atual"""
    total_pages: int
    start_index: int
    end_index: int
    page_size: int
    current_page: int
    page_records: List[Order] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalPages": self.total_pages,
            "startIndex": self.start_index,
            "endIndex": self.end_index,
            "pageSize": self.page_size,
            "currentPage": self.current_page,
        }


def total_pages_for(count: int, page_size: int) -> int:
    return math.ceil(count / page_size)


def paginate(ordered_records: Sequence[Order], page: int, page_size: int = DEFAULT_PAGE_SIZE) -> Page:
    """
    Recorta a página pedida.

    Args:
        ordered_records: Visão filtrada e ordenada
        page: Número da página (começa em 1)
        page_size: Quantidade de pedidos por página

    Returns:
        Page: Página pedida. Uma página além do total vem vazia, sem erro.
    """
    if page_size <= 0:
        raise ValueError(f"Tamanho de página inválido: {page_size}")
    start_index = (page - 1) * page_size
    end_index = start_index + page_size
    # slices com índice negativo contariam a partir do fim
    page_records = list(ordered_records[start_index:end_index]) if start_index >= 0 else []
    return Page(
        total_pages=total_pages_for(len(ordered_records), page_size),
        start_index=start_index,
        end_index=end_index,
        page_size=page_size,
        current_page=page,
        page_records=page_records,
    )
