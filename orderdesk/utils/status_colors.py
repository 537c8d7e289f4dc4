# Paleta de status, cores e rótulos das colunas usados pela camada de exibição
from typing import Dict, Optional

from orderdesk.utils.validation import validate_theme

DEFAULT_STATUS = "In Progress"

# status oferecidos no formulário de novo pedido -> tag de cor
STATUS_OPTIONS = {
    "In Progress": "purple",
    "Completed": "green",
    "Pending": "blue",
    "Cancelled": "orange",
}

# rótulo da coluna -> campo de ordenação
FIELD_MAP = {
    "Order ID": "orderId",
    "User": "user",
    "Project": "project",
    "Address": "address",
    "Date": "date",
    "Status": "status",
}


def color_mapping(theme: str = "light") -> Dict[str, str]:
    return {
        "purple": "#8A8CD9",
        "green": "#4AA785",
        "blue": "#59A8D4",
        "orange": "#FFC555",
        "gray": "#FFFFFF66" if validate_theme(theme) == "dark" else "#1C1C1C66",
    }


def get_status_color(status_color: str, theme: str = "light") -> Optional[str]:
    """Cor hex da tag; None quando a tag não tem mapeamento (não é erro)."""
    return color_mapping(theme).get(status_color)


def get_status_text_color(status_color: str, theme: str = "light") -> Optional[str]:
    return get_status_color(status_color, theme)


def status_color_for(status: str) -> Optional[str]:
    return STATUS_OPTIONS.get(status)
