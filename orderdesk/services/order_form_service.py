"""
Validação do formulário de novo pedido e montagem do Order.
"""

from typing import Any, Callable, Dict, Optional
import uuid

from orderdesk.exceptions import OrderValidationError
from orderdesk.models.order import Order
from orderdesk.utils.status_colors import DEFAULT_STATUS, STATUS_OPTIONS, status_color_for

REQUIRED_FIELDS = {
    "orderId": "Order ID is required",
    "user": "User name is required",
    "project": "Project name is required",
    "address": "Address is required",
}

NEW_ORDER_DATE = "Just now"


def _new_order_id() -> str:
    return uuid.uuid4().hex


def _text(form: Dict[str, Any], name: str) -> str:
    value = form.get(name)
    return value.strip() if isinstance(value, str) else ""


def validate_order_form(form: Dict[str, Any]) -> Dict[str, str]:
    """
    Valida os campos obrigatórios.

    Returns:
        Dict[str, str]: campo -> mensagem de erro (vazio quando válido)
    """
    return {name: message for name, message in REQUIRED_FIELDS.items() if not _text(form, name)}


def build_order(form: Dict[str, Any], id_factory: Optional[Callable[[], Any]] = None) -> Order:
    """
    Monta um novo pedido a partir do formulário.

    Args:
        form: Campos do formulário (orderId, user, project, address, status, statusColor)
        id_factory: Gerador de id; por padrão um uuid4 em hexadecimal

    Returns:
        Order: Pedido com data 'Just now' e cor resolvida pela paleta de status
    """
    errors = validate_order_form(form)
    if errors:
        raise OrderValidationError(errors)

    status = _text(form, "status") or DEFAULT_STATUS
    status_color = status_color_for(status) or _text(form, "statusColor") or STATUS_OPTIONS[DEFAULT_STATUS]
    factory = id_factory or _new_order_id
    return Order(
        id=factory(),
        order_id=_text(form, "orderId"),
        user=_text(form, "user"),
        project=_text(form, "project"),
        address=_text(form, "address"),
        date=NEW_ORDER_DATE,
        status=status,
        status_color=status_color,
    )
