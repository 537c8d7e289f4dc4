# orderdesk/blueprints/orders.py
from flask import Blueprint, current_app, jsonify, request
import logging

from ..exceptions import DuplicateOrderError, OrderValidationError
from ..services.order_form_service import build_order
from ..services.orders_browser import OrdersBrowser
from ..utils.pointer_events import Element, PointerEvent
from ..utils.validation import validate_search_query

logger = logging.getLogger(__name__)

orders_bp = Blueprint("orders", __name__, url_prefix="/api/orders")

BROWSER_EXTENSION = "orders_browser"


def get_browser() -> OrdersBrowser:
    return current_app.extensions[BROWSER_EXTENSION]


def _find_order_id(browser: OrdersBrowser, raw_id: str):
    """Ids chegam como texto na URL; procura o id original no store."""
    for order in browser.store:
        if str(order.id) == raw_id:
            return order.id
    return None


@orders_bp.get("/")
def list_orders():
    browser = get_browser()
    args = request.args
    try:
        page = int(args["page"]) if "page" in args else None
        search = validate_search_query(args.get("search")) if "search" in args else None
        sort_dir = (args.get("sort_dir") or "").lower() if "sort_dir" in args else None
    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    with browser.lock:
        try:
            # tudo é validado antes de alterar o estado; erro não deixa mudança parcial
            browser.apply_view_params(
                search_term=search,
                status_filter=args.get("status"),
                sort_field=args.get("sort_field"),
                sort_direction=sort_dir,
                page=page,
            )
        except ValueError as e:
            return jsonify({"error": str(e)}), 400
        return jsonify(browser.snapshot())


@orders_bp.get("/statuses")
def list_statuses():
    return jsonify({"items": get_browser().unique_statuses})


@orders_bp.post("/")
def create_order():
    data = request.get_json(silent=True) or {}
    browser = get_browser()
    try:
        order = build_order(data)
        browser.add_order(order)
    except OrderValidationError as e:
        return jsonify({"error": "Pedido inválido", "fields": e.errors}), 400
    except DuplicateOrderError as e:
        return jsonify({"error": str(e)}), 409
    return jsonify(order.to_dict()), 201


@orders_bp.post("/sort/<field>")
def sort_orders(field: str):
    browser = get_browser()
    with browser.lock:
        try:
            browser.handle_sort(field)
        except ValueError as e:
            return jsonify({"error": str(e)}), 400
        return jsonify({"sortField": browser.sort_field, "sortDirection": browser.sort_direction})


@orders_bp.get("/selection")
def get_selection():
    return jsonify({"items": get_browser().selected_orders})


@orders_bp.post("/selection/<order_id>/toggle")
def toggle_selection(order_id: str):
    browser = get_browser()
    with browser.lock:
        resolved = _find_order_id(browser, order_id)
        if resolved is None:
            return jsonify({"error": f"Pedido {order_id} não encontrado"}), 404
        selected = browser.handle_select_order(resolved)
        return jsonify({"id": resolved, "selected": selected, "items": browser.selected_orders})


@orders_bp.post("/selection/all")
def select_all():
    browser = get_browser()
    with browser.lock:
        browser.handle_select_all()
        return jsonify({"items": browser.selected_orders})


@orders_bp.delete("/selection")
def clear_selection():
    browser = get_browser()
    browser.set_selected_orders([])
    return jsonify({"items": []})


@orders_bp.post("/filter-dropdown")
def set_filter_dropdown():
    data = request.get_json(silent=True) or {}
    browser = get_browser()
    with browser.lock:
        if "open" not in data:
            browser.toggle_filter_dropdown()
        elif data["open"]:
            browser.open_filter_dropdown()
        else:
            browser.close_filter_dropdown()
        return jsonify({"showFilterDropdown": browser.show_filter_dropdown})


@orders_bp.post("/pointer-down")
def pointer_down():
    data = request.get_json(silent=True) or {}
    path = data.get("path") or []
    if not isinstance(path, list) or not all(isinstance(level, list) for level in path):
        return jsonify({"error": "Campo 'path' deve ser uma lista de listas de marcadores"}), 400
    browser = get_browser()
    with browser.lock:
        browser.dropdown_watcher.bus.dispatch(PointerEvent(target=Element.from_path(path)))
        return jsonify({"showFilterDropdown": browser.show_filter_dropdown})
