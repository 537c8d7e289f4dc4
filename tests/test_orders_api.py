"""
Testes da API HTTP do navegador de pedidos.
"""
import threading
from unittest.mock import patch

from orderdesk.config import Config
from orderdesk.main import create_app
from orderdesk.utils.pointer_events import PointerEventBus
from tests.helpers import make_order

NEW_ORDER = {
    "orderId": "#CM900",
    "user": "Drew Cano",
    "project": "Landing Page",
    "address": "Bagwell Avenue Ocala",
    "status": "Completed",
}


def test_health(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.get_json()["status"] == "healthy"


def test_list_defaults(client):
    r = client.get("/api/orders/")
    assert r.status_code == 200
    data = r.get_json()
    assert data["totalFiltered"] == 25
    assert data["pagination"]["totalPages"] == 3
    assert len(data["orders"]) == 10
    assert data["orders"][0]["orderId"] == "#CM001"


def test_list_last_page(client):
    data = client.get("/api/orders/?page=3").get_json()
    assert [o["orderId"] for o in data["orders"]] == [f"#CM{i:03d}" for i in range(21, 26)]
    assert data["pagination"]["startIndex"] == 20
    assert data["pagination"]["endIndex"] == 30


def test_page_beyond_total_is_empty(client):
    data = client.get("/api/orders/?page=9").get_json()
    assert data["orders"] == []
    assert data["currentPage"] == 9


def test_search_resets_page(client):
    client.get("/api/orders/?page=2")
    data = client.get("/api/orders/", query_string={"search": "user 1"}).get_json()
    assert data["currentPage"] == 1
    assert data["totalFiltered"] == 11  # User 1 e User 10..19


def test_page_applies_after_filter_reset(client):
    data = client.get("/api/orders/?search=user&page=2").get_json()
    assert data["currentPage"] == 2


def test_search_is_sanitized(client):
    data = client.get("/api/orders/", query_string={"search": "<b>#CM002</b>"}).get_json()
    assert data["searchTerm"] == "#CM002"
    assert [o["id"] for o in data["orders"]] == ["2"]


def test_sort_params(client):
    data = client.get("/api/orders/?sort_field=orderId&sort_dir=desc").get_json()
    assert data["orders"][0]["orderId"] == "#CM025"


def test_invalid_params_are_400(client):
    assert client.get("/api/orders/?page=abc").status_code == 400
    assert client.get("/api/orders/?page=0").status_code == 400
    assert client.get("/api/orders/?sort_field=price").status_code == 400
    assert client.get("/api/orders/?sort_dir=sideways").status_code == 400


def test_sort_field_accepts_attribute_alias(client):
    data = client.get("/api/orders/?sort_field=order_id&sort_dir=desc").get_json()
    assert data["sortField"] == "orderId"
    assert data["orders"][0]["orderId"] == "#CM025"


def test_invalid_params_leave_state_unchanged(client):
    client.get("/api/orders/?page=2")
    r = client.get("/api/orders/", query_string={"search": "User 1", "status": "pending", "sort_field": "price"})
    assert r.status_code == 400
    r = client.get("/api/orders/", query_string={"search": "User 1", "page": "abc"})
    assert r.status_code == 400
    data = client.get("/api/orders/").get_json()
    assert data["searchTerm"] == ""
    assert data["statusFilter"] == "all"
    assert data["sortField"] == ""
    assert data["currentPage"] == 2


def test_sort_endpoint_toggles(client):
    r = client.post("/api/orders/sort/orderId")
    assert r.get_json() == {"sortField": "orderId", "sortDirection": "asc"}
    r = client.post("/api/orders/sort/orderId")
    assert r.get_json() == {"sortField": "orderId", "sortDirection": "desc"}
    assert client.post("/api/orders/sort/price").status_code == 400


def test_statuses(client):
    assert client.get("/api/orders/statuses").get_json() == {"items": ["pending"]}


def test_create_order_prepends(client):
    r = client.post("/api/orders/", json=NEW_ORDER)
    assert r.status_code == 201
    created = r.get_json()
    assert created["date"] == "Just now"
    assert created["statusColor"] == "green"
    data = client.get("/api/orders/").get_json()
    assert data["orders"][0]["orderId"] == "#CM900"
    assert "Completed" in client.get("/api/orders/statuses").get_json()["items"]


def test_back_to_back_creates_all_succeed(client):
    statuses = [
        client.post("/api/orders/", json=dict(NEW_ORDER, orderId=f"#CM{900 + i}")).status_code
        for i in range(30)
    ]
    assert statuses == [201] * 30
    assert client.get("/api/orders/").get_json()["totalFiltered"] == 55


def test_concurrent_creates_are_all_stored(app):
    statuses = []

    def worker(i):
        with app.test_client() as c:
            r = c.post("/api/orders/", json=dict(NEW_ORDER, orderId=f"#CM{500 + i}"))
            statuses.append(r.status_code)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert statuses == [201] * 8
    browser = app.extensions["orders_browser"]
    ids = [o.id for o in browser.orders]
    assert len(ids) == 33
    assert len(set(ids)) == 33


def test_create_order_validation(client):
    r = client.post("/api/orders/", json={"orderId": "#CM1"})
    assert r.status_code == 400
    assert set(r.get_json()["fields"]) == {"user", "project", "address"}


def test_create_order_duplicate_id(many_snapshot, bus):
    app = create_app(config=Config(), snapshot=many_snapshot, event_bus=bus)
    browser = app.extensions["orders_browser"]
    browser.add_order(make_order(100, id=777))
    with app.test_client() as c:
        with patch("orderdesk.services.order_form_service._new_order_id", return_value=777):
            r = c.post("/api/orders/", json=NEW_ORDER)
    assert r.status_code == 409


def test_selection_flow(client):
    r = client.post("/api/orders/selection/3/toggle")
    assert r.status_code == 200
    assert r.get_json()["selected"] is True
    assert client.get("/api/orders/selection").get_json() == {"items": ["3"]}

    client.get("/api/orders/?search=%23CM01")
    r = client.post("/api/orders/selection/all")
    assert r.get_json()["items"] == [str(i) for i in range(10, 20)]
    r = client.post("/api/orders/selection/all")
    assert r.get_json()["items"] == []

    client.post("/api/orders/selection/5/toggle")
    assert client.delete("/api/orders/selection").get_json() == {"items": []}


def test_toggle_unknown_order_is_404(client):
    assert client.post("/api/orders/selection/999/toggle").status_code == 404


def test_filter_dropdown_and_pointer_down(client, bus):
    r = client.post("/api/orders/filter-dropdown", json={"open": True})
    assert r.get_json() == {"showFilterDropdown": True}
    assert bus.listener_count == 1

    r = client.post("/api/orders/pointer-down", json={"path": [["app"], ["filter-dropdown"]]})
    assert r.get_json() == {"showFilterDropdown": True}

    r = client.post("/api/orders/pointer-down", json={"path": [["app"], ["table"]]})
    assert r.get_json() == {"showFilterDropdown": False}
    assert bus.listener_count == 0


def test_filter_dropdown_toggle_without_body(client):
    assert client.post("/api/orders/filter-dropdown").get_json() == {"showFilterDropdown": True}
    assert client.post("/api/orders/filter-dropdown").get_json() == {"showFilterDropdown": False}


def test_pointer_down_bad_payload(client):
    assert client.post("/api/orders/pointer-down", json={"path": "app"}).status_code == 400


def test_debug_routes_disabled_by_default(client):
    assert client.get("/api/_routes").status_code == 404


def test_debug_routes_enabled(many_snapshot):
    config = Config()
    config.DEBUG_ROUTES = True
    app = create_app(config=config, snapshot=many_snapshot, event_bus=PointerEventBus())
    with app.test_client() as c:
        rules = [r["rule"] for r in c.get("/api/_routes").get_json()]
        assert "/api/orders/" in rules
        full = c.get("/api/health/full").get_json()
        assert full["orders"] == 25
        assert "orders" in full["blueprints"]


def test_apps_have_separate_pointer_buses(many_snapshot):
    first = create_app(config=Config(), snapshot=many_snapshot)
    second = create_app(config=Config(), snapshot=many_snapshot)
    with first.test_client() as a, second.test_client() as b:
        a.post("/api/orders/filter-dropdown", json={"open": True})
        b.post("/api/orders/filter-dropdown", json={"open": True})
        r = a.post("/api/orders/pointer-down", json={"path": [["app"], ["table"]]})
        assert r.get_json() == {"showFilterDropdown": False}
        assert b.get("/api/orders/").get_json()["showFilterDropdown"] is True
    first.extensions["orders_browser"].close()
    second.extensions["orders_browser"].close()
