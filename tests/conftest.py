import pytest

from orderdesk.config import Config
from orderdesk.main import create_app
from orderdesk.services.orders_browser import OrdersBrowser
from orderdesk.utils.pointer_events import PointerEventBus
from tests.helpers import FIXED_NOW, make_order


@pytest.fixture
def sample_snapshot():
    return {
        "data": [
            {"id": "1", "orderId": "#CM001", "user": "John Doe", "project": "Project A",
             "address": "123 Main St", "date": "2024-01-01", "status": "completed", "statusColor": "green"},
            {"id": "2", "orderId": "#CM002", "user": "Jane Smith", "project": "Project B",
             "address": "456 Oak Ave", "date": "2024-01-02", "status": "pending", "statusColor": "blue"},
            {"id": "3", "orderId": "#CM003", "user": "Bob Johnson", "project": "Project C",
             "address": "789 Pine Rd", "date": "2024-01-03", "status": "cancelled", "statusColor": "orange"},
            {"id": "4", "orderId": "#CM004", "user": "Alice Brown", "project": "Project D",
             "address": "321 Elm St", "date": "2024-01-04", "status": "completed", "statusColor": "green"},
        ]
    }


@pytest.fixture
def many_snapshot():
    return {"data": [make_order(i) for i in range(1, 26)]}


@pytest.fixture
def bus():
    return PointerEventBus()


@pytest.fixture
def browser(sample_snapshot, bus):
    b = OrdersBrowser(sample_snapshot, event_bus=bus, clock=lambda: FIXED_NOW)
    yield b
    b.close()


@pytest.fixture
def app(many_snapshot, bus):
    config = Config()
    config.TESTING = True
    config.ORDERS_PAGE_SIZE = 10
    config.DEBUG_ROUTES = False
    application = create_app(config=config, snapshot=many_snapshot, event_bus=bus)
    yield application
    application.extensions["orders_browser"].close()


@pytest.fixture
def client(app):
    with app.test_client() as c:
        yield c
