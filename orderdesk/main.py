import logging
from typing import Any, Optional

from flask import Flask, jsonify
from flask_cors import CORS

from orderdesk.blueprints.orders import BROWSER_EXTENSION, orders_bp
from orderdesk.config import Config
from orderdesk.services.orders_browser import OrdersBrowser
from orderdesk.utils.debug_routes import register_debug_routes
from orderdesk.utils.pointer_events import PointerEventBus
from orderdesk.utils.seed import load_snapshot

logger = logging.getLogger(__name__)


def create_app(config: Optional[Config] = None, snapshot: Any = None,
               event_bus: Optional[PointerEventBus] = None) -> Flask:
    """
    Cria a aplicação com um único navegador de pedidos em memória.

    Args:
        config: Configuração; por padrão lida do ambiente
        snapshot: Snapshot inicial ({"data": [...]}); por padrão ORDERS_SEED_FILE ou demonstração
        event_bus: Barramento de pointer-down; por padrão um barramento próprio da aplicação
    """
    config = config or Config()
    logging.basicConfig(level=getattr(logging, config.LOG_LEVEL, logging.INFO))

    app = Flask(__name__)
    app.config.update(config.as_flask_config())

    # CORS somente para as origens configuradas em /api/*
    CORS(app, resources={r"/api/*": {"origins": config.CORS_ORIGINS}})

    if snapshot is None:
        snapshot = load_snapshot(config.ORDERS_SEED_FILE)
    app.extensions[BROWSER_EXTENSION] = OrdersBrowser(
        snapshot,
        items_per_page=config.ORDERS_PAGE_SIZE,
        event_bus=event_bus if event_bus is not None else PointerEventBus(),
    )

    @app.get("/api/health")
    def health():
        return jsonify({"status": "healthy", "service": "orderdesk"}), 200

    app.register_blueprint(orders_bp)
    register_debug_routes(app)
    return app


if __name__ == "__main__":
    # execução local
    create_app().run(host="127.0.0.1", port=5001, debug=True)
