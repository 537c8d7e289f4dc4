# orderdesk/utils/debug_routes.py
import os
from flask import jsonify

SAFE_ENV_KEYS = {"ORDERS_PAGE_SIZE", "ORDERS_SEED_FILE", "LOG_LEVEL", "PYTHON_VERSION"}


def register_debug_routes(app):
    """
    Habilita endpoints de diagnóstico quando DEBUG_ROUTES está ligado na configuração.
    """
    if not app.config.get("DEBUG_ROUTES"):
        return

    @app.get("/api/_routes")
    def _routes():
        out = []
        for rule in app.url_map.iter_rules():
            methods = sorted(m for m in rule.methods if m in {
                "GET", "POST", "PUT", "DELETE", "PATCH"
            })
            out.append({"rule": str(rule), "endpoint": rule.endpoint, "methods": methods})
        out.sort(key=lambda r: r["rule"])
        return jsonify(out)

    @app.get("/api/health/full")
    def _health_full():
        browser = app.extensions.get("orders_browser")
        env = {k: os.getenv(k) for k in SAFE_ENV_KEYS if os.getenv(k)}
        return jsonify({
            "status": "ok",
            "blueprints": sorted(app.blueprints.keys()),
            "orders": len(browser.store) if browser else 0,
            "env": env,
        })
