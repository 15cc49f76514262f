import logging
import random
from typing import Optional

from flask import Flask, send_from_directory, request, jsonify
from flask_cors import CORS

from .catalog import Order, ShopConfig, default_config
from .logger import setup_logger

PORT = 3000

logger = logging.getLogger(__name__)


def _json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def create_app(config: Optional[ShopConfig] = None) -> Flask:
    config = config or default_config()

    app = Flask(__name__, static_folder=None)
    app.config["SHOP"] = config
    CORS(app, send_wildcard=True)  # "*" even when an Origin is sent

    def fallback_page():
        return send_from_directory(config.frontend_dir, "index.html")

    # ---------- API ----------
    @app.get("/api/message")
    def api_message():
        return jsonify({"message": config.message})

    @app.get("/api/products")
    def api_products():
        return jsonify(config.product_payload())

    @app.post("/api/login")
    def api_login():
        data = _json_body()
        username = data.get("username")
        if config.credentials.matches(username, data.get("password")):
            logger.info("Login accepted for %r", username)
            return jsonify({"success": True, "token": config.token})

        logger.info("Login rejected for %r", username)
        return jsonify({"success": False, "message": "Invalid credentials"}), 401

    @app.post("/api/orders")
    def api_orders():
        data = _json_body()
        order = Order(
            order_id=random.randrange(config.order_id_limit),
            user_id=data.get("userId"),
            product_ids=data.get("productIds"),
        )
        logger.info("Order %d placed by user %r for products %r",
                    order.order_id, order.user_id, order.product_ids)
        return jsonify({"success": True, "orderId": order.order_id})

    # ---------- Serve frontend ----------
    @app.get("/")
    def home():
        return fallback_page()

    @app.get("/<path:path>")
    def frontend_files(path):
        return send_from_directory(config.frontend_dir, path)

    # Unknown paths and methods get the page, not an error
    @app.errorhandler(404)
    @app.errorhandler(405)
    def not_routed(error):
        return fallback_page()

    return app


def run(host: str = "127.0.0.1", port: int = PORT) -> None:
    setup_logger()
    app = create_app()
    logger.info("Server running on http://%s:%d", host, port)
    app.run(host=host, port=port)


if __name__ == "__main__":
    run()
