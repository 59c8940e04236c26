# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask, Response
from flask_cors import CORS

from uploadit.infrastructure.container import Container, container
from uploadit.infrastructure.db import init_db
from uploadit.shared.config import load_config
from uploadit.shared.logging import logger, setup_logging
from uploadit.shared.middleware.error_handler import configure_error_handling
from uploadit.shared.middleware.request_logger import configure_request_logging


def create_app(app_container: Container | None = None) -> Flask:
    # Raises on a missing or empty JWT_SECRET before anything is served.
    config = load_config()
    app_container = app_container or container

    setup_logging(debug_mode=config.debug_logging)
    init_db()

    app = Flask(__name__)
    configure_error_handling(app)
    configure_request_logging(app)

    cors_kwargs: dict[str, object] = {
        "resources": {r"/api/*": {"origins": config.security.allowed_origins}},
        "expose_headers": ["WWW-Authenticate"],
    }
    CORS(app, **cors_kwargs)

    app.register_blueprint(app_container.misc_controller.as_blueprint())
    app.register_blueprint(app_container.account_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp: Response) -> Response:
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cache-Control", "no-store")

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )

        return resp

    logger.info("Flask app initialized")
    return app


app = create_app()


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=5000, debug=True)
