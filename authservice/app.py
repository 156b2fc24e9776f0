# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from authservice.container import Container
from authservice.shared.config import AppConfig, load_config
from authservice.shared.logging import logger, setup_logging
from authservice.shared.middleware import configure_error_handling, configure_request_logging


def create_app(config: AppConfig | None = None, *, container: Container | None = None) -> Flask:
    if container is None:
        container = Container(config or load_config())
    config = container.config

    setup_logging(config.log_level, config.log_file)
    container.database.init_db()

    app = Flask(__name__)
    app.extensions["authservice.container"] = container
    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)

    CORS(app, resources={r"/api/*": {"origins": config.security.allowed_origins}})
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.protected_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
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

    logger.info(f"Flask app initialized env={config.app_env}")
    return app
