# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from storefront.infrastructure.container import Container
from storefront.shared.config import AppConfig, load_config
from storefront.shared.logging import logger, setup_logging
from storefront.shared.middleware.error_handler import configure_error_handling
from storefront.shared.middleware.request_logger import configure_request_logging


def create_app(config: AppConfig | None = None) -> Flask:
    config = config or load_config()
    setup_logging(
        level="DEBUG" if config.debug_logging else config.log_level,
        log_file=config.log_file,
    )

    container = Container(config)
    container.database.init_schema()

    app = Flask(__name__)
    app.extensions["storefront.container"] = container
    app.json.sort_keys = False  # type: ignore[attr-defined]

    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)

    cors_kwargs: dict[str, object] = {
        "resources": {r"/*": {"origins": config.security.allowed_origins}},
        "allow_headers": ["Authorization", "Content-Type"],
    }
    CORS(app, **cors_kwargs)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.products_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cache-Control", "no-store")

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains",
            )

        return resp

    logger.info(f"Flask app initialized (env={config.app_env})")
    return app


def main() -> None:
    config = load_config()
    app = create_app(config)
    app.run(host=config.host, port=config.port, debug=not config.is_production())


if __name__ == "__main__":
    main()
