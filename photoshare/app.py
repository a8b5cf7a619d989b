# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask, Response
from flask_cors import CORS

from photoshare.infrastructure.container import Container
from photoshare.infrastructure.observability import configure_metrics
from photoshare.shared.config import AppConfig, load_config
from photoshare.shared.logging import logger, setup_logging
from photoshare.shared.middleware import configure_error_handling, configure_request_logging

CONTAINER_EXTENSION = "photoshare.container"


def create_app(
    config: AppConfig | None = None,
    *,
    container: Container | None = None,
) -> Flask:
    if container is None:
        container = Container(config or load_config())
    config = container.config

    setup_logging(
        "DEBUG" if config.debug_logging else config.log_level,
        log_file=config.log_file,
    )
    container.database.create_all()

    app = Flask(__name__)
    app.config["SECRET_KEY"] = config.secret_key
    app.extensions[CONTAINER_EXTENSION] = container

    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)
    configure_metrics(app, config.observability)

    cors_kwargs: dict[str, object] = {
        "resources": {r"/api/*": {"origins": config.security.allowed_origins}}
    }
    CORS(app, **cors_kwargs)

    app.register_blueprint(container.users_controller.as_blueprint())
    app.register_blueprint(container.photos_controller.as_blueprint())
    app.register_blueprint(container.health_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp: Response) -> Response:
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        return resp

    logger.info(f"app: ready env={config.app_env}")
    return app


def main() -> None:
    config = load_config()
    app = create_app(config)
    app.run(host="0.0.0.0", port=5000, debug=False)


if __name__ == "__main__":
    main()
