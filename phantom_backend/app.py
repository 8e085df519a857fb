# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import importlib
import sys

from flask import Flask
from typing import Any, Protocol, cast

from phantom_backend.infrastructure.container import Container
from phantom_backend.shared.config import AppConfig, load_config
from phantom_backend.shared.logging import logger, setup_logging
from phantom_backend.shared.middleware.error_handler import configure_error_handling
from phantom_backend.shared.middleware.request_logger import configure_request_logging

class _CORSCallable(Protocol):
    def __call__(self, app: Flask, **kwargs: Any) -> Any: ...


_flask_cors = importlib.import_module("flask_cors")
CORS = cast(_CORSCallable, _flask_cors.CORS)


def create_app(
    container: Container | None = None, config: AppConfig | None = None
) -> Flask:
    config = config or load_config()
    container = container or Container()
    setup_logging(level=config.log_level, log_file=config.log_file)

    app = Flask(__name__)
    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)

    CORS(
        app,
        origins=config.cors.allowed_origins,
        methods=config.cors.allowed_methods,
        allow_headers=config.cors.allowed_headers,
        send_wildcard="*" in config.cors.allowed_origins,
    )
    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.session_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        return resp

    logger.info("Flask app initialized")
    return app


def main() -> None:
    config = load_config()
    app = create_app(config=config)
    logger.info(f"Server running on :{config.port}")
    try:
        app.run(host=config.host, port=config.port, threaded=True)
    except (OSError, SystemExit) as exc:
        # werkzeug exits on its own when the port is taken.
        if isinstance(exc, SystemExit) and exc.code in (0, None):
            raise
        logger.critical(f"Failed to start listener on {config.host}:{config.port}: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
