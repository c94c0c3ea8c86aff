# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import os

from flask import Flask

from xsslab.infrastructure.container import Container
from xsslab.infrastructure.observability import configure_metrics
from xsslab.interfaces.http.routes import register_routes
from xsslab.shared.config import AppConfig, load_config
from xsslab.shared.logging import logger, setup_logging
from xsslab.shared.middleware.cors import configure_cors
from xsslab.shared.middleware.error_handler import configure_error_handling
from xsslab.shared.middleware.request_logger import configure_request_logging
from xsslab.shared.middleware.session import configure_session


def create_app(config: AppConfig | None = None) -> Flask:
    config = config or load_config()
    setup_logging(config.log_level)

    container = Container(config)
    container.database.init_schema()

    app = Flask(__name__)
    app.json.sort_keys = False
    app.extensions["xsslab.container"] = container

    configure_error_handling(app, debug_mode=config.debug_logging)
    # Hooks run in registration order: logging, then CORS preflight, then session.
    configure_request_logging(app, debug_mode=config.debug_logging)
    configure_cors(app, config.allowed_origins)
    configure_session(app, container.token_codec)
    configure_metrics(app, enabled=config.metrics_enabled)

    register_routes(app, container)

    @app.after_request
    def _add_security_headers(resp):
        # No CSP or framing limits: script execution in the client is the point.
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        return resp

    logger.info(
        f"Flask app initialized env={config.app_env} "
        f"delete_all={'on' if config.lab_delete_all_enabled else 'off'}"
    )
    return app


if __name__ == "__main__":
    create_app().run(
        host=os.environ.get("HOST", "0.0.0.0"),
        port=int(os.environ.get("PORT", "5000")),
        debug=True,
    )
