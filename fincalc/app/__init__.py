"""Application factory and app-wide configuration."""

import logging
from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from fincalc.app.api.routes import api_bp
from fincalc.app.config import DefaultConfig


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    """Build the Flask app instance.

    Settings are layered: ``DefaultConfig``, then ``FINCALC_*`` environment
    variables, then ``config`` (used by tests).
    """
    app = Flask(__name__)
    app.config.from_object(DefaultConfig)
    app.config.from_prefixed_env("FINCALC")
    if config:
        app.config.from_mapping(config)

    app.json.sort_keys = app.config["JSON_SORT_KEYS"]

    level = app.config["LOG_LEVEL"]
    app.logger.setLevel(level)
    logging.getLogger("fincalc").setLevel(level)

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
