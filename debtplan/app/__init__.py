"""Application factory and app-wide configuration."""

from __future__ import annotations

from typing import Optional

from flask import Flask
from flask_cors import CORS

from debtplan.app.api.routes import api_bp
from debtplan.config import BaseConfig
from debtplan.logging_config import configure_logging


def create_app(config: Optional[BaseConfig] = None) -> Flask:
    """Build the Flask app instance."""
    config = config or BaseConfig()

    app = Flask(__name__)
    app.config.from_object(config)

    configure_logging(
        app.config["LOG_LEVEL"],
        app.config["LOG_FILE"],
        noisy_level=app.config["NOISY_LOG_LEVEL"],
        noisy_loggers=app.config["NOISY_LOGGERS"],
    )

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
