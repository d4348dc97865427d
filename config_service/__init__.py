from __future__ import annotations

from typing import Any, Optional, Sequence

from flask import Flask
from werkzeug.exceptions import MethodNotAllowed

import config
from config_service.services import (
    ConfigSource,
    DotenvLookup,
    EnvironmentLookup,
)


def default_sources(serve_dev_script: bool = False) -> list[ConfigSource]:
    """Configuration sources in priority order for the current deployment."""
    sources = [ConfigSource("environment", EnvironmentLookup())]
    if serve_dev_script:
        sources.append(ConfigSource(config.DEV_ENV_FILE, DotenvLookup(config.DEV_ENV_FILE)))
    return sources


def create_app(
    sources: Optional[Sequence[ConfigSource]] = None, **overrides: Any
) -> Flask:
    """Application factory to create Flask app instances."""
    app = Flask(__name__)
    app.config.update(
        DEPLOYMENT_NAME=config.DEPLOYMENT_NAME,
        SERVE_DEV_SCRIPT=config.SERVE_DEV_SCRIPT,
    )
    app.config.update(overrides)
    if sources is None:
        sources = default_sources(app.config["SERVE_DEV_SCRIPT"])
    app.config["CONFIG_SOURCES"] = list(sources)

    from .api.routes import api_bp, config_bp, dev_bp, method_not_allowed

    app.register_blueprint(config_bp, url_prefix="/api")
    app.register_blueprint(config_bp, name="root_config")
    app.register_blueprint(api_bp, url_prefix="/api")
    app.register_error_handler(MethodNotAllowed, method_not_allowed)
    if app.config["SERVE_DEV_SCRIPT"]:
        app.register_blueprint(dev_bp)

    return app
