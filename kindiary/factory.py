"""Build the kindiary Flask application."""

from __future__ import annotations

from flask import Flask

from kindiary.core import cors, errors, extensions
from kindiary.core.config import BaseConfig, get_config
from kindiary.core.logger import configure_logging, init_app as init_logging


def _load_config(
    app: Flask,
    config: str | type[BaseConfig] | object | None,
    overrides_file: str | None,
) -> None:
    app.config.from_object(get_config() if config is None else config)
    if app.config.get("JWT_SECRET_KEY") is None:
        raise RuntimeError("JWT_SECRET_KEY must be configured.")
    if overrides_file:
        # instance/config.py is optional and never committed
        app.config.from_pyfile(overrides_file, silent=True)


def create_app(
    config: str | type[BaseConfig] | object | None = None,
    *,
    instance_relative_config: bool = True,
    instance_config_filename: str = "config.py",
) -> Flask:
    """Create the app with the database, token cache, CORS and ``/api/v1`` routes.

    ``config`` may be a config class, an import string or ``None`` (pick by
    ``APP_ENV``). Logging is configured before the extensions start so a
    failing Redis ``PING`` is reported as a JSON log line.
    """
    app = Flask(__name__, instance_relative_config=instance_relative_config)
    _load_config(app, config, instance_config_filename if instance_relative_config else None)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))
    extensions.init_app(app)
    init_logging(app)
    cors.init_app(app)

    from kindiary.api import init_app as init_api

    init_api(app)
    errors.init_app(app)
    return app
