"""FinTrack application factory."""

from __future__ import annotations

from importlib import import_module
from typing import Iterable, Union

from flask import Flask

from .config import BaseConfig, DevConfig, TestingConfig, resolve_config

__all__ = ["BaseConfig", "DevConfig", "TestingConfig", "create_app"]


def _blueprint_paths() -> Iterable[str]:
    """Yield blueprint import paths registered on every app."""

    yield "fintrack.blueprints.transactions"
    yield "fintrack.blueprints.user"
    yield "fintrack.blueprints.categories"


def create_app(config: Union[str, BaseConfig, None] = None) -> Flask:
    """Create and configure the Flask application instance.

    ``config`` may be an environment name (``development``, ``testing``) or a
    ready-made config object.
    """

    app = Flask(__name__, instance_relative_config=True)
    if isinstance(config, BaseConfig):
        config_obj = config
    else:
        config_obj = resolve_config(config)()
    app.config.from_object(config_obj)
    app.config["FINTRACK_CONFIG"] = config_obj
    app.json.sort_keys = False

    # Import lazily so that importing model classes in tests does not pull in Flask wiring.
    from .cli import init_app as init_cli
    from .errors import register_error_handlers
    from .extensions import init_db
    from .logging_config import setup_logging

    setup_logging(config_obj)
    register_error_handlers(app)
    _register_blueprints(app)
    init_db(app)
    init_cli(app)
    return app


def _register_blueprints(app: Flask) -> None:
    """Import and register all blueprints declared in `_blueprint_paths`."""

    for dotted_path in _blueprint_paths():
        module = import_module(dotted_path)
        app.register_blueprint(getattr(module, "bp"))
