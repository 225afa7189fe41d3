"""Database and repository wiring for the Flask app."""

from __future__ import annotations

from flask import Flask, current_app

from .config import BaseConfig
from .infra.database import SessionFactory, bootstrap_database
from .infra.repositories import SQLModelTransactionRepository, SQLModelUserRepository

EXTENSION_KEY = "fintrack"


def init_db(app: Flask) -> None:
    """Create the engine, ensure the schema exists and store a session factory on the app."""

    config: BaseConfig = app.config["FINTRACK_CONFIG"]
    engine, session_factory = bootstrap_database(config)
    app.extensions[EXTENSION_KEY] = {
        "engine": engine,
        "session_factory": session_factory,
    }
    # TODO(@migrations): replace create_all with Alembic once the schema changes after release.


def get_session_factory() -> SessionFactory:
    """Return the session factory bound to the current app."""

    state = current_app.extensions.get(EXTENSION_KEY)
    if state is None:  # pragma: no cover - create_app always initializes
        raise RuntimeError("Database engine not initialized")
    return state["session_factory"]


def transaction_repository() -> SQLModelTransactionRepository:
    return SQLModelTransactionRepository(get_session_factory())


def user_repository() -> SQLModelUserRepository:
    return SQLModelUserRepository(get_session_factory())
