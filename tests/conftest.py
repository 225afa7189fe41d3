"""Pytest configuration and shared fixtures for FinTrack tests.

Provides an isolated SQLite database per test, a session factory matching the
repository contract, a transaction factory, and a Flask app/client pair.
"""

from __future__ import annotations

import tempfile
from contextlib import contextmanager
from datetime import datetime
from decimal import Decimal
from pathlib import Path

import pytest
from sqlmodel import Session, SQLModel, create_engine

from fintrack import TestingConfig, create_app
from fintrack.infra.repositories import SQLModelTransactionRepository, SQLModelUserRepository
from fintrack.models import Transaction, TransactionType

# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine connected to test database
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory returning transactional context managers, like the app's."""

    @contextmanager
    def factory():
        session = Session(db_engine, expire_on_commit=False)
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    return factory


@pytest.fixture
def transaction_repo(session_factory) -> SQLModelTransactionRepository:
    return SQLModelTransactionRepository(session_factory)


@pytest.fixture
def user_repo(session_factory) -> SQLModelUserRepository:
    return SQLModelUserRepository(session_factory)


# =============================================================================
# Test Data Factories
# =============================================================================


def make_transaction(
    amount: str | Decimal,
    type: TransactionType | str = TransactionType.EXPENSE,
    occurred_on: datetime | None = None,
    description: str = "Test transaction",
    category: str = "other",
) -> Transaction:
    """Build an unsaved transaction with sensible defaults."""

    return Transaction(
        description=description,
        amount=Decimal(amount),
        type=TransactionType(type),
        category=category,
        date=occurred_on or datetime(2025, 1, 1),
    )



@pytest.fixture
def transaction_factory(transaction_repo):
    """Factory that persists transactions through the repository."""

    def _create(amount: str | Decimal, type: TransactionType | str = TransactionType.EXPENSE, **kwargs):
        return transaction_repo.create(make_transaction(amount, type, **kwargs))

    return _create


# =============================================================================
# Flask Fixtures
# =============================================================================


@pytest.fixture()
def app(tmp_path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("FINTRACK_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("FINTRACK_DATABASE_URL", f"sqlite:///{tmp_path / 'fintrack.db'}")
    monkeypatch.setenv("FINTRACK_DEFAULT_USERNAME", "demo_user")
    monkeypatch.delenv("FINTRACK_AUTO_PROVISION_PROFILE", raising=False)
    return create_app(TestingConfig())


@pytest.fixture()
def client(app):
    with app.test_client() as test_client:
        yield test_client
