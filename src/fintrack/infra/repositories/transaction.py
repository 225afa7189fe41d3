"""SQLModel implementation of the transaction repository."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone
from typing import Optional

from sqlmodel import select

from ...logging_config import get_logger
from ...models.timestamps import as_utc
from ...models.transaction import Transaction, TransactionType
from ..database import SessionFactory

logger = get_logger(__name__)


def day_bounds(start: date, end: date) -> tuple[datetime, datetime]:
    """Return UTC ``[start 00:00, end+1 00:00)`` so both calendar days are fully included."""

    return (
        datetime.combine(start, time.min, tzinfo=timezone.utc),
        datetime.combine(end + timedelta(days=1), time.min, tzinfo=timezone.utc),
    )


class SQLModelTransactionRepository:
    """SQLModel-based transaction repository implementation."""

    def __init__(self, session_factory: SessionFactory):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def list_all(self, *, category: Optional[str] = None) -> list[Transaction]:
        """List all transactions, newest first."""
        with self.session_factory() as session:
            statement = select(Transaction)
            if category:
                statement = statement.where(Transaction.category == category)
            statement = statement.order_by(
                Transaction.date.desc(), Transaction.id.desc()  # type: ignore[union-attr]
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def list_by_date_range(self, start: date, end: date) -> list[Transaction]:
        """Get transactions dated on or between two calendar days."""
        lower, upper = day_bounds(start, end)
        with self.session_factory() as session:
            statement = (
                select(Transaction)
                .where(Transaction.date >= lower)
                .where(Transaction.date < upper)
                .order_by(Transaction.date.desc(), Transaction.id.desc())  # type: ignore[union-attr]
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def get_by_id(self, transaction_id: int) -> Optional[Transaction]:
        """Retrieve a transaction by ID."""
        with self.session_factory() as session:
            obj = session.get(Transaction, transaction_id)
            if obj:
                session.expunge(obj)
            return obj

    def create(self, transaction: Transaction) -> Transaction:
        """Create a new transaction."""
        transaction.date = as_utc(transaction.date)
        with self.session_factory() as session:
            session.add(transaction)
            session.commit()
            session.refresh(transaction)
            session.expunge(transaction)
        logger.info(
            "Transaction created",
            extra={"transaction_id": transaction.id, "type": TransactionType(transaction.type).value},
        )
        return transaction

    def delete_by_id(self, transaction_id: int) -> bool:
        """Delete a transaction by ID."""
        with self.session_factory() as session:
            transaction = session.get(Transaction, transaction_id)
            if transaction is None:
                return False
            session.delete(transaction)
            session.commit()
        logger.info("Transaction deleted", extra={"transaction_id": transaction_id})
        return True


__all__ = ["SQLModelTransactionRepository", "day_bounds"]
