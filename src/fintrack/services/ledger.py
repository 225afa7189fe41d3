"""Transaction workflows shared by the HTTP routes and the CLI."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..domain.repositories.transaction import TransactionRepository
from ..errors import NotFoundError
from ..models.transaction import Transaction, TransactionType
from .summary import SummaryResult, compute_summary
from .trends import ChartPoint, DateRange, Window, bucket_transactions, date_range_for


def record_transaction(
    repo: TransactionRepository,
    *,
    description: str,
    amount: Decimal,
    type: TransactionType,
    category: str,
    occurred_on: datetime,
) -> Transaction:
    """Persist an already-validated transaction."""

    return repo.create(
        Transaction(
            description=description,
            amount=amount,
            type=type,
            category=category,
            date=occurred_on,
        )
    )


def get_transaction(repo: TransactionRepository, transaction_id: int) -> Transaction:
    transaction = repo.get_by_id(transaction_id)
    if transaction is None:
        raise NotFoundError("Transaction not found")
    return transaction


def remove_transaction(repo: TransactionRepository, transaction_id: int) -> None:
    """Hard-delete a transaction; a missing id is an error, not a no-op."""

    if not repo.delete_by_id(transaction_id):
        raise NotFoundError("Transaction not found")


def summarize(repo: TransactionRepository) -> SummaryResult:
    return compute_summary(repo.list_all())


def trend_series(
    repo: TransactionRepository,
    window: Window,
    *,
    now: Optional[date] = None,
) -> tuple[DateRange, list[ChartPoint]]:
    """Fetch the window's transactions from the store and bucket them."""

    date_range = date_range_for(window, now)
    rows = repo.list_by_date_range(date_range.start_date, date_range.end_date)
    return date_range, bucket_transactions(rows, window)
