"""Transaction repository protocol."""

from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from ...models.transaction import Transaction


class TransactionRepository(Protocol):
    """Durable store the summary and trend engines read from."""

    def list_all(self, *, category: Optional[str] = None) -> list[Transaction]:
        """List every transaction, newest first, optionally for one category."""
        ...

    def list_by_date_range(self, start: date, end: date) -> list[Transaction]:
        """Transactions whose date falls on or between ``start`` and ``end``."""
        ...

    def get_by_id(self, transaction_id: int) -> Optional[Transaction]:
        """Retrieve a transaction by ID."""
        ...

    def create(self, transaction: Transaction) -> Transaction:
        """Persist a new transaction and return it with its assigned id."""
        ...

    def delete_by_id(self, transaction_id: int) -> bool:
        """Hard-delete a transaction; False when nothing matched."""
        ...
