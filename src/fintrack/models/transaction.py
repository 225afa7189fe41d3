"""SQLModel definitions for income/expense transactions."""

from __future__ import annotations

import enum
from datetime import datetime
from decimal import Decimal
from typing import Any, ClassVar, Optional

from sqlmodel import Field, SQLModel

from .timestamps import as_utc, utcnow


class TransactionType(str, enum.Enum):
    """Direction of a money movement; the amount itself is always positive."""

    INCOME = "income"
    EXPENSE = "expense"


class Transaction(SQLModel, table=True):
    """A single recorded money movement. Immutable once persisted."""

    __tablename__: ClassVar[str] = "transaction"

    id: Optional[int] = Field(default=None, primary_key=True)
    description: str = Field(nullable=False, max_length=255)
    amount: Decimal = Field(
        nullable=False,
        max_digits=10,
        decimal_places=2,
        description="Always positive; sign is carried by ``type``",
    )
    type: TransactionType = Field(nullable=False, index=True)
    category: str = Field(nullable=False, max_length=64, index=True)
    date: datetime = Field(nullable=False, index=True, description="Economic date of the movement, stored as UTC")
    created_at: datetime = Field(
        default_factory=utcnow,
        nullable=False,
    )

    def to_dict(self) -> dict[str, Any]:
        """Serialize for the JSON API; money stays an exact two-place string."""

        return {
            "id": self.id,
            "description": self.description,
            "amount": f"{Decimal(self.amount):.2f}",
            "type": TransactionType(self.type).value,
            "category": self.category,
            "date": as_utc(self.date).isoformat(),
            "createdAt": as_utc(self.created_at).isoformat() if self.created_at else None,
        }
