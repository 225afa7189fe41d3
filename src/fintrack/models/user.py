"""User profile model for the single-tenant finance tracker."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, ClassVar, Optional

from sqlmodel import Field, SQLModel

from .timestamps import as_utc, utcnow

# Fields a caller may change through a partial profile update.
EDITABLE_PROFILE_FIELDS: tuple[str, ...] = (
    "full_name",
    "email",
    "phone",
    "avatar",
    "occupation",
    "monthly_income",
)


class UserProfile(SQLModel, table=True):
    """Identity plus optional contact and financial-context fields."""

    __tablename__: ClassVar[str] = "user"

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(nullable=False, unique=True, index=True, max_length=64)
    password_hash: str = Field(nullable=False, max_length=255)
    full_name: Optional[str] = Field(default=None, max_length=128)
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=32)
    avatar: Optional[str] = Field(default=None, max_length=512)
    occupation: Optional[str] = Field(default=None, max_length=128)
    monthly_income: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=utcnow, nullable=False)

    def to_dict(self) -> dict[str, Any]:
        """Public representation; the credential hash is never included."""

        return {
            "id": self.id,
            "username": self.username,
            "fullName": self.full_name,
            "email": self.email,
            "phone": self.phone,
            "avatar": self.avatar,
            "occupation": self.occupation,
            "monthlyIncome": (
                f"{Decimal(self.monthly_income):.2f}" if self.monthly_income is not None else None
            ),
            "createdAt": as_utc(self.created_at).isoformat() if self.created_at else None,
            "updatedAt": as_utc(self.updated_at).isoformat() if self.updated_at else None,
        }
