"""SQLModel table exports."""

from .transaction import Transaction, TransactionType
from .user import EDITABLE_PROFILE_FIELDS, UserProfile

__all__ = [
    "EDITABLE_PROFILE_FIELDS",
    "Transaction",
    "TransactionType",
    "UserProfile",
]
