"""Blueprint exports."""

from . import categories, transactions, user

__all__ = [
    "categories",
    "transactions",
    "user",
]
