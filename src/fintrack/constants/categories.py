"""
Suggested category vocabulary shown by input forms.
Transactions may use any non-empty category token; this list is only a default.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CategoryOption:
    value: str
    label: str
    type: str  # income | expense | both

    def to_dict(self) -> dict[str, str]:
        return {"value": self.value, "label": self.label, "type": self.type}


SUGGESTED_CATEGORIES: tuple[CategoryOption, ...] = (
    CategoryOption("food", "Food & Dining", "expense"),
    CategoryOption("transportation", "Transportation", "expense"),
    CategoryOption("entertainment", "Entertainment", "expense"),
    CategoryOption("shopping", "Shopping", "expense"),
    CategoryOption("utilities", "Utilities", "expense"),
    CategoryOption("healthcare", "Healthcare", "expense"),
    CategoryOption("education", "Education", "expense"),
    CategoryOption("travel", "Travel", "expense"),
    CategoryOption("salary", "Salary", "income"),
    CategoryOption("freelance", "Freelance", "income"),
    CategoryOption("investment", "Investment", "income"),
    CategoryOption("other", "Other", "both"),
)
