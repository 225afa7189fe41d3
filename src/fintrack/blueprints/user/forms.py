"""Profile update validation."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import InvalidOperation
from typing import Any

from ...errors import ValidationError
from ...services.profile import UNSET, ProfileUpdate
from ..transactions.forms import MAX_AMOUNT, parse_amount

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

# JSON key -> model attribute
_FIELD_MAP = {
    "fullName": "full_name",
    "email": "email",
    "phone": "phone",
    "avatar": "avatar",
    "occupation": "occupation",
    "monthlyIncome": "monthly_income",
}

_TEXT_LIMITS = {
    "full_name": 128,
    "email": 255,
    "phone": 32,
    "avatar": 512,
    "occupation": 128,
}


@dataclass(slots=True)
class ProfileUpdateForm:
    """Partial profile body. Keys absent from the body stay ``UNSET``."""

    provided: dict[str, Any] = field(default_factory=dict)
    cleaned: dict[str, Any] = field(default_factory=dict, init=False)
    errors: dict[str, list[str]] = field(default_factory=dict, init=False)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ProfileUpdateForm:
        # Presence, not truthiness, decides whether a field was sent.
        return cls(provided={attr: data[key] for key, attr in _FIELD_MAP.items() if key in data})

    def validate(self) -> bool:
        self.errors.clear()
        self.cleaned = {}
        for attr, value in self.provided.items():
            if attr == "monthly_income":
                self._clean_income(value)
            else:
                self._clean_text(attr, value)
        return not self.errors

    def to_update(self) -> ProfileUpdate:
        """Validate and return the explicit partial update."""

        if not self.validate():
            raise ValidationError(dict(self.errors))
        values = {attr: self.cleaned.get(attr, UNSET) for attr in _FIELD_MAP.values()}
        return ProfileUpdate(**values)

    def _clean_text(self, attr: str, value: Any) -> None:
        if value is None:
            self.cleaned[attr] = None
            return
        if not isinstance(value, str):
            self._add_error(attr, "Must be a string")
            return
        text = value.strip()
        if attr == "full_name" and not text:
            self._add_error(attr, "Full name is required")
            return
        if attr == "email" and not _EMAIL_PATTERN.match(text):
            self._add_error(attr, "Invalid email format")
            return
        if len(text) > _TEXT_LIMITS[attr]:
            self._add_error(attr, f"Must be {_TEXT_LIMITS[attr]} characters or fewer")
            return
        self.cleaned[attr] = text

    def _clean_income(self, value: Any) -> None:
        if value is None:
            self.cleaned["monthly_income"] = None
            return
        try:
            amount = parse_amount(value)
        except (InvalidOperation, ValueError):
            self._add_error("monthly_income", "Monthly income must be a number")
            return
        if amount <= 0:
            self._add_error("monthly_income", "Monthly income must be positive")
            return
        if amount > MAX_AMOUNT:
            self._add_error("monthly_income", "Monthly income is too large")
            return
        self.cleaned["monthly_income"] = amount

    def _add_error(self, attr: str, message: str) -> None:
        json_key = next(key for key, name in _FIELD_MAP.items() if name == attr)
        self.errors.setdefault(json_key, []).append(message)
