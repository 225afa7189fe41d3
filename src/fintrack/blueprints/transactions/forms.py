"""Transaction input validation helpers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from ...errors import ValidationError
from ...models.transaction import TransactionType
from ...services.summary import to_money

MAX_AMOUNT = Decimal("99999999.99")


def parse_timestamp(raw: str) -> datetime:
    """Parse ``YYYY-MM-DD`` or a full ISO-8601 timestamp into an aware UTC datetime.

    Date-only input means UTC midnight; offsets are converted to UTC.
    """

    value = raw.strip()
    if len(value) == 10:
        return datetime.strptime(value, "%Y-%m-%d").replace(tzinfo=timezone.utc)
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def parse_day(raw: str) -> date:
    """Parse an ISO date string, tolerating a trailing time component."""

    return parse_timestamp(raw).date()


def parse_amount(raw: Any) -> Decimal:
    """Turn JSON numbers or numeric strings into a two-place ``Decimal``."""

    if isinstance(raw, bool) or raw is None:
        raise InvalidOperation("not a number")
    if isinstance(raw, float):
        raw = repr(raw)
    value = Decimal(str(raw).strip())
    if not value.is_finite():
        raise InvalidOperation("not finite")
    return to_money(value)


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


@dataclass(slots=True)
class TransactionForm:
    """Represents transaction input prior to validation."""

    description: str = ""
    amount: Optional[Decimal] = None
    type: Optional[TransactionType] = None
    category: str = ""
    occurred_on: Optional[datetime] = None
    errors: dict[str, list[str]] = field(default_factory=dict, init=False)
    raw_data: dict[str, Any] = field(default_factory=dict, init=False)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> TransactionForm:
        """Create a form populated from a JSON body."""

        form = cls()
        form.raw_data = {key: data.get(key) for key in ("description", "amount", "type", "category", "date")}
        return form

    def validate(self) -> bool:
        """Validate the bound data and populate typed attributes."""

        self.errors.clear()

        self.description = _as_text(self.raw_data.get("description")).strip()
        if not self.description:
            self._add_error("description", "Description is required")
        elif len(self.description) > 255:
            self._add_error("description", "Description must be 255 characters or fewer")

        self.amount = None
        amount_raw = self.raw_data.get("amount")
        if amount_raw is None or (isinstance(amount_raw, str) and not amount_raw.strip()):
            self._add_error("amount", "Amount is required")
        else:
            try:
                parsed = parse_amount(amount_raw)
            except (InvalidOperation, ValueError):
                self._add_error("amount", "Amount must be a number")
            else:
                if parsed <= 0:
                    self._add_error("amount", "Amount must be positive")
                elif parsed > MAX_AMOUNT:
                    self._add_error("amount", "Amount is too large")
                else:
                    self.amount = parsed

        self.type = None
        type_raw = _as_text(self.raw_data.get("type")).strip().lower()
        try:
            self.type = TransactionType(type_raw)
        except ValueError:
            self._add_error("type", "Type must be 'income' or 'expense'")

        self.category = _as_text(self.raw_data.get("category")).strip()
        if not self.category:
            self._add_error("category", "Category is required")
        elif len(self.category) > 64:
            self._add_error("category", "Category must be 64 characters or fewer")

        self.occurred_on = None
        date_raw = _as_text(self.raw_data.get("date")).strip()
        if not date_raw:
            self._add_error("date", "Date is required")
        else:
            try:
                self.occurred_on = parse_timestamp(date_raw)
            except ValueError:
                self._add_error("date", "Enter a valid date (YYYY-MM-DD)")

        return not self.errors

    def validated(self) -> TransactionForm:
        """Validate or raise :class:`ValidationError` carrying the field errors."""

        if not self.validate():
            raise ValidationError(dict(self.errors))
        return self

    def _add_error(self, field: str, message: str) -> None:
        self.errors.setdefault(field, []).append(message)


@dataclass(slots=True)
class DateRangeForm:
    """``startDate``/``endDate`` query parameters for range listings."""

    start_date: Optional[date] = None
    end_date: Optional[date] = None
    errors: dict[str, list[str]] = field(default_factory=dict, init=False)
    raw_data: dict[str, str] = field(default_factory=dict, init=False)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> DateRangeForm:
        form = cls()
        form.raw_data = {
            "startDate": _as_text(data.get("startDate")).strip(),
            "endDate": _as_text(data.get("endDate")).strip(),
        }
        return form

    def validate(self) -> bool:
        self.errors.clear()
        self.start_date = self._parse("startDate")
        self.end_date = self._parse("endDate")
        if self.start_date and self.end_date and self.start_date > self.end_date:
            self.errors.setdefault("endDate", []).append("End date must not precede start date")
        return not self.errors

    def validated(self) -> DateRangeForm:
        if not self.validate():
            raise ValidationError(dict(self.errors), message="Invalid date range")
        return self

    def _parse(self, key: str) -> Optional[date]:
        raw = self.raw_data.get(key, "")
        if not raw:
            self.errors.setdefault(key, []).append(f"{key} is required")
            return None
        try:
            return parse_day(raw)
        except ValueError:
            self.errors.setdefault(key, []).append(f"{key} must be an ISO date (YYYY-MM-DD)")
            return None
