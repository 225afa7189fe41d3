"""Window selection and calendar bucketing for income/expense trend charts."""

from __future__ import annotations

import enum
from calendar import monthrange
from collections import defaultdict
from dataclasses import dataclass
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any, Iterable, Optional, Union

from ..errors import ValidationError
from ..models.timestamps import utc_today
from ..models.transaction import Transaction, TransactionType
from .summary import ZERO, to_money

_MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


class Window(str, enum.Enum):
    """Symbolic chart window ending at "now"."""

    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


DEFAULT_WINDOW = Window.SHORT

_WINDOW_MONTHS = {
    Window.SHORT: 1,
    Window.MEDIUM: 6,
    Window.LONG: 12,
}

_WINDOW_ALIASES = {
    "short": Window.SHORT,
    "medium": Window.MEDIUM,
    "long": Window.LONG,
    "1m": Window.SHORT,
    "6m": Window.MEDIUM,
    "1y": Window.LONG,
}


def resolve_window(token: Union[str, Window, None]) -> Window:
    """Map a window token (``short``/``medium``/``long`` or ``1M``/``6M``/``1Y``) to a Window."""

    if token is None or (isinstance(token, str) and not token.strip()):
        return DEFAULT_WINDOW
    if isinstance(token, Window):
        return token
    window = _WINDOW_ALIASES.get(token.strip().lower())
    if window is None:
        raise ValidationError(
            {"window": [f"Unknown window '{token}'. Use short, medium or long."]}
        )
    return window


@dataclass(frozen=True, slots=True)
class DateRange:
    """Inclusive calendar-day interval."""

    start_date: date
    end_date: date

    def contains(self, value: date) -> bool:
        return self.start_date <= _as_date(value) <= self.end_date

    def to_dict(self) -> dict[str, str]:
        return {"startDate": self.start_date.isoformat(), "endDate": self.end_date.isoformat()}


def _as_date(value: date) -> date:
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    return value


def subtract_months(anchor: date, months: int) -> date:
    """Step back whole calendar months, clamping the day to the target month's length."""

    index = anchor.year * 12 + (anchor.month - 1) - months
    year, month = divmod(index, 12)
    month += 1
    day = min(anchor.day, monthrange(year, month)[1])
    return date(year, month, day)


def date_range_for(window: Union[str, Window], now: Optional[date] = None) -> DateRange:
    """Return the ``[now - window, now]`` interval at whole-day resolution.

    ``now`` defaults to the current UTC day.
    """

    resolved = resolve_window(window)
    anchor = _as_date(now) if now is not None else utc_today()
    return DateRange(
        start_date=subtract_months(anchor, _WINDOW_MONTHS[resolved]),
        end_date=anchor,
    )


def bucket_start(value: date, window: Window) -> date:
    """Truncate a date to its bucket: the day for short windows, the month otherwise."""

    day = _as_date(value)
    if window is Window.SHORT:
        return day
    return day.replace(day=1)


def bucket_label(period: date, window: Window) -> str:
    """Display label for a bucket, e.g. ``Mar 5``, ``Mar 25`` or ``Mar 2025``."""

    month = _MONTH_ABBR[period.month - 1]
    if window is Window.SHORT:
        return f"{month} {period.day}"
    if window is Window.MEDIUM:
        return f"{month} {period.year % 100:02d}"
    return f"{month} {period.year}"


@dataclass(frozen=True, slots=True)
class ChartPoint:
    """One bucket of the trend series; ``period`` keeps full date resolution for ordering."""

    period: date
    label: str
    income: Decimal
    expenses: Decimal

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "period": self.period.isoformat(),
            "income": f"{self.income:.2f}",
            "expenses": f"{self.expenses:.2f}",
        }


def bucket_transactions(
    transactions: Iterable[Transaction], window: Union[str, Window]
) -> list[ChartPoint]:
    """Sum income and expenses per calendar bucket, oldest bucket first.

    Only buckets with at least one transaction are emitted, so the series may
    have gaps. Buckets are ordered by their true date, never by label.
    """

    resolved = resolve_window(window)
    totals: dict[date, list[Decimal]] = defaultdict(lambda: [ZERO, ZERO])

    for tx in transactions:
        bucket = totals[bucket_start(tx.date, resolved)]
        if TransactionType(tx.type) is TransactionType.INCOME:
            bucket[0] += to_money(tx.amount)
        else:
            bucket[1] += to_money(tx.amount)

    return [
        ChartPoint(
            period=period,
            label=bucket_label(period, resolved),
            income=income,
            expenses=expenses,
        )
        for period, (income, expenses) in sorted(totals.items())
    ]


def build_trend_series(
    transactions: Iterable[Transaction],
    window: Union[str, Window],
    *,
    now: Optional[date] = None,
) -> tuple[DateRange, list[ChartPoint]]:
    """Restrict ``transactions`` to the window's range, then bucket them."""

    resolved = resolve_window(window)
    date_range = date_range_for(resolved, now)
    in_range = [tx for tx in transactions if date_range.contains(tx.date)]
    return date_range, bucket_transactions(in_range, resolved)


__all__ = [
    "ChartPoint",
    "DEFAULT_WINDOW",
    "DateRange",
    "Window",
    "bucket_label",
    "bucket_start",
    "bucket_transactions",
    "build_trend_series",
    "date_range_for",
    "resolve_window",
    "subtract_months",
]
