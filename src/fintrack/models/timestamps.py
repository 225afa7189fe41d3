"""UTC helpers shared by the table models."""

from __future__ import annotations

from datetime import date, datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def utc_today() -> date:
    """Current calendar day in UTC, the time base every stored date uses."""

    return utcnow().date()


def as_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime.

    Stored values are always UTC, so a naive value coming back from a driver
    that drops the offset is tagged rather than converted.
    """

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
