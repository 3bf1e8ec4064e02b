"""Utilities for date and datetime handling."""

from datetime import UTC, date, datetime


def now_utc() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(UTC)


def parse_date(value: str | date | None) -> date | None:
    """Parse a YYYY-MM-DD string to a date, or pass through.

    Blank strings are treated as unset. Datetimes are truncated to their date.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    value = value.strip()
    if not value:
        return None
    return date.fromisoformat(value)
