"""Helpers for calendar arithmetic and ISO date parsing."""

import calendar
from datetime import date, datetime


def parse_date(value) -> date:
    """Parse an ISO date or date-time string into a calendar date.

    Args:
        value: ``date``, ``datetime`` or ISO 8601 string.

    Returns:
        date: The calendar date part of the value.

    Raises:
        ValueError: If the value cannot be parsed.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Invalid date value: {value!r}")
    return date.fromisoformat(value.strip()[:10])


def parse_datetime(value) -> datetime:
    """Parse an ISO date-time string; bare dates become midnight."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Invalid date-time value: {value!r}")
    cleaned = value.strip()
    if cleaned.endswith("Z"):
        cleaned = cleaned[:-1] + "+00:00"
    return datetime.fromisoformat(cleaned)


def add_months(start: date, months: int) -> date:
    """Shift a date by whole calendar months, clamping to the month end.

    Args:
        start: Date to shift.
        months: Number of months to move (negative moves backwards).

    Returns:
        date: Shifted date; 31 January plus one month is 28/29 February.
    """
    month_index = start.year * 12 + (start.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(start.day, last_day))


def in_month(value: date, year: int, month: int) -> bool:
    """Return True when the date falls in the given calendar month."""
    return value.year == year and value.month == month


def month_key(value: date) -> str:
    """Return the ``YYYY-MM`` key for a date."""
    return f"{value.year:04d}-{value.month:02d}"


__all__ = [
    "parse_date",
    "parse_datetime",
    "add_months",
    "in_month",
    "month_key",
]
