"""
Calendar date helpers for rental periods.

Rental days are counted on calendar dates: the Y/M/D fields of whatever the
caller passes in, regardless of time of day or timezone.
"""
from datetime import date, datetime, time
from typing import Tuple, Union


DateLike = Union[date, datetime]


def calendar_date(value: DateLike) -> date:
    """Reduce a date or datetime to its calendar date (local fields, tz dropped)."""
    if isinstance(value, datetime):
        return value.date()
    return value


def as_instant(value: DateLike) -> datetime:
    """Treat a bare date as midnight of that day; datetimes pass through."""
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def comparable_instants(first: DateLike, second: DateLike) -> Tuple[datetime, datetime]:
    """
    Instants for an ordering check.

    If only one side carries a timezone both are compared on their wall-clock
    fields, since naive and aware datetimes cannot be ordered directly.
    """
    a, b = as_instant(first), as_instant(second)
    if (a.tzinfo is None) != (b.tzinfo is None):
        a, b = a.replace(tzinfo=None), b.replace(tzinfo=None)
    return a, b


def parse_date(date_str: str) -> date:
    """
    Parse a YYYY-MM-DD string into a calendar date.

    Out-of-range components are rejected rather than rolled over, so
    "2025-13-40" raises ValueError instead of becoming a date in 2026.
    """
    parts = date_str.strip().split("-")
    if len(parts) != 3 or not all(p.isdigit() for p in parts):
        raise ValueError(f"Invalid date '{date_str}': expected YYYY-MM-DD")

    year, month, day = (int(p) for p in parts)
    try:
        return date(year, month, day)
    except ValueError as e:
        raise ValueError(f"Invalid date '{date_str}': {e}") from e
