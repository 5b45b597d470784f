"""
Shared utility functions for cycle-related services.

Date arithmetic is done on calendar dates only. Anything carrying a time
of day is truncated to its date before it reaches the calculations.
"""
import math
from datetime import date, datetime, timedelta
from typing import Any, Iterable, List, TypeVar

from cycle_insights.services.exceptions import InvalidArgumentError

T = TypeVar("T")

def parse_date(value: Any) -> date:
    """
    Convert a date-like value into a calendar date.

    Args:
        value: A ``date``, a ``datetime`` or an ISO-8601 string. Strings may
            be plain dates (``2024-01-31``) or timestamps
            (``2024-01-31T08:00:00Z``).

    Returns:
        The calendar date

    Raises:
        InvalidArgumentError: If the value is of another type or cannot be parsed

    Example:
        >>> parse_date("2024-01-31T08:00:00Z")
        datetime.date(2024, 1, 31)
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidArgumentError(f"Expected a date, got {type(value).__name__}")

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        raise InvalidArgumentError(f"Invalid date: {value!r}")

def days_between(start: date, end: date) -> int:
    """Whole calendar days from start to end (negative if end is earlier)."""
    return (end - start).days

def add_days(start: date, days: int) -> date:
    return start + timedelta(days=days)

def js_round(value: float) -> int:
    """
    Round half up, so 28.5 becomes 29.

    Python's built-in ``round`` rounds halves to even, which would shift
    averages like 28.5 down by a day.
    """
    return int(math.floor(value + 0.5))

def sort_most_recent_first(records: Iterable[T]) -> List[T]:
    """
    Sort cycle records by start date, newest first.

    Args:
        records: Objects with a ``start_date`` attribute

    Returns:
        New list ordered most-recent-first
    """
    return sorted(records, key=lambda r: r.start_date, reverse=True)
