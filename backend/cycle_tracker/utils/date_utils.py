"""
Calendar-date helpers. Dates are compared as date-only values, never as instants.
"""

from datetime import datetime, date, timedelta
from typing import Union

DateLike = Union[date, datetime, str]


def to_date(value: DateLike) -> date:
    """
    Normalize a date, datetime or ISO string to a plain date.
    Invalid strings raise ValueError from the parser.
    """
    # Handle both string and datetime inputs
    if isinstance(value, str):
        return date.fromisoformat(value[:10])
    if isinstance(value, datetime):
        return value.date()
    return value


def add_days(value: DateLike, days: int) -> date:
    return to_date(value) + timedelta(days=days)


def days_between(start: DateLike, end: DateLike) -> int:
    """Signed whole days from start to end."""
    return (to_date(end) - to_date(start)).days


def inclusive_day_count(start: DateLike, end: DateLike) -> int:
    # A period starting and ending on the same day lasts 1 day
    return days_between(start, end) + 1


def is_between(value: DateLike, start: DateLike, end: DateLike) -> bool:
    return to_date(start) <= to_date(value) <= to_date(end)


def sunday_on_or_before(value: DateLike) -> date:
    day = to_date(value)
    # isoweekday: Monday=1 ... Sunday=7
    return day - timedelta(days=day.isoweekday() % 7)
