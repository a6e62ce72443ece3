"""Utility functions and helpers for the cycle tracker."""

from .date_utils import (
    to_date,
    add_days,
    days_between,
    inclusive_day_count,
    is_between,
    sunday_on_or_before
)

__all__ = [
    'to_date',
    'add_days',
    'days_between',
    'inclusive_day_count',
    'is_between',
    'sunday_on_or_before'
]
