"""
Menstruation cycle calculations and predictions.
"""

import math
from datetime import date
from typing import Optional, Iterable

from cycle_tracker.models.forecast import FertilityWindow
from cycle_tracker.services.cycle_constants import (
    DEFAULT_OVULATION_LENGTH,
    FERTILE_DAYS_BEFORE_OVULATION,
    FERTILE_DAYS_AFTER_OVULATION,
    PEAK_FERTILITY_DAYS_BEFORE_OVULATION,
    LOW_LIKELIHOOD_MAX_DISTANCE,
    LIKELIHOOD_HIGH,
    LIKELIHOOD_MEDIUM,
    LIKELIHOOD_LOW,
    LIKELIHOOD_VERY_LOW
)
from cycle_tracker.utils.date_utils import DateLike, to_date, add_days, days_between


def round_half_up(value: float) -> int:
    # 28.5 -> 29, 27.5 -> 28 (no banker's rounding)
    return int(math.floor(value + 0.5))


def mean_days(values: Iterable[int]) -> Optional[int]:
    values = list(values)
    if not values:
        return None
    return round_half_up(sum(values) / len(values))


def predict_next_period_date(last_period_start_date: DateLike,
                             average_cycle_length: int) -> Optional[date]:

    if not last_period_start_date or average_cycle_length is None:
        return None

    return add_days(last_period_start_date, average_cycle_length)


def predict_ovulation_date(next_period_date: DateLike,
                           ovulation_length: int = DEFAULT_OVULATION_LENGTH) -> Optional[date]:

    if not next_period_date:
        return None

    # Ovulation = ovulation_length days before the upcoming period
    return add_days(next_period_date, -ovulation_length)


def predict_period_end_date(period_start_date: DateLike,
                            average_period_length: int) -> Optional[date]:
    """
    Predict when a period will end based on average period length.

    Args:
        period_start_date: The start date of the period
        average_period_length: Average number of days the period typically lasts

    Returns:
        Predicted end date of the period, or None if inputs are invalid
    """
    if not period_start_date or average_period_length is None:
        return None

    # Period end = start date + (average_period_length - 1) days
    # (e.g., if period starts on day 1 and lasts 5 days, it ends on day 5)
    return add_days(period_start_date, average_period_length - 1)


def predict_notification_date(next_period_date: DateLike,
                              notification_days: int) -> Optional[date]:

    if not next_period_date or notification_days is None:
        return None

    return add_days(next_period_date, -notification_days)


def get_fertility_window(ovulation_date: DateLike,
                         days_before: int = FERTILE_DAYS_BEFORE_OVULATION,
                         days_after: int = FERTILE_DAYS_AFTER_OVULATION,
                         peak_days_before: int = PEAK_FERTILITY_DAYS_BEFORE_OVULATION) -> Optional[FertilityWindow]:

    if not ovulation_date:
        return None

    ovulation_date = to_date(ovulation_date)

    # Fertility window: 5 days before ovulation through 1 day after
    return FertilityWindow(
        ovulation_date=ovulation_date,
        fertile_start=add_days(ovulation_date, -days_before),
        fertile_end=add_days(ovulation_date, days_after),
        peak_fertility=add_days(ovulation_date, -peak_days_before),
        conception_likelihood=LIKELIHOOD_HIGH
    )


def get_conception_likelihood(target_date: DateLike,
                              fertility_window: FertilityWindow,
                              low_max_distance: int = LOW_LIKELIHOOD_MAX_DISTANCE) -> str:
    """
    Classify a date against a fertility window. First match wins, since the
    ranges overlap: ovulation/peak day, then the fertile window, then
    proximity to ovulation.
    """
    target_date = to_date(target_date)

    if target_date in (fertility_window.ovulation_date, fertility_window.peak_fertility):
        return LIKELIHOOD_HIGH
    if fertility_window.contains(target_date):
        return LIKELIHOOD_MEDIUM
    if abs(days_between(fertility_window.ovulation_date, target_date)) <= low_max_distance:
        return LIKELIHOOD_LOW
    return LIKELIHOOD_VERY_LOW


def days_until(target_date: Optional[DateLike], today: DateLike) -> Optional[int]:

    if not target_date:
        return None

    return days_between(today, target_date)
