from dataclasses import dataclass
from typing import Optional

from cycle_tracker.services.cycle_constants import (
    DEFAULT_CYCLE_LENGTH,
    DEFAULT_PERIOD_LENGTH,
    DEFAULT_OVULATION_LENGTH,
    DEFAULT_NOTIFICATION_DAYS,
    DEFAULT_QUIET_NOTIFICATIONS
)


@dataclass(frozen=True)
class CycleSettings:
    """
    Averages derived from the cycle history plus the user's reminder preferences.
    """
    average_cycle_length: int = DEFAULT_CYCLE_LENGTH
    average_period_length: int = DEFAULT_PERIOD_LENGTH
    ovulation_length: int = DEFAULT_OVULATION_LENGTH
    notification_days: int = DEFAULT_NOTIFICATION_DAYS
    quiet_notifications: bool = DEFAULT_QUIET_NOTIFICATIONS
    last_updated: Optional[str] = None  # ISO-8601 timestamp of the last recompute
