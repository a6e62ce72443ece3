from dataclasses import dataclass
from datetime import date
from typing import Optional

from cycle_tracker.utils.date_utils import DateLike, is_between


@dataclass(frozen=True)
class PeriodCycle:
    """
    One recorded period.
    cycle_length counts days from the previous cycle's start (or the configured
    average for the first cycle); period_length counts start through end inclusive.
    """
    id: str
    start_date: date
    end_date: date
    cycle_length: int
    period_length: int
    notes: Optional[str] = None

    def __repr__(self):
        return f'<PeriodCycle {self.id} start={self.start_date} end={self.end_date}>'

    def contains(self, day: DateLike) -> bool:
        """Check if a day falls inside this period (inclusive)."""
        return is_between(day, self.start_date, self.end_date)
