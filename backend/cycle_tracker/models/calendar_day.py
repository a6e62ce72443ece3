from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class CalendarDay:
    """
    Classification of a single rendered day.
    Flags are independent; the renderer decides which one wins visually.
    """
    date: date
    is_period: bool = False
    is_predicted_period: bool = False
    is_ovulation: bool = False
    is_fertile: bool = False
    is_peak_fertility: bool = False
    is_notification: bool = False
    conception_likelihood: Optional[str] = None

    # Grid context, only set by the calendar grid
    is_current_month: bool = False
    is_today: bool = False

    def to_dict(self):
        return {
            'date': self.date.isoformat(),
            'day': self.date.day,
            'weekday': self.date.isoweekday() % 7,  # 0=Sunday
            'weekday_short': self.date.strftime('%a'),
            'is_period': self.is_period,
            'is_predicted_period': self.is_predicted_period,
            'is_ovulation': self.is_ovulation,
            'is_fertile': self.is_fertile,
            'is_peak_fertility': self.is_peak_fertility,
            'is_notification': self.is_notification,
            'conception_likelihood': self.conception_likelihood,
            'is_current_month': self.is_current_month,
            'is_today': self.is_today
        }
