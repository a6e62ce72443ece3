from dataclasses import dataclass
from datetime import date

from cycle_tracker.utils.date_utils import DateLike, is_between


@dataclass(frozen=True)
class FertilityWindow:
    """Fertile days around a single ovulation date. Never persisted."""
    ovulation_date: date
    fertile_start: date
    fertile_end: date
    peak_fertility: date
    conception_likelihood: str

    def contains(self, day: DateLike) -> bool:
        return is_between(day, self.fertile_start, self.fertile_end)

    def to_dict(self):
        return {
            'ovulation_date': self.ovulation_date.isoformat(),
            'fertile_start': self.fertile_start.isoformat(),
            'fertile_end': self.fertile_end.isoformat(),
            'peak_fertility': self.peak_fertility.isoformat(),
            'conception_likelihood': self.conception_likelihood
        }


@dataclass(frozen=True)
class CycleForecast:
    """Forward predictions extrapolated from the most recent cycle."""
    next_period_date: date
    predicted_period_end: date
    next_ovulation_date: date
    notification_date: date
    fertility_window: FertilityWindow

    def is_predicted_period(self, day: DateLike) -> bool:
        return is_between(day, self.next_period_date, self.predicted_period_end)

    def to_dict(self):
        return {
            'next_period_date': self.next_period_date.isoformat(),
            'predicted_period_end': self.predicted_period_end.isoformat(),
            'next_ovulation_date': self.next_ovulation_date.isoformat(),
            'notification_date': self.notification_date.isoformat(),
            'fertility_window': self.fertility_window.to_dict()
        }
