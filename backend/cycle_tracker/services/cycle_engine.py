"""
Specialized service for cycle arithmetic and forecasting
"""

import logging
import uuid
from dataclasses import replace
from datetime import date, datetime, timezone
from typing import Dict, Any, Optional, Sequence, Tuple

from cycle_tracker.models.period_cycle import PeriodCycle
from cycle_tracker.models.forecast import CycleForecast
from cycle_tracker.models.tracker_state import CycleTrackerState
from cycle_tracker.services.cycle_constants import (
    DEFAULT_CYCLE_LENGTH,
    DEFAULT_PERIOD_LENGTH
)
from cycle_tracker.utils.date_utils import DateLike, to_date, days_between, inclusive_day_count
from cycle_tracker.utils.menstruation_calculations import (
    mean_days,
    predict_next_period_date,
    predict_ovulation_date,
    predict_period_end_date,
    predict_notification_date,
    get_fertility_window,
    days_until
)

logger = logging.getLogger(__name__)


def _timestamp(now: Optional[datetime] = None) -> str:
    return (now or datetime.now(timezone.utc)).isoformat()


class CycleEngine:
    """
    Pure cycle arithmetic. Every operation takes the caller's state and
    returns new values; nothing is mutated or stored here.
    """

    @staticmethod
    def compute_averages(cycles: Sequence[PeriodCycle]) -> Tuple[int, int]:
        """
        Mean cycle and period length over the whole history, rounded half-up.
        Every cycle weighs equally regardless of age.
        """
        if not cycles:
            return DEFAULT_CYCLE_LENGTH, DEFAULT_PERIOD_LENGTH

        avg_cycle_length = mean_days(cycle.cycle_length for cycle in cycles)
        avg_period_length = mean_days(cycle.period_length for cycle in cycles)
        return avg_cycle_length, avg_period_length

    @staticmethod
    def recalculate_settings(state: CycleTrackerState,
                             cycles: Sequence[PeriodCycle],
                             now: Optional[datetime] = None) -> CycleTrackerState:
        avg_cycle_length, avg_period_length = CycleEngine.compute_averages(cycles)
        settings = replace(
            state.settings,
            average_cycle_length=avg_cycle_length,
            average_period_length=avg_period_length,
            last_updated=_timestamp(now)
        )
        return CycleTrackerState(cycles=tuple(cycles), settings=settings)

    @staticmethod
    def add_cycle(state: CycleTrackerState,
                  start_date: DateLike,
                  end_date: Optional[DateLike] = None,
                  notes: Optional[str] = None,
                  now: Optional[datetime] = None) -> Tuple[CycleTrackerState, PeriodCycle]:
        """
        Record a new period at the head of the history. Without an end date the
        period is assumed to last the current average period length.
        """
        start_date = to_date(start_date)
        if end_date is None:
            end_date = predict_period_end_date(start_date, state.settings.average_period_length)
        else:
            end_date = to_date(end_date)

        last_cycle = state.most_recent_cycle
        if last_cycle:
            cycle_length = days_between(last_cycle.start_date, start_date)
            if cycle_length <= 0:
                # Out-of-order start dates are kept as-is
                logger.warning(
                    "Cycle starting %s precedes most recent cycle %s (cycle length %d)",
                    start_date.isoformat(), last_cycle.start_date.isoformat(), cycle_length
                )
        else:
            cycle_length = state.settings.average_cycle_length

        new_cycle = PeriodCycle(
            id=uuid.uuid4().hex,
            start_date=start_date,
            end_date=end_date,
            cycle_length=cycle_length,
            period_length=inclusive_day_count(start_date, end_date),
            notes=notes
        )

        cycles = (new_cycle,) + state.cycles
        return CycleEngine.recalculate_settings(state, cycles, now), new_cycle

    @staticmethod
    def modify_cycle(state: CycleTrackerState,
                     cycle_id: str,
                     new_start_date: DateLike,
                     new_end_date: DateLike,
                     now: Optional[datetime] = None) -> Tuple[CycleTrackerState, bool]:
        """
        Replace the dates of a cycle in place. cycle_length is left alone for
        the cycle and its neighbors. Unknown ids leave the state untouched.
        """
        if state.find_cycle(cycle_id) is None:
            return state, False

        new_start_date = to_date(new_start_date)
        new_end_date = to_date(new_end_date)
        period_length = inclusive_day_count(new_start_date, new_end_date)

        cycles = tuple(
            replace(cycle, start_date=new_start_date, end_date=new_end_date, period_length=period_length)
            if cycle.id == cycle_id else cycle
            for cycle in state.cycles
        )
        return CycleEngine.recalculate_settings(state, cycles, now), True

    @staticmethod
    def delete_cycle(state: CycleTrackerState,
                     cycle_id: str,
                     now: Optional[datetime] = None) -> Tuple[CycleTrackerState, bool]:
        if state.find_cycle(cycle_id) is None:
            return state, False

        cycles = tuple(cycle for cycle in state.cycles if cycle.id != cycle_id)
        return CycleEngine.recalculate_settings(state, cycles, now), True

    @staticmethod
    def find_cycle_for_date(state: CycleTrackerState, day: DateLike) -> Optional[PeriodCycle]:
        """The recorded period covering day, searched newest first, or None."""
        day = to_date(day)
        return next((cycle for cycle in state.cycles if cycle.contains(day)), None)

    @staticmethod
    def next_period_date(state: CycleTrackerState) -> Optional[date]:
        last_cycle = state.most_recent_cycle
        if not last_cycle:
            return None
        return predict_next_period_date(last_cycle.start_date, state.settings.average_cycle_length)

    @staticmethod
    def next_ovulation_date(state: CycleTrackerState) -> Optional[date]:
        return predict_ovulation_date(
            CycleEngine.next_period_date(state),
            state.settings.ovulation_length
        )

    @staticmethod
    def predicted_period_end(state: CycleTrackerState) -> Optional[date]:
        return predict_period_end_date(
            CycleEngine.next_period_date(state),
            state.settings.average_period_length
        )

    @staticmethod
    def notification_date(state: CycleTrackerState) -> Optional[date]:
        return predict_notification_date(
            CycleEngine.next_period_date(state),
            state.settings.notification_days
        )

    @staticmethod
    def build_forecast(state: CycleTrackerState) -> Optional[CycleForecast]:
        next_period = CycleEngine.next_period_date(state)
        if not next_period:
            return None

        settings = state.settings
        ovulation_date = predict_ovulation_date(next_period, settings.ovulation_length)

        return CycleForecast(
            next_period_date=next_period,
            predicted_period_end=predict_period_end_date(next_period, settings.average_period_length),
            next_ovulation_date=ovulation_date,
            notification_date=predict_notification_date(next_period, settings.notification_days),
            fertility_window=get_fertility_window(ovulation_date)
        )

    @staticmethod
    def get_cycle_stats(state: CycleTrackerState, today: Optional[DateLike] = None) -> Dict[str, Any]:
        today = to_date(today) if today else date.today()
        forecast = CycleEngine.build_forecast(state)

        next_period = forecast.next_period_date if forecast else None
        next_ovulation = forecast.next_ovulation_date if forecast else None

        return {
            'average_cycle_length': state.settings.average_cycle_length,
            'average_period_length': state.settings.average_period_length,
            'cycles_tracked': len(state.cycles),
            'next_period_date': next_period.isoformat() if next_period else None,
            'next_ovulation_date': next_ovulation.isoformat() if next_ovulation else None,
            'days_until_period': days_until(next_period, today),
            'days_until_ovulation': days_until(next_ovulation, today)
        }
