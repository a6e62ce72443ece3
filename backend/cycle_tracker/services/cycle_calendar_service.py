"""
Calendar service for the period tracker.

Classifies days against the cycle history and forecast and builds the
6-week month grid used by the calendar view.
"""

from typing import Dict, List, Any, Optional
from datetime import date, timedelta
import calendar
from dataclasses import replace

from cycle_tracker.models.calendar_day import CalendarDay
from cycle_tracker.models.forecast import CycleForecast
from cycle_tracker.models.tracker_state import CycleTrackerState
from cycle_tracker.services.cycle_constants import CALENDAR_DAYS
from cycle_tracker.services.cycle_engine import CycleEngine
from cycle_tracker.utils.date_utils import DateLike, to_date, sunday_on_or_before
from cycle_tracker.utils.menstruation_calculations import get_conception_likelihood


class CycleCalendarService:
    """Calendar classification service for period trackers."""

    @staticmethod
    def classify_day(
        target_date: DateLike,
        state: CycleTrackerState,
        forecast: Optional[CycleForecast] = None
    ) -> CalendarDay:
        """
        Classify one day. Each flag is evaluated on its own, so a day may be
        both a period day and a predicted one.

        Pass a prebuilt forecast when classifying many days for the same state.
        """
        target_date = to_date(target_date)

        if not state.has_history:
            return CalendarDay(date=target_date)

        if forecast is None:
            forecast = CycleEngine.build_forecast(state)
        window = forecast.fertility_window

        return CalendarDay(
            date=target_date,
            is_period=CycleEngine.find_cycle_for_date(state, target_date) is not None,
            is_predicted_period=forecast.is_predicted_period(target_date),
            is_ovulation=target_date == forecast.next_ovulation_date,
            is_fertile=window.contains(target_date),
            is_peak_fertility=target_date == window.peak_fertility,
            is_notification=target_date == forecast.notification_date,
            conception_likelihood=get_conception_likelihood(target_date, window)
        )

    @staticmethod
    def generate_calendar_grid(
        year: int,
        month: int,
        state: CycleTrackerState,
        today: Optional[DateLike] = None
    ) -> List[CalendarDay]:
        """
        Build 42 consecutive classified days starting on the Sunday on or
        before the first of the month (month is 1-12).
        """
        month_start = date(year, month, 1)
        _, last_day = calendar.monthrange(year, month)
        month_end = date(year, month, last_day)
        today = to_date(today) if today else date.today()

        calendar_start = sunday_on_or_before(month_start)
        forecast = CycleEngine.build_forecast(state)

        days = []
        for offset in range(CALENDAR_DAYS):
            current = calendar_start + timedelta(days=offset)
            day = CycleCalendarService.classify_day(current, state, forecast)
            days.append(replace(
                day,
                is_current_month=month_start <= current <= month_end,
                is_today=current == today
            ))

        return days

    @staticmethod
    def group_into_weeks(days: List[CalendarDay]) -> List[List[CalendarDay]]:
        weeks = []
        for i in range(0, len(days), 7):
            weeks.append(days[i:i+7])
        return weeks

    @staticmethod
    def get_calendar_data(
        year: int,
        month: int,
        state: CycleTrackerState,
        today: Optional[DateLike] = None
    ) -> Dict[str, Any]:
        """
        Get calendar data for a specific month.

        Returns:
        - Month metadata
        - Classified grid days and weeks
        - Counts of period, predicted and fertile days within the month
        - Current forecast, if any
        """
        days = CycleCalendarService.generate_calendar_grid(year, month, state, today)
        weeks = CycleCalendarService.group_into_weeks(days)
        month_days = [d for d in days if d.is_current_month]
        forecast = CycleEngine.build_forecast(state)
        month_start = date(year, month, 1)

        return {
            'month': {
                'year': year,
                'month': month,
                'month_name': month_start.strftime('%B'),
                'month_name_short': month_start.strftime('%b')
            },
            'calendar_start': days[0].date.isoformat(),
            'calendar_end': days[-1].date.isoformat(),
            'days': [d.to_dict() for d in days],
            'weeks': [[d.to_dict() for d in week] for week in weeks],
            'total_weeks': len(weeks),
            'stats': {
                'period_days_in_month': len([d for d in month_days if d.is_period]),
                'predicted_period_days_in_month': len([d for d in month_days if d.is_predicted_period]),
                'fertile_days_in_month': len([d for d in month_days if d.is_fertile]),
                'total_days_in_month': len(month_days)
            },
            'forecast': forecast.to_dict() if forecast else None
        }
