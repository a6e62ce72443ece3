from .period_cycle import PeriodCycle
from .cycle_settings import CycleSettings
from .forecast import FertilityWindow, CycleForecast
from .calendar_day import CalendarDay
from .tracker_state import CycleTrackerState
from .stored_blob import StoredBlob

__all__ = ['PeriodCycle', 'CycleSettings', 'FertilityWindow', 'CycleForecast', 'CalendarDay', 'CycleTrackerState', 'StoredBlob']
