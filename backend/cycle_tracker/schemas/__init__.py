from .cycle_schemas import PeriodCycleSchema, CycleSettingsSchema
from .settings_schemas import SettingsUpdateSchema

__all__ = ['PeriodCycleSchema', 'CycleSettingsSchema', 'SettingsUpdateSchema']
