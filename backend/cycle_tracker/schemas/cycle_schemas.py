"""
Serialization of cycles and settings for local storage.
JSON keys stay camelCase so existing stored blobs keep loading.
"""

from marshmallow import Schema, fields, post_load, EXCLUDE

from cycle_tracker.models.period_cycle import PeriodCycle
from cycle_tracker.models.cycle_settings import CycleSettings
from cycle_tracker.services.cycle_constants import (
    DEFAULT_CYCLE_LENGTH,
    DEFAULT_PERIOD_LENGTH,
    DEFAULT_OVULATION_LENGTH,
    DEFAULT_NOTIFICATION_DAYS,
    DEFAULT_QUIET_NOTIFICATIONS
)


class PeriodCycleSchema(Schema):
    id = fields.Str(required=True)
    start_date = fields.Date(required=True, data_key='startDate')
    end_date = fields.Date(required=True, data_key='endDate')
    cycle_length = fields.Int(required=True, data_key='cycleLength')
    period_length = fields.Int(required=True, data_key='periodLength')
    notes = fields.Str(allow_none=True, load_default=None)

    class Meta:
        unknown = EXCLUDE

    @post_load
    def make_cycle(self, data, **kwargs):
        return PeriodCycle(**data)


class CycleSettingsSchema(Schema):
    average_cycle_length = fields.Int(load_default=DEFAULT_CYCLE_LENGTH, data_key='averageCycleLength')
    average_period_length = fields.Int(load_default=DEFAULT_PERIOD_LENGTH, data_key='averagePeriodLength')
    ovulation_length = fields.Int(load_default=DEFAULT_OVULATION_LENGTH, data_key='ovulationLength')
    notification_days = fields.Int(load_default=DEFAULT_NOTIFICATION_DAYS, data_key='notificationDays')
    quiet_notifications = fields.Bool(load_default=DEFAULT_QUIET_NOTIFICATIONS, data_key='quietNotifications')
    last_updated = fields.Str(allow_none=True, load_default=None, data_key='lastUpdated')

    class Meta:
        unknown = EXCLUDE

    @post_load
    def make_settings(self, data, **kwargs):
        return CycleSettings(**data)
