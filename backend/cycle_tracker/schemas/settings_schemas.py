from marshmallow import Schema, fields, validate

from cycle_tracker.services.cycle_constants import (
    CYCLE_LENGTH_RANGE,
    PERIOD_LENGTH_RANGE,
    NOTIFICATION_DAYS_RANGE
)


class SettingsUpdateSchema(Schema):
    """User edits of cycle settings. Only the fields present are changed."""

    average_cycle_length = fields.Int(
        strict=True,
        validate=validate.Range(
            min=CYCLE_LENGTH_RANGE[0], max=CYCLE_LENGTH_RANGE[1],
            error=f"Cycle length should be between {CYCLE_LENGTH_RANGE[0]} and {CYCLE_LENGTH_RANGE[1]} days"
        )
    )
    average_period_length = fields.Int(
        strict=True,
        validate=validate.Range(
            min=PERIOD_LENGTH_RANGE[0], max=PERIOD_LENGTH_RANGE[1],
            error=f"Period length should be between {PERIOD_LENGTH_RANGE[0]} and {PERIOD_LENGTH_RANGE[1]} days"
        )
    )
    notification_days = fields.Int(
        strict=True,
        validate=validate.Range(
            min=NOTIFICATION_DAYS_RANGE[0], max=NOTIFICATION_DAYS_RANGE[1],
            error=f"Notification days should be between {NOTIFICATION_DAYS_RANGE[0]} and {NOTIFICATION_DAYS_RANGE[1]}"
        )
    )
    quiet_notifications = fields.Bool()
