"""
Constants for cycle predictions, settings validation and storage.
Extracted to avoid circular dependencies.
"""

# Canonical defaults used when no cycle history exists
DEFAULT_CYCLE_LENGTH = 28
DEFAULT_PERIOD_LENGTH = 3
DEFAULT_OVULATION_LENGTH = 14  # Days before the next period
DEFAULT_NOTIFICATION_DAYS = 2
DEFAULT_QUIET_NOTIFICATIONS = True

# Fertility window offsets, relative to the ovulation date
FERTILE_DAYS_BEFORE_OVULATION = 5
FERTILE_DAYS_AFTER_OVULATION = 1
PEAK_FERTILITY_DAYS_BEFORE_OVULATION = 1
LOW_LIKELIHOOD_MAX_DISTANCE = 3

# Conception likelihood levels
LIKELIHOOD_HIGH = 'high'
LIKELIHOOD_MEDIUM = 'medium'
LIKELIHOOD_LOW = 'low'
LIKELIHOOD_VERY_LOW = 'very-low'

# User-editable settings ranges (inclusive)
CYCLE_LENGTH_RANGE = (21, 35)
PERIOD_LENGTH_RANGE = (1, 10)
NOTIFICATION_DAYS_RANGE = (1, 7)

# Calendar grid: 6 weeks of 7 days
CALENDAR_WEEKS = 6
CALENDAR_DAYS = CALENDAR_WEEKS * 7

# Storage keys for persisted blobs
STORAGE_KEYS = {
    'PERIOD_CYCLES': 'periodCycles',
    'CYCLE_SETTINGS': 'cycleSettings'
}
