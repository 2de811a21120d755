"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_LATE_GRACE_MINUTES = 5
DEFAULT_SESSION_HOURS = 24
DEFAULT_SESSION_LOCATION = "Main Office Entrance"
SESSION_VALUE_BYTES = 16
SESSION_CREATE_RETRIES = 5

UNKNOWN_DEPARTMENT = "Unknown"

# Missing working hours never produce a late flag.
LATE_WHEN_HOURS_MISSING = False

# Start time used when a stored schedule exists but names no usable start.
DEFAULT_WORK_START = "09:00"
