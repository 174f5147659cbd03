"""Shared constants and defaults."""

APP_NAME = "clocktime"

DEFAULT_TIME_FORMAT = "h:mm am"

# Format used to re-render a value for validity checks.
CANONICAL_FORMAT = "h:mm am"

INVALID_TIME = "invalid time"
INVALID_FORMAT = "invalid format"

HALF_DAY_HOURS = 12
