"""Range and format constants for timestamp/date-string conversion."""

SECONDS_DIGITS = 10
"""Digit length of a seconds-based timestamp."""

MILLISECONDS_DIGITS = 13
"""Digit length of a milliseconds-based timestamp."""

MIN_EPOCH_SECONDS = 946684800
"""2000-01-01T00:00:00Z."""

MAX_EPOCH_SECONDS = 2147483647
"""32-bit signed rollover, 2038-01-19T03:14:07Z."""

MIN_EPOCH_MILLISECONDS = MIN_EPOCH_SECONDS * 1000

MAX_EPOCH_MILLISECONDS = MAX_EPOCH_SECONDS * 1000

MIN_SUPPORTED_YEAR = 1970

MAX_SUPPORTED_YEAR = 2038

OUTPUT_FORMAT = "%Y-%m-%d %H:%M:%S"
"""Rendered as YYYY-MM-DD HH:mm:ss."""
