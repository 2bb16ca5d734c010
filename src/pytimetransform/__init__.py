"""pytimetransform - Convert selected text between Unix timestamps and date strings."""

from __future__ import annotations

try:
    from pytimetransform._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

import logging

from pytimetransform import _converter
from pytimetransform._classifier import detect_timestamp
from pytimetransform._errors import EmptySelectionError, ErrorCode, TransformError
from pytimetransform._types import Failure, Success, TimestampInfo, TimeUnit, TransformResult
from pytimetransform.engine import DateEngine, DateutilEngine

__all__ = [
    "detect_timestamp",
    "string_to_timestamp",
    "timestamp_to_string",
    "transform_time",
    "DateEngine",
    "DateutilEngine",
    "ErrorCode",
    "Failure",
    "Success",
    "TimestampInfo",
    "TimeUnit",
    "TransformError",
    "TransformResult",
]

logger = logging.getLogger(__name__)

_default_engine = DateutilEngine()


def timestamp_to_string(
    info: TimestampInfo,
    *,
    engine: DateEngine | None = None,
) -> TransformResult:
    """Convert a classified timestamp to a ``YYYY-MM-DD HH:mm:ss`` string.

    Args:
        info: Timestamp produced by detect_timestamp.
        engine: Date engine to use. Defaults to DateutilEngine in the local zone.

    Returns:
        Success with the formatted date, or Failure with INVALID_TIMESTAMP or
        TIMESTAMP_CONVERSION_FAILED.
    """
    return _converter.timestamp_to_string(info, engine=engine or _default_engine)


def string_to_timestamp(
    text: str,
    *,
    engine: DateEngine | None = None,
) -> TransformResult:
    """Convert a date string to an epoch-millisecond string.

    Args:
        text: Date string, e.g. ``2021-01-01 00:00:00`` or ISO-8601.
        engine: Date engine to use. Defaults to DateutilEngine in the local zone.

    Returns:
        Success with the millisecond value as a decimal string, or Failure with
        EMPTY_TIME_STRING, INVALID_TIME_FORMAT, TIME_OUT_OF_RANGE or
        TIME_STRING_CONVERSION_FAILED.
    """
    return _converter.string_to_timestamp(text, engine=engine or _default_engine)


def transform_time(
    selected_text: str,
    *,
    engine: DateEngine | None = None,
) -> TransformResult:
    """Convert selected text to its timestamp or date-string counterpart.

    Timestamps (10-digit seconds, 13-digit milliseconds, within 2000-2038)
    become formatted dates; anything else is parsed as a date string and
    becomes an epoch-millisecond value.

    Args:
        selected_text: Raw editor selection.
        engine: Date engine to use. Defaults to DateutilEngine in the local zone.

    Returns:
        Success carrying the replacement text, or Failure carrying an
        ErrorCode and user-facing message. Never raises.
    """
    if not selected_text or not selected_text.strip():
        err = EmptySelectionError()
        logger.debug("rejected empty selection")
        return Failure.from_error(err)

    info = detect_timestamp(selected_text)
    if info is not None:
        return timestamp_to_string(info, engine=engine)
    return string_to_timestamp(selected_text, engine=engine)
