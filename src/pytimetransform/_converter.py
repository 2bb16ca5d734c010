"""Timestamp-to-string and string-to-timestamp conversion."""

from __future__ import annotations

import logging

from pytimetransform._constants import MAX_SUPPORTED_YEAR, MIN_SUPPORTED_YEAR
from pytimetransform._errors import (
    EmptyTimeStringError,
    InvalidTimeFormatError,
    InvalidTimestampError,
    TimeOutOfRangeError,
    TimestampConversionError,
    TimeStringConversionError,
    TransformError,
)
from pytimetransform._types import Failure, Success, TimestampInfo, TransformResult
from pytimetransform.engine._base import DateEngine

logger = logging.getLogger(__name__)


def _format_timestamp(info: TimestampInfo, engine: DateEngine) -> str:
    dt = engine.from_epoch(info.value, info.unit)
    if dt is None:
        raise InvalidTimestampError(
            internal_details=f"{info.unit.value} value {info.value} has no calendar date",
        )
    return engine.format(dt)


def _parse_time_string(text: str, engine: DateEngine) -> str:
    stripped = text.strip()
    if not stripped:
        raise EmptyTimeStringError()

    dt = engine.parse(stripped)
    if dt is None:
        raise InvalidTimeFormatError(internal_details=f"unparseable time string {stripped!r}")

    if not MIN_SUPPORTED_YEAR <= dt.year <= MAX_SUPPORTED_YEAR:
        raise TimeOutOfRangeError(
            internal_details=f"year {dt.year} parsed from {stripped!r} is outside "
            f"{MIN_SUPPORTED_YEAR}-{MAX_SUPPORTED_YEAR}",
        )
    return str(engine.to_epoch_ms(dt))


def timestamp_to_string(info: TimestampInfo, *, engine: DateEngine) -> TransformResult:
    """Render a classified timestamp as ``YYYY-MM-DD HH:mm:ss``."""
    try:
        return Success(_format_timestamp(info, engine))
    except TransformError as e:
        logger.debug("timestamp conversion failed: %s", e.internal())
        return Failure.from_error(e)
    except Exception as e:
        logger.exception("unexpected error converting timestamp %d", info.value)
        return Failure.from_error(TimestampConversionError(internal_details=str(e), wrapped=e))


def string_to_timestamp(text: str, *, engine: DateEngine) -> TransformResult:
    """Convert a date string to an epoch-millisecond decimal string."""
    try:
        return Success(_parse_time_string(text, engine))
    except TransformError as e:
        logger.debug("time string conversion failed: %s", e.internal())
        return Failure.from_error(e)
    except Exception as e:
        logger.exception("unexpected error parsing time string %r", text)
        return Failure.from_error(TimeStringConversionError(internal_details=str(e), wrapped=e))
