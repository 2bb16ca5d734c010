"""Exception hierarchy and error codes for time conversion."""

from __future__ import annotations

import enum


class ErrorCode(enum.StrEnum):
    """Failure kinds reported in a Failure result."""

    EMPTY_SELECTION = "empty_selection"
    EMPTY_TIME_STRING = "empty_time_string"
    INVALID_TIMESTAMP = "invalid_timestamp"
    TIMESTAMP_CONVERSION_FAILED = "timestamp_conversion_failed"
    INVALID_TIME_FORMAT = "invalid_time_format"
    TIME_OUT_OF_RANGE = "time_out_of_range"
    TIME_STRING_CONVERSION_FAILED = "time_string_conversion_failed"


# Sanitized user-facing error message constants
ERR_MSG_EMPTY_SELECTION = "please select text to convert"
ERR_MSG_EMPTY_TIME_STRING = "time string must not be empty"
ERR_MSG_INVALID_TIMESTAMP = "invalid timestamp"
ERR_MSG_TIMESTAMP_CONVERSION_FAILED = "timestamp conversion failed"
ERR_MSG_INVALID_TIME_FORMAT = "invalid time format"
ERR_MSG_TIME_OUT_OF_RANGE = "time out of supported range (1970-2038)"
ERR_MSG_TIME_STRING_CONVERSION_FAILED = "time string conversion failed"


class TransformError(Exception):
    """Base exception for time conversion errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging. Subclasses pin a default message
    and the ErrorCode reported to collaborators.
    """

    code: ErrorCode = ErrorCode.TIME_STRING_CONVERSION_FAILED
    default_message: str = ERR_MSG_TIME_STRING_CONVERSION_FAILED

    def __init__(
        self,
        user_message: str | None = None,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        user_message = user_message or self.default_message
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class EmptySelectionError(TransformError):
    """Raised when the selection is empty or whitespace only."""

    code = ErrorCode.EMPTY_SELECTION
    default_message = ERR_MSG_EMPTY_SELECTION


class EmptyTimeStringError(TransformError):
    """Raised when a date string is empty after trimming."""

    code = ErrorCode.EMPTY_TIME_STRING
    default_message = ERR_MSG_EMPTY_TIME_STRING


class InvalidTimestampError(TransformError):
    """Raised when an epoch value does not map to a calendar date."""

    code = ErrorCode.INVALID_TIMESTAMP
    default_message = ERR_MSG_INVALID_TIMESTAMP


class TimestampConversionError(TransformError):
    """Raised when timestamp formatting fails unexpectedly."""

    code = ErrorCode.TIMESTAMP_CONVERSION_FAILED
    default_message = ERR_MSG_TIMESTAMP_CONVERSION_FAILED


class InvalidTimeFormatError(TransformError):
    """Raised when a date string cannot be parsed."""

    code = ErrorCode.INVALID_TIME_FORMAT
    default_message = ERR_MSG_INVALID_TIME_FORMAT


class TimeOutOfRangeError(TransformError):
    """Raised when a parsed date falls outside 1970-2038."""

    code = ErrorCode.TIME_OUT_OF_RANGE
    default_message = ERR_MSG_TIME_OUT_OF_RANGE


class TimeStringConversionError(TransformError):
    """Raised when date string parsing fails unexpectedly."""

    code = ErrorCode.TIME_STRING_CONVERSION_FAILED
    default_message = ERR_MSG_TIME_STRING_CONVERSION_FAILED
