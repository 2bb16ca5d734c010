"""Value types for classification and conversion results."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from pytimetransform._errors import ErrorCode, TransformError


class TimeUnit(enum.Enum):
    """Resolution of an epoch value."""

    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"


@dataclass(frozen=True)
class TimestampInfo:
    """A classified epoch value."""

    value: int
    is_seconds: bool

    @property
    def unit(self) -> TimeUnit:
        return TimeUnit.SECONDS if self.is_seconds else TimeUnit.MILLISECONDS


@dataclass(frozen=True)
class Success:
    """Successful conversion carrying the replacement text."""

    result: str
    success: bool = field(default=True, init=False)

    @property
    def error(self) -> None:
        return None


@dataclass(frozen=True)
class Failure:
    """Failed conversion carrying an error code and user-facing message."""

    code: ErrorCode
    error: str
    success: bool = field(default=False, init=False)

    @property
    def result(self) -> None:
        return None

    @classmethod
    def from_error(cls, err: TransformError) -> Failure:
        return cls(code=err.code, error=err.user_message)


TransformResult = Success | Failure
