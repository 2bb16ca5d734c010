"""python-dateutil backed date engine."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo

from dateutil import parser

from pytimetransform._constants import OUTPUT_FORMAT
from pytimetransform._types import TimeUnit
from pytimetransform.engine._base import DateEngine

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)

# Missing month/day fall back to January 1st; a missing year is detected by
# parsing again against a second default.
_DEFAULT = datetime(2000, 1, 1)
_ALT_DEFAULT = datetime(2001, 1, 1)


class DateutilEngine(DateEngine):
    """Date engine using dateutil's flexible parser.

    Args:
        tz: Zone used for naive input and for output. None means the
            local zone of the host process.
    """

    def __init__(self, tz: tzinfo | None = None) -> None:
        self._tz = tz

    @property
    def tz(self) -> tzinfo | None:
        return self._tz

    def _localize(self, dt: datetime) -> datetime:
        if self._tz is None:
            # naive values are taken as host-local time
            return dt.astimezone()
        if dt.tzinfo is None:
            return dt.replace(tzinfo=self._tz)
        return dt.astimezone(self._tz)

    def parse(self, text: str) -> datetime | None:
        try:
            dt = parser.parse(text, default=_DEFAULT)
            if dt.year == _DEFAULT.year and parser.parse(text, default=_ALT_DEFAULT).year != dt.year:
                return None
        except (parser.ParserError, ValueError, OverflowError):
            return None
        try:
            return self._localize(dt)
        except (ValueError, OverflowError):
            # ends of the datetime range only; the year check rejects these
            return dt

    def format(self, dt: datetime) -> str:
        return dt.strftime(OUTPUT_FORMAT)

    def from_epoch(self, value: int, unit: TimeUnit) -> datetime | None:
        if unit is TimeUnit.SECONDS:
            seconds, millis = value, 0
        else:
            seconds, millis = divmod(value, 1000)
        try:
            if self._tz is None:
                dt = datetime.fromtimestamp(seconds).astimezone()
            else:
                dt = datetime.fromtimestamp(seconds, self._tz)
        except (OverflowError, OSError, ValueError):
            return None
        return dt + timedelta(milliseconds=millis)

    def to_epoch_ms(self, dt: datetime) -> int:
        return (self._localize(dt) - _EPOCH) // _ONE_MS
