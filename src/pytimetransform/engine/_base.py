"""Abstract base class for date engines."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from pytimetransform._types import TimeUnit


class DateEngine(ABC):
    """Abstract base class defining the date parsing/formatting interface.

    All parser-library-specific code lives behind this interface so the
    classification and range checks never touch the parser directly.
    Engines return None for input that cannot map to a real date and let
    anything unexpected propagate.
    """

    @abstractmethod
    def parse(self, text: str) -> datetime | None:
        """Parse a date string into a datetime in the engine zone.

        Text without a year is rejected. Values too close to the ends of the
        datetime range to convert may be returned unconverted.
        """

    @abstractmethod
    def format(self, dt: datetime) -> str: ...

    @abstractmethod
    def from_epoch(self, value: int, unit: TimeUnit) -> datetime | None:
        """Build an aware datetime in the engine zone from an epoch value."""

    @abstractmethod
    def to_epoch_ms(self, dt: datetime) -> int: ...
