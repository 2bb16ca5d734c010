"""Date engines: swappable parsing/formatting backends."""

from pytimetransform.engine._base import DateEngine
from pytimetransform.engine.dateutil_engine import DateutilEngine

__all__ = ["DateEngine", "DateutilEngine"]
