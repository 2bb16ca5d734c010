"""Shared test fixtures."""

import time
from datetime import timezone

import pytest

from pytimetransform.engine import DateutilEngine


@pytest.fixture(autouse=True)
def utc_host_zone(monkeypatch):
    """Run every test with the host process zone pinned to UTC."""
    monkeypatch.setenv("TZ", "UTC")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def utc_engine():
    return DateutilEngine(tz=timezone.utc)
