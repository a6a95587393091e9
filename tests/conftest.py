"""Root conftest for all tests.

Shared fixtures use fixed UTC dates so results never depend on the machine
timezone.
"""

from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pytest
from loguru import logger

from dayplan.scheduling.types import DayWindow, Interval


@pytest.fixture
def at():
    """Build a UTC instant on 2025-01-<day> at hour:minute."""

    def _at(hour: int, minute: int = 0, second: int = 0, *, day: int = 1) -> datetime:
        return datetime(2025, 1, day, hour, minute, second, tzinfo=UTC)

    return _at


@pytest.fixture
def block(at):
    """Build an interval starting at hour:minute lasting ``minutes``."""

    def _block(hour: int, minute: int, minutes: int, *, day: int = 1) -> Interval:
        return Interval(start=at(hour, minute, day=day), duration=timedelta(minutes=minutes))

    return _block


@pytest.fixture
def day(at) -> DayWindow:
    """Window for 2025-01-01 00:00 UTC to 2025-01-02 00:00 UTC."""
    return DayWindow(start=at(0))


@pytest.fixture
def new_york() -> ZoneInfo:
    """America/New_York zone (skips when the tz database is not installed)."""
    try:
        return ZoneInfo("America/New_York")
    except ZoneInfoNotFoundError:
        pytest.skip("tz database not available")


@pytest.fixture
def log_records():
    """Collect loguru records emitted during the test (DEBUG and above)."""
    records: list[dict] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)
