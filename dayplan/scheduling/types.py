"""Value types for the day-scheduling engine.

All types are immutable. The engine never mutates caller data; every
operation returns new values.
"""

from __future__ import annotations

from datetime import datetime, time, timedelta
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dayplan.scheduling.time_anchor import anchor, seconds_between, shift

DAY_SPAN = timedelta(hours=24)


class PlacementBias(StrEnum):
    """Which side of the requested time a displaced block should slide to."""

    PREFER_BEFORE = "prefer_before"
    PREFER_AFTER = "prefer_after"


class Interval(BaseModel):
    """A block of time: start instant plus a non-negative duration.

    Attributes:
        start: Start instant
        duration: Elapsed length (never negative)
    """

    model_config = ConfigDict(frozen=True)

    start: datetime
    duration: timedelta = Field(default=timedelta(0))

    @field_validator("duration")
    @classmethod
    def validate_duration(cls, value: timedelta) -> timedelta:
        if value < timedelta(0):
            raise ValueError(f"Interval duration must not be negative, got {value}")
        return value

    @classmethod
    def between(cls, start: datetime, end: datetime) -> Interval:
        """Build an interval from two instants (end must not precede start)."""
        return cls(start=start, duration=timedelta(seconds=seconds_between(start, end)))

    @property
    def end(self) -> datetime:
        return shift(self.start, self.duration)

    @property
    def minutes(self) -> int:
        """Whole minutes covered by the interval."""
        return int(self.duration.total_seconds() // 60)

    @property
    def is_empty(self) -> bool:
        return self.duration == timedelta(0)

    def overlaps(self, other: Interval) -> bool:
        """True when the two intervals share any positive stretch of time."""
        if self.is_empty or other.is_empty:
            return False
        return self.start < other.end and other.start < self.end


class Gap(Interval):
    """An unoccupied interval of a day window."""


class DayWindow(BaseModel):
    """The rolling 24-hour interval ``[start, start + 24h)`` that defines one day.

    The start is an arbitrary clock time, not necessarily midnight.
    """

    model_config = ConfigDict(frozen=True)

    start: datetime

    @classmethod
    def of_day(cls, containing: datetime) -> DayWindow:
        """Window starting at local midnight of the given instant's date."""
        return cls(start=datetime.combine(containing.date(), time(0), tzinfo=containing.tzinfo))

    @property
    def end(self) -> datetime:
        return shift(self.start, DAY_SPAN)

    @property
    def interval(self) -> Interval:
        return Interval(start=self.start, duration=DAY_SPAN)

    def contains(self, interval: Interval) -> bool:
        """True when the interval lies entirely within the window."""
        return self.start <= interval.start and interval.end <= self.end

    def clamp(self, interval: Interval) -> Interval | None:
        """Cut an interval down to the part inside the window (None if nothing remains)."""
        start = max(interval.start, self.start)
        end = min(interval.end, self.end)
        if end <= start:
            return None
        return Interval.between(start, end)

    def project(self, instant: datetime) -> datetime:
        """Map an instant into the window by its time of day.

        Instants already inside ``[start, end]`` are returned unchanged. Others
        are anchored onto the start's calendar date, and moved to the following
        date when that would fall before the start.
        """
        if self.start <= instant <= self.end:
            return instant
        anchored = anchor(instant, self.start)
        if anchored < self.start:
            anchored = anchor(instant, self.start + timedelta(days=1))
        return min(max(anchored, self.start), self.end)

    def at(self, time_of_day: time) -> datetime:
        """The instant inside the window showing the given wall-clock time."""
        return self.project(anchor(time_of_day, self.start))


class PlacementRequest(BaseModel):
    """A request to place a block of ``requested_minutes`` near ``desired_time``."""

    model_config = ConfigDict(frozen=True)

    desired_time: time
    requested_minutes: int
    bias: PlacementBias = PlacementBias.PREFER_AFTER

    @property
    def requested_duration(self) -> timedelta:
        return timedelta(minutes=max(0, self.requested_minutes))
