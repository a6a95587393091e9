"""Instant arithmetic and time-of-day anchoring.

Two aware datetimes that share a tzinfo add and subtract as wall clock in
Python. Every helper here routes aware values through UTC so that "24 hours"
is always 24 elapsed hours, including across DST transitions. Naive values
are treated as absolute wall clock.
"""

from datetime import datetime, time, timedelta, timezone


def _is_aware(value: datetime) -> bool:
    return value.tzinfo is not None and value.utcoffset() is not None


def shift(instant: datetime, delta: timedelta) -> datetime:
    """Move an instant by an elapsed duration, keeping its own timezone."""
    if not _is_aware(instant):
        return instant + delta
    moved = instant.astimezone(timezone.utc) + delta
    return moved.astimezone(instant.tzinfo)


def seconds_between(start: datetime, end: datetime) -> float:
    """Elapsed seconds from start to end (negative when end is earlier)."""
    if _is_aware(start) and _is_aware(end):
        return (end.astimezone(timezone.utc) - start.astimezone(timezone.utc)).total_seconds()
    return (end - start).total_seconds()


def minutes_between(start: datetime, end: datetime) -> int:
    """Whole elapsed minutes from start to end, floored."""
    return int(seconds_between(start, end) // 60)


def anchor(value: datetime | time, to: datetime) -> datetime:
    """Return the wall-clock time of ``value`` placed on the calendar date of ``to``.

    Hour, minute and second are taken from ``value`` (converted to the timezone
    of ``to`` when both are aware); sub-second precision is dropped. The result
    carries ``to``'s tzinfo.

    Args:
        value: Source of the time of day (a datetime or a bare time)
        to: Anchor instant whose calendar date is used

    Returns:
        The anchored instant, or ``to`` itself when the local time does not
        exist on that date (DST gap)
    """
    if isinstance(value, datetime):
        if _is_aware(value) and _is_aware(to):
            value = value.astimezone(to.tzinfo)
        time_of_day = time(value.hour, value.minute, value.second)
    else:
        time_of_day = time(value.hour, value.minute, value.second)

    candidate = datetime.combine(to.date(), time_of_day, tzinfo=to.tzinfo)
    if not _is_aware(candidate):
        return candidate

    # Nonexistent local times do not survive a UTC round trip
    round_trip = candidate.astimezone(timezone.utc).astimezone(to.tzinfo)
    if round_trip.replace(tzinfo=None) != candidate.replace(tzinfo=None):
        return to
    return candidate
