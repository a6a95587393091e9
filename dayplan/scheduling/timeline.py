"""Timeline and editing helpers built on the window arithmetic.

Used by timeline and editor screens so they never re-derive window math
themselves. The presentation floor (``ui_min_block_minutes``) applies only
here, never inside the engine.
"""

from collections.abc import Sequence
from datetime import datetime, timedelta
from enum import StrEnum

from dayplan.config.settings import settings
from dayplan.scheduling.clamp import clamp_duration
from dayplan.scheduling.time_anchor import anchor, minutes_between, shift
from dayplan.scheduling.types import DayWindow, Interval


class BlockStatus(StrEnum):
    PAST = "past"
    CURRENT = "current"
    UPCOMING = "upcoming"


def format_minutes(minutes: int) -> str:
    """Human-readable length: "1h 30m", "1h" or "45m" (negative reads as "0m")."""
    hours, rest = divmod(max(0, minutes), 60)
    if hours > 0 and rest > 0:
        return f"{hours}h {rest}m"
    if hours > 0:
        return f"{hours}h"
    return f"{rest}m"


def earliest_available_start(window: DayWindow, items: Sequence[Interval]) -> datetime:
    """End of the last block when items are walked in start order, capped at the window end."""
    cursor = window.start
    for start, duration in sorted((window.project(item.start), item.duration) for item in items):
        start = max(start, cursor)
        cursor = max(cursor, shift(start, duration))
    return min(cursor, window.end)


def remaining_minutes(window: DayWindow, items: Sequence[Interval]) -> int:
    """Whole minutes left in the window after the current blocks."""
    return max(0, minutes_between(earliest_available_start(window, items), window.end))


def max_selectable_minutes(start: datetime, window: DayWindow) -> int:
    """Longest length a picker may offer for a block starting at ``start``."""
    return max(0, minutes_between(start, window.end))


def clamp_with_floor(
    start: datetime,
    requested_minutes: int,
    window: DayWindow,
    *,
    floor: int | None = None,
) -> int:
    """Clamp for editing screens: raise short requests to the presentation floor first.

    Args:
        start: Block start
        requested_minutes: Length picked by the user
        window: Day window
        floor: Presentation minimum (defaults to ``settings.ui_min_block_minutes``)

    Returns:
        Allowed minutes; 0 when no time is left before the window end
    """
    if floor is None:
        floor = settings.ui_min_block_minutes
    return clamp_duration(start, max(floor, requested_minutes), window)


def suggested_length(remaining: int, *, floor: int | None = None, default: int | None = None) -> int:
    """Initial length for a new block given the minutes left in the day."""
    if floor is None:
        floor = settings.ui_min_block_minutes
    if default is None:
        default = settings.default_block_minutes
    return max(floor, min(default, remaining))


def block_status(interval: Interval, now: datetime) -> BlockStatus:
    if now < interval.start:
        return BlockStatus.UPCOMING
    if now < interval.end:
        return BlockStatus.CURRENT
    return BlockStatus.PAST


def clamp_into_window(instant: datetime, window: DayWindow) -> datetime:
    """Anchor an instant onto the window's start date, then pin it inside ``[start, end]``."""
    anchored = anchor(instant, window.start)
    return min(max(anchored, window.start), window.end)


def projected_interval(interval: Interval, window: DayWindow) -> Interval:
    """Anchor a block onto the window and cut its length at the window end."""
    start = anchor(interval.start, window.start)
    minutes = clamp_duration(start, interval.minutes, window)
    return Interval(start=start, duration=timedelta(minutes=minutes))
