"""Sequential reflow of a day's blocks after the window start moves."""

from collections.abc import Sequence
from datetime import timedelta

from loguru import logger

from dayplan.scheduling.time_anchor import seconds_between, shift
from dayplan.scheduling.types import DayWindow, Interval


def reflow(window: DayWindow, items: Sequence[Interval]) -> list[Interval]:
    """Redistribute blocks so they are packed in order, never overlap, and fit the window.

    Each start is projected into the window and the blocks are walked in
    projected order (stable for equal starts). A block starts at its projected
    time or at the end of the previous block, whichever is later, and its
    duration is cut at the window end. Blocks that no longer fit end up as
    zero-length intervals at the window end; callers decide whether to warn.

    Reflowing an already reflowed sequence returns it unchanged.

    Args:
        window: Day window to fit into
        items: Blocks in any order

    Returns:
        New intervals in start order
    """
    projected = sorted(
        (Interval(start=window.project(item.start), duration=item.duration) for item in items),
        key=lambda interval: interval.start,
    )

    cursor = window.start
    reflowed: list[Interval] = []
    for item in projected:
        start = max(item.start, cursor)
        max_allowed = timedelta(seconds=max(0.0, seconds_between(start, window.end)))
        duration = min(item.duration, max_allowed)
        if duration < item.duration:
            logger.debug(f"Reflow truncated block at {start.isoformat()} from {item.duration} to {duration}")
        reflowed.append(Interval(start=start, duration=duration))
        cursor = shift(start, duration)
    return reflowed
