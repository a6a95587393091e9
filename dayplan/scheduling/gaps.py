"""Free-gap computation over a day window."""

from collections.abc import Iterable

from dayplan.scheduling.types import DayWindow, Gap, Interval


def find_gaps(window: DayWindow, occupied: Iterable[Interval]) -> list[Gap]:
    """Compute the free sub-intervals of a window, sorted by start.

    Occupied intervals are first clipped to the window; parts outside it are
    ignored and intervals with nothing left inside are dropped. Overlapping
    intervals are merged implicitly by the sweep cursor.

    Args:
        window: Day window to partition
        occupied: Already placed intervals (any order)

    Returns:
        Gaps that, together with the clipped occupied intervals, exactly cover
        the window without overlap. Empty when the window is fully booked.
    """
    clipped = [c for c in (window.clamp(interval) for interval in occupied) if c is not None]
    clipped.sort(key=lambda interval: interval.start)

    gaps: list[Gap] = []
    cursor = window.start
    for interval in clipped:
        if interval.start > cursor:
            gaps.append(Gap.between(cursor, interval.start))
        cursor = max(cursor, interval.end)
    if cursor < window.end:
        gaps.append(Gap.between(cursor, window.end))
    return gaps
