"""Duration clamping against the end of a day window."""

from datetime import datetime

from dayplan.scheduling.time_anchor import minutes_between
from dayplan.scheduling.types import DayWindow


def clamp_duration(start: datetime, requested_minutes: int, window: DayWindow) -> int:
    """Bound a requested length so that ``start + length`` never passes the window end.

    Args:
        start: Proposed block start
        requested_minutes: Requested length in minutes (negative clamps to 0)
        window: Day window the block must stay inside

    Returns:
        Allowed whole minutes; 0 when the start is at or after the window end
    """
    if start >= window.end:
        return 0
    max_allowed = minutes_between(start, window.end)
    return max(0, min(requested_minutes, max_allowed))
