"""Schedule invariant validator.

Called before a set of blocks is handed back to the store. Raises
SchedulingInvariantError listing every violated invariant.
"""

from collections.abc import Sequence

from dayplan.scheduling.errors import SchedulingInvariantError
from dayplan.scheduling.types import DayWindow, Interval


def validate_schedule(window: DayWindow, intervals: Sequence[Interval]) -> None:
    """Validate that blocks stay inside the window and never overlap.

    Args:
        window: Day window the blocks belong to
        intervals: Blocks to check, in any order

    Raises:
        SchedulingInvariantError: If any invariant is violated
    """
    errors: list[str] = []

    # ---- Window bounds ----
    if any(not window.contains(interval) for interval in intervals):
        errors.append("OUTSIDE_WINDOW")

    # ---- Pairwise overlap (adjacent after sorting is enough) ----
    ordered = sorted((i for i in intervals if not i.is_empty), key=lambda interval: interval.start)
    for previous, current in zip(ordered, ordered[1:]):
        if current.start < previous.end:
            errors.append("OVERLAP")
            break

    if errors:
        raise SchedulingInvariantError("INVALID_SCHEDULE", errors)
