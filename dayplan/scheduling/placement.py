"""Biased interval placement with a shrink-to-fit fallback.

Resolution order (ORDER MATTERS):
1. Exact fit: the requested block already fits inside a gap, keep it as is
2. Nearest long-enough gap on the preferred side, then on the other side,
   then a long-enough gap straddling the requested time (slid to fit)
3. Shrink-to-fit: the nearest gap in the same order with at least one whole
   minute free, filled with as many whole minutes as it holds

Both biases share one walk; the bias only decides which side is tried first.
"""

from collections.abc import Sequence
from datetime import datetime, timedelta

from loguru import logger

from dayplan.config.settings import settings
from dayplan.scheduling.time_anchor import shift
from dayplan.scheduling.types import Gap, Interval, PlacementBias, PlacementRequest


def _gaps_before(gaps: Sequence[Gap], desired: datetime) -> list[Gap]:
    """Gaps ending at or before the desired start, nearest first."""
    return [gap for gap in reversed(gaps) if gap.end <= desired]


def _gaps_after(gaps: Sequence[Gap], desired: datetime) -> list[Gap]:
    """Gaps starting at or after the desired start, nearest first."""
    return [gap for gap in gaps if gap.start >= desired]


def _gaps_straddling(gaps: Sequence[Gap], desired: datetime) -> list[Gap]:
    return [gap for gap in gaps if gap.start < desired < gap.end]


def _fits_at(gap: Gap, start: datetime, duration: timedelta) -> bool:
    return gap.start <= start and shift(start, duration) <= gap.end


def _slide_into(gap: Gap, desired: datetime, duration: timedelta) -> Interval:
    """Closest start to ``desired`` that keeps the whole block inside ``gap``."""
    latest_start = shift(gap.end, -duration)
    start = min(max(desired, gap.start), latest_start)
    return Interval(start=start, duration=duration)


def _side_candidates(gaps: Sequence[Gap], desired: datetime, bias: PlacementBias) -> list[tuple[Gap, bool]]:
    """Candidate gaps in preference order, tagged with whether they lie before ``desired``."""
    before = [(gap, True) for gap in _gaps_before(gaps, desired)]
    after = [(gap, False) for gap in _gaps_after(gaps, desired)]
    if bias is PlacementBias.PREFER_BEFORE:
        return before + after
    return after + before


def place(
    gaps: Sequence[Gap],
    request: PlacementRequest,
    anchored_start: datetime,
    *,
    min_shrink_minutes: int | None = None,
) -> Interval | None:
    """Find where to put a block near ``anchored_start``.

    Args:
        gaps: Free gaps of the window, sorted by start (see ``find_gaps``)
        request: Requested length and bias
        anchored_start: Desired start, already projected into the window
        min_shrink_minutes: Shortest gap shrink-to-fit may use. Defaults to
            ``settings.min_shrink_minutes``; 0 accepts any gap with a whole
            minute free.

    Returns:
        The placed interval (possibly shorter than requested), or None when no
        gap can take the block
    """
    duration = request.requested_duration

    # ---- Exact fit ----
    for gap in gaps:
        if _fits_at(gap, anchored_start, duration):
            return Interval(start=anchored_start, duration=duration)

    # ---- Nearest full-length slot by bias ----
    candidates = _side_candidates(gaps, anchored_start, request.bias)
    for gap, is_before in candidates:
        if gap.duration < duration:
            continue
        if is_before:
            placed = Interval(start=shift(gap.end, -duration), duration=duration)
        else:
            placed = Interval(start=gap.start, duration=duration)
        logger.debug(f"Shifted {request.requested_minutes}m block from {anchored_start.isoformat()} to {placed.start.isoformat()} ({request.bias})")
        return placed

    straddling = _gaps_straddling(gaps, anchored_start)
    for gap in straddling:
        if gap.duration >= duration:
            placed = _slide_into(gap, anchored_start, duration)
            logger.debug(f"Slid {request.requested_minutes}m block to {placed.start.isoformat()} inside the gap around the requested time")
            return placed

    # ---- Shrink-to-fit ----
    if min_shrink_minutes is None:
        min_shrink_minutes = settings.min_shrink_minutes
    min_minutes = max(1, min_shrink_minutes)

    for gap, is_before in candidates + [(gap, False) for gap in straddling]:
        # Shrunk blocks are whole minutes; a sub-minute gap cannot take one
        if gap.minutes < min_minutes:
            continue
        shrunk = timedelta(minutes=gap.minutes)
        start = shift(gap.end, -shrunk) if is_before else gap.start
        placed = Interval(start=start, duration=shrunk)
        logger.debug(f"Shrunk {request.requested_minutes}m block to {placed.duration} at {placed.start.isoformat()}")
        return placed

    logger.debug(f"No room for {request.requested_minutes}m block near {anchored_start.isoformat()}")
    return None
