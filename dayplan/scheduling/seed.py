"""Seeding a day with non-overlapping blocks.

The caller decides what to seed and in which order (typically fixed anchors
such as work first, elastic rhythm blocks last). This module only supplies the
calling pattern: compute gaps over the growing occupied set, place with a
bias, insert the result, repeat.
"""

from collections.abc import Sequence
from datetime import timedelta

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from dayplan.scheduling.clamp import clamp_duration
from dayplan.scheduling.errors import SchedulingInvariantError
from dayplan.scheduling.gaps import find_gaps
from dayplan.scheduling.logging import log_scheduling_invariant_failure
from dayplan.scheduling.placement import place
from dayplan.scheduling.types import DayWindow, Interval, PlacementRequest
from dayplan.scheduling.validate import validate_schedule


class SeedRequest(BaseModel):
    """A labelled placement request (label is opaque to the engine)."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(description="Caller identifier for the block, e.g. a plan title")
    request: PlacementRequest


class SeedPlacement(BaseModel):
    """Outcome of one seed request."""

    model_config = ConfigDict(frozen=True)

    label: str
    request: PlacementRequest
    interval: Interval | None = Field(default=None, description="Placed block, None when skipped")

    @property
    def placed(self) -> bool:
        return self.interval is not None

    @property
    def shrunk(self) -> bool:
        return self.interval is not None and self.interval.duration < self.request.requested_duration


class SeedResult(BaseModel):
    """All placements in request order plus the final occupied set."""

    model_config = ConfigDict(frozen=True)

    placements: list[SeedPlacement]
    occupied: list[Interval]

    @property
    def skipped(self) -> list[SeedPlacement]:
        return [p for p in self.placements if not p.placed]


def place_block(
    window: DayWindow,
    occupied: Sequence[Interval],
    request: PlacementRequest,
    *,
    min_shrink_minutes: int | None = None,
) -> Interval | None:
    """Run one seeding step against the current occupied set.

    Args:
        window: Day window being seeded
        occupied: Blocks already placed (not modified)
        request: What to place and where
        min_shrink_minutes: Forwarded to ``place``

    Returns:
        The placed interval, or None when the block was skipped
    """
    desired = window.at(request.desired_time)

    # Upper bound only; placement may move the start and clamp again below
    max_minutes = clamp_duration(desired, request.requested_minutes, window)
    if max_minutes <= 0:
        return None

    bounded = request.model_copy(update={"requested_minutes": max_minutes})
    placed = place(find_gaps(window, occupied), bounded, desired, min_shrink_minutes=min_shrink_minutes)
    if placed is None:
        return None

    # Stored blocks are whole minutes ending inside the window
    final_minutes = clamp_duration(placed.start, placed.minutes, window)
    if final_minutes <= 0:
        return None
    return Interval(start=placed.start, duration=timedelta(minutes=final_minutes))


def seed_day(
    window: DayWindow,
    requests: Sequence[SeedRequest],
    occupied: Sequence[Interval] = (),
    *,
    min_shrink_minutes: int | None = None,
) -> SeedResult:
    """Place every request in order, letting earlier placements shape later gaps.

    Args:
        window: Day window being seeded
        requests: Requests in the caller's chosen order
        occupied: Blocks that exist before seeding
        min_shrink_minutes: Forwarded to ``place``

    Returns:
        SeedResult with one placement per request and the final occupied set

    Raises:
        SchedulingInvariantError: If the seeded day breaks a schedule invariant
    """
    current = list(occupied)
    placements: list[SeedPlacement] = []

    for seed in requests:
        interval = place_block(window, current, seed.request, min_shrink_minutes=min_shrink_minutes)
        if interval is None:
            logger.info(f"Seed skipped '{seed.label}': no room near {seed.request.desired_time.isoformat()}")
        else:
            current.append(interval)
        placements.append(SeedPlacement(label=seed.label, request=seed.request, interval=interval))

    placed = [p.interval for p in placements if p.interval is not None]
    try:
        validate_schedule(window, placed)
    except SchedulingInvariantError as e:
        log_scheduling_invariant_failure(e, {"window_start": window.start.isoformat(), "requests": len(requests)})
        raise

    logger.info(f"Seeded {len(placed)}/{len(requests)} blocks into window starting {window.start.isoformat()}")
    return SeedResult(placements=placements, occupied=current)
