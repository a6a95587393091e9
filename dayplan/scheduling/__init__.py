"""Day-scheduling engine.

This module provides:
- Time-of-day anchoring onto an arbitrary day start
- The rolling 24-hour day window and duration clamping
- Free-gap computation and biased placement with shrink-to-fit
- Reflow of a day after its start moves
- Seeding helpers and timeline/editing helpers
"""

from dayplan.scheduling.clamp import clamp_duration
from dayplan.scheduling.errors import SchedulingInvariantError
from dayplan.scheduling.gaps import find_gaps
from dayplan.scheduling.placement import place
from dayplan.scheduling.reflow import reflow
from dayplan.scheduling.seed import SeedPlacement, SeedRequest, SeedResult, place_block, seed_day
from dayplan.scheduling.time_anchor import anchor, minutes_between, seconds_between, shift
from dayplan.scheduling.timeline import (
    BlockStatus,
    block_status,
    clamp_into_window,
    clamp_with_floor,
    earliest_available_start,
    format_minutes,
    max_selectable_minutes,
    projected_interval,
    remaining_minutes,
    suggested_length,
)
from dayplan.scheduling.types import DAY_SPAN, DayWindow, Gap, Interval, PlacementBias, PlacementRequest
from dayplan.scheduling.validate import validate_schedule

__all__ = [
    "DAY_SPAN",
    "BlockStatus",
    "DayWindow",
    "Gap",
    "Interval",
    "PlacementBias",
    "PlacementRequest",
    "SchedulingInvariantError",
    "SeedPlacement",
    "SeedRequest",
    "SeedResult",
    "anchor",
    "block_status",
    "clamp_duration",
    "clamp_into_window",
    "clamp_with_floor",
    "earliest_available_start",
    "find_gaps",
    "format_minutes",
    "max_selectable_minutes",
    "minutes_between",
    "place",
    "place_block",
    "projected_interval",
    "reflow",
    "remaining_minutes",
    "seconds_between",
    "seed_day",
    "shift",
    "suggested_length",
    "validate_schedule",
]
