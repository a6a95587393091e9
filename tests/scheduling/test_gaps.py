"""Tests for free-gap computation.

Covers:
- The reference day with two morning/afternoon blocks
- Empty, fully booked and overlapping occupied sets
- Clipping of intervals outside the window
- Exact partition of the window for arbitrary occupied sets
"""

import random
from datetime import timedelta

from dayplan.scheduling.gaps import find_gaps
from dayplan.scheduling.types import DayWindow, Gap, Interval


def _gap(at, start, end):
    return Gap.between(at(*start), at(*end))


def test_gaps_around_two_blocks(day, at, block):
    occupied = [block(9, 0, 45), block(13, 0, 45)]
    gaps = find_gaps(day, occupied)
    assert gaps == [
        _gap(at, (0, 0), (9, 0)),
        _gap(at, (9, 45), (13, 0)),
        Gap.between(at(13, 45), day.end),
    ]


def test_empty_occupied_gives_whole_window(day):
    assert find_gaps(day, []) == [Gap(start=day.start, duration=timedelta(hours=24))]


def test_fully_booked_window_has_no_gaps(day):
    assert find_gaps(day, [day.interval]) == []


def test_unsorted_and_overlapping_intervals_are_merged(day, at, block):
    occupied = [block(13, 0, 30), block(9, 0, 60), block(9, 30, 120), block(10, 0, 15)]
    gaps = find_gaps(day, occupied)
    assert gaps == [
        _gap(at, (0, 0), (9, 0)),
        _gap(at, (11, 30), (13, 0)),
        Gap.between(at(13, 30), day.end),
    ]


def test_intervals_are_clipped_to_window(at, block):
    window = DayWindow(start=at(6))
    occupied = [block(5, 0, 90), block(5, 30, 60, day=2)]
    gaps = find_gaps(window, occupied)
    assert gaps == [Gap.between(at(6, 30), at(5, 30, day=2))]


def test_intervals_outside_window_and_empty_intervals_are_ignored(day, at, block):
    occupied = [block(10, 0, 60, day=3), block(12, 0, 0)]
    assert find_gaps(day, occupied) == [Gap(start=day.start, duration=timedelta(hours=24))]


def test_gaps_partition_window_for_random_occupied_sets(day):
    """Gaps plus clipped occupied intervals cover the window with no gap overlapping anything."""
    rng = random.Random(20250101)
    for _ in range(200):
        occupied = [
            Interval(
                start=day.start + timedelta(minutes=rng.randint(-180, 24 * 60 + 60)),
                duration=timedelta(minutes=rng.choice([0, 5, 30, 45, 90, 240, 600])),
            )
            for _ in range(rng.randint(0, 8))
        ]
        gaps = find_gaps(day, occupied)
        clipped = [c for c in (day.clamp(i) for i in occupied) if c is not None]

        assert gaps == sorted(gaps, key=lambda g: g.start)
        for gap in gaps:
            assert gap.duration > timedelta(0)
            assert day.contains(gap)
            assert not any(gap.overlaps(other) for other in clipped)
        for first, second in zip(gaps, gaps[1:]):
            assert first.end < second.start

        cursor = day.start
        for piece in sorted(gaps + clipped, key=lambda i: i.start):
            assert piece.start <= cursor
            cursor = max(cursor, piece.end)
        assert cursor == day.end
