"""Tests for timeline and editing helpers."""

from datetime import timedelta

import pytest

from dayplan.config.settings import settings
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
from dayplan.scheduling.types import DayWindow, Interval


@pytest.mark.parametrize(
    ("minutes", "expected"),
    [(90, "1h 30m"), (60, "1h"), (45, "45m"), (0, "0m"), (1440, "24h"), (-5, "0m")],
)
def test_format_minutes(minutes, expected):
    assert format_minutes(minutes) == expected


class TestRemainingTime:
    def test_empty_day(self, day):
        assert earliest_available_start(day, []) == day.start
        assert remaining_minutes(day, []) == 24 * 60

    def test_after_blocks(self, day, block, at):
        items = [block(9, 0, 60), block(8, 0, 30)]
        assert earliest_available_start(day, items) == at(10)
        assert remaining_minutes(day, items) == 14 * 60

    def test_overlapping_blocks_push_cursor(self, day, block, at):
        items = [block(9, 0, 60), block(9, 30, 60)]
        assert earliest_available_start(day, items) == at(11)

    def test_capped_at_window_end(self, day, block):
        items = [block(22, 0, 240)]
        assert earliest_available_start(day, items) == day.end
        assert remaining_minutes(day, items) == 0


def test_max_selectable_minutes(day, at):
    assert max_selectable_minutes(at(23), day) == 60
    assert max_selectable_minutes(at(0), day) == 24 * 60
    assert max_selectable_minutes(at(1, day=2), day) == 0


class TestClampWithFloor:
    def test_short_request_raised_to_floor(self, day, at):
        assert clamp_with_floor(at(9), 2, day, floor=5) == 5

    def test_floor_still_bounded_by_window(self, day, at):
        assert clamp_with_floor(at(23, 58), 2, day, floor=5) == 2

    def test_no_room_left(self, day):
        assert clamp_with_floor(day.end, 30, day, floor=5) == 0

    def test_floor_defaults_to_settings(self, day, at, monkeypatch):
        monkeypatch.setattr(settings, "ui_min_block_minutes", 15)
        assert clamp_with_floor(at(9), 2, day) == 15


@pytest.mark.parametrize(("remaining", "expected"), [(100, 30), (10, 10), (2, 5), (0, 5)])
def test_suggested_length(remaining, expected):
    assert suggested_length(remaining, floor=5, default=30) == expected


def test_block_status(block, at):
    interval = block(9, 0, 60)
    assert block_status(interval, at(8, 59)) is BlockStatus.UPCOMING
    assert block_status(interval, at(9)) is BlockStatus.CURRENT
    assert block_status(interval, at(9, 59)) is BlockStatus.CURRENT
    assert block_status(interval, at(10)) is BlockStatus.PAST


def test_clamp_into_window(at):
    window = DayWindow(start=at(6))
    assert clamp_into_window(at(15, 45, day=2), window) == at(15, 45)
    assert clamp_into_window(at(5, day=4), window) == at(6)


def test_projected_interval_clamps_to_window_end(day, at):
    stored = Interval(start=at(23, 30, day=5), duration=timedelta(minutes=60))
    assert projected_interval(stored, day) == Interval(start=at(23, 30), duration=timedelta(minutes=30))
