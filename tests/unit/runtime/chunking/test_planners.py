"""Unit tests for window planning logic."""

from __future__ import annotations

import math

import pytest

from cicsplex.cmci.core import ValidationError
from cicsplex.cmci.runtime.chunking import WindowPlanner


class TestWindowPlanner:
    """Test WindowPlanner functionality."""

    def test_zero_records_plans_nothing(self):
        assert WindowPlanner().plan(0) == []

    def test_single_window_under_increment(self):
        plans = WindowPlanner(800).plan(10)

        assert len(plans) == 1
        assert plans[0].start == 1
        assert plans[0].size(10) == 10
        assert plans[0].window_index == 0

    def test_exact_multiple(self):
        plans = WindowPlanner(800).plan(1600)

        assert [p.start for p in plans] == [1, 801]
        assert [p.size(1600) for p in plans] == [800, 800]

    def test_last_window_clamped(self):
        plans = WindowPlanner(800).plan(2500)

        assert [p.start for p in plans] == [1, 801, 1601, 2401]
        assert [p.end(2500) for p in plans] == [800, 1600, 2400, 2500]
        assert [p.window_index for p in plans] == [0, 1, 2, 3]

    @pytest.mark.parametrize(
        ("record_count", "increment"),
        [(1, 1), (1, 800), (799, 800), (800, 800), (801, 800), (10, 3), (1000, 7)],
    )
    def test_windows_cover_range_without_overlap(self, record_count, increment):
        plans = WindowPlanner(increment).plan(record_count)

        assert len(plans) == math.ceil(record_count / increment)
        covered = [n for p in plans for n in range(p.start, p.end(record_count) + 1)]
        assert covered == list(range(1, record_count + 1))

    def test_invalid_increment(self):
        with pytest.raises(ValidationError, match="increment must be >= 1"):
            WindowPlanner(0)

    def test_negative_record_count(self):
        with pytest.raises(ValidationError, match="Record count must be >= 0"):
            WindowPlanner().plan(-1)
