"""Tests for glazing/models/geometry.py: rectangles and run layout helpers."""
import pytest

from glazing.models import Rect, RectCategory
from glazing.models.geometry import (
    distribute_gaps, layout_casements, layout_intervals, run_rects,
)


class TestRect:
    def test_bottom(self):
        assert Rect(x=10, y=-1000, width=5, height=4000).bottom == 3000

    def test_inset_shrinks_every_side(self):
        inner = Rect(x=20.5, y=20.5, width=444, height=1324).inset(47)
        assert (inner.x, inner.y, inner.width, inner.height) == (67.5, 67.5, 350, 1230)


class TestDistributeGaps:
    @pytest.mark.parametrize("count", [0, 1])
    def test_no_gaps_without_neighbours(self, count):
        assert distribute_gaps(975, 410, count) == 0

    def test_shares_the_remainder(self):
        assert distribute_gaps(975, 410, 2) == 155
        assert distribute_gaps(1300, 400, 3) == 50

    def test_negative_when_items_overflow(self):
        assert distribute_gaps(1024, 600, 2) == -176


def test_layout_intervals_advance_by_width_and_gap():
    assert layout_intervals(45, 410, 155, 2) == [(45, 455), (610, 1020)]
    assert layout_intervals(45, 410, 0, 0) == []


def test_run_rects_order():
    casements = layout_casements([(45, 455), (610, 1020)], 45, 1275, 30)
    rects = run_rects(1065, 1365, casements)
    assert [r.category for r in rects] == [
        RectCategory.RUN,
        RectCategory.OPENING, RectCategory.GLASS,
        RectCategory.OPENING, RectCategory.GLASS,
    ]
    assert rects[2].x == 75 and rects[2].width == 350
    assert casements[1].index == 1
