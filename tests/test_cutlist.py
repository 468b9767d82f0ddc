"""Tests for glazing/core/cutlist.py: the bill of materials."""
import pytest

from glazing.models import CutList, CutListStats, PartType


def by_name(parts):
    return {p.name: p for p in parts}


class TestSingleCasement:
    def test_order(self, single_design):
        names = [p.name for p in single_design.parts]
        assert names == [
            PartType.LINER_HORIZONTAL, PartType.LINER_VERTICAL,
            PartType.SASH_HORIZONTAL, PartType.SASH_VERTICAL,
            PartType.MOULDING_HORIZONTAL, PartType.MOULDING_VERTICAL,
            PartType.STOP_HORIZONTAL, PartType.STOP_VERTICAL,
            PartType.SCREEN_STOP_HORIZONTAL, PartType.SCREEN_STOP_VERTICAL,
            PartType.SCREEN_HORIZONTAL, PartType.SCREEN_VERTICAL,
            PartType.GLASS, PartType.HINGE, PartType.FASTENER,
        ]

    def test_one_glass_no_mullion(self, single_design):
        parts = single_design.parts
        glass = [p for p in parts if p.name == "Glass"]
        assert len(glass) == 1
        assert glass[0].count == 1
        width, height, thickness = glass[0].dimensions
        assert width == 362 and height == 1242 and thickness == 4
        assert not [p for p in parts if p.name == PartType.MULLION]

    def test_casement_pieces_doubled(self, single_design):
        parts = by_name(single_design.parts)
        assert parts[PartType.SASH_HORIZONTAL].count == 2
        assert parts[PartType.SASH_HORIZONTAL].dimensions == (44, 44, 438)
        assert parts[PartType.SASH_VERTICAL].dimensions == (44, 44, 1318)
        assert parts[PartType.SCREEN_HORIZONTAL].dimensions == (15, 38, 414)
        assert parts[PartType.STOP_VERTICAL].dimensions == (12, 32, 1300)

    def test_liners(self, single_design):
        parts = by_name(single_design.parts)
        head = parts[PartType.LINER_HORIZONTAL]
        assert head.count == 2
        assert head.dimensions == (20.5, 119, 500)
        assert head.notes == ""
        side = parts[PartType.LINER_VERTICAL]
        assert side.count == 2
        assert side.dimensions == (20.5, 119, 1365 - 20.5)

    def test_hardware_has_no_dimensions(self, single_design):
        parts = by_name(single_design.parts)
        assert parts[PartType.HINGE].dimensions is None
        assert parts[PartType.HINGE].count == 2
        assert parts[PartType.FASTENER].count == 1


class TestVerticalLinerFork:
    def test_mullion_face_only_splits_liners(self, pair_design):
        parts = by_name(pair_design.parts)
        assert PartType.LINER_VERTICAL not in parts
        jamb_liner = parts[PartType.LINER_VERTICAL_JAMB]
        mullion_liner = parts[PartType.LINER_VERTICAL_MULLION]
        assert jamb_liner.count == 2
        assert jamb_liner.dimensions[1] == 119
        assert jamb_liner.notes == ""
        assert mullion_liner.count == 2
        assert mullion_liner.dimensions[1] == 119 - 20.5
        assert mullion_liner.notes == "Sized to allow the mullion faces"

    def test_jamb_face_only_splits_liners(self, single_design):
        single_design.jamb_width = 28
        parts = by_name(single_design.parts)
        assert parts[PartType.LINER_VERTICAL_JAMB].dimensions[1] == 119 - 20.5
        assert parts[PartType.LINER_VERTICAL_JAMB].notes == "Sized to allow the jamb faces"
        assert parts[PartType.LINER_VERTICAL_MULLION].count == 0

    def test_both_faces_share_one_liner(self, faced_pair_design):
        parts = by_name(faced_pair_design.parts)
        assert PartType.LINER_VERTICAL_JAMB not in parts
        side = parts[PartType.LINER_VERTICAL]
        assert side.count == 4
        assert side.dimensions[1] == 119 - 20.5
        assert side.notes == "Sized to allow the mullion & jamb faces"


class TestFaces:
    def test_jamb_and_mullion_parts(self, faced_pair_design):
        parts = by_name(faced_pair_design.parts)
        assert parts[PartType.JAMB].count == 2
        assert parts[PartType.JAMB].dimensions == (20.5, 28, 1344.5)
        assert parts[PartType.MULLION].count == 1
        assert parts[PartType.MULLION].dimensions == (20.5, 61, 1344.5)

    def test_head_liner_recessed(self, faced_pair_design):
        head = by_name(faced_pair_design.parts)[PartType.LINER_HORIZONTAL]
        assert head.notes == "Cut recesses for the mullion or jamb faces"


class TestStats:
    def test_single_casement_totals(self, single_design):
        stats = CutListStats.from_parts(single_design.parts)
        assert stats.total_pieces == 28
        assert stats.glass_panes == 1
        assert stats.hardware == 3
        assert stats.timber_pieces == 24

    def test_timber_length(self, single_design):
        stats = CutListStats.from_parts(single_design.parts)
        expected = sum(p.count * p.dimensions[2] for p in single_design.parts
                       if p.dimensions and p.name != PartType.GLASS)
        assert stats.timber_length == pytest.approx(expected)

    def test_cut_list_fills_stats(self, pair_design):
        cut_list = CutList(parts=pair_design.parts)
        assert cut_list.stats.glass_panes == 2


def test_no_casements_still_lists_liners(pair_design):
    pair_design.casement_count_override = 0
    parts = by_name(pair_design.parts)
    assert parts[PartType.LINER_HORIZONTAL].count == 2
    assert parts[PartType.GLASS].count == 0
