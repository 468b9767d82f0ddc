"""Tests for opening resolution: the three-tier alignment policy on each side."""
import pytest

from glazing.core.resolver import OpeningResolver
from glazing.models import AlignmentTier, ExteriorSurvey, SecondaryGlazingDesign


def design_for(**survey_fields) -> SecondaryGlazingDesign:
    return SecondaryGlazingDesign(survey=ExteriorSurvey(**survey_fields))


class TestLeftPolicy:
    def test_glass_left_minimum(self):
        assert SecondaryGlazingDesign().glass_left_minimum == 20.5 + 3 + 44

    def test_aligns_with_exterior_opening_when_frame_is_wide(self):
        d = design_for(frame_thickness=80, width=1200)
        assert d.left_alignment() == (AlignmentTier.OPENING, 80)
        assert d.calculate_opening_left() == 80 - 47

    def test_aligns_with_exterior_glass(self, single_design):
        assert single_design.left_alignment() == (AlignmentTier.GLASS, 75)
        assert single_design.calculate_glass_visible_left() == 75
        assert single_design.calculate_opening_left() == 28

    def test_falls_back_to_material_minimum(self):
        d = design_for(frame_thickness=20, visible_sash_thickness=10, width=450)
        assert d.left_alignment() == (AlignmentTier.MINIMUM, 67.5)

    def test_never_past_exterior_opening(self):
        # The minimum pushes the glass in, but the opening edge is capped
        d = design_for(frame_thickness=10, visible_sash_thickness=5, width=430)
        assert d.calculate_opening_left() == 10


class TestRightPolicy:
    def test_aligns_with_exterior_opening_beside_mullion(self, pair_design):
        assert pair_design.right_alignment() == (AlignmentTier.OPENING, 455)
        assert pair_design.calculate_opening_right() == 502

    def test_aligns_with_exterior_glass(self, single_design):
        assert single_design.glass_right_maximum == 500 - 67.5
        assert single_design.right_alignment() == (AlignmentTier.GLASS, 425)
        assert single_design.calculate_opening_right() == 472

    def test_falls_back_to_material_maximum(self):
        d = design_for(width=450, opening_width=410, frame_thickness=20, visible_sash_thickness=10)
        tier, glass_right = d.right_alignment()
        assert tier == AlignmentTier.MINIMUM
        assert glass_right == d.survey.unit_right - 67.5

    def test_never_inside_exterior_opening(self):
        d = design_for(width=450, opening_width=410, frame_thickness=20, visible_sash_thickness=10)
        assert d.calculate_opening_right() == d.survey.opening_right


class TestOpeningWidth:
    def test_single(self, single_survey):
        d = SecondaryGlazingDesign(survey=single_survey)
        assert d.calculate_opening_width() == 444

    def test_advisory_only(self, single_survey):
        d = SecondaryGlazingDesign(survey=single_survey)
        d.calculate_opening_width()
        assert d.casement_width == 550

    @pytest.mark.parametrize("width", [500, 1065, 1650])
    def test_fixed_point(self, width):
        d = design_for(width=width)
        first = (d.calculate_opening_left(), d.calculate_opening_right())
        d.casement_width = d.calculate_opening_width()
        assert (d.calculate_opening_left(), d.calculate_opening_right()) == first
        d.casement_width = d.calculate_opening_width()
        assert d.calculate_opening_width() == first[1] - first[0]


class TestOpeningResolver:
    def test_resolve_packages_results(self, single_survey):
        d = SecondaryGlazingDesign(survey=single_survey)
        resolved = OpeningResolver().resolve(d)
        assert resolved.opening_left == 28
        assert resolved.opening_right == 472
        assert resolved.opening_width == 444
        assert resolved.glass_left == 75
        assert resolved.glass_right == 425
        assert resolved.left_tier == AlignmentTier.GLASS
        assert resolved.right_tier == AlignmentTier.GLASS

    def test_resolve_does_not_modify(self, single_survey):
        d = SecondaryGlazingDesign(survey=single_survey)
        OpeningResolver().resolve(d)
        assert d.casement_width == 550
        assert d.jamb_width == 0

    def test_apply_sets_casement_width(self, single_survey):
        d = SecondaryGlazingDesign(survey=single_survey)
        OpeningResolver().apply(d)
        assert d.casement_width == 444
        assert d.jamb_width == 0

    def test_apply_with_jamb(self, single_survey):
        d = SecondaryGlazingDesign(survey=single_survey)
        OpeningResolver().apply(d, jamb=True)
        assert d.jamb_width == 28
        assert d.opening_left == 28
        assert d.opening_right == 472
