"""Shared fixtures: the measured windows and designs used across the tests."""
import pytest

from glazing.models import ExteriorSurvey, SecondaryGlazingDesign


@pytest.fixture
def survey():
    """The default two-opening window (1065 wide, 155 mm mullion)."""
    return ExteriorSurvey()


@pytest.fixture
def single_survey():
    """A single 410 mm opening in a 500 mm reveal."""
    return ExteriorSurvey(width=500, height=1365, opening_width=410,
                          frame_thickness=45, visible_sash_thickness=30)


@pytest.fixture
def single_design(single_survey):
    """Single casement sized from the resolved opening width (444 mm)."""
    design = SecondaryGlazingDesign(survey=single_survey)
    design.casement_width = design.calculate_opening_width()
    return design


@pytest.fixture
def pair_design(survey):
    """Two casements sized from the resolved opening width (474 mm)."""
    design = SecondaryGlazingDesign(survey=survey)
    design.casement_width = design.calculate_opening_width()
    return design


@pytest.fixture
def faced_pair_design(pair_design):
    """Two casements with a 28 mm jamb face and a 61 mm mullion face."""
    pair_design.jamb_width = 28
    return pair_design
