"""Secondary glazing design: a liner, casements, stops and a flyscreen.

Inputs are plain assignable fields, the way a user fills in a form.
Every other value is a property recomputed from the current fields, so
reading after any assignment is always consistent. Impossible
configurations produce odd numbers (a negative remainder, say) rather
than exceptions; `diagnostics` explains them.
"""

from __future__ import annotations
import math
from typing import Any
from pydantic import BaseModel, ConfigDict, Field

from .drawing import Diagram, OutlineSet
from .geometry import Casement, DiagramRect, Interval, layout_casements, layout_intervals, run_rects
from .parts import Part
from .resolution import AlignmentTier
from .survey import ExteriorSurvey


DIAGRAM_MARGIN = 100.0


class SecondaryGlazingDesign(BaseModel):
    """
    Secondary glazing for a run of casements with mullions between.

    The survey is held by reference and only ever read.
    """
    model_config = ConfigDict(validate_assignment=True)

    survey: ExteriorSurvey = Field(default_factory=ExteriorSurvey)

    jamb_width: float = Field(default=0, ge=0)           # Vertical piece at each end of the run
    casement_width: float = Field(default=550, ge=0)     # Width one casement must fit (the opening)
    casement_count_override: int | None = Field(default=None, ge=0)

    setback: float = Field(default=2, ge=0)              # Liner face to sash face
    gap: float = Field(default=3, ge=0)                  # Liner to sash, stops to screen
    glass_gap: float = Field(default=3, ge=0)            # Glass to rebate
    hinge_inset: float = Field(default=200, ge=0)        # Sash end to hinge end
    handle_mounting_depth: float = Field(default=1, ge=0)

    # Stock (mm)
    material_liner_thickness: float = Field(default=20.5, gt=0)
    material_liner_depth: float = Field(default=119, gt=0)
    material_sash_thickness: float = Field(default=44, gt=0)
    material_glass_thickness: float = Field(default=4, gt=0)
    material_stop_long: float = Field(default=32, gt=0)
    material_stop_short: float = Field(default=12, gt=0)
    material_screen_long: float = Field(default=38, gt=0)
    material_screen_short: float = Field(default=15, gt=0)
    material_moulding_height: float = Field(default=9, gt=0)
    material_moulding_depth: float = Field(default=15, gt=0)
    material_moulding_gap: float = Field(default=4, ge=0)   # Flat left in front of an ovolo
    material_bedding_back: float = Field(default=2, ge=0)   # Putty between rebate and glass
    material_bedding_front: float = Field(default=0, ge=0)  # Putty between glass and moulding
    material_hinge_height: float = Field(default=75, gt=0)
    # Extra sink for the hook of a blade catch on an inward opening casement
    material_hook_offset: float = Field(default=6, ge=0)

    # ------------------------------------------------------------------
    # Opening resolution (advisory; never applied to casement_width here)
    # ------------------------------------------------------------------

    @property
    def glass_left_minimum(self) -> float:
        """Least distance from the reveal to the glass the materials allow."""
        return self.material_liner_thickness + self.gap + self.material_sash_thickness

    @property
    def glass_right_maximum(self) -> float:
        return self.survey.unit_right - (
            self.material_sash_thickness + self.gap + self.material_liner_thickness
        )

    def left_alignment(self) -> tuple[AlignmentTier, float]:
        minimum = self.glass_left_minimum
        if self.survey.opening_left >= minimum:
            return AlignmentTier.OPENING, self.survey.opening_left
        if self.survey.glass_visible_left >= minimum:
            return AlignmentTier.GLASS, self.survey.glass_visible_left
        return AlignmentTier.MINIMUM, minimum

    def right_alignment(self) -> tuple[AlignmentTier, float]:
        maximum = self.glass_right_maximum
        if self.survey.opening_right <= maximum:
            return AlignmentTier.OPENING, self.survey.opening_right
        if self.survey.glass_visible_right <= maximum:
            return AlignmentTier.GLASS, self.survey.glass_visible_right
        return AlignmentTier.MINIMUM, maximum

    def calculate_glass_visible_left(self) -> float:
        return self.left_alignment()[1]

    def calculate_opening_left(self) -> float:
        # Never let the secondary jamb show past the exterior opening
        return min(
            self.calculate_glass_visible_left() - (self.gap + self.material_sash_thickness),
            self.survey.opening_left,
        )

    def calculate_glass_visible_right(self) -> float:
        return self.right_alignment()[1]

    def calculate_opening_right(self) -> float:
        # Never let the secondary mullion hide behind the exterior one
        return max(
            self.calculate_glass_visible_right() + (self.material_sash_thickness + self.gap),
            self.survey.opening_right,
        )

    def calculate_opening_width(self) -> float:
        return self.calculate_opening_right() - self.calculate_opening_left()

    # ------------------------------------------------------------------
    # Run layout
    # ------------------------------------------------------------------

    @property
    def has_jamb_face(self) -> bool:
        """Is the jamb wider than the liner, so it needs a face piece?"""
        return self.jamb_width > self.material_liner_thickness

    @property
    def working_jamb_width(self) -> float:
        # A jamb is never narrower than the liner
        return self.jamb_width if self.has_jamb_face else self.material_liner_thickness

    @property
    def casement_count(self) -> int:
        if self.casement_count_override is not None:
            return self.casement_count_override
        return self.survey.casement_count

    @property
    def mullion_count(self) -> int:
        return max(self.casement_count - 1, 0)

    @property
    def mullion_width(self) -> float:
        if self.mullion_count == 0:
            return 0
        span = self.survey.width - 2 * self.working_jamb_width
        return (span - self.casement_width * self.casement_count) / self.mullion_count

    @property
    def has_mullion_face(self) -> bool:
        """Is the mullion wider than two liners back to back?"""
        return self.mullion_width > 2 * self.material_liner_thickness

    @property
    def opening_width(self) -> float:
        return self.casement_width

    @property
    def opening_height(self) -> float:
        return self.survey.height - 2 * self.material_liner_thickness

    @property
    def opening_area(self) -> float:
        """Area of one opening in square metres."""
        return (self.opening_height / 1000) * (self.opening_width / 1000)

    @property
    def opening_left(self) -> float:
        return self.working_jamb_width

    @property
    def opening_right(self) -> float:
        return self.opening_left + self.opening_width

    @property
    def openings(self) -> list[Interval]:
        return layout_intervals(
            self.opening_left, self.opening_width, self.mullion_width, self.casement_count,
        )

    @property
    def casements(self) -> list[Casement]:
        return layout_casements(
            self.openings,
            self.material_liner_thickness,
            self.opening_height,
            self.gap + self.material_sash_thickness,
        )

    # ------------------------------------------------------------------
    # Glass position relative to the exterior window
    # ------------------------------------------------------------------

    @property
    def glass_visible_left(self) -> float:
        return self.opening_left + self.gap + self.material_sash_thickness

    @property
    def glass_visible_right(self) -> float:
        return self.opening_right - (self.gap + self.material_sash_thickness)

    @property
    def glass_visible_width(self) -> float:
        return self.glass_visible_right - self.glass_visible_left

    @property
    def glass_left_impingement(self) -> float:
        """Exterior glass hidden behind the secondary sash on the left."""
        return max(self.glass_visible_left - self.survey.glass_visible_left, 0)

    @property
    def glass_right_impingement(self) -> float:
        return max(self.survey.glass_visible_right - self.glass_visible_right, 0)

    @property
    def opening_left_impingement(self) -> float:
        """Exterior opening hidden behind the secondary sash on the left."""
        return max(self.glass_visible_left - self.survey.opening_left, 0)

    @property
    def opening_right_impingement(self) -> float:
        return max(self.survey.opening_right - self.glass_visible_right, 0)

    # Alternative sizing aids

    @property
    def jamb_width_opening_aligned(self) -> float:
        """Jamb width that lines the secondary glass up with the exterior opening."""
        return self.survey.opening_left - (self.gap + self.material_sash_thickness)

    @property
    def jamb_width_glass_aligned(self) -> float:
        """Jamb width that lines the secondary glass up with the exterior glass."""
        return self.survey.glass_visible_left - (self.gap + self.material_sash_thickness)

    @property
    def casement_width_centered(self) -> float:
        """Casement width centring the casement on the exterior opening."""
        return 2 * (self.survey.frame_thickness - self.working_jamb_width) + self.survey.opening_width

    @property
    def casement_width_opening_aligned(self) -> float:
        return (self.survey.opening_right - self.working_jamb_width
                + (self.material_sash_thickness + self.gap))

    @property
    def casement_width_glass_aligned(self) -> float:
        return (self.survey.glass_visible_right - self.working_jamb_width
                + (self.material_sash_thickness + self.gap))

    # ------------------------------------------------------------------
    # Hardware
    # ------------------------------------------------------------------

    @property
    def hook_mounting_depth(self) -> float:
        """Depth below the liner face at which the catch hook is mounted."""
        return self.setback + self.handle_mounting_depth + self.material_hook_offset

    @property
    def hinge_separation(self) -> float:
        """Distance between the bottom of the top hinge and the top of the bottom hinge."""
        return self.sash_height - 2 * (self.hinge_inset + self.material_hinge_height)

    # ------------------------------------------------------------------
    # Joinery
    # ------------------------------------------------------------------

    @property
    def sash_width(self) -> float:
        return self.opening_width - 2 * self.gap

    @property
    def sash_height(self) -> float:
        return self.opening_height - 2 * self.gap

    @property
    def screen_width(self) -> float:
        return self.opening_width - 2 * self.material_stop_short - 2 * self.gap

    @property
    def screen_height(self) -> float:
        return self.opening_height - 2 * self.material_stop_short - 2 * self.gap

    @property
    def stop_horizontal(self) -> float:
        """The horizontal casement stop runs the full opening width."""
        return self.opening_width

    @property
    def stop_vertical(self) -> float:
        """The vertical casement stop fits between the horizontal ones."""
        return self.opening_height - 2 * self.material_stop_short

    @property
    def screen_stop_horizontal(self) -> float:
        """The horizontal screen stop fits between the vertical ones."""
        return self.opening_width - 2 * self.material_stop_long

    @property
    def screen_stop_vertical(self) -> float:
        """The vertical screen stop runs the full opening height."""
        return self.opening_height

    @property
    def rebate_height(self) -> float:
        return self.material_moulding_height

    @property
    def rebate_depth(self) -> float:
        return (self.material_moulding_gap + self.material_moulding_depth
                + self.material_bedding_front + self.material_glass_thickness
                + self.material_bedding_back)

    @property
    def rebate_height_remainder(self) -> float:
        return self.material_sash_thickness - self.rebate_height

    @property
    def rebate_depth_remainder(self) -> float:
        return self.material_sash_thickness - self.rebate_depth

    @property
    def tenon_thickness(self) -> int:
        return math.ceil(self.material_sash_thickness / 3)

    @property
    def tenon_dimension(self) -> float:
        return self.material_sash_thickness - self.rebate_height

    @property
    def moulding_horizontal(self) -> float:
        return self.sash_width - 2 * self.rebate_height_remainder

    @property
    def moulding_vertical(self) -> float:
        return self.sash_height - 2 * self.rebate_height_remainder

    @property
    def glass_width(self) -> float:
        return self.sash_width - 2 * self.rebate_height_remainder - 2 * self.glass_gap

    @property
    def glass_height(self) -> float:
        return self.sash_height - 2 * self.rebate_height_remainder - 2 * self.glass_gap

    @property
    def glass_overlap(self) -> float:
        return self.rebate_height - self.glass_gap

    @property
    def glass_visible_height(self) -> float:
        return self.glass_height - 2 * self.glass_overlap

    @property
    def depth(self) -> float:
        """Total depth from the liner face to the back of the screen stop."""
        return (self.setback + self.material_sash_thickness
                + self.material_stop_long + self.material_stop_short)

    # ------------------------------------------------------------------
    # Outputs
    # ------------------------------------------------------------------

    @property
    def parts(self) -> list[Part]:
        from glazing.core.cutlist import build_parts
        return build_parts(self)

    @property
    def outlines(self) -> OutlineSet:
        from glazing.core.outline import OutlineBuilder
        return OutlineBuilder(self).build()

    @property
    def diagnostics(self) -> list[str]:
        from glazing.core.diagnostics import run_diagnostics
        return run_diagnostics(self)

    def draw_rects(self) -> list[DiagramRect]:
        return run_rects(self.survey.width, self.survey.height, self.casements)

    def diagram(self) -> Diagram:
        """The design drawn over the exterior openings for comparison."""
        return Diagram(
            view_box=(
                -DIAGRAM_MARGIN, -DIAGRAM_MARGIN,
                self.survey.width + 2 * DIAGRAM_MARGIN,
                self.survey.height + 2 * DIAGRAM_MARGIN,
            ),
            secondary=self.draw_rects(),
            primary=self.survey.draw_bands(),
        )

    def snapshot(self) -> dict[str, Any]:
        """All inputs and every derived value as one JSON-ready document."""
        from glazing.models.report import DesignReport
        return DesignReport.from_design(self).model_dump(mode="json")
