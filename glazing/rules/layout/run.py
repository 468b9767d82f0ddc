"""Run layout checks: how the casements fit the reveal and the exterior window."""

from __future__ import annotations
from typing import TYPE_CHECKING

from glazing.rules.base import DiagnosticRule, mm

if TYPE_CHECKING:
    from glazing.models.design import SecondaryGlazingDesign


# Smallest opening that still counts as an egress window
EGRESS_MIN_AREA = 0.33   # m2
EGRESS_MIN_WIDTH = 450   # mm
EGRESS_MIN_HEIGHT = 450  # mm


class SurveyConsistencyRule(DiagnosticRule):
    """The measurements must describe a window that can exist."""

    priority = 5

    def get_id(self) -> str:
        return "layout.survey"

    def get_name(self) -> str:
        return "Survey Consistency"

    def check(self, design: SecondaryGlazingDesign) -> list[str]:
        return design.survey.problems


class EgressRule(DiagnosticRule):
    priority = 10

    def get_id(self) -> str:
        return "layout.egress"

    def get_name(self) -> str:
        return "Egress Size"

    def check(self, design: SecondaryGlazingDesign) -> list[str]:
        if (design.opening_area < EGRESS_MIN_AREA
                or design.opening_width < EGRESS_MIN_WIDTH
                or design.opening_height < EGRESS_MIN_HEIGHT):
            return [
                "EGRESS WARNING: The area, width, or height of each secondary glazing "
                "opening is too small for an egress window."
            ]
        return []


class OpeningAlignmentRule(DiagnosticRule):
    """A secondary opening inside the exterior one exposes its jamb or mullion."""

    priority = 20

    def get_id(self) -> str:
        return "layout.alignment"

    def get_name(self) -> str:
        return "Opening Alignment"

    def check(self, design: SecondaryGlazingDesign) -> list[str]:
        warnings: list[str] = []
        if design.opening_left > design.survey.opening_left:
            warnings.append(
                "The secondary glazing opening is inside the primary opening on the left. "
                "The jamb would be visible from the outside and would need a back "
                "which isn't in the parts list."
            )
        if design.opening_right < design.survey.opening_right:
            warnings.append(
                "The secondary glazing opening is inside the primary opening on the right. "
                "The mullion would be visible from the outside and would need a back "
                "which isn't in the parts list."
            )
        return warnings


class JambThicknessRule(DiagnosticRule):
    priority = 30

    def get_id(self) -> str:
        return "layout.jamb_thickness"

    def get_name(self) -> str:
        return "Jamb Thickness"

    def check(self, design: SecondaryGlazingDesign) -> list[str]:
        if design.jamb_width < design.material_liner_thickness:
            return [
                f"The jamb width is smaller than the liner thickness "
                f"({mm(design.jamb_width)} < {mm(design.material_liner_thickness)})"
            ]
        return []


class CasementFitRule(DiagnosticRule):
    priority = 60

    def get_id(self) -> str:
        return "layout.casement_fit"

    def get_name(self) -> str:
        return "Casement Fit"

    def check(self, design: SecondaryGlazingDesign) -> list[str]:
        warnings: list[str] = []
        available = design.survey.width - 2 * design.material_liner_thickness
        if design.casement_width > available:
            warnings.append("Casement is too wide to fit in available space")
        if design.mullion_count > 0 and design.mullion_width < 0:
            # Openings overlap
            warnings.append(
                f"The {design.casement_count} casements don't fit side by side in the run. "
                f"The mullion width would be {mm(design.mullion_width)} mm"
            )
        if design.casement_count < 1:
            warnings.append("No casements")
        return warnings


class LinerDepthRule(DiagnosticRule):
    """Jamb and mullion faces are cut from the liner stock."""

    priority = 70

    def get_id(self) -> str:
        return "layout.liner_depth"

    def get_name(self) -> str:
        return "Liner Stock Depth"

    def check(self, design: SecondaryGlazingDesign) -> list[str]:
        warnings: list[str] = []
        if design.mullion_width > design.material_liner_depth:
            warnings.append(
                f"The mullion width is greater than the liner material. "
                f"({mm(design.mullion_width)} > {mm(design.material_liner_depth)})"
            )
        if design.jamb_width > design.material_liner_depth:
            warnings.append("The jamb width is greater than the liner material")
        return warnings
