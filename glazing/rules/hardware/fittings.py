"""Stop, depth and hinge checks."""

from __future__ import annotations
from typing import TYPE_CHECKING

from glazing.rules.base import DiagnosticRule, mm

if TYPE_CHECKING:
    from glazing.models.design import SecondaryGlazingDesign


# Stop stock is used on edge and on face, so its two sides must differ
MIN_STOP_DIFFERENCE = 6


class StopProfileRule(DiagnosticRule):
    priority = 110

    def get_id(self) -> str:
        return "hardware.stop_profile"

    def get_name(self) -> str:
        return "Stop Profile"

    def check(self, design: SecondaryGlazingDesign) -> list[str]:
        if design.material_stop_long - design.material_stop_short < MIN_STOP_DIFFERENCE:
            return [
                "Your stop material needs to be decently rectangular so that it can be "
                "positioned in two orientations for the window stop and the screen stop"
            ]
        return []


class DepthRule(DiagnosticRule):
    priority = 120

    def get_id(self) -> str:
        return "hardware.depth"

    def get_name(self) -> str:
        return "Overall Depth"

    def check(self, design: SecondaryGlazingDesign) -> list[str]:
        if design.depth > design.material_liner_depth:
            return ["Deeper than the liner material allows"]
        return []


class FlyscreenStopRule(DiagnosticRule):
    """The screen stop sits on edge behind the sash and should stay hidden."""

    priority = 130

    def get_id(self) -> str:
        return "hardware.flyscreen_stop"

    def get_name(self) -> str:
        return "Flyscreen Stop"

    def check(self, design: SecondaryGlazingDesign) -> list[str]:
        if design.material_stop_long > design.material_sash_thickness + design.gap:
            return ["The flyscreen stop will show"]
        if design.material_stop_long > design.material_sash_thickness:
            return ["The flyscreen stop will probably show"]
        return []


class HingeRule(DiagnosticRule):
    priority = 140

    def get_id(self) -> str:
        return "hardware.hinges"

    def get_name(self) -> str:
        return "Hinge Separation"

    def check(self, design: SecondaryGlazingDesign) -> list[str]:
        separation = design.hinge_separation
        if separation < 0:
            return ["The hinges will overlap"]
        if separation < design.hinge_inset:
            return [
                f"The hinges are too close to each other with only {mm(separation)} mm "
                f"between them, but an inset of {mm(design.hinge_inset)} mm. "
                f"Reduce the inset to better separate the hinges."
            ]
        return []
