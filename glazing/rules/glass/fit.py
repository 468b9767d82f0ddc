"""Glazing checks: how much exterior glass is hidden and how the pane sits in the rebate."""

from __future__ import annotations
from typing import TYPE_CHECKING

from glazing.rules.base import DiagnosticRule, mm

if TYPE_CHECKING:
    from glazing.models.design import SecondaryGlazingDesign


MAX_SINGLE_GLAZING = 6   # mm
MAX_GLASS_GAP = 5
MIN_GLASS_OVERLAP = 5
MIN_BEDDING_BACK = 2
MAX_BEDDING_BACK = 6
MIN_REBATE_REMAINDER = 8


class ImpingementRule(DiagnosticRule):
    """Exterior glass or opening newly hidden behind the secondary sash."""

    priority = 40

    def get_id(self) -> str:
        return "glass.impingement"

    def get_name(self) -> str:
        return "Impingement"

    def check(self, design: SecondaryGlazingDesign) -> list[str]:
        warnings: list[str] = []
        for amount, what, side in (
            (design.glass_left_impingement, "glass", "left"),
            (design.glass_right_impingement, "glass", "right"),
            (design.opening_left_impingement, "opening", "left"),
            (design.opening_right_impingement, "opening", "right"),
        ):
            if amount > 0:
                warnings.append(f"{mm(amount)} mm of {what} hidden on the {side}")
        return warnings


class GlassThicknessRule(DiagnosticRule):
    priority = 50

    def get_id(self) -> str:
        return "glass.thickness"

    def get_name(self) -> str:
        return "Glass Thickness"

    def check(self, design: SecondaryGlazingDesign) -> list[str]:
        if design.material_glass_thickness > MAX_SINGLE_GLAZING:
            return [
                f"I hope your glass is double glazing. "
                f"{mm(design.material_glass_thickness)} mm is thick for single glazing."
            ]
        return []


class GlassFitRule(DiagnosticRule):
    priority = 80

    def get_id(self) -> str:
        return "glass.fit"

    def get_name(self) -> str:
        return "Glass Fit"

    def check(self, design: SecondaryGlazingDesign) -> list[str]:
        warnings: list[str] = []
        if design.glass_gap > MAX_GLASS_GAP:
            warnings.append(
                f"The glass gap is large. Are you sure you want to leave "
                f"{mm(design.glass_gap)} mm around the glass? 3mm is typical."
            )
        if design.glass_overlap < 0:
            warnings.append("The glass is too small. The glass doesn't overlap the rebate.")
        elif design.glass_overlap < MIN_GLASS_OVERLAP:
            warnings.append(f"The glass only overlaps the rebate by {mm(design.glass_overlap)} mm")
        return warnings


class BeddingRule(DiagnosticRule):
    priority = 90

    def get_id(self) -> str:
        return "glass.bedding"

    def get_name(self) -> str:
        return "Back Bedding"

    def check(self, design: SecondaryGlazingDesign) -> list[str]:
        bedding = design.material_bedding_back
        if bedding < MIN_BEDDING_BACK:
            return [
                "Back bedding the glass helps stop rattles, keeps things watertight, "
                "and reduces stress on the glass. Consider increasing your back bedding depth."
            ]
        if bedding > MAX_BEDDING_BACK:
            return [
                f"Consider reducing the back bedding. {mm(bedding)} mm is a lot. "
                f"2-4 mm should be enough."
            ]
        return []


class RebateRule(DiagnosticRule):
    """The rebate must leave enough of the sash section standing."""

    priority = 100

    def get_id(self) -> str:
        return "glass.rebate"

    def get_name(self) -> str:
        return "Rebate Remainders"

    def check(self, design: SecondaryGlazingDesign) -> list[str]:
        warnings: list[str] = []
        for remainder, what in (
            (design.rebate_depth_remainder, "depth"),
            (design.rebate_height_remainder, "height"),
        ):
            if remainder < 0:
                warnings.append(
                    f"Rebate {what} has taken too much material from the sash. Nothing remains."
                )
            elif remainder < MIN_REBATE_REMAINDER:
                warnings.append(
                    f"Rebate {what} has taken too much material from the sash. "
                    f"Only {mm(remainder)} mm remains."
                )
        return warnings
