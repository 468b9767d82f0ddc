"""Snapshot of a design: every input and every derived value in one document."""

from __future__ import annotations
from pydantic import BaseModel

from .design import SecondaryGlazingDesign
from .geometry import Interval
from .parts import CutListStats, Part
from .resolution import ResolvedOpening


class DerivedDimensions(BaseModel):
    """Every scalar the design derives from its inputs."""
    has_jamb_face: bool
    has_mullion_face: bool
    working_jamb_width: float
    hinge_separation: float
    hook_mounting_depth: float
    casement_count: int
    mullion_count: int
    mullion_width: float
    opening_width: float
    opening_height: float
    opening_area: float
    opening_left: float
    opening_right: float
    sash_width: float
    sash_height: float
    glass_width: float
    glass_height: float
    glass_overlap: float
    glass_visible_left: float
    glass_visible_right: float
    glass_visible_width: float
    glass_visible_height: float
    glass_left_impingement: float
    glass_right_impingement: float
    opening_left_impingement: float
    opening_right_impingement: float
    stop_horizontal: float
    stop_vertical: float
    screen_stop_horizontal: float
    screen_stop_vertical: float
    screen_width: float
    screen_height: float
    moulding_horizontal: float
    moulding_vertical: float
    rebate_height: float
    rebate_depth: float
    rebate_height_remainder: float
    rebate_depth_remainder: float
    tenon_thickness: int
    tenon_dimension: float
    depth: float
    jamb_width_opening_aligned: float
    jamb_width_glass_aligned: float
    casement_width_centered: float
    casement_width_opening_aligned: float
    casement_width_glass_aligned: float

    @classmethod
    def from_design(cls, design: SecondaryGlazingDesign) -> DerivedDimensions:
        return cls(**{name: getattr(design, name) for name in cls.model_fields})


class DesignReport(BaseModel):
    """Everything a downstream consumer (a form, a printed cut list) needs."""
    design: SecondaryGlazingDesign
    derived: DerivedDimensions
    resolution: ResolvedOpening
    openings: list[Interval]
    parts: list[Part]
    cut_list_stats: CutListStats
    diagnostics: list[str]

    @classmethod
    def from_design(
        cls,
        design: SecondaryGlazingDesign,
        diagnostics: list[str] | None = None,
    ) -> DesignReport:
        from glazing.core.resolver import OpeningResolver

        if diagnostics is None:
            diagnostics = design.diagnostics

        parts = design.parts
        return cls(
            design=design,
            derived=DerivedDimensions.from_design(design),
            resolution=OpeningResolver().resolve(design),
            openings=design.openings,
            parts=parts,
            cut_list_stats=CutListStats.from_parts(parts),
            diagnostics=diagnostics,
        )
