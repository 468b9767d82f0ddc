from .geometry import (
    Point2D, Rect, RectCategory, DiagramRect, Casement, Interval,
    distribute_gaps, layout_intervals, layout_casements, run_rects,
)
from .survey import ExteriorSurvey
from .resolution import AlignmentTier, ResolvedOpening
from .parts import Part, PartType, CutList, CutListStats
from .drawing import PathCommand, OutlinePath, OutlineSet, Diagram
from .parameters import DiagnosticsConfig
from .design import SecondaryGlazingDesign
from .report import DerivedDimensions, DesignReport

__all__ = [
    "Point2D", "Rect", "RectCategory", "DiagramRect", "Casement", "Interval",
    "distribute_gaps", "layout_intervals", "layout_casements", "run_rects",
    "ExteriorSurvey",
    "AlignmentTier", "ResolvedOpening",
    "Part", "PartType", "CutList", "CutListStats",
    "PathCommand", "OutlinePath", "OutlineSet", "Diagram",
    "DiagnosticsConfig",
    "SecondaryGlazingDesign",
    "DerivedDimensions", "DesignReport",
]
