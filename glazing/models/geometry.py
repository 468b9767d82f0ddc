"""Geometric primitives shared by the survey and the design."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel


Interval = tuple[float, float]


class Point2D(BaseModel):
    """Point on the elevation (x to the right, y downwards)."""
    x: float
    y: float


class Rect(BaseModel):
    """Axis-aligned rectangle on the elevation (millimetres)."""
    x: float
    y: float
    width: float
    height: float

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def inset(self, amount: float) -> Rect:
        """Shrink by `amount` on every side."""
        return Rect(
            x=self.x + amount,
            y=self.y + amount,
            width=self.width - 2 * amount,
            height=self.height - 2 * amount,
        )


class RectCategory(str, Enum):
    RUN = "run"
    OPENING = "opening"
    GLASS = "glass"


class DiagramRect(Rect):
    """A rectangle tagged with what it depicts."""
    category: RectCategory


class Casement(BaseModel):
    """One casement position: the opening and the glass visible in it."""
    index: int
    opening: Rect
    glass: Rect


def distribute_gaps(span: float, item_width: float, item_count: int) -> float:
    """Width of each gap when `item_count` items share `span` evenly.

    A single item (or none) leaves no gaps to share, so the width is 0.
    """
    gap_count = item_count - 1
    if gap_count <= 0:
        return 0
    return (span - item_count * item_width) / gap_count


def layout_intervals(
    start: float, item_width: float, gap_width: float, item_count: int,
) -> list[Interval]:
    """Left-to-right [left, right] bounds of equally spaced items."""
    intervals: list[Interval] = []
    x = start
    for _ in range(item_count):
        intervals.append((x, x + item_width))
        x += item_width + gap_width
    return intervals


def layout_casements(
    intervals: list[Interval], top: float, height: float, glass_inset: float,
) -> list[Casement]:
    """Opening and glass rectangles for each opening interval."""
    casements: list[Casement] = []
    for i, (left, right) in enumerate(intervals):
        opening = Rect(x=left, y=top, width=right - left, height=height)
        casements.append(Casement(index=i, opening=opening, glass=opening.inset(glass_inset)))
    return casements


def run_rects(width: float, height: float, casements: list[Casement]) -> list[DiagramRect]:
    """The run outline, then opening and glass for each casement."""
    rects = [DiagramRect(x=0, y=0, width=width, height=height, category=RectCategory.RUN)]
    for casement in casements:
        rects.append(DiagramRect(**casement.opening.model_dump(), category=RectCategory.OPENING))
        rects.append(DiagramRect(**casement.glass.model_dump(), category=RectCategory.GLASS))
    return rects
