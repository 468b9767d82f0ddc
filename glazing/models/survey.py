"""The existing exterior window, as measured in the field."""

from __future__ import annotations
import math
from pydantic import BaseModel, ConfigDict, Field

from .geometry import (
    Casement, DiagramRect, Interval, RectCategory,
    distribute_gaps, layout_casements, layout_intervals, run_rects,
)


# Vertical extent of the bands drawn over the design for comparison
BAND_TOP = -1000.0
BAND_HEIGHT = 4000.0


class ExteriorSurvey(BaseModel):
    """
    Measurements of the exterior window run inside the reveal.

    All lengths in millimetres, measured from the left edge of the reveal.
    Everything else is derived on demand from the five measured values.
    """
    model_config = ConfigDict(validate_assignment=True)

    width: float = Field(default=1065, gt=0)                  # Reveal width
    height: float = Field(default=1365, gt=0)                 # Reveal height
    opening_width: float = Field(default=410, gt=0)           # One exterior opening
    frame_thickness: float = Field(default=45, gt=0)          # Reveal edge to first opening
    visible_sash_thickness: float = Field(default=30, ge=0)   # Opening edge to visible glass

    @property
    def opening_left(self) -> float:
        return self.frame_thickness

    @property
    def opening_right(self) -> float:
        return self.opening_left + self.opening_width

    @property
    def glass_visible_left(self) -> float:
        return self.opening_left + self.visible_sash_thickness

    @property
    def glass_visible_right(self) -> float:
        return self.opening_right - self.visible_sash_thickness

    @property
    def glass_visible_width(self) -> float:
        return self.glass_visible_right - self.glass_visible_left

    @property
    def unit_left(self) -> float:
        return self.opening_left

    @property
    def unit_right(self) -> float:
        """Right of the first unit: half the mullion, or the frame when there is none."""
        if self.mullion_width:
            return self.opening_right + self.mullion_width / 2
        return self.opening_right + self.frame_thickness

    @property
    def usable_width(self) -> float:
        return self.width - 2 * self.opening_left

    @property
    def casement_count(self) -> int:
        # At least one opening always exists
        return max(math.floor(self.usable_width / self.opening_width), 1)

    @property
    def mullion_count(self) -> int:
        return max(self.casement_count - 1, 0)

    @property
    def mullion_width(self) -> float:
        return distribute_gaps(self.usable_width, self.opening_width, self.casement_count)

    @property
    def openings(self) -> list[Interval]:
        return layout_intervals(
            self.opening_left, self.opening_width, self.mullion_width, self.casement_count,
        )

    @property
    def casements(self) -> list[Casement]:
        # The vertical frame is not measured; assume it matches the side frame
        top = self.frame_thickness
        return layout_casements(
            self.openings, top, self.height - 2 * top, self.visible_sash_thickness,
        )

    @property
    def problems(self) -> list[str]:
        """Measurements that are individually valid but inconsistent together."""
        problems: list[str] = []
        if self.opening_width > self.usable_width:
            problems.append(
                f"The exterior opening is wider than the reveal allows "
                f"({self.opening_width} > {self.usable_width})"
            )
        if self.visible_sash_thickness >= self.opening_width / 2:
            problems.append(
                f"The visible sash ({self.visible_sash_thickness} mm) leaves no glass "
                f"in a {self.opening_width} mm opening"
            )
        return problems

    def draw_rects(self) -> list[DiagramRect]:
        return run_rects(self.width, self.height, self.casements)

    def draw_bands(self) -> list[DiagramRect]:
        """Opening and glass columns extended far above and below the run."""
        rects: list[DiagramRect] = []
        for casement in self.casements:
            for rect, category in ((casement.opening, RectCategory.OPENING),
                                   (casement.glass, RectCategory.GLASS)):
                rects.append(DiagramRect(
                    x=rect.x, y=BAND_TOP, width=rect.width, height=BAND_HEIGHT,
                    category=category,
                ))
        return rects
