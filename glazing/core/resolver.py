"""Opening resolution: where the secondary opening should sit over the exterior one."""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING

from glazing.models.resolution import ResolvedOpening

if TYPE_CHECKING:
    from glazing.models.design import SecondaryGlazingDesign

logger = logging.getLogger(__name__)


class OpeningResolver:
    """
    Packages the design's advisory opening geometry.

    The design only ever suggests a width; `apply()` is the explicit step
    that writes it back into the design's inputs.
    """

    def resolve(self, design: SecondaryGlazingDesign) -> ResolvedOpening:
        left_tier, glass_left = design.left_alignment()
        right_tier, glass_right = design.right_alignment()
        resolved = ResolvedOpening(
            glass_left=glass_left,
            glass_right=glass_right,
            opening_left=design.calculate_opening_left(),
            opening_right=design.calculate_opening_right(),
            opening_width=design.calculate_opening_width(),
            left_tier=left_tier,
            right_tier=right_tier,
        )
        logger.debug(
            "Resolved opening %.1f-%.1f (left on %s, right on %s)",
            resolved.opening_left, resolved.opening_right,
            left_tier.value, right_tier.value,
        )
        return resolved

    def apply(self, design: SecondaryGlazingDesign, *, jamb: bool = False) -> ResolvedOpening:
        """Set the casement width (and optionally the jamb) from the resolution."""
        resolved = self.resolve(design)
        if jamb:
            design.jamb_width = resolved.opening_left
        design.casement_width = resolved.opening_width
        logger.info("Applied casement width %.1f mm", resolved.opening_width)
        return resolved
