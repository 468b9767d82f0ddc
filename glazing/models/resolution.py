"""Result of choosing where the secondary opening should sit."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel


class AlignmentTier(str, Enum):
    """What the secondary glass edge was lined up with, cleanest first."""
    OPENING = "opening"   # Exterior opening edge: hides no opening
    GLASS = "glass"       # Exterior glass edge: hides opening but no glass
    MINIMUM = "minimum"   # Material minimum: some exterior glass is hidden


class ResolvedOpening(BaseModel):
    """Advisory secondary opening geometry for the first casement."""
    glass_left: float
    glass_right: float
    opening_left: float
    opening_right: float
    opening_width: float
    left_tier: AlignmentTier
    right_tier: AlignmentTier
