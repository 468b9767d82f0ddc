"""Bill of materials models."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel


class PartType(str, Enum):
    LINER_HORIZONTAL = "Liner (Horizontal)"
    LINER_VERTICAL = "Liner (Vertical)"
    LINER_VERTICAL_JAMB = "Liner (Vertical, Jamb)"
    LINER_VERTICAL_MULLION = "Liner (Vertical, Mullion)"
    JAMB = "jamb"
    MULLION = "mullion"
    SASH_HORIZONTAL = "Sash (Horizontal)"
    SASH_VERTICAL = "Sash (Vertical)"
    MOULDING_HORIZONTAL = "Moulding (Horizontal)"
    MOULDING_VERTICAL = "Moulding (Vertical)"
    STOP_HORIZONTAL = "Stop (Horizontal)"
    STOP_VERTICAL = "Stop (Vertical)"
    SCREEN_STOP_HORIZONTAL = "Screen Stop (Horizontal)"
    SCREEN_STOP_VERTICAL = "Screen Stop (Vertical)"
    SCREEN_HORIZONTAL = "Screen (Horizontal)"
    SCREEN_VERTICAL = "Screen (Vertical)"
    GLASS = "Glass"
    HINGE = "Hinge"
    FASTENER = "Fastener"


HARDWARE = (PartType.HINGE, PartType.FASTENER)


class Part(BaseModel):
    """One line of the cut list."""
    count: int
    name: PartType
    dimensions: tuple[float, float, float] | None = None  # Section x section x length (mm)
    notes: str = ""


class CutListStats(BaseModel):
    """Summary statistics for a cut list."""
    total_pieces: int = 0
    timber_pieces: int = 0
    glass_panes: int = 0
    hardware: int = 0
    timber_length: float = 0  # Sum of all timber lengths (mm)

    @classmethod
    def from_parts(cls, parts: list[Part]) -> CutListStats:
        timber = [p for p in parts if p.name != PartType.GLASS and p.name not in HARDWARE]
        return cls(
            total_pieces=sum(p.count for p in parts),
            timber_pieces=sum(p.count for p in timber),
            glass_panes=sum(p.count for p in parts if p.name == PartType.GLASS),
            hardware=sum(p.count for p in parts if p.name in HARDWARE),
            timber_length=sum(p.count * p.dimensions[2] for p in timber if p.dimensions),
        )


class CutList(BaseModel):
    """The complete bill of materials for a design."""
    parts: list[Part]
    stats: CutListStats = None  # type: ignore[assignment]

    def model_post_init(self, __context: object) -> None:
        if self.stats is None:
            self.stats = CutListStats.from_parts(self.parts)
