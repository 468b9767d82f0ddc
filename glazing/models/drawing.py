"""Renderer-agnostic drawing output: outline paths and the comparison diagram."""

from __future__ import annotations
from typing import Literal
from pydantic import BaseModel

from .geometry import DiagramRect, Point2D


PathOp = Literal["M", "h", "v", "l", "z"]


def fmt(n: float) -> str:
    return f"{n:.3f}".rstrip("0").rstrip(".")


class PathCommand(BaseModel):
    """
    One step of an outline traversal.

    `M x y` moves to an absolute point; `h dx`, `v dy` and `l dx dy` are
    relative lines; `z` closes the outline.
    """
    op: PathOp
    args: tuple[float, ...] = ()

    def to_svg(self) -> str:
        return " ".join([self.op, *(fmt(a) for a in self.args)])


class OutlinePath(BaseModel):
    """A closed outline as an ordered list of commands."""
    commands: list[PathCommand]

    def to_svg(self) -> str:
        return " ".join(c.to_svg() for c in self.commands)

    def vertices(self) -> list[Point2D]:
        """Absolute positions visited, starting with the initial move."""
        points: list[Point2D] = []
        x = y = 0.0
        for c in self.commands:
            if c.op == "M":
                x, y = c.args
            elif c.op == "h":
                x += c.args[0]
            elif c.op == "v":
                y += c.args[0]
            elif c.op == "l":
                x += c.args[0]
                y += c.args[1]
            else:
                continue
            points.append(Point2D(x=x, y=y))
        return points

    @property
    def is_closed(self) -> bool:
        points = self.vertices()
        if not points:
            return False
        first, last = points[0], points[-1]
        return abs(first.x - last.x) < 1e-9 and abs(first.y - last.y) < 1e-9


class OutlineSet(BaseModel):
    """Outlines for every profile that needs drawing for the workshop."""
    liner_horizontal: OutlinePath
    sash_vertical: OutlinePath
    sash_horizontal: OutlinePath
    glass: OutlinePath
    opening: OutlinePath


class Diagram(BaseModel):
    """The secondary design drawn over bands marking the exterior openings."""
    view_box: tuple[float, float, float, float]  # min-x, min-y, width, height
    secondary: list[DiagramRect]
    primary: list[DiagramRect]
