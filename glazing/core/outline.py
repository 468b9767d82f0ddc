"""Outline paths for the liner, sash, glass and opening profiles."""

from __future__ import annotations
from typing import TYPE_CHECKING

from glazing.models.drawing import OutlinePath, OutlineSet, PathCommand

if TYPE_CHECKING:
    from glazing.models.design import SecondaryGlazingDesign


def h(dx: float) -> PathCommand:
    return PathCommand(op="h", args=(dx,))


def v(dy: float) -> PathCommand:
    return PathCommand(op="v", args=(dy,))


def line(dx: float, dy: float) -> PathCommand:
    return PathCommand(op="l", args=(dx, dy))


def move(x: float, y: float) -> PathCommand:
    return PathCommand(op="M", args=(x, y))


CLOSE = PathCommand(op="z")


def rect(width: float, height: float) -> list[PathCommand]:
    return [h(width), v(height), h(-width), v(-height)]


class OutlineBuilder:
    """
    Traces each profile of a design as relative moves.

    No new dimensions are derived here; every length comes from the design.
    """

    def __init__(self, design: SecondaryGlazingDesign) -> None:
        self.design = design

    def build(self) -> OutlineSet:
        return OutlineSet(
            liner_horizontal=self.liner_horizontal(),
            sash_vertical=self.sash_vertical(),
            sash_horizontal=self.sash_horizontal(),
            glass=self.glass(),
            opening=self.opening(),
        )

    def liner_horizontal(self) -> OutlinePath:
        """Face of the head/sill liner with housings for each vertical liner."""
        d = self.design
        t = d.material_liner_thickness

        if d.has_jamb_face:
            right_jamb = [v(t), h(-(d.jamb_width - t)), v(-t / 2)]
            left_jamb = [v(t / 2), h(-(d.jamb_width - t)), v(-t)]
        else:
            right_jamb = [v(t / 2)]
            left_jamb = [v(-t / 2)]

        commands = [
            move(0, 0),
            h(d.survey.width),
            *right_jamb,
            h(-t),
            v(t / 2),
            *self._liner_casements(),
            v(-t / 2),
            h(-t),
            *left_jamb,
            CLOSE,
        ]
        return OutlinePath(commands=commands)

    def _liner_casements(self) -> list[PathCommand]:
        """Right to left across the casements, housing both liners at each mullion."""
        d = self.design
        t = d.material_liner_thickness
        commands: list[PathCommand] = []
        for i in range(d.casement_count):
            commands.append(h(-d.opening_width))
            if i != d.casement_count - 1:
                commands += [
                    v(-t / 2), h(-t), v(t / 2),
                    h(-(d.mullion_width - 2 * t)),
                    v(-t / 2), h(-t), v(t / 2),
                ]
        return commands

    def sash_vertical(self) -> OutlinePath:
        """Stile with tenons at each end and the rebate mitred at 45 degrees."""
        d = self.design
        tenon = d.tenon_dimension
        rebate = d.rebate_height
        commands = [
            move(0, 0),
            h(tenon),
            v(tenon),
            line(rebate, rebate),
            v(d.sash_height - 2 * d.material_sash_thickness),
            line(-rebate, rebate),
            v(tenon),
            h(-tenon),
            v(-d.sash_height),
            CLOSE,
        ]
        return OutlinePath(commands=commands)

    def sash_horizontal(self) -> OutlinePath:
        """Rail: the stile profile turned through a right angle."""
        d = self.design
        tenon = d.tenon_dimension
        rebate = d.rebate_height
        commands = [
            move(0, 0),
            h(d.sash_width),
            v(tenon),
            h(-tenon),
            line(-rebate, rebate),
            h(-(d.sash_width - 2 * d.material_sash_thickness)),
            line(-rebate, -rebate),
            h(-tenon),
            v(-tenon),
            CLOSE,
        ]
        return OutlinePath(commands=commands)

    def glass(self) -> OutlinePath:
        d = self.design
        offset = d.tenon_dimension + d.glass_gap
        return OutlinePath(commands=[move(offset, offset), *rect(d.glass_width, d.glass_height), CLOSE])

    def opening(self) -> OutlinePath:
        d = self.design
        return OutlinePath(commands=[move(0, 0), *rect(d.opening_width, d.opening_height), CLOSE])
