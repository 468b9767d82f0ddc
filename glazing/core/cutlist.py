"""Cut list generation: every piece of timber, glass and hardware for a design."""

from __future__ import annotations
from typing import TYPE_CHECKING

from glazing.models.parts import Part, PartType

if TYPE_CHECKING:
    from glazing.models.design import SecondaryGlazingDesign


def build_parts(design: SecondaryGlazingDesign) -> list[Part]:
    """
    Ordered cut list for a design.

    Casement pieces come in pairs (top + bottom, left + right), so most
    counts are twice the casement count. Every casement is screened: the
    secondary casements meet without a seal between them.
    """
    d = design
    casement_count = d.casement_count
    count = 2 * casement_count
    screened_count = 2 * casement_count

    lt = d.material_liner_thickness
    liner_length = d.survey.height - lt

    parts: list[Part] = [
        Part(
            count=2,
            name=PartType.LINER_HORIZONTAL,
            dimensions=(lt, d.material_liner_depth, d.survey.width),
            notes="Cut recesses for the mullion or jamb faces"
            if (d.has_jamb_face or d.has_mullion_face) else "",
        ),
    ]
    parts.extend(_vertical_liners(d, count, liner_length))

    if d.has_jamb_face:
        parts.append(Part(count=2, name=PartType.JAMB,
                          dimensions=(lt, d.jamb_width, liner_length)))
    if d.has_mullion_face:
        parts.append(Part(count=d.mullion_count, name=PartType.MULLION,
                          dimensions=(lt, d.mullion_width, liner_length)))

    sash = d.material_sash_thickness
    parts += [
        Part(count=count, name=PartType.SASH_HORIZONTAL,
             dimensions=(sash, sash, d.sash_width)),
        Part(count=count, name=PartType.SASH_VERTICAL,
             dimensions=(sash, sash, d.sash_height)),
        Part(count=count, name=PartType.MOULDING_HORIZONTAL,
             dimensions=(d.material_moulding_height, d.material_moulding_depth, d.moulding_horizontal)),
        Part(count=count, name=PartType.MOULDING_VERTICAL,
             dimensions=(d.material_moulding_height, d.material_moulding_depth, d.moulding_vertical)),
        Part(count=count, name=PartType.STOP_HORIZONTAL,
             dimensions=(d.material_stop_short, d.material_stop_long, d.stop_horizontal)),
        Part(count=count, name=PartType.STOP_VERTICAL,
             dimensions=(d.material_stop_short, d.material_stop_long, d.stop_vertical)),
        Part(count=screened_count, name=PartType.SCREEN_STOP_HORIZONTAL,
             dimensions=(d.material_stop_short, d.material_stop_long, d.screen_stop_horizontal)),
        Part(count=screened_count, name=PartType.SCREEN_STOP_VERTICAL,
             dimensions=(d.material_stop_short, d.material_stop_long, d.screen_stop_vertical)),
        Part(count=screened_count, name=PartType.SCREEN_HORIZONTAL,
             dimensions=(d.material_screen_short, d.material_screen_long, d.screen_width)),
        Part(count=screened_count, name=PartType.SCREEN_VERTICAL,
             dimensions=(d.material_screen_short, d.material_screen_long, d.screen_height)),
        Part(count=casement_count, name=PartType.GLASS,
             dimensions=(d.glass_width, d.glass_height, d.material_glass_thickness)),
        Part(count=count, name=PartType.HINGE),
        Part(count=casement_count, name=PartType.FASTENER),
    ]
    return parts


def _vertical_liners(d: SecondaryGlazingDesign, count: int, length: float) -> list[Part]:
    """
    Vertical liners, relieved by a liner thickness where a face piece covers them.

    When the jamb and the mullions disagree about having a face, the end
    liners and the mullion liners need different depths.
    """
    lt = d.material_liner_thickness

    def depth(has_face: bool) -> float:
        return d.material_liner_depth - (lt if has_face else 0)

    if d.has_jamb_face == d.has_mullion_face:
        return [Part(
            count=count,
            name=PartType.LINER_VERTICAL,
            dimensions=(lt, depth(d.has_mullion_face), length),
            notes="Sized to allow the mullion & jamb faces" if d.has_mullion_face else "",
        )]
    return [
        Part(
            count=2,
            name=PartType.LINER_VERTICAL_JAMB,
            dimensions=(lt, depth(d.has_jamb_face), length),
            notes="Sized to allow the jamb faces" if d.has_jamb_face else "",
        ),
        Part(
            count=max(count - 2, 0),
            name=PartType.LINER_VERTICAL_MULLION,
            dimensions=(lt, depth(d.has_mullion_face), length),
            notes="Sized to allow the mullion faces" if d.has_mullion_face else "",
        ),
    ]
