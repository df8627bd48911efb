"""Glyph placement for the fixed-cell atlas and the packed preview strip."""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

from .errors import MissingGlyph, NoGlyphsFound
from .glyphs import GlyphBitmap

SpacingOverrides = Mapping[str, int]

DIGITS = frozenset(string.digits)


@dataclass(frozen=True)
class Placement:
    character: str
    glyph: GlyphBitmap
    x: int
    y: int
    copy_width: int
    advance: int

    @property
    def bottom(self) -> int:
        return self.y + self.glyph.height


@dataclass
class LayoutPlan:
    width: int
    height: int
    cell_width: int
    digit_max_height: int
    placements: List[Placement] = field(default_factory=list)


def resolve_advance(overrides: Optional[SpacingOverrides], character: str, glyph: GlyphBitmap) -> int:
    advance = overrides.get(character) if overrides else None
    if advance is None:
        return glyph.width
    return int(advance)


def digit_max_height(characters: str, glyphs: Mapping[str, GlyphBitmap]) -> int:
    heights = [glyphs[c].height for c in characters if c in DIGITS and c in glyphs]
    return max(heights, default=0)


def vertical_origin(
    character: str,
    height: int,
    canvas_height: int,
    bottom_padding: int,
    digit_height: int,
) -> int:
    """Top edge of a glyph inside the strip.

    The comma keeps its own descender and sits on the canvas bottom, the
    period sits on the baseline above the padding band, and every other
    glyph is centered inside the digit-height band.
    """
    if character == ",":
        return canvas_height - height
    if character == ".":
        return canvas_height - bottom_padding - height
    # Glyphs taller than the tallest digit get no offset.
    center_offset = max(digit_height - height, 0) // 2
    return canvas_height - bottom_padding - height - center_offset


def atlas_layout(
    characters: str,
    glyphs: Mapping[str, GlyphBitmap],
    bottom_padding: int,
    overrides: Optional[SpacingOverrides] = None,
) -> LayoutPlan:
    for character in characters:
        if character not in glyphs:
            raise MissingGlyph(character)

    cell_width = max((glyphs[c].width for c in characters), default=0)
    digit_height = digit_max_height(characters, glyphs)
    plan = LayoutPlan(
        width=cell_width * len(characters),
        height=digit_height + bottom_padding,
        cell_width=cell_width,
        digit_max_height=digit_height,
    )

    for index, character in enumerate(characters):
        glyph = glyphs[character]
        plan.placements.append(
            Placement(
                character=character,
                glyph=glyph,
                x=index * cell_width,
                y=vertical_origin(character, glyph.height, plan.height, bottom_padding, digit_height),
                copy_width=glyph.width,
                advance=resolve_advance(overrides, character, glyph),
            )
        )
    return plan


def preview_layout(
    characters: str,
    glyphs: Mapping[str, GlyphBitmap],
    bottom_padding: int,
    overrides: Optional[SpacingOverrides] = None,
) -> LayoutPlan:
    """Pack resolved glyphs left to right by their advance widths.

    Characters without a glyph are skipped. When an advance is narrower
    than its glyph only the glyph's leftmost ``advance`` columns are copied.
    """
    resolved = [c for c in characters if c in glyphs]
    if not resolved:
        raise NoGlyphsFound()

    digit_height = digit_max_height(characters, glyphs)
    height = digit_height + bottom_padding
    advances: Dict[str, int] = {c: resolve_advance(overrides, c, glyphs[c]) for c in resolved}

    plan = LayoutPlan(
        width=sum(advances[c] for c in resolved),
        height=height,
        cell_width=max(glyph.width for glyph in glyphs.values()),
        digit_max_height=digit_height,
    )

    x = 0
    for character in resolved:
        glyph = glyphs[character]
        advance = advances[character]
        plan.placements.append(
            Placement(
                character=character,
                glyph=glyph,
                x=x,
                y=vertical_origin(character, glyph.height, height, bottom_padding, digit_height),
                copy_width=min(advance, glyph.width),
                advance=advance,
            )
        )
        x += advance
    return plan
