from __future__ import annotations

import re
from typing import Dict, Mapping, Optional, Tuple

from .glyphs import GlyphBitmap
from .layout import SpacingOverrides, resolve_advance

SPACE_ENTRY_RE = re.compile(r'\[(\d+), "(.*?)"\](?=, \[\d|$)')


def group_by_advance(
    characters: str,
    glyphs: Mapping[str, GlyphBitmap],
    overrides: Optional[SpacingOverrides] = None,
) -> Dict[int, str]:
    """Map each advance width to the characters that use it, widths ascending."""
    buckets: Dict[int, str] = {}
    seen = set()
    for character in characters:
        glyph = glyphs.get(character)
        if glyph is None or character in seen:
            continue
        seen.add(character)
        advance = resolve_advance(overrides, character, glyph)
        buckets[advance] = buckets.get(advance, "") + character
    return {advance: buckets[advance] for advance in sorted(buckets)}


def format_descriptor(width: int, height: int, groups: Mapping[int, str]) -> str:
    """Render config.txt. ``width`` is the atlas cell width, not the strip width."""
    entries = ", ".join(f'[{advance}, "{chars}"]' for advance, chars in groups.items())
    return f"width: {width}\nheight: {height}\nspace info: [{entries}]"


def parse_descriptor(text: str) -> Tuple[int, int, Dict[int, str]]:
    lines = text.strip().splitlines()
    if len(lines) != 3:
        raise ValueError(f"Expected 3 descriptor lines, got {len(lines)}")

    values = {}
    for line, key in zip(lines, ("width", "height", "space info")):
        prefix = f"{key}: "
        if not line.startswith(prefix):
            raise ValueError(f"Expected {key!r} line, got {line!r}")
        values[key] = line[len(prefix):]

    space_info = values["space info"]
    if not (space_info.startswith("[") and space_info.endswith("]")):
        raise ValueError(f"Malformed space info: {space_info!r}")

    entries = space_info[1:-1]
    matches = list(SPACE_ENTRY_RE.finditer(entries))
    if ", ".join(match.group(0) for match in matches) != entries:
        raise ValueError(f"Malformed space info: {space_info!r}")

    groups: Dict[int, str] = {}
    for match in matches:
        groups[int(match.group(1))] = match.group(2)
    return int(values["width"]), int(values["height"]), groups
