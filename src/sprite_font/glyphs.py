from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from PIL import Image

from .errors import DecodeError, DirectoryNotFound, MissingGlyph

logger = logging.getLogger(__name__)


class MissingPolicy(enum.Enum):
    FAIL = "fail"
    SKIP = "skip"


@dataclass(frozen=True)
class GlyphBitmap:
    character: str
    image: Image.Image

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height


@dataclass
class CharacterInfo:
    character: str
    width: int
    height: int
    spacing: int
    offset_y: int = 0

    @classmethod
    def from_glyph(cls, glyph: GlyphBitmap) -> CharacterInfo:
        return cls(
            character=glyph.character,
            width=glyph.width,
            height=glyph.height,
            spacing=glyph.width,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "character": self.character,
            "width": self.width,
            "height": self.height,
            "spacing": self.spacing,
            "offsetY": self.offset_y,
        }


@dataclass
class GlyphSet:
    characters: List[CharacterInfo] = field(default_factory=list)
    max_width: int = 0
    max_height: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "characters": [info.to_dict() for info in self.characters],
            "maxWidth": self.max_width,
            "maxHeight": self.max_height,
        }


def glyph_path(directory: Path, character: str) -> Path:
    return Path(directory) / f"{character}.png"


def decode_glyph(path: Path, character: str) -> GlyphBitmap:
    """Decode one glyph file into an RGBA bitmap."""
    try:
        with Image.open(path) as image:
            rgba = image.convert("RGBA")
    except (OSError, ValueError, Image.DecompressionBombError) as exc:
        raise DecodeError(character, exc) from exc
    return GlyphBitmap(character=character, image=rgba)


def load_glyphs(
    directory: Path,
    characters: str,
    missing: MissingPolicy = MissingPolicy.FAIL,
) -> Dict[str, GlyphBitmap]:
    """Resolve and decode the glyph for every character in ``characters``.

    Repeated characters are decoded once. Under ``MissingPolicy.SKIP`` a
    character without a file is left out of the result instead of raising
    ``MissingGlyph``; decode failures raise ``DecodeError`` under either
    policy.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise DirectoryNotFound(directory)

    glyphs: Dict[str, GlyphBitmap] = {}
    for character in characters:
        if character in glyphs:
            continue
        path = glyph_path(directory, character)
        if not path.is_file():
            if missing is MissingPolicy.SKIP:
                logger.debug("skipping %r: %s not found", character, path)
                continue
            raise MissingGlyph(character)
        glyph = decode_glyph(path, character)
        logger.debug("loaded %r from %s (%dx%d)", character, path, glyph.width, glyph.height)
        glyphs[character] = glyph
    return glyphs


def load_glyph_set(directory: Path, characters: str) -> GlyphSet:
    glyphs = load_glyphs(directory, characters)
    glyph_set = GlyphSet()
    for character in characters:
        glyph = glyphs[character]
        glyph_set.characters.append(CharacterInfo.from_glyph(glyph))
        glyph_set.max_width = max(glyph_set.max_width, glyph.width)
        glyph_set.max_height = max(glyph_set.max_height, glyph.height)
    return glyph_set
