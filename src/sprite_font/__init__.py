"""Assemble sprite-font texture strips from per-character glyph images."""

from __future__ import annotations

from .compose import AtlasResult, PreviewResult, generate_atlas, generate_preview
from .errors import (
    DecodeError,
    DirectoryNotFound,
    EncodeError,
    MissingGlyph,
    NoGlyphsFound,
    PersistError,
    SpriteFontError,
)
from .glyphs import CharacterInfo, GlyphBitmap, GlyphSet, MissingPolicy, load_glyph_set, load_glyphs

__all__ = [
    "AtlasResult",
    "CharacterInfo",
    "DecodeError",
    "DirectoryNotFound",
    "EncodeError",
    "GlyphBitmap",
    "GlyphSet",
    "MissingGlyph",
    "MissingPolicy",
    "NoGlyphsFound",
    "PersistError",
    "PreviewResult",
    "SpriteFontError",
    "generate_atlas",
    "generate_preview",
    "load_glyph_set",
    "load_glyphs",
]
