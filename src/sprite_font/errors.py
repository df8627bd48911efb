"""Error types raised by the loader, layout engine and compositors."""

from __future__ import annotations

from pathlib import Path


class SpriteFontError(Exception):
    """Base class for every failure reported to callers."""


class MissingGlyph(SpriteFontError):
    def __init__(self, character: str | None, message: str | None = None) -> None:
        self.character = character
        super().__init__(message or f"Image not found for character: {character}")


class DirectoryNotFound(MissingGlyph):
    def __init__(self, directory: Path) -> None:
        self.directory = directory
        super().__init__(None, f"Directory does not exist: {directory}")


class DecodeError(SpriteFontError):
    def __init__(self, character: str, cause: BaseException) -> None:
        self.character = character
        self.cause = cause
        super().__init__(f"Failed to load image for {character!r}: {cause}")


class NoGlyphsFound(SpriteFontError):
    def __init__(self) -> None:
        super().__init__("No valid character images found")


class PersistError(SpriteFontError):
    def __init__(self, cause: BaseException, message: str = "Failed to save sprite font") -> None:
        self.cause = cause
        super().__init__(f"{message}: {cause}")


class EncodeError(SpriteFontError):
    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"Failed to encode preview: {cause}")
