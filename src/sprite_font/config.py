"""Environment-backed defaults for the command line interface."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict, Iterable, Optional

from dotenv import load_dotenv

DEFAULT_CHARACTERS = "0123456789,."
DEFAULT_BOTTOM_PADDING = 0
DEFAULT_LOG_LEVEL = "WARNING"


def load_environment(dotenv_path: Optional[Path] = None) -> None:
    load_dotenv(dotenv_path)


def env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def default_characters() -> str:
    return os.environ.get("SPRITE_FONT_CHARACTERS") or DEFAULT_CHARACTERS


def default_bottom_padding() -> int:
    return env_int("SPRITE_FONT_BOTTOM_PADDING", DEFAULT_BOTTOM_PADDING)


def default_log_level() -> str:
    return (os.environ.get("SPRITE_FONT_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()


def parse_spacing_value(value: str) -> tuple[str, int]:
    """Parse one ``CHAR=WIDTH`` override. The character may itself be ``=``."""
    character, sep, width = value.rpartition("=")
    if not sep or len(character) != 1:
        raise ValueError(f"Expected CHAR=WIDTH with a single character, got {value!r}")
    try:
        advance = int(width)
    except ValueError:
        raise ValueError(f"Invalid width in spacing override {value!r}") from None
    if advance < 0:
        raise ValueError(f"Spacing width must not be negative: {value!r}")
    return character, advance


def load_spacing_file(path: Path) -> Dict[str, int]:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Unexpected spacing format in {path}")
    overrides: Dict[str, int] = {}
    for character, advance in data.items():
        if len(character) != 1 or isinstance(advance, bool) or not isinstance(advance, int) or advance < 0:
            raise ValueError(f"Invalid spacing entry {character!r}: {advance!r} in {path}")
        overrides[character] = advance
    return overrides


def build_overrides(spacing_file: Optional[Path], values: Iterable[str]) -> Dict[str, int]:
    overrides: Dict[str, int] = {}
    if spacing_file is not None:
        overrides.update(load_spacing_file(spacing_file))
    for value in values:
        character, advance = parse_spacing_value(value)
        overrides[character] = advance
    return overrides
