from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Tuple

import pytest
from PIL import Image

# Size and fill color of each glyph in the reference set.
SCENARIO_GLYPHS: Dict[str, Tuple[int, int, Tuple[int, int, int, int]]] = {
    "0": (10, 12, (255, 0, 0, 255)),
    "1": (8, 12, (0, 255, 0, 255)),
    ",": (4, 6, (0, 0, 255, 255)),
    ".": (4, 4, (255, 255, 0, 255)),
}

GlyphWriter = Callable[[str, int, int, Tuple[int, int, int, int]], Path]


@pytest.fixture
def glyph_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "glyphs"
    directory.mkdir()
    return directory


@pytest.fixture
def write_glyph(glyph_dir: Path) -> GlyphWriter:
    def _write(character: str, width: int, height: int, color=(255, 255, 255, 255)) -> Path:
        path = glyph_dir / f"{character}.png"
        Image.new("RGBA", (width, height), color=color).save(path, format="PNG")
        return path

    return _write


@pytest.fixture
def scenario_dir(glyph_dir: Path, write_glyph: GlyphWriter) -> Path:
    for character, (width, height, color) in SCENARIO_GLYPHS.items():
        write_glyph(character, width, height, color)
    return glyph_dir


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("SPRITE_FONT_CHARACTERS", "SPRITE_FONT_BOTTOM_PADDING", "SPRITE_FONT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
