from __future__ import annotations

import base64
import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from PIL import Image

from .descriptor import format_descriptor, group_by_advance
from .errors import EncodeError, PersistError
from .glyphs import MissingPolicy, load_glyphs
from .layout import LayoutPlan, SpacingOverrides, atlas_layout, preview_layout

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.txt"
TRANSPARENT = (0, 0, 0, 0)

# PIL reports zero-sized canvases as ValueError.
ENCODE_ERRORS = (OSError, ValueError)


@dataclass(frozen=True)
class AtlasResult:
    success: bool
    output_path: Path
    sprite_width: int
    sprite_height: int
    config_text: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "outputPath": str(self.output_path),
            "spriteWidth": self.sprite_width,
            "spriteHeight": self.sprite_height,
            "configData": self.config_text,
        }


@dataclass(frozen=True)
class PreviewResult:
    success: bool
    png_bytes: bytes
    encoded_image: str
    width: int
    height: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "previewBase64": self.encoded_image,
            "width": self.width,
            "height": self.height,
        }


def render_plan(plan: LayoutPlan) -> Image.Image:
    """Copy every placed glyph onto a fresh transparent canvas.

    Pixels overwrite the canvas, alpha included; nothing is blended.
    """
    canvas = Image.new("RGBA", (plan.width, plan.height), color=TRANSPARENT)
    for placement in plan.placements:
        if placement.x >= plan.width:
            continue
        copy_width = min(placement.copy_width, plan.width - placement.x)
        if copy_width <= 0:
            continue
        source = placement.glyph.image
        if copy_width < source.width:
            source = source.crop((0, 0, copy_width, source.height))
        canvas.paste(source, (placement.x, placement.y))
    return canvas


def encode_png(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def encode_data_uri(png_bytes: bytes) -> str:
    return "data:image/png;base64," + base64.b64encode(png_bytes).decode("ascii")


def generate_atlas(
    directory: Path,
    characters: str,
    overrides: Optional[SpacingOverrides],
    bottom_padding: int,
    output_path: Path,
) -> AtlasResult:
    """Build the fixed-cell sprite strip and write it with its ``config.txt``.

    Every character in ``characters`` must have a glyph file. The PNG is
    saved to ``output_path`` (parent directories are created) and the
    spacing descriptor is written next to it. A failure while writing may
    leave either file absent or stale.
    """
    glyphs = load_glyphs(directory, characters, missing=MissingPolicy.FAIL)
    plan = atlas_layout(characters, glyphs, bottom_padding, overrides)
    canvas = render_plan(plan)

    output_path = Path(output_path)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise PersistError(exc, "Failed to create output directory") from exc

    try:
        canvas.save(output_path, format="PNG")
    except ENCODE_ERRORS as exc:
        raise PersistError(exc) from exc
    logger.info("wrote %s (%dx%d)", output_path, plan.width, plan.height)

    config_text = format_descriptor(
        plan.cell_width,
        plan.height,
        group_by_advance(characters, glyphs, overrides),
    )
    config_path = output_path.with_name(CONFIG_FILENAME)
    try:
        config_path.write_text(config_text, encoding="utf-8")
    except OSError as exc:
        raise PersistError(exc, "Failed to save config") from exc
    logger.info("wrote %s", config_path)

    return AtlasResult(
        success=True,
        output_path=output_path,
        sprite_width=plan.width,
        sprite_height=plan.height,
        config_text=config_text,
    )


def generate_preview(
    directory: Path,
    characters: str,
    overrides: Optional[SpacingOverrides],
    bottom_padding: int,
) -> PreviewResult:
    """Render the packed preview strip in memory.

    Characters without a glyph file are skipped; ``NoGlyphsFound`` is raised
    when none resolve. Nothing is written to disk.
    """
    glyphs = load_glyphs(directory, characters, missing=MissingPolicy.SKIP)
    plan = preview_layout(characters, glyphs, bottom_padding, overrides)
    canvas = render_plan(plan)

    try:
        png_bytes = encode_png(canvas)
    except ENCODE_ERRORS as exc:
        raise EncodeError(exc) from exc
    logger.debug("encoded preview %dx%d (%d bytes)", plan.width, plan.height, len(png_bytes))

    return PreviewResult(
        success=True,
        png_bytes=png_bytes,
        encoded_image=encode_data_uri(png_bytes),
        width=plan.width,
        height=plan.height,
    )
