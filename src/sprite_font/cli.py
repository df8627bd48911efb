"""CLI entry point for building sprite-font strips."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from . import config
from .compose import generate_atlas, generate_preview
from .errors import SpriteFontError
from .glyphs import load_glyph_set

logger = logging.getLogger(__name__)


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--directory",
        required=True,
        help="Directory holding one <character>.png per glyph.",
    )
    parser.add_argument(
        "--characters",
        default=config.default_characters(),
        help="Characters to include, in strip order.",
    )


def add_spacing_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--spacing",
        action="append",
        default=[],
        metavar="CHAR=WIDTH",
        help="Advance width override for one character. May be repeated.",
    )
    parser.add_argument(
        "--spacing-file",
        help="JSON object mapping characters to advance widths.",
    )
    parser.add_argument(
        "--bottom-padding",
        type=int,
        default=config.default_bottom_padding(),
        help="Transparent rows reserved below the baseline.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sprite-font",
        description="Assemble sprite-font strips from per-character glyph images.",
    )
    parser.add_argument(
        "--log-level",
        default=config.default_log_level(),
        help="Logging level for diagnostics on stderr.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    load_parser = subparsers.add_parser("load", help="Report glyph dimensions.")
    add_common_arguments(load_parser)

    generate_parser = subparsers.add_parser("generate", help="Write the sprite strip and config.txt.")
    add_common_arguments(generate_parser)
    add_spacing_arguments(generate_parser)
    generate_parser.add_argument(
        "--output",
        required=True,
        help="Path of the PNG to write. config.txt is written beside it.",
    )

    preview_parser = subparsers.add_parser("preview", help="Render a packed preview strip.")
    add_common_arguments(preview_parser)
    add_spacing_arguments(preview_parser)
    preview_parser.add_argument(
        "--output",
        help="Optionally write the preview PNG to this path.",
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def run(args: argparse.Namespace) -> Dict[str, Any]:
    directory = Path(args.directory).expanduser()

    if args.command == "load":
        return load_glyph_set(directory, args.characters).to_dict()

    spacing_file = Path(args.spacing_file).expanduser() if args.spacing_file else None
    overrides = config.build_overrides(spacing_file, args.spacing)
    if args.bottom_padding < 0:
        raise ValueError(f"--bottom-padding must not be negative, got {args.bottom_padding}")

    if args.command == "generate":
        result = generate_atlas(
            directory,
            args.characters,
            overrides,
            args.bottom_padding,
            Path(args.output).expanduser(),
        )
        return result.to_dict()

    preview = generate_preview(directory, args.characters, overrides, args.bottom_padding)
    summary = preview.to_dict()
    if args.output:
        output_path = Path(args.output).expanduser()
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(preview.png_bytes)
        logger.info("wrote preview to %s", output_path)
        summary["outputPath"] = str(output_path)
    return summary


def main(argv: Optional[List[str]] = None) -> int:
    """Run one sprite-font command and print its JSON summary."""
    config.load_environment()
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        summary = run(args)
    except (SpriteFontError, ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(summary))
    return 0


if __name__ == "__main__":
    sys.exit(main())
