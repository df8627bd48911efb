from __future__ import annotations

import pytest
from PIL import Image

from sprite_font.descriptor import format_descriptor, group_by_advance, parse_descriptor
from sprite_font.glyphs import GlyphBitmap


@pytest.fixture
def glyphs():
    sizes = {"0": (10, 12), "1": (8, 12), ",": (4, 6), ".": (4, 4)}
    return {c: GlyphBitmap(c, Image.new("RGBA", size)) for c, size in sizes.items()}


def test_groups_by_intrinsic_width_sorted(glyphs) -> None:
    assert group_by_advance("01,.", glyphs) == {4: ",.", 8: "1", 10: "0"}
    assert list(group_by_advance(".,10", glyphs)) == [4, 8, 10]


def test_overrides_move_characters_between_groups(glyphs) -> None:
    groups = group_by_advance("01,.", glyphs, {"1": 10, ".": 3})

    assert groups == {3: ".", 4: ",", 10: "01"}


def test_unresolved_and_repeated_characters(glyphs) -> None:
    assert group_by_advance("0x0", glyphs) == {10: "0"}


def test_format_matches_config_layout() -> None:
    text = format_descriptor(10, 14, {4: ",.", 8: "1", 10: "0"})

    assert text == 'width: 10\nheight: 14\nspace info: [[4, ",."], [8, "1"], [10, "0"]]'


def test_format_empty_groups() -> None:
    assert format_descriptor(0, 2, {}) == "width: 0\nheight: 2\nspace info: []"


def test_parse_reads_back_formatted_text() -> None:
    groups = {4: ",.", 6: '"]', 10: "0"}

    assert parse_descriptor(format_descriptor(10, 14, groups)) == (10, 14, groups)


@pytest.mark.parametrize(
    "text",
    [
        "width: 10\nheight: 14",
        "height: 14\nwidth: 10\nspace info: []",
        "width: ten\nheight: 14\nspace info: []",
        "width: 10\nheight: 14\nspace info: [[4, \",\"]",
    ],
)
def test_parse_rejects_malformed_text(text: str) -> None:
    with pytest.raises(ValueError):
        parse_descriptor(text)
