from __future__ import annotations

import json
from pathlib import Path

import pytest

from sprite_font import cli, config


def run_cli(capsys, argv):
    code = cli.main(argv)
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_load_command(scenario_dir: Path, capsys) -> None:
    code, out, _ = run_cli(capsys, ["load", "--directory", str(scenario_dir), "--characters", "01"])

    assert code == 0
    data = json.loads(out)
    assert data["maxWidth"] == 10
    assert [c["character"] for c in data["characters"]] == ["0", "1"]


def test_generate_command(scenario_dir: Path, tmp_path: Path, capsys) -> None:
    output = tmp_path / "out" / "font.png"
    code, out, _ = run_cli(
        capsys,
        [
            "generate",
            "--directory", str(scenario_dir),
            "--characters", "01,.",
            "--bottom-padding", "2",
            "--spacing", "1=9",
            "--output", str(output),
        ],
    )

    assert code == 0
    data = json.loads(out)
    assert (data["spriteWidth"], data["spriteHeight"]) == (40, 14)
    assert '[9, "1"]' in data["configData"]
    assert output.exists()
    assert (output.parent / "config.txt").exists()


def test_preview_command_with_spacing_file(scenario_dir: Path, tmp_path: Path, capsys) -> None:
    spacing_file = tmp_path / "spacing.json"
    spacing_file.write_text(json.dumps({"0": 6, "1": 4}))
    output = tmp_path / "preview.png"

    code, out, _ = run_cli(
        capsys,
        [
            "preview",
            "--directory", str(scenario_dir),
            "--characters", "01",
            "--spacing-file", str(spacing_file),
            "--spacing", "1=7",
            "--output", str(output),
        ],
    )

    assert code == 0
    data = json.loads(out)
    assert data["width"] == 13
    assert data["previewBase64"].startswith("data:image/png;base64,")
    assert output.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_defaults_come_from_environment(scenario_dir: Path, monkeypatch, capsys) -> None:
    monkeypatch.setenv("SPRITE_FONT_CHARACTERS", "0,")
    monkeypatch.setenv("SPRITE_FONT_BOTTOM_PADDING", "3")

    code, out, _ = run_cli(capsys, ["preview", "--directory", str(scenario_dir)])

    assert code == 0
    data = json.loads(out)
    assert (data["width"], data["height"]) == (14, 15)


def test_errors_exit_nonzero(tmp_path: Path, capsys) -> None:
    code, out, err = run_cli(capsys, ["load", "--directory", str(tmp_path / "missing")])

    assert code == 1
    assert out == ""
    assert "Directory does not exist" in err


def test_missing_glyph_reported(scenario_dir: Path, capsys) -> None:
    code, _, err = run_cli(capsys, ["load", "--directory", str(scenario_dir), "--characters", "0q"])

    assert code == 1
    assert "character: q" in err


def test_parse_spacing_value() -> None:
    assert config.parse_spacing_value("1=6") == ("1", 6)
    assert config.parse_spacing_value("==3") == ("=", 3)


@pytest.mark.parametrize("value", ["16", "ab=3", "1=x", "1=-2", "=4"])
def test_parse_spacing_value_rejects(value: str) -> None:
    with pytest.raises(ValueError):
        config.parse_spacing_value(value)


def test_env_int(monkeypatch) -> None:
    assert config.env_int("SPRITE_FONT_BOTTOM_PADDING", 5) == 5
    monkeypatch.setenv("SPRITE_FONT_BOTTOM_PADDING", "two")
    with pytest.raises(ValueError, match="SPRITE_FONT_BOTTOM_PADDING"):
        config.env_int("SPRITE_FONT_BOTTOM_PADDING", 0)


def test_spacing_file_must_be_object(tmp_path: Path) -> None:
    path = tmp_path / "spacing.json"
    path.write_text("[1, 2]")

    with pytest.raises(ValueError):
        config.load_spacing_file(path)
