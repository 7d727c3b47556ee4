"""Tests for the hueforge-theme command-line tool."""

from __future__ import annotations

from pathlib import Path

import pytest

from hueforge.scripts import theme_tool
from hueforge.services.loader import write_theme
from hueforge.theme.codec import render
from hueforge.theme.models import ThemeVariant


@pytest.fixture(autouse=True)
def _isolate(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(theme_tool, "setup_logging", lambda *args, **kwargs: None)
    for name in ("HUEFORGE_THEME", "HUEFORGE_FORMAT", "HUEFORGE_THEME_DIRS", "HUEFORGE_DEBUG_LOGGING"):
        monkeypatch.delenv(name, raising=False)


def _run(tmp_path: Path, *argv: str) -> int:
    return theme_tool.main(["--settings", str(tmp_path / "settings.json"), *argv])


def test_list_includes_builtin_and_directory_themes(
    tmp_path: Path, ocean_variant: ThemeVariant, capsys: pytest.CaptureFixture[str]
) -> None:
    themes = tmp_path / "themes"
    write_theme(ocean_variant, themes / "ocean.json")

    assert _run(tmp_path, "list", "--theme-dir", str(themes)) == 0

    names = [line.split("\t")[0] for line in capsys.readouterr().out.splitlines()]
    assert names == ["Hueforge Dark", "Hueforge Light", "Ocean"]


def test_list_filters_by_appearance(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(tmp_path, "list", "--appearance", "light") == 0

    assert capsys.readouterr().out.splitlines() == ["Hueforge Light\tlight\tHueforge"]


def test_show_prints_resolved_tokens(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(tmp_path, "show", "Hueforge Light") == 0

    lines = capsys.readouterr().out.splitlines()
    assert "* background: #FFFFFFFF" in lines
    assert any(line.startswith("  text: #") for line in lines)


def test_show_unknown_theme_fails(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(tmp_path, "show", "Nope") == 1

    assert "unknown theme 'Nope'" in capsys.readouterr().err


def test_validate_reports_each_file(
    tmp_path: Path, ocean_variant: ThemeVariant, capsys: pytest.CaptureFixture[str]
) -> None:
    good = write_theme(ocean_variant, tmp_path / "ocean.json")
    bad = tmp_path / "bad.json"
    bad.write_text('{"name": "Bad", "author": "Ada", "appearance": "dim"}', encoding="utf-8")

    assert _run(tmp_path, "validate", str(good)) == 0
    assert _run(tmp_path, "validate", str(good), str(bad), str(tmp_path / "missing.json")) == 1

    captured = capsys.readouterr()
    assert f"ok: {good}" in captured.out
    assert f"error: {bad}" in captured.err
    assert "missing.json" in captured.err


def test_render_converts_between_formats(
    tmp_path: Path, ocean_variant: ThemeVariant, capsys: pytest.CaptureFixture[str]
) -> None:
    path = write_theme(ocean_variant, tmp_path / "ocean.json")

    assert _run(tmp_path, "render", str(path), "--format", "yaml") == 0
    assert capsys.readouterr().out == render(ocean_variant, format="yaml")

    assert _run(tmp_path, "render", str(path)) == 0
    assert capsys.readouterr().out == path.read_text(encoding="utf-8")

    assert _run(tmp_path, "render", str(path), "--format", "toml") == 0
    assert capsys.readouterr().out == render(ocean_variant, format="toml")


def test_render_missing_file_fails(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(tmp_path, "render", str(tmp_path / "missing.json")) == 1

    assert capsys.readouterr().err.startswith("error:")
