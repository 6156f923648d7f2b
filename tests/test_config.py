"""Tests for iniread.core.config."""
from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from iniread.core.config import find_repo_config, load_settings
from iniread.core.models import DEFAULT_MAX_LINE_LENGTH


@pytest.fixture(autouse=True)
def _isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults_without_any_config(tmp_path: Path) -> None:
    project = tmp_path / "project"
    project.mkdir()
    loaded = load_settings(project)
    assert loaded.reader.max_line_length == DEFAULT_MAX_LINE_LENGTH
    assert loaded.reader.encoding == "utf-8"
    assert loaded.ui.show_line_numbers is False
    assert loaded.global_path is None
    assert loaded.repo_path is None


def test_repo_config_found_walking_upward(tmp_path: Path) -> None:
    cfg = _write(tmp_path / "project" / ".iniread" / "config.toml", "[reader]\nmax_line_length = 64\n")
    nested = tmp_path / "project" / "a" / "b"
    nested.mkdir(parents=True)
    assert find_repo_config(nested) == cfg.resolve()
    assert load_settings(nested).reader.max_line_length == 64


def test_dotfile_variant(tmp_path: Path) -> None:
    _write(tmp_path / "project" / ".iniread.toml", "[ui]\nshow_line_numbers = true\n")
    loaded = load_settings(tmp_path / "project")
    assert loaded.ui.show_line_numbers is True


def test_precedence(tmp_path: Path, _isolated_home: Path) -> None:
    _write(
        _isolated_home / ".config" / "iniread" / "config.toml",
        '[reader]\nmax_line_length = 32\nencoding = "latin-1"\n',
    )
    _write(tmp_path / "project" / ".iniread.toml", "[reader]\nmax_line_length = 128\n")

    loaded = load_settings(tmp_path / "project")
    assert loaded.global_path is not None
    assert loaded.reader.max_line_length == 128
    assert loaded.reader.encoding == "latin-1"

    loaded = load_settings(
        tmp_path / "project", cli_overrides={"reader": {"max_line_length": 16}}
    )
    assert loaded.reader.max_line_length == 16
    assert loaded.reader.encoding == "latin-1"


def test_invalid_value_is_rejected(tmp_path: Path) -> None:
    _write(tmp_path / "project" / ".iniread.toml", "[reader]\nmax_line_length = 1\n")
    with pytest.raises(ValidationError):
        load_settings(tmp_path / "project")


def test_non_table_section_is_ignored(tmp_path: Path) -> None:
    _write(tmp_path / "project" / ".iniread.toml", 'reader = "oops"\n')
    loaded = load_settings(tmp_path / "project")
    assert loaded.reader.max_line_length == DEFAULT_MAX_LINE_LENGTH


def test_unknown_tables_are_ignored(tmp_path: Path) -> None:
    _write(
        tmp_path / "project" / ".iniread.toml",
        "[scanner]\nmax_line_length = 1\n\n[ui]\ntable_title = \"settings\"\n",
    )
    loaded = load_settings(tmp_path / "project")
    assert loaded.reader.max_line_length == DEFAULT_MAX_LINE_LENGTH
    assert loaded.ui.table_title == "settings"


def test_later_layer_only_replaces_keys_it_sets(tmp_path: Path, _isolated_home: Path) -> None:
    _write(
        _isolated_home / ".iniread" / "config.toml",
        "[ui]\nshow_line_numbers = true\ntable_title = \"global\"\n",
    )
    _write(tmp_path / "project" / ".iniread.toml", "[ui]\ntable_title = \"repo\"\n")
    loaded = load_settings(tmp_path / "project", cli_overrides={"ui": {}})
    assert loaded.ui.show_line_numbers is True
    assert loaded.ui.table_title == "repo"
