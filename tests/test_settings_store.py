from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

import comment_divider.settings_store as settings_store
from comment_divider.formatting.languages import CommentTokens
from comment_divider.models import StyleSettings
from comment_divider.states import Align, Height, Transform


def test_settings_path_env_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    assert settings_store.settings_path(workdir=tmp_path) == tmp_path / "comment-divider.json"

    custom = tmp_path / "elsewhere.json"
    monkeypatch.setenv("COMMENT_DIVIDER_SETTINGS_PATH", str(custom))
    assert settings_store.settings_path(workdir=tmp_path) == custom


def test_read_settings_missing_file_gives_defaults(tmp_path: Path) -> None:
    s = settings_store.read_settings(tmp_path / "missing.json")
    assert s == StyleSettings()

    cfg = s.to_style_config()
    assert cfg.total_width == 80
    assert cfg.main_header_height is Height.BLOCK
    assert cfg.main_header_align is Align.CENTER
    assert cfg.subheader_transform is Transform.NONE


def test_read_settings_bare_and_nested(tmp_path: Path) -> None:
    p = tmp_path / "s.json"
    p.write_text(json.dumps({"length": 60, "line_filler": "="}), encoding="utf-8")
    s = settings_store.read_settings(p)
    assert s.length == 60
    assert s.line_filler == "="

    p.write_text(
        json.dumps({"theme": "dark", "comment_divider": {"length": 40, "main_header_transform": "uppercase"}}),
        encoding="utf-8",
    )
    s = settings_store.read_settings(p)
    assert s.length == 40
    assert s.to_style_config().main_header_transform is Transform.UPPER


def test_read_settings_rejects_invalid_documents(tmp_path: Path) -> None:
    p = tmp_path / "s.json"

    p.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError, match="not valid JSON"):
        settings_store.read_settings(p)

    p.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError, match="JSON object"):
        settings_store.read_settings(p)

    p.write_text(json.dumps({"length": 0}), encoding="utf-8")
    with pytest.raises(ValueError, match="invalid settings"):
        settings_store.read_settings(p)

    p.write_text(json.dumps({"line_filler": ""}), encoding="utf-8")
    with pytest.raises(ValueError):
        settings_store.read_settings(p)

    p.write_text(json.dumps({"languages_map": {"x": ["a", "b", "c"]}}), encoding="utf-8")
    with pytest.raises(ValueError):
        settings_store.read_settings(p)


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    p = tmp_path / "s.json"
    p.write_text("", encoding="utf-8")
    assert settings_store.read_settings(p) == StyleSettings()


def test_unknown_modes_degrade_with_warning(caplog: pytest.LogCaptureFixture) -> None:
    s = StyleSettings(main_header_height="tall", main_header_align="justify", subheader_transform="title")
    with caplog.at_level(logging.WARNING):
        cfg = s.to_style_config()

    assert cfg.main_header_height is Height.LINE
    assert cfg.main_header_align is None
    assert cfg.subheader_transform is Transform.NONE
    assert "main_header_align" in caplog.text
    assert "subheader_transform" in caplog.text


def test_languages_map_extends_defaults() -> None:
    s = StyleSettings(languages_map={"klingon": ["%"], "python": ['"""', '"""']})
    table = s.to_language_table()
    assert table.lookup("klingon") == CommentTokens("%", "%")
    assert table.lookup("python") == CommentTokens('"""', '"""')
    assert table.lookup("rust") == CommentTokens("//", "//")


def test_load_settings_applies_env_overlays(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    p = tmp_path / "s.json"
    p.write_text(json.dumps({"length": 60, "languages_map": {"a": ["@"]}}), encoding="utf-8")

    monkeypatch.setenv("COMMENT_DIVIDER_LENGTH", "100")
    monkeypatch.setenv("COMMENT_DIVIDER_INCLUDE_INDENT", "yes")
    monkeypatch.setenv("COMMENT_DIVIDER_LANGUAGES", json.dumps({"b": [";"]}))

    s = settings_store.load_settings(p)
    assert s.length == 100
    assert s.should_length_include_indent is True
    assert s.languages_map == {"a": ["@"], "b": [";"]}


def test_load_settings_without_env_matches_file(tmp_path: Path) -> None:
    p = tmp_path / "s.json"
    p.write_text(json.dumps({"length": 33}), encoding="utf-8")
    assert settings_store.load_settings(p) == settings_store.read_settings(p)


def test_load_settings_rejects_bad_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COMMENT_DIVIDER_LANGUAGES", json.dumps({"b": []}))
    with pytest.raises(ValueError, match="environment"):
        settings_store.load_settings(tmp_path / "missing.json")

    monkeypatch.setenv("COMMENT_DIVIDER_LANGUAGES", "[]")
    with pytest.raises(ValueError):
        settings_store.load_settings(tmp_path / "missing.json")


def test_load_settings_warns_on_unparsable_length(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    p = tmp_path / "s.json"
    p.write_text(json.dumps({"length": 50}), encoding="utf-8")
    monkeypatch.setenv("COMMENT_DIVIDER_LENGTH", "abc")

    with caplog.at_level(logging.WARNING):
        s = settings_store.load_settings(p)

    assert s.length == 50
    assert "COMMENT_DIVIDER_LENGTH" in caplog.text
    assert "abc" in caplog.text
