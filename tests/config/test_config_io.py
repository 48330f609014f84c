# topmark:header:start
#
#   project      : FeatureDocs
#   file         : test_config_io.py
#   file_relpath : tests/config/test_config_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for TOML loading and the lenient value readers in `featuredocs.config.io`."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from featuredocs.config.io import (
    extract_pyproject_section,
    load_defaults_dict,
    load_toml_dict,
    optional_bool,
    optional_str,
    optional_str_list,
    read_toml_file,
    subtable,
)
from featuredocs.config.keys import Toml
from featuredocs.config.logging import TRACE_LEVEL, resolve_env_log_level
from featuredocs.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path


def test_defaults_dict_covers_every_section() -> None:
    defaults = load_defaults_dict()
    assert defaults[Toml.SECTION_FILES] == {
        Toml.KEY_INCLUDE_PATTERNS: ["**/*.md"],
        Toml.KEY_EXCLUDE_PATTERNS: [],
    }
    assert defaults[Toml.SECTION_OUTPUT] == {Toml.KEY_DIR: "public"}
    assert load_defaults_dict() is not defaults


def test_read_toml_file(tmp_path: Path) -> None:
    path = tmp_path / "featuredocs.toml"
    path.write_text('[site]\ntitle = "Languages"\n', encoding="utf-8")
    assert read_toml_file(path) == {"site": {"title": "Languages"}}


def test_read_toml_file_rejects_non_utf8(tmp_path: Path) -> None:
    path = tmp_path / "featuredocs.toml"
    path.write_bytes(b"[site]\ntitle = \"Caf\xe9\"\n")
    with pytest.raises(ConfigError, match="not valid UTF-8"):
        read_toml_file(path)


def test_read_toml_file_missing(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="cannot read config file"):
        read_toml_file(tmp_path / "absent.toml")


def test_load_toml_dict_treats_broken_file_as_empty(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text("[tool\n", encoding="utf-8")
    assert load_toml_dict(path) == {}


def test_extract_pyproject_section() -> None:
    assert extract_pyproject_section({"tool": {"featuredocs": {"site": {}}}}) == {"site": {}}
    assert extract_pyproject_section({"tool": {"ruff": {}}}) is None
    assert extract_pyproject_section({"tool": "featuredocs"}) is None
    assert extract_pyproject_section({}) is None


def test_subtable_ignores_scalars() -> None:
    assert subtable({"site": {"title": "x"}}, "site") == {"title": "x"}
    assert subtable({"site": "x"}, "site") == {}
    assert subtable({}, "site") == {}


@pytest.mark.parametrize(
    ("value", "expected"),
    [("Rust", "Rust"), (2025, "2025"), (True, "True"), (["a"], None), (None, None)],
)
def test_optional_str(value: object, expected: str | None) -> None:
    assert optional_str({"title": value}, "title") == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [(True, True), (False, False), (0, False), (2, True), ("yes", None), (None, None)],
)
def test_optional_bool(value: object, expected: bool | None) -> None:
    assert optional_bool({"sort": value}, "sort") is expected


def test_optional_str_list_drops_non_strings() -> None:
    assert optional_str_list({"subjects": ["rust", 3, "swift"]}, "subjects") == ["rust", "swift"]
    assert optional_str_list({"subjects": "rust"}, "subjects") is None
    assert optional_str_list({}, "subjects") is None


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("", None),
        ("debug", logging.DEBUG),
        (" WARNING ", logging.WARNING),
        ("trace", TRACE_LEVEL),
        ("15", 15),
        ("loud", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: int | None
) -> None:
    monkeypatch.setenv("FEATUREDOCS_LOG_LEVEL", raw)
    assert resolve_env_log_level() == expected
