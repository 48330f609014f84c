# topmark:header:start
#
#   project      : FeatureDocs
#   file         : io.py
#   file_relpath : src/featuredocs/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O and value getters for FeatureDocs configuration.

This module reads FeatureDocs configuration from on-disk TOML files
(``featuredocs.toml`` / ``pyproject.toml``) and exposes small getters that
extract typed values from the parsed tables.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
Getters never raise: they return defaults and log at debug level, so that a
config typo does not change defaulting behavior. Shape problems the user
should know about are reported by `featuredocs.config.model` as diagnostics.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from featuredocs.config.keys import Toml
from featuredocs.config.logging import get_logger
from featuredocs.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from featuredocs.config.logging import FeatureDocsLogger

TomlTable = dict[str, Any]

logger: FeatureDocsLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return FeatureDocs **runtime defaults** as a Python dict.

    This function performs **no I/O**. The returned value is a new dict so
    callers can mutate it safely.

    Returns:
        A TOML-table-compatible dict containing the runtime defaults.
    """
    return {
        Toml.SECTION_SITE: {
            Toml.KEY_TITLE: "Feature comparison",
            Toml.KEY_BASE_URL: "",
        },
        Toml.SECTION_CONTENT: {
            Toml.KEY_ROOT: "content",
            Toml.KEY_FEATURE_KIND: "feature",
            Toml.KEY_SUBJECTS: [],
            Toml.KEY_SORT: True,
            Toml.KEY_STRICT: False,
        },
        Toml.SECTION_OUTPUT: {
            Toml.KEY_DIR: "public",
        },
        Toml.SECTION_FILES: {
            Toml.KEY_INCLUDE_PATTERNS: ["**/*.md"],
            Toml.KEY_EXCLUDE_PATTERNS: [],
        },
    }


def read_toml_file(path: Path) -> TomlTable:
    """Load a config file the user asked for, failing loudly.

    Args:
        path (Path): The config file.

    Returns:
        TomlTable: The parsed content; a non-table document yields ``{}``.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        parsed: Any = tomlkit.parse(path.read_text(encoding="utf-8")).unwrap()
    except OSError as e:
        raise ConfigError(f"{path}: cannot read config file: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"{path}: config file is not valid UTF-8") from e
    except TomlkitParseError as e:
        raise ConfigError(f"{path}: invalid TOML: {e}") from e
    return cast("TomlTable", parsed) if isinstance(parsed, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Probe a candidate config file, treating a broken one as empty.

    Discovery uses this to peek into ``pyproject.toml`` files that may not
    belong to FeatureDocs at all; the failure is logged rather than raised.
    """
    try:
        return read_toml_file(path)
    except ConfigError as e:
        logger.warning("Skipping config candidate: %s", e)
        return {}


def extract_pyproject_section(data: TomlTable) -> TomlTable | None:
    """Return the ``[tool.featuredocs]`` table of a parsed ``pyproject.toml``, if any."""
    section: Any = subtable(data, "tool").get("featuredocs")
    return cast("TomlTable", section) if isinstance(section, dict) else None


def subtable(table: TomlTable, key: str) -> TomlTable:
    """Return ``table[key]`` when it is a table, else an empty dict."""
    value: Any = table.get(key, {})
    if isinstance(value, dict):
        return cast("TomlTable", value)
    logger.debug("[%s] is not a table (%r); ignoring it", key, value)
    return {}


def optional_str(table: TomlTable, key: str) -> str | None:
    """Read a string setting.

    Scalars such as ``title = 2025`` are accepted and stringified; anything
    else (arrays, tables) counts as unset.
    """
    value: Any = table.get(key)
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (bool, int, float)):
        return str(value)
    logger.debug("%s = %r is not a string; ignoring it", key, value)
    return None


def optional_bool(table: TomlTable, key: str) -> bool | None:
    """Read a boolean setting; integers are accepted as ``0``/non-zero."""
    value: Any = table.get(key)
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    logger.debug("%s = %r is not a boolean; ignoring it", key, value)
    return None


def optional_str_list(table: TomlTable, key: str) -> list[str] | None:
    """Read an array of strings, dropping any entries that are not strings.

    Returns:
        list[str] | None: The strings in order, or ``None`` when the key is
        absent or not an array.
    """
    value: Any = table.get(key)
    if not isinstance(value, list):
        if value is not None:
            logger.debug("%s = %r is not an array; ignoring it", key, value)
        return None
    items: list[Any] = cast("list[Any]", value)
    kept: list[str] = [item for item in items if isinstance(item, str)]
    if len(kept) != len(items):
        logger.debug("%s: dropped %d non-string entries", key, len(items) - len(kept))
    return kept
