# topmark:header:start
#
#   project      : FeatureDocs
#   file         : keys.py
#   file_relpath : src/featuredocs/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for FeatureDocs configuration.

This module defines the string constants used when reading and validating
FeatureDocs configuration from TOML sources (``featuredocs.toml`` and
``[tool.featuredocs]`` in ``pyproject.toml``).

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
    - Front matter keys of feature documents live in
      `featuredocs.documents.keys`; they are a separate schema.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by FeatureDocs configuration."""

    # [site]
    SECTION_SITE: Final[str] = "site"

    KEY_TITLE: Final[str] = "title"
    KEY_BASE_URL: Final[str] = "base_url"
    KEY_TEMPLATES_DIR: Final[str] = "templates_dir"

    # [content]
    SECTION_CONTENT: Final[str] = "content"

    KEY_ROOT: Final[str] = "root"
    KEY_FEATURE_KIND: Final[str] = "feature_kind"
    KEY_SUBJECTS: Final[str] = "subjects"
    KEY_SORT: Final[str] = "sort"
    KEY_STRICT: Final[str] = "strict"

    # [output]
    SECTION_OUTPUT: Final[str] = "output"

    KEY_DIR: Final[str] = "dir"

    # [files]
    SECTION_FILES: Final[str] = "files"

    KEY_INCLUDE_PATTERNS: Final[str] = "include_patterns"
    KEY_EXCLUDE_PATTERNS: Final[str] = "exclude_patterns"

    # ---------------------------- Schema helpers ----------------------------

    ALLOWED_SECTION_KEYS: Final[dict[str, frozenset[str]]] = {
        SECTION_SITE: frozenset({KEY_TITLE, KEY_BASE_URL, KEY_TEMPLATES_DIR}),
        SECTION_CONTENT: frozenset(
            {
                KEY_ROOT,
                KEY_FEATURE_KIND,
                KEY_SUBJECTS,
                KEY_SORT,
                KEY_STRICT,
            }
        ),
        SECTION_OUTPUT: frozenset({KEY_DIR}),
        SECTION_FILES: frozenset({KEY_INCLUDE_PATTERNS, KEY_EXCLUDE_PATTERNS}),
    }

    ALLOWED_TOP_LEVEL_KEYS: Final[frozenset[str]] = frozenset(ALLOWED_SECTION_KEYS)
