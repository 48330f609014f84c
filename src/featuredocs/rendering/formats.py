# topmark:header:start
#
#   project      : FeatureDocs
#   file         : formats.py
#   file_relpath : src/featuredocs/rendering/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output formats for listing a feature collection."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Members:
      DEFAULT: Human-friendly text output; may include ANSI color if enabled.
      JSON: A single JSON array of per-document objects (machine-readable).
      MARKDOWN: A Markdown table, one row per document.

    Notes:
      - Machine formats must not include ANSI color.
    """

    DEFAULT = "default"
    JSON = "json"
    MARKDOWN = "markdown"
