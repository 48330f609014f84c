# topmark:header:start
#
#   project      : FeatureDocs
#   file         : file.py
#   file_relpath : src/featuredocs/utils/file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Filesystem helpers shared by the document store and the site builder."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from featuredocs.config.logging import get_logger

if TYPE_CHECKING:
    from featuredocs.config.logging import FeatureDocsLogger

logger: FeatureDocsLogger = get_logger(__name__)


def compute_relpath(file_path: Path, root_path: Path) -> Path:
    """Return ``file_path`` relative to ``root_path`` (both resolved first).

    Paths outside the root come back with ``..`` segments rather than raising.
    """
    target: Path = file_path.resolve()
    root: Path = root_path.resolve()
    if target.is_relative_to(root):
        return target.relative_to(root)
    return Path(os.path.relpath(target, start=root))


def write_text_atomic(path: Path, text: str) -> None:
    """Write ``text`` (UTF-8) to ``path`` through a sibling temp file and `os.replace`.

    Readers never observe a half-written page. Parent directories are created
    as needed.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp: Path = path.with_name(f".{path.name}.tmp")
    tmp.write_text(text, encoding="utf-8")
    os.replace(tmp, path)
    logger.debug("Wrote %s (%d chars)", path, len(text))
