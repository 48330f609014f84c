# topmark:header:start
#
#   project      : FeatureDocs
#   file         : test_store.py
#   file_relpath : tests/documents/test_store.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the Document Store (`featuredocs.documents.store`)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from featuredocs.core.errors import DocumentNotFoundError
from featuredocs.documents.store import DocumentStore, page_path_for, slug_for, url_for
from tests.conftest import write_doc

if TYPE_CHECKING:
    from pathlib import Path


@pytest.mark.parametrize(
    ("relpath", "expected"),
    [
        ("generics.md", "generics/"),
        ("features/generics.md", "features/generics/"),
        ("features/index.md", "features/"),
        ("index.md", ""),
    ],
)
def test_page_path_for(relpath: str, expected: str) -> None:
    """Documents publish to a directory named after their stem."""
    assert page_path_for(relpath) == expected


def test_url_for_joins_base_url() -> None:
    """The base URL prefixes the page path with a single slash."""
    assert url_for("features/generics/", "https://example.org/docs/") == (
        "https://example.org/docs/features/generics/"
    )
    assert url_for("generics/") == "/generics/"


def test_slug_for_index_uses_directory_name() -> None:
    """``index.md`` takes the name of its directory."""
    assert slug_for("features/generics.md") == "generics"
    assert slug_for("async/index.md") == "async"


def test_discover_is_sorted_and_filtered(tmp_path: Path) -> None:
    """Discovery returns matching files in relative-path order."""
    write_doc(tmp_path, "b.md", "x")
    write_doc(tmp_path, "a.md", "x")
    write_doc(tmp_path, "nested/c.md", "x")
    write_doc(tmp_path, "notes.txt", "x")
    write_doc(tmp_path, "drafts/wip.md", "x")

    store = DocumentStore(tmp_path, exclude_patterns=["drafts/"])
    relpaths = [loc.relpath for loc in store.discover()]

    assert relpaths == ["a.md", "b.md", "nested/c.md"]


def test_discover_derives_urls(tmp_path: Path) -> None:
    """Each location carries its page path, URL and slug."""
    write_doc(tmp_path, "features/generics.md", "x")
    store = DocumentStore(tmp_path, base_url="https://example.org/")

    (loc,) = store.discover()

    assert loc.relpath == "features/generics.md"
    assert loc.page_path == "features/generics/"
    assert loc.url == "https://example.org/features/generics/"
    assert loc.slug == "generics"
    assert loc.path == (tmp_path / "features" / "generics.md").resolve()


def test_discover_missing_root(tmp_path: Path) -> None:
    """A missing content directory is reported, not treated as empty."""
    store = DocumentStore(tmp_path / "missing")
    with pytest.raises(DocumentNotFoundError):
        store.discover()


def test_read_missing_file(tmp_path: Path) -> None:
    """Reading a file that does not exist raises DocumentNotFoundError."""
    store = DocumentStore(tmp_path)
    with pytest.raises(DocumentNotFoundError) as exc_info:
        store.read(tmp_path / "gone.md")
    assert exc_info.value.rule == "document-exists"


def test_read_returns_text(tmp_path: Path) -> None:
    """Documents are read as UTF-8."""
    path = write_doc(tmp_path, "swift.md", "---\ntitle: Café\n---\n")
    assert DocumentStore(tmp_path).read(path) == "---\ntitle: Café\n---\n"
