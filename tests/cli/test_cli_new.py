# topmark:header:start
#
#   project      : FeatureDocs
#   file         : test_cli_new.py
#   file_relpath : tests/cli/test_cli_new.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for `featuredocs new` and the document scaffold."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from featuredocs.cli.commands.new import PLACEHOLDER_EXCERPT, scaffold_document, slugify
from featuredocs.cli.exit_codes import ExitCode
from featuredocs.documents.extractor import extract
from featuredocs.documents.model import SupportStatus
from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli_in
from tests.conftest import write_doc

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.cli


@pytest.mark.parametrize(
    "title,expected",
    [
        ("Generics - static types", "generics-static-types"),
        ("  Async/await ", "async-await"),
        ("C++ interop", "c-interop"),
        ("!!!", ""),
    ],
)
def test_slugify(title: str, expected: str) -> None:
    """Titles map to lowercase, dash-separated file names."""
    assert slugify(title) == expected


def test_scaffold_is_a_valid_document() -> None:
    """The scaffold passes extraction with every subject pending."""
    text: str = scaffold_document("Closures", ("rust", "swift"), order=300.0)
    doc = extract(text)
    assert doc.header.title == "Closures"
    assert doc.header.order_key == 300
    assert doc.header.excerpt == PLACEHOLDER_EXCERPT
    assert doc.header.subjects == ("rust", "swift")
    assert {s.status for s in doc.header.status_by_subject.values()} == {SupportStatus.PENDING}
    assert doc.body_sections == ("rust", "swift")


def test_new_creates_document(tmp_path: Path) -> None:
    """`new` writes ``<content>/<slug>.md``."""
    result = run_cli_in(
        tmp_path,
        ["--no-color", "new", "Async functions", "--subject", "Rust", "--subject", "swift"],
    )
    assert_SUCCESS(result)
    target: Path = tmp_path / "content" / "async-functions.md"
    assert target.is_file()
    assert "Created" in result.output

    doc = extract(target.read_text(encoding="utf-8"), source=target)
    assert doc.header.subjects == ("rust", "swift")
    assert doc.header.order_key is None


def test_new_defaults_to_configured_subjects(tmp_path: Path) -> None:
    """Without ``--subject`` the configured subjects are used."""
    write_doc(tmp_path, "featuredocs.toml", '[content]\nsubjects = ["rust", "swift"]\n')
    result = run_cli_in(tmp_path, ["--no-color", "new", "Closures", "--order", "250"])
    assert_SUCCESS(result)
    doc = extract((tmp_path / "content" / "closures.md").read_text(encoding="utf-8"))
    assert doc.header.subjects == ("rust", "swift")
    assert doc.header.order_key == 250


def test_new_refuses_to_overwrite(tmp_path: Path) -> None:
    """An existing document is never overwritten."""
    existing: Path = write_doc(tmp_path / "content", "closures.md", "keep me\n")
    result = run_cli_in(tmp_path, ["--no-color", "new", "Closures", "--subject", "rust"])
    assert result.exit_code == ExitCode.CANT_CREATE, result.output
    assert existing.read_text(encoding="utf-8") == "keep me\n"


def test_new_without_subjects_is_a_usage_error(tmp_path: Path) -> None:
    """No ``--subject`` and no configured subjects."""
    result = run_cli_in(tmp_path, ["--no-color", "new", "Closures"])
    assert_USAGE_ERROR(result)
    assert not (tmp_path / "content").exists()


def test_new_with_unusable_title_is_a_usage_error(tmp_path: Path) -> None:
    """A title with no letters or digits cannot name a file."""
    result = run_cli_in(tmp_path, ["--no-color", "new", "???", "--subject", "rust"])
    assert_USAGE_ERROR(result)


@pytest.mark.parametrize("raw", ["nan", "inf"])
def test_new_rejects_non_finite_order(tmp_path: Path, raw: str) -> None:
    """``--order`` must be a finite number; nothing is written otherwise."""
    result = run_cli_in(
        tmp_path, ["--no-color", "new", "Closures", "--subject", "rust", "--order", raw]
    )
    assert_USAGE_ERROR(result)
    assert "finite" in result.output
    assert not (tmp_path / "content" / "closures.md").exists()
