# topmark:header:start
#
#   project      : FeatureDocs
#   file         : test_extractor.py
#   file_relpath : tests/documents/test_extractor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the Metadata Extractor (`featuredocs.documents.extractor`)."""

from __future__ import annotations

import pytest

from featuredocs.core.errors import (
    DocumentError,
    MalformedHeaderError,
    MissingRequiredFieldError,
    UnknownSubjectStatusError,
)
from featuredocs.documents.extractor import (
    HeaderFormat,
    extract,
    find_body_sections,
    split_header,
)
from featuredocs.documents.model import SupportStatus
from tests.conftest import feature_doc

GENERICS: str = """\
---
title: Generics - static types
order: 500
excerpt: Parametric polymorphism checked at compile time.
subjects:
  rust: supported
  swift:
    status: pending
    details_caption: SE-0361
    details_url: https://example.org/se-0361
---

Intro paragraph.

## Rust

Monomorphization.
"""


def test_extract_yaml_front_matter() -> None:
    """Title, order key, excerpt and statuses come from the header."""
    doc = extract(GENERICS)
    header = doc.header

    assert header.title == "Generics - static types"
    assert header.order_key == 500
    assert header.excerpt == "Parametric polymorphism checked at compile time."
    assert header.kind == "feature"
    assert set(header.status_by_subject) == {"rust", "swift"}
    assert header.subjects == ("rust", "swift")

    swift = header.status_by_subject["swift"]
    assert swift.status is SupportStatus.PENDING
    assert swift.details_caption == "SE-0361"
    assert swift.details_url == "https://example.org/se-0361"
    assert header.status_by_subject["rust"].details_url is None


def test_body_is_passed_through_unchanged() -> None:
    """The body starts after the fence and its separating blank line."""
    doc = extract(GENERICS)
    assert doc.body == "Intro paragraph.\n\n## Rust\n\nMonomorphization.\n"
    assert doc.body_sections == ("rust",)


def test_extract_toml_front_matter() -> None:
    """A ``+++`` fenced block is parsed as TOML."""
    text = """\
+++
title = "Constant evaluation"
order = 900
excerpt = "Compile-time function evaluation."

[subjects]
rust = "supported"

[subjects.swift]
status = "unavailable"
+++
Body.
"""
    fmt, _, _ = split_header(text)
    doc = extract(text)

    assert fmt is HeaderFormat.TOML
    assert doc.header.title == "Constant evaluation"
    assert doc.header.order_key == 900
    assert doc.header.status_by_subject["swift"].status is SupportStatus.UNAVAILABLE
    assert doc.body == "Body.\n"


def test_extract_bare_header_block() -> None:
    """A leading ``key: value`` block ends at the first blank line."""
    text = (
        "title: Closures\n"
        "excerpt: Anonymous functions.\n"
        "subjects: {rust: supported, swift: supported}\n"
        "\n"
        "Body text.\n"
    )
    fmt, _, body = split_header(text)
    doc = extract(text)

    assert fmt is HeaderFormat.BARE
    assert body == "Body text.\n"
    assert doc.header.title == "Closures"
    assert doc.header.order_key is None


def test_camel_case_aliases_are_accepted() -> None:
    """The camelCase spellings map onto the canonical keys."""
    text = """\
---
title: Async
orderKey: 3.5
excerpt: Asynchronous functions.
statusBySubject:
  Rust:
    status: Supported
    detailsUrl: https://example.org/async
---
"""
    doc = extract(text)
    rust = doc.header.status_by_subject["rust"]

    assert doc.header.order_key == 3.5
    assert rust.status is SupportStatus.SUPPORTED
    assert rust.details_url == "https://example.org/async"
    assert rust.details_caption is None


def test_duplicate_spelling_of_a_key_is_rejected() -> None:
    """Giving a key and its alias is ambiguous."""
    text = feature_doc("Dup", order=1, extra="orderKey: 2")
    with pytest.raises(MalformedHeaderError):
        extract(text)


def test_unknown_keys_are_ignored_and_reported() -> None:
    """Keys outside the schema do not fail extraction."""
    doc = extract(feature_doc("Extra", extra="author: someone"))
    assert doc.ignored_keys == ("author",)


def test_kind_tag_is_read() -> None:
    """``kind`` overrides the default document kind."""
    doc = extract(feature_doc("Setup", extra="kind: guide"))
    assert doc.header.kind == "guide"


@pytest.mark.parametrize(
    "text",
    [
        "",
        "# Generics\n\nNo header here.\n",
        "---\ntitle: Never closed\n",
        "---\n---\nBody\n",
        "---\n- a\n- b\n---\n",
        "---\ntitle: [unclosed\n---\n",
    ],
)
def test_malformed_header(text: str) -> None:
    """Missing, unterminated, empty or non-mapping headers are malformed."""
    with pytest.raises(MalformedHeaderError):
        extract(text)


def test_missing_excerpt() -> None:
    """A document without an excerpt fails with MissingRequiredFieldError."""
    with pytest.raises(MissingRequiredFieldError) as exc_info:
        extract(feature_doc("No excerpt", excerpt=""))
    assert exc_info.value.field == "excerpt"


def test_empty_title_is_missing() -> None:
    """An empty title counts as absent."""
    text = '---\ntitle: ""\nexcerpt: x\nsubjects:\n  rust: supported\n---\n'
    with pytest.raises(MissingRequiredFieldError) as exc_info:
        extract(text)
    assert exc_info.value.field == "title"


def test_missing_subjects() -> None:
    """At least one subject entry is required."""
    text = "---\ntitle: T\nexcerpt: x\nsubjects: {}\n---\n"
    with pytest.raises(MissingRequiredFieldError):
        extract(text)


def test_subject_mapping_without_status() -> None:
    """A mapping entry must carry a status."""
    text = "---\ntitle: T\nexcerpt: x\nsubjects:\n  rust:\n    details_url: https://x\n---\n"
    with pytest.raises(MissingRequiredFieldError) as exc_info:
        extract(text)
    assert exc_info.value.field == "subjects.rust.status"


@pytest.mark.parametrize("status", ["maybe", "done", "yes", "1"])
def test_unknown_status_is_rejected(status: str) -> None:
    """Status values outside the enumeration are rejected."""
    with pytest.raises(UnknownSubjectStatusError) as exc_info:
        extract(feature_doc("Bad", subjects={"rust": status}))
    assert exc_info.value.subject == "rust"


def test_order_key_must_be_numeric() -> None:
    """A non-numeric order key is a malformed header."""
    with pytest.raises(MalformedHeaderError):
        extract(feature_doc("Bad order", extra="order: soon"))


@pytest.mark.parametrize("raw", [".nan", ".inf", "-.inf"])
def test_order_key_must_be_finite(raw: str) -> None:
    """NaN and infinities would leave the display order undefined."""
    with pytest.raises(MalformedHeaderError, match="finite"):
        extract(feature_doc("Bad order", extra=f"order: {raw}"))


def test_huge_integer_order_key_is_kept_exact() -> None:
    """Integers beyond float range are valid keys and keep their value."""
    doc = extract(feature_doc("Far away", order=10**40))
    assert doc.header.order_key == 10**40
    assert isinstance(doc.header.order_key, int)


def test_errors_carry_source_and_rule() -> None:
    """Every extraction error names the document and the violated rule."""
    with pytest.raises(DocumentError) as exc_info:
        extract(feature_doc("No excerpt", excerpt=""), source="features/x.md")
    message = str(exc_info.value)
    assert message.startswith("features/x.md: ")
    assert message.endswith("[required-field]")


def test_bom_is_ignored() -> None:
    """A UTF-8 byte order mark before the fence is tolerated."""
    doc = extract("\ufeff" + feature_doc("BOM"))
    assert doc.header.title == "BOM"


def test_find_body_sections_skips_fenced_code() -> None:
    """Level-2 headings inside code fences do not count as sections."""
    body = (
        "## Rust\n"
        "```markdown\n"
        "## Kotlin\n"
        "```\n"
        "### Not level two\n"
        "## [Swift](https://swift.org)\n"
    )
    assert find_body_sections(body) == ("rust", "swift")
