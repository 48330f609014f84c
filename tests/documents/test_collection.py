# topmark:header:start
#
#   project      : FeatureDocs
#   file         : test_collection.py
#   file_relpath : tests/documents/test_collection.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the Collection Assembler (`featuredocs.documents.collection`)."""

from __future__ import annotations

from pathlib import Path

from featuredocs.documents.collection import assemble_collection, find_page_conflicts
from featuredocs.documents.extractor import extract
from featuredocs.documents.model import FeatureDocument, SubjectStatus, SupportStatus
from tests.conftest import feature_doc


def make_doc(
    title: str,
    order_key: int | float | None = None,
    *,
    kind: str = "feature",
    subjects: tuple[str, ...] = ("rust",),
    page_path: str = "",
    source: Path | None = None,
) -> FeatureDocument:
    """Return a minimal feature document."""
    return FeatureDocument(
        title=title,
        excerpt=f"About {title}.",
        status_by_subject={s: SubjectStatus(s, SupportStatus.SUPPORTED) for s in subjects},
        body="",
        url=f"/{title.lower()}/",
        order_key=order_key,
        kind=kind,
        page_path=page_path,
        source=source,
    )


def test_keyed_documents_sort_before_unkeyed() -> None:
    """Keys 500 and 900 come first, ascending; the unkeyed document follows."""
    docs = [make_doc("Unkeyed"), make_doc("Late", 900), make_doc("Early", 500)]

    collection = assemble_collection(docs)

    assert collection.titles() == ["Early", "Late", "Unkeyed"]


def test_generics_before_constant_evaluation() -> None:
    """The 500-keyed Generics document precedes the 900-keyed one."""
    docs = [
        FeatureDocument.from_extracted(
            extract(feature_doc("Constant evaluation", order=900)), url="/constant-evaluation/"
        ),
        FeatureDocument.from_extracted(
            extract(feature_doc("Generics - static types", order=500)), url="/generics/"
        ),
    ]

    collection = assemble_collection(docs)

    assert collection.titles() == ["Generics - static types", "Constant evaluation"]


def test_equal_keys_keep_discovery_order() -> None:
    """Ties are broken by discovery order."""
    docs = [make_doc("B", 1), make_doc("A", 1), make_doc("C", 0.5)]
    assert assemble_collection(docs).titles() == ["C", "B", "A"]


def test_unkeyed_documents_keep_discovery_order() -> None:
    """Unkeyed documents are not reordered among themselves."""
    docs = [make_doc("Zeta"), make_doc("Alpha"), make_doc("Keyed", 10)]
    assert assemble_collection(docs).titles() == ["Keyed", "Zeta", "Alpha"]


def test_int_and_float_keys_compare_numerically() -> None:
    """Integer and float keys share one numeric order."""
    docs = [make_doc("Ten", 10), make_doc("Two and a half", 2.5), make_doc("Three", 3)]
    assert assemble_collection(docs).titles() == ["Two and a half", "Three", "Ten"]


def test_sort_disabled_keeps_discovery_order() -> None:
    """With sorting off the collection mirrors the input order."""
    docs = [make_doc("Late", 900), make_doc("Unkeyed"), make_doc("Early", 500)]
    assert assemble_collection(docs, sort=False).titles() == ["Late", "Unkeyed", "Early"]


def test_filters_by_kind() -> None:
    """Only documents of the feature kind are included."""
    docs = [make_doc("Feature", 1), make_doc("Guide", 0, kind="guide")]

    assert assemble_collection(docs).titles() == ["Feature"]
    assert assemble_collection(docs, kind="guide").titles() == ["Guide"]


def test_inputs_are_not_mutated() -> None:
    """Assembling returns a new collection and leaves the input list as it was."""
    docs = [make_doc("Late", 900), make_doc("Early", 500)]
    before = list(docs)

    assemble_collection(docs)

    assert docs == before


def test_collection_sequence_protocol() -> None:
    """The collection supports len, indexing, iteration and subjects()."""
    collection = assemble_collection(
        [make_doc("A", 1, subjects=("swift",)), make_doc("B", 2, subjects=("rust", "swift"))]
    )

    assert len(collection) == 2
    assert collection[0].title == "A"
    assert [d.title for d in collection] == ["A", "B"]
    assert collection.subjects() == ("swift", "rust")
    assert not assemble_collection([])


def test_large_integer_keys_sort_exactly() -> None:
    """Keys beyond float precision or range still sort ascending."""
    docs = [
        make_doc("Huge", 10**400),
        make_doc("Big", 2**53 + 1),
        make_doc("Small", 2**53),
        make_doc("Half", 0.5),
    ]

    collection = assemble_collection(docs)

    assert collection.titles() == ["Half", "Small", "Big", "Huge"]


def test_find_page_conflicts_reports_later_claimant() -> None:
    """``foo.md`` keeps ``foo/``; ``foo/index.md`` is reported against it."""
    docs = [
        make_doc("Foo", page_path="foo/", source=Path("foo.md")),
        make_doc("Bar", page_path="bar/", source=Path("bar.md")),
        make_doc("Foo index", page_path="foo/", source=Path("foo/index.md")),
    ]

    conflicts = find_page_conflicts(docs)

    assert len(conflicts) == 1
    conflict = conflicts[0]
    assert conflict.rule == "page-path-unique"
    assert conflict.source == Path("foo/index.md")
    assert conflict.other == Path("foo.md")
    assert str(conflict).endswith("page '/foo/' is already taken by foo.md [page-path-unique]")


def test_find_page_conflicts_reserves_site_index() -> None:
    """A feature rendering to the root page collides with the index."""
    conflicts = find_page_conflicts([make_doc("Root", page_path="", source=Path("index.md"))])

    assert [c.other for c in conflicts] == [None]
    assert "the site index" in str(conflicts[0])


def test_find_page_conflicts_accepts_distinct_pages() -> None:
    docs = [make_doc(t, page_path=f"{t.lower()}/") for t in ("Generics", "Closures")]
    assert find_page_conflicts(docs) == []
