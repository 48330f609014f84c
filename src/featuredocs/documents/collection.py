# topmark:header:start
#
#   project      : FeatureDocs
#   file         : collection.py
#   file_relpath : src/featuredocs/documents/collection.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Collection Assembler: select feature documents and put them in display order.

Ordering policy:
    - documents with an order key sort ascending by that key;
    - documents without one follow all keyed documents;
    - ties, and unkeyed documents, keep their discovery order (stable sort).

Input documents are never mutated; the result is a new `FeatureCollection`.

Each feature renders to its own page; `find_page_conflicts` reports documents
that would land on the site index or on a page another document already owns.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from featuredocs.config.logging import get_logger
from featuredocs.core.errors import DuplicatePagePathError
from featuredocs.documents.keys import FrontMatter
from featuredocs.documents.model import FeatureCollection, FeatureDocument

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from featuredocs.config.logging import FeatureDocsLogger

logger: FeatureDocsLogger = get_logger(__name__)


def order_sort_key(document: FeatureDocument) -> tuple[int, int | float]:
    """Return the sort key placing keyed documents first, ascending by key.

    Keys keep their parsed type; ``int`` and ``float`` compare exactly.
    """
    if document.order_key is None:
        return (1, 0)
    return (0, document.order_key)


def filter_by_kind(
    documents: Iterable[FeatureDocument],
    kind: str = FrontMatter.DEFAULT_KIND,
) -> list[FeatureDocument]:
    """Return the documents tagged ``kind``, in input order."""
    return [d for d in documents if d.kind == kind]


def assemble_collection(
    documents: Iterable[FeatureDocument],
    *,
    kind: str = FrontMatter.DEFAULT_KIND,
    sort: bool = True,
) -> FeatureCollection:
    """Build the ordered collection of feature documents.

    Args:
        documents (Iterable[FeatureDocument]): All documents, in discovery order.
        kind (str): Document-kind tag selecting feature documents.
        sort (bool): Order by order key; when False, keep discovery order.

    Returns:
        FeatureCollection: The selected documents in display order.
    """
    all_docs: list[FeatureDocument] = list(documents)
    selected: list[FeatureDocument] = filter_by_kind(all_docs, kind)
    if len(selected) != len(all_docs):
        logger.debug(
            "Skipped %d document(s) not of kind '%s'", len(all_docs) - len(selected), kind
        )
    if sort:
        # sorted() is stable: equal keys keep discovery order.
        selected = sorted(selected, key=order_sort_key)
    logger.info("Assembled collection of %d feature document(s)", len(selected))
    return FeatureCollection(documents=tuple(selected))


def find_page_conflicts(documents: Iterable[FeatureDocument]) -> list[DuplicatePagePathError]:
    """Return an error for every document whose page location is already taken.

    The root page belongs to the site index, so a feature at ``""`` (a root
    ``index.md``) always conflicts. Otherwise the first document to claim a
    location keeps it and later ones are reported.
    """
    owners: dict[str, Path | str | None] = {"": None}
    conflicts: list[DuplicatePagePathError] = []
    for document in documents:
        if document.page_path in owners:
            conflicts.append(
                DuplicatePagePathError(
                    document.page_path,
                    other=owners[document.page_path],
                    source=document.source,
                )
            )
        else:
            owners[document.page_path] = document.source or document.title
    return conflicts
