# topmark:header:start
#
#   project      : FeatureDocs
#   file         : __init__.py
#   file_relpath : src/featuredocs/documents/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Feature documents: model, Metadata Extractor, Document Store, Collection Assembler."""

from __future__ import annotations

from featuredocs.documents.collection import assemble_collection
from featuredocs.documents.extractor import extract
from featuredocs.documents.model import (
    DocumentHeader,
    ExtractedDocument,
    FeatureCollection,
    FeatureDocument,
    SubjectStatus,
    SupportStatus,
)
from featuredocs.documents.store import DocumentLocation, DocumentStore

__all__ = [
    "DocumentHeader",
    "DocumentLocation",
    "DocumentStore",
    "ExtractedDocument",
    "FeatureCollection",
    "FeatureDocument",
    "SubjectStatus",
    "SupportStatus",
    "assemble_collection",
    "extract",
]
