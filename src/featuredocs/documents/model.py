# topmark:header:start
#
#   project      : FeatureDocs
#   file         : model.py
#   file_relpath : src/featuredocs/documents/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Data model for feature documents.

Sections:
    * SupportStatus: closed enumeration of per-subject support states.
    * SubjectStatus: one subject's status plus an optional captioned link.
    * DocumentHeader: the validated front matter of a document.
    * ExtractedDocument: the Metadata Extractor's result (header + body).
    * FeatureDocument: a fully loaded document, including its URL.
    * FeatureCollection: the ordered sequence handed to page templates.

All types are immutable. Documents are read once per render pass and never
mutated; changes happen only by editing source files between builds.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, overload

from featuredocs.core.enum_mixins import KeyedStrEnum
from featuredocs.documents.keys import FrontMatter

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping
    from pathlib import Path


class SupportStatus(KeyedStrEnum):
    """How a subject relates to a feature.

    Members:
      PENDING: The feature is proposed or being implemented.
      SUPPORTED: The feature is available.
      UNAVAILABLE: The feature is not available and not planned.
    """

    PENDING = "pending"
    SUPPORTED = "supported"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True, slots=True)
class SubjectStatus:
    """Status entry of one subject in a feature document.

    Attributes:
        subject (str): Normalized subject identifier (e.g. ``"rust"``).
        status (SupportStatus): The subject's support status.
        details_caption (str | None): Label for the details link.
        details_url (str | None): Link to further details (tracking issue, docs, ...).
    """

    subject: str
    status: SupportStatus
    details_caption: str | None = None
    details_url: str | None = None

    @property
    def has_details(self) -> bool:
        """Return True if the entry carries a details link."""
        return bool(self.details_url)


def _frozen_statuses(
    entries: Mapping[str, SubjectStatus] | None = None,
) -> Mapping[str, SubjectStatus]:
    return MappingProxyType(dict(entries or {}))


@dataclass(frozen=True, slots=True)
class DocumentHeader:
    """Validated front matter of a feature document."""

    title: str
    excerpt: str
    status_by_subject: Mapping[str, SubjectStatus] = field(default_factory=_frozen_statuses)
    order_key: int | float | None = None
    kind: str = FrontMatter.DEFAULT_KIND

    def __post_init__(self) -> None:
        object.__setattr__(self, "status_by_subject", _frozen_statuses(self.status_by_subject))

    @property
    def subjects(self) -> tuple[str, ...]:
        """Subjects declared in the header, in declaration order."""
        return tuple(self.status_by_subject)


@dataclass(frozen=True, slots=True)
class ExtractedDocument:
    """Result of splitting a document into header and body.

    Attributes:
        header (DocumentHeader): The validated header.
        body (str): The narrative content, unchanged.
        body_sections (tuple[str, ...]): Normalized titles of the body's
            level-2 sections, in order of appearance.
        ignored_keys (tuple[str, ...]): Front matter keys outside the schema.
    """

    header: DocumentHeader
    body: str
    body_sections: tuple[str, ...] = ()
    ignored_keys: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class FeatureDocument:
    """A feature document, ready to be listed and rendered.

    Attributes:
        title (str): Display name of the feature.
        excerpt (str): Short free-text summary.
        status_by_subject (Mapping[str, SubjectStatus]): Per-subject status entries.
        body (str): Full narrative markdown content.
        url (str): Link to the document's page; stable identifier.
        order_key (int | float | None): Optional display order key.
        kind (str): Document-kind tag.
        slug (str): File-stem based identifier.
        page_path (str): Location of the rendered page relative to the site root
            (e.g. ``"features/generics/"``).
        source (Path | None): The file the document was read from.
        body_subjects (tuple[str, ...]): Known subjects that have a body section.
    """

    title: str
    excerpt: str
    status_by_subject: Mapping[str, SubjectStatus]
    body: str
    url: str
    order_key: int | float | None = None
    kind: str = FrontMatter.DEFAULT_KIND
    slug: str = ""
    page_path: str = ""
    source: Path | None = None
    body_subjects: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "status_by_subject", _frozen_statuses(self.status_by_subject))

    @classmethod
    def from_extracted(
        cls,
        extracted: ExtractedDocument,
        *,
        url: str,
        slug: str = "",
        page_path: str = "",
        source: Path | None = None,
        body_subjects: tuple[str, ...] = (),
    ) -> FeatureDocument:
        """Build a document from an extraction result and its location facts."""
        header: DocumentHeader = extracted.header
        return cls(
            title=header.title,
            excerpt=header.excerpt,
            status_by_subject=header.status_by_subject,
            body=extracted.body,
            url=url,
            order_key=header.order_key,
            kind=header.kind,
            slug=slug,
            page_path=page_path,
            source=source,
            body_subjects=body_subjects,
        )

    @property
    def subjects(self) -> tuple[str, ...]:
        """Subjects declared in the header, in declaration order."""
        return tuple(self.status_by_subject)

    @property
    def has_order_key(self) -> bool:
        """Return True if the document declares an order key."""
        return self.order_key is not None

    def status_for(self, subject: str) -> SubjectStatus | None:
        """Return the status entry for ``subject``, or ``None`` when not declared."""
        return self.status_by_subject.get(subject.strip().lower())


@dataclass(frozen=True, slots=True)
class FeatureCollection:
    """Ordered, immutable sequence of feature documents.

    Derived fresh on every render pass; never persisted.
    """

    documents: tuple[FeatureDocument, ...] = ()

    def __len__(self) -> int:
        return len(self.documents)

    def __iter__(self) -> Iterator[FeatureDocument]:
        return iter(self.documents)

    @overload
    def __getitem__(self, index: int) -> FeatureDocument: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[FeatureDocument, ...]: ...

    def __getitem__(self, index: int | slice) -> FeatureDocument | tuple[FeatureDocument, ...]:
        return self.documents[index]

    def __bool__(self) -> bool:
        return bool(self.documents)

    def titles(self) -> list[str]:
        """Return document titles in collection order."""
        return [d.title for d in self.documents]

    def subjects(self) -> tuple[str, ...]:
        """Return all declared subjects, in first-seen order across the collection."""
        seen: dict[str, None] = {}
        for doc in self.documents:
            for subject in doc.subjects:
                seen.setdefault(subject, None)
        return tuple(seen)
