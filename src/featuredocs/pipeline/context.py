# topmark:header:start
#
#   project      : FeatureDocs
#   file         : context.py
#   file_relpath : src/featuredocs/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-document processing context.

A `DocumentContext` travels through the pipeline steps for one document file.
Steps fill it in progressively: raw text, extraction result, body subjects,
and finally the immutable `FeatureDocument`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from featuredocs.diagnostic import DiagnosticLog

if TYPE_CHECKING:
    from featuredocs.config.model import Config
    from featuredocs.documents.model import ExtractedDocument, FeatureDocument
    from featuredocs.documents.store import DocumentLocation, DocumentStore
    from featuredocs.pipeline.steps.base import BaseStep


@dataclass
class DocumentContext:
    """Mutable state for processing a single document.

    Attributes:
        location (DocumentLocation): Source path and derived URL facts.
        config (Config): The frozen runtime configuration.
        store (DocumentStore): Store the document is read from.
        known_subjects (tuple[str, ...]): Subjects recognized as body sections;
            set by the runner before the checking phase.
        text (str | None): Raw document text (set by the reader).
        extracted (ExtractedDocument | None): Extraction result.
        body_subjects (tuple[str, ...]): Known subjects with a body section.
        document (FeatureDocument | None): The finished document.
        diagnostics (DiagnosticLog): Non-fatal findings for this document.
        steps (list[BaseStep]): Steps invoked so far, in order.
    """

    location: DocumentLocation
    config: Config
    store: DocumentStore
    known_subjects: tuple[str, ...] = ()
    text: str | None = None
    extracted: ExtractedDocument | None = None
    body_subjects: tuple[str, ...] = ()
    document: FeatureDocument | None = None
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)
    steps: list[BaseStep] = field(default_factory=lambda: [])

    @classmethod
    def bootstrap(
        cls,
        *,
        location: DocumentLocation,
        config: Config,
        store: DocumentStore,
    ) -> DocumentContext:
        """Create a fresh context for ``location``."""
        return cls(location=location, config=config, store=store)

    @property
    def source(self) -> str:
        """Path of the document relative to the content root, for messages."""
        return self.location.relpath
