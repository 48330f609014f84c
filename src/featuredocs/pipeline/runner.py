# topmark:header:start
#
#   project      : FeatureDocs
#   file         : runner.py
#   file_relpath : src/featuredocs/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run the document pipeline for one document or the whole content directory.

Single-threaded and synchronous: each call re-reads the (immutable) source
files and either completes or fails as a whole.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from featuredocs.config.logging import get_logger
from featuredocs.core.errors import DocumentError
from featuredocs.diagnostic import Diagnostic
from featuredocs.documents.collection import (
    assemble_collection,
    filter_by_kind,
    find_page_conflicts,
)
from featuredocs.documents.store import DocumentStore
from featuredocs.pipeline.context import DocumentContext
from featuredocs.pipeline.pipelines import FINISH, LOAD

if TYPE_CHECKING:
    from collections.abc import Sequence

    from featuredocs.config.logging import FeatureDocsLogger
    from featuredocs.config.model import Config
    from featuredocs.documents.model import FeatureCollection, FeatureDocument
    from featuredocs.documents.store import DocumentLocation
    from featuredocs.pipeline.steps.base import BaseStep

logger: FeatureDocsLogger = get_logger(__name__)


def run(ctx: DocumentContext, steps: Sequence[BaseStep]) -> DocumentContext:
    """Execute ``steps`` sequentially on ``ctx``.

    Args:
        ctx (DocumentContext): Mutable processing context.
        steps (Sequence[BaseStep]): Ordered sequence of pipeline steps.

    Returns:
        DocumentContext: The context after all steps have run.
    """
    for step in steps:
        ctx = step(ctx)
    return ctx


def known_subjects(config: Config, contexts: Sequence[DocumentContext]) -> tuple[str, ...]:
    """Return the subjects recognized as body sections.

    The configured subjects when set; otherwise every subject declared by any
    document, in first-seen order.
    """
    if config.subjects:
        return config.subjects
    seen: dict[str, None] = {}
    for ctx in contexts:
        if ctx.extracted is not None:
            for subject in ctx.extracted.header.subjects:
                seen.setdefault(subject, None)
    return tuple(seen)


def process_documents(
    config: Config,
    *,
    store: DocumentStore | None = None,
) -> list[DocumentContext]:
    """Load every discovered document through both pipeline phases.

    Args:
        config (Config): Runtime configuration.
        store (DocumentStore | None): Store to read from (defaults to one built
            from ``config``).

    Returns:
        list[DocumentContext]: Finished contexts, in discovery order.

    Raises:
        DocumentError: On the first invalid document; no partial result is returned.
    """
    store = store or DocumentStore.from_config(config)
    contexts: list[DocumentContext] = [
        run(DocumentContext.bootstrap(location=loc, config=config, store=store), LOAD)
        for loc in store.discover()
    ]
    subjects: tuple[str, ...] = known_subjects(config, contexts)
    for ctx in contexts:
        ctx.known_subjects = subjects
        run(ctx, FINISH)
    return contexts


def load_documents(
    config: Config,
    *,
    store: DocumentStore | None = None,
) -> list[FeatureDocument]:
    """Return all documents below the content root, in discovery order.

    Raises:
        DocumentError: On the first invalid document.
    """
    return [ctx.document for ctx in process_documents(config, store=store) if ctx.document]


def build_collection(
    config: Config,
    *,
    store: DocumentStore | None = None,
) -> FeatureCollection:
    """Load the documents and assemble the ordered feature collection.

    Raises:
        DocumentError: On the first invalid document, or the first feature
            whose page location is already taken; the whole build fails.
    """
    documents: list[FeatureDocument] = load_documents(config, store=store)
    conflicts: list[DocumentError] = list(
        find_page_conflicts(filter_by_kind(documents, config.feature_kind))
    )
    if conflicts:
        raise conflicts[0]
    return assemble_collection(documents, kind=config.feature_kind, sort=config.sort)


@dataclass
class ValidationReport:
    """Outcome of validating every document, without stopping at the first error.

    Attributes:
        checked (list[DocumentLocation]): Every document that was examined.
        errors (list[DocumentError]): One entry per rejected document.
        diagnostics (list[Diagnostic]): Non-fatal findings across all documents.
    """

    checked: list[DocumentLocation] = field(default_factory=lambda: [])
    errors: list[DocumentError] = field(default_factory=lambda: [])
    diagnostics: list[Diagnostic] = field(default_factory=lambda: [])

    @property
    def ok(self) -> bool:
        """Return True if no document was rejected."""
        return not self.errors


def validate_documents(
    config: Config,
    *,
    store: DocumentStore | None = None,
) -> ValidationReport:
    """Validate every document and collect all failures.

    Unlike `build_collection`, a failing document does not stop the run: each
    error is recorded and the remaining documents are still checked.

    Returns:
        ValidationReport: Checked documents, errors and diagnostics.
    """
    store = store or DocumentStore.from_config(config)
    report = ValidationReport()
    loaded: list[DocumentContext] = []
    for loc in store.discover():
        report.checked.append(loc)
        ctx: DocumentContext = DocumentContext.bootstrap(location=loc, config=config, store=store)
        try:
            loaded.append(run(ctx, LOAD))
        except DocumentError as exc:
            logger.debug("Rejected %s: %s", loc.relpath, exc)
            report.errors.append(exc.with_source(loc.relpath))

    subjects: tuple[str, ...] = known_subjects(config, loaded)
    for ctx in loaded:
        ctx.known_subjects = subjects
        try:
            run(ctx, FINISH)
        except DocumentError as exc:
            logger.debug("Rejected %s: %s", ctx.source, exc)
            report.errors.append(exc.with_source(ctx.source))
        report.diagnostics.extend(ctx.diagnostics)

    built: list[FeatureDocument] = [ctx.document for ctx in loaded if ctx.document]
    report.errors.extend(find_page_conflicts(filter_by_kind(built, config.feature_kind)))
    return report
