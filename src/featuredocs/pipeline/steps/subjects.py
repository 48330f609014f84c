# topmark:header:start
#
#   project      : FeatureDocs
#   file         : subjects.py
#   file_relpath : src/featuredocs/pipeline/steps/subjects.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subject check step: cross-check body sections against the header.

A level-2 body section whose title is a known subject is a *body subject*.
When a body subject has no entry in the header, the document is rejected in
strict mode; otherwise a warning is recorded and the subject is rendered with
the neutral ``unspecified`` badge on the feature page.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from featuredocs.config.logging import get_logger
from featuredocs.core.errors import UnlistedSubjectError
from featuredocs.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from featuredocs.config.logging import FeatureDocsLogger
    from featuredocs.pipeline.context import DocumentContext

logger: FeatureDocsLogger = get_logger(__name__)


class SubjectCheckStep(BaseStep):
    """Determine the body subjects and flag those the header does not list.

    Sets:
      - ctx.body_subjects
      - a ``warning`` diagnostic per unlisted subject (non-strict mode)

    Raises:
      - UnlistedSubjectError in strict mode.
    """

    def may_proceed(self, ctx: DocumentContext) -> bool:
        return ctx.extracted is not None

    def run(self, ctx: DocumentContext) -> None:
        assert ctx.extracted is not None
        declared: tuple[str, ...] = ctx.extracted.header.subjects
        known: set[str] = {*ctx.known_subjects, *declared}

        body_subjects: list[str] = []
        for section in ctx.extracted.body_sections:
            if section in known and section not in body_subjects:
                body_subjects.append(section)
        ctx.body_subjects = tuple(body_subjects)

        unlisted: tuple[str, ...] = tuple(s for s in body_subjects if s not in declared)
        if not unlisted:
            return
        if ctx.config.strict:
            raise UnlistedSubjectError(unlisted, source=ctx.source)
        for subject in unlisted:
            ctx.diagnostics.add_warning(
                f"{ctx.source}: body has a section for '{subject}' but the header "
                "lists no status for it; rendering it as unspecified"
            )
