# topmark:header:start
#
#   project      : FeatureDocs
#   file         : builder.py
#   file_relpath : src/featuredocs/pipeline/steps/builder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Builder step: assemble the immutable `FeatureDocument`."""

from __future__ import annotations

from typing import TYPE_CHECKING

from featuredocs.documents.model import FeatureDocument
from featuredocs.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from featuredocs.pipeline.context import DocumentContext


class BuilderStep(BaseStep):
    """Combine extraction result and location facts into a `FeatureDocument`.

    Sets:
      - ctx.document
    """

    def may_proceed(self, ctx: DocumentContext) -> bool:
        return ctx.extracted is not None

    def run(self, ctx: DocumentContext) -> None:
        assert ctx.extracted is not None
        ctx.document = FeatureDocument.from_extracted(
            ctx.extracted,
            url=ctx.location.url,
            slug=ctx.location.slug,
            page_path=ctx.location.page_path,
            source=ctx.location.path,
            body_subjects=ctx.body_subjects,
        )
