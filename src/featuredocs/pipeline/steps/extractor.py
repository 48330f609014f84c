# topmark:header:start
#
#   project      : FeatureDocs
#   file         : extractor.py
#   file_relpath : src/featuredocs/pipeline/steps/extractor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Extractor step: run the Metadata Extractor on the raw text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from featuredocs.documents.extractor import extract
from featuredocs.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from featuredocs.pipeline.context import DocumentContext


class ExtractorStep(BaseStep):
    """Split the document into validated header and body.

    Sets:
      - ctx.extracted
      - an ``info`` diagnostic per ignored (unknown) header key
    """

    def may_proceed(self, ctx: DocumentContext) -> bool:
        return ctx.text is not None

    def run(self, ctx: DocumentContext) -> None:
        assert ctx.text is not None
        ctx.extracted = extract(ctx.text, source=ctx.source)
        for key in ctx.extracted.ignored_keys:
            ctx.diagnostics.add_info(f"{ctx.source}: unknown header key '{key}' ignored")
