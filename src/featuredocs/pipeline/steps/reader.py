# topmark:header:start
#
#   project      : FeatureDocs
#   file         : reader.py
#   file_relpath : src/featuredocs/pipeline/steps/reader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reader step: load the raw document text from the store."""

from __future__ import annotations

from typing import TYPE_CHECKING

from featuredocs.config.logging import get_logger
from featuredocs.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from featuredocs.config.logging import FeatureDocsLogger
    from featuredocs.pipeline.context import DocumentContext

logger: FeatureDocsLogger = get_logger(__name__)


class ReaderStep(BaseStep):
    """Read the document file as UTF-8 text.

    Sets:
      - ctx.text

    Raises:
      - DocumentNotFoundError if the file vanished since discovery.
      - DocumentEncodingError if the file is not UTF-8.
    """

    def run(self, ctx: DocumentContext) -> None:
        ctx.text = ctx.store.read(ctx.location.path)
        logger.debug("%s: read %d chars", ctx.source, len(ctx.text))
