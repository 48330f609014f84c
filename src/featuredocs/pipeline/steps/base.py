# topmark:header:start
#
#   project      : FeatureDocs
#   file         : base.py
#   file_relpath : src/featuredocs/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for document pipeline steps.

A step is a callable ``DocumentContext -> DocumentContext``. `BaseStep`
records itself on the context, asks `may_proceed` whether the inputs it needs
are present, and only then calls `run`. Invalid content is reported by raising
a `featuredocs.core.errors.DocumentError`; the runner decides whether that
aborts the build or is collected for a report.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from featuredocs.config.logging import get_logger

if TYPE_CHECKING:
    from featuredocs.config.logging import FeatureDocsLogger
    from featuredocs.pipeline.context import DocumentContext

logger: FeatureDocsLogger = get_logger(__name__)


class BaseStep:
    """One stage of document processing.

    Subclasses override `run` and, when they depend on an earlier step's
    output, `may_proceed`. `__call__` is not meant to be overridden.

    Args:
        name (str | None): Identifier used in logs and in ``ctx.steps``
            (defaults to the class name).
    """

    def __init__(self, name: str | None = None) -> None:
        self.name: str = name or type(self).__name__

    def __repr__(self) -> str:
        return f"<{self.name}>"

    def __call__(self, ctx: DocumentContext) -> DocumentContext:
        """Run the step on ``ctx`` if its inputs are available; return ``ctx``."""
        ctx.steps.append(self)
        if not self.may_proceed(ctx):
            logger.trace("%s: %s skipped", ctx.source, self.name)
            return ctx
        logger.trace("%s: %s", ctx.source, self.name)
        self.run(ctx)
        return ctx

    def may_proceed(self, ctx: DocumentContext) -> bool:
        """Return True if the inputs this step needs are present (default: always)."""
        return True

    def run(self, ctx: DocumentContext) -> None:
        """Do the step's work, updating ``ctx`` in place."""
        raise NotImplementedError
