# topmark:header:start
#
#   project      : FeatureDocs
#   file         : model.py
#   file_relpath : src/featuredocs/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Non-fatal findings recorded while loading configuration and documents.

Diagnostics cover things FeatureDocs can work around: configuration keys it
does not know, front matter keys it ignores, body sections for subjects the
header does not list. Anything that must stop a build is raised as a
`featuredocs.core.errors` exception instead, so there is no error level here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from featuredocs.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from featuredocs.config.logging import FeatureDocsLogger

logger: FeatureDocsLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity of a diagnostic.

    Members:
      INFO: Shown with ``-v`` only (e.g. an ignored front matter key).
      WARNING: Shown unless ``-q`` (e.g. an unlisted subject section).
    """

    INFO = "info"
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding; ``message`` already names the file it refers to."""

    level: DiagnosticLevel
    message: str


@dataclass
class DiagnosticLog:
    """Ordered, append-only list of diagnostics owned by a config or document."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def _add(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)
        logger.trace("Diagnostic [%s]: %s", diagnostic.level.value, diagnostic.message)

    def add_info(self, message: str) -> None:
        """Record an ``info`` finding."""
        self._add(Diagnostic(DiagnosticLevel.INFO, message))

    def add_warning(self, message: str) -> None:
        """Record a ``warning`` finding."""
        self._add(Diagnostic(DiagnosticLevel.WARNING, message))

    def extend(self, diagnostics: Iterable[Diagnostic]) -> None:
        """Append diagnostics collected elsewhere, preserving their order."""
        for d in diagnostics:
            self._add(d)

    def has_warning(self) -> bool:
        """Return True if any finding is a warning."""
        return any(d.level is DiagnosticLevel.WARNING for d in self.items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
