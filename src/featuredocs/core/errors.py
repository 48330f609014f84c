# topmark:header:start
#
#   project      : FeatureDocs
#   file         : errors.py
#   file_relpath : src/featuredocs/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the FeatureDocs document pipeline.

Every document error names the offending source (when known) and the
validation rule that was violated, so a failed build can report both.
Errors are never retried: documents are static inputs, so a failure is a
content bug to fix at the source.

Hierarchy:
    FeatureDocsError
      ├── DocumentError
      │     ├── DocumentNotFoundError
      │     ├── DocumentEncodingError
      │     ├── MalformedHeaderError
      │     ├── MissingRequiredFieldError
      │     ├── UnknownSubjectStatusError
      │     ├── UnlistedSubjectError
      │     └── DuplicatePagePathError
      ├── ConfigError
      └── TemplateError
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from pathlib import Path


class FeatureDocsError(Exception):
    """Base class for all FeatureDocs errors."""


class DocumentError(FeatureDocsError):
    """A feature document cannot be loaded or does not satisfy the document schema.

    Attributes:
        rule (str): Stable identifier of the violated validation rule.
        reason (str): Human-readable description of the problem.
        source (Path | str | None): The document the error refers to, if known.
    """

    rule: ClassVar[str] = "document"

    def __init__(self, reason: str, *, source: Path | str | None = None) -> None:
        super().__init__(reason)
        self.reason: str = reason
        self.source: Path | str | None = source

    def with_source(self, source: Path | str) -> DocumentError:
        """Attach ``source`` when the raiser did not know it, and return ``self``."""
        if self.source is None:
            self.source = source
        return self

    def __str__(self) -> str:
        prefix: str = f"{self.source}: " if self.source is not None else ""
        return f"{prefix}{self.reason} [{self.rule}]"


class DocumentNotFoundError(DocumentError):
    """The document file does not exist or is not a regular file."""

    rule = "document-exists"


class DocumentEncodingError(DocumentError):
    """The document file is not valid UTF-8 text."""

    rule = "utf-8"


class MalformedHeaderError(DocumentError):
    """The header block is missing, unterminated, unparseable or has the wrong shape."""

    rule = "header-format"


class MissingRequiredFieldError(DocumentError):
    """A required header field (``title``, ``excerpt``, subjects) is absent or empty.

    Attributes:
        field (str): Name of the missing field.
    """

    rule = "required-field"

    def __init__(self, field: str, *, source: Path | str | None = None) -> None:
        super().__init__(f"missing required field '{field}'", source=source)
        self.field: str = field


class UnknownSubjectStatusError(DocumentError):
    """A subject's status is outside the closed `SupportStatus` enumeration.

    Attributes:
        subject (str): The subject whose status was rejected.
        value (object): The rejected status value.
    """

    rule = "status-enum"

    def __init__(
        self,
        subject: str,
        value: object,
        *,
        allowed: tuple[str, ...],
        source: Path | str | None = None,
    ) -> None:
        super().__init__(
            f"subject '{subject}' has unknown status {value!r} "
            f"(expected one of: {', '.join(allowed)})",
            source=source,
        )
        self.subject: str = subject
        self.value: object = value


class UnlistedSubjectError(DocumentError):
    """The body has a section for a subject the header does not list (strict mode).

    Attributes:
        subjects (tuple[str, ...]): The unlisted subjects.
    """

    rule = "subject-listed"

    def __init__(self, subjects: tuple[str, ...], *, source: Path | str | None = None) -> None:
        super().__init__(
            f"body covers subject(s) without a status entry: {', '.join(subjects)}",
            source=source,
        )
        self.subjects: tuple[str, ...] = subjects


class DuplicatePagePathError(DocumentError):
    """Two documents, or a document and the site index, render to the same page.

    Attributes:
        page_path (str): The contested page location (``""`` is the site index).
        other (Path | str | None): The document or page that already claims it.
    """

    rule = "page-path-unique"

    def __init__(
        self,
        page_path: str,
        *,
        other: Path | str | None,
        source: Path | str | None = None,
    ) -> None:
        target: str = f"'/{page_path}'"
        claimant: str = "the site index" if other is None else str(other)
        super().__init__(f"page {target} is already taken by {claimant}", source=source)
        self.page_path: str = page_path
        self.other: Path | str | None = other


class TemplateError(FeatureDocsError):
    """A page template is missing or failed to render."""


class ConfigError(FeatureDocsError):
    """An explicitly requested config file cannot be read or parsed."""
