# topmark:header:start
#
#   project      : FeatureDocs
#   file         : extractor.py
#   file_relpath : src/featuredocs/documents/extractor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Metadata Extractor: split a feature document into header and body.

Supported header blocks:

* YAML front matter, fenced by ``---`` lines (parsed with PyYAML ``safe_load``)::

      ---
      title: Generics - static types
      order: 500
      excerpt: Parametric polymorphism checked at compile time.
      subjects:
        rust: supported
        swift:
          status: pending
          details_caption: SE-0361
          details_url: https://example.org/se-0361
      ---

* TOML front matter, fenced by ``+++`` lines (parsed with ``tomlkit``).

* A bare leading block of ``key: value`` lines terminated by the first blank
  line (parsed as YAML).

The body is everything after the header block, minus one separating blank
line, and is passed through unchanged.

Extraction is a pure function of the input text: no I/O and no state.
"""

from __future__ import annotations

import math
import re
from enum import Enum
from typing import TYPE_CHECKING, Any, cast

import tomlkit
import yaml
from tomlkit.exceptions import ParseError as TomlkitParseError

from featuredocs.config.logging import get_logger
from featuredocs.constants import TOML_FENCE, YAML_FENCE
from featuredocs.core.errors import (
    MalformedHeaderError,
    MissingRequiredFieldError,
    UnknownSubjectStatusError,
)
from featuredocs.documents.keys import FrontMatter
from featuredocs.documents.model import (
    DocumentHeader,
    ExtractedDocument,
    SubjectStatus,
    SupportStatus,
)

if TYPE_CHECKING:
    from pathlib import Path

    from featuredocs.config.logging import FeatureDocsLogger

logger: FeatureDocsLogger = get_logger(__name__)

_BARE_HEADER_RE: re.Pattern[str] = re.compile(r"^[A-Za-z_][\w-]*\s*:")
_SECTION_RE: re.Pattern[str] = re.compile(r"^##\s+(?P<title>.+?)\s*#*\s*$")
_FENCE_RE: re.Pattern[str] = re.compile(r"^\s*(```|~~~)")
_LINK_RE: re.Pattern[str] = re.compile(r"\[(?P<text>[^\]]*)\]\([^)]*\)")

_BOM: str = "\ufeff"


class HeaderFormat(Enum):
    """Syntax of a document's header block."""

    YAML = "yaml"
    TOML = "toml"
    BARE = "bare"


def split_header(text: str, *, source: Path | str | None = None) -> tuple[HeaderFormat, str, str]:
    """Split raw document text into ``(format, header_text, body)``.

    Args:
        text (str): Raw document text.
        source (Path | str | None): Document location, used in error messages only.

    Returns:
        tuple[HeaderFormat, str, str]: The header syntax, the header block
        without its fences, and the body.

    Raises:
        MalformedHeaderError: If the text has no header block or the block is
            not terminated.
    """
    if text.startswith(_BOM):
        text = text[len(_BOM) :]
    lines: list[str] = text.splitlines(keepends=True)
    if not lines:
        raise MalformedHeaderError("document is empty; expected a header block", source=source)

    first: str = lines[0].strip()
    if first in (YAML_FENCE, TOML_FENCE):
        fmt: HeaderFormat = HeaderFormat.YAML if first == YAML_FENCE else HeaderFormat.TOML
        closers: tuple[str, ...] = (first, "...") if fmt is HeaderFormat.YAML else (first,)
        for i in range(1, len(lines)):
            if lines[i].strip() in closers:
                return fmt, "".join(lines[1:i]), _body_after(lines, i + 1)
        raise MalformedHeaderError(
            f"header block opened with '{first}' is never closed", source=source
        )

    if _BARE_HEADER_RE.match(lines[0]):
        for i, line in enumerate(lines):
            if not line.strip():
                return HeaderFormat.BARE, "".join(lines[:i]), "".join(lines[i + 1 :])
        return HeaderFormat.BARE, "".join(lines), ""

    raise MalformedHeaderError("document does not start with a header block", source=source)


def _body_after(lines: list[str], start: int) -> str:
    # Drop the single blank separator line that conventionally follows the fence.
    if start < len(lines) and not lines[start].strip():
        start += 1
    return "".join(lines[start:])


def parse_header_block(
    header_text: str,
    fmt: HeaderFormat,
    *,
    source: Path | str | None = None,
) -> dict[str, Any]:
    """Parse a header block into a plain mapping.

    Args:
        header_text (str): Header block without fences.
        fmt (HeaderFormat): Syntax of the block.
        source (Path | str | None): Document location, used in error messages only.

    Returns:
        dict[str, Any]: The parsed key/value pairs.

    Raises:
        MalformedHeaderError: If the block does not parse or is not a mapping.
    """
    data: Any
    try:
        if fmt is HeaderFormat.TOML:
            data = tomlkit.parse(header_text).unwrap()
        else:
            data = yaml.safe_load(header_text)
    except yaml.YAMLError as exc:
        raise MalformedHeaderError(f"header is not valid YAML: {exc}", source=source) from exc
    except TomlkitParseError as exc:
        raise MalformedHeaderError(f"header is not valid TOML: {exc}", source=source) from exc

    if data is None or data == {}:
        raise MalformedHeaderError("header block is empty", source=source)
    if not isinstance(data, dict):
        raise MalformedHeaderError(
            f"header must be a mapping of keys to values, got {type(data).__name__}",
            source=source,
        )
    return cast("dict[str, Any]", data)


def _canonicalize(
    raw: dict[Any, Any],
    *,
    known: frozenset[str],
    aliases: dict[str, tuple[str, ...]],
    where: str,
    source: Path | str | None,
) -> tuple[dict[str, Any], list[str]]:
    """Map aliased keys onto canonical keys; collect keys outside the schema."""
    alias_to_key: dict[str, str] = {a: k for k, names in aliases.items() for a in names}
    out: dict[str, Any] = {}
    spelled: dict[str, str] = {}
    ignored: list[str] = []
    for key_any, value in raw.items():
        key = str(key_any)
        canonical: str | None = key if key in known else alias_to_key.get(key)
        if canonical is None:
            ignored.append(key)
            continue
        if canonical in out:
            raise MalformedHeaderError(
                f"{where}key '{canonical}' given twice (as '{spelled[canonical]}' and '{key}')",
                source=source,
            )
        out[canonical] = value
        spelled[canonical] = key
    return out, ignored


def _required_text(data: dict[str, Any], key: str, *, source: Path | str | None) -> str:
    value: Any = data.get(key)
    if value is None:
        raise MissingRequiredFieldError(key, source=source)
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise MalformedHeaderError(
            f"'{key}' must be text, got {type(value).__name__}", source=source
        )
    text: str = str(value).strip()
    if not text:
        raise MissingRequiredFieldError(key, source=source)
    return text


def _optional_text(
    data: dict[str, Any], key: str, *, where: str, source: Path | str | None
) -> str | None:
    value: Any = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise MalformedHeaderError(
            f"{where}'{key}' must be text, got {type(value).__name__}", source=source
        )
    return value.strip() or None


def _order_key(value: Any, *, source: Path | str | None) -> int | float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedHeaderError(
            f"'{FrontMatter.KEY_ORDER}' must be a number, got {value!r}", source=source
        )
    if isinstance(value, float) and not math.isfinite(value):
        raise MalformedHeaderError(
            f"'{FrontMatter.KEY_ORDER}' must be a finite number, got {value!r}", source=source
        )
    return value


def _parse_status(subject: str, value: Any, *, source: Path | str | None) -> SupportStatus:
    status: SupportStatus | None = SupportStatus.parse(value)
    if status is None:
        raise UnknownSubjectStatusError(
            subject, value, allowed=SupportStatus.keys(), source=source
        )
    return status


def _subject_entry(
    subject: str,
    value: Any,
    *,
    source: Path | str | None,
    ignored: list[str],
) -> SubjectStatus:
    if isinstance(value, dict):
        where: str = f"subjects.{subject}: "
        entry, entry_ignored = _canonicalize(
            cast("dict[Any, Any]", value),
            known=FrontMatter.SUBJECT_KEYS,
            aliases=FrontMatter.SUBJECT_ALIASES,
            where=where,
            source=source,
        )
        ignored.extend(f"{FrontMatter.KEY_SUBJECTS}.{subject}.{k}" for k in entry_ignored)
        if entry.get(FrontMatter.KEY_STATUS) is None:
            raise MissingRequiredFieldError(
                f"{FrontMatter.KEY_SUBJECTS}.{subject}.{FrontMatter.KEY_STATUS}", source=source
            )
        return SubjectStatus(
            subject=subject,
            status=_parse_status(subject, entry[FrontMatter.KEY_STATUS], source=source),
            details_caption=_optional_text(
                entry, FrontMatter.KEY_DETAILS_CAPTION, where=where, source=source
            ),
            details_url=_optional_text(
                entry, FrontMatter.KEY_DETAILS_URL, where=where, source=source
            ),
        )
    return SubjectStatus(subject=subject, status=_parse_status(subject, value, source=source))


def _subjects(
    value: Any,
    *,
    source: Path | str | None,
    ignored: list[str],
) -> dict[str, SubjectStatus]:
    if value is None:
        raise MissingRequiredFieldError(FrontMatter.KEY_SUBJECTS, source=source)
    if not isinstance(value, dict):
        raise MalformedHeaderError(
            f"'{FrontMatter.KEY_SUBJECTS}' must map subjects to statuses, "
            f"got {type(value).__name__}",
            source=source,
        )
    entries: dict[str, SubjectStatus] = {}
    for raw_subject, raw_entry in cast("dict[Any, Any]", value).items():
        subject: str = normalize_subject(str(raw_subject))
        if not subject:
            raise MalformedHeaderError("subject names must not be empty", source=source)
        if subject in entries:
            raise MalformedHeaderError(f"subject '{subject}' is listed twice", source=source)
        entries[subject] = _subject_entry(subject, raw_entry, source=source, ignored=ignored)
    if not entries:
        raise MissingRequiredFieldError(FrontMatter.KEY_SUBJECTS, source=source)
    return entries


def build_header(
    data: dict[str, Any],
    *,
    source: Path | str | None = None,
) -> tuple[DocumentHeader, tuple[str, ...]]:
    """Validate parsed front matter against the document schema.

    Args:
        data (dict[str, Any]): Parsed header mapping.
        source (Path | str | None): Document location, used in error messages only.

    Returns:
        tuple[DocumentHeader, tuple[str, ...]]: The header and the ignored
        (unknown) keys.

    Raises:
        MalformedHeaderError: If a field has the wrong shape.
        MissingRequiredFieldError: If ``title``, ``excerpt`` or the subjects are missing.
        UnknownSubjectStatusError: If a status is outside `SupportStatus`.
    """
    fields, ignored = _canonicalize(
        data,
        known=FrontMatter.DOCUMENT_KEYS,
        aliases=FrontMatter.DOCUMENT_ALIASES,
        where="",
        source=source,
    )
    title: str = _required_text(fields, FrontMatter.KEY_TITLE, source=source)
    excerpt: str = _required_text(fields, FrontMatter.KEY_EXCERPT, source=source)
    statuses: dict[str, SubjectStatus] = _subjects(
        fields.get(FrontMatter.KEY_SUBJECTS), source=source, ignored=ignored
    )
    kind: str | None = _optional_text(fields, FrontMatter.KEY_KIND, where="", source=source)
    header = DocumentHeader(
        title=title,
        excerpt=excerpt,
        status_by_subject=statuses,
        order_key=_order_key(fields.get(FrontMatter.KEY_ORDER), source=source),
        kind=kind or FrontMatter.DEFAULT_KIND,
    )
    if ignored:
        logger.debug("%s: ignoring unknown header keys: %s", source or "<text>", ignored)
    return header, tuple(ignored)


def find_body_sections(body: str) -> tuple[str, ...]:
    """Return the normalized titles of the body's level-2 sections.

    Headings inside fenced code blocks are skipped. Link markup is reduced to
    its text, so ``## [Rust](https://rust-lang.org)`` yields ``"rust"``.

    Args:
        body (str): Markdown body.

    Returns:
        tuple[str, ...]: Section titles, lower-cased, in order of appearance.
    """
    sections: list[str] = []
    in_fence: bool = False
    for line in body.splitlines():
        if _FENCE_RE.match(line):
            in_fence = not in_fence
            continue
        if in_fence:
            continue
        m: re.Match[str] | None = _SECTION_RE.match(line)
        if m:
            title: str = _LINK_RE.sub(lambda lm: lm.group("text"), m.group("title"))
            sections.append(normalize_subject(title))
    return tuple(sections)


def normalize_subject(subject: str) -> str:
    """Return the canonical form of a subject identifier."""
    return subject.strip().lower()


def extract(text: str, *, source: Path | str | None = None) -> ExtractedDocument:
    """Split ``text`` into a validated header and the unchanged body.

    Args:
        text (str): Raw document text.
        source (Path | str | None): Document location, used in error messages only.

    Returns:
        ExtractedDocument: Header, body, body section titles and ignored keys.

    Raises:
        MalformedHeaderError: If the header block is absent or not parseable.
        MissingRequiredFieldError: If ``title``, ``excerpt`` or subjects are absent.
        UnknownSubjectStatusError: If a status is outside `SupportStatus`.
    """
    fmt, header_text, body = split_header(text, source=source)
    logger.trace("%s: %s header block of %d chars", source or "<text>", fmt.value, len(header_text))
    data: dict[str, Any] = parse_header_block(header_text, fmt, source=source)
    header, ignored = build_header(data, source=source)
    return ExtractedDocument(
        header=header,
        body=body,
        body_sections=find_body_sections(body),
        ignored_keys=ignored,
    )
