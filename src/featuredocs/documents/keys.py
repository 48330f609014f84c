# topmark:header:start
#
#   project      : FeatureDocs
#   file         : keys.py
#   file_relpath : src/featuredocs/documents/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Front matter keys of feature documents.

This is the contribution schema: every feature document declares these keys
in its header block. Canonical names are snake_case; the listed aliases
(camelCase spellings used by older documents) are accepted and mapped onto
the canonical key.
"""

from __future__ import annotations

from typing import Final


class FrontMatter:
    """Front matter key names and aliases."""

    KEY_TITLE: Final[str] = "title"
    KEY_EXCERPT: Final[str] = "excerpt"
    KEY_ORDER: Final[str] = "order"
    KEY_KIND: Final[str] = "kind"
    KEY_SUBJECTS: Final[str] = "subjects"

    # Per-subject entry keys
    KEY_STATUS: Final[str] = "status"
    KEY_DETAILS_CAPTION: Final[str] = "details_caption"
    KEY_DETAILS_URL: Final[str] = "details_url"

    DOCUMENT_ALIASES: Final[dict[str, tuple[str, ...]]] = {
        KEY_ORDER: ("order_key", "orderKey"),
        KEY_SUBJECTS: ("status_by_subject", "statusBySubject"),
    }

    SUBJECT_ALIASES: Final[dict[str, tuple[str, ...]]] = {
        KEY_DETAILS_CAPTION: ("detailsCaption",),
        KEY_DETAILS_URL: ("detailsUrl",),
    }

    DOCUMENT_KEYS: Final[frozenset[str]] = frozenset(
        {KEY_TITLE, KEY_EXCERPT, KEY_ORDER, KEY_KIND, KEY_SUBJECTS}
    )

    SUBJECT_KEYS: Final[frozenset[str]] = frozenset(
        {KEY_STATUS, KEY_DETAILS_CAPTION, KEY_DETAILS_URL}
    )

    REQUIRED_KEYS: Final[tuple[str, ...]] = (KEY_TITLE, KEY_EXCERPT, KEY_SUBJECTS)

    DEFAULT_KIND: Final[str] = "feature"
