# topmark:header:start
#
#   project      : FeatureDocs
#   file         : enum_mixins.py
#   file_relpath : src/featuredocs/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Enum helpers for values read from hand-written documents.

Provided:
    - ``KeyedStrEnum``: ``str`` Enum whose ``.value`` is the canonical key
      written in front matter, with a lenient `parse()` for user input.

Members are ``str`` instances, so they serialize as plain strings in JSON
payloads and compare equal to their key inside Jinja templates.

Example:
    ```python
    class Status(KeyedStrEnum):
        OPEN = "open"
        CLOSED = "closed"

    assert Status.parse(" Closed ") is Status.CLOSED
    assert Status.parse("done") is None
    assert Status.keys() == ("open", "closed")
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

_KS = TypeVar("_KS", bound="KeyedStrEnum")


class KeyedStrEnum(str, Enum):
    """``str`` Enum keyed by canonical lower-case tokens."""

    def __str__(self) -> str:
        return self.value

    @classmethod
    def keys(cls: type[_KS]) -> tuple[str, ...]:
        """Return the canonical keys of all members, in declaration order."""
        return tuple(m.value for m in cls)

    @classmethod
    def parse(cls: type[_KS], raw: object) -> _KS | None:
        """Return the member whose key matches ``raw``.

        Surrounding whitespace and letter case are ignored. Non-string input
        (numbers, booleans, lists from a YAML header) never matches.

        Args:
            raw (object): The value as written in the document.

        Returns:
            _KS | None: The matching member, or ``None`` on a miss.
        """
        if not isinstance(raw, str):
            return None
        token: str = raw.strip().lower()
        for member in cls:
            if member.value == token:
                return member
        return None
