# topmark:header:start
#
#   project      : FeatureDocs
#   file         : cli_types.py
#   file_relpath : src/featuredocs/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared Click parameter types."""

from __future__ import annotations

from enum import Enum
from typing import Any

import click


class EnumChoiceParam(click.Choice):
    """A ``click.Choice`` over an Enum's values that yields the Enum member.

    Matching is case-insensitive; help text and shell completion list the
    members' values.

    Args:
        enum_cls (type[Enum]): The Enum whose ``str`` values are the choices.
    """

    def __init__(self, enum_cls: type[Enum]) -> None:
        super().__init__([str(member.value) for member in enum_cls], case_sensitive=False)
        self.enum_cls: type[Enum] = enum_cls
        self.name = enum_cls.__name__.lower()

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> Any:
        """Return the member matching ``value`` (members pass through unchanged)."""
        if isinstance(value, self.enum_cls):
            return value
        choice: Any = super().convert(value, param, ctx)
        return self.enum_cls(str(choice).lower())
