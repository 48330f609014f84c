# topmark:header:start
#
#   project      : FeatureDocs
#   file         : console.py
#   file_relpath : src/featuredocs/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console for user-facing program output.

Reports, listings and written paths go through the console bound to the
Click context (``ctx.obj["console"]``); the pipeline log goes through
`logging` on stderr. Commands only rely on `ConsoleLike`, so tests or
integrations can swap in their own sink.
"""

from __future__ import annotations

import sys
from typing import Any, Protocol, TextIO

import click


class ConsoleLike(Protocol):
    """What CLI commands need from a console."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write program output to stdout."""
        ...

    def success(self, text: str) -> None:
        """Write a closing success summary to stdout."""
        ...

    def warn(self, text: str) -> None:
        """Write a warning to stderr."""
        ...

    def error(self, text: str) -> None:
        """Write an error to stderr."""
        ...

    def styled(self, text: str, **style: Any) -> str:
        """Return ``text`` styled for this console."""
        ...


class ClickConsole:
    """`ConsoleLike` implementation on top of `click.echo`.

    Streams are resolved when the console is created, so a console built inside
    `click.testing.CliRunner.invoke` writes to the runner's captured streams.

    Args:
        enable_color (bool): Emit ANSI styles; when False every method writes plain text.
        out (TextIO | None): Program output stream (defaults to `sys.stdout`).
        err (TextIO | None): Warning and error stream (defaults to `sys.stderr`).
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color: bool = enable_color
        self.out: TextIO = out or sys.stdout
        self.err: TextIO = err or sys.stderr

    def _emit(self, text: str, stream: TextIO, *, nl: bool = True, **style: Any) -> None:
        click.echo(self.styled(text, **style), nl=nl, file=stream, color=self.enable_color)

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write program output to stdout."""
        self._emit(text, self.out, nl=nl)

    def success(self, text: str) -> None:
        """Write a green summary line to stdout."""
        self._emit(text, self.out, fg="green")

    def warn(self, text: str) -> None:
        """Write a yellow warning line to stderr."""
        self._emit(text, self.err, fg="yellow")

    def error(self, text: str) -> None:
        """Write a red error line to stderr."""
        self._emit(text, self.err, fg="bright_red")

    def styled(self, text: str, **style: Any) -> str:
        """Return ``text`` with `click.style` applied, or unchanged when color is off."""
        if not self.enable_color or not style:
            return text
        return click.style(text, **style)
