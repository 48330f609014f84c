# topmark:header:start
#
#   project      : FeatureDocs
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers for invoking the FeatureDocs CLI from tests.

The CLI resolves ``content/`` and ``public/`` against the working directory,
so project-level tests run it from inside a temporary project.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from featuredocs.cli.exit_codes import ExitCode
from featuredocs.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def run_cli(argv: str | Sequence[str] | None, *, input_text: str | None = None) -> Result:
    """Invoke the CLI in the current working directory."""
    return CliRunner().invoke(cli, argv, input=input_text)


def run_cli_in(
    project: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | None = None,
) -> Result:
    """Invoke the CLI with ``project`` as the working directory.

    Example:
        ```python
        res = run_cli_in(tmp_path, ["--no-color", "build"])
        assert_SUCCESS(res)
        ```
    """
    previous: str = os.getcwd()
    os.chdir(project)
    try:
        return run_cli(argv, input_text=input_text)
    finally:
        os.chdir(previous)


def assert_exit(result: Result, expected: ExitCode) -> None:
    """Assert the exit code, showing the command output on failure."""
    assert result.exit_code == expected, f"exit {result.exit_code}:\n{result.output}"


def assert_SUCCESS(result: Result) -> None:
    assert_exit(result, ExitCode.SUCCESS)


def assert_USAGE_ERROR(result: Result) -> None:
    """FeatureDocs usage errors exit 64; Click's own parse errors exit 2."""
    assert_exit(result, ExitCode.USAGE_ERROR)


def assert_DATA_ERROR(result: Result) -> None:
    assert_exit(result, ExitCode.DATA_ERROR)
