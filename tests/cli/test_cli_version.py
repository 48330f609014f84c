# topmark:header:start
#
#   project      : FeatureDocs
#   file         : test_cli_version.py
#   file_relpath : tests/cli/test_cli_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for `featuredocs version` and the bare group invocation."""

from __future__ import annotations

import json

import pytest

from featuredocs.cli.exit_codes import ExitCode
from featuredocs.constants import FEATUREDOCS_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli

pytestmark = pytest.mark.cli


def test_version_plain() -> None:
    """The default output is the bare version string."""
    result = run_cli(["--no-color", "version"])
    assert_SUCCESS(result)
    assert result.output.strip() == FEATUREDOCS_VERSION


def test_version_json() -> None:
    """``--format json`` emits a machine-readable object."""
    result = run_cli(["--no-color", "version", "--format", "json"])
    assert_SUCCESS(result)
    assert json.loads(result.output) == {"version": FEATUREDOCS_VERSION}


def test_version_markdown() -> None:
    """``--format markdown`` emits a heading and the version."""
    result = run_cli(["--no-color", "version", "--format", "markdown"])
    assert_SUCCESS(result)
    assert result.output.startswith("# FeatureDocs Version")
    assert FEATUREDOCS_VERSION in result.output


def test_no_subcommand_prints_help() -> None:
    """Invoking the group without a command shows a hint and the help text."""
    result = run_cli(["--no-color"])
    assert_SUCCESS(result)
    assert "Hint:" in result.output
    assert "check" in result.output


def test_verbose_and_quiet_conflict() -> None:
    """``-v`` and ``-q`` together are a usage error."""
    result = run_cli(["-v", "-q", "version"])
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def test_unknown_format_is_rejected() -> None:
    """An unknown ``--format`` value is a Click usage error."""
    result = run_cli(["version", "--format", "yaml"])
    assert result.exit_code == 2
