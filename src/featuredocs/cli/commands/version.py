# topmark:header:start
#
#   project      : FeatureDocs
#   file         : version.py
#   file_relpath : src/featuredocs/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FeatureDocs `version` command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from featuredocs.cli.cli_types import EnumChoiceParam
from featuredocs.cli.cmd_common import get_console, get_effective_verbosity
from featuredocs.constants import FEATUREDOCS_VERSION
from featuredocs.rendering.formats import OutputFormat

if TYPE_CHECKING:
    from featuredocs.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of FeatureDocs.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Print the FeatureDocs version installed in the current environment."""
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": FEATUREDOCS_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# FeatureDocs Version\n")
        console.print(f"**FeatureDocs version: {FEATUREDOCS_VERSION}**")
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("FeatureDocs version:", bold=True, underline=True))
        console.print(f"    {console.styled(FEATUREDOCS_VERSION, bold=True)}")
    else:
        console.print(console.styled(FEATUREDOCS_VERSION, bold=True))
