# topmark:header:start
#
#   project      : FeatureDocs
#   file         : main.py
#   file_relpath : src/featuredocs/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FeatureDocs command-line entry point.

Group-level options (verbosity, color) are resolved once and stored on
``ctx.obj`` together with the program-output console; subcommands read them
from there. Internal logging is configured from ``FEATUREDOCS_LOG_LEVEL``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from featuredocs.cli.commands.build import build_command
from featuredocs.cli.commands.check import check_command
from featuredocs.cli.commands.list import list_command
from featuredocs.cli.commands.new import new_command
from featuredocs.cli.commands.version import version_command
from featuredocs.cli.console import ClickConsole
from featuredocs.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from featuredocs.config.logging import resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from featuredocs.cli.console import ConsoleLike

SUBCOMMANDS: tuple[click.Command, ...] = (
    version_command,
    check_command,
    list_command,
    build_command,
    new_command,
)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Store verbosity, color and the output console on ``ctx.obj``.

    ``--no-color`` wins over ``--color``; with neither, the mode is ``auto``.
    """
    obj: dict[str, object] = ctx.ensure_object(dict)
    obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    log_level: int | None = resolve_env_log_level()
    obj["log_level"] = log_level
    setup_logging(level=log_level)

    requested: ColorMode = ColorMode.NEVER if no_color else color_mode or ColorMode.AUTO
    enable_color: bool = resolve_color_mode(cli_mode=requested)
    ctx.color = obj["color_enabled"] = enable_color
    obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="FeatureDocs: render feature comparison documents into a static site.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the FeatureDocs CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, color_mode=color_mode, no_color=no_color)
    if ctx.invoked_subcommand is not None:
        return
    console: ConsoleLike = ctx.obj["console"]
    console.print("Hint: use 'featuredocs check' to validate documents.")
    console.print()
    console.print(ctx.get_help())


for _command in SUBCOMMANDS:
    cli.add_command(_command)

if __name__ == "__main__":
    cli()
