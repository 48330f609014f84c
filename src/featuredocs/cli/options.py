# topmark:header:start
#
#   project      : FeatureDocs
#   file         : options.py
#   file_relpath : src/featuredocs/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Option decorators shared by the FeatureDocs group and its commands.

Three families:
    - verbosity (``-v``/``-q``), resolved once by the group;
    - color (``--color``/``--no-color``), resolved once by the group;
    - configuration (``--config``/``--no-config``/``--content-dir``), taken by
      every command that reads the content directory.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from featuredocs.cli.cli_types import EnumChoiceParam
from featuredocs.cli.errors import FeatureDocsUsageError

P = ParamSpec("P")
R = TypeVar("R")

Decorator = Callable[[Callable[P, R]], Callable[P, R]]


def _with_options(f: Callable[P, R], *options: Decorator[P, R]) -> Callable[P, R]:
    # Apply bottom-up so `--help` lists the options in the order given.
    for option in reversed(options):
        f = option(f)
    return f


# ----------------------------------------------------------------- verbosity


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Fold ``-v`` and ``-q`` counts into one signed level.

    Returns:
        int: ``> 0`` verbose, ``< 0`` quiet, ``0`` normal.

    Raises:
        FeatureDocsUsageError: If both flags are given.
    """
    if verbose_count and quiet_count:
        raise FeatureDocsUsageError("-v/--verbose cannot be combined with -q/--quiet.")
    return verbose_count or -quiet_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options."""
    return _with_options(
        f,
        click.option(
            "-v", "--verbose", count=True, help="Show more detail (written paths, info notes)."
        ),
        click.option("-q", "--quiet", count=True, help="Only show errors and requested output."),
    )


# --------------------------------------------------------------------- color


class ColorMode(str, Enum):
    """Requested color behavior for terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Return True if ANSI color should be emitted.

    An explicit ``always``/``never`` wins; in ``auto`` mode ``FORCE_COLOR``
    (any value but ``0``) enables and ``NO_COLOR`` disables color, and
    otherwise color follows whether stdout is a terminal.
    """
    if cli_mode is ColorMode.ALWAYS:
        return True
    if cli_mode is ColorMode.NEVER:
        return False
    if os.getenv("FORCE_COLOR", "0") != "0":
        return True
    if "NO_COLOR" in os.environ:
        return False
    return sys.stdout.isatty() if stdout_isatty is None else stdout_isatty


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color MODE`` and the ``--no-color`` shorthand."""
    return _with_options(
        f,
        click.option(
            "--color",
            "color_mode",
            type=EnumChoiceParam(ColorMode),
            default=None,
            help="Colorize output: auto (default), always or never.",
        ),
        click.option("--no-color", "no_color", is_flag=True, help="Same as --color never."),
    )


# ------------------------------------------------------------- configuration


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config FILE`` (repeatable), ``--no-config`` and ``--content-dir DIR``."""
    return _with_options(
        f,
        click.option(
            "--config",
            "config_paths",
            multiple=True,
            metavar="FILE",
            type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
            help="Extra config file merged over the project config (repeatable).",
        ),
        click.option(
            "--no-config",
            "no_config",
            is_flag=True,
            help="Do not look for featuredocs.toml or [tool.featuredocs].",
        ),
        click.option(
            "--content-dir",
            "content_dir",
            type=click.Path(file_okay=False, dir_okay=True),
            default=None,
            help="Directory holding the feature documents (overrides [content].root).",
        ),
    )
