# topmark:header:start
#
#   project      : FeatureDocs
#   file         : cmd_common.py
#   file_relpath : src/featuredocs/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by the FeatureDocs subcommands.

- `get_effective_verbosity` reads the program-output verbosity set by the group.
- `build_config` layers defaults, project config, ``--config`` files and
  command-line overrides into a frozen `Config`.
- `translate_errors` maps domain errors onto CLI errors with exit codes.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from featuredocs.cli.errors import (
    FeatureDocsConfigError,
    FeatureDocsDataError,
    FeatureDocsFileNotFoundError,
    FeatureDocsIOError,
    FeatureDocsTemplateError,
)
from featuredocs.config.logging import get_logger
from featuredocs.config.model import MutableConfig
from featuredocs.core.errors import (
    ConfigError,
    DocumentError,
    DocumentNotFoundError,
    TemplateError,
)

if TYPE_CHECKING:
    from featuredocs.cli.console import ConsoleLike
    from featuredocs.config.logging import FeatureDocsLogger
    from featuredocs.config.model import Config

logger: FeatureDocsLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console installed on the Click context by the group."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (``> 0`` verbose, ``< 0`` quiet)."""
    return int(ctx.obj.get("verbosity_level", 0))


def build_config(
    ctx: click.Context,
    *,
    config_paths: tuple[str, ...] = (),
    no_config: bool = False,
    **overrides: Any,
) -> Config:
    """Resolve the configuration for a command.

    Config warnings (unknown keys or sections) are echoed to stderr unless the
    user asked for quiet output.

    Args:
        ctx (click.Context): Current Click context.
        config_paths (tuple[str, ...]): Explicit ``--config`` files.
        no_config (bool): Skip project config discovery.
        **overrides (Any): Command-line overrides (see `MutableConfig.apply_args`).

    Returns:
        Config: The frozen configuration.

    Raises:
        FeatureDocsConfigError: If a config file cannot be read or parsed.
    """
    with translate_errors():
        draft: MutableConfig = MutableConfig.load_merged(
            extra_config_files=[Path(p) for p in config_paths],
            overrides=overrides,
            discover=not no_config,
        )
    config: Config = draft.freeze()
    logger.debug("Effective config: %s", config)

    if get_effective_verbosity(ctx) >= 0:
        console: ConsoleLike = get_console(ctx)
        for diag in config.diagnostics:
            console.warn(f"config: {diag.message}")
    return config


@contextmanager
def translate_errors() -> Iterator[None]:
    """Re-raise FeatureDocs domain errors as CLI errors with matching exit codes."""
    try:
        yield
    except DocumentNotFoundError as exc:
        raise FeatureDocsFileNotFoundError(str(exc)) from exc
    except DocumentError as exc:
        raise FeatureDocsDataError(str(exc)) from exc
    except TemplateError as exc:
        raise FeatureDocsTemplateError(str(exc)) from exc
    except ConfigError as exc:
        raise FeatureDocsConfigError(str(exc)) from exc
    except OSError as exc:
        raise FeatureDocsIOError(str(exc)) from exc
