# topmark:header:start
#
#   project      : FeatureDocs
#   file         : build.py
#   file_relpath : src/featuredocs/cli/commands/build.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FeatureDocs `build` command.

Loads every document, assembles the collection and renders the site into the
output directory. A single invalid document fails the whole build and nothing
is written.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from featuredocs.cli.cmd_common import (
    build_config,
    get_console,
    get_effective_verbosity,
    translate_errors,
)
from featuredocs.cli.options import common_config_options
from featuredocs.pipeline.runner import build_collection
from featuredocs.rendering.composer import build_site

if TYPE_CHECKING:
    from pathlib import Path

    from featuredocs.cli.console import ConsoleLike
    from featuredocs.config.model import Config
    from featuredocs.documents.model import FeatureCollection


@click.command(
    name="build",
    help="Render the feature comparison site into the output directory.",
)
@common_config_options
@click.option(
    "--output-dir",
    "output_dir",
    type=click.Path(file_okay=False, dir_okay=True),
    default=None,
    help="Directory to render into (overrides [output].dir).",
)
@click.option(
    "--base-url",
    "base_url",
    default=None,
    help="URL prefix for document links (overrides [site].base_url).",
)
@click.option(
    "--strict/--no-strict",
    "strict",
    default=None,
    help="Reject body sections for subjects the header does not list.",
)
def build_command(
    *,
    config_paths: tuple[str, ...],
    no_config: bool,
    content_dir: str | None,
    output_dir: str | None,
    base_url: str | None,
    strict: bool | None,
) -> None:
    """Render the index page and one page per feature."""
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    config: Config = build_config(
        ctx,
        config_paths=config_paths,
        no_config=no_config,
        content_dir=content_dir,
        output_dir=output_dir,
        base_url=base_url,
        strict=strict,
    )
    with translate_errors():
        collection: FeatureCollection = build_collection(config)
        written: list[Path] = build_site(config, collection)

    if vlevel > 0:
        for path in written:
            console.print(f"  {path}")
    if vlevel >= 0:
        console.success(f"Built {len(collection)} feature page(s) into {config.output_dir}")
