# topmark:header:start
#
#   project      : FeatureDocs
#   file         : list.py
#   file_relpath : src/featuredocs/cli/commands/list.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FeatureDocs `list` command.

Prints the assembled feature collection in display order with one status
badge per subject. ``--format json`` emits a machine-readable array (never
colored); ``--format markdown`` emits a comparison table.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from featuredocs.cli.cli_types import EnumChoiceParam
from featuredocs.cli.cmd_common import build_config, get_console, translate_errors
from featuredocs.cli.options import common_config_options
from featuredocs.pipeline.runner import build_collection
from featuredocs.rendering.formats import OutputFormat
from featuredocs.rendering.status import (
    badges_for,
    render_badge_text,
    subject_label,
)

if TYPE_CHECKING:
    from featuredocs.cli.console import ConsoleLike
    from featuredocs.config.model import Config
    from featuredocs.documents.model import FeatureCollection, FeatureDocument


def document_to_dict(document: FeatureDocument, subjects: tuple[str, ...]) -> dict[str, Any]:
    """Return the JSON shape of one listed document."""
    return {
        "title": document.title,
        "url": document.url,
        "order_key": document.order_key,
        "excerpt": document.excerpt,
        "kind": document.kind,
        "source": str(document.source) if document.source else None,
        "badges": [b.to_dict() for b in badges_for(document, subjects)],
    }


def _markdown_cell(text: str) -> str:
    return text.replace("|", "\\|")


def render_markdown_table(collection: FeatureCollection, subjects: tuple[str, ...]) -> str:
    """Render the collection as a Markdown comparison table."""
    header: list[str] = ["Feature", *(subject_label(s) for s in subjects)]
    lines: list[str] = [
        "| " + " | ".join(header) + " |",
        "|" + "|".join(" --- " for _ in header) + "|",
    ]
    for document in collection:
        cells: list[str] = [f"[{_markdown_cell(document.title)}]({document.url})"]
        for badge in badges_for(document, subjects):
            cell: str = badge.status
            if badge.details_url is not None:
                cell += f" ([{_markdown_cell(badge.details_label or '')}]({badge.details_url}))"
            cells.append(cell)
        lines.append("| " + " | ".join(cells) + " |")
    return "\n".join(lines)


@click.command(
    name="list",
    help="List the feature collection in display order with status badges.",
)
@common_config_options
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@click.option(
    "--no-sort",
    "no_sort",
    is_flag=True,
    help="Keep discovery order instead of ordering by order key.",
)
def list_command(
    *,
    config_paths: tuple[str, ...],
    no_config: bool,
    content_dir: str | None,
    output_format: OutputFormat | None,
    no_sort: bool,
) -> None:
    """List documents with their per-subject status."""
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    config: Config = build_config(
        ctx,
        config_paths=config_paths,
        no_config=no_config,
        content_dir=content_dir,
        sort=False if no_sort else None,
    )
    with translate_errors():
        collection: FeatureCollection = build_collection(config)
    subjects: tuple[str, ...] = config.subjects or collection.subjects()

    if fmt == OutputFormat.JSON:
        payload: list[dict[str, Any]] = [document_to_dict(d, subjects) for d in collection]
        console.print(json.dumps(payload, indent=2))
        return
    if fmt == OutputFormat.MARKDOWN:
        console.print(render_markdown_table(collection, subjects))
        return

    if not collection:
        console.print("No feature documents found.")
        return
    color: bool = bool(ctx.obj.get("color_enabled", False))
    for document in collection:
        order: str = f"{document.order_key:g}" if document.has_order_key else "-"
        console.print(f"{console.styled(document.title, bold=True)}  [{order}]  {document.url}")
        for badge in badges_for(document, subjects):
            console.print(f"    {render_badge_text(badge, color=color)}")
