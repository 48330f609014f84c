# topmark:header:start
#
#   project      : FeatureDocs
#   file         : new.py
#   file_relpath : src/featuredocs/cli/commands/new.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FeatureDocs `new` command.

Scaffolds a feature document that already satisfies the document schema:
YAML front matter with the title, an optional order key, a placeholder
excerpt and a ``pending`` entry per subject, followed by one ``## <Subject>``
section per subject for the narrative.

Examples:
    ```bash
    featuredocs new "Generics - static types" --subject rust --subject swift --order 500
    ```
"""

from __future__ import annotations

import math
import re
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click
import yaml

from featuredocs.cli.cmd_common import build_config, get_console, get_effective_verbosity
from featuredocs.cli.errors import FeatureDocsFileExistsError, FeatureDocsUsageError
from featuredocs.cli.options import common_config_options
from featuredocs.constants import YAML_FENCE
from featuredocs.documents.extractor import normalize_subject
from featuredocs.documents.keys import FrontMatter
from featuredocs.documents.model import SupportStatus
from featuredocs.rendering.status import subject_label
from featuredocs.utils.file import write_text_atomic

if TYPE_CHECKING:
    from featuredocs.cli.console import ConsoleLike
    from featuredocs.config.model import Config

PLACEHOLDER_EXCERPT: str = "One-sentence summary of the feature."

_SLUG_STRIP_RE: re.Pattern[str] = re.compile(r"[^a-z0-9]+")


def slugify(title: str) -> str:
    """Return a file-name friendly slug for ``title``.

    ``"Generics - static types"`` becomes ``"generics-static-types"``.
    """
    return _SLUG_STRIP_RE.sub("-", title.lower()).strip("-")


def scaffold_document(
    title: str,
    subjects: tuple[str, ...],
    *,
    order: float | None = None,
    excerpt: str = PLACEHOLDER_EXCERPT,
) -> str:
    """Return the text of a new feature document.

    Args:
        title (str): Feature title.
        subjects (tuple[str, ...]): Subjects to compare, each starting as ``pending``.
        order (float | None): Optional order key.
        excerpt (str): Short summary.

    Returns:
        str: Document text with YAML front matter and one section per subject.
    """
    header: dict[str, Any] = {FrontMatter.KEY_TITLE: title}
    if order is not None:
        header[FrontMatter.KEY_ORDER] = int(order) if float(order).is_integer() else order
    header[FrontMatter.KEY_EXCERPT] = excerpt
    header[FrontMatter.KEY_SUBJECTS] = {
        s: {FrontMatter.KEY_STATUS: SupportStatus.PENDING.value} for s in subjects
    }
    front_matter: str = yaml.safe_dump(header, sort_keys=False, allow_unicode=True)
    sections: str = "\n".join(f"## {subject_label(s)}\n" for s in subjects)
    return f"{YAML_FENCE}\n{front_matter}{YAML_FENCE}\n\n{sections}"


@click.command(
    name="new",
    help="Create a new feature document under the content root.",
)
@click.argument("title")
@click.option(
    "--subject",
    "subjects",
    multiple=True,
    help="Subject to compare (repeatable). Defaults to [content].subjects.",
)
@click.option(
    "--order",
    "order",
    type=float,
    default=None,
    help="Order key; lower keys are listed first.",
)
@click.option(
    "--excerpt",
    "excerpt",
    default=PLACEHOLDER_EXCERPT,
    show_default=True,
    help="Short summary shown on the index page.",
)
@common_config_options
def new_command(
    *,
    title: str,
    subjects: tuple[str, ...],
    order: float | None,
    excerpt: str,
    config_paths: tuple[str, ...],
    no_config: bool,
    content_dir: str | None,
) -> None:
    """Scaffold a conforming document; never overwrites an existing file."""
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    config: Config = build_config(
        ctx, config_paths=config_paths, no_config=no_config, content_dir=content_dir
    )
    chosen: tuple[str, ...] = tuple(
        dict.fromkeys(normalize_subject(s) for s in subjects if s.strip())
    ) or config.subjects
    if not chosen:
        raise FeatureDocsUsageError(
            "No subjects given: pass --subject or set [content].subjects in the config."
        )
    if not title.strip():
        raise FeatureDocsUsageError("The document title must not be empty.")
    slug: str = slugify(title)
    if not slug:
        raise FeatureDocsUsageError(f"Cannot derive a file name from title '{title}'.")
    if order is not None and not math.isfinite(order):
        raise FeatureDocsUsageError(f"--order must be a finite number, got {order}.")

    target: Path = config.content_root / f"{slug}.md"
    if target.exists():
        raise FeatureDocsFileExistsError(f"{target} already exists; not overwriting.")

    write_text_atomic(
        target, scaffold_document(title.strip(), chosen, order=order, excerpt=excerpt)
    )
    if get_effective_verbosity(ctx) >= 0:
        console.print(f"Created {target}")
