# topmark:header:start
#
#   project      : FeatureDocs
#   file         : check.py
#   file_relpath : src/featuredocs/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FeatureDocs `check` command.

Validates every document under the content root without rendering anything.
Unlike `build`, a failing document does not stop the run: every problem is
reported as ``<file>: <reason> [<rule>]`` and the command exits with
``DATA_ERROR`` (65) when at least one document was rejected.

Examples:
    ```bash
    featuredocs check
    featuredocs check --strict --content-dir docs/features
    ```
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
from featuredocs.cli.exit_codes import ExitCode
from featuredocs.cli.options import common_config_options
from featuredocs.diagnostic import DiagnosticLevel
from featuredocs.pipeline.runner import validate_documents

if TYPE_CHECKING:
    from featuredocs.cli.console import ConsoleLike
    from featuredocs.config.model import Config
    from featuredocs.pipeline.runner import ValidationReport


@click.command(
    name="check",
    help="Validate every feature document (header schema and subject sections).",
)
@common_config_options
@click.option(
    "--strict/--no-strict",
    "strict",
    default=None,
    help="Reject body sections for subjects the header does not list.",
)
def check_command(
    *,
    config_paths: tuple[str, ...],
    no_config: bool,
    content_dir: str | None,
    strict: bool | None,
) -> None:
    """Validate documents and report each problem with its file and rule.

    Args:
        config_paths (tuple[str, ...]): Extra config files.
        no_config (bool): Skip project config discovery.
        content_dir (str | None): Content root override.
        strict (bool | None): Strict subject checking override.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    config: Config = build_config(
        ctx,
        config_paths=config_paths,
        no_config=no_config,
        content_dir=content_dir,
        strict=strict,
    )
    with translate_errors():
        report: ValidationReport = validate_documents(config)

    for diag in report.diagnostics:
        if diag.level == DiagnosticLevel.WARNING and vlevel >= 0:
            console.warn(f"warning: {diag.message}")
        elif diag.level == DiagnosticLevel.INFO and vlevel > 0:
            console.print(console.styled(f"info: {diag.message}", dim=True))

    for error in report.errors:
        console.error(str(error))

    n_checked: int = len(report.checked)
    n_failed: int = len(report.errors)
    if vlevel >= 0:
        if report.ok:
            console.success(f"✅ {n_checked} document(s) OK")
        else:
            console.print(
                console.styled(f"❌ {n_failed} of {n_checked} document(s) invalid", fg="red")
            )

    if not report.ok:
        ctx.exit(ExitCode.DATA_ERROR)
