# topmark:header:start
#
#   project      : FeatureDocs
#   file         : errors.py
#   file_relpath : src/featuredocs/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the FeatureDocs CLI.

Commands translate domain errors (`featuredocs.core.errors`) into these
`click.ClickException` subclasses, each carrying a sysexits-aligned exit code.
When a project console is present in the Click context, messages are printed
through it; otherwise Click's default error display is used.
"""

from __future__ import annotations

from typing import IO, Any

import click

from featuredocs.cli.exit_codes import ExitCode


class FeatureDocsCliError(click.ClickException):
    """Base class for all FeatureDocs CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (no color)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class FeatureDocsUsageError(FeatureDocsCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class FeatureDocsDataError(FeatureDocsCliError):
    """Error for invalid documents."""

    exit_code = ExitCode.DATA_ERROR


class FeatureDocsFileNotFoundError(FeatureDocsCliError):
    """Error when the content directory or a document does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class FeatureDocsTemplateError(FeatureDocsCliError):
    """Error when a page template is missing or fails to render."""

    exit_code = ExitCode.SOFTWARE_ERROR


class FeatureDocsFileExistsError(FeatureDocsCliError):
    """Error when a command would overwrite an existing file."""

    exit_code = ExitCode.CANT_CREATE


class FeatureDocsIOError(FeatureDocsCliError):
    """Error for I/O errors reading or writing files."""

    exit_code = ExitCode.IO_ERROR


class FeatureDocsConfigError(FeatureDocsCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR
