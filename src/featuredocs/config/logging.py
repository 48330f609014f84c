# topmark:header:start
#
#   project      : FeatureDocs
#   file         : logging.py
#   file_relpath : src/featuredocs/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging for FeatureDocs: a TRACE level, a typed logger and colored output.

Every module logs through ``get_logger(__name__)``. Only the ``featuredocs``
logger tree is configured, so embedding FeatureDocs in another program does
not touch that program's root logger. Output goes to stderr and stays silent
(CRITICAL) unless ``FEATUREDOCS_LOG_LEVEL`` or an explicit level says otherwise.

Example:
    ```bash
    FEATUREDOCS_LOG_LEVEL=debug featuredocs build
    FEATUREDOCS_LOG_LEVEL=trace featuredocs check   # per-step pipeline trace
    ```
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

PACKAGE_LOGGER_NAME: Final[str] = "featuredocs"

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV_VAR: Final[str] = "FEATUREDOCS_LOG_LEVEL"

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] %(name)s:%(lineno)d %(message)s"


class FeatureDocsLogger(logging.Logger):
    """`logging.Logger` with a `trace` method for the level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(FeatureDocsLogger)

# Highest threshold first; a record takes the first color whose level it reaches.
_LEVEL_COLORS: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter coloring the whole line by severity with `yachalk`."""

    def format(self, record: logging.LogRecord) -> str:
        """Return the formatted record wrapped in its severity color."""
        message: str = super().format(record)
        for threshold, color in _LEVEL_COLORS:
            if record.levelno >= threshold:
                return color(message)
        return chalk.dim(message)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``FEATUREDOCS_LOG_LEVEL``, or None if unset or unknown.

    Accepts level names in any case (``trace``, ``DEBUG``, ``warn``) and numbers (``10``).
    """
    raw: str = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    name: str = raw.upper()
    if name == "TRACE":
        return TRACE_LEVEL
    level: object = logging.getLevelName(name)
    return level if isinstance(level, int) else None


def setup_logging(level: int | None = None) -> None:
    """(Re)configure the ``featuredocs`` logger.

    Args:
        level (int | None): Explicit level; when None the environment decides,
            falling back to CRITICAL.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    package_logger: logging.Logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.propagate = False


def get_logger(name: str) -> FeatureDocsLogger:
    """Return the `FeatureDocsLogger` for module ``name``."""
    return cast("FeatureDocsLogger", logging.getLogger(name))
