# topmark:header:start
#
#   project      : FeatureDocs
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the FeatureDocs test suite.

Global fixtures, logging setup and small builders for feature documents.

Notes:
    Tests should respect the immutable/mutable configuration split: build
    configs with `featuredocs.config.model.MutableConfig`, then ``freeze()``
    into a `Config` for pipeline and API calls. Never mutate a frozen `Config`.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar, cast

import pytest

from featuredocs.config import logging
from featuredocs.config.model import Config, MutableConfig

F = TypeVar("F", bound=Callable[..., object])


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    mark = pytest.hookimpl(*args, **kwargs)

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


@pytest.fixture(autouse=True)
def silence_featuredocs_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to unset FEATUREDOCS_LOG_LEVEL.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set logging to TRACE so failing tests show the full pipeline trace.

    Args:
        config (pytest.Config): The pytest configuration object (unused).
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def feature_doc(
    title: str,
    *,
    order: int | float | None = None,
    excerpt: str = "Short summary.",
    subjects: dict[str, str] | None = None,
    body: str = "",
    extra: str = "",
) -> str:
    """Return the text of a YAML front matter feature document.

    Args:
        title (str): Document title.
        order (int | float | None): Optional order key.
        excerpt (str): Excerpt (pass ``""`` to omit the key).
        subjects (dict[str, str] | None): Subject → status (defaults to rust
            supported, swift pending).
        body (str): Markdown body.
        extra (str): Raw header lines appended before the closing fence.

    Returns:
        str: The document text.
    """
    statuses: dict[str, str] = subjects or {"rust": "supported", "swift": "pending"}
    lines: list[str] = ["---", f"title: {title}"]
    if order is not None:
        lines.append(f"order: {order}")
    if excerpt:
        lines.append(f"excerpt: {excerpt}")
    lines.append("subjects:")
    lines.extend(f"  {subject}: {status}" for subject, status in statuses.items())
    if extra:
        lines.append(extra.rstrip("\n"))
    lines.append("---")
    return "\n".join(lines) + "\n\n" + body


def write_doc(root: Path, relpath: str, text: str) -> Path:
    """Write ``text`` to ``root / relpath`` (creating parents) and return the path."""
    path: Path = root / relpath
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def make_mutable_config(base: Path, **overrides: Any) -> MutableConfig:
    """Return a builder with defaults resolved against ``base`` plus ``overrides``.

    Args:
        base (Path): Project directory (content root defaults to ``base/content``).
        **overrides (Any): Attributes set on the builder verbatim.

    Returns:
        MutableConfig: The builder.
    """
    m: MutableConfig = MutableConfig.from_defaults(base=base)
    for k, v in overrides.items():
        setattr(m, k, v)
    return m


def make_config(base: Path, **overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and ``overrides``."""
    return make_mutable_config(base, **overrides).freeze()


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A project directory with three feature documents and one guide page.

    Layout (discovery order)::

        content/constant-evaluation.md   order 900
        content/generics.md              order 500
        content/guides/setup.md          kind: guide
        content/pattern-matching.md      no order
    """
    content: Path = tmp_path / "content"
    write_doc(
        content,
        "constant-evaluation.md",
        feature_doc(
            "Constant evaluation",
            order=900,
            subjects={"rust": "supported", "swift": "unavailable"},
            body="## Rust\n\n`const fn`.\n\n## Swift\n\nNot available.\n",
        ),
    )
    write_doc(
        content,
        "generics.md",
        feature_doc(
            "Generics - static types",
            order=500,
            body="## Rust\n\nMonomorphized.\n\n## Swift\n\nSpecialized.\n",
        ),
    )
    write_doc(
        content,
        "guides/setup.md",
        feature_doc("Setup", extra="kind: guide"),
    )
    write_doc(
        content,
        "pattern-matching.md",
        feature_doc(
            "Pattern matching",
            subjects={"rust": "supported", "swift": "supported"},
        ),
    )
    return tmp_path
