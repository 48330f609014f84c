# topmark:header:start
#
#   project      : FeatureDocs
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Nox sessions for FeatureDocs (uv-backed virtualenvs).

Sessions:
  - `lint` / `lint_fixall`: Ruff lint, report or autofix.
  - `format_check` / `format`: Ruff formatting, verify or apply.
  - `qa`: pytest and pyright on every supported Python.
  - `property_test`: long-running hypothesis tests (opt-in).
  - `site`: validate and build the bundled sample content.
  - `package_check`: build sdist/wheel and run `twine check`.

``nox`` alone runs `lint` and `format_check`.
"""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import Any

import nox

if sys.version_info >= (3, 11):
    import tomllib as toml_reader
else:
    import toml as toml_reader

ROOT: Path = Path(__file__).parent
CURRENT_PYTHON: str = f"{sys.version_info.major}.{sys.version_info.minor}"
_PY_CLASSIFIER: re.Pattern[str] = re.compile(r"^Programming Language :: Python :: (\d+\.\d+)$")


def supported_pythons() -> list[str]:
    """Return the ``X.Y`` versions listed in the pyproject classifiers, oldest first.

    Falls back to the running interpreter when ``pyproject.toml`` lists none.
    """
    pyproject: Path = ROOT / "pyproject.toml"
    data: dict[str, Any] = toml_reader.loads(pyproject.read_text(encoding="utf-8"))
    classifiers: list[str] = data.get("project", {}).get("classifiers", [])
    found: set[str] = {m.group(1) for c in classifiers if (m := _PY_CLASSIFIER.match(c))}
    if not found:
        return [CURRENT_PYTHON]
    return sorted(found, key=lambda v: tuple(int(p) for p in v.split(".")))


PYTHONS: list[str] = supported_pythons()

nox.options.sessions = ["lint", "format_check"]
nox.options.default_venv_backend = "uv"


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run the test suite (minus slow property tests) and pyright."""
    session.install("-e", ".[test,dev]")
    session.run("pytest", "-q", "-m", "not hypothesis_slow", *session.posargs)
    session.run("pyright", "--pythonversion", str(session.python))


@nox.session
def lint(session: nox.Session) -> None:
    """Ruff lint."""
    session.install("-e", ".[dev]")
    session.run("ruff", "check", ".")


@nox.session
def lint_fixall(session: nox.Session) -> None:
    """Ruff lint with autofix."""
    session.install("-e", ".[dev]")
    session.run("ruff", "check", "--fix", ".")


@nox.session
def format_check(session: nox.Session) -> None:
    """Fail if any file needs reformatting."""
    session.install("-e", ".[dev]")
    session.run("ruff", "format", "--check", ".")


@nox.session
def format(session: nox.Session) -> None:
    """Reformat in place."""
    session.install("-e", ".[dev]")
    session.run("ruff", "format", ".")


@nox.session
def property_test(session: nox.Session) -> None:
    """Run only the ``hypothesis_slow`` tests."""
    session.install("-e", ".[test]")
    session.run("pytest", "-vv", "-m", "hypothesis_slow", *session.posargs)


@nox.session
def site(session: nox.Session) -> None:
    """Check the sample content in ``content/`` and render it into ``build/site``."""
    session.install("-e", ".")
    session.run("featuredocs", "check", "--strict")
    session.run("featuredocs", "-v", "build", "--output-dir", "build/site")


@nox.session(python=CURRENT_PYTHON)
def package_check(session: nox.Session) -> None:
    """Build sdist and wheel into a fresh ``dist/`` and validate their metadata."""
    session.install("build", "twine")
    session.run("python", "-c", "import shutil; shutil.rmtree('dist', ignore_errors=True)")
    session.run("python", "-m", "build", "--sdist", "--wheel")
    session.run("twine", "check", "dist/*")
