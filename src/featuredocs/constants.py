# topmark:header:start
#
#   project      : FeatureDocs
#   file         : constants.py
#   file_relpath : src/featuredocs/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FeatureDocs Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    FEATUREDOCS_VERSION: str = get_version("featuredocs")
except PackageNotFoundError:  # pragma: no cover - source checkout without install
    FEATUREDOCS_VERSION = "0.0.0.dev0"

# Project configuration file names, in discovery order (first match wins).
CONFIG_FILE_NAME: str = "featuredocs.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "tool.featuredocs"

# Package holding the bundled Jinja templates.
TEMPLATES_PACKAGE: str = "featuredocs"
TEMPLATES_DIR_NAME: str = "templates"

INDEX_TEMPLATE: str = "index.html.j2"
FEATURE_TEMPLATE: str = "feature.html.j2"

# Front matter fences.
YAML_FENCE: str = "---"
TOML_FENCE: str = "+++"

VALUE_NOT_SET: str = "<not set>"
