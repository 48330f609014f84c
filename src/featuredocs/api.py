# topmark:header:start
#
#   project      : FeatureDocs
#   file         : api.py
#   file_relpath : src/featuredocs/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public FeatureDocs API.

A small, typed surface for integrations that want to load, validate and render
feature documents without going through the CLI.

Configuration contract:
    Public functions accept either a plain **mapping** (mirroring the TOML
    shape of ``featuredocs.toml``) or a frozen `Config`. When ``config`` is
    ``None`` the project configuration is discovered from ``root`` (or the
    current directory) exactly like the CLI does. A mapping is layered on top
    of the runtime defaults only; no project file is merged implicitly.

```python
from featuredocs import api

collection = api.build_collection(
    config={"content": {"root": "content", "subjects": ["rust", "swift"]}},
)
html = api.compose_page("index", collection)
```
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

from featuredocs.config.logging import get_logger
from featuredocs.config.model import Config, MutableConfig
from featuredocs.constants import FEATUREDOCS_VERSION
from featuredocs.documents.extractor import extract
from featuredocs.pipeline.runner import ValidationReport, validate_documents
from featuredocs.pipeline.runner import build_collection as _build_collection
from featuredocs.pipeline.runner import load_documents as _load_documents
from featuredocs.rendering.composer import PageComposer
from featuredocs.rendering.composer import build_site as _build_site

if TYPE_CHECKING:
    from featuredocs.config.logging import FeatureDocsLogger
    from featuredocs.documents.model import FeatureCollection, FeatureDocument

logger: FeatureDocsLogger = get_logger(__name__)

ConfigInput = Mapping[str, Any] | Config | None

__all__: list[str] = [
    "ValidationReport",
    "build_collection",
    "build_site",
    "compose_page",
    "extract",
    "load_config",
    "load_documents",
    "validate",
    "version",
]


def load_config(config: ConfigInput = None, *, root: Path | str | None = None) -> Config:
    """Return the frozen configuration for a public API call.

    Args:
        config (Mapping[str, Any] | Config | None): A TOML-shaped mapping, a
            frozen `Config`, or ``None`` to discover the project configuration.
        root (Path | str | None): Base directory for discovery and for relative
            paths in a mapping (defaults to the current directory).

    Returns:
        Config: The configuration snapshot.

    Raises:
        ConfigError: If a project or explicit config file is not valid TOML.
    """
    if isinstance(config, Config):
        return config
    base: Path = Path(root).resolve() if root is not None else Path.cwd()
    if config is None:
        return MutableConfig.load_merged(root=base).freeze()
    layer: MutableConfig = MutableConfig.from_toml_dict(dict(config), base=base)
    return MutableConfig.from_defaults(base=base).merge_with(layer).freeze()


def load_documents(
    config: ConfigInput = None, *, root: Path | str | None = None
) -> list[FeatureDocument]:
    """Load every document below the content root, in discovery order.

    Raises:
        DocumentError: On the first invalid document.
    """
    return _load_documents(load_config(config, root=root))


def build_collection(
    config: ConfigInput = None, *, root: Path | str | None = None
) -> FeatureCollection:
    """Load the documents and return the ordered feature collection.

    Raises:
        DocumentError: On the first invalid document; no partial collection is returned.
    """
    return _build_collection(load_config(config, root=root))


def validate(config: ConfigInput = None, *, root: Path | str | None = None) -> ValidationReport:
    """Validate every document, collecting all failures instead of stopping at the first."""
    return validate_documents(load_config(config, root=root))


def compose_page(
    template: str,
    collection: FeatureCollection,
    config: ConfigInput = None,
    *,
    root: Path | str | None = None,
) -> str:
    """Render ``template`` (e.g. ``"index"``) over ``collection``.

    Raises:
        TemplateError: If the template is missing or fails to render.
    """
    composer: PageComposer = PageComposer.from_config(load_config(config, root=root))
    return composer.compose_page(template, collection)


def build_site(config: ConfigInput = None, *, root: Path | str | None = None) -> list[Path]:
    """Load, assemble and render the whole site into the output directory.

    Returns:
        list[Path]: The written pages.

    Raises:
        DocumentError: If any document is invalid; nothing is written.
        TemplateError: If a template fails; nothing is written.
    """
    cfg: Config = load_config(config, root=root)
    collection: FeatureCollection = _build_collection(cfg)
    return _build_site(cfg, collection)


def version() -> str:
    """Return the installed FeatureDocs version."""
    return FEATUREDOCS_VERSION
