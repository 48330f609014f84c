# topmark:header:start
#
#   project      : FeatureDocs
#   file         : composer.py
#   file_relpath : src/featuredocs/rendering/composer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Page Composer: render templates over a feature collection.

Templates are Jinja2 files. The bundled ones ship in ``featuredocs/templates``;
a project can override any of them by placing a file with the same name in
the configured ``site.templates_dir``.

Template context:
    site        ``{"title": ..., "base_url": ...}``
    collection  the `FeatureCollection`, in display order
    subjects    subjects to show a badge for on listing pages
    version     the FeatureDocs version

Feature pages additionally receive ``document``.

Filters and globals:
    markdown        render a markdown string to HTML
    badge           render a `StatusBadge` as HTML
    status_badges   ``status_badges(document, subjects=None)`` → list of badges
    subject_label   display form of a subject identifier
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import markdown as markdown_lib
from jinja2 import (
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    StrictUndefined,
    select_autoescape,
)
from jinja2 import TemplateError as JinjaTemplateError
from jinja2 import TemplateNotFound
from markupsafe import Markup

from featuredocs.config.logging import get_logger
from featuredocs.constants import (
    FEATURE_TEMPLATE,
    FEATUREDOCS_VERSION,
    INDEX_TEMPLATE,
    TEMPLATES_DIR_NAME,
    TEMPLATES_PACKAGE,
)
from featuredocs.core.errors import DuplicatePagePathError, TemplateError
from featuredocs.documents.collection import find_page_conflicts
from featuredocs.rendering.status import badges_for, render_badge_html, subject_label
from featuredocs.utils.file import write_text_atomic

if TYPE_CHECKING:
    from pathlib import Path

    from jinja2 import BaseLoader

    from featuredocs.config.logging import FeatureDocsLogger
    from featuredocs.config.model import Config
    from featuredocs.documents.model import FeatureCollection, FeatureDocument

logger: FeatureDocsLogger = get_logger(__name__)

MARKDOWN_EXTENSIONS: tuple[str, ...] = ("fenced_code", "tables", "toc")

TEMPLATE_SUFFIX: str = ".html.j2"

INDEX_PAGE_NAME: str = "index.html"


def render_markdown(text: str) -> Markup:
    """Render a markdown document body to HTML."""
    return Markup(markdown_lib.markdown(text, extensions=list(MARKDOWN_EXTENSIONS)))


def template_name_for(identifier: str) -> str:
    """Map a page template identifier to a template file name.

    ``"index"`` → ``"index.html.j2"``; names that already carry a suffix are
    returned unchanged.
    """
    return identifier if "." in identifier else f"{identifier}{TEMPLATE_SUFFIX}"


class PageComposer:
    """Render page templates for a site.

    Args:
        site_title (str): Title passed to templates as ``site.title``.
        base_url (str): URL prefix passed to templates as ``site.base_url``.
        subjects (tuple[str, ...]): Subjects shown on listing pages; when empty,
            the subjects declared across the collection are used.
        templates_dir (Path | None): Directory whose templates take precedence
            over the bundled ones.
    """

    def __init__(
        self,
        *,
        site_title: str = "",
        base_url: str = "",
        subjects: tuple[str, ...] = (),
        templates_dir: Path | None = None,
    ) -> None:
        self.site_title: str = site_title
        self.base_url: str = base_url.rstrip("/")
        self.subjects: tuple[str, ...] = subjects
        loaders: list[BaseLoader] = []
        if templates_dir is not None:
            loaders.append(FileSystemLoader(str(templates_dir)))
        loaders.append(PackageLoader(TEMPLATES_PACKAGE, TEMPLATES_DIR_NAME))
        self.env: Environment = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(enabled_extensions=("html", "html.j2")),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["markdown"] = render_markdown
        self.env.filters["badge"] = render_badge_html
        self.env.globals["status_badges"] = badges_for
        self.env.globals["subject_label"] = subject_label

    @classmethod
    def from_config(cls, config: Config) -> PageComposer:
        """Create a composer for the site described by ``config``."""
        return cls(
            site_title=config.site_title,
            base_url=config.base_url,
            subjects=config.subjects,
            templates_dir=config.templates_dir,
        )

    def _context(self, collection: FeatureCollection, **extra: Any) -> dict[str, Any]:
        return {
            "site": {"title": self.site_title, "base_url": self.base_url},
            "collection": collection,
            "subjects": self.subjects or collection.subjects(),
            "version": FEATUREDOCS_VERSION,
            **extra,
        }

    def render(self, template: str, context: dict[str, Any]) -> str:
        """Render ``template`` with ``context``.

        Raises:
            TemplateError: If the template is missing or fails to render.
        """
        name: str = template_name_for(template)
        try:
            return self.env.get_template(name).render(context)
        except TemplateNotFound as exc:
            raise TemplateError(f"template not found: {exc.name}") from exc
        except JinjaTemplateError as exc:
            raise TemplateError(f"{name}: {exc}") from exc

    def compose_page(self, template: str, collection: FeatureCollection, **extra: Any) -> str:
        """Render a listing page over ``collection``.

        Args:
            template (str): Template identifier (``"index"``) or file name.
            collection (FeatureCollection): Documents in display order.
            **extra (Any): Additional template variables.

        Returns:
            str: The rendered page.
        """
        logger.debug("Composing %s over %d document(s)", template, len(collection))
        return self.render(template, self._context(collection, **extra))

    def compose_feature(
        self,
        document: FeatureDocument,
        collection: FeatureCollection,
        template: str = FEATURE_TEMPLATE,
    ) -> str:
        """Render the page of a single feature document."""
        logger.debug("Composing feature page for %s", document.url)
        return self.render(template, self._context(collection, document=document))


def build_site(
    config: Config,
    collection: FeatureCollection,
    *,
    composer: PageComposer | None = None,
) -> list[Path]:
    """Render the index page and one page per feature into ``config.output_dir``.

    All pages are rendered before anything is written, so a template failure
    leaves the output directory untouched.

    Args:
        config (Config): Runtime configuration.
        collection (FeatureCollection): The ordered feature collection.
        composer (PageComposer | None): Composer to use (defaults to one built
            from ``config``).

    Returns:
        list[Path]: The written files, index first, then features in collection order.

    Raises:
        DuplicatePagePathError: If two features, or a feature and the index,
            share a page location.
        TemplateError: If a template is missing or fails to render.
    """
    conflicts: list[DuplicatePagePathError] = find_page_conflicts(collection)
    if conflicts:
        raise conflicts[0]
    composer = composer or PageComposer.from_config(config)
    out: Path = config.output_dir
    pages: list[tuple[Path, str]] = [
        (out / INDEX_PAGE_NAME, composer.compose_page(INDEX_TEMPLATE, collection))
    ]
    for document in collection:
        target: Path = out / document.page_path / INDEX_PAGE_NAME
        pages.append((target, composer.compose_feature(document, collection)))

    for path, text in pages:
        write_text_atomic(path, text)
    logger.info("Wrote %d page(s) to %s", len(pages), out)
    return [path for path, _ in pages]
