# topmark:header:start
#
#   project      : FeatureDocs
#   file         : store.py
#   file_relpath : src/featuredocs/documents/store.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Document Store: discover and read feature document files.

The store owns the content directory. It expands gitignore-style include and
exclude patterns (via `pathspec`) against the files below the content root and
returns the matches in a deterministic order: POSIX relative path, ascending.
That order is the *discovery order* the Collection Assembler falls back to
for documents without an order key.

The store is read-only: documents are never written back.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING

from pathspec import GitIgnoreSpec

from featuredocs.config.logging import get_logger
from featuredocs.core.errors import DocumentEncodingError, DocumentNotFoundError
from featuredocs.utils.file import compute_relpath

if TYPE_CHECKING:
    from collections.abc import Iterable

    from featuredocs.config.logging import FeatureDocsLogger
    from featuredocs.config.model import Config

logger: FeatureDocsLogger = get_logger(__name__)

DEFAULT_INCLUDE_PATTERNS: tuple[str, ...] = ("**/*.md",)

INDEX_STEM: str = "index"


@dataclass(frozen=True, slots=True)
class DocumentLocation:
    """Where a document lives and where its page will be published.

    Attributes:
        path (Path): Absolute path of the source file.
        relpath (str): POSIX path relative to the content root.
        page_path (str): Page location relative to the site root, ending in ``/``
            (empty string for the site root itself).
        url (str): Public link to the page (``base_url`` + ``/`` + ``page_path``).
        slug (str): Identifier derived from the file stem.
    """

    path: Path
    relpath: str
    page_path: str
    url: str
    slug: str


def page_path_for(relpath: str) -> str:
    """Map a document's relative path to its page location.

    ``features/generics.md`` maps to ``features/generics/``; an ``index.md``
    maps to its directory (``features/index.md`` → ``features/``, and a root
    ``index.md`` → ``""``).

    Args:
        relpath (str): POSIX path relative to the content root.

    Returns:
        str: The page location relative to the site root.
    """
    pure = PurePosixPath(relpath)
    stem_path: PurePosixPath = pure.with_suffix("")
    if stem_path.name == INDEX_STEM:
        stem_path = stem_path.parent
    text: str = stem_path.as_posix()
    return "" if text in ("", ".") else f"{text}/"


def url_for(page_path: str, base_url: str = "") -> str:
    """Return the public URL of a page location."""
    return f"{base_url.rstrip('/')}/{page_path}"


def slug_for(relpath: str) -> str:
    """Return the slug of a document: its file stem (or directory name for ``index.md``)."""
    pure = PurePosixPath(relpath)
    if pure.stem == INDEX_STEM and pure.parent.name:
        return pure.parent.name
    return pure.stem


class DocumentStore:
    """Read-only view of the feature documents below a content root.

    Args:
        root (Path): The content directory.
        include_patterns (Iterable[str]): Gitignore-style patterns selecting documents.
        exclude_patterns (Iterable[str]): Gitignore-style patterns removing documents.
        base_url (str): URL prefix used when deriving document URLs.
    """

    def __init__(
        self,
        root: Path,
        *,
        include_patterns: Iterable[str] = DEFAULT_INCLUDE_PATTERNS,
        exclude_patterns: Iterable[str] = (),
        base_url: str = "",
    ) -> None:
        self.root: Path = root.resolve()
        self.include_patterns: tuple[str, ...] = tuple(include_patterns) or DEFAULT_INCLUDE_PATTERNS
        self.exclude_patterns: tuple[str, ...] = tuple(exclude_patterns)
        self.base_url: str = base_url.rstrip("/")
        self._include: GitIgnoreSpec = GitIgnoreSpec.from_lines(self.include_patterns)
        self._exclude: GitIgnoreSpec = GitIgnoreSpec.from_lines(self.exclude_patterns)

    @classmethod
    def from_config(cls, config: Config) -> DocumentStore:
        """Create a store for the content root and patterns of ``config``."""
        return cls(
            config.content_root,
            include_patterns=config.include_patterns,
            exclude_patterns=config.exclude_patterns,
            base_url=config.base_url,
        )

    def locate(self, path: Path) -> DocumentLocation:
        """Return the location facts of ``path`` (which need not be discovered)."""
        resolved: Path = path.resolve()
        relpath: str = compute_relpath(resolved, self.root).as_posix()
        page_path: str = page_path_for(relpath)
        return DocumentLocation(
            path=resolved,
            relpath=relpath,
            page_path=page_path,
            url=url_for(page_path, self.base_url),
            slug=slug_for(relpath),
        )

    def discover(self) -> list[DocumentLocation]:
        """Return all documents below the content root, in discovery order.

        Returns:
            list[DocumentLocation]: Matching documents sorted by relative path.

        Raises:
            DocumentNotFoundError: If the content root is not a directory.
        """
        if not self.root.is_dir():
            raise DocumentNotFoundError("content directory does not exist", source=self.root)

        found: list[DocumentLocation] = []
        for path in self.root.rglob("*"):
            if not path.is_file():
                continue
            relpath: str = compute_relpath(path, self.root).as_posix()
            if not self._include.match_file(relpath):
                continue
            if self._exclude.match_file(relpath):
                logger.debug("Excluded by pattern: %s", relpath)
                continue
            found.append(self.locate(path))
        found.sort(key=lambda loc: loc.relpath)
        logger.info("Discovered %d document(s) below %s", len(found), self.root)
        return found

    def read(self, path: Path) -> str:
        """Return the UTF-8 text of a document.

        Args:
            path (Path): The document file.

        Returns:
            str: The raw document text.

        Raises:
            DocumentNotFoundError: If ``path`` is not an existing file.
            DocumentEncodingError: If the file is not valid UTF-8.
        """
        if not path.is_file():
            raise DocumentNotFoundError("document file does not exist", source=path)
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise DocumentEncodingError(
                f"not valid UTF-8 text (byte {e.start})", source=path
            ) from e
