# topmark:header:start
#
#   project      : FeatureDocs
#   file         : model.py
#   file_relpath : src/featuredocs/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot used by the document pipeline
      and the page composer.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config`.

Layering (lowest to highest precedence):
    1. runtime defaults (`featuredocs.config.io.load_defaults_dict`)
    2. the discovered project config (``featuredocs.toml`` or
       ``[tool.featuredocs]`` in ``pyproject.toml``)
    3. explicit config files (``--config``), in the given order
    4. CLI / API overrides

Path semantics:
    - Paths declared in a config file are resolved against that file's directory.
    - Paths given as overrides are resolved against the current working directory.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from featuredocs.config.io import (
    extract_pyproject_section,
    load_defaults_dict,
    load_toml_dict,
    optional_bool,
    optional_str,
    optional_str_list,
    read_toml_file,
    subtable,
)
from featuredocs.config.keys import Toml
from featuredocs.config.logging import get_logger
from featuredocs.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME
from featuredocs.diagnostic import Diagnostic, DiagnosticLog

if TYPE_CHECKING:
    from collections.abc import Iterable

    from featuredocs.config.io import TomlTable
    from featuredocs.config.logging import FeatureDocsLogger

# Generic mapping accepted for overrides (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: FeatureDocsLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for FeatureDocs.

    Attributes:
        site_title (str): Title shown on rendered pages.
        base_url (str): URL prefix for document links (no trailing slash).
        templates_dir (Path | None): Optional directory whose templates take
            precedence over the bundled ones.
        content_root (Path): Directory holding the feature documents.
        feature_kind (str): Document-kind tag selecting feature documents.
        subjects (tuple[str, ...]): Subjects compared on this site, in display order.
            When empty, subjects are taken from the documents themselves.
        sort (bool): Whether the collection is ordered by order key.
        strict (bool): Reject documents whose body covers a subject the header
            does not list.
        output_dir (Path): Directory the site is rendered into.
        include_patterns (tuple[str, ...]): Gitignore-style patterns selecting documents.
        exclude_patterns (tuple[str, ...]): Gitignore-style patterns removing documents.
        config_files (tuple[Path, ...]): Config sources merged into this snapshot.
        diagnostics (tuple[Diagnostic, ...]): Warnings encountered while loading config.
    """

    site_title: str
    base_url: str
    templates_dir: Path | None
    content_root: Path
    feature_kind: str
    subjects: tuple[str, ...]
    sort: bool
    strict: bool
    output_dir: Path
    include_patterns: tuple[str, ...]
    exclude_patterns: tuple[str, ...]
    config_files: tuple[Path, ...]
    diagnostics: tuple[Diagnostic, ...]

    @classmethod
    def from_defaults(cls, *, base: Path | None = None) -> Config:
        """Return a frozen config built from the runtime defaults only.

        Args:
            base (Path | None): Directory relative default paths resolve against
                (defaults to the current working directory).

        Returns:
            Config: The default configuration snapshot.
        """
        return MutableConfig.from_defaults(base=base).freeze()


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    ``None`` means *unset*: merging keeps the current value and freezing
    falls back to the runtime default.
    """

    site_title: str | None = None
    base_url: str | None = None
    templates_dir: Path | None = None
    content_root: Path | None = None
    feature_kind: str | None = None
    subjects: list[str] | None = None
    sort: bool | None = None
    strict: bool | None = None
    output_dir: Path | None = None
    include_patterns: list[str] | None = None
    exclude_patterns: list[str] | None = None
    config_files: list[Path] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # ---------------------------------------------------------------- builders

    @classmethod
    def from_defaults(cls, *, base: Path | None = None) -> MutableConfig:
        """Return a builder populated with the runtime defaults."""
        draft: MutableConfig = cls.from_toml_dict(load_defaults_dict(), base=base or Path.cwd())
        return draft

    @classmethod
    def from_toml_dict(
        cls,
        data: TomlTable,
        *,
        base: Path,
        source: Path | None = None,
    ) -> MutableConfig:
        """Build a config layer from a parsed TOML table.

        Unknown sections and keys are reported as warnings on the returned
        layer's diagnostics and otherwise ignored.

        Args:
            data (TomlTable): Parsed configuration table (``featuredocs.toml`` root
                or the ``[tool.featuredocs]`` table).
            base (Path): Directory relative paths in ``data`` resolve against.
            source (Path | None): The file ``data`` came from, recorded for provenance.

        Returns:
            MutableConfig: A layer holding only the values ``data`` declares.
        """
        draft = cls()
        origin: str = str(source) if source else "<defaults>"
        if source is not None:
            draft.config_files.append(source)

        for key in data:
            if key not in Toml.ALLOWED_TOP_LEVEL_KEYS:
                draft.diagnostics.add_warning(f"{origin}: unknown config section [{key}] ignored")
        for section, allowed in Toml.ALLOWED_SECTION_KEYS.items():
            for key in subtable(data, section):
                if key not in allowed:
                    draft.diagnostics.add_warning(
                        f"{origin}: unknown key '{key}' in [{section}] ignored"
                    )

        site: TomlTable = subtable(data, Toml.SECTION_SITE)
        draft.site_title = optional_str(site, Toml.KEY_TITLE)
        base_url: str | None = optional_str(site, Toml.KEY_BASE_URL)
        draft.base_url = base_url.rstrip("/") if base_url is not None else None
        draft.templates_dir = _path_or_none(
            optional_str(site, Toml.KEY_TEMPLATES_DIR), base
        )

        content: TomlTable = subtable(data, Toml.SECTION_CONTENT)
        draft.content_root = _path_or_none(optional_str(content, Toml.KEY_ROOT), base)
        draft.feature_kind = optional_str(content, Toml.KEY_FEATURE_KIND)
        draft.subjects = optional_str_list(content, Toml.KEY_SUBJECTS)
        draft.sort = optional_bool(content, Toml.KEY_SORT)
        draft.strict = optional_bool(content, Toml.KEY_STRICT)

        output: TomlTable = subtable(data, Toml.SECTION_OUTPUT)
        draft.output_dir = _path_or_none(optional_str(output, Toml.KEY_DIR), base)

        files: TomlTable = subtable(data, Toml.SECTION_FILES)
        draft.include_patterns = optional_str_list(files, Toml.KEY_INCLUDE_PATTERNS)
        draft.exclude_patterns = optional_str_list(files, Toml.KEY_EXCLUDE_PATTERNS)
        return draft

    @classmethod
    def from_file(cls, path: Path) -> MutableConfig:
        """Load a config layer from ``featuredocs.toml`` or ``pyproject.toml``.

        Args:
            path (Path): The config file to read.

        Returns:
            MutableConfig: The config layer (empty when the file holds no
            FeatureDocs configuration).

        Raises:
            ConfigError: If the file cannot be read or is not valid TOML.
        """
        resolved: Path = path.resolve()
        data: TomlTable = read_toml_file(resolved)
        if resolved.name == PYPROJECT_FILE_NAME:
            data = extract_pyproject_section(data) or {}
        logger.debug("Loaded config layer from %s: %s", resolved, data)
        return cls.from_toml_dict(data, base=resolved.parent, source=resolved)

    @classmethod
    def load_merged(
        cls,
        *,
        root: Path | None = None,
        extra_config_files: Iterable[Path] = (),
        overrides: ArgsLike | None = None,
        discover: bool = True,
    ) -> MutableConfig:
        """Build the layered configuration.

        Args:
            root (Path | None): Directory to start project config discovery from
                (defaults to the current working directory).
            extra_config_files (Iterable[Path]): Explicit config files, applied in order
                after the discovered project config.
            overrides (ArgsLike | None): Final overrides (see `apply_args`).
            discover (bool): Whether to look for a project config file.

        Returns:
            MutableConfig: The merged builder, ready to `freeze`.
        """
        start: Path = (root or Path.cwd()).resolve()
        found: Path | None = discover_project_config(start) if discover else None
        # Default paths are relative to the project root when one is found.
        draft: MutableConfig = cls.from_defaults(base=found.parent if found else start)
        if found is not None:
            logger.info("Using project config %s", found)
            draft = draft.merge_with(cls.from_file(found))
        for extra in extra_config_files:
            draft = draft.merge_with(cls.from_file(extra))
        if overrides:
            draft.apply_args(overrides)
        return draft

    # ------------------------------------------------------------------ merging

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder where values set on ``other`` win.

        Args:
            other (MutableConfig): The higher-precedence layer.

        Returns:
            MutableConfig: The merged builder.
        """
        merged = MutableConfig(
            site_title=_pick(other.site_title, self.site_title),
            base_url=_pick(other.base_url, self.base_url),
            templates_dir=_pick(other.templates_dir, self.templates_dir),
            content_root=_pick(other.content_root, self.content_root),
            feature_kind=_pick(other.feature_kind, self.feature_kind),
            subjects=_pick(other.subjects, self.subjects),
            sort=_pick(other.sort, self.sort),
            strict=_pick(other.strict, self.strict),
            output_dir=_pick(other.output_dir, self.output_dir),
            include_patterns=_pick(other.include_patterns, self.include_patterns),
            exclude_patterns=_pick(other.exclude_patterns, self.exclude_patterns),
            config_files=[*self.config_files, *other.config_files],
        )
        merged.diagnostics.extend(self.diagnostics)
        merged.diagnostics.extend(other.diagnostics)
        return merged

    def apply_args(self, args: ArgsLike) -> None:
        """Apply CLI/API overrides in place.

        Recognized keys: ``content_dir``, ``output_dir``, ``templates_dir``,
        ``base_url``, ``site_title``, ``subjects``, ``strict``, ``sort``.
        ``None`` values are ignored so callers can pass unset options through.

        Args:
            args (ArgsLike): Override values.
        """
        cwd: Path = Path.cwd()
        if args.get("content_dir") is not None:
            self.content_root = _resolve(Path(args["content_dir"]), cwd)
        if args.get("output_dir") is not None:
            self.output_dir = _resolve(Path(args["output_dir"]), cwd)
        if args.get("templates_dir") is not None:
            self.templates_dir = _resolve(Path(args["templates_dir"]), cwd)
        if args.get("base_url") is not None:
            self.base_url = str(args["base_url"]).rstrip("/")
        if args.get("site_title") is not None:
            self.site_title = str(args["site_title"])
        if args.get("subjects"):
            self.subjects = [str(s) for s in args["subjects"]]
        if args.get("strict") is not None:
            self.strict = bool(args["strict"])
        if args.get("sort") is not None:
            self.sort = bool(args["sort"])

    def freeze(self) -> Config:
        """Return an immutable `Config` snapshot, filling unset values with defaults."""
        cwd: Path = Path.cwd()
        return Config(
            site_title=self.site_title or "",
            base_url=self.base_url or "",
            templates_dir=self.templates_dir,
            content_root=self.content_root or cwd,
            feature_kind=self.feature_kind or "feature",
            subjects=tuple(_normalize_subject(s) for s in (self.subjects or [])),
            sort=True if self.sort is None else self.sort,
            strict=bool(self.strict),
            output_dir=self.output_dir or cwd / "public",
            include_patterns=tuple(self.include_patterns or ()),
            exclude_patterns=tuple(self.exclude_patterns or ()),
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )


def discover_project_config(start: Path) -> Path | None:
    """Find the nearest project config at or above ``start``.

    In each directory, ``featuredocs.toml`` wins over a ``pyproject.toml``
    that carries a ``[tool.featuredocs]`` table.

    Args:
        start (Path): Directory to start the upward search from.

    Returns:
        Path | None: The config file, or ``None`` when none is found.
    """
    for directory in (start, *start.parents):
        candidate: Path = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
        pyproject: Path = directory / PYPROJECT_FILE_NAME
        if pyproject.is_file() and extract_pyproject_section(load_toml_dict(pyproject)):
            return pyproject
    return None


def _normalize_subject(subject: str) -> str:
    return subject.strip().lower()


def _pick(preferred: Any, fallback: Any) -> Any:
    return fallback if preferred is None else preferred


def _resolve(path: Path, base: Path) -> Path:
    return path if path.is_absolute() else (base / path).resolve()


def _path_or_none(raw: str | None, base: Path) -> Path | None:
    if raw is None or raw == "":
        return None
    return _resolve(Path(raw), base)
