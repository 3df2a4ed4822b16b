# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : model.py
#   file_relpath : src/docxmlfmt/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `FormattingOptions`: the immutable options record handed to the engine.
    - `Config`: an immutable runtime snapshot used by the CLI (formatting
      options plus file discovery settings).
    - `MutableFormattingOptions` / `MutableConfig`: mutable builders used while
      layering defaults, config files and CLI overrides. They can be frozen into
      the immutable types and thawed back for edits.

Merge policy:
    Layers are merged in increasing precedence; a later layer wins for every
    value it sets (``None`` means "not set, inherit"). In the mutable layer a
    ``wrap_column`` of ``0`` means "reflow explicitly disabled" and freezes to
    ``None``.

Immutability:
    `FormattingOptions` and `Config` are ``frozen=True`` and hold tuples, so a
    formatting call can never observe a change in its options.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from docxmlfmt.config.io import (
    discover_config_files,
    get_bool_or_none,
    get_int_or_none,
    get_str_list_or_none,
    get_str_or_none,
    get_table,
    load_config_source,
)
from docxmlfmt.config.keys import Toml
from docxmlfmt.config.logging import get_logger
from docxmlfmt.constants import DEFAULT_INCLUDE_PATTERNS, DEFAULT_MARKER, DEFAULT_TAB_SIZE
from docxmlfmt.core.errors import ConfigError, ContractViolationError, require

if TYPE_CHECKING:
    from collections.abc import Iterable

    from docxmlfmt.config.io import TomlTable
    from docxmlfmt.config.logging import DocxmlfmtLogger

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: DocxmlfmtLogger = get_logger(__name__)


# ------------------ Formatting options ------------------


@dataclass(frozen=True, slots=True)
class FormattingOptions:
    """Immutable formatting options for one formatting operation.

    Attributes:
        use_tabs (bool): Render continuation indentation with tabs then spaces.
        tab_size (int): Width of a tab stop; must be positive.
        wrap_column (int | None): Content width to reflow to; None disables reflow.
        marker (str): The doc-comment marker (``///`` by default).

    Raises:
        ContractViolationError: On construction with a non-positive tab size or
            wrap column, or an empty marker or one containing whitespace.
    """

    use_tabs: bool = False
    tab_size: int = DEFAULT_TAB_SIZE
    wrap_column: int | None = None
    marker: str = DEFAULT_MARKER

    def __post_init__(self) -> None:
        require(self.tab_size >= 1, f"tab_size must be positive, got {self.tab_size}")
        require(
            self.wrap_column is None or self.wrap_column >= 1,
            f"wrap_column must be positive when set, got {self.wrap_column}",
        )
        require(
            bool(self.marker) and not any(ch.isspace() for ch in self.marker),
            f"marker must be non-empty and contain no whitespace, got {self.marker!r}",
        )

    def thaw(self) -> MutableFormattingOptions:
        """Return a mutable builder initialized from this snapshot."""
        return MutableFormattingOptions(
            use_tabs=self.use_tabs,
            tab_size=self.tab_size,
            wrap_column=self.wrap_column if self.wrap_column is not None else 0,
            marker=self.marker,
        )

    def to_toml_dict(self) -> TomlTable:
        """Return the ``[formatting]`` table for these options."""
        return {
            Toml.KEY_USE_TABS: self.use_tabs,
            Toml.KEY_TAB_SIZE: self.tab_size,
            Toml.KEY_WRAP_COLUMN: self.wrap_column or 0,
            Toml.KEY_MARKER: self.marker,
        }


@dataclass
class MutableFormattingOptions:
    """Mutable builder for `FormattingOptions`; ``None`` means "inherit"."""

    use_tabs: bool | None = None
    tab_size: int | None = None
    wrap_column: int | None = None
    marker: str | None = None

    @classmethod
    def from_toml_dict(
        cls,
        table: TomlTable,
        *,
        source: str | None = None,
    ) -> MutableFormattingOptions:
        """Build from a ``[formatting]`` table.

        Raises:
            ConfigError: If a value has the wrong type or is out of range.
        """
        opts = cls(
            use_tabs=get_bool_or_none(table, Toml.KEY_USE_TABS, source=source),
            tab_size=get_int_or_none(table, Toml.KEY_TAB_SIZE, source=source),
            wrap_column=get_int_or_none(table, Toml.KEY_WRAP_COLUMN, source=source),
            marker=get_str_or_none(table, Toml.KEY_MARKER, source=source),
        )
        if opts.tab_size is not None and opts.tab_size < 1:
            raise ConfigError(f"'{Toml.KEY_TAB_SIZE}' must be positive", source=source)
        if opts.wrap_column is not None and opts.wrap_column < 0:
            raise ConfigError(f"'{Toml.KEY_WRAP_COLUMN}' must not be negative", source=source)
        return opts

    def merge_with(self, other: MutableFormattingOptions) -> MutableFormattingOptions:
        """Overlay ``other`` on top of ``self`` (values set in ``other`` win)."""
        return MutableFormattingOptions(
            use_tabs=other.use_tabs if other.use_tabs is not None else self.use_tabs,
            tab_size=other.tab_size if other.tab_size is not None else self.tab_size,
            wrap_column=other.wrap_column if other.wrap_column is not None else self.wrap_column,
            marker=other.marker if other.marker is not None else self.marker,
        )

    def freeze(self) -> FormattingOptions:
        """Return the immutable snapshot, filling unset values with defaults."""
        return FormattingOptions(
            use_tabs=bool(self.use_tabs),
            tab_size=self.tab_size if self.tab_size is not None else DEFAULT_TAB_SIZE,
            wrap_column=self.wrap_column or None,
            marker=self.marker if self.marker is not None else DEFAULT_MARKER,
        )


# ------------------ Runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for the CLI.

    Attributes:
        formatting (FormattingOptions): Options handed to the engine.
        include_patterns (tuple[str, ...]): gitwildmatch patterns selecting files
            when walking directories.
        exclude_patterns (tuple[str, ...]): gitwildmatch patterns excluding files.
        config_files (tuple[str, ...]): Config sources that were merged, in order.
    """

    formatting: FormattingOptions = field(default_factory=FormattingOptions)
    include_patterns: tuple[str, ...] = DEFAULT_INCLUDE_PATTERNS
    exclude_patterns: tuple[str, ...] = ()
    config_files: tuple[str, ...] = ()

    def thaw(self) -> MutableConfig:
        """Return a mutable builder initialized from this snapshot."""
        return MutableConfig(
            formatting=self.formatting.thaw(),
            include_patterns=list(self.include_patterns),
            exclude_patterns=list(self.exclude_patterns),
            config_files=list(self.config_files),
        )

    def to_toml_dict(self) -> TomlTable:
        """Return the effective configuration as a TOML-ready table."""
        return {
            Toml.SECTION_FORMATTING: self.formatting.to_toml_dict(),
            Toml.SECTION_FILES: {
                Toml.KEY_INCLUDE: list(self.include_patterns),
                Toml.KEY_EXCLUDE: list(self.exclude_patterns),
            },
        }


@dataclass
class MutableConfig:
    """Mutable configuration builder used while layering config sources."""

    formatting: MutableFormattingOptions = field(default_factory=MutableFormattingOptions)
    include_patterns: list[str] | None = None
    exclude_patterns: list[str] | None = None
    config_files: list[str] = field(default_factory=lambda: [])

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return the built-in defaults layer."""
        return cls(
            formatting=MutableFormattingOptions(
                use_tabs=False,
                tab_size=DEFAULT_TAB_SIZE,
                wrap_column=0,
                marker=DEFAULT_MARKER,
            ),
            include_patterns=list(DEFAULT_INCLUDE_PATTERNS),
            exclude_patterns=[],
        )

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, source: str | None = None) -> MutableConfig:
        """Build a layer from a parsed config document.

        Raises:
            ConfigError: If the document has wrongly-typed sections or values.
        """
        files: TomlTable = get_table(data, Toml.SECTION_FILES, source=source)
        return cls(
            formatting=MutableFormattingOptions.from_toml_dict(
                get_table(data, Toml.SECTION_FORMATTING, source=source), source=source
            ),
            include_patterns=get_str_list_or_none(files, Toml.KEY_INCLUDE, source=source),
            exclude_patterns=get_str_list_or_none(files, Toml.KEY_EXCLUDE, source=source),
            config_files=[source] if source else [],
        )

    @classmethod
    def from_file(cls, path: Path) -> MutableConfig:
        """Load one config file (``pyproject.toml`` or ``docxmlfmt.toml``)."""
        return cls.from_toml_dict(load_config_source(path), source=str(path))

    @classmethod
    def from_args(cls, args: ArgsLike) -> MutableConfig:
        """Build the CLI/API override layer from an argument mapping.

        Recognized keys: ``use_tabs``, ``tab_size``, ``wrap_column``, ``marker``,
        ``include_patterns``, ``exclude_patterns``. Missing or None values inherit.
        """
        include: Iterable[str] | None = args.get("include_patterns")
        exclude: Iterable[str] | None = args.get("exclude_patterns")
        return cls(
            formatting=MutableFormattingOptions(
                use_tabs=args.get("use_tabs"),
                tab_size=args.get("tab_size"),
                wrap_column=args.get("wrap_column"),
                marker=args.get("marker"),
            ),
            include_patterns=list(include) if include else None,
            exclude_patterns=list(exclude) if exclude else None,
        )

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Overlay ``other`` on top of ``self`` (values set in ``other`` win)."""
        return MutableConfig(
            formatting=self.formatting.merge_with(other.formatting),
            include_patterns=(
                other.include_patterns
                if other.include_patterns is not None
                else self.include_patterns
            ),
            exclude_patterns=(
                other.exclude_patterns
                if other.exclude_patterns is not None
                else self.exclude_patterns
            ),
            config_files=[*self.config_files, *other.config_files],
        )

    def freeze(self) -> Config:
        """Return the immutable runtime snapshot.

        Raises:
            ConfigError: If the merged formatting options are invalid.
        """
        try:
            formatting: FormattingOptions = self.formatting.freeze()
        except ContractViolationError as e:
            raise ConfigError(str(e)) from e
        return Config(
            formatting=formatting,
            include_patterns=tuple(
                self.include_patterns
                if self.include_patterns is not None
                else DEFAULT_INCLUDE_PATTERNS
            ),
            exclude_patterns=tuple(self.exclude_patterns or ()),
            config_files=tuple(self.config_files),
        )

    @classmethod
    def load_merged(
        cls,
        *,
        cwd: Path | None = None,
        extra_config_files: Iterable[Path] = (),
        no_config: bool = False,
        args: ArgsLike | None = None,
        base: MutableConfig | None = None,
    ) -> MutableConfig:
        """Layer defaults, discovered files, explicit files and overrides.

        Args:
            cwd (Path | None): Directory to start config discovery from (default: CWD).
            extra_config_files (Iterable[Path]): Explicit config files, applied in order.
            no_config (bool): Skip discovery of project config files.
            args (ArgsLike | None): Override layer (CLI flags or API arguments).
            base (MutableConfig | None): Lowest layer; the built-in defaults when None.

        Returns:
            MutableConfig: The merged builder; call `freeze` for a runtime snapshot.

        Raises:
            ConfigError: If any config source is unreadable or invalid.
        """
        merged: MutableConfig = base if base is not None else cls.from_defaults()
        if not no_config:
            for path in discover_config_files(cwd or Path.cwd()):
                merged = merged.merge_with(cls.from_file(path))
        for path in extra_config_files:
            merged = merged.merge_with(cls.from_file(path))
        if args:
            merged = merged.merge_with(cls.from_args(args))
        logger.debug("Merged configuration from: %s", merged.config_files or "<defaults>")
        return merged
