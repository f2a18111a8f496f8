# topmark:header:start
#
#   project      : Counterpart
#   file         : model.py
#   file_relpath : src/counterpart/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot handed to the resolver.
    - `MutableConfig`: a mutable builder used while layering sources; it
      can be frozen into `Config` and thawed back for edits.

Layers, lowest precedence first:
    1. runtime defaults (`load_defaults_dict`),
    2. ``[tool.counterpart]`` in ``<root>/pyproject.toml``,
    3. ``<root>/counterpart.toml``,
    4. an explicit extra config file (``--config``),
    5. overrides passed by the caller (CLI flags, tests).

Immutability:
    - `Config` stores tuples and is ``frozen=True``. Use `Config.thaw` → edit →
      `MutableConfig.freeze` for safe updates.
"""

from __future__ import annotations

import os
import shlex
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

from counterpart.config.keys import Toml
from counterpart.config.loaders import (
    extract_tool_section,
    get_string_list_or_none,
    get_string_or_none,
    load_defaults_dict,
    load_toml_dict,
    warn_unknown_keys,
)
from counterpart.config.logging import get_logger
from counterpart.constants import (
    COUNTERPART_TOML_NAME,
    EDITOR_ENV_VAR,
    FALLBACK_EDITOR,
    PROJECT_PLACEHOLDER,
    PYPROJECT_TOML_NAME,
)
from counterpart.errors import ConfigError

if TYPE_CHECKING:
    from counterpart.config.loaders import TomlTable
    from counterpart.config.logging import CounterpartLogger

logger: CounterpartLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for Counterpart.

    Attributes:
        test_directories (tuple[str, ...]): Recognized top-level test directory names,
            in search order.
        implementation_roots (tuple[str, ...]): Roots substituted for a test directory,
            in attempt order. ``{project}`` expands to the project name.
        test_marker (str): Extension-chain token marking a test file (``widget.test.rb``).
        test_name_suffixes (tuple[str, ...]): Base-name suffixes marking a test file
            (``widget_spec.rb``).
        test_name_prefixes (tuple[str, ...]): Base-name prefixes marking a test file
            (``test_widget.py``).
        test_extension (str | None): Extension of direct test companions; None reuses the
            input's primary extension.
        project (str | None): Project name; None uses the working root's directory name.
        editor (str | None): Editor command; None falls back to ``$EDITOR``, then ``vi``.
        exclude_patterns (tuple[str, ...]): Gitwildmatch patterns hidden from every listing.
        config_files (tuple[str, ...]): Config sources that contributed to this snapshot.
    """

    test_directories: tuple[str, ...]
    implementation_roots: tuple[str, ...]
    test_marker: str
    test_name_suffixes: tuple[str, ...] = ()
    test_name_prefixes: tuple[str, ...] = ()
    test_extension: str | None = None
    project: str | None = None
    editor: str | None = None
    exclude_patterns: tuple[str, ...] = ()
    config_files: tuple[str, ...] = ()

    def project_name(self, root: Path) -> str:
        """Return the configured project name or the name of *root*."""
        return self.project or root.resolve().name

    def expanded_implementation_roots(self, root: Path) -> tuple[str, ...]:
        """Return implementation roots with ``{project}`` expanded, duplicates removed."""
        name: str = self.project_name(root)
        out: list[str] = []
        for raw in self.implementation_roots:
            expanded: str = raw.replace(PROJECT_PLACEHOLDER, name)
            if expanded not in out:
                out.append(expanded)
        return tuple(out)

    def editor_command(self, environ: Mapping[str, str] | None = None) -> list[str]:
        """Return the editor command as an argv list.

        Resolution order: configured ``editor``, then ``$EDITOR``, then ``vi``.
        Blank values are skipped.

        Raises:
            ConfigError: If the selected command cannot be split, e.g. on unbalanced quotes.
        """
        env: Mapping[str, str] = os.environ if environ is None else environ
        raw: str = (
            (self.editor or "").strip()
            or env.get(EDITOR_ENV_VAR, "").strip()
            or FALLBACK_EDITOR
        )
        try:
            argv: list[str] = shlex.split(raw)
        except ValueError as e:
            raise ConfigError(f"Invalid editor command {raw!r}: {e}") from e
        return argv

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this snapshot."""
        return MutableConfig(
            test_directories=list(self.test_directories),
            implementation_roots=list(self.implementation_roots),
            test_marker=self.test_marker,
            test_name_suffixes=list(self.test_name_suffixes),
            test_name_prefixes=list(self.test_name_prefixes),
            test_extension=self.test_extension,
            project=self.project,
            editor=self.editor,
            exclude_patterns=list(self.exclude_patterns),
            config_files=list(self.config_files),
        )


# ------------------ Mutable builder ------------------


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    ``None`` means "not set by this layer" so `merge_with` can tell apart an
    absent key from an explicitly empty list.
    """

    test_directories: list[str] | None = None
    implementation_roots: list[str] | None = None
    test_marker: str | None = None
    test_name_suffixes: list[str] | None = None
    test_name_prefixes: list[str] | None = None
    test_extension: str | None = None
    project: str | None = None
    editor: str | None = None
    exclude_patterns: list[str] | None = None
    config_files: list[str] = field(default_factory=lambda: [])

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the runtime defaults."""
        m: MutableConfig = cls.from_toml_dict(load_defaults_dict(), source="<defaults>")
        m.config_files = []
        return m

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, source: str) -> MutableConfig:
        """Build a layer from a flat TOML table.

        Args:
            data (TomlTable): Table with Counterpart keys at the top level.
            source (str): Origin used in diagnostics and recorded in ``config_files``.

        Returns:
            MutableConfig: Builder with only the keys present in *data* set.

        Raises:
            ConfigError: If a value has the wrong type.
        """
        warn_unknown_keys(data, source)
        m = cls(
            test_directories=get_string_list_or_none(data, Toml.KEY_TEST_DIRECTORIES, source),
            implementation_roots=get_string_list_or_none(
                data, Toml.KEY_IMPLEMENTATION_ROOTS, source
            ),
            test_marker=get_string_or_none(data, Toml.KEY_TEST_MARKER, source),
            test_name_suffixes=get_string_list_or_none(data, Toml.KEY_TEST_NAME_SUFFIXES, source),
            test_name_prefixes=get_string_list_or_none(data, Toml.KEY_TEST_NAME_PREFIXES, source),
            test_extension=get_string_or_none(data, Toml.KEY_TEST_EXTENSION, source),
            project=get_string_or_none(data, Toml.KEY_PROJECT, source),
            editor=get_string_or_none(data, Toml.KEY_EDITOR, source),
            exclude_patterns=get_string_list_or_none(data, Toml.KEY_EXCLUDE, source),
            config_files=[source],
        )
        logger.debug("Config layer from %s: %s", source, m)
        return m

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig:
        """Build a layer from ``counterpart.toml`` or the tool table of ``pyproject.toml``."""
        data: TomlTable = load_toml_dict(path)
        if path.name == PYPROJECT_TOML_NAME:
            data = extract_tool_section(data) or {}
        return cls.from_toml_dict(data, source=str(path))

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Overlay *other* on top of this builder (in place) and return self.

        Every field *other* sets replaces the current value; lists are
        replaced, not concatenated.
        """
        for f in fields(self):
            if f.name == "config_files":
                continue
            value: Any = getattr(other, f.name)
            if value is not None:
                setattr(self, f.name, value)
        self.config_files.extend(s for s in other.config_files if s not in self.config_files)
        return self

    def freeze(self) -> Config:
        """Return an immutable snapshot; unset fields fall back to the defaults."""
        base: MutableConfig = MutableConfig.from_defaults()
        base.merge_with(self)
        return Config(
            test_directories=tuple(base.test_directories or ()),
            implementation_roots=tuple(base.implementation_roots or ()),
            test_marker=base.test_marker or "",
            test_name_suffixes=tuple(base.test_name_suffixes or ()),
            test_name_prefixes=tuple(base.test_name_prefixes or ()),
            test_extension=base.test_extension,
            project=base.project,
            editor=base.editor,
            exclude_patterns=tuple(base.exclude_patterns or ()),
            config_files=tuple(self.config_files),
        )

    @classmethod
    def load_merged(
        cls,
        root: Path,
        *,
        extra_config: Path | None = None,
        overrides: Mapping[str, Any] | None = None,
    ) -> MutableConfig:
        """Discover and merge all configuration layers for *root*.

        Args:
            root (Path): Working root searched for ``pyproject.toml`` and ``counterpart.toml``.
            extra_config (Path | None): Explicit config file, applied after discovered files.
            overrides (Mapping[str, Any] | None): Field overrides applied last; None values
                are ignored.

        Returns:
            MutableConfig: The merged builder, ready to freeze.

        Raises:
            ConfigError: If a config source is unreadable or malformed.
        """
        merged: MutableConfig = cls.from_defaults()

        for candidate in (root / PYPROJECT_TOML_NAME, root / COUNTERPART_TOML_NAME):
            if candidate.is_file():
                merged.merge_with(cls.from_toml_file(candidate))

        if extra_config is not None:
            merged.merge_with(cls.from_toml_file(extra_config))

        if overrides:
            known: set[str] = {f.name for f in fields(cls)}
            for key, value in overrides.items():
                if key not in known:
                    logger.warning("Ignoring unknown config override %r", key)
                    continue
                if value is not None:
                    setattr(merged, key, value)

        logger.debug("Merged config for %s: %s", root, merged)
        return merged
