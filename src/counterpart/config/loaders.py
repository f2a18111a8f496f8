# topmark:header:start
#
#   project      : Counterpart
#   file         : loaders.py
#   file_relpath : src/counterpart/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading Counterpart configuration from:
- the runtime defaults (defined in code, no I/O), and
- on-disk TOML files (``counterpart.toml`` / ``[tool.counterpart]`` in ``pyproject.toml``).

Parsing is done with `tomlkit` and returned as plain `dict` structures. Typed
getters validate value shapes and raise `ConfigError` with the offending
source in the message.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from counterpart.config.keys import Toml
from counterpart.config.logging import get_logger
from counterpart.constants import PYPROJECT_TOOL_SECTION
from counterpart.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from counterpart.config.logging import CounterpartLogger

TomlTable = dict[str, Any]

logger: CounterpartLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return Counterpart's runtime defaults as a Python dict.

    Returns:
        TomlTable: A new dict so callers can mutate it safely.
    """
    return {
        Toml.KEY_TEST_DIRECTORIES: ["test", "spec", "tests", "specs", "counterpart"],
        Toml.KEY_IMPLEMENTATION_ROOTS: ["lib/{project}", "app", "lib", "src", "src/{project}"],
        Toml.KEY_TEST_MARKER: "test",
        Toml.KEY_TEST_NAME_SUFFIXES: ["_spec", "_test"],
        Toml.KEY_TEST_NAME_PREFIXES: ["test_"],
        Toml.KEY_EXCLUDE: [".git/", "node_modules/", "__pycache__/"],
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``counterpart.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_tool_section(pyproject: TomlTable) -> TomlTable | None:
    """Return the ``[tool.counterpart]`` table of a parsed ``pyproject.toml``, if any."""
    tool: Any = pyproject.get(Toml.SECTION_TOOL)
    if not isinstance(tool, dict):
        return None
    section: Any = cast("TomlTable", tool).get(PYPROJECT_TOOL_SECTION)
    if section is None:
        return None
    if not isinstance(section, dict):
        raise ConfigError(f"[tool.{PYPROJECT_TOOL_SECTION}] must be a table")
    return cast("TomlTable", section)


def warn_unknown_keys(table: TomlTable, source: str) -> None:
    """Log a warning for keys Counterpart does not know about."""
    for key in sorted(set(table) - Toml.ALL_KEYS):
        logger.warning("Ignoring unknown config key %r in %s", key, source)


def get_string_or_none(table: TomlTable, key: str, source: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        source (str): Human-readable origin used in error messages.

    Returns:
        str | None: The string value, or None when the key is absent.

    Raises:
        ConfigError: If the value is present but not a string.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"{source}: '{key}' must be a string, got {type(value).__name__}")
    return value


def get_string_list_or_none(table: TomlTable, key: str, source: str) -> list[str] | None:
    """Extract an optional list of strings from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        source (str): Human-readable origin used in error messages.

    Returns:
        list[str] | None: The list, or None when the key is absent.

    Raises:
        ConfigError: If the value is present but not a list of strings.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"{source}: '{key}' must be a list of strings")
    return list(cast("list[str]", value))
