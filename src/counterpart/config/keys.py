# topmark:header:start
#
#   project      : Counterpart
#   file         : keys.py
#   file_relpath : src/counterpart/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML key names for Counterpart configuration.

These keys are the external configuration API, as they appear in
``counterpart.toml`` and in ``[tool.counterpart]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML keys used by Counterpart configuration.

    The configuration is flat: all keys live at the top level of
    ``counterpart.toml`` or directly under ``[tool.counterpart]``.
    """

    KEY_TEST_DIRECTORIES: Final[str] = "test_directories"
    KEY_IMPLEMENTATION_ROOTS: Final[str] = "implementation_roots"
    KEY_TEST_MARKER: Final[str] = "test_marker"
    KEY_TEST_NAME_SUFFIXES: Final[str] = "test_name_suffixes"
    KEY_TEST_NAME_PREFIXES: Final[str] = "test_name_prefixes"
    KEY_TEST_EXTENSION: Final[str] = "test_extension"
    KEY_PROJECT: Final[str] = "project"
    KEY_EDITOR: Final[str] = "editor"
    KEY_EXCLUDE: Final[str] = "exclude"

    SECTION_TOOL: Final[str] = "tool"

    ALL_KEYS: Final[frozenset[str]] = frozenset(
        {
            KEY_TEST_DIRECTORIES,
            KEY_IMPLEMENTATION_ROOTS,
            KEY_TEST_MARKER,
            KEY_TEST_NAME_SUFFIXES,
            KEY_TEST_NAME_PREFIXES,
            KEY_TEST_EXTENSION,
            KEY_PROJECT,
            KEY_EDITOR,
            KEY_EXCLUDE,
        }
    )
