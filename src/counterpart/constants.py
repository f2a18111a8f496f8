# topmark:header:start
#
#   project      : Counterpart
#   file         : constants.py
#   file_relpath : src/counterpart/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Counterpart Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

COUNTERPART_VERSION: str = get_version("counterpart")

PATH_SEPARATOR: str = "/"
EXTENSION_SEPARATOR: str = "."

# Config files discovered in the working root
PYPROJECT_TOML_NAME: str = "pyproject.toml"
COUNTERPART_TOML_NAME: str = "counterpart.toml"
PYPROJECT_TOOL_SECTION: str = "counterpart"

# Placeholder expanded to the project name inside implementation roots
PROJECT_PLACEHOLDER: str = "{project}"

EDITOR_ENV_VAR: str = "EDITOR"
FALLBACK_EDITOR: str = "vi"

LOG_LEVEL_ENV_VAR: str = "COUNTERPART_LOG_LEVEL"
