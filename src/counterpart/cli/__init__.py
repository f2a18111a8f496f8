# topmark:header:start
#
#   project      : Counterpart
#   file         : __init__.py
#   file_relpath : src/counterpart/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Counterpart CLI package.

The console script entry point is defined in ``pyproject.toml`` as::

    [project.scripts]
    counterpart = "counterpart.cli.main:cli"
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main at module import time
