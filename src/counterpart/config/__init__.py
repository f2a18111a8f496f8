# topmark:header:start
#
#   project      : Counterpart
#   file         : __init__.py
#   file_relpath : src/counterpart/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for Counterpart.

Re-exports the configuration model so callers can write
``from counterpart.config import Config, MutableConfig``.
"""

from __future__ import annotations

from counterpart.config.model import Config, MutableConfig

__all__: list[str] = [
    "Config",
    "MutableConfig",
]
