# topmark:header:start
#
#   project      : Counterpart
#   file         : __init__.py
#   file_relpath : src/counterpart/resolver/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Companion resolution: classification and search strategies."""

from __future__ import annotations

from counterpart.resolver.engine import Resolver
from counterpart.resolver.types import Classification, ResolutionOutcome

__all__: list[str] = [
    "Classification",
    "ResolutionOutcome",
    "Resolver",
]
