# topmark:header:start
#
#   project      : Counterpart
#   file         : __init__.py
#   file_relpath : src/counterpart/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Counterpart package.

Counterpart jumps between implementation files and their tests. Given one
path it classifies it, computes the most likely companion path and opens it
in an editor. The resolver is usable as a library through
`counterpart.resolver.Resolver`.
"""

from __future__ import annotations
