# topmark:header:start
#
#   project      : Counterpart
#   file         : errors.py
#   file_relpath : src/counterpart/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Library exceptions for Counterpart.

These are raised by the path model, the configuration layer and the resolver.
The CLI translates them into Click exceptions carrying exit codes
(see `counterpart.cli.errors`).

Running out of candidates is *not* an error: the resolver reports it as an
outcome without a launched target.
"""

from __future__ import annotations


class CounterpartError(Exception):
    """Base class for all Counterpart library errors."""


class InvalidPathError(CounterpartError, ValueError):
    """Malformed input path (empty string or no file component)."""

    def __init__(self, raw_path: str, reason: str) -> None:
        super().__init__(f"Invalid path {raw_path!r}: {reason}")
        self.raw_path = raw_path
        self.reason = reason


class PathNotFoundError(CounterpartError, FileNotFoundError):
    """The input path does not refer to an existing file."""

    def __init__(self, path: str) -> None:
        super().__init__(f"No such file: {path}")
        self.path = path


class ConfigError(CounterpartError):
    """Malformed configuration source or wrongly typed configuration value."""
