# topmark:header:start
#
#   project      : Counterpart
#   file         : __init__.py
#   file_relpath : src/counterpart/paths/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Path model and file-lister collaborator."""

from __future__ import annotations

from counterpart.paths.lister import FileLister, FilesystemLister
from counterpart.paths.model import ParsedPath, parse

__all__: list[str] = [
    "FileLister",
    "FilesystemLister",
    "ParsedPath",
    "parse",
]
