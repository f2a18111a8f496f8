# topmark:header:start
#
#   project      : Counterpart
#   file         : model.py
#   file_relpath : src/counterpart/paths/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable path model used by the resolver.

A `ParsedPath` splits a POSIX-style path string into directory segments and
the dot-separated parts of its final component::

    spec/models/widget.test.rb
    segments   = ("spec", "models")
    file_parts = ("widget", "test", "rb")

The first file part is the base name, the last one is the primary extension,
and the parts in between form the extension chain (``("test",)`` above).

The model works on strings only. The single filesystem-facing helper,
`neighbouring_files`, goes through a `FileLister` collaborator.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from counterpart.config.logging import get_logger
from counterpart.constants import EXTENSION_SEPARATOR, PATH_SEPARATOR
from counterpart.errors import InvalidPathError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from counterpart.config.logging import CounterpartLogger
    from counterpart.paths.lister import FileLister

logger: CounterpartLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ParsedPath:
    """Immutable decomposition of a path string.

    Attributes:
        segments (tuple[str, ...]): Directory names, root to leaf, without the file name.
            An absolute path starts with an empty segment.
        file_parts (tuple[str, ...]): Dot-separated tokens of the final component. Never empty.
    """

    segments: tuple[str, ...]
    file_parts: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.file_parts:
            raise InvalidPathError(PATH_SEPARATOR.join(self.segments), "no file component")

    @property
    def directory(self) -> str:
        """Directory segments joined by the path separator (``""`` at root level)."""
        return PATH_SEPARATOR.join(self.segments)

    @property
    def first_segment(self) -> str | None:
        """Leading directory segment, or None for a root-level file."""
        return self.segments[0] if self.segments else None

    @property
    def file_name(self) -> str:
        """Base name: the first file part."""
        return self.file_parts[0]

    @property
    def primary_extension(self) -> str:
        """Last file part. Equals `file_name` for a file without dots."""
        return self.file_parts[-1]

    @property
    def extension_chain(self) -> tuple[str, ...]:
        """File parts between the base name and the primary extension."""
        return self.file_parts[1:-1]

    @property
    def base_name(self) -> str:
        """Final path component (all file parts joined by dots)."""
        return EXTENSION_SEPARATOR.join(self.file_parts)

    @property
    def full_path_without_extension(self) -> str:
        """Directory plus base name, without any extension."""
        return self._join(self.file_name)

    def has_test_marker(self, marker: str) -> bool:
        """Return True if the extension chain contains *marker*."""
        return marker in self.extension_chain

    def with_file_parts(self, file_parts: Iterable[str]) -> ParsedPath:
        """Return a sibling path in the same directory with other file parts."""
        return replace(self, file_parts=tuple(file_parts))

    def drop_first_segment(self, new_root: str) -> tuple[str, ParsedPath]:
        """Replace the leading segment with *new_root*.

        *new_root* may span several segments (``"lib/myproj"``). File parts are
        unchanged. A root-level path simply gains the new root.

        Args:
            new_root (str): Replacement root, e.g. ``"lib"`` or ``"src/myproj"``.

        Returns:
            tuple[str, ParsedPath]: The new directory string and the new path.
        """
        root_segments: tuple[str, ...] = tuple(s for s in new_root.split(PATH_SEPARATOR) if s)
        segments: tuple[str, ...] = root_segments + self.segments[1:]
        moved = ParsedPath(segments=segments, file_parts=self.file_parts)
        return moved.directory, moved

    def neighbouring_files(self, lister: FileLister) -> list[str]:
        """Return all files under this path's directory, recursively, minus this path.

        If the path itself is not part of the listing, nothing is removed.

        Args:
            lister (FileLister): Collaborator used to list the directory.

        Returns:
            list[str]: Listed paths in lister order.
        """
        own: str = str(self)
        files: list[str] = lister.list_files(self.directory, "**/*")
        neighbours: list[str] = [f for f in files if f != own]
        logger.trace("%d neighbour(s) of %s", len(neighbours), own)
        return neighbours

    def _join(self, leaf: str) -> str:
        if not self.segments:
            return leaf
        return f"{self.directory}{PATH_SEPARATOR}{leaf}"

    def __str__(self) -> str:
        return self._join(self.base_name)


def parse(raw_path: str) -> ParsedPath:
    """Parse a path string into a `ParsedPath`.

    Splits on ``/``; the last component is split again on ``.``. Doubled
    separators and ``.`` segments are ignored. A leading ``/`` is kept as an
    empty first segment so the path renders back as absolute.

    Args:
        raw_path (str): Path string, e.g. ``"lib/widget.rb"``.

    Returns:
        ParsedPath: The parsed path.

    Raises:
        InvalidPathError: If *raw_path* is empty, ends with a separator, or
            its last component contains no file name.
    """
    if not raw_path:
        raise InvalidPathError(raw_path, "empty path")

    pieces: list[str] = raw_path.split(PATH_SEPARATOR)
    leaf: str = pieces[-1]
    if not leaf:
        raise InvalidPathError(raw_path, "no file component")

    file_parts: tuple[str, ...] = tuple(leaf.split(EXTENSION_SEPARATOR))
    if not any(file_parts):
        raise InvalidPathError(raw_path, "no file component")

    absolute: bool = raw_path.startswith(PATH_SEPARATOR)
    segments: list[str] = [s for s in pieces[:-1] if s and s != "."]
    if absolute:
        segments.insert(0, "")

    return ParsedPath(segments=tuple(segments), file_parts=file_parts)
