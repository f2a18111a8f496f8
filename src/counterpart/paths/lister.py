# topmark:header:start
#
#   project      : Counterpart
#   file         : lister.py
#   file_relpath : src/counterpart/paths/lister.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File-lister collaborator used by the resolver.

The resolver never walks the filesystem itself. It asks a `FileLister` for
recursive glob listings rooted at a directory and for simple existence checks.
`FilesystemLister` is the default implementation: globs are expanded relative
to a working root and results are filtered with ``.gitignore``-style exclude patterns
(``pathspec.GitIgnoreSpec``).

All returned paths are POSIX-style strings relative to the working root,
sorted for deterministic output.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from pathspec import GitIgnoreSpec

from counterpart.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from counterpart.config.logging import CounterpartLogger

logger: CounterpartLogger = get_logger(__name__)


class FileLister(Protocol):
    """Minimal read-only view of a source tree."""

    def list_files(self, directory: str, pattern: str) -> list[str]:
        """Return files under *directory* matching the glob *pattern*."""
        ...

    def is_file(self, path: str) -> bool:
        """Return True if *path* is an existing regular file."""
        ...

    def is_dir(self, path: str) -> bool:
        """Return True if *path* is an existing directory."""
        ...


class FilesystemLister(FileLister):
    """List files on disk below a working root.

    Args:
        root (Path | None): Working root all paths are relative to. Defaults to the CWD.
        exclude_patterns (Iterable[str]): Gitignore-style patterns removed from every listing.

    Attributes:
        root (Path): Working root.
        exclude_spec (GitIgnoreSpec | None): Compiled exclude patterns, None when empty.
    """

    root: Path
    exclude_spec: GitIgnoreSpec | None

    def __init__(
        self,
        root: Path | None = None,
        *,
        exclude_patterns: Iterable[str] = (),
    ) -> None:
        self.root = root or Path.cwd()
        patterns: list[str] = [p for p in exclude_patterns if p.strip()]
        self.exclude_spec = GitIgnoreSpec.from_lines(patterns) if patterns else None

    def _abs(self, path: str) -> Path:
        p = Path(path)
        return p if p.is_absolute() else self.root / p

    def _rel(self, path: Path) -> str:
        try:
            return path.relative_to(self.root).as_posix()
        except ValueError:
            return path.as_posix()

    def list_files(self, directory: str, pattern: str) -> list[str]:
        """Expand *pattern* below *directory* and keep regular files only.

        Args:
            directory (str): Directory relative to the root (``""`` for the root itself).
            pattern (str): Glob pattern, e.g. ``"**/*"`` or ``"**/*.rb"``.

        Returns:
            list[str]: Sorted POSIX paths relative to the root. Empty when
                *directory* does not exist.
        """
        base: Path = self._abs(directory) if directory else self.root
        if not base.is_dir():
            logger.debug("Not a directory, nothing to list: %s", base)
            return []

        found: list[str] = [self._rel(p) for p in base.glob(pattern) if p.is_file()]
        if self.exclude_spec is not None:
            spec: GitIgnoreSpec = self.exclude_spec
            found = [f for f in found if not spec.match_file(f)]
        found.sort()
        logger.trace("list_files(%r, %r): %d file(s)", directory, pattern, len(found))
        return found

    def is_file(self, path: str) -> bool:
        """Return True if *path* is an existing regular file."""
        return self._abs(path).is_file()

    def is_dir(self, path: str) -> bool:
        """Return True if *path* is an existing directory."""
        return self._abs(path).is_dir()
