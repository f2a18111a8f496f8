# topmark:header:start
#
#   project      : Counterpart
#   file         : launcher.py
#   file_relpath : src/counterpart/launcher.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Launcher collaborators: hand a resolved path to an editor.

A launcher receives a candidate path and reports whether it launched it.
Candidates that do not exist are reported as `LaunchResult.NOT_FOUND` so the
resolver can move on to the next alternative.

`EditorLauncher` replaces the current process with the editor and therefore
never returns on success. `PrintLauncher` prints the target instead, which is
what ``--dry-run`` and scripting use.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from counterpart.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from counterpart.config.logging import CounterpartLogger

logger: CounterpartLogger = get_logger(__name__)


class LaunchResult(Enum):
    """Outcome of a single launch attempt."""

    LAUNCHED = "launched"
    NOT_FOUND = "not_found"


class Launcher(Protocol):
    """Open a path if it exists."""

    def launch(self, path: str) -> LaunchResult:
        """Launch *path* or report that it does not exist."""
        ...


class _ExistingFileLauncher:
    """Shared existence check relative to a working root."""

    def __init__(self, root: Path | None = None) -> None:
        self.root = root or Path.cwd()

    def _exists(self, path: str) -> bool:
        p = Path(path)
        return (p if p.is_absolute() else self.root / p).is_file()


class EditorLauncher(_ExistingFileLauncher):
    """Replace the running process with ``<editor> <path>``.

    Args:
        command (Sequence[str]): Editor argv prefix, e.g. ``["code", "-w"]``.
        root (Path | None): Working root relative paths are checked against.
        execvp (Callable[[str, list[str]], object] | None): Process replacement hook,
            ``os.execvp`` by default.
    """

    def __init__(
        self,
        command: Sequence[str],
        *,
        root: Path | None = None,
        execvp: Callable[[str, list[str]], object] | None = None,
    ) -> None:
        super().__init__(root)
        if not command:
            raise ValueError("Editor command must not be empty")
        self.command: list[str] = list(command)
        self._execvp: Callable[[str, list[str]], object] = execvp or os.execvp

    def launch(self, path: str) -> LaunchResult:
        """Exec the editor on *path*; return NOT_FOUND if *path* is missing."""
        if not self._exists(path):
            logger.debug("Candidate does not exist: %s", path)
            return LaunchResult.NOT_FOUND
        argv: list[str] = [*self.command, path]
        logger.info("Launching: %s", " ".join(argv))
        self._execvp(argv[0], argv)
        # Only reached when a replacement hook returns (tests)
        return LaunchResult.LAUNCHED


class PrintLauncher(_ExistingFileLauncher):
    """Print the target path instead of opening it.

    Args:
        emit (Callable[[str], None]): Output function, typically the console's ``print``.
        root (Path | None): Working root relative paths are checked against.
    """

    def __init__(self, emit: Callable[[str], None], *, root: Path | None = None) -> None:
        super().__init__(root)
        self._emit = emit

    def launch(self, path: str) -> LaunchResult:
        """Print *path* if it exists."""
        if not self._exists(path):
            logger.debug("Candidate does not exist: %s", path)
            return LaunchResult.NOT_FOUND
        self._emit(path)
        return LaunchResult.LAUNCHED
