# topmark:header:start
#
#   project      : Counterpart
#   file         : engine.py
#   file_relpath : src/counterpart/resolver/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve a source or test path to its most likely companion.

The resolver classifies an input path once and applies one strategy:

1. **Test in a test directory** (``spec/models/widget_spec.rb``): substitute
   each implementation root for the test directory (``lib/myproj/models/widget.rb``,
   ``app/models/widget.rb``, ...) and launch the first that exists. Otherwise
   rank every non-test source file of the same extension against the
   companion path and launch the best one.
2. **Test-suffixed neighbour** (``app/widget.test.rb``): rank the files
   around it and launch the best one.
3. **Implementation** (``lib/widget.rb``): try ``lib/widget.test.rb``, then
   rank the contents of each existing test directory and launch the best
   match from the first directory that has files.
   A file without dots reuses its name as the extension, so the direct
   candidate for ``Makefile`` is ``Makefile.test.Makefile``.

Running out of candidates is a normal outcome, reported through
`ResolutionOutcome.launched` being None.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from counterpart.config.logging import get_logger
from counterpart.constants import EXTENSION_SEPARATOR
from counterpart.errors import PathNotFoundError
from counterpart.launcher import LaunchResult
from counterpart.paths.model import ParsedPath, parse
from counterpart.ranking.similarity import rank_by_similarity
from counterpart.resolver.types import Classification, ResolutionOutcome

if TYPE_CHECKING:
    from collections.abc import Iterable

    from counterpart.config import Config
    from counterpart.config.logging import CounterpartLogger
    from counterpart.launcher import Launcher
    from counterpart.paths.lister import FileLister

logger: CounterpartLogger = get_logger(__name__)

ALL_FILES_PATTERN: str = "**/*"


class Resolver:
    """Single-shot companion resolver.

    Args:
        config (Config): Test-directory names, implementation roots and test conventions.
        lister (FileLister): Source of directory listings and existence checks.
        launcher (Launcher): Receives candidate paths in order.
        root (Path | None): Working root, used to expand ``{project}``. Defaults to the CWD.
    """

    def __init__(
        self,
        config: Config,
        lister: FileLister,
        launcher: Launcher,
        *,
        root: Path | None = None,
    ) -> None:
        self.config = config
        self.lister = lister
        self.launcher = launcher
        self.root = root or Path.cwd()
        self._attempts: list[str] = []

    # --- classification -------------------------------------------------

    def classify(self, path: ParsedPath) -> Classification:
        """Return the strategy that applies to *path* (pure, no I/O)."""
        if path.first_segment in self.config.test_directories:
            return Classification.TEST_IN_TEST_DIRECTORY
        if path.has_test_marker(self.config.test_marker):
            return Classification.TEST_SUFFIXED_NEIGHBOUR
        return Classification.IMPLEMENTATION

    def is_test_file(self, path: ParsedPath) -> bool:
        """Return True if the file name follows a test naming convention.

        Covers the extension-chain marker (``widget.test.rb``) and base-name
        affixes (``widget_spec.rb``, ``test_widget.py``).
        """
        if path.has_test_marker(self.config.test_marker):
            return True
        name: str = path.file_name
        return any(
            name.endswith(s) and name != s for s in self.config.test_name_suffixes
        ) or any(name.startswith(p) and name != p for p in self.config.test_name_prefixes)

    def implementation_file_parts(self, path: ParsedPath) -> tuple[str, ...]:
        """Strip test naming conventions from the file parts of *path*.

        ``widget_spec.rb`` and ``widget.test.rb`` both become ``widget.rb``.
        """
        name: str = path.file_name
        for suffix in self.config.test_name_suffixes:
            if name.endswith(suffix) and name != suffix:
                name = name[: -len(suffix)]
                break
        for prefix in self.config.test_name_prefixes:
            if name.startswith(prefix) and name != prefix:
                name = name[len(prefix) :]
                break
        if len(path.file_parts) == 1:
            return (name,)
        chain: list[str] = [p for p in path.extension_chain if p != self.config.test_marker]
        return (name, *chain, path.primary_extension)

    # --- entry point ----------------------------------------------------

    def resolve(self, path: ParsedPath | str) -> ResolutionOutcome:
        """Resolve *path* and launch its best companion, if any.

        Args:
            path (ParsedPath | str): Input path, parsed or raw.

        Returns:
            ResolutionOutcome: Classification, attempted candidates and launched target.

        Raises:
            InvalidPathError: If a raw *path* is malformed.
            PathNotFoundError: If *path* does not refer to an existing file.
        """
        parsed: ParsedPath = parse(path) if isinstance(path, str) else path
        if not self.lister.is_file(str(parsed)):
            raise PathNotFoundError(str(parsed))

        classification: Classification = self.classify(parsed)
        logger.debug("Classified %s as %s", parsed, classification.value)
        self._attempts = []

        launched: str | None
        if classification is Classification.TEST_IN_TEST_DIRECTORY:
            launched = self._resolve_test_in_test_directory(parsed)
        elif classification is Classification.TEST_SUFFIXED_NEIGHBOUR:
            launched = self._resolve_test_suffixed_neighbour(parsed)
        else:
            launched = self._resolve_implementation(parsed)

        if launched is None:
            logger.info("No companion found for %s", parsed)
        return ResolutionOutcome(
            path=parsed,
            classification=classification,
            attempts=tuple(self._attempts),
            launched=launched,
        )

    # --- strategies -----------------------------------------------------

    def _resolve_test_in_test_directory(self, path: ParsedPath) -> str | None:
        companion: ParsedPath = path.with_file_parts(self.implementation_file_parts(path))
        roots: tuple[str, ...] = self.config.expanded_implementation_roots(self.root)

        for impl_root in roots:
            _, candidate = companion.drop_first_segment(impl_root)
            launched: str | None = self._try_launch(str(candidate))
            if launched is not None:
                return launched

        if roots:
            _, query_path = companion.drop_first_segment(roots[0])
        else:
            query_path = ParsedPath(
                segments=companion.segments[1:], file_parts=companion.file_parts
            )

        pattern: str = ALL_FILES_PATTERN
        if len(path.file_parts) > 1:
            pattern = f"{ALL_FILES_PATTERN}{EXTENSION_SEPARATOR}{path.primary_extension}"
        candidates: list[str] = [
            f for f in self.lister.list_files("", pattern) if not self._is_test_candidate(f)
        ]
        logger.debug("Repository search: %d non-test candidate(s)", len(candidates))
        return self._launch_best(candidates, query_path.full_path_without_extension)

    def _resolve_test_suffixed_neighbour(self, path: ParsedPath) -> str | None:
        neighbours: list[str] = path.neighbouring_files(self.lister)
        return self._launch_best(neighbours, path.full_path_without_extension)

    def _resolve_implementation(self, path: ParsedPath) -> str | None:
        extension: str = self.config.test_extension or path.primary_extension
        direct: str = EXTENSION_SEPARATOR.join(
            (path.full_path_without_extension, self.config.test_marker, extension)
        )
        launched: str | None = self._try_launch(direct)
        if launched is not None:
            return launched

        query: str = path.full_path_without_extension
        for test_dir in self.config.test_directories:
            if not self.lister.is_dir(test_dir):
                continue
            candidates: list[str] = self.lister.list_files(test_dir, ALL_FILES_PATTERN)
            if candidates:
                logger.debug("Searching %d candidate(s) in %s/", len(candidates), test_dir)
                return self._launch_best(candidates, query)
        return None

    # --- helpers --------------------------------------------------------

    def _is_test_candidate(self, candidate: str) -> bool:
        parsed: ParsedPath = parse(candidate)
        if parsed.first_segment in self.config.test_directories:
            return True
        return self.is_test_file(parsed)

    def _launch_best(self, candidates: Iterable[str], query: str) -> str | None:
        ranked: list[str] = rank_by_similarity(candidates, query)
        if not ranked:
            return None
        return self._try_launch(ranked[0])

    def _try_launch(self, candidate: str) -> str | None:
        self._attempts.append(candidate)
        result: LaunchResult = self.launcher.launch(candidate)
        logger.debug("Launch %s: %s", candidate, result.value)
        return candidate if result is LaunchResult.LAUNCHED else None
