# topmark:header:start
#
#   project      : Counterpart
#   file         : types.py
#   file_relpath : src/counterpart/resolver/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value types produced by the resolver."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from counterpart.paths.model import ParsedPath


class Classification(Enum):
    """Which search strategy applies to an input path.

    TEST_IN_TEST_DIRECTORY: first segment is a recognized test directory.
    TEST_SUFFIXED_NEIGHBOUR: outside test directories, but the extension chain
        carries the test marker (``widget.test.rb``).
    IMPLEMENTATION: anything else.
    """

    TEST_IN_TEST_DIRECTORY = "test-in-test-directory"
    TEST_SUFFIXED_NEIGHBOUR = "test-suffixed-neighbour"
    IMPLEMENTATION = "implementation"


@dataclass(frozen=True, slots=True)
class ResolutionOutcome:
    """Result of one resolution.

    Attributes:
        path (ParsedPath): The input path.
        classification (Classification): Strategy chosen for the input.
        attempts (tuple[str, ...]): Candidates handed to the launcher, in order.
        launched (str | None): The launched target, None when no candidate was found.
    """

    path: ParsedPath
    classification: Classification
    attempts: tuple[str, ...] = ()
    launched: str | None = None

    @property
    def found(self) -> bool:
        """True if a target was launched."""
        return self.launched is not None
