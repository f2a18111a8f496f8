# topmark:header:start
#
#   project      : Counterpart
#   file         : similarity.py
#   file_relpath : src/counterpart/ranking/similarity.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""String similarity used to rank candidate paths.

The resolver ranks candidates with `trigram_overlap_count`, a raw match count
rather than a normalized score. It is only meaningful for comparing candidates
against the *same* query within one search, and it favors longer strings.

`edit_distance` is a plain Levenshtein distance kept alongside for ranking
experiments; the resolver does not use it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from counterpart.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from counterpart.config.logging import CounterpartLogger

logger: CounterpartLogger = get_logger(__name__)

TRIGRAM_SIZE: Final[int] = 3


def _trigrams(text: str) -> Iterator[str]:
    for i in range(len(text) - TRIGRAM_SIZE + 1):
        yield text[i : i + TRIGRAM_SIZE]


def trigram_overlap_count(a: str, b: str) -> int:
    """Count trigram occurrences of the longer string found in the shorter one.

    The set of unique trigrams is built from the shorter string (``a`` on equal
    length); every trigram of the longer string is then looked up, so repeated
    trigrams in the longer string count once per occurrence. The result is not
    symmetric in general and not normalized.

    Args:
        a (str): First string.
        b (str): Second string.

    Returns:
        int: Number of matching trigram occurrences, 0 if either string is
            shorter than three characters.
    """
    if len(a) < TRIGRAM_SIZE or len(b) < TRIGRAM_SIZE:
        return 0
    shorter, longer = (a, b) if len(a) <= len(b) else (b, a)
    known: set[str] = set(_trigrams(shorter))
    return sum(1 for trigram in _trigrams(longer) if trigram in known)


def edit_distance(a: str, b: str) -> int:
    """Return the Levenshtein distance between two strings.

    Uses a single rolling row sized to the shorter string.

    Args:
        a (str): Source string.
        b (str): Target string.

    Returns:
        int: Minimum number of single-character insertions, deletions and
            substitutions turning *a* into *b*.
    """
    if len(a) < len(b):
        a, b = b, a
    row: list[int] = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        diagonal: int = row[0]
        row[0] = i
        for j, cb in enumerate(b, start=1):
            above: int = row[j]
            row[j] = min(
                above + 1,  # deletion
                row[j - 1] + 1,  # insertion
                diagonal + (ca != cb),  # substitution
            )
            diagonal = above
    return row[-1]


def rank_by_similarity(items: Iterable[str], query: str) -> list[str]:
    """Sort *items* by descending trigram overlap with *query*.

    The sort is stable: equally scored items keep their input order.

    Args:
        items (Iterable[str]): Candidate strings.
        query (str): String to compare against.

    Returns:
        list[str]: The ranked candidates.
    """
    scored: list[tuple[int, str]] = [(trigram_overlap_count(item, query), item) for item in items]
    scored.sort(key=lambda pair: pair[0], reverse=True)
    if scored:
        logger.trace(
            "Ranking against %r: %s",
            query,
            ", ".join(f"{item}={score}" for score, item in scored[:5]),
        )
    return [item for _, item in scored]
