# topmark:header:start
#
#   project      : Counterpart
#   file         : __init__.py
#   file_relpath : src/counterpart/ranking/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Similarity scoring and ranking of candidate paths."""

from __future__ import annotations

from counterpart.ranking.similarity import edit_distance, rank_by_similarity, trigram_overlap_count

__all__: list[str] = [
    "edit_distance",
    "rank_by_similarity",
    "trigram_overlap_count",
]
