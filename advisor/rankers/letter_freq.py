"""
Letter-Frequency ranking.

Idea:
  - Build letter histograms over the CURRENT candidate set: one global
    histogram and one per position.
  - Score each word as the sum over its letters (every occurrence counts)
    of either the global or the positional count. Highest score first.

Fast: O(|candidates| * 5) to build + O(|candidates| * 5) to score, so it
works at any candidate-set size, including sets far too large for the
elimination ranker.

`distinct_only` keeps only words with no repeated letter: such a guess
probes five different letters at once. The histograms are still built from
the full candidate set.
"""

from __future__ import annotations
from collections import Counter
from typing import List, Sequence, Tuple

from advisor.engine import WORD_LENGTH
from .base import BaseRanker, register


def letter_counts(candidates: Sequence[str]) -> Tuple[List[Counter], Counter]:
    """Return (per-position counts, global counts) over `candidates`."""
    positional = [Counter() for _ in range(WORD_LENGTH)]
    overall = Counter()
    for w in candidates:
        for i, ch in enumerate(w):
            positional[i][ch] += 1
            overall[ch] += 1
    return positional, overall


def has_distinct_letters(w: str) -> bool:
    return len(set(w)) == len(w)


def best_by_letter_frequency(candidates: Sequence[str], by_position: bool,
                             distinct_only: bool = False) -> List[str]:
    """
    Candidates ordered by descending letter-frequency score (ties keep input order).
    """
    if not candidates:
        return []

    positional, overall = letter_counts(candidates)

    if by_position:
        def _score(w: str) -> int:
            return sum(positional[i][ch] for i, ch in enumerate(w))
    else:
        def _score(w: str) -> int:
            return sum(overall[ch] for ch in w)

    pool = [w for w in candidates if has_distinct_letters(w)] if distinct_only else list(candidates)
    # sorted() is stable, and stays stable with reverse=True.
    return sorted(pool, key=_score, reverse=True)


@register
class LetterFreqRanker(BaseRanker):
    id = "letter_freq"
    name = "Letter Frequency"
    version = "1.0.0"

    def rank(self, candidates: Sequence[str]) -> List[str]:
        return best_by_letter_frequency(candidates, by_position=False)


@register
class LetterFreqDistinctRanker(BaseRanker):
    id = "letter_freq_distinct"
    name = "Letter Frequency (distinct-letter words only)"
    version = "1.0.0"

    def rank(self, candidates: Sequence[str]) -> List[str]:
        return best_by_letter_frequency(candidates, by_position=False, distinct_only=True)
