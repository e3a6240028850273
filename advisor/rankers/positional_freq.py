"""
Positional Letter Frequency (PLF).

Idea:
  Per-position histograms from the CURRENT candidate set.
  Score each word by sum(counts[pos][word[pos]]) across positions.
"""

from __future__ import annotations
from typing import List, Sequence

from .base import BaseRanker, register
from .letter_freq import best_by_letter_frequency


@register
class PositionalFreqRanker(BaseRanker):
    id = "positional_freq"
    name = "Positional Letter Frequency"
    version = "1.0.0"

    def rank(self, candidates: Sequence[str]) -> List[str]:
        return best_by_letter_frequency(candidates, by_position=True)
