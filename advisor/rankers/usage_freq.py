"""
Usage-Frequency ranking.

Orders candidates by how common each word is in an external frequency
table (missing words count as 0). A plausibility heuristic ("is this a
word people actually use?"), not an information-theoretic one, and it never
affects which words are filtered out.
"""

from __future__ import annotations
from typing import List, Mapping, Sequence

from .base import BaseRanker, register


def best_by_usage_frequency(candidates: Sequence[str], table: Mapping[str, int]) -> List[str]:
    """Descending by table count; ties keep input order."""
    return sorted(candidates, key=lambda w: table.get(w, 0), reverse=True)


@register
class UsageFreqRanker(BaseRanker):
    id = "usage_freq"
    name = "Usage Frequency"
    version = "1.0.0"

    def rank(self, candidates: Sequence[str]) -> List[str]:
        return best_by_usage_frequency(candidates, self.frequencies)
