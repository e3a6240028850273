"""
Random ranking.

Strategy:
  - Shuffle the CURRENT candidate set (words still consistent with all
    feedback so far) with the ranker's seeded RNG.

Notes:
  - Deterministic across runs with the same seed (via BaseRanker.rng).
  - This is what the advisor shows when the candidate set is too large to
    brute force: a handful of arbitrary but valid words. It is also a
    baseline for the simulation harness.
"""

from __future__ import annotations

import random
from typing import List, Sequence

from .base import BaseRanker, register


def random_sample(candidates: Sequence[str], k: int, rng: random.Random) -> List[str]:
    """Up to `k` entries of `candidates`, drawn without replacement."""
    if not candidates or k <= 0:
        return []
    return rng.sample(list(candidates), min(k, len(candidates)))


@register
class RandomRanker(BaseRanker):
    id = "random"
    name = "Random"
    version = "1.0.0"

    def rank(self, candidates: Sequence[str]) -> List[str]:
        """
        A seeded permutation of `candidates`.

        Args:
            candidates: current consistent word set (not modified)

        Returns:
            A new list holding every candidate exactly once.
        """
        return random_sample(candidates, len(candidates), self.rng)
