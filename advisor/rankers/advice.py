"""
One round of advice: every ranked list the advisor can show for the
current candidate set.

The elimination ranking is only computed when the set is small enough to
brute force (`limit`, default ELIMINATION_LIMIT). Above it the advisor
falls back to the letter-frequency lists and a random sample of
candidates.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Sequence

from .base import BaseRanker, register
from .elimination import ELIMINATION_LIMIT, best_by_elimination
from .letter_freq import best_by_letter_frequency
from .random_sample import random_sample
from .usage_freq import best_by_usage_frequency

log = logging.getLogger(__name__)

# How many random words to show when the set is too large to brute force.
SAMPLE_SIZE = 48


@dataclass
class Suggestions:
    remaining: int
    by_elimination: Optional[List[str]] = None  # None: over the brute-force limit
    by_letter: List[str] = field(default_factory=list)
    by_position: List[str] = field(default_factory=list)
    by_letter_distinct: List[str] = field(default_factory=list)
    by_usage: Optional[List[str]] = None        # None: no frequency table
    sample: List[str] = field(default_factory=list)

    @property
    def best(self) -> Optional[str]:
        """Single best guess: elimination when available, else positional frequency."""
        ranked = self.by_elimination if self.by_elimination is not None else self.by_position
        return ranked[0] if ranked else None


def suggest(candidates: Sequence[str], *,
            frequencies: Mapping[str, int] | None = None,
            limit: int = ELIMINATION_LIMIT,
            seed: int | None = None) -> Suggestions:
    """
    Build all ranked suggestion lists for `candidates` (not modified).
    """
    out = Suggestions(remaining=len(candidates))

    if len(candidates) <= limit:
        out.by_elimination = best_by_elimination(candidates)
    else:
        log.info("%d candidates is over the brute-force limit (%d); skipping elimination",
                 len(candidates), limit)
        out.sample = random_sample(candidates, SAMPLE_SIZE, random.Random(seed))

    out.by_letter = best_by_letter_frequency(candidates, by_position=False)
    out.by_position = best_by_letter_frequency(candidates, by_position=True)
    out.by_letter_distinct = best_by_letter_frequency(candidates, by_position=False,
                                                      distinct_only=True)
    if frequencies is not None:
        out.by_usage = best_by_usage_frequency(candidates, frequencies)
    return out


@register
class AutoRanker(BaseRanker):
    """Elimination under the brute-force limit, positional frequency above it."""
    id = "auto"
    name = "Auto (elimination, positional fallback)"
    version = "1.0.0"

    LIMIT = ELIMINATION_LIMIT

    def rank(self, candidates: Sequence[str]) -> List[str]:
        if len(candidates) <= self.LIMIT:
            return best_by_elimination(candidates)
        return best_by_letter_frequency(candidates, by_position=True)
