"""
Elimination ranking (brute force over the candidate set).

Idea:
  For each guess g in the CURRENT candidates and each possible secret s in
  the same set, the feedback compute(g, s) would leave exactly the
  candidates in s's feedback bucket. Summing that over every s:

      score(g) = sum_s |{c : matches((g, compute(g, s)), c)}|
               = sum_buckets size**2

  Lower is better: the guess splits the set into smaller buckets on
  average. Not entropy and not minimax, just the expected bucket size
  scaled by |candidates|.

Cost is O(|candidates|^2 * 5); callers cap it with ELIMINATION_LIMIT
(see rankers.advice).

The G x S feedback matrix is encoded as little-endian base-3 codes
(hit=2, present=1, miss=0) so buckets can be counted with np.bincount.
"""

from __future__ import annotations

import itertools
import logging
from typing import Dict, List, Sequence

import numpy as np

from advisor.engine import compute, WORD_LENGTH, HIT, PRESENT, MISS
from .base import BaseRanker, register

log = logging.getLogger(__name__)

# Above this many candidates the O(n^2) scoring gets slow in practice.
ELIMINATION_LIMIT = 500

NUM_CODES = 3 ** WORD_LENGTH  # 243 distinct feedback patterns

_TRITS = {MISS: 0, PRESENT: 1, HIT: 2}


def _build_codes() -> Dict[str, int]:
    codes: Dict[str, int] = {}
    for marks in itertools.product((MISS, PRESENT, HIT), repeat=WORD_LENGTH):
        code, power = 0, 1
        for m in marks:
            code += _TRITS[m] * power
            power *= 3
        codes["".join(marks)] = code
    return codes


# feedback string -> 0..242
PATTERN_CODES = _build_codes()


def feedback_code(guess: str, secret: str) -> int:
    return PATTERN_CODES[compute(guess, secret)]


def feedback_matrix(candidates: Sequence[str]) -> np.ndarray:
    """uint8 [n x n] matrix: row = guess, column = secret."""
    n = len(candidates)
    pattern = np.empty((n, n), dtype=np.uint8)
    for gi, g in enumerate(candidates):
        for si, s in enumerate(candidates):
            pattern[gi, si] = feedback_code(g, s)
    return pattern


def elimination_scores(candidates: Sequence[str]) -> np.ndarray:
    """Score of every candidate as a guess (sum of squared bucket sizes)."""
    n = len(candidates)
    if n == 0:
        return np.zeros(0, dtype=np.int64)

    pattern = feedback_matrix(candidates).astype(np.int64)
    # Offset each row into its own block of NUM_CODES bins, count all rows at once.
    offsets = (np.arange(n, dtype=np.int64) * NUM_CODES)[:, None]
    counts = np.bincount((pattern + offsets).ravel(), minlength=n * NUM_CODES)
    counts = counts.reshape(n, NUM_CODES)
    return (counts * counts).sum(axis=1)


def best_by_elimination(candidates: Sequence[str]) -> List[str]:
    """
    Candidates ordered by ascending elimination score (best first).
    Ties keep input order.
    """
    if not candidates:
        return []
    scores = elimination_scores(candidates)
    order = np.argsort(scores, kind="stable")
    log.debug("best_by_elimination: %d candidates, best score %d",
              len(candidates), int(scores[order[0]]))
    return [candidates[i] for i in order]


@register
class EliminationRanker(BaseRanker):
    id = "elimination"
    name = "Elimination (sum of squared bucket sizes)"
    version = "1.0.0"

    def rank(self, candidates: Sequence[str]) -> List[str]:
        return best_by_elimination(candidates)
