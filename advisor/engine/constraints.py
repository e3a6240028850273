"""
Candidate filtering given game history.

Given:
  - a pool of words (the current candidate set)
  - a history of Observation(guess, feedback) pairs

Return:
  - words that are consistent with ALL feedback seen so far.

`matches` gives exactly the verdict of recomputing feedback and comparing,
but stops at the first position that disagrees.
"""

import logging
from collections import Counter
from typing import Iterable, List, NamedTuple

from .feedback import HIT, PRESENT, MISS

log = logging.getLogger(__name__)


class Observation(NamedTuple):
    """A recorded (guess, feedback) pair; a permanent filtering constraint."""
    guess: str
    feedback: str


# History is a sequence of observations, oldest first.
History = Iterable[Observation]


def matches(observation: Observation, candidate: str) -> bool:
    """
    True iff compute(observation.guess, candidate) == observation.feedback.

    The candidate's letters outside hit positions form a per-letter budget.
    Walking the guess left to right, a non-hit position must be 'y' exactly
    while its letter still has budget, and '.' once the budget is spent.
    That caps presents at (copies in candidate - copies claimed by hits),
    gives ties to the earliest position, and rejects a candidate holding
    extra copies of a letter the feedback marked as a miss.
    """
    guess, feedback = observation

    # Pass 1: hit positions must agree; everything else must differ.
    budget = Counter()
    for g, c, mark in zip(guess, candidate, feedback):
        if mark == HIT:
            if c != g:
                return False
        elif c == g:
            return False
        else:
            budget[c] += 1

    # Pass 2: spend the candidate's unclaimed letters on the guess.
    for g, mark in zip(guess, feedback):
        if mark == HIT:
            continue
        if budget[g] > 0:
            if mark != PRESENT:
                return False
            budget[g] -= 1
        elif mark != MISS:
            return False

    return True


def filter_candidates(words: Iterable[str], history: History) -> List[str]:
    """
    Keep only words that would produce exactly the recorded feedback for
    every observation in `history`.

    Args:
      words   : iterable of candidate words
      history : iterable of Observation seen so far

    Returns:
      List[str] of consistent candidates (order preserved as in `words`).
    """
    history = list(history)
    out: List[str] = [w for w in words if all(matches(obs, w) for obs in history)]
    log.debug("filter_candidates: %d observation(s) -> %d candidate(s)", len(history), len(out))
    return out
