"""
Game session: the one place where the candidate set changes.

A Session starts from the full dictionary and shrinks its candidate list
each time an observation is recorded. Rankers and the filter only ever see
snapshots (`session.candidates` is replaced, never edited in place).
"""

from __future__ import annotations

import enum
import logging
from typing import Iterable, List, Optional

from .constraints import Observation, filter_candidates

log = logging.getLogger(__name__)


class Outcome(enum.Enum):
    OPEN = "open"      # more than one candidate left
    SOLVED = "solved"  # exactly one candidate left
    EMPTY = "empty"    # nothing left: the word is not in the dictionary,
                       # or some feedback was mis-reported


def classify(candidates: List[str]) -> Outcome:
    if not candidates:
        return Outcome.EMPTY
    if len(candidates) == 1:
        return Outcome.SOLVED
    return Outcome.OPEN


class Session:
    def __init__(self, dictionary: Iterable[str]):
        self.candidates: List[str] = list(dictionary)
        self.history: List[Observation] = []

    def observe(self, observation: Observation) -> Outcome:
        """
        Record `observation` and narrow the candidate set with it.
        """
        before = len(self.candidates)
        self.history.append(observation)
        self.candidates = filter_candidates(self.candidates, [observation])
        log.info("%s %s: %d -> %d candidates",
                 observation.guess, observation.feedback, before, len(self.candidates))
        return self.outcome

    @property
    def outcome(self) -> Outcome:
        return classify(self.candidates)

    @property
    def answer(self) -> Optional[str]:
        """The remaining word once the session is solved, else None."""
        return self.candidates[0] if self.outcome is Outcome.SOLVED else None

    def __len__(self) -> int:
        return len(self.candidates)
