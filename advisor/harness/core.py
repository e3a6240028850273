"""
Simulation harness primitives.

- run_case:  play a single game (one hidden answer) with a given ranker,
             always guessing the ranker's top suggestion.
- run_batch: play many games in sequence (optionally a sample prefix).

Feedback comes from engine.compute against the known answer, so these runs
exercise the same filter/rank loop an interactive session does. They are
UI-agnostic and reused by the simulate CLI and the tests.
"""

from __future__ import annotations
import logging
import time
from typing import Dict, List, Iterable, Mapping

from advisor.engine import compute, ALL_HIT, Observation, Session, Outcome

log = logging.getLogger(__name__)

# Standard game turn budget.
MAX_TURNS = 6


def _assert_turns(max_turns: int) -> None:
    if max_turns < 1:
        raise ValueError(f"max_turns must be at least 1; got {max_turns}")


def run_case(
        ranker,
        answer: str,
        *,
        dictionary: Iterable[str],
        frequencies: Mapping[str, int] | None = None,
        max_turns: int = MAX_TURNS,
        seed: int | None = None,
) -> Dict:
    """
    Execute one game until the ranker's guess is the answer, the candidate
    set runs dry, or the turn budget is exhausted.

    Args:
        ranker:      an object implementing BaseRanker with rank(candidates)
        answer:      the hidden word for this case
        dictionary:  the starting candidate set
        frequencies: optional usage-frequency table for the ranker
        max_turns:   turn budget
        seed:        RNG seed to make ranker tie-breaks reproducible

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, feedback)]), answer (str)
    """
    _assert_turns(max_turns)
    ranker.reset(frequencies=frequencies, seed=seed)

    session = Session(dictionary)
    success = False

    t0 = time.perf_counter()
    for _turn in range(1, max_turns + 1):
        ranked = ranker.rank(session.candidates)
        if not ranked:
            # The answer was never in the dictionary.
            log.warning("no candidates left for answer %r", answer)
            break

        guess = ranked[0]
        fb = compute(guess, answer)
        outcome = session.observe(Observation(guess, fb))

        if fb == ALL_HIT:
            success = True
            break
        if outcome is Outcome.EMPTY:
            break

    dt = (time.perf_counter() - t0) * 1000.0
    return {
        "success": success,
        "guesses": len(session.history),
        "time_ms": dt,
        "history": [tuple(obs) for obs in session.history],
        "answer": answer,
    }


def run_batch(
        ranker,
        answers: List[str],
        *,
        dictionary: List[str],
        frequencies: Mapping[str, int] | None = None,
        max_turns: int = MAX_TURNS,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    answers are used to speed up quick experiments.

    Each case's seed is derived from the base seed to make runs reproducible
    but not identical across cases (seed + index).
    """
    _assert_turns(max_turns)

    pool = list(answers)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, ans in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        r = run_case(
            ranker, ans, dictionary=dictionary, frequencies=frequencies,
            max_turns=max_turns, seed=case_seed,
        )
        r["ranker_id"] = ranker.id
        out.append(r)
    return out
