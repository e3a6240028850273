# apps/cli/advise.py
"""
Interactive advisor for a five-letter word-guessing game.

Each round this script:
  1) Shows how many dictionary words are still possible and which guesses
     narrow them down the most (or, above the brute-force limit, letter
     frequency picks plus a random sample).
  2) Asks for the guess you played and the colors you got back,
     e.g. 'y..gg' (g = green/hit, y = yellow/present, anything else = miss).
  3) Filters the candidate set and stops once one word, or none, is left.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Mapping, Optional, Sequence, Set

from advisor.datasets import read_words, read_frequencies
from advisor.engine import (
    ALL_HIT, MalformedWordError, Observation, Outcome, Session,
    normalize_word, parse_feedback,
)
from advisor.rankers import ELIMINATION_LIMIT, Suggestions, suggest

DISPLAY_LIMIT = 48  # words shown per list
COLUMNS = 12        # words per printed row

InputFn = Callable[[str], str]


def _print_columns(words: Sequence[str], limit: int = DISPLAY_LIMIT) -> None:
    shown = list(words[:limit])
    for i in range(0, len(shown), COLUMNS):
        print("\t".join(shown[i:i + COLUMNS]))


def _output_status(s: Suggestions, limit: int) -> None:
    print(f"\nThere are {s.remaining} possible words left...")
    if s.by_elimination is None:
        print("That's too many to brute force good guesses... here are some random ones:")
        _print_columns(s.sample, limit)
    else:
        print("Guesses that narrow it down the most are:")
        _print_columns(s.by_elimination, limit)

    print("\nMost common letters:")
    _print_columns(s.by_letter, limit)
    print("\nMost common letters by position:")
    _print_columns(s.by_position, limit)
    print("\nMost common letters, no repeated letters:")
    _print_columns(s.by_letter_distinct, limit)
    if s.by_usage is not None:
        print("\nMost frequently used words:")
        _print_columns(s.by_usage, limit)
    print("\n... go guess one!\n")


def _prompt(message: str, input_fn: InputFn) -> Optional[str]:
    """One line of input, or None at end of input."""
    print(message)
    try:
        return input_fn("> ").strip()
    except EOFError:
        return None


class _EndOfInput(Exception):
    pass


def _read_observation(allowed: Set[str], input_fn: InputFn) -> Optional[Observation]:
    """
    Ask for one (guess, feedback) pair. Returns None when the user typed
    something unusable (the caller re-prompts); raises _EndOfInput at EOF.
    """
    raw_guess = _prompt("What was your guess?", input_fn)
    if raw_guess is None:
        raise _EndOfInput
    try:
        guess = normalize_word(raw_guess)
    except MalformedWordError:
        print("That's not a five-letter word!")
        return None
    if guess not in allowed:
        print("That's not in the word list!")
        return None

    raw_feedback = _prompt("What was the result (format 'y..gg')?", input_fn)
    if raw_feedback is None:
        raise _EndOfInput
    try:
        feedback = parse_feedback(raw_feedback)
    except MalformedWordError:
        print("That doesn't match the format expected! 5 characters, g or y or anything else.")
        return None

    return Observation(guess, feedback)


def play(session: Session, *,
         frequencies: Mapping[str, int] | None = None,
         limit: int = ELIMINATION_LIMIT,
         display_limit: int = DISPLAY_LIMIT,
         seed: int | None = None,
         input_fn: InputFn = input) -> Outcome:
    """
    Run the advise/observe loop until the session is solved or empty, or
    input runs out. Returns the final outcome.
    """
    allowed = set(session.candidates)
    if not allowed:
        print("The word list is empty.")
        return Outcome.EMPTY

    while True:
        _output_status(suggest(session.candidates, frequencies=frequencies,
                               limit=limit, seed=seed), display_limit)
        try:
            obs = _read_observation(allowed, input_fn)
        except _EndOfInput:
            return session.outcome
        if obs is None:
            continue

        if obs.feedback == ALL_HIT:
            print("You won!")
        outcome = session.observe(obs)
        if outcome is Outcome.EMPTY:
            print("No words remaining. You... lose?")
            return outcome
        if outcome is Outcome.SOLVED:
            print(f"You win! The word is {session.answer}")
            return outcome


def main(argv: Sequence[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="wordle-advisor: suggest guesses from feedback")
    ap.add_argument("--words", default="words.txt",
                    help="dictionary, one five-letter word per line")
    ap.add_argument("--frequencies",
                    help="optional usage-frequency table ('word count' per line)")
    ap.add_argument("--limit", type=int, default=ELIMINATION_LIMIT,
                    help="largest candidate set to brute force (default: %(default)s)")
    ap.add_argument("--show", type=int, default=DISPLAY_LIMIT,
                    help="words shown per suggestion list (default: %(default)s)")
    ap.add_argument("--seed", type=int, help="seed for the random sample")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        words = read_words(args.words)
        frequencies = read_frequencies(args.frequencies) if args.frequencies else None
    except FileNotFoundError as e:
        print(f"Word list not found: {e}", file=sys.stderr)
        return 1

    outcome = play(Session(words), frequencies=frequencies, limit=args.limit,
                   display_limit=args.show, seed=args.seed)
    return 0 if outcome is not Outcome.EMPTY else 2


if __name__ == "__main__":
    sys.exit(main())
