"""
Boundary validation for user-supplied words and feedback.

The engine assumes well-formed input; this module is where raw strings
typed at a terminal (or read from a file) become Words and Feedback:
  - a word is exactly WORD_LENGTH letters a-z (case-insensitive, stored lowercase)
  - feedback is exactly WORD_LENGTH characters; 'g'/'G' is a hit,
    'y'/'Y' is present, anything else is a miss
"""

from typing import Iterable, Set

from .constraints import Observation
from .feedback import WORD_LENGTH, HIT, PRESENT, MISS, MalformedWordError


def is_word(word: str) -> bool:
    """True if `word` is exactly WORD_LENGTH ASCII letters."""
    return len(word) == WORD_LENGTH and word.isascii() and word.isalpha()


def normalize_word(raw: str) -> str:
    """
    Strip and lowercase `raw`; raise MalformedWordError unless the result
    is a WORD_LENGTH-letter word.
    """
    w = raw.strip().lower()
    if not is_word(w):
        raise MalformedWordError(f"expected {WORD_LENGTH} letters a-z, got {raw!r}")
    return w


def parse_feedback(raw: str) -> str:
    """
    Map a typed feedback string such as 'y..gG' onto canonical marks.

    Raises:
      MalformedWordError if `raw` (stripped) is not WORD_LENGTH characters.
    """
    text = raw.strip()
    if len(text) != WORD_LENGTH:
        raise MalformedWordError(
            f"feedback must be {WORD_LENGTH} characters (g, y or anything else), got {raw!r}")
    marks = []
    for ch in text.lower():
        if ch == HIT:
            marks.append(HIT)
        elif ch == PRESENT:
            marks.append(PRESENT)
        else:
            marks.append(MISS)
    return "".join(marks)


def parse_observation(guess: str, feedback: str) -> Observation:
    """Validate both halves of a raw (guess, feedback) pair."""
    return Observation(normalize_word(guess), parse_feedback(feedback))


def validate_guess(word: str, allowed: Iterable[str]) -> bool:
    """
    Return True if `word` is a well-formed word that appears in `allowed`.

    Notes:
      - `allowed` may be a large list; pass a set when calling this in a loop.
    """
    if not isinstance(word, str):
        return False

    w = word.strip().lower()
    if not is_word(w):
        return False

    allowed_set: Set[str] = allowed if isinstance(allowed, (set, frozenset)) else set(allowed)
    return w in allowed_set
