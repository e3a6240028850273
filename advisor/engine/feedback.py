"""
Feedback (colored marks) for a single (guess, secret) pair.

Conventions:
  - 'g' : hit     = correct letter in the correct position
  - 'y' : present = correct letter in the wrong position
  - '.' : miss    = letter not present (or present fewer times than guessed)

This implementation is:
  - duplicate-safe (respects true letter multiplicities in the secret)
  - deterministic (same inputs -> same outputs)

Algorithm (two-pass):
  1) First pass marks all hits and counts the secret's letters that were
     not claimed by a hit.
  2) Second pass walks the guess left to right and marks a letter present
     only while the secret still has an unclaimed copy of it.
"""

from collections import Counter

# Every word handled by the engine has exactly this many letters.
WORD_LENGTH = 5

HIT = "g"
PRESENT = "y"
MISS = "."

ALL_HIT = HIT * WORD_LENGTH


class MalformedWordError(ValueError):
    """A word or feedback string that is not exactly WORD_LENGTH characters
    (or uses letters outside a-z)."""


def compute(guess: str, secret: str) -> str:
    """
    Compute the feedback pattern for `guess` against `secret`.

    Preconditions:
      - both words are WORD_LENGTH lowercase letters (see engine.validation)

    Returns:
      - string of length WORD_LENGTH composed only of 'g', 'y', '.'

    Examples:
      compute("llama", "knoll") -> "yy..."
      compute("weave", "evade") -> ".ygyg"
    """
    if len(guess) != WORD_LENGTH or len(secret) != WORD_LENGTH:
        raise MalformedWordError(
            f"guess and secret must both have {WORD_LENGTH} letters: {guess!r}, {secret!r}")

    pattern = [MISS] * WORD_LENGTH

    # Pass 1: mark hits and collect the secret's unclaimed letters.
    remaining = Counter()
    for i, (g, s) in enumerate(zip(guess, secret)):
        if g == s:
            pattern[i] = HIT
        else:
            remaining[s] += 1

    # Pass 2: earliest non-hit occurrences claim the remaining copies first.
    for i, g in enumerate(guess):
        if pattern[i] == HIT:
            continue
        if remaining[g] > 0:
            pattern[i] = PRESENT
            remaining[g] -= 1

    return "".join(pattern)
