from .feedback import compute, WORD_LENGTH, HIT, PRESENT, MISS, ALL_HIT, MalformedWordError
from .constraints import Observation, matches, filter_candidates
from .validation import normalize_word, parse_feedback, parse_observation, validate_guess
from .session import Session, Outcome

__all__ = [
    "compute", "WORD_LENGTH", "HIT", "PRESENT", "MISS", "ALL_HIT", "MalformedWordError",
    "Observation", "matches", "filter_candidates",
    "normalize_word", "parse_feedback", "parse_observation", "validate_guess",
    "Session", "Outcome",
]
