from __future__ import annotations
from typing import List
from .base import BaseRanker, REGISTRY, register

from . import elimination  # noqa: F401
from . import letter_freq  # noqa: F401
from . import positional_freq  # noqa: F401
from . import usage_freq  # noqa: F401
from . import random_sample  # noqa: F401
from . import advice  # noqa: F401

from .elimination import ELIMINATION_LIMIT, best_by_elimination, elimination_scores
from .letter_freq import best_by_letter_frequency
from .usage_freq import best_by_usage_frequency
from .advice import Suggestions, suggest


def create_ranker(ranker_id: str) -> BaseRanker:
    """
    Factory: instantiate a registered ranker by id.
    """
    try:
        cls = REGISTRY[ranker_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown ranker id: {ranker_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls()


def get_ranker_ids() -> List[str]:
    """
    Return all registered ranker ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = [
    "BaseRanker", "register", "create_ranker", "get_ranker_ids",
    "ELIMINATION_LIMIT", "best_by_elimination", "elimination_scores",
    "best_by_letter_frequency", "best_by_usage_frequency",
    "Suggestions", "suggest",
]
