from __future__ import annotations
import random
from typing import Dict, List, Mapping, Sequence, Type

# ---- Global ranker registry ----
REGISTRY: Dict[str, Type["BaseRanker"]] = {}


def register(cls: Type["BaseRanker"]) -> Type["BaseRanker"]:
    """
    Decorator: @register on a ranker class adds it to REGISTRY by its `id`.
    """
    rid = getattr(cls, "id", None)
    if not rid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if rid in REGISTRY:
        raise ValueError(f"Duplicate ranker id: {rid}")
    REGISTRY[rid] = cls
    return cls


# ---- Base class that rankers inherit ----
class BaseRanker:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.frequencies: Mapping[str, int] = {}
        self.rng = random.Random()

    def reset(self, *, frequencies: Mapping[str, int] | None = None,
              seed: int | None = None) -> None:
        self.frequencies = dict(frequencies or {})
        if seed is not None:
            self.rng.seed(seed)

    def rank(self, candidates: Sequence[str]) -> List[str]:
        """Return candidates ordered best guess first. Must not mutate the input."""
        raise NotImplementedError("Override in subclass")
