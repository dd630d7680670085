from __future__ import annotations
from typing import Dict, Type

from wordlestrat.datasets.store import WordUniverse
from wordlestrat.engine.feedback import GuessFeedback

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Strategy interface the game engine talks to ----
class BaseSolver:
    """
    A strategy plays one game at a time:

        solver.reset()                       # new game
        solver.pick_next_guess(NO_GUESS_YET) # turn one
        solver.pick_next_guess(feedback)     # every later turn

    The universe is injected at construction and never mutated.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self, universe: WordUniverse):
        self.universe = universe

    def reset(self) -> None:
        raise NotImplementedError("Override in subclass")

    def pick_next_guess(self, feedback: GuessFeedback) -> str:
        raise NotImplementedError("Override in subclass")
