from __future__ import annotations
from typing import List

from wordlestrat.datasets.store import WordUniverse
from .base import BaseSolver, REGISTRY, register

from . import guess_solver  # noqa: F401
from . import letter_freq  # noqa: F401
from . import positional_freq  # noqa: F401

from .guess_solver import GuessSolver
from .letter_freq import LetterFreqSolver
from .positional_freq import PositionalFreqSolver


def create_solver(solver_id: str, universe: WordUniverse, **kwargs) -> BaseSolver:
    """
    Factory: instantiate a registered solver by id over `universe`.
    Extra keyword arguments (e.g. opening_word) go to the constructor.
    """
    try:
        cls = REGISTRY[solver_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {solver_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(universe, **kwargs)


def get_solver_ids() -> List[str]:
    """
    Return all registered solver ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = [
    "BaseSolver", "REGISTRY", "register", "create_solver", "get_solver_ids",
    "GuessSolver", "LetterFreqSolver", "PositionalFreqSolver",
]
