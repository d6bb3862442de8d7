from __future__ import annotations
from typing import List
from .base import BaseSolver, REGISTRY, register

from . import avg_eliminated  # noqa: F401
from . import random_consistent  # noqa: F401
from .avg_eliminated import average_eliminated, rank_guesses, best_guess, Ranking


def create_solver(solver_id: str, **options) -> BaseSolver:
    """
    Factory: instantiate a registered solver by id, passing `options` through.
    """
    try:
        cls = REGISTRY[solver_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {solver_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**options)


def get_solver_ids() -> List[str]:
    """
    Return all registered solver ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = [
    "BaseSolver", "REGISTRY", "register", "create_solver", "get_solver_ids",
    "average_eliminated", "rank_guesses", "best_guess", "Ranking",
]
