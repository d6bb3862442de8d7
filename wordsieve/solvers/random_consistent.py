"""
Random Consistent baseline.

Picks a seeded-random word from the CURRENT candidates. It exists to give
simulation runs something to compare avg_eliminated against: any ranking
worth its cost should need fewer guesses than this.
"""

from __future__ import annotations

from typing import List
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        if not candidates:
            return self.fallback_guess(state)
        return candidates[self.rng.randrange(len(candidates))]
