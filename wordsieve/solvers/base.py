from __future__ import annotations
import random
from typing import Dict, List, Type

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid or sid == BaseSolver.id:
        raise ValueError(f"{cls.__name__} must define its own non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    """
    Picks the next guess for a simulated game.

    The harness calls reset() once per game (word length, per-game seed),
    then next_guess(state) every turn with:

        turn       : 1-based turn number
        history    : list of (guess, code) played so far
        candidates : answers still consistent with the history, in bank order
        allowed    : accepted guesses of length N
        N          : word length

    Solvers keep no per-game state beyond N and their RNG; everything they
    need each turn is in `state`.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.N: int = 5
        self.rng = random.Random()

    def reset(self, *, N: int, seed: int | None = None) -> None:
        self.N = int(N)
        if seed is not None:
            self.rng.seed(seed)

    def fallback_guess(self, state: dict) -> str:
        """Guess for a turn with no candidates (the answer was never in the pool)."""
        allowed: List[str] = state.get("allowed") or []
        return allowed[0] if allowed else "a" * self.N

    def next_guess(self, state: dict) -> str:
        raise NotImplementedError("Override in subclass")
