"""
Average Words Eliminated.

Idea:
  For a guess g over the CURRENT candidates C (n words), pretend each w in C
  is the hidden solution in turn. Score g against w, filter C with that
  code, and count how many words the filter removes. The guess's score is
  the mean of those counts, rounded half up:

      avg(g) = round( sum_{w in C} |C| - |filter(C, g, feedback(g, w))|  /  n )

  The suggested next guess is the candidate with the highest avg. Ties go to
  the candidate that comes first in C.

Every hypothetical starts from the same, untouched candidate list: filters
return new lists, so nothing has to be restored between solutions.

Cost is O(n^2 * L) per guess and O(n^3 * L) for a full ranking, so:
  - within one guess, words that share a code share one filter pass
  - the "numpy" backend runs each filter pass as array masks
  - rank_guesses() accepts a time budget / stop callback and then returns
    the best guess seen so far, flagged incomplete
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

import numpy as np

from .base import BaseSolver, register
from wordsieve.engine import feedback, eliminate_words
from wordsieve.engine.errors import EmptyCandidatesError, InvalidGuessError, LengthMismatchError
from wordsieve.engine.matrix import WordMatrix
from wordsieve.engine.validation import is_word

log = logging.getLogger(__name__)

DEFAULT_OPENING = "raise"

BACKENDS = ("auto", "python", "numpy")

# Pool size at which "auto" switches to numpy.
NUMPY_MIN_POOL = 64


@dataclass
class Ranking:
    guess: str
    score: int       # rounded average eliminated
    evaluated: int   # guesses scored before returning
    total: int       # candidates available as guesses
    complete: bool   # False if the stop hook cut the ranking short


def _pool(candidates: Sequence[str]) -> List[str]:
    """Candidates as a list; both backends accept exactly lowercase a–z words of one length."""
    words = list(candidates)
    if not words:
        raise EmptyCandidatesError("cannot evaluate guesses over an empty candidate set")

    N = len(words[0])
    for w in words:
        if len(w) != N:
            raise LengthMismatchError(f"candidate {w!r} does not have {N} letters")
        if not is_word(w, N):
            raise InvalidGuessError(f"candidate {w!r} is not lowercase a-z")
    return words


def _backend_for(backend: str, n: int) -> str:
    if backend not in BACKENDS:
        raise ValueError(f"Unknown backend: {backend}. Available: {list(BACKENDS)}")
    if backend == "auto":
        return "numpy" if n >= NUMPY_MIN_POOL else "python"
    return backend


def _round_mean(total: int, n: int) -> int:
    """total / n rounded half away from zero (both are non-negative)."""
    return (2 * total + n) // (2 * n)


def _sum_eliminated_python(guess: str, words: List[str]) -> int:
    by_code: Dict[str, int] = {}
    total = 0
    for solution in words:
        code = feedback(guess, solution)
        if code not in by_code:
            _, by_code[code] = eliminate_words(guess, code, words)
        total += by_code[code]
    return total


def _sum_eliminated_numpy(guess: str, matrix: WordMatrix) -> int:
    n = len(matrix)
    codes, counts = np.unique(matrix.codes_against(guess), return_counts=True)
    total = 0
    for packed, count in zip(codes, counts):
        kept = int(matrix.keep_mask(guess, matrix.unpack(packed)).sum())
        total += int(count) * (n - kept)
    return total


def average_eliminated(guess: str, candidates: Sequence[str], backend: str = "auto") -> int:
    """
    Mean number of candidates `guess` would eliminate, over every candidate
    taken as the hidden solution. `candidates` is left as it was.
    """
    words = _pool(candidates)
    if len(guess) != len(words[0]):
        raise LengthMismatchError(
            f"guess {guess!r} does not have the {len(words[0])} letters of the candidates")
    if not is_word(guess, len(guess)):
        raise InvalidGuessError(f"guess {guess!r} is not lowercase a-z")

    if _backend_for(backend, len(words)) == "numpy":
        total = _sum_eliminated_numpy(guess, WordMatrix(words))
    else:
        total = _sum_eliminated_python(guess, words)
    return _round_mean(total, len(words))


def rank_guesses(
        candidates: Sequence[str],
        *,
        backend: str = "auto",
        time_budget_s: Optional[float] = None,
        should_stop: Optional[Callable[[], bool]] = None,
) -> Ranking:
    """
    Score every candidate as a guess and keep the strict maximum.

    Args:
      candidates    : non-empty candidate list; iteration order decides ties
      backend       : "python", "numpy" or "auto"
      time_budget_s : stop starting new guesses after this many seconds
      should_stop   : callable polled before each guess; True stops early

    The first guess is always scored, so an early stop still returns a real
    candidate with a real score.
    """
    words = _pool(candidates)
    n = len(words)
    mode = _backend_for(backend, n)
    matrix = WordMatrix(words) if mode == "numpy" else None
    deadline = None if time_budget_s is None else time.monotonic() + time_budget_s

    best, best_avg = words[0], -1
    evaluated = 0
    for guess in words:
        if evaluated and (
                (deadline is not None and time.monotonic() >= deadline)
                or (should_stop is not None and should_stop())):
            log.info("ranking stopped after %d/%d guesses; best so far %s (avg %d)",
                     evaluated, n, best, best_avg)
            return Ranking(best, best_avg, evaluated, n, complete=False)

        if matrix is not None:
            avg = _round_mean(_sum_eliminated_numpy(guess, matrix), n)
        else:
            avg = _round_mean(_sum_eliminated_python(guess, words), n)
        evaluated += 1

        if avg > best_avg:
            best, best_avg = guess, avg

    log.debug("ranked %d guesses (%s backend); best %s (avg %d)", n, mode, best, best_avg)
    return Ranking(best, best_avg, evaluated, n, complete=True)


def best_guess(candidates: Sequence[str], **kwargs) -> str:
    """The candidate that eliminates the most words on average."""
    return rank_guesses(candidates, **kwargs).guess


@register
class AvgEliminatedSolver(BaseSolver):
    id = "avg_eliminated"
    name = "Average Words Eliminated"
    version = "1.0.0"

    def __init__(self, *, opening: str | None = DEFAULT_OPENING, backend: str = "auto",
                 time_budget_s: float | None = None):
        super().__init__()
        self.opening = opening
        self.backend = backend
        self.time_budget_s = time_budget_s

    def next_guess(self, state: dict) -> str:
        """Fixed opening on turn 1 (the full pool is too big to rank), then the ranker."""
        candidates: List[str] = state["candidates"]

        if state.get("turn") == 1 and self.opening and len(self.opening) == self.N:
            return self.opening

        if not candidates:
            return self.fallback_guess(state)

        return rank_guesses(candidates, backend=self.backend,
                            time_budget_s=self.time_budget_s).guess
