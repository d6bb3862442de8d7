"""
The assistant that owns one game's candidate set.

Each round the player reports the guess they typed and the colours the game
showed. The assistant filters its candidates with that feedback, and while
more than one word is left, ranks what remains for the next suggestion.

Reaching zero candidates is not an error: it means the reported feedback
contradicts the word bank, and the caller tells the player so.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import AbstractSet, Iterable, List, Optional, Tuple

from wordsieve.engine import build_candidates, eliminate_words, parse_feedback, require_guess
from wordsieve.engine.feedback import is_solved
from wordsieve.engine.validation import WORD_LENGTH
from wordsieve.solvers.avg_eliminated import DEFAULT_OPENING, rank_guesses

log = logging.getLogger(__name__)


@dataclass
class RoundReport:
    guess: str
    code: str
    eliminated: int
    remaining: int
    suggestion: Optional[str] = None
    ranking_complete: bool = True

    @property
    def solved(self) -> bool:
        return self.remaining == 1

    @property
    def contradiction(self) -> bool:
        return self.remaining == 0


@dataclass
class Assistant:
    candidates: List[str]
    vocabulary: Optional[AbstractSet[str]] = None
    N: int = WORD_LENGTH
    opening: Optional[str] = DEFAULT_OPENING
    backend: str = "auto"
    time_budget_s: Optional[float] = None
    history: List[Tuple[str, str]] = field(default_factory=list)

    def __post_init__(self):
        # Same cleaning for every backend: lowercase a-z, length N, no repeats.
        self.candidates = build_candidates(self.candidates, self.N)

    @classmethod
    def from_words(cls, words: Iterable[str], N: int = WORD_LENGTH,
                   exclude: Iterable[str] = (), **kwargs) -> "Assistant":
        return cls(candidates=build_candidates(words, N, exclude), N=N, **kwargs)

    @property
    def guesses(self) -> int:
        return len(self.history)

    @property
    def finished(self) -> bool:
        return len(self.candidates) <= 1

    @property
    def solution(self) -> Optional[str]:
        return self.candidates[0] if len(self.candidates) == 1 else None

    @property
    def solved_on_screen(self) -> bool:
        """True once the player has actually typed the answer."""
        return bool(self.history) and is_solved(self.history[-1][1])

    def suggest(self) -> Optional[str]:
        """
        Next guess to type: the opening word before any feedback, otherwise
        the ranked best candidate. None once nothing is left to choose.
        """
        if not self.history and self.opening and len(self.opening) == self.N:
            return self.opening
        if not self.candidates:
            return None
        if len(self.candidates) == 1:
            return self.candidates[0]
        return rank_guesses(self.candidates, backend=self.backend,
                            time_budget_s=self.time_budget_s).guess

    def apply(self, guess: str, code: str) -> RoundReport:
        """
        Filter the candidates with one round of feedback.

        Any error (bad guess, bad code, or a failure while ranking) leaves
        the candidates and history as they were, so the caller can simply
        ask again.
        """
        g = require_guess(guess, self.vocabulary, self.N)
        c = parse_feedback(code, self.N)

        remaining, eliminated = eliminate_words(g, c, self.candidates)
        report = RoundReport(guess=g, code=c, eliminated=eliminated,
                             remaining=len(remaining))
        if len(remaining) > 1:
            ranking = rank_guesses(remaining, backend=self.backend,
                                   time_budget_s=self.time_budget_s)
            report.suggestion = ranking.guess
            report.ranking_complete = ranking.complete

        self.candidates = remaining
        self.history.append((g, c))
        log.debug("round %d: %s/%s eliminated %d, %d left",
                  self.guesses, g, c, eliminated, len(remaining))
        return report
