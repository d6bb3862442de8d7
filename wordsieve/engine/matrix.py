"""
Vectorized view of a candidate list.

WordMatrix holds two arrays for n words of length L:
  - letters  : (n, L) int16, letter index 0..25 at each position
  - contains : (n, 26) bool, does word i contain letter j anywhere

With them, both halves of the elimination loop become array operations:
  - codes_against(guess) : status code of `guess` vs every word, packed
                           base-3 into one int per word
  - keep_mask(guess, code): which words survive (guess, code)

Semantics are identical to engine.feedback / engine.constraints; the tests
compare both paths on the same inputs.
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from .errors import InvalidGuessError, LengthMismatchError
from .feedback import ABSENT, MATCH, PRESENT

ALPHABET = 26

# Packed status digits. Kept in sync with _SYMBOL below.
_ABSENT, _PRESENT, _MATCH = 0, 1, 2
_SYMBOL = {_ABSENT: ABSENT, _PRESENT: PRESENT, _MATCH: MATCH}
_DIGIT = {v: k for k, v in _SYMBOL.items()}


def _indices(word: str) -> np.ndarray:
    idx = np.array([ord(ch) - ord("a") for ch in word], dtype=np.int16)
    if ((idx < 0) | (idx >= ALPHABET)).any():
        raise InvalidGuessError(f"{word!r} has letters outside a-z")
    return idx


class WordMatrix:
    def __init__(self, words: Sequence[str]):
        self.words: List[str] = list(words)
        n = len(self.words)
        self.N = len(self.words[0]) if n else 0

        for w in self.words:
            if len(w) != self.N:
                raise LengthMismatchError(f"{w!r} does not have {self.N} letters")

        if n:
            self.letters = np.stack([_indices(w) for w in self.words])
        else:
            self.letters = np.zeros((0, 0), dtype=np.int16)

        self.contains = np.zeros((n, ALPHABET), dtype=bool)
        rows = np.repeat(np.arange(n), self.N)
        self.contains[rows, self.letters.ravel()] = True

        self._weights = 3 ** np.arange(self.N, dtype=np.int64)

    def __len__(self) -> int:
        return len(self.words)

    def _check(self, guess: str) -> np.ndarray:
        if len(guess) != self.N:
            raise LengthMismatchError(
                f"guess {guess!r} does not have the {self.N} letters of the candidates")
        return _indices(guess)

    def codes_against(self, guess: str) -> np.ndarray:
        """Packed code of `guess` against each word taken as the solution."""
        g = self._check(guess)
        match = self.letters == g  # (n, L)
        present = self.contains[:, g]  # (n, L)
        digits = np.where(match, _MATCH, np.where(present, _PRESENT, _ABSENT))
        return digits.astype(np.int64) @ self._weights

    def keep_mask(self, guess: str, code: str) -> np.ndarray:
        """Boolean mask of the words consistent with (guess, code)."""
        g = self._check(guess)
        mask = np.ones(len(self.words), dtype=bool)
        for i, status in enumerate(code):
            at_i = self.letters[:, i] == g[i]
            if status == MATCH:
                mask &= at_i
            elif status == PRESENT:
                mask &= self.contains[:, g[i]] & ~at_i
            else:
                mask &= ~self.contains[:, g[i]]
        return mask

    def unpack(self, packed: int) -> str:
        """Packed base-3 code back to its r/y/g string."""
        out = []
        for _ in range(self.N):
            packed, d = divmod(int(packed), 3)
            out.append(_SYMBOL[d])
        return "".join(out)

    def pack(self, code: str) -> int:
        return int(sum(_DIGIT[ch] * int(w) for ch, w in zip(code, self._weights)))
