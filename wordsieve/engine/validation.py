"""
Word hygiene and guess acceptance.

A word is well-formed iff it is lowercase ASCII a–z (after normalization) and
has exactly N letters. A guess is acceptable iff it is well-formed and, when a
dictionary is supplied, a member of it. The dictionary only ever gates guesses;
it never filters candidates.
"""

import re
from typing import AbstractSet, Optional

from .errors import InvalidGuessError

WORD_LENGTH = 5

_WORD_RE = re.compile(r"^[a-z]+$")


def normalize(word: str) -> str:
    """Strip surrounding whitespace and lowercase."""
    return word.strip().lower()


def is_word(word: str, N: int) -> bool:
    """True if `word` (already normalized) is exactly N letters a–z."""
    return len(word) == N and bool(_WORD_RE.match(word))


def validate_guess(word: str, allowed: Optional[AbstractSet[str]], N: int) -> bool:
    """
    Return True if `word` is a valid guess.

    Args:
      word    : proposed guess (any case, surrounding whitespace ignored)
      allowed : set of accepted words, or None to accept any well-formed word
      N       : required word length
    """
    if not isinstance(word, str):
        return False

    w = normalize(word)
    if not is_word(w, N):
        return False
    return allowed is None or w in allowed


def require_guess(word: str, allowed: Optional[AbstractSet[str]], N: int) -> str:
    """Normalized `word`, or InvalidGuessError explaining why it was refused."""
    if not isinstance(word, str):
        raise InvalidGuessError(f"guess must be a string, got {type(word).__name__}")

    w = normalize(word)
    if not is_word(w, N):
        raise InvalidGuessError(f"{word!r} is not a {N}-letter word (letters a-z only)")
    if allowed is not None and w not in allowed:
        raise InvalidGuessError(f"{w!r} is not in the dictionary")
    return w
