"""
Candidate elimination from feedback.

Given:
  - a candidate list (ordered, unique words of one length)
  - a guess and its status code, or a single (position, letter, status) rule

Return:
  - a NEW list with the inconsistent words removed (order preserved)
  - the number of words eliminated

Inputs are never mutated; callers adopt the returned list as the new
candidate set. Per-position rules:

  r (ABSENT)  : keep words that do not contain the letter anywhere
  y (PRESENT) : keep words that contain the letter, but not at this position
  g (MATCH)   : keep words with the letter exactly at this position

The rules only look at one (position, letter) each, so a full code is the
intersection of its L rules and the order they run in does not matter.
"""

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from .errors import InvalidFeedbackError, LengthMismatchError
from .feedback import ABSENT, MATCH, PRESENT, parse_feedback
from .validation import WORD_LENGTH, is_word, normalize

log = logging.getLogger(__name__)

# History is a sequence of (guess, code) tuples.
History = Iterable[Tuple[str, str]]


def _rule(position: int, letter: str, status: str):
    if status == ABSENT:
        return lambda w: letter not in w
    if status == PRESENT:
        return lambda w: letter in w and w[position] != letter
    if status == MATCH:
        return lambda w: w[position] == letter
    raise InvalidFeedbackError(f"unknown status {status!r}; use r, y or g")


def eliminate_letter(position: int, letter: str, status: str,
                     candidates: Sequence[str],
                     N: Optional[int] = None) -> Tuple[List[str], int]:
    """
    Apply a single per-position rule.

    N is the word length; it defaults to the first candidate's length, or
    WORD_LENGTH for an empty list, so the position is checked either way.

    Raises:
      ValueError unless 0 <= position < N.
      LengthMismatchError for a candidate that is not N letters long.
      InvalidFeedbackError for a status outside r/y/g.
    """
    if N is None:
        N = len(candidates[0]) if candidates else WORD_LENGTH
    if not 0 <= position < N:
        raise ValueError(f"position must be in [0, {N}); got {position}")

    keep = _rule(position, letter, status)
    out: List[str] = []
    for w in candidates:
        if len(w) != N:
            raise LengthMismatchError(f"candidate {w!r} does not have {N} letters")
        if keep(w):
            out.append(w)
    return out, len(candidates) - len(out)


def is_consistent(word: str, guess: str, code: str) -> bool:
    """True if `word` survives every rule of (guess, code)."""
    for i, (letter, status) in enumerate(zip(guess, code)):
        if status == MATCH:
            if word[i] != letter:
                return False
        elif status == PRESENT:
            if word[i] == letter or letter not in word:
                return False
        elif letter in word:
            return False
    return True


def eliminate_words(guess: str, code: str,
                    candidates: Sequence[str]) -> Tuple[List[str], int]:
    """
    Apply a whole status code for `guess`.

    The code is validated against the guess length first, so a malformed
    code never silently drops or ignores a position.
    """
    code = parse_feedback(code, len(guess))

    out: List[str] = []
    for w in candidates:
        if len(w) != len(guess):
            raise LengthMismatchError(
                f"candidate {w!r} does not have the {len(guess)} letters of {guess!r}")
        if is_consistent(w, guess, code):
            out.append(w)
    return out, len(candidates) - len(out)


def filter_candidates(words: Iterable[str], history: History, N: int) -> List[str]:
    """
    Keep only words (length == N) consistent with every (guess, code) seen.

    Args:
      words   : iterable of candidate words (often the word bank)
      history : iterable of (guess, code) pairs entered so far
      N       : expected word length

    Returns:
      List[str] of consistent candidates (order preserved as in `words`).
    """
    out = build_candidates(words, N)
    for guess, code in history:
        out, _ = eliminate_words(guess, code, out)
    return out


def build_candidates(words: Iterable[str], N: int,
                     exclude: Iterable[str] = ()) -> List[str]:
    """
    Normalize a raw word sequence into a candidate list.

    Drops malformed words, anything in `exclude`, and repeats, keeping the
    first occurrence's position.
    """
    skip = {normalize(w) for w in exclude}
    seen = set()
    out: List[str] = []
    for raw in words:
        w = normalize(raw)
        if not is_word(w, N):
            log.debug("skipping malformed candidate %r", raw)
            continue
        if w in skip or w in seen:
            continue
        seen.add(w)
        out.append(w)
    return out
