"""
Per-letter feedback for a single (candidate, solution) pair.

Conventions:
  - 'g' : green  = MATCH,   same letter at the same position
  - 'y' : yellow = PRESENT, letter occurs somewhere else in the solution
  - 'r' : red    = ABSENT,  letter does not occur in the solution at all

This rule is deliberately NOT multiplicity-aware: every occurrence of a
letter that the solution contains is marked 'y' (or 'g'), even when the guess
repeats the letter more often than the solution does.

    feedback("speed", "abide") -> "rryyy"   (the game itself shows "rryry")

The candidate filter is written against this rule, so the pair stays
self-consistent: filtering with feedback(g, w) never drops w.
"""

from typing import Literal

from .errors import InvalidFeedbackError, LengthMismatchError

StatusChar = Literal["g", "y", "r"]

MATCH: StatusChar = "g"
PRESENT: StatusChar = "y"
ABSENT: StatusChar = "r"

STATUS_SYMBOLS = frozenset((MATCH, PRESENT, ABSENT))


def feedback(candidate: str, solution: str) -> str:
    """
    Compute the status code for `candidate` as if `solution` were the answer.

    Raises:
      LengthMismatchError if the words differ in length.

    Examples:
      feedback("raise", "lapse") -> "rgrgg"
      feedback("radio", "audio") -> "ryggg"
    """
    if len(candidate) != len(solution):
        raise LengthMismatchError(
            f"cannot compare {candidate!r} with {solution!r}: lengths differ")

    out = []
    for c, s in zip(candidate, solution):
        if c == s:
            out.append(MATCH)
        elif c in solution:
            out.append(PRESENT)
        else:
            out.append(ABSENT)
    return "".join(out)


def parse_feedback(code: str, N: int) -> str:
    """
    Normalize a user-entered code ("RGYRY", " rgyry ") and validate it.

    Every position must carry one of r/y/g; nothing is skipped or padded.
    """
    if not isinstance(code, str):
        raise InvalidFeedbackError(f"feedback must be a string, got {type(code).__name__}")

    c = code.strip().lower()
    if len(c) != N:
        raise InvalidFeedbackError(
            f"feedback {code!r} has {len(c)} symbols; expected {N}")

    bad = sorted({ch for ch in c if ch not in STATUS_SYMBOLS})
    if bad:
        raise InvalidFeedbackError(
            f"feedback {code!r} has unknown symbol(s) {bad}; use r, y or g")
    return c


def is_solved(code: str) -> bool:
    return bool(code) and all(ch == MATCH for ch in code)
