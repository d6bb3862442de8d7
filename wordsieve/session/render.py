"""Text the console shows the player."""

from typing import Sequence

MAX_SHOWN = 10

RULE = "-" * 44

STATUS_LEGEND = "\n".join([
    "Status codes ~",
    "\tNot in word - r",
    "\tElsewhere   - y",
    "\tCorrect     - g",
])

CELEBRATION_BANNER = r"""
      *        .        *        .        *
   .     \o/     .    SOLVED!    .     \o/     .
      *   |   *        .        *   |   *
         / \      .    *    .      / \
   ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""


def format_possibilities(words: Sequence[str], max_shown: int = MAX_SHOWN) -> str:
    """Report for the remaining candidates: a short listing, the solution, or a warning."""
    n = len(words)
    if n == 0:
        return "\n".join([
            "Remaining possibilities: 0",
            "Hmm... are you sure you're playing today's puzzle?",
        ])
    if n == 1:
        return "\n".join([
            "ONE POSSIBILITY REMAINING!!",
            CELEBRATION_BANNER,
            f"SOLUTION: {words[0]}",
        ])

    shown = words[:max_shown]
    lines = [f"Remaining possibilities: {n}", "", f"{len(shown)} possibilities (of {n}):"]
    lines += [f"\t{w}" for w in shown]
    lines += ["", RULE]
    return "\n".join(lines)


def format_suggestion(word: str, complete: bool = True) -> str:
    if complete:
        return f"BEST NEXT GUESS: {word}"
    return f"BEST NEXT GUESS: {word} (ranking stopped early)"
