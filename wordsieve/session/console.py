"""
Interactive round loop.

`read` and `write` default to input() and print(); tests pass scripted
callables instead. The loop ends when one or zero candidates remain, or when
input runs out (EOF).
"""

from __future__ import annotations

from typing import Callable

from wordsieve.engine.errors import WordsieveError
from .assistant import Assistant
from .render import MAX_SHOWN, STATUS_LEGEND, format_possibilities, format_suggestion

GREETING = "Hello! Welcome to the wordsieve assistant. Enter your first guess below...\n"


def run_console(
        assistant: Assistant,
        *,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
        max_shown: int = MAX_SHOWN,
) -> int:
    """
    Drive one game. Returns the number of guesses needed: the rounds entered,
    plus one when a single answer is left but was not typed yet.
    """
    write(GREETING)
    if assistant.finished:
        write(format_possibilities(assistant.candidates, max_shown))
    else:
        first = assistant.suggest()
        if first:
            write(format_suggestion(first))

    while not assistant.finished:
        n = assistant.guesses + 1
        try:
            guess = read(f"Enter word (guess #{n}): ")
            write("\n" + STATUS_LEGEND)
            code = read("\nEnter status (ex: rgyry): ")
        except EOFError:
            write("\nNo more input; stopping.")
            return assistant.guesses

        write("\n*** Calculating ***\n")
        try:
            report = assistant.apply(guess, code)
        except WordsieveError as e:
            write(f"Invalid input: {e}. Try again.\n")
            continue

        write(f"{report.eliminated} words eliminated.")
        write(format_possibilities(assistant.candidates, max_shown))
        if report.suggestion:
            write(format_suggestion(report.suggestion, report.ranking_complete))

    # Zero candidates: no answer left to type.
    if not assistant.candidates or assistant.solved_on_screen:
        needed = assistant.guesses
    else:
        needed = assistant.guesses + 1
    write(f"GUESSES NEEDED: {needed}")
    return needed
