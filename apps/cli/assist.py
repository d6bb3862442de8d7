# apps/cli/assist.py
"""
Interactive assistant for today's puzzle.

    python -m apps.cli.assist --bank data/allWords.txt --dictionary data/dictionaryWords.txt

Each round, type the guess you played and the colours the game showed
(r = not in word, y = elsewhere, g = correct). The assistant reports how many
words that eliminated, what is left, and the best next guess.
"""

from __future__ import annotations

import argparse
import logging
import sys

from wordsieve.datasets import load_word_bank, validate_wordlists, pretty_summary
from wordsieve.engine import WORD_LENGTH
from wordsieve.session import Assistant, run_console
from wordsieve.solvers.avg_eliminated import BACKENDS, DEFAULT_OPENING

log = logging.getLogger("wordsieve.assist")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="wordsieve — narrow down today's answer")
    ap.add_argument("--bank", default="data/allWords.txt",
                    help="word bank (candidate solutions, separator-delimited)")
    ap.add_argument("--dictionary", default="data/dictionaryWords.txt",
                    help="extra accepted guesses, one per line ('' to accept any word)")
    ap.add_argument("--N", type=int, default=WORD_LENGTH, help="word length")
    ap.add_argument("--past-solutions", type=int, default=0,
                    help="treat the first K bank words as already used")
    ap.add_argument("--opening", default=DEFAULT_OPENING,
                    help="suggested first guess ('' to rank the full bank)")
    ap.add_argument("--backend", choices=BACKENDS, default="auto",
                    help="guess evaluator backend")
    ap.add_argument("--time-budget", type=float, default=None,
                    help="seconds to spend ranking per round (best-so-far after that)")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    dictionary = args.dictionary or None
    rep = validate_wordlists(args.N, args.bank, dictionary)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        log.warning(issue)

    try:
        bank = load_word_bank(args.bank, args.N, past_solutions=args.past_solutions,
                              dictionary_path=dictionary)
    except (FileNotFoundError, ValueError) as e:
        print(f"Cannot load word lists: {e}", file=sys.stderr)
        return 2

    assistant = Assistant(
        candidates=bank.candidates,
        vocabulary=bank.vocabulary if dictionary else None,
        N=args.N,
        opening=args.opening or None,
        backend=args.backend,
        time_budget_s=args.time_budget,
    )
    try:
        run_console(assistant)
    except KeyboardInterrupt:
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
