# apps/cli/run.py
"""
Batch simulation: play every bank word as a hidden answer.

This script:
  1) Validates the word lists (prints counts + SHA).
  2) Loads the bank and instantiates the requested solver.
  3) Plays the games with a progress indicator and writes:
       - CSV:  per-game results + guess/code/left history columns
       - JSON: manifest with config, word-list report, git commit, etc.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from wordsieve.datasets import load_word_bank, validate_wordlists, pretty_summary
from wordsieve.engine import WORD_LENGTH
from wordsieve.harness import run_case, WORDLE_MAX_TURNS
from wordsieve.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordsieve.solvers import create_solver, get_solver_ids
from wordsieve.solvers.avg_eliminated import BACKENDS, DEFAULT_OPENING

log = logging.getLogger("wordsieve.run")


def _solver_options(args) -> dict:
    if args.solver == "avg_eliminated":
        return {"opening": args.opening or None, "backend": args.backend,
                "time_budget_s": args.time_budget}
    return {}


def main(argv=None) -> int:
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="wordsieve — simulate games against the word bank")
    ap.add_argument("--solver", default="avg_eliminated",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--N", type=int, default=WORD_LENGTH, help="word length")
    ap.add_argument("--bank", default="data/allWords.txt", help="word bank (answers)")
    ap.add_argument("--dictionary", default=None, help="extra accepted guesses, one per line")
    ap.add_argument("--sample", type=int, help="play only K answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed")
    ap.add_argument("--opening", default=DEFAULT_OPENING, help="first guess for avg_eliminated")
    ap.add_argument("--backend", choices=BACKENDS, default="auto")
    ap.add_argument("--time-budget", type=float, default=None,
                    help="seconds per ranking for avg_eliminated")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["bar", "plain", "off"], default="bar",
                    help="progress display on stderr")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    rep = validate_wordlists(args.N, args.bank, args.dictionary)
    print(pretty_summary(rep))

    try:
        bank = load_word_bank(args.bank, args.N, dictionary_path=args.dictionary)
        solver = create_solver(args.solver, **_solver_options(args))
    except (FileNotFoundError, ValueError) as e:
        print(f"Cannot start: {e}", file=sys.stderr)
        return 2

    answers = bank.candidates
    allowed = sorted(bank.vocabulary)

    rng = random.Random(args.seed)
    cases = list(answers)
    if args.sample and args.sample < len(cases):
        rng.shuffle(cases)
        cases = cases[: args.sample]

    iterator = cases
    if args.progress == "bar":
        iterator = tqdm(cases, ncols=80, desc="Playing", unit="game", file=sys.stderr)

    results = []
    start = time.time()
    for idx, ans in enumerate(iterator, 1):
        r = run_case(solver, ans, allowed=allowed, answers=answers, N=args.N,
                     seed=args.seed + idx)
        r["solver_id"] = solver.id
        results.append(r)
        if args.progress == "plain":
            sys.stderr.write(f"\r[{idx}/{len(cases)}] elapsed {time.time() - start:6.1f}s")
            sys.stderr.flush()
    if args.progress == "plain":
        sys.stderr.write("\n")

    wins = sum(1 for r in results if r["success"])
    if results:
        mean_guesses = sum(r["guesses"] for r in results) / len(results)
        log.info("%s: solved %d/%d, mean guesses %.3f", solver.id, wins, len(results),
                 mean_guesses)

    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=WORDLE_MAX_TURNS, N=args.N)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "num_cases": len(results),
        "wins": wins,
        "solver_id": solver.id,
    }, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
