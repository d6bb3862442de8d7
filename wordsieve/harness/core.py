"""
Offline simulation of games against known answers.

- run_case:  play one hidden answer with a given solver.
- run_batch: play many answers in sequence (optionally a prefix sample).
- Enforces the game's 6-turn limit at the harness layer.

Feedback and elimination come from wordsieve.engine, so a simulated game
sees exactly the codes and filters the interactive assistant uses.
"""

from __future__ import annotations
import time
from typing import Dict, Iterable, List, Tuple
from wordsieve.engine import feedback, eliminate_words, is_solved

# Single source of truth for the turn budget.
WORDLE_MAX_TURNS = 6


def _assert_wordle_turns(max_turns: int) -> None:
    if max_turns != WORDLE_MAX_TURNS:
        raise ValueError(f"max_turns must be {WORDLE_MAX_TURNS}; got {max_turns}")


def run_case(
        solver,
        answer: str,
        *,
        allowed: Iterable[str],
        answers: Iterable[str],
        N: int,
        max_turns: int = WORDLE_MAX_TURNS,
        seed: int | None = None,
) -> Dict:
    """
    Play one game until the solver types the answer or runs out of turns.

    Returns a dict with keys:
        answer, success, guesses, time_ms,
        history (list[(guess, code)]), left (candidates after each turn)
    """
    _assert_wordle_turns(max_turns)

    allowed = [w for w in allowed if len(w) == N]
    solver.reset(N=N, seed=seed)

    candidates = [w for w in answers if len(w) == N]
    history: List[Tuple[str, str]] = []
    left: List[int] = []
    total_ms = 0.0

    for turn in range(1, WORDLE_MAX_TURNS + 1):
        state = {
            "turn": turn,
            "history": list(history),
            "candidates": candidates,
            "allowed": allowed,
            "N": N,
        }
        t0 = time.perf_counter_ns()
        guess = solver.next_guess(state).lower()
        total_ms += (time.perf_counter_ns() - t0) / 1_000_000.0

        code = feedback(guess, answer)
        history.append((guess, code))
        candidates, _ = eliminate_words(guess, code, candidates)
        left.append(len(candidates))

        if is_solved(code):
            return {"answer": answer, "success": True, "guesses": turn,
                    "time_ms": total_ms, "history": history, "left": left}

    return {"answer": answer, "success": False, "guesses": WORDLE_MAX_TURNS,
            "time_ms": total_ms, "history": history, "left": left}


def run_batch(
        solver,
        answers: List[str],
        *,
        allowed: List[str],
        N: int,
        max_turns: int = WORDLE_MAX_TURNS,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. With `sample`, only the first K answers
    (after filtering to length N) are played.

    Each case's seed is derived from the base seed (seed + index) so runs are
    reproducible without every case sharing one RNG stream.
    """
    _assert_wordle_turns(max_turns)

    pool = [w for w in answers if len(w) == N]
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, ans in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        r = run_case(solver, ans, allowed=allowed, answers=answers, N=N,
                     max_turns=max_turns, seed=case_seed)
        r["solver_id"] = solver.id
        out.append(r)
    return out
