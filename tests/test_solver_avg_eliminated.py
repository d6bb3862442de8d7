import itertools

import pytest
from wordsieve.engine import EmptyCandidatesError, InvalidGuessError, LengthMismatchError
from wordsieve.solvers import (
    average_eliminated, best_guess, rank_guesses, create_solver, get_solver_ids,
)

FOUR = ["abcde", "abcdf", "abcdg", "xyzwv"]
THREE = ["adieu", "radio", "audio"]

# A pool big enough for the numpy backend, with some repeated-letter words.
POOL = ["".join(p) for p in itertools.permutations("abcdefg", 5)][:70] + \
       ["aabbc", "abcab", "ccccc", "eeeee", "gfedc"]


@pytest.mark.parametrize("guess,expected", [
    ("abcde", 3),  # 10/4 = 2.5, rounded half up
    ("abcdf", 3),
    ("abcdg", 3),
    ("xyzwv", 2),  # 6/4 = 1.5
])
def test_average_eliminated_hand_computed(guess, expected):
    assert average_eliminated(guess, FOUR) == expected


@pytest.mark.parametrize("backend", ["python", "numpy"])
def test_average_eliminated_backends_agree_small(backend):
    assert [average_eliminated(g, FOUR, backend=backend) for g in FOUR] == [3, 3, 3, 2]
    assert [average_eliminated(g, THREE, backend=backend) for g in THREE] == [2, 2, 2]


def test_average_eliminated_backends_agree_large():
    for g in POOL[::7]:
        assert average_eliminated(g, POOL, backend="python") == \
               average_eliminated(g, POOL, backend="numpy")


def test_average_eliminated_leaves_candidates_untouched():
    words = list(FOUR)
    average_eliminated("abcde", words)
    assert words == FOUR


def test_average_eliminated_preconditions():
    with pytest.raises(EmptyCandidatesError):
        average_eliminated("abcde", [])
    with pytest.raises(LengthMismatchError):
        average_eliminated("abcd", FOUR)
    with pytest.raises(ValueError):
        average_eliminated("abcde", FOUR, backend="gpu")


@pytest.mark.parametrize("backend", ["python", "numpy"])
@pytest.mark.parametrize("bad", ["ABCDE", "abcd-", "abcd1"])
def test_backends_reject_the_same_malformed_candidates(backend, bad):
    with pytest.raises(InvalidGuessError):
        average_eliminated("abcde", FOUR + [bad], backend=backend)
    with pytest.raises(InvalidGuessError):
        rank_guesses(POOL + [bad], backend=backend)


@pytest.mark.parametrize("backend", ["python", "numpy"])
def test_backends_reject_malformed_guess(backend):
    with pytest.raises(InvalidGuessError):
        average_eliminated("ABCDE", FOUR, backend=backend)


def test_best_guess_picks_max_and_first_on_ties():
    assert best_guess(FOUR) == "abcde"
    assert best_guess(list(reversed(FOUR))) == "abcdg"
    # every guess scores 2 here, so iteration order decides
    assert best_guess(THREE) == "adieu"
    assert best_guess(list(reversed(THREE))) == "audio"


def test_best_guess_single_candidate():
    assert best_guess(["radio"]) == "radio"
    r = rank_guesses(["radio"])
    assert r.score == 0 and r.complete


def test_best_guess_empty_fails():
    with pytest.raises(EmptyCandidatesError):
        best_guess([])


def test_rank_backends_agree():
    py = rank_guesses(POOL, backend="python")
    np_ = rank_guesses(POOL, backend="numpy")
    assert (py.guess, py.score) == (np_.guess, np_.score)
    assert py.complete and py.evaluated == len(POOL)


def test_rank_stops_early_with_best_so_far():
    r = rank_guesses(FOUR, should_stop=lambda: True)
    assert r.guess == "abcde" and r.evaluated == 1 and r.total == 4
    assert r.complete is False

    r = rank_guesses(list(reversed(FOUR)), time_budget_s=0.0)
    assert r.guess == "xyzwv" and r.score == 2 and not r.complete


def test_solver_registry():
    assert get_solver_ids() == ["avg_eliminated", "random_consistent"]
    with pytest.raises(ValueError):
        create_solver("entropy")


def test_solver_uses_opening_then_ranker():
    solver = create_solver("avg_eliminated", opening="raise")
    solver.reset(N=5, seed=1)
    assert solver.next_guess({"turn": 1, "candidates": FOUR}) == "raise"
    assert solver.next_guess({"turn": 2, "candidates": FOUR}) == "abcde"

    no_opening = create_solver("avg_eliminated", opening=None)
    no_opening.reset(N=5)
    assert no_opening.next_guess({"turn": 1, "candidates": FOUR}) == "abcde"


@pytest.mark.parametrize("solver_id", ["avg_eliminated", "random_consistent"])
def test_solvers_fall_back_when_no_candidates_left(solver_id):
    solver = create_solver(solver_id)
    solver.reset(N=5, seed=1)
    state = {"turn": 3, "candidates": [], "allowed": ["crane", "raise"], "N": 5}
    assert solver.next_guess(state) == "crane"
    state["allowed"] = []
    assert solver.next_guess(state) == "aaaaa"
