import pytest
from wordsieve.engine import (
    feedback, parse_feedback, is_solved, eliminate_letter, eliminate_words, filter_candidates,
    build_candidates, is_consistent, validate_guess, require_guess,
    MATCH, PRESENT, ABSENT,
    InvalidFeedbackError, LengthMismatchError, InvalidGuessError,
)
from wordsieve.engine.matrix import WordMatrix

VOCAB = ["raise", "lapse", "crane", "stare", "trace", "speed", "abide", "eerie",
         "adieu", "radio", "audio", "llama", "sissy", "humph", "geese", "cigar"]


# --- feedback: golden codes (non-multiplicity-aware rule) ---
@pytest.mark.parametrize("guess,solution,expected", [
    ("raise", "lapse", "rgrgg"),
    ("radio", "audio", "ryggg"),
    ("adieu", "radio", "yyyrr"),
    ("crane", "crane", "ggggg"),
    ("abcde", "fghij", "rrrrr"),
    # repeated letters are all marked, whatever the solution's count
    ("speed", "abide", "rryyy"),
    ("geese", "cigar", "yrrrr"),
    ("eerie", "geese", "ygrrg"),
])
def test_feedback_golden(guess, solution, expected):
    assert feedback(guess, solution) == expected


def test_feedback_length_mismatch():
    with pytest.raises(LengthMismatchError):
        feedback("raise", "rais")


def test_feedback_has_one_symbol_per_letter():
    for g in VOCAB:
        for w in VOCAB:
            code = feedback(g, w)
            assert len(code) == len(g)
            assert set(code) <= {MATCH, PRESENT, ABSENT}


def test_parse_feedback_normalizes():
    assert parse_feedback(" RGYRY ", 5) == "rgyry"


@pytest.mark.parametrize("code", ["rgy", "rgyryg", "rgyrx", "r-yry", ""])
def test_parse_feedback_rejects(code):
    with pytest.raises(InvalidFeedbackError):
        parse_feedback(code, 5)


def test_is_solved():
    assert is_solved("ggggg")
    assert not is_solved("ggggy")
    assert not is_solved("")


# --- single-position rules ---
def test_absent_rule_scenario():
    out, n = eliminate_letter(0, "a", ABSENT, ["abcde", "fghij"])
    assert out == ["fghij"] and n == 1


def test_present_rule_excludes_position():
    words = ["abcde", "bacde", "fghij"]
    out, n = eliminate_letter(0, "a", PRESENT, words)
    assert out == ["bacde"] and n == 2


def test_match_rule():
    out, n = eliminate_letter(2, "d", MATCH, ["radio", "audio", "adieu"])
    assert out == ["radio", "audio"] and n == 1


@pytest.mark.parametrize("status", [ABSENT, PRESENT, MATCH])
def test_letter_rule_idempotent(status):
    once, _ = eliminate_letter(1, "a", status, VOCAB)
    twice, n = eliminate_letter(1, "a", status, once)
    assert twice == once and n == 0


def test_letter_rule_bad_inputs():
    with pytest.raises(InvalidFeedbackError):
        eliminate_letter(0, "a", "x", ["abcde"])
    with pytest.raises(ValueError):
        eliminate_letter(-1, "a", ABSENT, ["abcde"])
    with pytest.raises(ValueError):
        eliminate_letter(5, "a", ABSENT, ["abcde"])


def test_letter_rule_checks_position_on_empty_list():
    with pytest.raises(ValueError):
        eliminate_letter(9, "a", ABSENT, [])
    assert eliminate_letter(4, "a", ABSENT, []) == ([], 0)
    assert eliminate_letter(5, "a", ABSENT, [], N=6) == ([], 0)


def test_letter_rule_rejects_mixed_lengths():
    with pytest.raises(LengthMismatchError):
        eliminate_letter(0, "a", ABSENT, ["abcde", "fghijk"])


def test_letter_rule_does_not_mutate_input():
    words = ["abcde", "fghij"]
    eliminate_letter(0, "a", ABSENT, words)
    assert words == ["abcde", "fghij"]


# --- whole-word filtering ---
def test_all_match_leaves_only_guess():
    out, n = eliminate_words("radio", "ggggg", ["adieu", "radio", "audio"])
    assert out == ["radio"] and n == 2


def test_solution_always_survives_its_own_feedback():
    for g in VOCAB:
        for w in VOCAB:
            out, _ = eliminate_words(g, feedback(g, w), VOCAB)
            assert w in out, (g, w)


def test_eliminate_words_validates_code():
    with pytest.raises(InvalidFeedbackError):
        eliminate_words("radio", "gggg", ["radio"])
    with pytest.raises(InvalidFeedbackError):
        eliminate_words("radio", "ggxgg", ["radio"])


def test_eliminate_words_rejects_other_lengths():
    with pytest.raises(LengthMismatchError):
        eliminate_words("radio", "ggggg", ["radios"])


def test_is_consistent_matches_filter():
    for w in VOCAB:
        code = feedback("raise", w)
        kept, _ = eliminate_words("raise", code, VOCAB)
        assert kept == [v for v in VOCAB if is_consistent(v, "raise", code)]


def test_filter_candidates_history():
    words = ["crane", "raise", "stare", "trace"]
    cand = filter_candidates(words, [("raise", "yyrrg")], N=5)
    assert cand == ["crane", "trace"]


def test_build_candidates_cleans_and_dedupes():
    words = [" CRANE", "crane", "cr4ne", "raise", "toolong", "stare"]
    assert build_candidates(words, 5, exclude=["RAISE"]) == ["crane", "stare"]


# --- guess validation ---
def test_validate_guess_n5():
    allowed = {"crane", "raise", "stare"}
    assert validate_guess("CRANE", allowed, N=5) is True
    assert validate_guess("cranes", allowed, N=5) is False
    assert validate_guess("???", allowed, N=5) is False
    assert validate_guess("adieu", allowed, N=5) is False
    assert validate_guess("adieu", None, N=5) is True


def test_require_guess_messages():
    assert require_guess(" Crane ", None, 5) == "crane"
    with pytest.raises(InvalidGuessError, match="5-letter"):
        require_guess("cr4ne", None, 5)
    with pytest.raises(InvalidGuessError, match="dictionary"):
        require_guess("adieu", {"crane"}, 5)


# --- vectorized view agrees with the scalar rules ---
def test_word_matrix_codes_match_feedback():
    m = WordMatrix(VOCAB)
    for g in ["raise", "speed", "eerie"]:
        packed = m.codes_against(g)
        assert [m.unpack(p) for p in packed] == [feedback(g, w) for w in VOCAB]
        assert all(m.pack(m.unpack(p)) == p for p in packed)


def test_word_matrix_mask_matches_is_consistent():
    m = WordMatrix(VOCAB)
    for g in ["raise", "geese"]:
        for w in VOCAB:
            code = feedback(g, w)
            mask = m.keep_mask(g, code)
            assert [v for v, k in zip(VOCAB, mask) if k] == \
                   [v for v in VOCAB if is_consistent(v, g, code)]


def test_word_matrix_rejects_mixed_lengths():
    with pytest.raises(LengthMismatchError):
        WordMatrix(["radio", "radios"])
    with pytest.raises(LengthMismatchError):
        WordMatrix(["radio"]).codes_against("rad")
