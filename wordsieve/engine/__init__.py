from .feedback import feedback, parse_feedback, is_solved, MATCH, PRESENT, ABSENT
from .constraints import (
    eliminate_letter, eliminate_words, filter_candidates, build_candidates, is_consistent,
)
from .validation import validate_guess, require_guess, WORD_LENGTH
from .errors import (
    WordsieveError, InvalidFeedbackError, LengthMismatchError, EmptyCandidatesError,
    InvalidGuessError,
)

__all__ = [
    "feedback", "parse_feedback", "is_solved", "MATCH", "PRESENT", "ABSENT",
    "eliminate_letter", "eliminate_words", "filter_candidates", "build_candidates",
    "is_consistent", "validate_guess", "require_guess", "WORD_LENGTH",
    "WordsieveError", "InvalidFeedbackError", "LengthMismatchError",
    "EmptyCandidatesError", "InvalidGuessError",
]
