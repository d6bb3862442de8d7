"""
Error types raised by the engine and the layers above it.

All of them are ValueErrors, so existing `except ValueError` handlers catch them.
"""


class WordsieveError(ValueError):
    """Base class for all package errors."""


class InvalidFeedbackError(WordsieveError):
    """Feedback code has an unknown symbol or the wrong length."""


class LengthMismatchError(WordsieveError):
    """Two words (or a word and the session word length) differ in length."""


class EmptyCandidatesError(WordsieveError):
    """Evaluation or ranking was asked to work over zero candidates."""


class InvalidGuessError(WordsieveError):
    """Guess is malformed or not an accepted dictionary word."""
