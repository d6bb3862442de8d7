"""
Separator-aware scanning of word-bank text.

Word banks are often a single line of quoted, comma-separated words:

    "cigar", "rebut", "sissy", ...

Text is split into maximal runs: a run of non-separator characters is a word,
a run of separator characters is a separator string.
"""

from typing import AbstractSet, Iterator

DEFAULT_SEPARATORS = frozenset(" ,\"'\n\r\t")


def next_word_or_separator(text: str, position: int,
                           separators: AbstractSet[str] = DEFAULT_SEPARATORS) -> str:
    """
    Return the maximal word or separator run of `text` starting at `position`.

    Requires 0 <= position < len(text).
    """
    if not 0 <= position < len(text):
        raise ValueError(f"position {position} is outside text of length {len(text)}")

    is_sep = text[position] in separators
    end = position + 1
    while end < len(text) and (text[end] in separators) == is_sep:
        end += 1
    return text[position:end]


def iter_tokens(text: str, separators: AbstractSet[str] = DEFAULT_SEPARATORS) -> Iterator[str]:
    """Every run (words and separator strings) in order; they concatenate back to `text`."""
    pos = 0
    while pos < len(text):
        token = next_word_or_separator(text, pos, separators)
        yield token
        pos += len(token)


def iter_words(text: str, separators: AbstractSet[str] = DEFAULT_SEPARATORS) -> Iterator[str]:
    """Only the word runs of `text`, in order."""
    for token in iter_tokens(text, separators):
        if token[0] not in separators:
            yield token
