from .validator import validate_wordlists, pretty_summary
from .io import read_lines, write_lines, read_bank_words, read_dictionary, load_word_bank, WordBank
from .tokenizer import DEFAULT_SEPARATORS, next_word_or_separator, iter_tokens, iter_words

__all__ = [
    "validate_wordlists", "pretty_summary",
    "read_lines", "write_lines", "read_bank_words", "read_dictionary", "load_word_bank",
    "WordBank", "DEFAULT_SEPARATORS", "next_word_or_separator", "iter_tokens", "iter_words",
]
