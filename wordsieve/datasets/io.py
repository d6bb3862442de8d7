from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import AbstractSet, Iterable, List, Set

from wordsieve.engine.validation import is_word, normalize
from .tokenizer import DEFAULT_SEPARATORS, iter_words

log = logging.getLogger(__name__)


@dataclass
class WordBank:
    """
    Seed data for one session.

    excluded   : past solutions, kept out of the candidates (in memory only)
    candidates : initial candidate list, in file order
    vocabulary : every accepted guess (bank words plus dictionary words)
    """
    N: int
    excluded: Set[str] = field(default_factory=set)
    candidates: List[str] = field(default_factory=list)
    vocabulary: Set[str] = field(default_factory=set)


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def read_bank_words(p: Path | str, N: int,
                    separators: AbstractSet[str] = DEFAULT_SEPARATORS) -> List[str]:
    """Tokenize a word-bank file; keep well-formed N-letter words in order, once each."""
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)

    seen: Set[str] = set()
    out: List[str] = []
    for token in iter_words(p.read_text(encoding="utf-8"), separators):
        w = normalize(token)
        if not is_word(w, N):
            log.debug("%s: skipping token %r", p, token)
            continue
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def read_dictionary(p: Path | str, N: int) -> Set[str]:
    """One word per line; malformed lines are skipped."""
    words = {normalize(ln) for ln in read_lines(p)}
    return {w for w in words if is_word(w, N)}


def load_word_bank(bank_path: Path | str, N: int, *, past_solutions: int = 0,
                   dictionary_path: Path | str | None = None,
                   separators: AbstractSet[str] = DEFAULT_SEPARATORS) -> WordBank:
    """
    Build the seed for a session.

    The first `past_solutions` bank words are treated as already used and
    excluded from the candidates; they stay valid guesses.
    """
    if past_solutions < 0:
        raise ValueError(f"past_solutions must be >= 0; got {past_solutions}")

    words = read_bank_words(bank_path, N, separators)
    bank = WordBank(
        N=N,
        excluded=set(words[:past_solutions]),
        candidates=words[past_solutions:],
        vocabulary=set(words),
    )
    if dictionary_path is not None:
        bank.vocabulary |= read_dictionary(dictionary_path, N)

    log.info("loaded %d candidates (%d excluded, %d accepted guesses) from %s",
             len(bank.candidates), len(bank.excluded), len(bank.vocabulary), bank_path)
    return bank
