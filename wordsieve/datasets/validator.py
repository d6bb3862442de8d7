"""
Word-list validator.

What this module does:
- Validate a word bank (separator-delimited candidates) and, optionally, a
  dictionary (one accepted guess per line).
- Enforce formatting rules (letters a–z after lowercasing, exact length N).
- Count invalid tokens and duplicates; compute SHA-256 of the raw files.
- Return a machine-readable dict (for manifests) and a one-line summary.

Typical use:
    from wordsieve.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists(5, "data/allWords.txt", "data/dictionaryWords.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple
import hashlib

from wordsieve.engine.validation import is_word, normalize
from .tokenizer import iter_words


@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words
    invalid_tokens: int  # tokens that are not N-letter words


@dataclass
class ValidationReport:
    N: int
    bank: FileReport
    dictionary: Optional[FileReport]
    bank_in_dictionary: int  # bank words the dictionary also lists
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _check(tokens: Iterable[str], N: int) -> Tuple[List[str], int]:
    valid: List[str] = []
    invalid = 0
    for raw in tokens:
        w = normalize(raw)
        if is_word(w, N):
            valid.append(w)
        else:
            invalid += 1
    return valid, invalid


def _missing(path: str) -> FileReport:
    return FileReport(path, False, 0, "", 0, 0)


def _report(p: Path, words: List[str], invalid: int) -> FileReport:
    return FileReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(set(words)),
        invalid_tokens=invalid,
    )


def validate_wordlists(N: int, bank_path: str, dictionary_path: str | None = None) -> Dict:
    """
    Validate the word bank (and optional dictionary) for length N.

    `passed` is strict: files exist, the bank is non-empty, and no file has
    invalid tokens. Duplicates are reported but do not fail validation.
    """
    issues: List[str] = []

    bank_p = Path(bank_path)
    dict_p = Path(dictionary_path) if dictionary_path else None

    if bank_p.exists():
        bank_words, bank_invalid = _check(iter_words(bank_p.read_text(encoding="utf-8")), N)
        bank_rep = _report(bank_p, bank_words, bank_invalid)
    else:
        bank_words, bank_invalid = [], 0
        bank_rep = _missing(bank_path)
        issues.append(f"word bank not found: {bank_path}")

    dict_rep: Optional[FileReport] = None
    dict_words: List[str] = []
    if dict_p is not None:
        if dict_p.exists():
            lines = [ln for ln in dict_p.read_text(encoding="utf-8").splitlines() if ln.strip()]
            dict_words, dict_invalid = _check(lines, N)
            dict_rep = _report(dict_p, dict_words, dict_invalid)
            if dict_invalid:
                issues.append(f"dictionary has {dict_invalid} invalid line(s)")
        else:
            dict_rep = _missing(str(dictionary_path))
            issues.append(f"dictionary not found: {dictionary_path}")

    if bank_rep.exists and bank_rep.count == 0:
        issues.append("word bank contains 0 valid words")
    if bank_invalid:
        issues.append(f"word bank has {bank_invalid} invalid token(s)")
    if bank_rep.count != bank_rep.unique_count:
        issues.append("word bank contains duplicate words")
    if dict_rep is not None and dict_rep.count != dict_rep.unique_count:
        issues.append("dictionary contains duplicate words")

    overlap = len(set(bank_words) & set(dict_words))
    passed = (
            bank_rep.exists
            and bank_rep.count > 0
            and bank_invalid == 0
            and (dict_rep is None or (dict_rep.exists and dict_rep.invalid_tokens == 0))
    )

    rep = ValidationReport(
        N=N,
        bank=bank_rep,
        dictionary=dict_rep,
        bank_in_dictionary=overlap,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console.

    Example:
        N=5 | bank=2315 (uniq=2315, sha=abc123...) | dictionary=12972 (uniq=12972, sha=def456...) | OK
    """
    b = report["bank"]
    parts = [
        f"N={report['N']}",
        f"bank={b['count']} (uniq={b['unique_count']}, sha={(b.get('sha256') or '')[:12]})",
    ]
    d = report.get("dictionary")
    if d is not None:
        parts.append(
            f"dictionary={d['count']} (uniq={d['unique_count']}, sha={(d.get('sha256') or '')[:12]})")
    parts.append("OK" if report["passed"] else "FAIL")
    return " | ".join(parts)
