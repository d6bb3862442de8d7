"""
Normalize a raw word list into a one-word-per-line bank.

Features:
- Reads separator-delimited text (quoted, comma-separated lists, one per line, ...).
- Lowercases and keeps only N-letter a–z words.
- Stable dedupe (first occurrence wins); optional alphabetical sort.

Usage:
    python -m script.build_word_bank --in raw_words.txt --out data/allWords.txt
    python -m script.build_word_bank --in raw_words.txt --out data/allWords.txt --N 6 --sort
"""

import argparse
import logging
from pathlib import Path

from wordsieve.datasets import read_bank_words, write_lines


def main():
    ap = argparse.ArgumentParser(description="Normalize a raw word list into a word bank.")
    ap.add_argument("--in", dest="inp", required=True, help="input text file")
    ap.add_argument("--out", required=True, help="output file (one word per line)")
    ap.add_argument("--N", type=int, default=5, help="word length to keep")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically (otherwise keep input order)")
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    words = read_bank_words(Path(args.inp), args.N)
    if args.sort:
        words = sorted(words)
    write_lines(words, args.out)
    logging.info("%s -> %s (%d words)", args.inp, args.out, len(words))


if __name__ == "__main__":
    main()
