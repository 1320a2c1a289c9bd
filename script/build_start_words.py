"""
Build a root-word list from wordfreq and write a clean list.

What it does:
- Takes the top-N most frequent English words from wordfreq.
- Keeps plain a–z words of exactly --length letters.
- Lowercases, de-duplicates while preserving frequency order, and writes to file.

Usage:
    python -m script.build_start_words --out packages/datasets/data/start.txt
    # or alphabetically sorted, 7-letter roots:
    python -m script.build_start_words --length 7 --sort --out packages/datasets/data/start.txt
"""

import argparse
from typing import Iterable, List

from wordfreq import top_n_list

from packages.datasets.io import unique_preserve_order, write_lines


def select_roots(words: Iterable[str], length: int, limit: int | None = None) -> List[str]:
    """Plain lowercase a–z words of `length` letters, first-seen order."""
    picked = [w.strip().lower() for w in words]
    picked = [w for w in picked if len(w) == length and w.isascii() and w.isalpha()]
    picked = unique_preserve_order(picked)
    return picked[:limit] if limit else picked


def main():
    ap = argparse.ArgumentParser(description="Build a root-word list from wordfreq.")
    ap.add_argument("--out", required=True, help="output .txt file")
    ap.add_argument("--length", type=int, default=8, help="root word length")
    ap.add_argument("--top", type=int, default=100_000, help="how many frequent words to scan")
    ap.add_argument("--limit", type=int, help="keep at most this many roots")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically (otherwise keep frequency order)")
    args = ap.parse_args()

    roots = select_roots(top_n_list("en", args.top), args.length, args.limit)
    if args.sort:
        roots = sorted(roots)

    path = write_lines(roots, args.out)
    print(f"Scanned top {args.top} words → {path} ({len(roots)} roots of length {args.length})")


if __name__ == "__main__":
    main()
