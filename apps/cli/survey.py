# apps/cli/survey.py
"""
Survey how many words each root word yields.

For every root in the list (or a seeded sample), count the vocabulary words
that can be spelled from it and how many of those the dictionary accepts.
Roots with few real derivations make for a frustrating game; this report
is how they get spotted before they ship in start.txt.

Writes: <outdir>/survey_<timestamp>.csv + survey_<timestamp>_manifest.json
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import Dict, List, Sequence

from tqdm import tqdm
from wordfreq import top_n_list

from packages.datasets import (
    START_WORDS_PATH,
    WordListError,
    load_word_list,
    pretty_summary,
    validate_wordlist,
)
from packages.engine import SpellOracle, WordfreqOracle, filter_derivable
from packages.engine.oracle import DEFAULT_LANGUAGE, DEFAULT_MIN_ZIPF
from packages.session.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown


def survey_root(root: str, vocabulary: Sequence[str], oracle: SpellOracle) -> Dict:
    """Derivable and real words for one root."""
    derivable = filter_derivable(vocabulary, root)
    real = [w for w in derivable if oracle.is_known_word(w, DEFAULT_LANGUAGE)]
    return {"root": root, "derivable": derivable, "real": real}


def choose_roots(words: Sequence[str], sample: int | None, seed: int) -> List[str]:
    """All roots, or a deterministic sample without replacement."""
    if sample and sample < len(words):
        pool = list(words)
        random.Random(seed).shuffle(pool)
        return pool[:sample]
    return list(words)


def main(argv: Sequence[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="rootword — survey root words")
    ap.add_argument("--words", default=str(START_WORDS_PATH),
                    help="path to the root-word list (one word per line)")
    ap.add_argument("--vocab-size", type=int, default=50_000,
                    help="how many frequent wordfreq words to try against each root")
    ap.add_argument("--min-zipf", type=float, default=DEFAULT_MIN_ZIPF,
                    help="minimum wordfreq Zipf frequency for a word to count as real")
    ap.add_argument("--sample", type=int, help="survey only a subset of roots (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    if args.vocab_size <= 0:
        ap.error("--vocab-size must be positive")

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    # 1) Validate the list and print a one-liner summary
    rep = validate_wordlist(args.words)
    print(pretty_summary(rep))

    # 2) A survey of the fallback root alone is meaningless: always strict here
    try:
        words = load_word_list(args.words, strict=True)
    except WordListError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    oracle = WordfreqOracle(min_zipf=args.min_zipf)
    vocab = top_n_list(DEFAULT_LANGUAGE, args.vocab_size)
    roots = choose_roots(words, args.sample, args.seed)

    # 3) Survey with a progress bar
    results = [survey_root(root, vocab, oracle)
               for root in tqdm(roots, ncols=80, desc="Surveying", unit="root")]

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"survey_{run_id}.csv"
    manifest_path = outdir / f"survey_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "num_roots": len(results),
    }, str(manifest_path))

    weakest = sorted(results, key=lambda r: len(r["real"]))[:5]
    print("Fewest real words: " + ", ".join(f"{r['root']}={len(r['real'])}" for r in weakest))
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
