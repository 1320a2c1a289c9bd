# apps/cli/play.py
"""
Terminal host for the rootword game.

This script:
  1) Validates the root-word list (prints counts + SHA).
  2) Loads the list and starts a session with a random root word.
  3) Reads submissions line by line and prints the outcome:
       - accepted words are added to the list (most recent first)
       - rejected words print "<title>: <message>"

Commands:
  :new    new root word (clears accepted words)
  :hint   how many derivable words are left
  :words  list accepted words with their letter counts
  :help   this list
  :quit   exit (Ctrl-D works too)
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from wordfreq import top_n_list

from packages.datasets import (
    START_WORDS_PATH,
    WordListError,
    load_word_list,
    pretty_summary,
    read_words,
    validate_wordlist,
)
from packages.engine import SpellOracle, WordfreqOracle, WordSetOracle, filter_derivable
from packages.engine.oracle import DEFAULT_LANGUAGE, DEFAULT_MIN_ZIPF
from packages.session import Session, record_accepted, reset_session, start_session, submit

COMMANDS = {
    ":new": "new root word (clears accepted words)",
    ":hint": "how many derivable words are left",
    ":words": "list accepted words",
    ":help": "show commands",
    ":quit": "exit",
}


@dataclass
class PlayContext:
    words: Sequence[str]          # root-word list
    oracle: SpellOracle
    vocabulary: Sequence[str]     # pool used for hints
    rng: random.Random


def banner(session: Session) -> str:
    return f"Root word: {session.root.upper()}  (create new words out of this word)"


def format_used(session: Session) -> List[str]:
    """One line per accepted word, prefixed with its letter count."""
    return [f"  ({len(w)}) {w}" for w in session.used]


def remaining_words(session: Session, ctx: PlayContext) -> List[str]:
    """Vocabulary words still acceptable for this session."""
    used = set(session.used)
    return [
        w for w in filter_derivable(ctx.vocabulary, session.root)
        if w not in used and ctx.oracle.is_known_word(w, DEFAULT_LANGUAGE)
    ]


def handle_line(line: str, session: Session, ctx: PlayContext) -> Tuple[Session, List[str], bool]:
    """
    Apply one line of input.

    Returns:
      (next session, output lines, keep playing?)
    """
    cmd = line.strip().lower()

    if cmd == ":quit":
        return session, [f"Found {len(session.used)} word(s). Bye!"], False
    if cmd == ":new":
        session = reset_session(session, ctx.words, ctx.rng)
        return session, [banner(session)], True
    if cmd == ":hint":
        left = remaining_words(session, ctx)
        return session, [f"{len(left)} word(s) left to find."], True
    if cmd == ":words":
        return session, format_used(session) or ["  (none yet)"], True
    if cmd == ":help":
        return session, [f"  {k:<7} {v}" for k, v in COMMANDS.items()], True
    if cmd.startswith(":"):
        return session, [f"Unknown command {cmd!r}; try :help"], True

    result = submit(session, line, ctx.oracle)
    if result is None:
        return session, [], True  # empty input is ignored
    if not result.accepted:
        return session, [f"{result.title}: {result.message}"], True

    session = record_accepted(session, result.word)
    return session, [f"+ ({len(result.word)}) {result.word}"], True


def build_oracle(args) -> Tuple[SpellOracle, List[str]]:
    """
    Oracle + hint vocabulary from CLI args: a custom dictionary file if
    given, wordfreq otherwise.
    """
    if args.dictionary:
        vocab = read_words(args.dictionary)
        return WordSetOracle(vocab), vocab
    return WordfreqOracle(min_zipf=args.min_zipf), top_n_list(DEFAULT_LANGUAGE, args.vocab_size)


def main(argv: Sequence[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="rootword — make words out of a root word")
    ap.add_argument("--words", default=str(START_WORDS_PATH),
                    help="path to the root-word list (one word per line)")
    ap.add_argument("--dictionary",
                    help="word list to use as the dictionary instead of wordfreq")
    ap.add_argument("--min-zipf", type=float, default=DEFAULT_MIN_ZIPF,
                    help="minimum wordfreq Zipf frequency for a word to count as real")
    ap.add_argument("--vocab-size", type=int, default=50_000,
                    help="how many frequent words to consider for :hint")
    ap.add_argument("--seed", type=int, help="RNG seed for root-word choice")
    ap.add_argument("--strict", action="store_true",
                    help="exit if the root-word list cannot be loaded (default: fall back to 'silkworm')")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    # 1) Validate the list and print a one-liner summary
    print(pretty_summary(validate_wordlist(args.words)))

    # 2) Load the list (falls back to the default root unless --strict)
    try:
        words = load_word_list(args.words, strict=args.strict)
    except WordListError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    oracle, vocab = build_oracle(args)
    ctx = PlayContext(words=words, oracle=oracle, vocabulary=vocab, rng=random.Random(args.seed))

    # 3) Play until :quit or EOF
    session = start_session(ctx.words, ctx.rng)
    print(banner(session))
    print("Type a word, or :help for commands.")

    playing = True
    while playing:
        try:
            line = input("> ")
        except EOFError:
            print()
            break
        session, out, playing = handle_line(line, session, ctx)
        for ln in out:
            print(ln)

    return 0


if __name__ == "__main__":
    sys.exit(main())
