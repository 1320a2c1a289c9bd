"""
Real-word lookups ("oracles") used by the final validation check.

The validator never talks to a dictionary directly; it is handed an object
with a single method:

    is_known_word(word, language="en") -> bool

Two implementations ship here:
  - WordfreqOracle: backed by the `wordfreq` corpus (Zipf frequency scale)
  - WordSetOracle:  a fixed in-memory vocabulary (tests, offline word lists)
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Iterable, Protocol, Set

from wordfreq import zipf_frequency

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"

# Zipf 3.0 ~ once per million words. Lower thresholds let in names and
# abbreviations ("kim", "mil"); higher ones start rejecting plain words.
DEFAULT_MIN_ZIPF = 3.0

# Distinct (word, language) lookups kept in memory across all oracles.
ZIPF_CACHE_SIZE = 65_536


@lru_cache(maxsize=ZIPF_CACHE_SIZE)
def cached_zipf(word: str, language: str) -> float:
    freq = zipf_frequency(word, language)
    logger.debug("zipf(%r, %s) = %.2f", word, language, freq)
    return freq


class SpellOracle(Protocol):
    def is_known_word(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        ...


class WordfreqOracle:
    """
    Treat a word as real when wordfreq has seen it often enough.

    Frequencies come from cached_zipf, a bounded LRU cache shared by every
    oracle; a session asks about the same handful of words repeatedly.
    """

    def __init__(self, min_zipf: float = DEFAULT_MIN_ZIPF):
        if min_zipf < 0:
            raise ValueError(f"min_zipf must be >= 0; got {min_zipf}")
        self.min_zipf = float(min_zipf)

    def is_known_word(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        freq = cached_zipf(word, language)
        return freq > 0 and freq >= self.min_zipf


class WordSetOracle:
    """A fixed vocabulary. Case-insensitive; `language` is ignored."""

    def __init__(self, words: Iterable[str]):
        self._words: Set[str] = {w.strip().lower() for w in words if w.strip()}

    def __len__(self) -> int:
        return len(self._words)

    def is_known_word(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        if not word:
            return False
        return word.lower() in self._words
