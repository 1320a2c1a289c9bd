"""
Root-word source.

The game starts from a bundled list of candidate root words
(packages/datasets/data/start.txt, one word per line). Two operations:

  - load_word_list: read and normalize the list
  - pick_root:      choose one word uniformly at random

Failure policy: a missing or unreadable list is NOT fatal by default. The
failure is logged and an empty list is returned, which makes pick_root fall
back to DEFAULT_ROOT. Pass strict=True to get a WordListError instead
(the CLI exposes this as --strict).
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import List, Optional, Sequence

from .io import read_words

logger = logging.getLogger(__name__)

DEFAULT_ROOT = "silkworm"
START_WORDS_PATH = Path(__file__).parent / "data" / "start.txt"


class WordListError(RuntimeError):
    """The root-word list could not be loaded and no fallback is allowed."""


def load_word_list(path: Path | str = START_WORDS_PATH, *, strict: bool = False) -> List[str]:
    """
    Load the root-word list at `path`.

    Returns:
      List[str] of lowercase words in file order. Empty if the file cannot
      be read and `strict` is False.

    Raises:
      WordListError if the file cannot be read and `strict` is True.
    """
    try:
        words = read_words(path)
    except (OSError, UnicodeDecodeError) as e:
        if strict:
            raise WordListError(f"Could not load word list from {path}") from e
        logger.warning("Could not load word list from %s (%s); using fallback %r",
                       path, e, DEFAULT_ROOT)
        return []

    logger.info("Loaded %d root words from %s", len(words), path)
    return words


def pick_root(words: Sequence[str], rng: Optional[random.Random] = None) -> str:
    """
    Choose a root word uniformly at random, or DEFAULT_ROOT if `words` is empty.
    """
    if not words:
        return DEFAULT_ROOT
    rng = rng or random.Random()
    return rng.choice(words)
