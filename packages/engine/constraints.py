"""
Derivable-word filtering for a root.

Given:
  - a pool of words (e.g., a frequency vocabulary)
  - a root word
  - a minimum length

Return:
  - the words that could still be accepted for that root, ignoring the
    dictionary lookup and the session's used list.

Used for hints ("how many words are left?") and for surveying how rich a
root word is before it goes into the start list.
"""

from typing import Iterable, List, Set

from .feasibility import is_possible
from .validation import MIN_WORD_LENGTH


def filter_derivable(words: Iterable[str], root: str, min_len: int = MIN_WORD_LENGTH) -> List[str]:
    """
    Keep only words that can be spelled from `root`, have at least `min_len`
    letters and are not the root itself.

    Args:
      words   : iterable of candidate words (normalized here)
      root    : the root word
      min_len : minimum accepted length

    Returns:
      List[str] of derivable words (first-seen order, no duplicates).
    """
    root = root.strip().lower()
    seen: Set[str] = set()
    out: List[str] = []

    for w in words:
        w = w.strip().lower()

        # Basic hygiene: skip anything that isn't a clean alpha token
        if len(w) < min_len or not w.isalpha() or w == root or w in seen:
            continue

        if is_possible(w, root):
            seen.add(w)
            out.append(w)

    return out
