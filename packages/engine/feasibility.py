"""
Letter feasibility for a single (word, root) pair.

A word is *possible* from a root when its letters form a sub-multiset of
the root's letters:
  - every letter of the word must appear in the root
  - each root letter may be used at most once per word
  - unused root letters are irrelevant

This is multiset subtraction, not substring or whole-word anagram matching:
  is_possible("silk", "silkworm")  -> True
  is_possible("worms", "silkworm") -> True    (w, o, r, m, s each once)
  is_possible("silks", "silkworm") -> False   (only one 's')
  is_possible("silkk", "silkworm") -> False   (only one 'k')
"""

from __future__ import annotations

from collections import Counter


def remaining_letters(word: str, root: str) -> Counter | None:
    """
    Consume the letters of `word` from `root`, one occurrence per letter.

    Returns:
      - Counter of the root letters left over, or
      - None as soon as a letter of `word` has no remaining occurrence.
    """
    remaining = Counter(root)
    for ch in word:
        if remaining[ch] <= 0:
            return None
        remaining[ch] -= 1  # consume one instance
    return +remaining  # drop zero counts


def is_possible(word: str, root: str) -> bool:
    """
    Return True if `word` can be spelled with the letters of `root`.

    Both arguments are compared as given; callers normalize case first.
    """
    return remaining_letters(word, root) is not None
