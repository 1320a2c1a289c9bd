"""
Submission validation.

This module answers the question: "Is this word acceptable right now?"
A candidate is accepted iff, checked in this order (first failure wins):
  1) it has not been used already in this session     -> else ALREADY_USED
  2) it can be spelled from the root's letters         -> else NOT_POSSIBLE
  3) it has >= 3 letters and is not the root itself    -> else NOT_REAL
  4) the spell-check oracle knows it                   -> else NOT_REAL

`validate` is a pure function of its inputs: it never mutates `used` and
returns the same result for the same arguments. Recording an accepted word
is the caller's job (see packages.session).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Collection, Optional

from .feasibility import is_possible
from .oracle import DEFAULT_LANGUAGE, SpellOracle

logger = logging.getLogger(__name__)

MIN_WORD_LENGTH = 3


class Rejection(str, Enum):
    ALREADY_USED = "already_used"
    NOT_POSSIBLE = "not_possible"
    NOT_REAL = "not_real"


# (title, message template); message may reference {root}
_MESSAGES = {
    Rejection.ALREADY_USED: ("Word used already", "Be more original"),
    Rejection.NOT_POSSIBLE: ("Word not possible", "You can't spell that word from '{root}'!"),
    Rejection.NOT_REAL: ("Word not recognized", "You can't just make them up, you know!"),
}


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one candidate against one root."""
    word: str
    rejection: Optional[Rejection] = None
    title: str = ""
    message: str = ""

    @property
    def accepted(self) -> bool:
        return self.rejection is None

    @classmethod
    def reject(cls, word: str, rejection: Rejection, root: str) -> "ValidationResult":
        title, message = _MESSAGES[rejection]
        return cls(word=word, rejection=rejection, title=title,
                   message=message.format(root=root))


def normalize_candidate(raw: str) -> str:
    """Lowercase and trim surrounding whitespace."""
    return raw.strip().lower()


def is_original(word: str, used: Collection[str]) -> bool:
    return word not in used


def is_real(word: str, root: str, oracle: SpellOracle,
            language: str = DEFAULT_LANGUAGE) -> bool:
    """
    Length/identity guard followed by the dictionary lookup.
    The oracle is only consulted for words that pass the guard.
    """
    if len(word) < MIN_WORD_LENGTH or word == root:
        return False
    return oracle.is_known_word(word, language)


def validate(root: str, used: Collection[str], candidate: str,
             oracle: SpellOracle) -> ValidationResult:
    """
    Validate `candidate` against `root` and the words already `used`.

    Args:
      root      : the session's root word (lowercase)
      used      : words accepted so far (any container supporting `in`)
      candidate : normalized submission (see normalize_candidate); non-empty
      oracle    : real-word lookup (see packages.engine.oracle)

    Returns:
      ValidationResult; `.accepted` is True on success, otherwise
      `.rejection` names the first failing check and `.title` / `.message`
      are ready for display.
    """
    if not is_original(candidate, used):
        result = ValidationResult.reject(candidate, Rejection.ALREADY_USED, root)
    elif not is_possible(candidate, root):
        result = ValidationResult.reject(candidate, Rejection.NOT_POSSIBLE, root)
    elif not is_real(candidate, root, oracle):
        result = ValidationResult.reject(candidate, Rejection.NOT_REAL, root)
    else:
        result = ValidationResult(word=candidate)

    logger.debug("validate(%r, %r) -> %s", root, candidate,
                 result.rejection.value if result.rejection else "accepted")
    return result
