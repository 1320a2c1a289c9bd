"""
Game session primitives.

- Session:         immutable value holding the root word and accepted words.
- start_session:   pick a root word, start with no accepted words.
- submit:          normalize one raw submission and validate it.
- record_accepted: return the session with an accepted word prepended.
- reset_session:   "new word": fresh root, accepted words cleared.

Nothing here keeps hidden state. Each operation takes a Session and, where
the session changes, returns a new one, so a CLI, a notebook or a future
service can drive it the same way.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace
from typing import Optional, Sequence, Tuple

from packages.datasets.start_words import pick_root
from packages.engine import SpellOracle, ValidationResult, normalize_candidate, validate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Session:
    root: str
    used: Tuple[str, ...] = ()  # most recent first


def start_session(words: Sequence[str], rng: Optional[random.Random] = None) -> Session:
    """Begin a session with a random root from `words` (or the default root)."""
    root = pick_root(words, rng)
    logger.info("New session with root word %r", root)
    return Session(root=root)


def submit(session: Session, candidate: str, oracle: SpellOracle) -> Optional[ValidationResult]:
    """
    Validate one raw submission against `session`.

    Returns None for an empty (or whitespace-only) submission, which the
    caller should simply ignore. The session itself is not changed; call
    record_accepted when the result is accepted.
    """
    word = normalize_candidate(candidate)
    if not word:
        return None
    return validate(session.root, session.used, word, oracle)


def record_accepted(session: Session, word: str) -> Session:
    """
    Return a session with `word` at the front of the accepted words.

    Raises:
      ValueError if `word` is already recorded (accepted words are unique).
    """
    if word in session.used:
        raise ValueError(f"{word!r} is already recorded for root {session.root!r}")
    return replace(session, used=(word,) + session.used)


def reset_session(session: Session, words: Sequence[str],
                  rng: Optional[random.Random] = None) -> Session:
    """Replace the root word and clear accepted words."""
    logger.info("Resetting session (root %r, %d accepted)", session.root, len(session.used))
    return start_session(words, rng)
