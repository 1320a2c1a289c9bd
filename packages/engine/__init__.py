from .feasibility import is_possible, remaining_letters
from .constraints import filter_derivable
from .oracle import SpellOracle, WordfreqOracle, WordSetOracle
from .validation import (
    Rejection,
    ValidationResult,
    is_original,
    is_real,
    normalize_candidate,
    validate,
)

__all__ = [
    "is_possible",
    "remaining_letters",
    "filter_derivable",
    "SpellOracle",
    "WordfreqOracle",
    "WordSetOracle",
    "Rejection",
    "ValidationResult",
    "is_original",
    "is_real",
    "normalize_candidate",
    "validate",
]
