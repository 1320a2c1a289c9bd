"""
Word-list validator for rootword.

What this module does:
- Validate a root-word list (start.txt) before a game or survey uses it.
- Enforce formatting rules (lowercase, a–z only, at least `min_len` letters, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("packages/datasets/data/start.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
from collections import Counter
import hashlib

from packages.engine.validation import MIN_WORD_LENGTH


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered


@dataclass
class ValidationReport:
    """Top-level validation result for one word list."""
    min_len: int
    words: FileReport
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, min_len: int) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - must have at least `min_len` letters
      - blank lines inside the file are INVALID (the final newline is fine)

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                invalid += 1
                continue
            # require already-lowercase & alphabetic & long enough
            if w.lower() == w and w.isascii() and w.isalpha() and len(w) >= min_len:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str, min_len: int = MIN_WORD_LENGTH) -> Dict:
    """
    Validate a root-word list.

    Parameters
    ----------
    path : str
        Path to the list (one word per line).
    min_len : int
        Shortest acceptable root word. A root shorter than the minimum
        submission length can never yield an accepted word.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with:
          - count, unique count, invalid line count, SHA-256
          - `passed` boolean (strict: requires non-empty, no invalids, no duplicates)
          - `issues` (list of strings) to surface any problems
    """
    issues: List[str] = []
    p = Path(path)

    if not p.is_file():
        issues.append(f"word list not found: {path}")
        rep = ValidationReport(
            min_len=min_len,
            words=FileReport(str(path), False, 0, "", 0, 0),
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    try:
        words, invalid = _load_and_check(p, min_len)
        sha = _sha256_file(p)
    except (OSError, UnicodeDecodeError) as e:
        # unreadable or not UTF-8
        issues.append(f"word list unreadable: {e}")
        rep = ValidationReport(
            min_len=min_len,
            words=FileReport(str(p), True, 0, "", 0, 0),
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    counts = Counter(words)

    report = FileReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=sha,
        unique_count=len(counts),
        invalid_lines=invalid,
    )

    if report.count == 0:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if report.count != report.unique_count:
        dupes = sorted(w for w, n in counts.items() if n > 1)[:5]
        issues.append(f"word list contains duplicate lines (e.g., {dupes})")

    passed = report.count > 0 and invalid == 0 and report.count == report.unique_count

    rep = ValidationReport(min_len=min_len, words=report, passed=passed, issues=issues)
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words=packages/datasets/data/start.txt | count=180 (uniq=180, sha=abc123...) | OK
    """
    w = report["words"]
    status = "OK" if report["passed"] else "FAIL"
    sha = (w.get("sha256") or "")[:12]
    line = f"words={w['path']} | count={w['count']} (uniq={w['unique_count']}, sha={sha}) | {status}"
    if report["issues"]:
        line += " | " + "; ".join(report["issues"])
    return line
