"""
I/O utilities for survey runs.

Responsibilities:
- write_csv:     flatten per-root survey results into a tidy CSV (one row per root).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

FIELDS = ["root", "length", "derivable", "real", "longest", "sample"]


def write_csv(results: List[Dict], path: str, sample_size: int = 5) -> str:
    """
    Serialize survey results to CSV.

    Schema (columns):
      root, length, derivable, real, longest, sample

    Args:
      results     : list of dicts with keys root, derivable (list), real (list).
      path        : output CSV path.
      sample_size : how many real words to list in the `sample` column.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()

        for r in results:
            real = r.get("real", [])
            # longest first, then alphabetical, so the sample is stable
            ranked = sorted(real, key=lambda s: (-len(s), s))
            w.writerow({
                "root": r["root"],
                "length": len(r["root"]),
                "derivable": len(r.get("derivable", [])),
                "real": len(real),
                "longest": ranked[0] if ranked else "",
                "sample": " ".join(ranked[:sample_size]),
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and word-list validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (words, vocab size, min zipf, seed, sample, outdir)
      - wordlist: output of datasets.validate_wordlist(...)
      - num_roots: number of roots surveyed
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
