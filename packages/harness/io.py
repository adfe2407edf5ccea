"""
I/O utilities for solver runs.

Responsibilities:
- write_csv:     flatten ranked solutions into a tidy CSV (one row per chain).
- write_manifest:dump a JSON manifest with config, dictionary hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable
import csv
import json
import subprocess
import datetime as dt

from packages.engine import ScoredSolution

CSV_FIELDS = ["rank", "score", "num_words", "letters_used", "words"]


def write_csv(solutions: Iterable[ScoredSolution], path: str) -> str:
    """
    Serialize ranked solutions to CSV.

    Schema (columns):
      rank, score, num_words, letters_used, words

    `words` is the chain joined with spaces, in chain order.
    Returns the path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        w.writeheader()
        for rank, sol in enumerate(solutions, start=1):
            w.writerow({
                "rank": rank,
                "score": round(float(sol.score), 3),
                "num_words": len(sol.words),
                "letters_used": sol.letters_used,
                "words": " ".join(sol.words),
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest for a run.

    Typical keys:
      - run_id, git_commit
      - config: CLI args and search settings
      - dictionaries: validate_wordlist(...) reports
      - stats: attempts / accepted / elapsed / timed_out
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, default=str)
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
