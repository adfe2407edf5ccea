"""
Word-list validator for the letter-boxed solver.

What this module does:
- Validate a dictionary file (one word per line, letters A–Z, any case).
- Detect duplicates (case-insensitive) and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("packages/datasets/data/enable_dict.txt")
    print(pretty_summary(rep))

Blank lines are skipped silently (word lists commonly end with one); anything
else that isn't purely alphabetic counts as invalid. The word source drops
those lines the same way at load time, so validation is advisory.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class WordListReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (upper-cased)
    invalid_lines: int   # number of invalid lines encountered
    min_length: int      # shortest valid word (0 if none)
    max_length: int      # longest valid word (0 if none)
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


def _is_word(token: str) -> bool:
    return token.isascii() and token.isalpha()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be ASCII letters only (case is ignored)
      - empty/whitespace-only lines are skipped, not counted

    Returns:
      (valid_words_uppercased, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                continue
            if _is_word(w):
                valid.append(w.upper())
            else:
                invalid += 1

    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str) -> Dict:
    """
    Validate one dictionary file.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordListReport schema) with
        counts, SHA-256, invalid/duplicate diagnostics, `passed` (non-empty
        and no invalid lines) and `issues`.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"word list not found: {path}")
        rep = WordListReport(str(path), False, 0, "", 0, 0, 0, 0, False, issues)
        return asdict(rep)

    words, invalid = _load_and_check(p)
    unique = set(words)

    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if len(words) != len(unique):
        # duplicates are harmless (set union at load time) but worth knowing about
        issues.append(f"word list contains {len(words) - len(unique)} duplicate line(s)")

    lengths = [len(w) for w in unique]
    rep = WordListReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(unique),
        invalid_lines=invalid,
        min_length=min(lengths) if lengths else 0,
        max_length=max(lengths) if lengths else 0,
        passed=bool(words) and invalid == 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        enable_dict.txt: words=172823 (uniq=172823, len=2..28, sha=abc123...) | OK
    """
    name = Path(report["path"]).name
    status = "OK" if report["passed"] else "FAIL"
    if not report["exists"]:
        return f"{name}: missing | {status}"
    # abbreviate sha to 12 chars for readability
    sha = (report.get("sha256") or "")[:12]
    return (
        f"{name}: words={report['count']} (uniq={report['unique_count']}, "
        f"len={report['min_length']}..{report['max_length']}, sha={sha}) "
        f"| invalid={report['invalid_lines']} | {status}"
    )
