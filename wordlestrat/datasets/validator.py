"""
Word-list validator.

What this module does:
- Inspect the word list a solver will load (one word per line).
- Count lines that the loader would drop (blank, wrong length, non a–z).
- Detect duplicates; compute SHA-256 of the raw file.
- Check that the opening word is present.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

The loader itself is lenient (it silently drops bad lines); this report is
how you find out what it dropped.

Typical use:
    from wordlestrat.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("wordlestrat/datasets/data/wordle.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from wordlestrat.engine.validation import OPENING_WORD, WORD_LENGTH


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class WordListReport:
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    lines: int           # raw line count
    count: int           # VALID words (before dedupe)
    unique_count: int    # unique valid words (what the loader keeps)
    invalid_lines: int   # lines that are not five a-z letters
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    has_opening_word: bool
    passed: bool
    issues: List[str] = field(default_factory=list)


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


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int, int]:
    """
    Returns:
      (valid_words, invalid_count, line_count)
    """
    valid: List[str] = []
    invalid = 0
    lines = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            lines += 1
            w = raw.strip().lower()
            if len(w) == N and w.isascii() and w.isalpha():
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid, lines


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str, *, opening_word: str = OPENING_WORD, N: int = WORD_LENGTH) -> Dict:
    """
    Validate a word list for length-N play.

    Returns
    -------
    Dict
        JSON-serializable WordListReport. `passed` requires the file to exist,
        hold at least one valid word and contain the opening word. Invalid or
        duplicate lines are reported as issues but don't fail the check.
    """
    p = Path(path)
    if not p.is_file():
        rep = WordListReport(
            path=str(path), exists=False, lines=0, count=0, unique_count=0,
            invalid_lines=0, sha256="", has_opening_word=False, passed=False,
            issues=[f"word list not found: {path}"],
        )
        return asdict(rep)

    valid, invalid, lines = _load_and_check(p, N)
    unique = set(valid)
    issues: List[str] = []

    if not valid:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if len(valid) != len(unique):
        issues.append(f"word list contains {len(valid) - len(unique)} duplicate line(s)")

    has_opening = opening_word in unique
    if not has_opening:
        issues.append(f"opening word {opening_word!r} missing from word list")

    rep = WordListReport(
        path=str(p),
        exists=True,
        lines=lines,
        count=len(valid),
        unique_count=len(unique),
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        has_opening_word=has_opening,
        passed=bool(valid) and has_opening,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words=2315 (uniq=2315, invalid=0, sha=abc123def456) | opening=True | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) "
        f"| opening={report['has_opening_word']} | {status}"
    )
