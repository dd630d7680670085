"""
I/O utilities for batch runs.

Every batch run produces two files named after one run id:
  run_<id>.csv            one row per game: solver, answer, success, guesses,
                          time_ms, error, then guess_k / patt_k for each turn
  run_<id>_manifest.json  run_id, git_commit, config (CLI flags), wordlist
                          (validate_wordlist report), solver_id, summary
                          (summarize(): games, wins, win_rate, mean_guesses,
                          exhausted, histogram)

Notes:
- Patterns are prefixed with an apostrophe to keep Excel from interpreting
  strings like "-GYY-" as formulas (which would display as #NAME?).
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

import numpy as np


def _excel_safe_pattern(patt: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "-GYY-" -> "'-GYY-"
    """
    return "'" + patt if patt else patt


def summarize(results: List[Dict], max_turns: int) -> Dict:
    """
    Aggregate a batch of results.

    Returns a JSON-serializable dict:
      games, wins, win_rate, mean_guesses (wins only, None if no wins),
      exhausted (games that ended with an ExhaustedError),
      histogram (list: index k-1 holds the number of wins in k guesses)
    """
    n = len(results)
    success = np.array([bool(r["success"]) for r in results], dtype=bool)
    guesses = np.array([int(r["guesses"]) for r in results], dtype=np.int64)

    won = guesses[success]
    hist = np.bincount(won, minlength=max_turns + 1)[1:max_turns + 1]

    return {
        "games": n,
        "wins": int(success.sum()),
        "win_rate": float(success.mean()) if n else 0.0,
        "mean_guesses": float(won.mean()) if won.size else None,
        "exhausted": sum(1 for r in results if r.get("error")),
        "histogram": [int(x) for x in hist],
    }


def write_csv(results: List[Dict], path: str, max_turns: int) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      solver, answer, success, guesses, time_ms, error,
      guess_1, patt_1, guess_2, patt_2, ..., guess_max_turns, patt_max_turns

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["solver", "answer", "success", "guesses", "time_ms", "error"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"patt_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "answer": r["answer"],
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
                "error": r.get("error") or "",
            }

            # Expand history into fixed columns (Excel-safe patterns)
            hist = r.get("history", [])
            for i in range(1, max_turns + 1):
                if i <= len(hist):
                    g, patt = hist[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"patt_{i}"] = _excel_safe_pattern(patt)
                else:
                    row[f"guess_{i}"] = ""
                    row[f"patt_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and word-list validation summary.

    Keys are listed in the module docstring; values must be JSON-serializable.
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
