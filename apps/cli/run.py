# apps/cli/run.py
"""
CLI entry point for running a strategy over a batch of games.

This script:
  1) Validates the word list (prints counts + SHA, checks the opening word).
  2) Loads the word universe and instantiates the requested solver.
  3) Plays every answer (or a seeded sample) with a tqdm progress bar and writes:
       - CSV:  per-case results + guess/pattern history columns
       - JSON: manifest with config, word-list report, summary, git commit

Usage:
    python -m apps.cli.run --solver letter_freq --sample 200
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

from tqdm import tqdm

from wordlestrat.datasets import DEFAULT_WORDLIST, load_word_universe, pretty_summary, validate_wordlist
from wordlestrat.engine import ConfigurationError, OPENING_WORD, validate_guess
from wordlestrat.harness import WORDLE_MAX_TURNS, run_case, summarize
from wordlestrat.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordlestrat.solvers import create_solver, get_solver_ids

log = logging.getLogger("wordlestrat.cli")


def build_parser() -> argparse.ArgumentParser:
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="wordlestrat: run a guessing strategy over many games")
    ap.add_argument("--solver", default="first_remaining",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--wordlist", default=str(DEFAULT_WORDLIST),
                    help="word universe the solver guesses from (one word per line)")
    ap.add_argument("--answers",
                    help="optional answer pool to play against (default: the word list itself)")
    ap.add_argument("--opening", default=OPENING_WORD, help="fixed first guess")
    ap.add_argument("--sample", type=int,
                    help="play only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["bar", "off"], default="bar",
                    help="show a progress bar on stderr")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 1) Validate the word list up front and show what the loader will see
    rep = validate_wordlist(args.wordlist, opening_word=args.opening)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        log.warning("word list: %s", issue)

    # 2) Load universe + solver; both fail fast on bad configuration
    try:
        universe = load_word_universe(args.wordlist)
        solver = create_solver(args.solver, universe, opening_word=args.opening)
        answers = list(load_word_universe(args.answers)) if args.answers else list(universe)
    except (ConfigurationError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    off_list = [a for a in answers if not validate_guess(a, universe)]
    if off_list:
        log.warning("%d answer(s) are not valid guesses in the word list, e.g. %s",
                    len(off_list), off_list[:5])

    # 3) Choose cases (deterministic sample by seed)
    if args.sample and args.sample < len(answers):
        pool = list(answers)
        random.Random(args.seed).shuffle(pool)
        cases = pool[: args.sample]
    else:
        cases = answers

    # 4) Play
    results = []
    for ans in tqdm(cases, ncols=80, desc=solver.id, unit="game", disable=args.progress == "off"):
        r = run_case(solver, ans)
        r["solver_id"] = solver.id
        results.append(r)

    summary = summarize(results, WORDLE_MAX_TURNS)

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=WORDLE_MAX_TURNS)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "solver_id": solver.id,
        "summary": summary,
    }, str(manifest_path))

    mean = summary["mean_guesses"]
    print(
        f"{solver.id}: {summary['wins']}/{summary['games']} solved "
        f"({summary['win_rate']:.1%}), mean guesses "
        f"{'n/a' if mean is None else f'{mean:.3f}'}, exhausted {summary['exhausted']}"
    )
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
