"""
Reference game engine (harness) for driving a strategy.

- run_case:  play a single puzzle (one hidden answer) with a given solver.
- run_batch: play many puzzles in sequence (optionally a sample prefix).
- Enforces Wordle's 6-turn limit at the harness layer.

The harness owns everything a strategy doesn't: answer selection, scoring,
turn sequencing and the cumulative guess history carried in each
GuessFeedback. It is UI-agnostic so the CLI, tests or a notebook can share it.
"""

from __future__ import annotations
import logging
import time
from typing import Dict, List, Iterable, Tuple

from wordlestrat.engine import (
    ExhaustedError, GuessFeedback, NO_GUESS_YET, score_statuses,
)

log = logging.getLogger(__name__)

# Single source of truth for Wordle turn budget.
WORDLE_MAX_TURNS = 6


def _assert_wordle_turns(max_turns: int) -> None:
    """Guardrail: prevent accidental runs with >6 turns."""
    if max_turns != WORDLE_MAX_TURNS:
        raise ValueError(f"max_turns must be {WORDLE_MAX_TURNS} for Wordle-like rules; got {max_turns}")


def run_case(solver, answer: str, *, max_turns: int = WORDLE_MAX_TURNS) -> Dict:
    """
    Play one game until the solver wins or the turn budget is exhausted.

    Args:
        solver:    a BaseSolver (reset() + pick_next_guess(feedback))
        answer:    the hidden word for this case
        max_turns: must be 6 (Wordle rule; enforced)

    Returns:
        dict with keys:
            answer (str), success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern)]), error (str | None)

    A solver that runs out of candidates (ExhaustedError) loses the case;
    the message is kept in `error`. Any other exception propagates.
    A guess outside the solver's universe raises ValueError.
    """
    _assert_wordle_turns(max_turns)
    answer = answer.strip().lower()

    solver.reset()

    history: List[Tuple[str, str]] = []
    feedback = NO_GUESS_YET
    error = None
    success = False

    t0 = time.perf_counter()
    for _turn in range(1, WORDLE_MAX_TURNS + 1):
        try:
            guess = solver.pick_next_guess(feedback)
        except ExhaustedError as e:
            log.warning("solver %s exhausted on %r: %s", solver.id, answer, e)
            error = str(e)
            break

        if guess not in solver.universe:
            raise ValueError(f"Solver {solver.id} returned a guess outside its universe: {guess!r}")

        statuses = score_statuses(guess, answer)
        feedback = GuessFeedback(
            word=guess,
            statuses=statuses,
            is_valid=True,
            guesses=feedback.guesses + (guess,),
        )
        history.append((guess, feedback.pattern))

        if feedback.is_solved:
            success = True
            break

    dt = (time.perf_counter() - t0) * 1000.0
    return {
        "answer": answer,
        "success": success,
        "guesses": len(history),
        "time_ms": dt,
        "history": history,
        "error": error,
    }


def run_batch(
        solver,
        answers: Iterable[str],
        *,
        max_turns: int = WORDLE_MAX_TURNS,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back with the same solver instance. If 'sample'
    is provided, only the first K answers are used to speed up quick
    experiments.
    """
    _assert_wordle_turns(max_turns)

    pool = list(answers)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for ans in pool:
        r = run_case(solver, ans, max_turns=WORDLE_MAX_TURNS)
        r["solver_id"] = solver.id
        out.append(r)
    return out
