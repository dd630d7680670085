"""
Wordle-style scoring (feedback) for a single (guess, answer) pair.

This is the game-engine side of the contract: it produces the per-position
statuses that strategies consume. Strategies never call it while solving;
the harness and the tests do.

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all CORRECT letters and counts the remaining
     (unmatched) letters from the answer.
  2) Second pass marks MISPLACED only if the letter still has remaining
     count; everything else stays UNUSED.
"""

from collections import Counter
from typing import Tuple

from .feedback import LetterStatus


def score_statuses(guess: str, answer: str) -> Tuple[LetterStatus, ...]:
    """
    Compute per-position LetterStatus values for `guess` against `answer`.

    Raises ValueError if the two words differ in length.
    """
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    if len(guess) != len(answer):
        raise ValueError(f"Guess and answer must be the same length: {guess!r} vs {answer!r}")

    n = len(guess)
    statuses = [LetterStatus.UNUSED] * n

    # Pass 1: exact hits, and leftover counts from the answer
    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            statuses[i] = LetterStatus.CORRECT
        else:
            remaining[a] += 1

    # Pass 2: misplaced, capped by the true multiplicity in the answer
    for i, g in enumerate(guess):
        if statuses[i] is LetterStatus.CORRECT:
            continue
        if remaining[g] > 0:
            statuses[i] = LetterStatus.MISPLACED
            remaining[g] -= 1

    return tuple(statuses)


def score(guess: str, answer: str) -> str:
    """
    Same as score_statuses(), rendered as a 'G'/'Y'/'-' pattern string.

    Examples:
      score("belle", "level") -> "-GYYY"
      score("lemon", "level") -> "GG---"
    """
    return "".join(s.char for s in score_statuses(guess, answer))
