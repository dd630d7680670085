"""
Letter-Frequency selection (distinct-letter coverage).

Idea:
  - Build a letter histogram over the CURRENT candidate set (already filtered
    by past feedback). Score each candidate as the sum of its DISTINCT
    letters' frequencies. Pick the max; ties go to the earliest word in
    current order, so the choice is reproducible.

Why it works:
  - Early turns: favors words that cover common letters (shrinks space fast).
  - Later turns: histogram reflects constraints; top-scoring word tends to fit.

Notes:
  - Ignores positions (slot-specific frequencies are positional_freq).
  - Only scores remaining candidates; it never probes with eliminated words.
"""

from __future__ import annotations
from collections import Counter
from typing import List

from wordlestrat.engine import ExhaustedError, GuessFeedback
from .base import register
from .guess_solver import GuessSolver


@register
class LetterFreqSolver(GuessSolver):
    id = "letter_freq"
    name = "Constraint Filter (letter frequency)"
    version = "1.0.0"

    def _score_word(self, w: str, counts: Counter) -> int:
        """
        Sum letter frequencies but count each letter at most once per word
        (prefer 'slate' over 'sleet' when counts are similar).
        """
        return sum(counts[ch] for ch in set(w))

    def choose_best(self, remaining: List[str], feedback: GuessFeedback) -> str:
        if not remaining:
            raise ExhaustedError(f"No remaining words to choose from after {feedback.word!r}")

        counts = Counter("".join(remaining))

        best_score = None
        best = remaining[0]
        for w in remaining:
            s = self._score_word(w, counts)
            if best_score is None or s > best_score:
                best_score, best = s, w
        return best
