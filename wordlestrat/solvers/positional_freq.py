"""
Positional Letter Frequency (PLF) selection.

Idea:
  Build per-position histograms from the CURRENT candidate set as a
  (positions x letters) count table. Score each candidate by
  sum(counts[pos][word[pos]]) across positions, minus a small penalty per
  repeated letter to keep coverage early.

Ties go to the earliest word in current order (np.argmax returns the
first maximum), so the choice is deterministic.
"""

from __future__ import annotations
from typing import List

import numpy as np

from wordlestrat.engine import ExhaustedError, GuessFeedback
from .base import register
from .guess_solver import GuessSolver


def _encode(words: List[str]) -> np.ndarray:
    """
    Words -> int array of shape (len(words), N) holding letter indices 0..25.
    Anything outside a-z lands in a shared overflow bucket (26).
    """
    codes = np.array([[ord(ch) for ch in w] for w in words], dtype=np.int64) - ord("a")
    codes[(codes < 0) | (codes > 25)] = 26
    return codes


@register
class PositionalFreqSolver(GuessSolver):
    id = "positional_freq"
    name = "Constraint Filter (positional frequency)"
    version = "1.0.0"

    DUPLICATE_PENALTY = 0.25  # subtract this per repeated letter instance beyond the first

    def _pos_counts(self, letters: np.ndarray) -> np.ndarray:
        n_pos = letters.shape[1]
        counts = np.zeros((n_pos, 27), dtype=np.int64)
        for i in range(n_pos):
            counts[i] = np.bincount(letters[:, i], minlength=27)
        return counts

    def choose_best(self, remaining: List[str], feedback: GuessFeedback) -> str:
        if not remaining:
            raise ExhaustedError(f"No remaining words to choose from after {feedback.word!r}")

        letters = _encode(remaining)
        counts = self._pos_counts(letters)

        positions = np.arange(letters.shape[1])
        scores = counts[positions, letters].sum(axis=1).astype(float)

        repeats = np.array([len(w) - len(set(w)) for w in remaining], dtype=float)
        scores -= self.DUPLICATE_PENALTY * repeats

        return remaining[int(np.argmax(scores))]
