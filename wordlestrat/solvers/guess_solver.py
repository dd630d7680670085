"""
Constraint-filtering solver (baseline selection).

Strategy:
  - Turn one: play a fixed opening word that must be in the universe.
  - Later turns: derive constraints from the previous guess's feedback,
    filter the remaining candidates (non-mutating, order preserved), then
    pick one with choose_best() and drop it from the candidate list.

Selection:
  - choose_best() here returns the first remaining word. Subclasses swap in
    a scoring policy by overriding choose_best(); everything else is shared.
  - Any override must be deterministic for the same (remaining, feedback)
    and must return a member of `remaining`.

State:
  - remaining_words is owned by this instance; reset() copies the universe
    into it, and it only ever shrinks within a game.
"""

from __future__ import annotations

import logging
from typing import List

from wordlestrat.datasets.store import WordUniverse
from wordlestrat.engine import (
    ConfigurationError, ExhaustedError, GuessFeedback, InvalidStateError, OPENING_WORD,
    derive_constraints, filter_candidates,
)
from .base import BaseSolver, register

log = logging.getLogger(__name__)


@register
class GuessSolver(BaseSolver):
    id = "first_remaining"
    name = "Constraint Filter (first remaining)"
    version = "1.0.0"

    def __init__(self, universe: WordUniverse, opening_word: str = OPENING_WORD):
        super().__init__(universe)
        opening_word = opening_word.strip().lower()
        if not len(universe):
            raise ConfigurationError("Word universe is empty")
        if opening_word not in universe:
            raise ConfigurationError(f"Opening word {opening_word!r} is not in the word universe")
        self.opening_word = opening_word
        self.remaining_words: List[str] = []
        self.reset()

    def reset(self) -> None:
        self.remaining_words = list(self.universe)

    def pick_next_guess(self, feedback: GuessFeedback) -> str:
        """
        Determine the next word to guess given feedback from the previous guess.

        Args:
            feedback: the engine's result for the last guess, or NO_GUESS_YET
                      on turn one.

        Returns:
            A five-letter lowercase word from the universe, never repeated
            within the current game.

        Raises:
            InvalidStateError: feedback.is_valid is False.
            ExhaustedError:    no candidates survive the filter.
        """
        if not feedback.is_valid:
            raise InvalidStateError("pick_next_guess called with invalid feedback")

        if feedback.is_first_turn:
            self._discard(self.opening_word)
            return self.opening_word

        before = len(self.remaining_words)
        constraints = derive_constraints(feedback)
        self.remaining_words = filter_candidates(self.remaining_words, constraints)
        log.debug("%s: %s -> %s narrowed %d -> %d", self.id, feedback.word, feedback.pattern,
                  before, len(self.remaining_words))

        choice = self.choose_best(self.remaining_words, feedback)
        self._discard(choice)
        return choice

    def choose_best(self, remaining: List[str], feedback: GuessFeedback) -> str:
        """
        Pick the best of the remaining words.

        Baseline policy: the first word in current order.
        """
        if not remaining:
            raise ExhaustedError(f"No remaining words to choose from after {feedback.word!r}")
        return remaining[0]

    def _discard(self, word: str) -> None:
        self.remaining_words = [w for w in self.remaining_words if w != word]
