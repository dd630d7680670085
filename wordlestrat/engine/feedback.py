"""
Structured feedback passed from the game engine to a strategy.

Conventions (pattern characters, shared with scoring and the CSV writer):
  - 'G' : LetterStatus.CORRECT   = right letter, right position
  - 'Y' : LetterStatus.MISPLACED = letter present elsewhere in the answer
  - '-' : LetterStatus.UNUSED    = letter absent, or already accounted for
                                   by other occurrences of the same letter

A GuessFeedback carries the last guessed word, one status per position,
a validity flag and the cumulative list of guesses made so far. The
NO_GUESS_YET sentinel stands for "turn one, nothing guessed".
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple


class LetterStatus(Enum):
    CORRECT = "G"
    MISPLACED = "Y"
    UNUSED = "-"

    @property
    def char(self) -> str:
        return self.value

    @classmethod
    def from_char(cls, ch: str) -> "LetterStatus":
        """Parse a single pattern character ('G', 'Y' or '-')."""
        try:
            return cls(ch.upper())
        except ValueError as e:
            raise ValueError(f"Unknown pattern character: {ch!r}") from e


@dataclass(frozen=True)
class GuessFeedback:
    word: str
    statuses: Tuple[LetterStatus, ...]
    is_valid: bool = True
    guesses: Tuple[str, ...] = ()

    @classmethod
    def from_pattern(cls, word: str, pattern: str,
                     guesses: Iterable[str] = ()) -> "GuessFeedback":
        """
        Build feedback from a 'G'/'Y'/'-' pattern string, e.g.
        GuessFeedback.from_pattern("raise", "YY--G", guesses=["raise"]).
        """
        return cls(
            word=word.strip().lower(),
            statuses=tuple(LetterStatus.from_char(ch) for ch in pattern),
            is_valid=True,
            guesses=tuple(guesses),
        )

    @property
    def is_first_turn(self) -> bool:
        return len(self.guesses) == 0

    @property
    def pattern(self) -> str:
        return "".join(s.char for s in self.statuses)

    @property
    def is_solved(self) -> bool:
        return bool(self.statuses) and all(s is LetterStatus.CORRECT for s in self.statuses)


# Turn-one sentinel: valid, nothing guessed yet.
NO_GUESS_YET = GuessFeedback(word="", statuses=(), is_valid=True, guesses=())
