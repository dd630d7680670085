"""
Lightweight guess validation.

A guess is valid iff:
  - it is a string
  - it is alphabetic a–z only
  - it has exact length WORD_LENGTH
  - it exists in the provided universe

This is stricter than the loader, which keeps any five-character entry.
The harness only checks universe membership; the CLI uses this to flag
answers that wouldn't pass as real a–z guesses.
"""

from typing import Container

WORD_LENGTH = 5
OPENING_WORD = "canoe"


def validate_guess(word: str, universe: Container[str], N: int = WORD_LENGTH) -> bool:
    """
    Return True if `word` is a valid guess per the rules above.

    Args:
      word     : proposed guess
      universe : anything supporting `in` (a WordUniverse, a set, a list)
      N        : required word length
    """
    if not isinstance(word, str):
        return False

    w = word.strip().lower()

    if len(w) != N or not (w.isascii() and w.isalpha()):
        return False

    return w in universe
