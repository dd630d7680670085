"""
Candidate filtering given the feedback for one guess.

Given:
  - a GuessFeedback (guessed word + one LetterStatus per position)

Derive:
  - exact        : positions that must hold a given letter      (CORRECT)
  - forbidden    : (letter, position) pairs that must not occur (MISPLACED,
                   and UNUSED duplicates of a letter seen elsewhere)
  - required     : letters that must appear somewhere            (MISPLACED)
  - min_counts   : minimum total occurrences per letter          (CORRECT + MISPLACED)
  - banned       : letters that must not appear at all           (UNUSED, no
                   positive occurrence anywhere else in the guess)

Repeated letters matter: in "sissy" scored against a word with a single
's', one 's' is CORRECT and the others are UNUSED. Those UNUSED marks only
mean "no further 's' here", so 's' is forbidden at those positions but
not banned outright.

filter_candidates() never mutates its input; it returns a new list in the
original order.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Tuple

from .feedback import GuessFeedback, LetterStatus

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Constraints:
    exact: Tuple[Tuple[int, str], ...]          # (position, letter), sorted
    forbidden: FrozenSet[Tuple[str, int]]
    required: FrozenSet[str]
    min_counts: Tuple[Tuple[str, int], ...]     # (letter, minimum), sorted
    banned: FrozenSet[str]

    def admits(self, word: str) -> bool:
        """True if `word` is consistent with every recorded constraint."""
        if any(ch in self.banned for ch in word):
            return False

        for i, ch in self.exact:
            if word[i] != ch:
                return False

        for ch, i in self.forbidden:
            if word[i] == ch:
                return False

        counts = Counter(word)
        for ch in self.required:
            if counts[ch] == 0:
                return False
        for ch, n in self.min_counts:
            if counts[ch] < n:
                return False

        return True

    def describe(self) -> str:
        """Compact one-liner for debug logs."""
        at = dict(self.exact)
        exact = "".join(at.get(i, ".") for i in range(max(at, default=-1) + 1))
        return (
            f"exact={exact or '-'} banned={''.join(sorted(self.banned)) or '-'} "
            f"min={dict(self.min_counts)} "
            f"forbidden={sorted(self.forbidden)}"
        )


def derive_constraints(feedback: GuessFeedback) -> Constraints:
    """
    Turn one guess's feedback into a Constraints value.

    Raises ValueError when the word and status list are not aligned.
    """
    word = feedback.word
    statuses = feedback.statuses
    if len(word) != len(statuses):
        raise ValueError(
            f"Feedback misaligned: word {word!r} has {len(word)} letters "
            f"but {len(statuses)} statuses")

    exact: Dict[int, str] = {}
    forbidden = set()
    required = set()
    min_counts: Counter = Counter()
    banned = set()

    for i, (ch, status) in enumerate(zip(word, statuses)):
        if status is LetterStatus.CORRECT:
            exact[i] = ch
            min_counts[ch] += 1

        elif status is LetterStatus.MISPLACED:
            forbidden.add((ch, i))
            required.add(ch)
            min_counts[ch] += 1

        else:
            # Is this letter positively marked at another position?
            used_elsewhere = any(
                j != i and other == ch and statuses[j] is not LetterStatus.UNUSED
                for j, other in enumerate(word)
            )
            if used_elsewhere:
                forbidden.add((ch, i))
            else:
                banned.add(ch)

    return Constraints(
        exact=tuple(sorted(exact.items())),
        forbidden=frozenset(forbidden),
        required=frozenset(required),
        min_counts=tuple(sorted(min_counts.items())),
        banned=frozenset(banned),
    )


def filter_candidates(words: Iterable[str], constraints: Constraints) -> List[str]:
    """
    Keep only words admitted by `constraints`.

    Returns:
      a NEW list of consistent candidates (order preserved as in `words`).
    """
    out = [w for w in words if constraints.admits(w)]
    log.debug("filter: %d candidate(s) left (%s)", len(out), constraints.describe())
    return out
