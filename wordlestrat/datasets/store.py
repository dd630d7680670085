"""
Word store: the universe of valid five-letter words.

The universe is loaded once, then treated as read-only shared state. It is
handed to each solver explicitly (no module-level global), so several
solvers (several games) can read the same instance safely while each keeps
its own candidate list.

Parsing rules for the source file:
  - one word per line, any case, any surrounding whitespace
  - strip + lowercase
  - keep entries of length exactly WORD_LENGTH
  - de-duplicate, first-seen order wins
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, List, Optional, Tuple

from wordlestrat.engine.validation import WORD_LENGTH
from .io import read_lines

log = logging.getLogger(__name__)

DEFAULT_WORDLIST = Path(__file__).resolve().parent / "data" / "wordle.txt"


def normalize_words(lines: Iterable[str], N: int = WORD_LENGTH) -> List[str]:
    seen = set()
    out: List[str] = []
    for raw in lines:
        w = raw.strip().lower()
        if len(w) != N or w in seen:
            continue
        seen.add(w)
        out.append(w)
    return out


class WordUniverse:
    """Immutable, ordered, duplicate-free collection of candidate words."""

    __slots__ = ("_words", "_index", "_source")

    def __init__(self, words: Iterable[str], source: Optional[str] = None):
        self._words: Tuple[str, ...] = tuple(words)
        self._index: FrozenSet[str] = frozenset(self._words)
        self._source = source

    @classmethod
    def from_words(cls, words: Iterable[str], N: int = WORD_LENGTH) -> "WordUniverse":
        """Build a universe from raw strings, applying the file parsing rules."""
        return cls(normalize_words(words, N))

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    @property
    def source(self) -> Optional[str]:
        return self._source

    def __contains__(self, word: object) -> bool:
        return word in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        where = f" from {self._source}" if self._source else ""
        return f"<WordUniverse {len(self._words)} words{where}>"


def load_word_universe(path: Path | str = DEFAULT_WORDLIST, N: int = WORD_LENGTH) -> WordUniverse:
    """
    Load and normalize a word list into a WordUniverse.

    Raises WordListNotFoundError if the file is missing or unreadable.
    """
    words = normalize_words(read_lines(path), N)
    log.info("Loaded %d %d-letter word(s) from %s", len(words), N, path)
    return WordUniverse(words, source=str(path))
