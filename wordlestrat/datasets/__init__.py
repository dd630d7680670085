from .validator import validate_wordlist, pretty_summary
from .io import read_lines, write_lines
from .store import WordUniverse, load_word_universe, normalize_words, DEFAULT_WORDLIST

__all__ = [
    "validate_wordlist", "pretty_summary",
    "WordUniverse", "load_word_universe", "normalize_words", "DEFAULT_WORDLIST",
]
