"""
Error types raised by the strategy layer.

  - ConfigurationError:   startup problems (missing word list, opening word
                          not in the universe). Fatal; nothing can run.
  - InvalidStateError:    pick_next_guess() called with invalid feedback.
                          A caller bug, not something to recover from.
  - ExhaustedError:       the candidate set emptied before a guess could be
                          chosen (contradictory feedback, or the answer is
                          not in the loaded universe).

None of these are retried anywhere; every operation is deterministic.
"""


class SolverError(Exception):
    """Base class for everything the strategy layer raises on purpose."""


class ConfigurationError(SolverError):
    pass


class WordListNotFoundError(ConfigurationError, FileNotFoundError):
    """The word-list source is missing or unreadable."""


class InvalidStateError(SolverError):
    pass


class ExhaustedError(SolverError):
    pass
