from .errors import (
    SolverError, ConfigurationError, WordListNotFoundError, InvalidStateError, ExhaustedError,
)
from .feedback import LetterStatus, GuessFeedback, NO_GUESS_YET
from .scoring import score, score_statuses
from .constraints import Constraints, derive_constraints, filter_candidates
from .validation import validate_guess, WORD_LENGTH, OPENING_WORD

__all__ = [
    "SolverError", "ConfigurationError", "WordListNotFoundError", "InvalidStateError",
    "ExhaustedError",
    "LetterStatus", "GuessFeedback", "NO_GUESS_YET",
    "score", "score_statuses",
    "Constraints", "derive_constraints", "filter_candidates",
    "validate_guess", "WORD_LENGTH", "OPENING_WORD",
]
