from .errors import HintConflictError, HintSyntaxError, WordError
from .hints import UNKNOWN, Hint, Hints, make_hints
from .scoring import score, calculate_hints, hints_from_feedback
from .constraints import matches_hints, filter_candidates
from .merge import merge_hints
from .codec import parse_hints, format_hints
from .validation import parse_word, check_words, validate_guess

__all__ = [
    "HintConflictError", "HintSyntaxError", "WordError",
    "UNKNOWN", "Hint", "Hints", "make_hints",
    "score", "calculate_hints", "hints_from_feedback",
    "matches_hints", "filter_candidates",
    "merge_hints",
    "parse_hints", "format_hints",
    "parse_word", "check_words", "validate_guess",
]
