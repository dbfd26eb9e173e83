from .hints import Hint, get_hints, is_winner, hints_from_feedback, to_pattern
from .constraints import narrow_guesses
from .validation import validate_target, validate_feedback, WORD_LENGTH

__all__ = [
    "Hint", "get_hints", "is_winner", "hints_from_feedback", "to_pattern",
    "narrow_guesses", "validate_target", "validate_feedback", "WORD_LENGTH",
]
