"""
Lightweight input validation for the two things a user types:
  - a target word for `solve` (exactly WORD_LENGTH characters)
  - a feedback string during `play` (WORD_LENGTH symbols from g/y/b)
"""

from .hints import HINT_KINDS

WORD_LENGTH = 5


def normalize(text: str) -> str:
    """Strip surrounding whitespace (incl. the trailing newline) and lowercase."""
    return text.strip().lower()


def validate_target(word: str, N: int = WORD_LENGTH) -> bool:
    """
    Return True if `word` can be used as a solve target.

    Only the length is checked; the target does not have to be in the loaded
    word list (solving then ends with an exhausted candidate list).
    """
    if not isinstance(word, str):
        return False
    return len(normalize(word)) == N


def validate_feedback(feedback: str, N: int = WORD_LENGTH) -> bool:
    """
    Return True if `feedback` is a usable hint string, e.g. "ggybb".
    Wrong length or any symbol outside g/y/b makes it invalid.
    """
    if not isinstance(feedback, str):
        return False
    f = normalize(feedback)
    return len(f) == N and all(c in HINT_KINDS for c in f)
