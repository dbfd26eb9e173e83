"""
Candidate narrowing given hints.

Given:
  - the current candidate list (ordered by descending word frequency)
  - a batch of hints from the latest guess

Return:
  - the candidates that satisfy EVERY hint, in their original order.

Filtering is conjunctive and never relaxed, so applying each turn's hints in
sequence keeps the list consistent with all feedback seen so far.
"""

from typing import Iterable, List

from .hints import BLACK, GREEN, YELLOW, Hint


def _satisfies(word: str, hint: Hint) -> bool:
    if hint.kind == GREEN:
        return word[hint.position] == hint.letter
    if hint.kind == YELLOW:
        return word[hint.position] != hint.letter and hint.letter in word
    if hint.kind == BLACK:
        return hint.letter not in word
    return True


def narrow_guesses(words: Iterable[str], hints: Iterable[Hint]) -> List[str]:
    """
    Keep only the words consistent with all `hints`.

    Args:
      words : candidate words (order is preserved, no re-sort)
      hints : hints to apply; each one must hold for a word to survive

    Returns:
      List[str] of surviving candidates. Never longer than `words`, and
      applying the same hints again returns the same list.
    """
    hints = list(hints)
    out: List[str] = []

    for w in words:
        # Hints are per-position, so a word shorter than a hint's position
        # can never satisfy it.
        if all(h.position < len(w) and _satisfies(w, h) for h in hints):
            out.append(w)

    return out
