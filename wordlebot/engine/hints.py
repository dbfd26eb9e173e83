"""
Wordle-style hints (feedback) for a single (guess, target) pair.

Conventions:
  - 'g' : green  = letter matches the target at this position
  - 'y' : yellow = letter occurs in the target, but somewhere else
  - 'b' : black  = letter does not occur in the target at all

Classification is containment-based, not count-aware: a guess that repeats a
letter the target holds only once gets a green/yellow hint for every copy.
  get_hints("eerie", "crane") -> y y y b g   (three e's, target has one)
Narrowing relies on the same semantics, so the two stay consistent.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

GREEN = "g"
YELLOW = "y"
BLACK = "b"

# Symbols a human may type when reporting feedback in interactive play
HINT_KINDS = (GREEN, YELLOW, BLACK)


@dataclass(frozen=True)
class Hint:
    """One letter of feedback: `letter` at `position` (0-based) is `kind`."""
    letter: str
    position: int
    kind: str


def get_hints(guess: str, target: str) -> List[Hint]:
    """
    Compute one hint per position of `guess`, in guess order.

    Preconditions:
      - len(guess) == len(target)

    Examples:
      to_pattern(get_hints("crane", "crane")) -> "ggggg"
      to_pattern(get_hints("plumb", "crane")) -> "bbbbb"
      to_pattern(get_hints("react", "crane")) -> "yygyb"
    """
    if len(guess) != len(target):
        raise ValueError(
            f"guess and target must be the same length; got {guess!r} and {target!r}")

    hints: List[Hint] = []
    for pos, c in enumerate(guess):
        if c not in target:
            kind = BLACK
        elif target[pos] == c:
            kind = GREEN
        else:
            kind = YELLOW
        hints.append(Hint(letter=c, position=pos, kind=kind))
    return hints


def is_winner(hints: Iterable[Hint]) -> bool:
    """True iff every hint is green (an empty hint list never wins)."""
    hints = list(hints)
    return bool(hints) and all(h.kind == GREEN for h in hints)


def hints_from_feedback(guess: str, feedback: str) -> List[Hint]:
    """
    Pair a human-typed feedback string with the guess it describes.
    feedback[i] classifies guess[i]; callers validate the string first.
    """
    return [
        Hint(letter=letter, position=pos, kind=kind)
        for pos, (letter, kind) in enumerate(zip(guess, feedback))
    ]


def to_pattern(hints: Iterable[Hint]) -> str:
    """Render hints as a compact string, e.g. "yygyb"."""
    return "".join(h.kind for h in hints)
