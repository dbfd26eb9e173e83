"""
Most Frequent solver.

Strategy:
  - Candidates arrive ordered by descending word frequency (file order of the
    source list), and narrowing never reorders them.
  - So the most common remaining word is simply the first candidate.

This is the only guess policy: no letter scoring, no information gain.
"""

from __future__ import annotations

from typing import List
from .base import BaseSolver, register


@register
class MostFrequentSolver(BaseSolver):
    id = "most_frequent"

    def next_guess(self, candidates: List[str]) -> str:
        if not candidates:
            raise ValueError("no candidates left to guess from")
        return candidates[0]
