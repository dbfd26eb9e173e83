"""
Game harness core primitives.

- GameState:  explicit turn state (turn counter, candidates, status, history).
- new_game:   initial state for a loaded word list.
- solve_step: one automatic turn against a known target.
- run_solve:  play automatic turns until a terminal state.
- Enforces Wordle's 6-turn limit for automatic solving; interactive play
  runs until the user reports a win or no candidates remain.

Each step returns a NEW GameState; nothing here holds global or shared state,
so the same functions drive the automatic solver and interactive play.

State machine:
    guessing --all green-------------> won
    guessing --turn limit (solve)----> turn_limit
    guessing --no candidates left----> exhausted
    guessing --otherwise-------------> guessing (candidates narrowed)
"""

from __future__ import annotations
import time
from dataclasses import dataclass, field, replace
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from wordlebot.engine import Hint, get_hints, is_winner, narrow_guesses, to_pattern
from wordlebot.solvers import BaseSolver, create_solver

# Single source of truth for Wordle turn budget.
WORDLE_MAX_TURNS = 6

GUESSING = "guessing"
WON = "won"
EXHAUSTED = "exhausted"
TURN_LIMIT = "turn_limit"
ABORTED = "aborted"  # interactive input ended before a terminal state

TERMINAL = (WON, EXHAUSTED, TURN_LIMIT, ABORTED)


@dataclass(frozen=True)
class GameState:
    turn: int                     # turns played so far (the next turn is turn + 1)
    candidates: Tuple[str, ...]   # most frequent first
    status: str = GUESSING
    history: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)  # (guess, pattern)

    @property
    def done(self) -> bool:
        return self.status in TERMINAL


def new_game(words: Sequence[str]) -> GameState:
    """Turn 0 with every loaded word as a candidate."""
    candidates = tuple(words)
    return GameState(turn=0, candidates=candidates,
                     status=GUESSING if candidates else EXHAUSTED)


def advance(state: GameState, guess: str, hints: List[Hint],
            max_turns: Optional[int] = None) -> GameState:
    """
    Apply one turn's hints to `state`.

    `max_turns` caps the game (None = no cap). Win is checked before the
    turn limit, so a correct final guess still wins; candidates are only
    narrowed when another turn will follow.
    """
    if state.done:
        raise ValueError(f"game is already over ({state.status})")

    turn = state.turn + 1
    history = state.history + ((guess, to_pattern(hints)),)

    if is_winner(hints):
        return replace(state, turn=turn, status=WON, history=history)
    if max_turns is not None and turn >= max_turns:
        return replace(state, turn=turn, status=TURN_LIMIT, history=history)

    candidates = tuple(narrow_guesses(state.candidates, hints))
    return GameState(
        turn=turn,
        candidates=candidates,
        status=GUESSING if candidates else EXHAUSTED,
        history=history,
    )


def solve_step(state: GameState, solver: BaseSolver,
               target: str) -> Tuple[GameState, str, List[Hint]]:
    """
    Guess the solver's pick, score it against `target`, and advance.

    Returns:
        (next_state, guess, hints)
    """
    guess = solver.next_guess(list(state.candidates))
    hints = get_hints(guess, target)
    return advance(state, guess, hints, WORDLE_MAX_TURNS), guess, hints


def result_dict(state: GameState, answer: Optional[str], time_ms: float) -> Dict:
    """Flatten a terminal state into the harness result schema."""
    return {
        "answer": answer,
        "success": state.status == WON,
        "status": state.status,
        "guesses": state.turn,
        "time_ms": time_ms,
        "history": list(state.history),
        "remaining": len(state.candidates),
    }


def run_solve(
        words: Sequence[str],
        target: str,
        *,
        solver: Optional[BaseSolver] = None,
        on_turn: Optional[Callable[[GameState, str, List[Hint]], None]] = None,
) -> Dict:
    """
    Execute one game until the solver wins, runs out of candidates, or the
    turn budget is exhausted.

    Args:
        words:   loaded candidate words, most frequent first
        target:  the hidden word (same length as the words)
        solver:  guess policy (default: most_frequent)
        on_turn: called after every turn with (state, guess, hints),
                 e.g. to print progress

    Returns:
        dict with keys:
            answer, success (bool), status, guesses (int), time_ms (float),
            history (list[(guess, pattern)]), remaining (int)
    """
    solver = solver or create_solver()
    state = new_game(words)

    t0 = time.perf_counter()
    while not state.done:
        state, guess, hints = solve_step(state, solver, target)
        if on_turn is not None:
            on_turn(state, guess, hints)
    dt = (time.perf_counter() - t0) * 1000.0

    return result_dict(state, target, dt)
