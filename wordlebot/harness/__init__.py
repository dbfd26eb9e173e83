from .core import (GameState, new_game, advance, solve_step, run_solve, WORDLE_MAX_TURNS,
                   GUESSING, WON, EXHAUSTED, TURN_LIMIT, ABORTED)
from .interactive import play_step, run_play

__all__ = [
    "GameState", "new_game", "advance", "solve_step", "run_solve", "WORDLE_MAX_TURNS",
    "GUESSING", "WON", "EXHAUSTED", "TURN_LIMIT", "ABORTED", "play_step", "run_play",
]
