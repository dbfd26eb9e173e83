"""
Interactive play: the program guesses, a human reports the feedback.

No target is known here. Each turn the user types one line of WORD_LENGTH
symbols (g=green, y=yellow, b=black) describing how the real game scored the
suggested word. Bad input is rejected and the same turn is asked again.

I/O goes through `read_line` / `write` so tests can script a session.
"""

from __future__ import annotations
import time
from dataclasses import replace
from typing import Callable, Dict, Optional, Sequence

from wordlebot.engine import hints_from_feedback, validate_feedback
from wordlebot.engine.validation import normalize
from wordlebot.solvers import BaseSolver, create_solver
from .core import ABORTED, EXHAUSTED, WON, GameState, advance, new_game, result_dict

INSTRUCTIONS = ("enter hints as string where green='g', yellow='y', and black='b' "
                "(example: ggybb)")

OUTCOME_MESSAGES = {
    WON: "we did it!",
    EXHAUSTED: "word not found, try sourcing more words with --count arg (see --help)",
    ABORTED: "no more input, giving up",
}


def play_step(state: GameState, guess: str, feedback: str) -> GameState:
    """
    Advance `state` with user feedback for `guess` (already validated).
    No turn cap: play goes on until a win or an empty candidate list.
    """
    return advance(state, guess, hints_from_feedback(guess, feedback))


def run_play(
        words: Sequence[str],
        *,
        read_line: Optional[Callable[[], str]] = None,
        write: Optional[Callable[[str], None]] = None,
        solver: Optional[BaseSolver] = None,
) -> Dict:
    """
    Run an interactive session to a terminal state.

    Returns the harness result dict (answer is None: the program never
    learns the word unless the user reports all green).
    """
    read_line = read_line or input
    write = write or print
    solver = solver or create_solver()
    state = new_game(words)
    write(INSTRUCTIONS)

    t0 = time.perf_counter()
    while not state.done:
        guess = solver.next_guess(list(state.candidates))
        write(f"turn: {state.turn + 1}")
        write(f"try: {guess}")
        write("enter hint string:")

        try:
            feedback = normalize(read_line())
        except EOFError:
            state = replace(state, status=ABORTED)
            break

        if not validate_feedback(feedback):
            # Retry the same turn; the counter only moves on valid input.
            write("invalid hint string")
            continue

        state = play_step(state, guess, feedback)
        if state.status != WON:
            write(f"possible words: {len(state.candidates)}")

    write(OUTCOME_MESSAGES[state.status])
    dt = (time.perf_counter() - t0) * 1000.0

    answer = state.history[-1][0] if state.status == WON else None
    return result_dict(state, answer, dt)
