import pytest

from wordlebot.engine import get_hints
from wordlebot.harness import (run_solve, run_play, new_game, play_step, advance,
                               WON, EXHAUSTED, TURN_LIMIT, ABORTED, GUESSING)
from wordlebot.solvers import create_solver, get_solver_ids


def _scripted(lines):
    it = iter(lines)

    def read_line():
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return read_line


def test_solver_registry():
    assert get_solver_ids() == ["most_frequent"]
    assert create_solver().next_guess(["stone", "crane"]) == "stone"
    with pytest.raises(ValueError):
        create_solver("entropy")


# --- automatic solving ---
def test_run_solve_wins():
    r = run_solve(["crane", "grape", "stone"], "stone")
    assert r["success"] is True
    assert r["status"] == WON
    assert r["guesses"] == 2
    assert r["history"] == [("crane", "bbbgg"), ("stone", "ggggg")]


def test_run_solve_first_guess():
    r = run_solve(["crane", "grape"], "crane")
    assert r["guesses"] == 1 and r["success"] is True


def test_run_solve_exhausted():
    r = run_solve(["crane", "grape"], "stone")
    assert r["status"] == EXHAUSTED
    assert r["success"] is False
    assert r["guesses"] == 1
    assert r["remaining"] == 0


def test_run_solve_turn_limit():
    words = ["bills", "fills", "hills", "kills", "mills", "pills", "tills", "wills"]
    r = run_solve(words, "wills")
    assert r["status"] == TURN_LIMIT
    assert r["guesses"] == 6
    assert [g for g, _ in r["history"]] == words[:6]


def test_run_solve_no_words():
    r = run_solve([], "crane")
    assert r["status"] == EXHAUSTED and r["guesses"] == 0


def test_run_solve_on_turn_callback():
    seen = []
    run_solve(["crane", "grape", "stone"], "stone",
              on_turn=lambda state, guess, hints: seen.append((state.turn, guess)))
    assert seen == [(1, "crane"), (2, "stone")]


def test_candidates_shrink_monotonically():
    words = ["crane", "react", "trace", "cared", "stone", "rinse"]
    sizes = [len(words)]
    run_solve(words, "rinse",
              on_turn=lambda state, guess, hints: sizes.append(len(state.candidates)))
    assert sizes == sorted(sizes, reverse=True)


# --- interactive play ---
def test_play_rejects_short_input_without_advancing():
    out = []
    r = run_play(["crane", "grape", "stone"],
                 read_line=_scripted(["gggg", "bbbgg", "ggggg"]), write=out.append)
    assert "invalid hint string" in out
    assert out.count("turn: 1") == 2
    assert out.count("turn: 2") == 1
    assert "turn: 3" not in out
    assert r["status"] == WON
    assert r["guesses"] == 2
    assert r["answer"] == "stone"


def test_play_rejects_unknown_symbols():
    out = []
    r = run_play(["crane"], read_line=_scripted(["ggxgg", "ggggg"]), write=out.append)
    assert out.count("invalid hint string") == 1
    assert r["guesses"] == 1 and r["success"] is True


def test_play_exhausted():
    out = []
    r = run_play(["crane", "grape"], read_line=_scripted(["ggggb"]), write=out.append)
    assert r["status"] == EXHAUSTED
    assert out[-1].startswith("word not found")


def test_play_end_of_input():
    r = run_play(["crane", "grape"], read_line=_scripted([]), write=lambda s: None)
    assert r["status"] == ABORTED
    assert r["guesses"] == 0


def test_play_step_transitions():
    state = new_game(["crane", "grape", "stone"])
    assert state.status == GUESSING and state.turn == 0
    nxt = play_step(state, "crane", "bbbgg")
    assert nxt.turn == 1
    assert nxt.candidates == ("stone",)
    # the old state is untouched
    assert state.candidates == ("crane", "grape", "stone")
    won = play_step(nxt, "stone", "ggggg")
    assert won.status == WON
    with pytest.raises(ValueError):
        play_step(won, "stone", "ggggg")


def test_play_has_no_turn_cap():
    words = ["bills", "fills", "hills", "kills", "mills", "pills", "tills", "wills"]
    out = []
    r = run_play(words, read_line=_scripted(["bgggg"] * 6 + ["ggggg"]), write=out.append)
    assert r["status"] == WON
    assert r["guesses"] == 7
    assert r["answer"] == "tills"
    assert "turn: 7" in out


def test_advance_turn_cap_is_optional():
    state = new_game(["bills", "fills"])
    hints = get_hints("bills", "fills")
    assert advance(state, "bills", hints, max_turns=1).status == TURN_LIMIT
    assert advance(state, "bills", hints).status == GUESSING
