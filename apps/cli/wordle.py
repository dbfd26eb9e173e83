# apps/cli/wordle.py
"""
CLI entry point for wordlebot.

This script:
  1) Makes sure the local word list exists (downloads it once if missing).
  2) Loads the top --count five-letter words, most frequent first.
  3) Either solves a known target automatically (`solve`) or suggests guesses
     while the user types the feedback from a real game (`play`).

Usage:
    wordle solve crane
    wordle --count 20000 play
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

import requests

from wordlebot.datasets import (WordSource, describe_source, pretty_summary,
                                DEFAULT_COUNT, DEFAULT_URL, DEFAULT_WORDS_FILE)
from wordlebot.engine import to_pattern, validate_target
from wordlebot.engine.validation import WORD_LENGTH, normalize
from wordlebot.harness import run_solve, run_play, WON, EXHAUSTED, WORDLE_MAX_TURNS
from wordlebot.solvers import create_solver


def _positive_int(text: str) -> int:
    n = int(text)
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {text}")
    return n


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="wordle", description="wordle solver")
    ap.add_argument("-c", "--count", type=_positive_int, default=DEFAULT_COUNT,
                    help="number of top-frequency words to source (default: %(default)s)")
    ap.add_argument("--words-file", default=DEFAULT_WORDS_FILE,
                    help="local word list, downloaded if missing (default: %(default)s)")
    ap.add_argument("--url", default=DEFAULT_URL,
                    help="where to download the word list from")
    ap.add_argument("--timeout", type=float, default=None,
                    help="download timeout in seconds (default: wait indefinitely)")
    sub = ap.add_subparsers(dest="command", required=True)
    sp = sub.add_parser("solve", help="try and solve the target word in fewest number of turns")
    sp.add_argument("target", help="target word to solve for")
    sub.add_parser("play", help="interactively play wordle")
    return ap


def _print_turn(state, guess, hints) -> None:
    print(f"turn: {state.turn}")
    print(f"guess: {guess} ({to_pattern(hints)})")
    if not state.done or state.status == EXHAUSTED:
        print(f"possible words: {len(state.candidates)}")


def cmd_solve(words: List[str], target: str) -> int:
    print(f"attempting to solve with target {target}")
    r = run_solve(words, target, solver=create_solver(), on_turn=_print_turn)

    if r["status"] == WON:
        print(f"word: {r['history'][-1][0]}, turn: {r['guesses']}")
    elif r["status"] == EXHAUSTED:
        print("word not found, try sourcing more words with --count arg (see --help)")
    else:
        print(f"could not find word after {WORDLE_MAX_TURNS} turns")
    print(f"took {r['time_ms']:.2f}ms")
    return 0


def cmd_play(words: List[str]) -> int:
    print("playing wordle")
    run_play(words, solver=create_solver())
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse CLI args, prepare the word source, and dispatch the subcommand.
    I/O errors during startup are reported and end the run with status 1.
    """
    args = build_parser().parse_args(argv)

    # Checked before any download so a typo doesn't cost a network round-trip
    target = None
    if args.command == "solve":
        target = normalize(args.target)
        if not validate_target(target):
            print(f"target must be {WORD_LENGTH} characters in length")
            return 1

    source = WordSource(args.words_file, url=args.url, timeout=args.timeout)
    try:
        if not source.exists():
            print(f"{source.path} not found, downloading...")
        if source.ensure_source():
            print("done")

        print(f"parsing words c={args.count}")
        words = source.load_words(args.count)
        print(pretty_summary(describe_source(source.path)))
    except (requests.RequestException, OSError, UnicodeDecodeError) as e:
        print(f"error: {e}")
        return 1

    print(f"done: {len(words)} words")

    if args.command == "solve":
        return cmd_solve(words, target)
    return cmd_play(words)


if __name__ == "__main__":
    sys.exit(main())
