"""Vanilla terminal frontend — no third-party dependencies.

Uses only ``print`` and ANSI codes.  Shows solver reports and runs the
line-based play loop for board puzzles.
"""

from __future__ import annotations

from backend.engine.gameplay import GamePlay, Outcome
from backend.engine.gamesolver import Solver
from frontend.cli import describe
from frontend.cli.input_handler import HELP_LINES, read_command


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset

_STYLES = {
    Outcome.MOVED: _G,
    Outcome.HINT: _C,
    Outcome.SOLVED: _G,
    Outcome.LOADED: _C,
    Outcome.RESET: _C,
    Outcome.ILLEGAL: _Y,
    Outcome.LOAD_FAILED: _Y,
    Outcome.NO_SOLUTION: _Y,
}


# -- solver report ------------------------------------------------------------


def show_solution(title: str, solver: Solver) -> None:
    """Print statistics and every step of the solver's path."""
    print(title)
    print(f"Total configs: {solver.total_generated}")
    print(f"Unique configs: {solver.unique_visited}")

    path = solver.path
    if not path:
        print("No solution")
        return
    for i, config in enumerate(path):
        text = str(config)
        if "\n" in text:
            print(f"Step {i}:\n{text}")
        else:
            print(f"Step {i}: {text}")


# -- play loop ----------------------------------------------------------------


def _show_help() -> None:
    for line in HELP_LINES:
        print(f"{_DIM}{line}{_R}")


def run(game: GamePlay) -> None:
    """Interactive loop over stdin until the player quits."""
    print(f"{_C}Loaded: {game.path}{_R}")
    print(game.config)
    _show_help()

    while True:
        command = read_command()

        if command.action == "quit":
            return
        if command.action == "help":
            _show_help()
            continue
        if command.action == "invalid":
            print(f"{_Y}{command.error}{_R}")
            continue

        if command.action == "hint":
            outcome = game.hint()
        elif command.action == "reset":
            outcome = game.reset()
        elif command.action == "load":
            outcome = game.load(command.path)
        else:
            outcome = game.select(*command.cell)

        print(f"{_STYLES.get(outcome, '')}{describe(outcome, game, command.cell)}{_R}")
        print(game.config)
        if game.is_won and outcome in (Outcome.MOVED, Outcome.HINT):
            print(f"{_G}You solved it!{_R}")
