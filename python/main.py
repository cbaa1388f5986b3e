#!/usr/bin/env python3
"""Puzzle solvers.

Usage::

    python main.py clock 12 6 12                 # solve a clock puzzle
    python main.py strings AA AB                 # solve a strings puzzle
    python main.py hoppers hoppers/h1.txt        # files resolve against data/
    python main.py -f rich chess chess/c1.txt
    python main.py play chess chess/c1.txt       # interactive session
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import NoReturn

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent
DATA_DIR = PROJECT_ROOT / "data"

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gameplay import GamePlay  # noqa: E402
from backend.engine.gamesolver import Solver  # noqa: E402
from backend.engine.gamestate import Configuration  # noqa: E402
from backend.models import BOARD_PUZZLES, ClockConfig, StringsConfig  # noqa: E402
from backend.models.board import resolve_path  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


class BoardPuzzle(StrEnum):
    hoppers = "hoppers"
    chess = "chess"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _fail(message: str) -> NoReturn:
    typer.echo(message, err=True)
    raise typer.Exit(code=1)


def _frontend(ctx: typer.Context):
    return importlib.import_module(_RUNNERS[ctx.obj or Frontend.vanilla])


def _solve_and_show(ctx: typer.Context, title: str, start: Configuration) -> None:
    solver = Solver(start)
    solver.solve()
    _frontend(ctx).show_solution(title, solver)


def _solve_file(ctx: typer.Context, kind: BoardPuzzle, path: Path) -> None:
    path = resolve_path(path, DATA_DIR)
    try:
        start = BOARD_PUZZLES[kind].from_file(path)
    except (OSError, ValueError) as exc:
        _fail(f"Failed to load {path}: {exc}")
    _solve_and_show(ctx, f"File: {path}", start)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.callback()
def main(
    ctx: typer.Context,
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Output style.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log solver statistics and load failures.",
    ),
) -> None:
    """Breadth-first puzzle solvers."""
    ctx.obj = frontend
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


@app.command()
def clock(
    ctx: typer.Context,
    hours: int = typer.Argument(..., help="Number of hours on the clock face."),
    start: int = typer.Argument(..., help="Starting hour."),
    end: int = typer.Argument(..., help="Target hour."),
) -> None:
    """Move the hand from START to END one tick at a time."""
    try:
        config = ClockConfig(hours, start, end)
    except ValueError as exc:
        _fail(str(exc))
    _solve_and_show(ctx, f"Hours: {hours}, Start: {start}, End: {end}", config)


@app.command()
def strings(
    ctx: typer.Context,
    start: str = typer.Argument(..., help="Starting word (A-Z)."),
    end: str = typer.Argument(..., help="Target word (A-Z)."),
) -> None:
    """Turn START into END by shifting one letter at a time."""
    try:
        config = StringsConfig(start, end)
    except ValueError as exc:
        _fail(str(exc))
    _solve_and_show(ctx, f"Start: {start}, End: {end}", config)


@app.command()
def hoppers(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Hoppers puzzle file."),
) -> None:
    """Jump frogs until no green frog is left."""
    _solve_file(ctx, BoardPuzzle.hoppers, path)


@app.command()
def chess(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Solitaire chess puzzle file."),
) -> None:
    """Capture pieces until a single one remains."""
    _solve_file(ctx, BoardPuzzle.chess, path)


@app.command()
def play(
    ctx: typer.Context,
    puzzle: BoardPuzzle = typer.Argument(..., help="Which board puzzle."),
    path: Path = typer.Argument(..., help="Puzzle file to start with."),
) -> None:
    """Play a board puzzle interactively, with hints."""
    path = resolve_path(path, DATA_DIR)
    try:
        game = GamePlay(BOARD_PUZZLES[puzzle].from_file, path, DATA_DIR)
    except (OSError, ValueError) as exc:
        _fail(f"Failed to load {path}: {exc}")
    _frontend(ctx).run(game)


if __name__ == "__main__":
    app()
