"""Interactive session for the board puzzles: select, hint, load, reset."""

from __future__ import annotations

import logging
from enum import StrEnum
from pathlib import Path
from typing import Callable

from backend.engine.gamesolver import Solver
from backend.engine.gamestate import BoardConfiguration, Cell
from backend.models.board import resolve_path

logger = logging.getLogger(__name__)

Loader = Callable[[Path], BoardConfiguration]


class Outcome(StrEnum):
    LOADED = "loaded"
    LOAD_FAILED = "load_failed"
    RESET = "reset"
    HINT = "hint"
    SOLVED = "solved"
    NO_SOLUTION = "no_solution"
    SELECTED = "selected"
    MOVED = "moved"
    ILLEGAL = "illegal"


class GamePlay:
    """Holds the current board, the file it came from, and a pending selection.

    Moves are made by two ``select`` calls: the first picks the piece, the
    second the destination.
    """

    def __init__(
        self, loader: Loader, path: Path | str, data_dir: Path | None = None
    ) -> None:
        self.loader = loader
        self.data_dir = data_dir
        self.path = resolve_path(path, data_dir)
        self.config: BoardConfiguration = loader(self.path)
        self.selection: Cell | None = None
        self.moves: int = 0

    # -- file handling --------------------------------------------------------

    def load(self, path: Path | str) -> Outcome:
        """Replace the session with the puzzle stored at *path*."""
        path = resolve_path(path, self.data_dir)
        config = self._read(path)
        if config is None:
            return Outcome.LOAD_FAILED
        self.path = path
        self._restart(config)
        return Outcome.LOADED

    def reset(self) -> Outcome:
        """Reload the current file from disk; keep the board if that fails."""
        config = self._read(self.path)
        if config is None:
            return Outcome.LOAD_FAILED
        self._restart(config)
        return Outcome.RESET

    def _read(self, path: Path) -> BoardConfiguration | None:
        try:
            return self.loader(path)
        except (OSError, ValueError) as exc:
            logger.warning("Failed to load %s: %s", path, exc)
            return None

    def _restart(self, config: BoardConfiguration) -> None:
        self.config = config
        self.selection = None
        self.moves = 0

    # -- moves ----------------------------------------------------------------

    def hint(self) -> Outcome:
        """Advance one step along a shortest solution."""
        self.selection = None
        if self.config.is_goal():
            return Outcome.SOLVED

        path = Solver(self.config).solve()
        if not path:
            return Outcome.NO_SOLUTION

        self.config = path[1]
        self.moves += 1
        return Outcome.HINT

    def select(self, row: int, col: int) -> Outcome:
        """Pick a source cell, or move the selected piece to (row, col)."""
        if self.is_won:
            self.selection = None
            return Outcome.SOLVED

        if self.selection is None:
            if not self.config.occupied(row, col):
                return Outcome.ILLEGAL
            self.selection = (row, col)
            return Outcome.SELECTED

        src, self.selection = self.selection, None
        moved = self.config.attempt_move(src, (row, col))
        if moved is None:
            return Outcome.ILLEGAL
        self.config = moved
        self.moves += 1
        return Outcome.MOVED

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.config.is_goal()
