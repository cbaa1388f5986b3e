"""The contract every puzzle state must satisfy to be searched."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from backend.models.board import Grid

Cell = tuple[int, int]


class Configuration(ABC):
    """One immutable snapshot of a puzzle.

    Subclasses must provide value equality and a hash consistent with it
    (frozen dataclasses do both).  The solver deduplicates states through
    ``dict`` membership, so two equal configurations that hash differently
    are searched twice; that wastes work but never breaks the search.
    """

    @abstractmethod
    def is_goal(self) -> bool:
        """Return True if this state satisfies the puzzle's win condition."""

    @abstractmethod
    def neighbors(self) -> Iterable[Configuration]:
        """Return every state reachable by exactly one legal move.

        Must not mutate ``self``.  Duplicates are allowed; invalid moves
        must be left out.  The order is the order the solver enqueues them.
        """


class BoardConfiguration(Configuration):
    """A configuration laid out on a rectangular grid of cells."""

    grid: Grid

    @abstractmethod
    def occupied(self, row: int, col: int) -> bool:
        """Return True if the cell holds a piece the player may move."""

    @abstractmethod
    def attempt_move(self, src: Cell, dst: Cell) -> BoardConfiguration | None:
        """Return the state after moving *src* to *dst*, or None if illegal."""

    # -- shared helpers -------------------------------------------------------

    @property
    def rows(self) -> int:
        return self.grid.rows

    @property
    def cols(self) -> int:
        return self.grid.cols

    def cell(self, row: int, col: int) -> str:
        return self.grid.cell(row, col)

    def __str__(self) -> str:
        return self.grid.render()
