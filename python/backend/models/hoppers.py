"""Hoppers puzzle: frogs jump over green frogs until none are left."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from backend.engine.gamestate import BoardConfiguration, Cell
from backend.models.board import Grid

WATER = "*"
LILY_PAD = "."
GREEN_FROG = "G"
RED_FROG = "R"
FROGS = GREEN_FROG + RED_FROG

# Jump offsets to the landing pad; the jumped frog sits halfway.
_DIAGONAL_JUMPS = ((-2, -2), (2, 2), (-2, 2), (2, -2))
_STRAIGHT_JUMPS = ((4, 0), (-4, 0), (0, -4), (0, 4))


@dataclass(frozen=True)
class HoppersConfig(BoardConfiguration):
    """A pond of water (``*``), lily pads (``.``) and frogs (``G``/``R``).

    Any frog may jump over an adjacent green frog onto an empty lily pad,
    removing it.  Diagonal jumps cover two cells.  Straight jumps cover
    four cells and start only from pads on an even row and even column,
    where the pond's grid lines meet.  The red frog must never be jumped.
    """

    grid: Grid

    @classmethod
    def from_file(cls, path: Path | str) -> HoppersConfig:
        return cls(Grid.from_file(path, allowed=WATER + LILY_PAD + FROGS))

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> HoppersConfig:
        return cls(Grid.from_rows(rows))

    def is_goal(self) -> bool:
        return self.grid.count(GREEN_FROG) == 0

    def occupied(self, row: int, col: int) -> bool:
        return self.grid.in_bounds(row, col) and self.cell(row, col) in FROGS

    def attempt_move(self, src: Cell, dst: Cell) -> HoppersConfig | None:
        (r0, c0), (r1, c1) = src, dst
        if not self.occupied(r0, c0) or not self.grid.in_bounds(r1, c1):
            return None
        if self.cell(r1, c1) != LILY_PAD:
            return None

        jump = (r1 - r0, c1 - c0)
        if jump in _STRAIGHT_JUMPS:
            if r0 % 2 or c0 % 2:
                return None
        elif jump not in _DIAGONAL_JUMPS:
            return None

        mid = (r0 + jump[0] // 2, c0 + jump[1] // 2)
        if self.cell(*mid) != GREEN_FROG:
            return None

        frog = self.cell(r0, c0)
        return HoppersConfig(
            self.grid.replace({src: LILY_PAD, mid: LILY_PAD, dst: frog})
        )

    def neighbors(self) -> list[HoppersConfig]:
        result: list[HoppersConfig] = []
        for r, c in self.grid.positions(FROGS):
            jumps = _DIAGONAL_JUMPS
            if r % 2 == 0 and c % 2 == 0:
                jumps = _DIAGONAL_JUMPS + _STRAIGHT_JUMPS
            for dr, dc in jumps:
                moved = self.attempt_move((r, c), (r + dr, c + dc))
                if moved is not None:
                    result.append(moved)
        return result
