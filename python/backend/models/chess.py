"""Solitaire chess: every move is a capture, until one piece remains."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from backend.engine.gamestate import BoardConfiguration, Cell
from backend.models.board import Grid

EMPTY = "."


class Piece(StrEnum):
    KING = "K"
    QUEEN = "Q"
    KNIGHT = "N"
    BISHOP = "B"
    ROOK = "R"
    PAWN = "P"


PIECES = "".join(p.value for p in Piece)


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


@dataclass(frozen=True)
class ChessConfig(BoardConfiguration):
    """A board of chess pieces (``K Q N B R P``) and empty cells (``.``)."""

    grid: Grid

    @classmethod
    def from_file(cls, path: Path | str) -> ChessConfig:
        return cls(Grid.from_file(path, allowed=EMPTY + PIECES))

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> ChessConfig:
        return cls(Grid.from_rows(rows))

    @property
    def pieces(self) -> int:
        return self.grid.count(PIECES)

    def is_goal(self) -> bool:
        return self.pieces == 1

    def occupied(self, row: int, col: int) -> bool:
        return self.grid.in_bounds(row, col) and self.cell(row, col) in PIECES

    def attempt_move(self, src: Cell, dst: Cell) -> ChessConfig | None:
        if src == dst or not self.occupied(*src) or not self.occupied(*dst):
            return None
        piece = Piece(self.cell(*src))
        if not self._reaches(piece, src, dst):
            return None
        return ChessConfig(self.grid.replace({src: EMPTY, dst: piece.value}))

    def neighbors(self) -> list[ChessConfig]:
        occupied = self.grid.positions(PIECES)
        result: dict[ChessConfig, None] = {}
        for src in occupied:
            for dst in occupied:
                moved = self.attempt_move(src, dst)
                if moved is not None:
                    result[moved] = None
        return list(result)

    # -- move geometry --------------------------------------------------------

    def _reaches(self, piece: Piece, src: Cell, dst: Cell) -> bool:
        dr, dc = dst[0] - src[0], dst[1] - src[1]
        straight = dr == 0 or dc == 0
        diagonal = abs(dr) == abs(dc)

        if piece is Piece.KING:
            return max(abs(dr), abs(dc)) == 1
        if piece is Piece.KNIGHT:
            return {abs(dr), abs(dc)} == {1, 2}
        if piece is Piece.PAWN:
            return dr == -1 and abs(dc) == 1
        if piece is Piece.ROOK:
            return straight and self._clear_line(src, dst)
        if piece is Piece.BISHOP:
            return diagonal and self._clear_line(src, dst)
        return (straight or diagonal) and self._clear_line(src, dst)

    def _clear_line(self, src: Cell, dst: Cell) -> bool:
        """True if every cell strictly between *src* and *dst* is empty."""
        step_r, step_c = _sign(dst[0] - src[0]), _sign(dst[1] - src[1])
        r, c = src[0] + step_r, src[1] + step_c
        while (r, c) != dst:
            if self.cell(r, c) != EMPTY:
                return False
            r, c = r + step_r, c + step_c
        return True
