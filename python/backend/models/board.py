"""Immutable grid shared by the board puzzles."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path


class PuzzleFormatError(ValueError):
    """Raised when a puzzle file or text block cannot be parsed."""


def resolve_path(path: Path | str, data_dir: Path | None = None) -> Path:
    """Fall back to *data_dir* for relative paths missing from the cwd."""
    path = Path(path)
    if data_dir is None or path.exists() or path.is_absolute():
        return path
    candidate = data_dir / path
    return candidate if candidate.exists() else path


@dataclass(frozen=True)
class Grid:
    """A rectangular board stored as one string per row.

    Each cell is a single character.  Grids never change; ``replace``
    returns a new grid with some cells rewritten.
    """

    cells: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.cells:
            raise PuzzleFormatError("A grid needs at least one row.")
        width = len(self.cells[0])
        if any(len(row) != width for row in self.cells):
            raise PuzzleFormatError("All grid rows must have the same length.")

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_text(cls, text: str, allowed: str | None = None) -> Grid:
        """Parse the puzzle file format.

        The first line holds ``ROWS COLS``; each following line holds
        ``COLS`` whitespace-separated single-character cells.  Example::

            Grid.from_text("2 3\\n. G .\\nR . *")
        """
        lines = [line for line in text.splitlines() if line.strip()]
        if not lines:
            raise PuzzleFormatError("Puzzle is empty.")

        header = lines[0].split()
        try:
            rows, cols = (int(v) for v in header)
        except ValueError:
            raise PuzzleFormatError(
                f"Expected 'ROWS COLS' on the first line, got {lines[0]!r}."
            ) from None
        if rows < 1 or cols < 1:
            raise PuzzleFormatError(f"Dimensions must be positive, got {rows}x{cols}.")
        if len(lines) - 1 != rows:
            raise PuzzleFormatError(f"Expected {rows} rows, got {len(lines) - 1}.")

        cells: list[str] = []
        for r, line in enumerate(lines[1:]):
            tokens = line.split()
            if len(tokens) != cols:
                raise PuzzleFormatError(
                    f"Row {r} has {len(tokens)} cells, expected {cols}."
                )
            for c, token in enumerate(tokens):
                if len(token) != 1 or (allowed is not None and token not in allowed):
                    raise PuzzleFormatError(f"Invalid cell {token!r} at ({r}, {c}).")
            cells.append("".join(tokens))
        return cls(tuple(cells))

    @classmethod
    def from_file(cls, path: Path | str, allowed: str | None = None) -> Grid:
        try:
            text = Path(path).read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise PuzzleFormatError(f"{path} is not a text file: {exc.reason}.") from None
        return cls.from_text(text, allowed)

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> Grid:
        """Build a grid from compact rows, e.g. ``[".G.", "R.*"]``."""
        return cls(tuple(rows))

    # -- queries --------------------------------------------------------------

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0])

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell(self, row: int, col: int) -> str:
        return self.cells[row][col]

    def count(self, chars: str) -> int:
        """Number of cells whose value is one of *chars*."""
        return sum(1 for row in self.cells for ch in row if ch in chars)

    def positions(self, chars: str) -> list[tuple[int, int]]:
        """Row-major coordinates of every cell whose value is in *chars*."""
        return [
            (r, c)
            for r, row in enumerate(self.cells)
            for c, ch in enumerate(row)
            if ch in chars
        ]

    # -- copy-on-move ---------------------------------------------------------

    def replace(self, changes: Mapping[tuple[int, int], str]) -> Grid:
        """Return a copy with the given cells rewritten."""
        rows = [list(row) for row in self.cells]
        for (r, c), value in changes.items():
            rows[r][c] = value
        return Grid(tuple("".join(row) for row in rows))

    # -- display --------------------------------------------------------------

    def render(self) -> str:
        """Text view with column and row indices, as the terminal shows it."""
        width = len(str(max(self.rows, self.cols) - 1))
        header = " " * (width + 2) + " ".join(f"{c:<{width}}" for c in range(self.cols))
        rule = " " * (width + 2) + "-" * (self.cols * (width + 1) - 1)
        lines = [header.rstrip(), rule]
        for r, row in enumerate(self.cells):
            lines.append(f"{r:>{width}}| " + " ".join(f"{ch:<{width}}" for ch in row).rstrip())
        return "\n".join(lines)
