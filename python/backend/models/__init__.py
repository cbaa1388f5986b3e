from backend.models.board import Grid, PuzzleFormatError
from backend.models.chess import ChessConfig
from backend.models.clock import ClockConfig
from backend.models.hoppers import HoppersConfig
from backend.models.strings import StringsConfig

# Board puzzles that can be loaded from a file and played interactively.
BOARD_PUZZLES = {
    "hoppers": HoppersConfig,
    "chess": ChessConfig,
}

__all__ = [
    "BOARD_PUZZLES",
    "ChessConfig",
    "ClockConfig",
    "Grid",
    "HoppersConfig",
    "PuzzleFormatError",
    "StringsConfig",
]
