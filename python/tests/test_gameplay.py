"""Interactive session tests: selection, hints, load and reset."""

from __future__ import annotations

import pytest

from backend.engine.gameplay import GamePlay, Outcome
from backend.models import ChessConfig, HoppersConfig

_HOPPERS = """\
5 5
. * . * .
* G * . *
. * . * .
* . * G *
. * . * R
"""


@pytest.fixture
def game(write_puzzle) -> GamePlay:
    return GamePlay(HoppersConfig.from_file, write_puzzle(_HOPPERS))


# -- selection ----------------------------------------------------------------


def test_select_then_move(game: GamePlay) -> None:
    assert game.select(4, 4) is Outcome.SELECTED
    assert game.selection == (4, 4)

    assert game.select(2, 2) is Outcome.MOVED
    assert game.selection is None
    assert game.moves == 1
    assert game.config.cell(2, 2) == "R"
    assert game.config.cell(3, 3) == "."


def test_select_empty_cell_is_illegal(game: GamePlay) -> None:
    assert game.select(0, 1) is Outcome.ILLEGAL
    assert game.select(-1, 0) is Outcome.ILLEGAL
    assert game.select(9, 9) is Outcome.ILLEGAL
    assert game.selection is None


def test_illegal_destination_clears_selection(game: GamePlay) -> None:
    before = game.config

    assert game.select(4, 4) is Outcome.SELECTED
    assert game.select(4, 0) is Outcome.ILLEGAL
    assert game.selection is None
    assert game.config == before
    assert game.moves == 0


def test_select_after_win_reports_solved(game: GamePlay) -> None:
    game.select(4, 4)
    game.select(2, 2)
    game.select(2, 2)
    game.select(0, 0)

    assert game.is_won
    assert game.select(0, 0) is Outcome.SOLVED


# -- hints --------------------------------------------------------------------


def test_hints_walk_to_the_goal(game: GamePlay) -> None:
    assert game.hint() is Outcome.HINT
    assert game.config.cell(2, 2) == "R"

    assert game.hint() is Outcome.HINT
    assert game.is_won
    assert game.moves == 2

    assert game.hint() is Outcome.SOLVED


def test_hint_without_solution_keeps_board(write_puzzle) -> None:
    game = GamePlay(HoppersConfig.from_file, write_puzzle("3 3\nG * .\n* . *\nR * .\n"))
    before = game.config

    assert game.hint() is Outcome.NO_SOLUTION
    assert game.config == before


def test_hint_clears_selection(game: GamePlay) -> None:
    game.select(4, 4)
    game.hint()

    assert game.selection is None


# -- files --------------------------------------------------------------------


def test_reset_restores_file(game: GamePlay) -> None:
    start = game.config
    game.hint()

    assert game.reset() is Outcome.RESET
    assert game.config == start
    assert game.moves == 0


def test_load_replaces_puzzle(game: GamePlay, write_puzzle) -> None:
    other = write_puzzle("1 5\nR * G * .\n", name="other.txt")

    assert game.load(other) is Outcome.LOADED
    assert game.path == other
    assert game.config == HoppersConfig.from_rows(["R*G*."])


@pytest.mark.parametrize(
    "content",
    [None, b"2 2\n. .\n", b"1 2\n. Q\n", b"\xff\xfe\x00garbage"],
    ids=["missing", "short", "bad-cell", "binary"],
)
def test_load_failure_keeps_session(game: GamePlay, tmp_path, content) -> None:
    path = tmp_path / "bad.txt"
    if content is not None:
        path.write_bytes(content)
    before, before_path = game.config, game.path

    assert game.load(path) is Outcome.LOAD_FAILED
    assert game.config == before
    assert game.path == before_path


def test_chess_session(write_puzzle) -> None:
    game = GamePlay(ChessConfig.from_file, write_puzzle("3 3\nR . B\n. . .\n. . N\n"))

    assert game.select(0, 0) is Outcome.SELECTED
    assert game.select(2, 2) is Outcome.ILLEGAL  # rook cannot move diagonally
    assert game.select(0, 0) is Outcome.SELECTED
    assert game.select(0, 2) is Outcome.MOVED
    assert game.hint() is Outcome.HINT
    assert game.is_won


@pytest.mark.parametrize("content", [None, b"\xff\xfe\x00garbage", b"1 2\n. Q\n"])
def test_reset_failure_keeps_board(game: GamePlay, content) -> None:
    game.select(4, 4)
    game.select(2, 2)
    moved = game.config
    if content is None:
        game.path.unlink()
    else:
        game.path.write_bytes(content)

    assert game.reset() is Outcome.LOAD_FAILED
    assert game.config == moved
    assert game.moves == 1


def test_load_falls_back_to_data_dir(write_puzzle, data_dir) -> None:
    game = GamePlay(HoppersConfig.from_file, write_puzzle(_HOPPERS), data_dir)

    assert game.load("chess/c2.txt") is Outcome.LOADED  # relative to data_dir
    assert game.path == data_dir / "chess" / "c2.txt"


def test_load_without_data_dir_uses_path_as_given(game: GamePlay) -> None:
    assert game.load("hoppers/h1.txt") is Outcome.LOAD_FAILED
