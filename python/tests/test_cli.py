"""Command parser and typer CLI tests."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from frontend.cli.input_handler import Command, parse_command
from main import app

runner = CliRunner()


# -- command parsing ----------------------------------------------------------


@pytest.mark.parametrize(
    "line, expected",
    [
        ("h", Command("hint")),
        ("hint", Command("hint")),
        ("r", Command("reset")),
        ("quit", Command("quit")),
        ("s 1 2", Command("select", cell=(1, 2))),
        ("select 0 4", Command("select", cell=(0, 4))),
        ("l data/chess/c1.txt", Command("load", path="data/chess/c1.txt")),
        ("", Command("help")),
        ("xyzzy", Command("help")),
    ],
)
def test_parse_command(line: str, expected: Command) -> None:
    assert parse_command(line) == expected


@pytest.mark.parametrize("line", ["s", "s 1", "s a b", "load"])
def test_parse_command_bad_arguments(line: str) -> None:
    command = parse_command(line)

    assert command.action == "invalid"
    assert command.error.startswith("usage:")


# -- solver commands ----------------------------------------------------------


def test_clock_command() -> None:
    result = runner.invoke(app, ["clock", "12", "6", "12"])

    assert result.exit_code == 0, result.output
    assert "Hours: 12, Start: 6, End: 12" in result.output
    assert "Step 0: 6" in result.output
    assert "Step 6: 12" in result.output
    assert "Step 7" not in result.output


def test_strings_command() -> None:
    result = runner.invoke(app, ["strings", "AA", "AB"])

    assert result.exit_code == 0, result.output
    assert "Step 0: AA" in result.output
    assert "Step 1: AB" in result.output


def test_strings_already_solved() -> None:
    result = runner.invoke(app, ["strings", "AA", "AA"])

    assert result.exit_code == 0, result.output
    assert "Total configs: 1" in result.output
    assert "Unique configs: 1" in result.output


@pytest.mark.parametrize(
    "args",
    [["clock", "12", "13", "1"], ["strings", "aa", "AB"]],
)
def test_bad_arguments_exit_with_error(args: list[str]) -> None:
    result = runner.invoke(app, args)

    assert result.exit_code == 1


def test_chess_without_solution(data_dir) -> None:
    result = runner.invoke(app, ["chess", str(data_dir / "chess" / "c2.txt")])

    assert result.exit_code == 0, result.output
    assert "No solution" in result.output


def test_hoppers_command(data_dir) -> None:
    result = runner.invoke(app, ["hoppers", str(data_dir / "hoppers" / "h1.txt")])

    assert result.exit_code == 0, result.output
    assert "Step 2:" in result.output


def test_missing_file_exits_with_error(tmp_path) -> None:
    result = runner.invoke(app, ["hoppers", str(tmp_path / "nope.txt")])

    assert result.exit_code == 1


def test_rich_frontend(data_dir) -> None:
    result = runner.invoke(app, ["-f", "rich", "chess", str(data_dir / "chess" / "c1.txt")])

    assert result.exit_code == 0, result.output
    assert "Total configs" in result.output


# -- play ---------------------------------------------------------------------


@pytest.mark.parametrize("frontend", ["vanilla", "rich"])
def test_play_session(data_dir, frontend: str) -> None:
    result = runner.invoke(
        app,
        ["-f", frontend, "play", "hoppers", str(data_dir / "hoppers" / "h1.txt")],
        input="s 4 4\ns 2 2\nh\nq\n",
    )

    assert result.exit_code == 0, result.output
    assert "Selected (4, 4)" in result.output
    assert "Moved to (2, 2)" in result.output
    assert "solved it" in result.output


def test_play_ends_on_eof(data_dir) -> None:
    result = runner.invoke(
        app, ["play", "chess", str(data_dir / "chess" / "c1.txt")], input="h\n"
    )

    assert result.exit_code == 0, result.output
    assert "Next step!" in result.output


def test_relative_path_falls_back_to_data_dir() -> None:
    result = runner.invoke(app, ["chess", "chess/c1.txt"])

    assert result.exit_code == 0, result.output
    assert "Step 2:" in result.output


def test_verbose_logs_solver_summary() -> None:
    result = runner.invoke(app, ["-v", "strings", "AA", "AB"])

    assert result.exit_code == 0, result.output
    assert "Goal reached" in result.output


def test_play_load_binary_file_keeps_session(data_dir, tmp_path) -> None:
    binary = tmp_path / "binary.txt"
    binary.write_bytes(b"\xff\xfe\x00garbage")
    result = runner.invoke(
        app,
        ["play", "hoppers", str(data_dir / "hoppers" / "h1.txt")],
        input=f"l {binary}\nh\nq\n",
    )

    assert result.exit_code == 0, result.output
    assert "Failed to load puzzle file." in result.output
    assert "Next step!" in result.output
