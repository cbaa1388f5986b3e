"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
command parser and backend as the vanilla CLI.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay, Outcome
from backend.engine.gamesolver import Solver
from backend.engine.gamestate import BoardConfiguration, Configuration
from frontend.cli import describe
from frontend.cli.input_handler import HELP_LINES, read_command

console = Console()

_STYLES = {
    Outcome.MOVED: "bold green",
    Outcome.HINT: "cyan",
    Outcome.SOLVED: "bold green",
    Outcome.LOADED: "cyan",
    Outcome.RESET: "cyan",
    Outcome.SELECTED: "bold white",
    Outcome.ILLEGAL: "yellow",
    Outcome.LOAD_FAILED: "red",
    Outcome.NO_SOLUTION: "red",
}


# -- board rendering ----------------------------------------------------------


def _render_board(
    config: BoardConfiguration, selection: tuple[int, int] | None = None
) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        show_header=True,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    table.add_column("", style="dim", justify="right")
    for c in range(config.cols):
        table.add_column(str(c), justify="center", header_style="dim")

    for r in range(config.rows):
        cells: list[str] = [str(r)]
        for c in range(config.cols):
            val = config.cell(r, c)
            if (r, c) == selection:
                cells.append(f"[bold black on green]{val}[/bold black on green]")
            elif config.occupied(r, c):
                cells.append(f"[bold white]{val}[/bold white]")
            else:
                cells.append(f"[dim]{val}[/dim]")
        table.add_row(*cells)

    return table


def _render(config: Configuration) -> Table | Text:
    if isinstance(config, BoardConfiguration):
        return _render_board(config)
    return Text(str(config), style="bold white")


# -- solver report ------------------------------------------------------------


def show_solution(title: str, solver: Solver) -> None:
    """Print statistics and the solver's path inside a panel."""
    stats = Text()
    stats.append("Total configs: ", style="dim")
    stats.append(str(solver.total_generated), style="bold yellow")
    stats.append("    Unique configs: ", style="dim")
    stats.append(str(solver.unique_visited), style="bold yellow")

    path = solver.path
    if not path:
        body = Group(stats, Text("No solution", style="bold red"))
    else:
        steps = Table(box=rich.box.ROUNDED, border_style="dim", show_lines=True)
        steps.add_column("Step", justify="right", style="cyan")
        steps.add_column("Configuration")
        for i, config in enumerate(path):
            steps.add_row(str(i), _render(config))
        body = Group(stats, Text(""), steps)

    console.print(
        Panel(
            body,
            title=f"[bold cyan]{title}[/bold cyan]",
            border_style="bright_blue",
            padding=(1, 2),
        )
    )


# -- play loop ----------------------------------------------------------------


def _draw(game: GamePlay, status: str = "", style: str = "") -> None:
    panel = Panel(
        Align.center(_render_board(game.config, game.selection)),
        title=f"[bold cyan]{game.path.name}[/bold cyan]",
        subtitle=f"[dim]moves: {game.moves}[/dim]",
        border_style="bold green" if game.is_won else "bright_blue",
        padding=(1, 2),
    )
    console.print(panel)
    if status:
        console.print(Text(f"  {status}", style=style))


def _show_help() -> None:
    console.print(Text("\n".join(HELP_LINES), style="dim"))


def run(game: GamePlay) -> None:
    """Interactive loop over stdin until the player quits."""
    _draw(game, f"Loaded: {game.path}", "cyan")
    _show_help()

    while True:
        command = read_command()

        if command.action == "quit":
            console.print(Text("Goodbye!", style="bold cyan"))
            return
        if command.action == "help":
            _show_help()
            continue
        if command.action == "invalid":
            console.print(Text(command.error, style="yellow"))
            continue

        if command.action == "hint":
            outcome = game.hint()
        elif command.action == "reset":
            outcome = game.reset()
        elif command.action == "load":
            outcome = game.load(command.path)
        else:
            outcome = game.select(*command.cell)

        _draw(game, describe(outcome, game, command.cell), _STYLES.get(outcome, ""))
        if game.is_won and outcome in (Outcome.MOVED, Outcome.HINT):
            console.print(Text("  ★ You solved it! ★", style="bold green"))
