"""Line-based command reader shared by the terminal frontends.

Commands are matched on their first letter, so ``h``, ``hint`` and
``help`` all map to the same action::

    h(int)              -- hint next move
    l(oad) filename     -- load new puzzle file
    s(elect) r c        -- select cell at r, c
    q(uit)              -- quit the game
    r(eset)             -- reset the current game
"""

from __future__ import annotations

from dataclasses import dataclass, field

HELP_LINES: tuple[str, ...] = (
    "h(int)              -- hint next move",
    "l(oad) filename     -- load new puzzle file",
    "s(elect) r c        -- select cell at r, c",
    "q(uit)              -- quit the game",
    "r(eset)             -- reset the current game",
)

_ACTIONS: dict[str, str] = {
    "h": "hint",
    "l": "load",
    "s": "select",
    "q": "quit",
    "r": "reset",
}


@dataclass(frozen=True)
class Command:
    """A parsed command.

    ``action`` is one of ``hint``, ``load``, ``select``, ``quit``,
    ``reset``, ``help`` (unknown input) or ``invalid`` (known command with
    bad arguments, ``error`` says why).
    """

    action: str
    path: str | None = None
    cell: tuple[int, int] | None = None
    error: str = field(default="", compare=False)


def parse_command(line: str) -> Command:
    """Map a raw input line to a ``Command``."""
    words = line.split()
    if not words:
        return Command("help")

    action = _ACTIONS.get(words[0][0].lower(), "help")

    if action == "load":
        if len(words) < 2:
            return Command("invalid", error="usage: l(oad) filename")
        return Command("load", path=words[1])

    if action == "select":
        try:
            row, col = (int(w) for w in words[1:3])
        except ValueError:
            return Command("invalid", error="usage: s(elect) r c")
        return Command("select", cell=(row, col))

    return Command(action)


def read_command(prompt: str = "> ") -> Command:
    """Block on stdin for one line; end of input counts as ``quit``."""
    try:
        line = input(prompt)
    except EOFError:
        return Command("quit")
    return parse_command(line)
