"""Terminal frontends and the pieces they share."""

from __future__ import annotations

from backend.engine.gameplay import GamePlay, Outcome


def describe(outcome: Outcome, game: GamePlay, cell: tuple[int, int] | None = None) -> str:
    """Plain-text status line for the result of a session command."""
    if outcome is Outcome.LOADED:
        return f"Loaded: {game.path}"
    if outcome is Outcome.LOAD_FAILED:
        return "Failed to load puzzle file."
    if outcome is Outcome.RESET:
        return "Puzzle reset!"
    if outcome is Outcome.HINT:
        return "Next step!"
    if outcome is Outcome.SOLVED:
        return "Already solved!"
    if outcome is Outcome.NO_SOLUTION:
        return "No solution"
    if outcome is Outcome.SELECTED:
        return f"Selected {game.selection}"
    if outcome is Outcome.MOVED:
        return f"Moved to {cell}"
    return f"Illegal selection {cell}"
