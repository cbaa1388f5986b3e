"""Breadth-first puzzle solver."""

from __future__ import annotations

import logging
from collections import deque

from backend.engine.gamestate import Configuration

logger = logging.getLogger(__name__)


class SolverStateError(RuntimeError):
    """Raised when results are read from a solver that has not run."""


class Solver:
    """Shortest-path search from *start* to the nearest goal state.

    The search is a plain BFS: a FIFO frontier plus a predecessor map that
    doubles as the visited set.  When several shortest paths exist, the one
    returned depends on the order ``neighbors()`` yields states in.
    """

    def __init__(self, start: Configuration) -> None:
        self.start = start
        self._predecessors: dict[Configuration, Configuration | None] | None = None
        self._goal: Configuration | None = None
        self._path: list[Configuration] = []
        self._total_generated: int = 0

    # -- search ---------------------------------------------------------------

    def solve(self) -> list[Configuration]:
        """Run the search and return the path (``[]`` if no goal is reachable).

        Calling it again starts a fresh search from ``start``.
        """
        frontier: deque[Configuration] = deque([self.start])
        predecessors: dict[Configuration, Configuration | None] = {self.start: None}
        total = 1
        goal: Configuration | None = None

        while frontier:
            current = frontier.popleft()
            if current.is_goal():
                goal = current
                break
            for neighbor in current.neighbors():
                total += 1
                if neighbor not in predecessors:
                    predecessors[neighbor] = current
                    frontier.append(neighbor)

        self._predecessors = predecessors
        self._total_generated = total
        self._goal = goal
        self._path = self._reconstruct(predecessors, goal)

        if goal is None:
            logger.debug(
                "Frontier exhausted: %d generated, %d unique, no solution",
                total, len(predecessors),
            )
        else:
            logger.debug(
                "Goal reached in %d moves: %d generated, %d unique",
                len(self._path) - 1, total, len(predecessors),
            )
        return list(self._path)

    @staticmethod
    def _reconstruct(
        predecessors: dict[Configuration, Configuration | None],
        goal: Configuration | None,
    ) -> list[Configuration]:
        if goal is None:
            return []
        path: list[Configuration] = []
        current: Configuration | None = goal
        while current is not None:
            path.append(current)
            current = predecessors[current]
        path.reverse()
        return path

    # -- results --------------------------------------------------------------

    @property
    def solved(self) -> bool:
        """True once ``solve()`` has run, whether or not a goal was found."""
        return self._predecessors is not None

    def _require_solved(self) -> dict[Configuration, Configuration | None]:
        if self._predecessors is None:
            raise SolverStateError("solve() must be called before reading results.")
        return self._predecessors

    @property
    def path(self) -> list[Configuration]:
        self._require_solved()
        return list(self._path)

    @property
    def goal(self) -> Configuration | None:
        self._require_solved()
        return self._goal

    @property
    def total_generated(self) -> int:
        """Every state produced, duplicates included, plus the start."""
        self._require_solved()
        return self._total_generated

    @property
    def unique_visited(self) -> int:
        return len(self._require_solved())
