"""Strings puzzle: reach a target word by rotating one letter at a time."""

from __future__ import annotations

import string
from dataclasses import dataclass

from backend.engine.gamestate import Configuration

ALPHABET = string.ascii_uppercase


@dataclass(frozen=True)
class StringsConfig(Configuration):
    """An uppercase word; each move shifts one letter by one, wrapping A/Z."""

    current: str
    end: str

    def __post_init__(self) -> None:
        for name in ("current", "end"):
            value = getattr(self, name)
            bad = sorted({ch for ch in value if ch not in ALPHABET})
            if bad:
                raise ValueError(
                    f"{name.capitalize()} string {value!r} has letters outside A-Z: "
                    f"{''.join(bad)}"
                )

    def is_goal(self) -> bool:
        return self.current == self.end

    def neighbors(self) -> list[StringsConfig]:
        result: list[StringsConfig] = []
        for i, ch in enumerate(self.current):
            index = ALPHABET.index(ch)
            for step in (-1, 1):
                shifted = ALPHABET[(index + step) % len(ALPHABET)]
                result.append(self._with(i, shifted))
        return result

    def _with(self, position: int, letter: str) -> StringsConfig:
        word = self.current[:position] + letter + self.current[position + 1 :]
        return StringsConfig(word, self.end)

    def __str__(self) -> str:
        return self.current
