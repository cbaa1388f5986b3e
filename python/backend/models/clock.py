"""Clock puzzle: move the hand from one hour to another, one tick at a time."""

from __future__ import annotations

from dataclasses import dataclass

from backend.engine.gamestate import Configuration


@dataclass(frozen=True)
class ClockConfig(Configuration):
    """The hand position on a clock face numbered ``1..hours``."""

    hours: int
    current: int
    end: int

    def __post_init__(self) -> None:
        if self.hours < 1:
            raise ValueError(f"A clock needs at least one hour, got {self.hours}.")
        for name in ("current", "end"):
            value = getattr(self, name)
            if not 1 <= value <= self.hours:
                raise ValueError(
                    f"{name.capitalize()} hour {value} is outside 1..{self.hours}."
                )

    def is_goal(self) -> bool:
        return self.current == self.end

    def neighbors(self) -> list[ClockConfig]:
        back = self.current - 1 if self.current > 1 else self.hours
        forward = self.current + 1 if self.current < self.hours else 1
        return [self._at(back), self._at(forward)]

    def _at(self, hour: int) -> ClockConfig:
        return ClockConfig(self.hours, hour, self.end)

    def __str__(self) -> str:
        return str(self.current)
