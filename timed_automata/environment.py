"""Mapping from clock names to clock indices."""

from __future__ import annotations

from dataclasses import dataclass, field

from .tioa import TA


@dataclass
class Environment:
    """Assigns each clock name an index, starting from 1 in insertion order."""

    clocks: dict[str, int] = field(default_factory=dict)

    def insert_clock(self, symbol: str) -> int:
        """Return the clock's index, assigning the next one if it is new."""
        if symbol in self.clocks:
            return self.clocks[symbol]
        clock = len(self.clocks) + 1
        self.clocks[symbol] = clock
        return clock

    def get_clock(self, symbol: str) -> int | None:
        """Return the clock's index, or None if it is unknown."""
        return self.clocks.get(symbol)

    @classmethod
    def from_tioa(cls, tioa: TA) -> Environment:
        """Create an environment holding every clock of the automaton."""
        environment = cls()
        for clock in tioa.clocks():
            environment.insert_clock(clock)
        return environment