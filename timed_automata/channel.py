"""Channels describe whether an action is received or emitted by an automaton."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .action import Action


class Direction(Enum):
    """Whether a channel is an input or an output."""

    IN = "in"
    OUT = "out"


@dataclass(frozen=True)
class Channel:
    """An action together with the direction it travels in."""

    direction: Direction
    action: Action

    @classmethod
    def new_in(cls, action: Action) -> Channel:
        """Create an input channel for the action."""
        return cls(Direction.IN, action)

    @classmethod
    def new_out(cls, action: Action) -> Channel:
        """Create an output channel for the action."""
        return cls(Direction.OUT, action)

    def is_input(self) -> bool:
        return self.direction is Direction.IN

    def is_output(self) -> bool:
        return self.direction is Direction.OUT