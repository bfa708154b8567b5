"""Edges: symbolic transitions between locations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .action import Action
from .channel import Channel
from .expressions import Expression, conjunction
from .statements import Statement, branch


@dataclass(frozen=True)
class Edge:
    """A symbolic transition, enabled when its guard holds, applying its update."""

    channel: Channel
    guard: Expression
    update: Statement

    @classmethod
    def new_input(cls, action: Action, guard: Expression, update: Statement) -> Edge:
        """Create an edge on the input channel of the action."""
        return cls(Channel.new_in(action), guard, update)

    @classmethod
    def new_output(cls, action: Action, guard: Expression, update: Statement) -> Edge:
        """Create an edge on the output channel of the action."""
        return cls(Channel.new_out(action), guard, update)

    @classmethod
    def conjoin(cls, edges: Iterable[Edge]) -> Edge:
        """Combine edges on the same channel into one.

        The guard is the conjunction of all guards and the update runs all
        updates as independent branches.
        """
        edges = list(edges)
        if not edges:
            raise ValueError("cannot conjoin zero edges")
        channel = edges[0].channel
        if any(edge.channel != channel for edge in edges):
            raise ValueError("all conjoined edges must share the same channel")
        guard = conjunction([edge.guard for edge in edges])
        update = branch(edge.update for edge in edges)
        return cls(channel, guard, update)

    def action(self) -> Action:
        return self.channel.action

    def is_input(self) -> bool:
        return self.channel.is_input()

    def is_output(self) -> bool:
        return self.channel.is_output()