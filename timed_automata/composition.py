"""Parallel composition of timed input/output automata."""

from __future__ import annotations

from itertools import product
from typing import Iterable

from .action import Action
from .channel import Channel
from .edge import Edge
from .expressions import conjunction
from .location import Location, combine
from .sets import are_disjoint, intersection, skip_nth, subtract, union
from .statements import branch
from .tioa import TIOA, Branch, LocationTree, Traversal


class Composition(TIOA):
    """The parallel composition of two or more automata.

    Clocks must be pairwise disjoint and so must outputs. Outputs of the
    composition are the union of all outputs; inputs are the union of all
    inputs that are not an output of some component. An action moves every
    component that knows it, simultaneously; the other components stay put.
    """

    def __init__(self, tioas: Iterable[TIOA]) -> None:
        tioas = tuple(tioas)
        if len(tioas) < 2:
            raise ValueError("a composition needs at least two automata")

        all_outputs = [tioa.outputs() for tioa in tioas]
        all_inputs = [tioa.inputs() for tioa in tioas]
        all_actions = [tioa.actions() for tioa in tioas]
        all_clocks = [tioa.clocks() for tioa in tioas]

        if not are_disjoint(all_clocks):
            raise ValueError("composed automata must not share clocks")
        if not are_disjoint(all_outputs):
            raise ValueError("composed automata must not share outputs")

        outputs = union(all_outputs)
        self._tioas = tioas
        self._outputs = outputs
        self._inputs = union(subtract(inputs, outputs) for inputs in all_inputs)
        self._clocks = union(all_clocks)
        self._component_actions = all_actions
        self._unique_actions = [
            subtract(actions, union(skip_nth(all_actions, i)))
            for i, actions in enumerate(all_actions)
        ]
        self._common_actions = intersection(all_actions)

    def size(self) -> int:
        """Return the number of composed automata."""
        return len(self._tioas)

    def clocks(self) -> set[str]:
        return set(self._clocks)

    def clock_count(self) -> int:
        return len(self._clocks)

    def inputs(self) -> set[Action]:
        return set(self._inputs)

    def outputs(self) -> set[Action]:
        return set(self._outputs)

    def initial_location(self) -> LocationTree:
        return Branch(tuple(tioa.initial_location() for tioa in self._tioas))

    def _components(self, tree: LocationTree) -> tuple[LocationTree, ...]:
        if not isinstance(tree, Branch):
            raise ValueError("a composition's locations are branches")
        if len(tree.locations) != self.size():
            raise ValueError(
                f"expected {self.size()} sub-locations, got {len(tree.locations)}"
            )
        return tree.locations

    def _participates(self, index: int, action: Action) -> bool:
        if action in self._common_actions or action in self._unique_actions[index]:
            return True
        return action in self._component_actions[index]

    def outgoing_traversals(self, source: LocationTree, action: Action) -> list[Traversal]:
        if action not in self.actions():
            raise ValueError(f"{action.letter!r} is not an action of the composition")
        sources = self._components(source)

        choices: list[list[Traversal | None]] = []
        for index, (tioa, sub_source) in enumerate(zip(self._tioas, sources)):
            if self._participates(index, action):
                choices.append(list(tioa.outgoing_traversals(sub_source, action)))
            else:
                choices.append([None])

        channel = (
            Channel.new_out(action) if action in self._outputs else Channel.new_in(action)
        )
        traversals = []
        for combination in product(*choices):
            moved = [traversal for traversal in combination if traversal is not None]
            edge = Edge(
                channel,
                conjunction([traversal.edge.guard for traversal in moved]),
                branch(traversal.edge.update for traversal in moved),
            )
            destination = Branch(
                tuple(
                    sub_source if traversal is None else traversal.destination
                    for traversal, sub_source in zip(combination, sources)
                )
            )
            traversals.append(Traversal(edge, destination))
        return traversals

    def location(self, tree: LocationTree) -> Location:
        sources = self._components(tree)
        return combine(tioa.location(sub) for tioa, sub in zip(self._tioas, sources))