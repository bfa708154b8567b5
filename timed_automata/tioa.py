"""Location trees, traversals and the interfaces of timed input/output automata."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from itertools import product
from typing import Iterable, Iterator

from .action import Action
from .edge import Edge
from .location import Location


class LocationTree:
    """Identifies a location of a possibly composed automaton."""

    __slots__ = ()

    def __str__(self) -> str:
        match self:
            case Leaf(node=node):
                return str(node)
            case Branch(locations=locations):
                return ", ".join(str(location) for location in locations)
        raise TypeError(f"unknown location tree kind {type(self).__name__}")


@dataclass(frozen=True)
class Leaf(LocationTree):
    """A single node of one automaton's graph."""

    node: int


@dataclass(frozen=True)
class Branch(LocationTree):
    """One location tree per composed automaton."""

    locations: tuple[LocationTree, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "locations", tuple(self.locations))


def combinations(locations: Iterable[Iterable[LocationTree]]) -> Iterator[Branch]:
    """Yield a branch for every choice of one location from each iterable."""
    pools = [list(pool) for pool in locations]
    for choice in product(*pools):
        yield Branch(choice)


@dataclass(frozen=True)
class Traversal:
    """An edge together with the location it leads to."""

    edge: Edge
    destination: LocationTree


class TA(ABC):
    """A timed automaton: something with clocks."""

    @abstractmethod
    def clocks(self) -> set[str]:
        """Return the names of the clocks."""

    @abstractmethod
    def clock_count(self) -> int:
        """Return the number of clocks."""


class IOA(ABC):
    """An input/output automaton: something with an alphabet split in two."""

    @abstractmethod
    def inputs(self) -> set[Action]:
        """Return the input actions."""

    @abstractmethod
    def outputs(self) -> set[Action]:
        """Return the output actions."""

    def actions(self) -> set[Action]:
        """Return all actions, inputs and outputs together."""
        return self.inputs() | self.outputs()


class TIOA(TA, IOA):
    """A timed input/output automaton."""

    @abstractmethod
    def initial_location(self) -> LocationTree:
        """Return the initial location."""

    @abstractmethod
    def location(self, tree: LocationTree) -> Location:
        """Return the location the tree identifies; raise ValueError if it is not valid."""

    @abstractmethod
    def outgoing_traversals(self, source: LocationTree, action: Action) -> list[Traversal]:
        """Return the traversals leaving ``source`` on ``action``."""