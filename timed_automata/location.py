"""Locations: the sources and destinations of an automaton's edges."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .expressions import Expression, conjunction, from_literal
from .literal import Literal


class Location:
    """Base of all locations."""

    __slots__ = ()

    def name(self) -> str | None:
        """Return the location's name, or None for a combined location."""
        if isinstance(self, LeafLocation):
            return self.label
        return None

    def invariant(self) -> Expression:
        """Return the invariant that must hold while staying in the location."""
        if isinstance(self, LeafLocation):
            return self.constraint
        if isinstance(self, BranchLocation):
            return conjunction([location.invariant() for location in self.locations])
        raise TypeError(f"unknown location kind {type(self).__name__}")


@dataclass(frozen=True)
class LeafLocation(Location):
    """An atomic location, named uniquely and guarded by an invariant.

    Invariants describe upper bounds on clocks and diagonal constraints only.
    """

    label: str
    constraint: Expression


@dataclass(frozen=True)
class BranchLocation(Location):
    """A location made of several sub-locations, one per composed automaton."""

    locations: tuple[Location, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "locations", tuple(self.locations))


def combine(locations: Iterable[Location]) -> BranchLocation:
    """Combine locations into a single location whose invariant is their conjunction."""
    return BranchLocation(tuple(locations))


def with_name(name: str) -> LeafLocation:
    """Create a location with the given name and an invariant that always holds."""
    return LeafLocation(name, from_literal(Literal.new_true()))