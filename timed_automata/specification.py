"""Specifications: input-enabled timed input/output automata."""

from __future__ import annotations

from typing import Any

from .action import Action
from .location import Location
from .tioa import TIOA, LocationTree, Traversal


class ConversionError(Exception):
    """A conversion failed; the value that could not be converted is kept intact."""

    def __init__(self, original: Any, reason: str) -> None:
        super().__init__(reason)
        self.original = original
        self.reason = reason


class Specification(TIOA):
    """A timed input/output automaton that can react to every input in every state.

    An input cannot be prevented from reaching a system, so a specification
    must handle all inputs explicitly at all times.
    """

    def __init__(self, tioa: TIOA) -> None:
        if not isinstance(tioa, TIOA):
            raise TypeError(f"expected a TIOA, got {type(tioa).__name__}")
        self._tioa = tioa

    def clocks(self) -> set[str]:
        return self._tioa.clocks()

    def clock_count(self) -> int:
        return self._tioa.clock_count()

    def inputs(self) -> set[Action]:
        return self._tioa.inputs()

    def outputs(self) -> set[Action]:
        return self._tioa.outputs()

    def initial_location(self) -> LocationTree:
        return self._tioa.initial_location()

    def outgoing_traversals(self, source: LocationTree, action: Action) -> list[Traversal]:
        return self._tioa.outgoing_traversals(source, action)

    def location(self, tree: LocationTree) -> Location:
        return self._tioa.location(tree)


def is_input_enabled(automaton: TIOA) -> Specification:
    """Turn an automaton into a specification.

    The check over-approximates: location invariants carry no lower bounds on
    clocks, so the zero valuation always satisfies them and every input is
    assumed enabled. Raises ConversionError, holding the original value, when
    the value is not a timed input/output automaton.
    """
    if not isinstance(automaton, TIOA):
        raise ConversionError(automaton, "not a timed input/output automaton")
    return Specification(automaton)