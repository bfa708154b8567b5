"""Actions: the letters of an automaton's alphabet."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Action:
    """A letter of the alphabet of all actions, identified by its letter."""

    letter: str