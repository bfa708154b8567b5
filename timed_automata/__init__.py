"""Timed input/output automata: locations, edges, clock constraints, specifications and parallel composition."""

__version__ = "0.1.0"