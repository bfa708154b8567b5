"""A timed input/output automaton backed by a directed graph."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from .action import Action
from .channel import Channel
from .edge import Edge
from .location import Location
from .tioa import TIOA, Leaf, LocationTree, Traversal


@dataclass(frozen=True)
class EdgeReference:
    """An edge of a graph together with its index and endpoints."""

    index: int
    source: int
    target: int
    weight: Edge


class DiGraph:
    """A directed multigraph with locations on nodes and edges on arcs."""

    def __init__(self) -> None:
        self._nodes: list[Location] = []
        self._edges: list[EdgeReference] = []

    def add_node(self, location: Location) -> int:
        """Add a node and return its index."""
        self._nodes.append(location)
        return len(self._nodes) - 1

    def add_edge(self, source: int, target: int, edge: Edge) -> int:
        """Add an edge from ``source`` to ``target`` and return its index."""
        for node in (source, target):
            if not 0 <= node < len(self._nodes):
                raise IndexError(f"node {node} is not in the graph")
        reference = EdgeReference(len(self._edges), source, target, edge)
        self._edges.append(reference)
        return reference.index

    def node_weight(self, index: int) -> Location | None:
        if 0 <= index < len(self._nodes):
            return self._nodes[index]
        return None

    def edge_weight(self, index: int) -> Edge | None:
        if 0 <= index < len(self._edges):
            return self._edges[index].weight
        return None

    def edge_references(self) -> Iterator[EdgeReference]:
        return iter(list(self._edges))

    def node_count(self) -> int:
        return len(self._nodes)

    def _edge_count(self) -> int:
        return len(self._edges)


class Automaton(TIOA):
    """A timed input/output automaton with clocks over the reals.

    Raises ValueError on construction if an action is used both as an input
    and as an output.
    """

    def __init__(self, initial: int, graph: DiGraph, clocks: Iterable[str]) -> None:
        inputs: set[Action] = set()
        outputs: set[Action] = set()
        for reference in graph.edge_references():
            edge = reference.weight
            (inputs if edge.is_input() else outputs).add(edge.action())
        if not inputs.isdisjoint(outputs):
            raise ValueError("an action cannot be both an input and an output")
        self._initial = initial
        self._graph = graph
        self._clocks = set(clocks)
        self._inputs = inputs
        self._outputs = outputs

    def initial(self) -> int:
        return self._initial

    def location_at(self, index: int) -> Location | None:
        return self._graph.node_weight(index)

    def location_tree(self, index: int) -> Leaf:
        return Leaf(index)

    def edge(self, index: int) -> Edge | None:
        return self._graph.edge_weight(index)

    def traversals(self, edges: Iterable[EdgeReference]) -> Iterator[Traversal]:
        for reference in edges:
            yield Traversal(reference.weight, self.location_tree(reference.target))

    def edges(self, edges: Iterable[EdgeReference]) -> Iterator[Edge]:
        for reference in edges:
            yield reference.weight

    def ingoing(self, node: int) -> Iterator[EdgeReference]:
        return (ref for ref in self._graph.edge_references() if ref.target == node)

    def outgoing(self, node: int) -> Iterator[EdgeReference]:
        return (ref for ref in self._graph.edge_references() if ref.source == node)

    def out_degree(self, node: int) -> int:
        return sum(1 for _ in self.outgoing(node))

    def in_degree(self, node: int) -> int:
        return sum(1 for _ in self.ingoing(node))

    def filter_by_channel(
        self, edges: Iterable[EdgeReference], target: Channel
    ) -> Iterator[EdgeReference]:
        return (ref for ref in edges if ref.weight.channel == target)

    def filter_by_input(self, edges: Iterable[EdgeReference]) -> Iterator[EdgeReference]:
        return (ref for ref in edges if ref.weight.is_input())

    def filter_by_output(self, edges: Iterable[EdgeReference]) -> Iterator[EdgeReference]:
        return (ref for ref in edges if ref.weight.is_output())

    def filter_by_action(
        self, edges: Iterable[EdgeReference], target: Action
    ) -> Iterator[EdgeReference]:
        return (ref for ref in edges if ref.weight.action() == target)

    def filter_by_action_id(
        self, edges: Iterable[EdgeReference], letter: str
    ) -> Iterator[EdgeReference]:
        return (ref for ref in edges if ref.weight.action().letter == letter)

    def connecting(self, source: int, destination: int) -> Iterator[EdgeReference]:
        return (
            ref
            for ref in self._graph.edge_references()
            if ref.source == source and ref.target == destination
        )

    def connecting_degree(self, source: int, destination: int) -> int:
        return sum(1 for _ in self.connecting(source, destination))

    def edge_iter(self) -> Iterator[int]:
        return iter(range(self._graph._edge_count()))

    def node_iter(self) -> Iterator[int]:
        return iter(range(self._graph.node_count()))

    def order(self) -> int:
        return self._graph.node_count()

    def force_add_edge(self, source: int, edge: Edge, destination: int) -> int:
        """Add an edge without checking that the automaton's rules still hold."""
        return self._graph.add_edge(source, destination, edge)

    def clocks(self) -> set[str]:
        return set(self._clocks)

    def clock_count(self) -> int:
        return len(self._clocks)

    def inputs(self) -> set[Action]:
        return set(self._inputs)

    def outputs(self) -> set[Action]:
        return set(self._outputs)

    def initial_location(self) -> LocationTree:
        return Leaf(self._initial)

    def location(self, tree: LocationTree) -> Location:
        if not isinstance(tree, Leaf):
            raise ValueError("an automaton's locations are leaves")
        location = self.location_at(tree.node)
        if location is None:
            raise ValueError(f"node {tree.node} is not in the automaton")
        return location

    def outgoing_traversals(self, source: LocationTree, action: Action) -> list[Traversal]:
        if not isinstance(source, Leaf):
            raise ValueError("an automaton's locations are leaves")
        return list(self.traversals(self.filter_by_action(self.outgoing(source.node), action)))