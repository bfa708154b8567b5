import pytest

from timed_automata.action import Action
from timed_automata.automaton import Automaton, DiGraph
from timed_automata.edge import Edge
from timed_automata.expressions import from_literal
from timed_automata.literal import Literal
from timed_automata.location import with_name
from timed_automata.specification import ConversionError, Specification, is_input_enabled
from timed_automata.statements import empty
from timed_automata.tioa import Leaf


def _simple_automaton():
    graph = DiGraph()
    node_a = graph.add_node(with_name("A"))
    node_b = graph.add_node(with_name("B"))
    graph.add_edge(
        node_a,
        node_b,
        Edge.new_input(Action("input"), from_literal(Literal.new_true()), empty()),
    )
    return Automaton(node_a, graph, {"clock"}), node_a, node_b


def test_is_input_enabled_returns_specification():
    automaton, node_a, _ = _simple_automaton()
    specification = is_input_enabled(automaton)
    assert isinstance(specification, Specification)
    assert specification.initial_location() == Leaf(node_a)


def test_specification_delegates_alphabet_and_clocks():
    automaton, _, _ = _simple_automaton()
    specification = is_input_enabled(automaton)
    assert specification.inputs() == {Action("input")}
    assert specification.outputs() == set()
    assert specification.actions() == {Action("input")}
    assert specification.clocks() == {"clock"}
    assert specification.clock_count() == 1


def test_specification_delegates_locations_and_traversals():
    automaton, node_a, node_b = _simple_automaton()
    specification = Specification(automaton)
    assert specification.location(Leaf(node_b)).name() == "B"
    traversals = specification.outgoing_traversals(Leaf(node_a), Action("input"))
    assert [t.destination for t in traversals] == [Leaf(node_b)]
    assert specification.outgoing_traversals(Leaf(node_b), Action("input")) == []


def test_specification_propagates_invalid_location():
    automaton, _, _ = _simple_automaton()
    specification = Specification(automaton)
    with pytest.raises(ValueError):
        specification.location(Leaf(99))


def test_is_input_enabled_rejects_non_automaton():
    value = object()
    with pytest.raises(ConversionError) as info:
        is_input_enabled(value)
    assert info.value.original is value


def test_specification_requires_tioa():
    with pytest.raises(TypeError):
        Specification("not an automaton")