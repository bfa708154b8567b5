import pytest

from timed_automata.action import Action
from timed_automata.edge import Edge
from timed_automata.expressions import from_literal
from timed_automata.literal import Literal
from timed_automata.statements import empty
from timed_automata.tioa import IOA, TIOA, Branch, Leaf, Traversal, combinations


class _Alphabet(IOA):
    def __init__(self, inputs, outputs):
        self._inputs = set(inputs)
        self._outputs = set(outputs)

    def inputs(self):
        return set(self._inputs)

    def outputs(self):
        return set(self._outputs)


def test_locations_combinations():
    zero, one, two = Leaf(0), Leaf(1), Leaf(2)
    locations = iter(
        [
            iter([zero, one, two]),
            iter([zero, one]),
            iter([zero, one]),
        ]
    )
    result = list(combinations(locations))

    expected = [
        (zero, zero, zero),
        (zero, zero, one),
        (zero, one, zero),
        (zero, one, one),
        (one, zero, zero),
        (one, zero, one),
        (one, one, zero),
        (one, one, one),
        (two, zero, zero),
        (two, zero, one),
        (two, one, zero),
        (two, one, one),
    ]
    for choice in expected:
        assert Branch(list(choice)) in result
    assert len(result) == 12


def test_leaf_str():
    assert str(Leaf(3)) == "3"


def test_branch_str():
    assert str(Branch([Leaf(0), Leaf(1)])) == "0, 1"


def test_nested_branch_str_and_equality():
    tree = Branch([Leaf(0), Branch([Leaf(1), Leaf(2)])])
    assert str(tree) == "0, 1, 2"
    assert tree == Branch((Leaf(0), Branch((Leaf(1), Leaf(2)))))
    assert hash(tree) == hash(Branch((Leaf(0), Branch((Leaf(1), Leaf(2))))))


def test_traversal_holds_edge_and_destination():
    edge = Edge.new_input(Action("a"), from_literal(Literal.new_true()), empty())
    traversal = Traversal(edge, Leaf(4))
    assert traversal.edge == edge
    assert traversal.destination == Leaf(4)


def test_actions_is_union_of_inputs_and_outputs():
    alphabet = _Alphabet({Action("a")}, {Action("b"), Action("c")})
    assert alphabet.actions() == {Action("a"), Action("b"), Action("c")}


def test_tioa_is_abstract():
    with pytest.raises(TypeError):
        TIOA()