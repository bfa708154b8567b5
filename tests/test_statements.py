from timed_automata.expressions import from_literal
from timed_automata.literal import Literal
from timed_automata.statements import (
    Branch,
    ExpressionStatement,
    Reset,
    Sequence,
    branch,
    empty,
    express,
    sequence,
)


def test_empty_is_empty_sequence():
    assert empty() == Sequence(())
    assert empty().statements == ()


def test_empty_display():
    assert str(empty()) == ";"
    assert str(branch([])) == ";"


def test_sequence_keeps_order():
    a = Reset("x", 0)
    b = Reset("y", 1)
    assert sequence([a, b]).statements == (a, b)
    assert sequence(iter([b, a])).statements == (b, a)


def test_branch_holds_statements():
    a = Reset("x", 0)
    assert branch([a]) == Branch((a,))
    assert branch([a]) != sequence([a])


def test_sequence_display_uses_semicolons():
    text = str(sequence([Reset("x", 0), Reset("y", 1)]))
    assert text == "x = 0; y = 1"


def test_branch_display_uses_bars():
    parts = [Reset("x", 0), Reset("y", 1)]
    assert str(branch(parts)) == " || ".join(str(p) for p in parts)


def test_express_wraps_expression_and_ends_line():
    expression = from_literal(Literal.new_true())
    statement = express(expression)
    assert statement == ExpressionStatement(expression)
    assert str(statement) == str(expression) + "\n"


def test_reset_fields():
    reset = Reset("clock", 0)
    assert reset.clock == "clock"
    assert reset.limit == 0