import pytest

from timed_automata.literal import Literal, LiteralKind


def test_boolean_literals():
    assert Literal.new_true().boolean() is True
    assert Literal.new_false().boolean() is False
    assert Literal.new_boolean(True) == Literal.new_true()
    assert Literal.new_true().kind is LiteralKind.BOOLEAN


def test_accessors_return_none_for_other_kinds():
    number = Literal.new_i16(7)
    name = Literal.new_identifier("x")
    flag = Literal.new_true()

    assert number.boolean() is None
    assert number.identifier() is None
    assert name.i16() is None
    assert name.boolean() is None
    assert flag.i16() is None
    assert flag.identifier() is None


def test_i16_round_trip():
    for value in (-(2**15), -1, 0, 1, 2**15 - 1):
        assert Literal.new_i16(value).i16() == value


@pytest.mark.parametrize("value", [2**15, -(2**15) - 1])
def test_i16_out_of_range(value):
    with pytest.raises(ValueError):
        Literal.new_i16(value)


def test_i16_rejects_bool():
    with pytest.raises(TypeError):
        Literal.new_i16(True)


def test_boolean_rejects_int():
    with pytest.raises(TypeError):
        Literal.new_boolean(1)


def test_identifier_round_trip():
    assert Literal.new_identifier("clock").identifier() == "clock"


def test_kinds_are_distinct():
    assert Literal.new_true() != Literal.new_i16(1)


def test_display():
    assert str(Literal.new_true()) == "true"
    assert str(Literal.new_false()) == "false"
    assert str(Literal.new_i16(-7)) == "-7"
    assert str(Literal.new_identifier("clock")) == "clock"