from timed_automata.action import Action


def test_partial_eq():
    a = Action("a")
    b = Action("b")

    assert a == a
    assert b == b
    assert a != b


def test_letter():
    a0 = Action("a")
    a1 = Action("a")
    b = Action("b")

    assert a0.letter == a0.letter
    assert b.letter == b.letter
    assert a0.letter != b.letter

    assert a1.letter == a1.letter
    assert a1.letter != b.letter
    assert a0 == a1


def test_actions_are_hashable_by_letter():
    assert len({Action("a"), Action("a"), Action("b")}) == 2