from timed_automata.environment import Environment


class _Clocked:
    def __init__(self, clocks):
        self._clocks = set(clocks)

    def clocks(self):
        return set(self._clocks)


def test_insert_assigns_indices_from_one():
    environment = Environment()
    assert environment.insert_clock("x") == 1
    assert environment.insert_clock("y") == 2


def test_insert_existing_returns_same_index():
    environment = Environment()
    first = environment.insert_clock("x")
    environment.insert_clock("y")
    assert environment.insert_clock("x") == first
    assert len(environment.clocks) == 2


def test_get_clock():
    environment = Environment()
    index = environment.insert_clock("x")
    assert environment.get_clock("x") == index
    assert environment.get_clock("missing") is None


def test_equality():
    left = Environment()
    right = Environment()
    left.insert_clock("x")
    right.insert_clock("x")
    assert left == right
    right.insert_clock("y")
    assert left != right


def test_from_tioa_holds_every_clock():
    environment = Environment.from_tioa(_Clocked({"x", "y", "z"}))
    assert set(environment.clocks) == {"x", "y", "z"}
    assert sorted(environment.clocks.values()) == [1, 2, 3]


def test_from_tioa_without_clocks_is_empty():
    assert Environment.from_tioa(_Clocked(())) == Environment()