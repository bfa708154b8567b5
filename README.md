# timed_automata

A library for modelling timed input/output automata (TIOAs). Automata are
built from named locations and edges; edges carry an input or output action,
a guard expression and an update statement. Automata can be wrapped as
specifications and combined by parallel composition, and the traversals
leaving a location on a given action can be listed.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Building an automaton

Locations and edges go into a `DiGraph`, whose `add_node` and `add_edge`
return integer indices. An `Automaton` is built from the initial node, the
graph and the clock names.

```python
from timed_automata.action import Action
from timed_automata.automaton import Automaton, DiGraph
from timed_automata.edge import Edge
from timed_automata.expressions import Comparison, from_literal, new_clock_constraint
from timed_automata.literal import Literal
from timed_automata.location import LeafLocation, with_name
from timed_automata.statements import empty

graph = DiGraph()
idle = graph.add_node(with_name("idle"))
busy = graph.add_node(
    LeafLocation(
        "busy",
        new_clock_constraint(
            from_literal(Literal.new_identifier("x")),
            Comparison.LESS_THAN_OR_EQUAL,
            from_literal(Literal.new_i16(5)),
        ),
    )
)
graph.add_edge(
    idle,
    busy,
    Edge.new_input(Action("start"), from_literal(Literal.new_true()), empty()),
)

automaton = Automaton(idle, graph, {"x"})
assert automaton.out_degree(idle) == 1
assert automaton.in_degree(busy) == 1
assert automaton.connecting_degree(idle, busy) == 1
assert automaton.inputs() == {Action("start")}
```

`Automaton` raises `ValueError` if an action appears both as an input and as
an output. It offers graph queries (`outgoing`, `ingoing`, `connecting`,
`filter_by_input`, `filter_by_output`, `filter_by_action`,
`filter_by_action_id`, `filter_by_channel`, `order`, ...) and the `TIOA`
interface: `initial_location`, `location(tree)` and
`outgoing_traversals(source, action)`. Locations of a plain automaton are
identified by `Leaf(node)`; passing anything else raises `ValueError`.

## Specifications and composition

`is_input_enabled` wraps a timed input/output automaton as a
`Specification`. It does not inspect the edges: every input is assumed to be
enabled everywhere. It raises `ConversionError`, keeping the original value
in its `original` attribute, when given something that is not a `TIOA`.

`Composition` joins two or more automata. Their clocks must be pairwise
disjoint and so must their outputs, otherwise `ValueError` is raised. The
outputs of the composition are the union of all outputs; its inputs are all
inputs that are not an output of any component.

```python
from timed_automata.action import Action
from timed_automata.automaton import Automaton, DiGraph
from timed_automata.composition import Composition
from timed_automata.edge import Edge
from timed_automata.expressions import from_literal
from timed_automata.literal import Literal
from timed_automata.location import with_name
from timed_automata.specification import is_input_enabled
from timed_automata.statements import empty
from timed_automata.tioa import Branch, Leaf

TRUE = from_literal(Literal.new_true())


def signal(output: str, clock: str) -> Automaton:
    graph = DiGraph()
    off = graph.add_node(with_name("off"))
    on = graph.add_node(with_name("on"))
    graph.add_edge(off, on, Edge.new_input(Action("press"), TRUE, empty()))
    graph.add_edge(on, off, Edge.new_output(Action(output), TRUE, empty()))
    return Automaton(off, graph, {clock})


composition = Composition(
    [is_input_enabled(signal("light", "x")), is_input_enabled(signal("sound", "y"))]
)
assert composition.size() == 2
assert composition.inputs() == {Action("press")}
assert composition.outputs() == {Action("light"), Action("sound")}

start = composition.initial_location()
assert start == Branch((Leaf(0), Leaf(0)))
(traversal,) = composition.outgoing_traversals(start, Action("press"))
assert str(traversal.destination) == "1, 1"
```

On an action, every component that knows the action moves and the others
stay where they are; one traversal is produced for each combination of the
moving components' traversals. Its edge's guard is the conjunction of their
guards and its update runs their updates as a `Branch`. An action unknown to
the composition, or a location tree that is not a `Branch` with one entry per
component, raises `ValueError`. `location(tree)` returns a `BranchLocation`
whose invariant is the conjunction of the components' invariants.

## Other pieces

- `sets`: `are_disjoint`, `union`, `intersection`, `subtract`, `skip_nth`.
- `channel`: `Channel` with a `Direction` (`IN` or `OUT`) and an `Action`.
- `literal`: `Literal` booleans, signed 16-bit integers (out-of-range values
  raise `ValueError`) and identifiers.
- `expressions`: expression trees (`UnaryExpression`, `BinaryExpression`,
  `Group`, `LiteralExpression`, `ClockConstraint`,
  `DiagonalClockConstraint`), `conjunction`, `disjunction`,
  `left_fold_binary` and the `Expression.negate`/`conjoin`/`disjoin`
  methods. `str()` renders them, e.g. `x ≤ 5`.
- `statements`: `Sequence`, `Branch`, `ExpressionStatement`, `Reset` and the
  helpers `sequence`, `empty`, `branch`, `express`.
- `edge`: `Edge`, including `Edge.conjoin` for edges on the same channel.
- `environment`: `Environment`, giving each clock name an index from 1.
- `instruction`: the `Instruction` opcodes and the little-endian immediates
  `HalfWord`, `Word`, `DoubleWord` and `QuadWord`:

  ```python
  from timed_automata.instruction import Instruction, Word

  assert Word.from_signed(-1).to_bytes() == b"\xff\xff"
  assert Word.from_bytes(b"\xff\xff").signed() == -1
  assert Instruction.CLK_RESET == 0xEB
  ```

## What it does not do

The package describes automata and their structure only. It has no clock
zones, does not delay or step through states, does not evaluate guards or
invariants, does not execute updates or instructions, and does not check
refinement between specifications. It has no file format for loading
automata and no command-line tool.