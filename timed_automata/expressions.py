"""Boolean and clock-constraint expression trees."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import reduce
from typing import Sequence

from .literal import Literal


class Binary(Enum):
    CONJUNCTION = "∧"
    DISJUNCTION = "∨"

    def __str__(self) -> str:
        return self.value


class Unary(Enum):
    LOGICAL_NEGATION = "¬"

    def __str__(self) -> str:
        return self.value


class Comparison(Enum):
    LESS_THAN_OR_EQUAL = "≤"
    LESS_THAN = "<"
    EQUAL = "=="
    GREATER_THAN_OR_EQUAL = "≥"
    GREATER_THAN = ">"

    def __str__(self) -> str:
        return self.value


class Expression:
    """Base of all expression nodes."""

    __slots__ = ()

    def negate(self) -> Expression:
        """Return the logical negation of this expression."""
        return UnaryExpression(Unary.LOGICAL_NEGATION, self)

    def conjoin(self, rhs: Sequence[Expression]) -> Expression:
        """Return this expression conjoined with every expression in ``rhs``."""
        if not rhs:
            return self
        return conjunction([self, *rhs])

    def disjoin(self, rhs: Sequence[Expression]) -> Expression:
        """Return this expression disjoined with every expression in ``rhs``."""
        if not rhs:
            return self
        return disjunction([self, *rhs])


@dataclass(frozen=True)
class UnaryExpression(Expression):
    operator: Unary
    operand: Expression

    def __str__(self) -> str:
        return f"{self.operator}{self.operand}"


@dataclass(frozen=True)
class BinaryExpression(Expression):
    lhs: Expression
    operator: Binary
    rhs: Expression

    def __str__(self) -> str:
        return f"{self.lhs}{self.operator}{self.rhs}"


@dataclass(frozen=True)
class Group(Expression):
    expression: Expression

    def __str__(self) -> str:
        return f"({self.expression})"


@dataclass(frozen=True)
class LiteralExpression(Expression):
    literal: Literal

    def __str__(self) -> str:
        return str(self.literal)


@dataclass(frozen=True)
class ClockConstraint(Expression):
    operand: Expression
    comparison: Comparison
    limit: Expression

    def __str__(self) -> str:
        return f"{self.operand} {self.comparison} {self.limit}"


@dataclass(frozen=True)
class DiagonalClockConstraint(Expression):
    minuend: Expression
    subtrahend: Expression
    comparison: Comparison
    limit: Expression

    def __str__(self) -> str:
        return f"{self.minuend} - {self.subtrahend} {self.comparison} {self.limit}"


def left_fold_binary(expressions: Sequence[Expression], binary: Binary) -> Expression:
    """Fold the expressions from the left with the binary operator."""
    if not expressions:
        raise ValueError("cannot fold an empty list of expressions")
    return reduce(lambda acc, expr: BinaryExpression(acc, binary, expr), expressions)


def conjunction(expressions: Sequence[Expression]) -> Expression:
    return left_fold_binary(expressions, Binary.CONJUNCTION)


def disjunction(expressions: Sequence[Expression]) -> Expression:
    return left_fold_binary(expressions, Binary.DISJUNCTION)


def new_clock_constraint(
    operand: Expression, comparison: Comparison, limit: Expression
) -> ClockConstraint:
    return ClockConstraint(operand, comparison, limit)


def from_literal(literal: Literal) -> LiteralExpression:
    return LiteralExpression(literal)