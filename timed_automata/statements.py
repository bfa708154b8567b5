"""Update statements executed when an edge is traversed."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .expressions import Expression


class Statement:
    """Base of all statement nodes."""

    __slots__ = ()


@dataclass(frozen=True)
class Sequence(Statement):
    """Statements executed one after another."""

    statements: tuple[Statement, ...] = ()

    def __str__(self) -> str:
        if not self.statements:
            return ";"
        return "; ".join(str(statement) for statement in self.statements)


@dataclass(frozen=True)
class Branch(Statement):
    """Independent statements that may be executed in any order."""

    statements: tuple[Statement, ...] = ()

    def __str__(self) -> str:
        if not self.statements:
            return ";"
        return " || ".join(str(statement) for statement in self.statements)


@dataclass(frozen=True)
class ExpressionStatement(Statement):
    expression: Expression

    def __str__(self) -> str:
        return f"{self.expression}\n"


@dataclass(frozen=True)
class Reset(Statement):
    """Assign a clock to a limit."""

    clock: str
    limit: int

    def __str__(self) -> str:
        return f"{self.clock} = {self.limit}"


def sequence(statements: Iterable[Statement]) -> Sequence:
    return Sequence(tuple(statements))


def empty() -> Sequence:
    return Sequence(())


def branch(statements: Iterable[Statement]) -> Branch:
    return Branch(tuple(statements))


def express(expression: Expression) -> ExpressionStatement:
    return ExpressionStatement(expression)