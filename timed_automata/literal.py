"""Literal values appearing in guards, invariants and updates."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

I16_MIN = -(2**15)
I16_MAX = 2**15 - 1


class LiteralKind(Enum):
    BOOLEAN = "boolean"
    I16 = "i16"
    IDENTIFIER = "identifier"


@dataclass(frozen=True)
class Literal:
    """A boolean, a 16-bit signed integer or an identifier."""

    kind: LiteralKind
    value: Union[bool, int, str]

    @classmethod
    def new_boolean(cls, value: bool) -> Literal:
        if not isinstance(value, bool):
            raise TypeError(f"expected a bool, got {type(value).__name__}")
        return cls(LiteralKind.BOOLEAN, value)

    @classmethod
    def new_true(cls) -> Literal:
        return cls.new_boolean(True)

    @classmethod
    def new_false(cls) -> Literal:
        return cls.new_boolean(False)

    @classmethod
    def new_identifier(cls, symbol: str) -> Literal:
        if not isinstance(symbol, str):
            raise TypeError(f"expected a str, got {type(symbol).__name__}")
        return cls(LiteralKind.IDENTIFIER, symbol)

    @classmethod
    def new_i16(cls, value: int) -> Literal:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected an int, got {type(value).__name__}")
        if not I16_MIN <= value <= I16_MAX:
            raise ValueError(f"{value} does not fit in a signed 16-bit integer")
        return cls(LiteralKind.I16, value)

    def boolean(self) -> bool | None:
        """Return the boolean value, or None if this is not a boolean."""
        return self.value if self.kind is LiteralKind.BOOLEAN else None  # type: ignore[return-value]

    def identifier(self) -> str | None:
        """Return the identifier, or None if this is not an identifier."""
        return self.value if self.kind is LiteralKind.IDENTIFIER else None  # type: ignore[return-value]

    def i16(self) -> int | None:
        """Return the integer value, or None if this is not an integer."""
        return self.value if self.kind is LiteralKind.I16 else None  # type: ignore[return-value]

    def __str__(self) -> str:
        if self.kind is LiteralKind.BOOLEAN:
            return "true" if self.value else "false"
        return str(self.value)