"""Opcodes and fixed-width little-endian immediates."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar


class Instruction(IntEnum):
    """Single-byte operation codes."""

    HALT = 0x00
    NOP = 0x01

    AND = 0x10
    OR = 0x11
    NOT = 0x12
    XOR = 0x13

    PUSH_HW = 0xF0
    POP_HW = 0xF1
    PUSH_W = 0xF2
    POP_W = 0xF3
    PUSH_D = 0xF4
    POP_D = 0xF5
    PUSH_Q = 0xF6
    POP_Q = 0xF7

    DCLK_LE = 0xE0
    DCLK_LT = 0xE1
    DCLK_EQ = 0xE2
    DCLK_GT = 0xE3
    DCLK_GE = 0xE4
    CLK_LE = 0xE5
    CLK_LT = 0xE6
    CLK_EQ = 0xE7
    CLK_GT = 0xE8
    CLK_GE = 0xE9
    CLK_FREE = 0xEA
    CLK_RESET = 0xEB
    CLK_CPY = 0xEC
    CLK_SHIFT = 0xED


@dataclass(frozen=True)
class Immediate:
    """An unsigned fixed-width value that can also be read as two's complement."""

    WIDTH: ClassVar[int] = 0

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"expected an int, got {type(self.value).__name__}")
        if not 0 <= self.value < 1 << self._bits():
            raise ValueError(f"{self.value} does not fit in {self._bits()} unsigned bits")

    @classmethod
    def _bits(cls) -> int:
        return cls.WIDTH * 8

    @classmethod
    def from_signed(cls, value: int) -> Immediate:
        """Create the immediate holding the two's complement of ``value``."""
        bits = cls._bits()
        if not -(1 << (bits - 1)) <= value < 1 << (bits - 1):
            raise ValueError(f"{value} does not fit in {bits} signed bits")
        return cls(value & ((1 << bits) - 1))

    @classmethod
    def from_bytes(cls, data: bytes) -> Immediate:
        """Decode little-endian bytes of exactly the immediate's width."""
        if len(data) != cls.WIDTH:
            raise ValueError(f"expected {cls.WIDTH} bytes, got {len(data)}")
        return cls(int.from_bytes(data, "little"))

    def signed(self) -> int:
        """Return the value read as a two's complement signed integer."""
        bits = self._bits()
        if self.value >= 1 << (bits - 1):
            return self.value - (1 << bits)
        return self.value

    def to_bytes(self) -> bytes:
        """Encode the value as little-endian bytes."""
        return self.value.to_bytes(self.WIDTH, "little")

    def __int__(self) -> int:
        return self.value


@dataclass(frozen=True)
class HalfWord(Immediate):
    WIDTH: ClassVar[int] = 1


@dataclass(frozen=True)
class Word(Immediate):
    WIDTH: ClassVar[int] = 2


@dataclass(frozen=True)
class DoubleWord(Immediate):
    WIDTH: ClassVar[int] = 4


@dataclass(frozen=True)
class QuadWord(Immediate):
    WIDTH: ClassVar[int] = 8