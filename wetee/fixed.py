"""Fixed-point arithmetic helpers, percentages and list bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

MATH_UNIT = 1_000_000

_U32_MAX = 2**32 - 1
_U64_MAX = 2**64 - 1
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1

T = TypeVar("T")


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _checked(value: int, low: int, high: int) -> int:
    if not low <= value <= high:
        raise OverflowError("arithmetic overflow")
    return value


def fixed_from_i64(u: int) -> int:
    """Convert a signed integer to fixed point."""
    return u * MATH_UNIT


def fixed_from_u64(u: int) -> int:
    """Convert an unsigned integer to fixed point."""
    return u * MATH_UNIT


def u32_from_fixed(i: int) -> int:
    """Truncate a fixed-point value to its integer part, wrapped to 32 bits."""
    return _trunc_div(i, MATH_UNIT) & _U32_MAX


@dataclass(frozen=True)
class Percent:
    """A percentage stored in tenths of a percent (v / 1000)."""

    v: int

    @classmethod
    def from_percent(cls, v: int) -> Percent:
        """Build a percentage from a whole number between 0 and 100."""
        if v < 0 or v > 100:
            raise ValueError("percent overflow")
        return cls(v * 10)

    def mul_fixed(self, i: int) -> int:
        return _trunc_div(i * self.v, 1000)

    def mul_u32(self, u: int) -> int:
        return _checked(u * self.v, 0, _U32_MAX) // 1000

    def mul_u64(self, u: int) -> int:
        return _checked(u * self.v, 0, _U64_MAX) // 1000

    def mul_i64(self, u: int) -> int:
        return _trunc_div(_checked(u * self.v, _I64_MIN, _I64_MAX), 1000)


@dataclass
class ListHelper(Generic[T]):
    """A list of issued ids together with the next id to hand out."""

    list: list[T] = field(default_factory=list)
    next_id: int = 0