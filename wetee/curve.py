"""Threshold curves used by voting tracks."""

from __future__ import annotations

from dataclasses import dataclass

from .fixed import Percent, fixed_from_i64, fixed_from_u64, u32_from_fixed

_U32_MASK = 2**32 - 1
_U64_MASK = 2**64 - 1


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _u32_sub(a: int, b: int) -> int:
    if b > a:
        raise OverflowError("attempt to subtract with overflow")
    return a - b


def _u32_mul(a: int, b: int) -> int:
    product = a * b
    if product > _U32_MASK:
        raise OverflowError("attempt to multiply with overflow")
    return product


@dataclass(frozen=True)
class LinearDecreasingArg:
    begin: int
    end: int
    length: int


@dataclass(frozen=True)
class SteppedDecreasingArg:
    begin: int
    end: int
    step: int
    period: int


@dataclass(frozen=True)
class ReciprocalArg:
    x_offset_percent: Percent
    x_scale_arg: int
    begin: int
    end: int


@dataclass(frozen=True)
class LinearDecreasing:
    """Falls linearly from `begin` at 0 to `end` at `length`, then stays at `end`."""

    begin: int
    end: int
    length: int

    def y(self, x: int) -> int:
        if x >= self.length:
            return self.end
        span = _u32_sub(self.begin, self.end)
        slope = _trunc_div(
            fixed_from_i64(span) * fixed_from_i64(x), fixed_from_i64(self.length)
        )
        return u32_from_fixed(fixed_from_i64(self.begin) - slope)


@dataclass(frozen=True)
class SteppedDecreasing:
    """Drops by `step` every `period` blocks, never going below `end`."""

    begin: int
    end: int
    step: int
    period: int

    def y(self, x: int) -> int:
        if self.period == 0 or x < self.period:
            return self.begin
        sub_value = (x // self.period) * self.step
        if sub_value > 255 or sub_value >= self.begin or self.begin - sub_value <= self.end:
            return self.end
        return self.begin - sub_value


@dataclass(frozen=True)
class Reciprocal:
    """A reciprocal curve `factor / (x / x_scale + x_offset) - y_offset`."""

    factor: int
    x_scale: int
    x_offset: int
    y_offset: int

    def y(self, x: int) -> int:
        offset = fixed_from_u64(self.x_offset & _U64_MASK)
        denominator = _trunc_div(fixed_from_u64(x), self.x_scale) + offset
        value = _trunc_div(fixed_from_i64(self.factor), denominator) - self.y_offset
        return value & _U32_MASK


CurveArg = LinearDecreasingArg | SteppedDecreasingArg | ReciprocalArg
Curve = LinearDecreasing | SteppedDecreasing | Reciprocal


def arg_to_curve(arg: CurveArg) -> Curve:
    """Build the curve described by a curve argument."""
    if isinstance(arg, LinearDecreasingArg):
        return LinearDecreasing(begin=arg.begin, end=arg.end, length=arg.length)
    if isinstance(arg, SteppedDecreasingArg):
        return SteppedDecreasing(
            begin=arg.begin, end=arg.end, step=arg.step, period=arg.period
        )
    if isinstance(arg, ReciprocalArg):
        x_scale = 1 if arg.x_scale_arg == 0 else arg.x_scale_arg
        slot = _u32_sub(arg.begin, arg.end)
        y_offset = -arg.end

        if arg.x_offset_percent.v > 0:
            x = arg.x_offset_percent.mul_i64(slot)
            y = _trunc_div(
                fixed_from_i64(slot), fixed_from_u64(x & _U64_MASK) + fixed_from_i64(0)
            ) & _U32_MASK
            ratio = slot // y
            slot = _u32_mul(slot, ratio)
            x_offset = x
        else:
            x_offset = x_scale if x_scale > 1 else 1

        return Reciprocal(
            factor=slot, x_scale=x_scale, x_offset=x_offset, y_offset=y_offset
        )
    raise TypeError(f"unknown curve argument: {arg!r}")