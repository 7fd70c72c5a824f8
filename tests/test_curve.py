import pytest

from wetee.curve import (
    LinearDecreasing,
    LinearDecreasingArg,
    Reciprocal,
    ReciprocalArg,
    SteppedDecreasing,
    SteppedDecreasingArg,
    arg_to_curve,
)
from wetee.fixed import Percent


def _non_increasing(values):
    return all(a >= b for a, b in zip(values, values[1:]))


def test_linear_decreasing_curve():
    curve = LinearDecreasing(begin=10000, end=50, length=30)
    values = [curve.y(x) for x in range(0, 51)]
    assert values[0] == 10000
    assert _non_increasing(values)
    assert all(50 <= v <= 10000 for v in values)
    assert all(v == 50 for v in values[30:])


def test_linear_zero_length_is_end():
    assert LinearDecreasing(begin=10, end=3, length=0).y(0) == 3


def test_linear_inverted_bounds_overflow():
    with pytest.raises(OverflowError):
        LinearDecreasing(begin=1, end=5, length=10).y(2)


def test_stepped_decreasing_curve():
    curve = SteppedDecreasing(begin=100, end=50, step=10, period=10)
    values = [curve.y(x) for x in range(0, 101)]
    assert values[0] == 100
    assert values[9] == 100
    assert values[10] == 100 - 10
    assert values[20] == 100 - 10 * 2
    assert values[100] == 50
    assert _non_increasing(values)
    assert min(values) == 50


def test_stepped_zero_period_stays_at_begin():
    curve = SteppedDecreasing(begin=100, end=50, step=10, period=0)
    assert curve.y(1000) == 100


def test_reciprocal_curve():
    curve = arg_to_curve(
        ReciprocalArg(
            begin=10000,
            end=2000,
            x_offset_percent=Percent.from_percent(2),
            x_scale_arg=100,
        )
    )
    values = [curve.y(x) for x in range(0, 301)]
    assert values[0] == 10000
    assert _non_increasing(values)
    assert all(2000 <= v <= 10000 for v in values)
    assert curve.y_offset == -2000
    assert curve.x_scale == 100


def test_reciprocal_zero_scale_defaults_to_one():
    curve = arg_to_curve(
        ReciprocalArg(
            begin=500, end=100, x_offset_percent=Percent.from_percent(0), x_scale_arg=0
        )
    )
    assert curve.x_scale == 1
    assert curve.x_offset == 1
    assert curve.y(0) == 500


def test_reciprocal_inverted_bounds_overflow():
    with pytest.raises(OverflowError):
        arg_to_curve(
            ReciprocalArg(
                begin=1, end=2, x_offset_percent=Percent.from_percent(0), x_scale_arg=1
            )
        )


def test_arg_to_curve_linear_and_stepped():
    assert arg_to_curve(LinearDecreasingArg(begin=9, end=1, length=4)) == LinearDecreasing(
        begin=9, end=1, length=4
    )
    assert arg_to_curve(
        SteppedDecreasingArg(begin=9, end=1, step=2, period=3)
    ) == SteppedDecreasing(begin=9, end=1, step=2, period=3)


def test_arg_to_curve_rejects_unknown():
    with pytest.raises(TypeError):
        arg_to_curve("linear")