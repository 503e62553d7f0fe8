"""Interpolation, range mapping, clamping and wrapping"""

import math
from typing import Union

Number = Union[int, float]


def _ieee_divide(numerator: float, denominator: float) -> float:
    """Division that yields ±inf or NaN for a zero denominator instead of raising."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def map_range(value: Number, from_min: Number, from_max: Number,
              to_min: Number, to_max: Number) -> float:
    """
    Linearly remap value from [from_min, from_max] onto [to_min, to_max].

    A zero-width source range is not rejected: the result is ±inf, or NaN
    when value sits exactly on the range.
    """
    return _ieee_divide((value - from_min) * (to_max - to_min), from_max - from_min) + to_min


def normalize(value: Number, minimum: Number, maximum: Number) -> float:
    """Position of value within [minimum, maximum] scaled to [0, 1]."""
    return map_range(value, minimum, maximum, 0, 1)


def lerp(start: Number, end: Number, t: Number) -> float:
    """Linear interpolation; t outside [0, 1] extrapolates."""
    return start + (end - start) * t


def inverse_lerp(start: Number, end: Number, value: Number) -> float:
    """The t for which lerp(start, end, t) == value."""
    return _ieee_divide(value - start, end - start)


def clamp(value: Number, minimum: Number, maximum: Number) -> Number:
    return max(minimum, min(value, maximum))


def mod(value: Number, modulus: Number) -> Number:
    """Remainder that is never negative, whatever the operand signs."""
    return value % abs(modulus)


def wrap(value: Number, minimum: Number, maximum: Number) -> Number:
    """
    Wrap value periodically into [minimum, maximum).

    wrap(370, 0, 360) == 10, wrap(-1, 0, 12) == 11. A zero-width range
    returns minimum.
    """
    width = maximum - minimum
    if width == 0:
        return minimum
    return minimum + mod(value - minimum, width)


def sign(value: Number) -> int:
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def approximately(a: Number, b: Number, epsilon: float = 1e-9) -> bool:
    """Equality within an absolute tolerance."""
    return abs(a - b) <= epsilon
