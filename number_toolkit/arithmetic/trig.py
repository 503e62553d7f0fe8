"""
Trigonometric, logarithmic and power wrappers.

Unlike the math module these never raise for inputs outside the real
domain: such calls return NaN, and log(0) returns -inf.
"""

import math
from typing import Optional, Union

Number = Union[int, float]


def _angle(value: Number, degrees: bool) -> float:
    return math.radians(value) if degrees else value


def _result_angle(value: float, degrees: bool) -> float:
    return math.degrees(value) if degrees else value


def sin(angle: Number, degrees: bool = False) -> float:
    return math.sin(_angle(angle, degrees))


def cos(angle: Number, degrees: bool = False) -> float:
    return math.cos(_angle(angle, degrees))


def tan(angle: Number, degrees: bool = False) -> float:
    return math.tan(_angle(angle, degrees))


def asin(value: Number, degrees: bool = False) -> float:
    if not -1 <= value <= 1:
        return math.nan
    return _result_angle(math.asin(value), degrees)


def acos(value: Number, degrees: bool = False) -> float:
    if not -1 <= value <= 1:
        return math.nan
    return _result_angle(math.acos(value), degrees)


def atan(value: Number, degrees: bool = False) -> float:
    return _result_angle(math.atan(value), degrees)


def atan2(y: Number, x: Number, degrees: bool = False) -> float:
    return _result_angle(math.atan2(y, x), degrees)


def deg_to_rad(degrees: Number) -> float:
    return math.radians(degrees)


def rad_to_deg(radians: Number) -> float:
    return math.degrees(radians)


def _out_of_log_domain(value: Number) -> Optional[float]:
    if value == 0:
        return -math.inf
    if value < 0:
        return math.nan
    return None


def log(value: Number, base: Optional[Number] = None) -> float:
    """
    Logarithm of value, natural when base is None.

    Returns:
        -inf for 0, NaN for negative values or an invalid base
    """
    fallback = _out_of_log_domain(value)
    if fallback is not None:
        return fallback
    if base is None:
        return math.log(value)
    if base <= 0 or base == 1:
        return math.nan
    return math.log(value, base)


def log10(value: Number) -> float:
    fallback = _out_of_log_domain(value)
    return math.log10(value) if fallback is None else fallback


def log2(value: Number) -> float:
    fallback = _out_of_log_domain(value)
    return math.log2(value) if fallback is None else fallback


def exp(value: Number) -> float:
    try:
        return math.exp(value)
    except OverflowError:
        return math.inf


def sqrt(value: Number) -> float:
    if value < 0:
        return math.nan
    return math.sqrt(value)


def cbrt(value: Number) -> float:
    """Real cube root, negative for negative input."""
    return math.copysign(abs(value) ** (1 / 3), value)


def power(base: Number, exponent: Number) -> float:
    """Float power; NaN where the real result is undefined."""
    try:
        result = math.pow(base, exponent)
    except ValueError:
        return math.nan
    except OverflowError:
        return math.inf
    return result
