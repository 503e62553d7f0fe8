"""Arithmetic wrappers"""

from typing import Union

from number_toolkit.errors import InvalidArgumentError
from number_toolkit.logging import get_logger, log_invalid_argument

logger = get_logger(__name__)

Number = Union[int, float]


def add(value: Number, amount: Number) -> Number:
    return value + amount


def subtract(value: Number, amount: Number) -> Number:
    return value - amount


def multiply(value: Number, multiplier: Number) -> Number:
    return value * multiplier


def divide(value: Number, divisor: Number) -> float:
    """
    True division that rejects a zero divisor.

    Raises:
        InvalidArgumentError: If divisor is zero
    """
    if divisor == 0:
        log_invalid_argument(logger, "divide", "divisor", divisor, "division by zero")
        raise InvalidArgumentError("Divisor cannot be zero.", argument="divisor", value=divisor)

    return value / divisor


def raise_to_power(value: Number, exponent: Number) -> Number:
    """value ** exponent; negative integer exponents give a float."""
    return value ** exponent


def modulo(value: int, modulus: int) -> int:
    """Python remainder, which takes the sign of the modulus."""
    return value % modulus


def increment(value: int) -> int:
    return value + 1


def decrement(value: int) -> int:
    return value - 1


def absolute_value(value: Number) -> Number:
    return abs(value)


def sum_of_digits(value: int) -> int:
    """Sum of the decimal digits of abs(value)."""
    return sum(int(digit) for digit in str(abs(value)))
