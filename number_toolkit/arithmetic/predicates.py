"""Parity, sign and comparison predicates"""

from typing import Union

Number = Union[int, float]


def is_even(number: int) -> bool:
    return (number & 1) == 0


def is_odd(number: int) -> bool:
    return (number & 1) == 1


def is_not_even(number: int) -> bool:
    return not is_even(number)


def is_not_odd(number: int) -> bool:
    return not is_odd(number)


def is_positive(number: Number) -> bool:
    return number > 0


def is_negative(number: Number) -> bool:
    return number < 0


def is_zero(number: Number) -> bool:
    return number == 0


def is_greater_than(value: Number, number: Number) -> bool:
    return value > number


def is_less_than(value: Number, number: Number) -> bool:
    return value < number


def is_between(value: Number, minimum: Number, maximum: Number) -> bool:
    """Inclusive on both bounds."""
    return minimum <= value <= maximum


def is_prime(number: int) -> bool:
    """
    Primality by trial division over 6k±1 candidates.

    Every prime above 3 has the form 6k±1, so after ruling out multiples
    of 2 and 3 only those candidates up to √n need testing.
    """
    if number <= 1:
        return False
    if number <= 3:
        return True
    if number % 2 == 0 or number % 3 == 0:
        return False

    i = 5
    while i * i <= number:
        if number % i == 0 or number % (i + 2) == 0:
            return False
        i += 6

    return True
