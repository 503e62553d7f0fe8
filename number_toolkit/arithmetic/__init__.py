"""Arithmetic, predicates, number theory, trigonometry and interpolation"""

from .basic import (
    absolute_value,
    add,
    decrement,
    divide,
    increment,
    modulo,
    multiply,
    raise_to_power,
    subtract,
    sum_of_digits,
)
from .interpolation import (
    approximately,
    clamp,
    inverse_lerp,
    lerp,
    map_range,
    mod,
    normalize,
    sign,
    wrap,
)
from .number_theory import (
    base_convert,
    combinations,
    divisors,
    factorial,
    fibonacci,
    fibonacci_sequence,
    gcd,
    is_perfect,
    is_perfect_cube,
    is_perfect_square,
    lcm,
    permutations,
    prime_factors,
    primes_up_to,
    to_binary,
    to_hex,
    to_octal,
)
from .predicates import (
    is_between,
    is_even,
    is_greater_than,
    is_less_than,
    is_negative,
    is_not_even,
    is_not_odd,
    is_odd,
    is_positive,
    is_prime,
    is_zero,
)

__all__ = [
    # Basic arithmetic
    "absolute_value",
    "add",
    "decrement",
    "divide",
    "increment",
    "modulo",
    "multiply",
    "raise_to_power",
    "subtract",
    "sum_of_digits",
    # Interpolation
    "approximately",
    "clamp",
    "inverse_lerp",
    "lerp",
    "map_range",
    "mod",
    "normalize",
    "sign",
    "wrap",
    # Number theory
    "base_convert",
    "combinations",
    "divisors",
    "factorial",
    "fibonacci",
    "fibonacci_sequence",
    "gcd",
    "is_perfect",
    "is_perfect_cube",
    "is_perfect_square",
    "lcm",
    "permutations",
    "prime_factors",
    "primes_up_to",
    "to_binary",
    "to_hex",
    "to_octal",
    # Predicates
    "is_between",
    "is_even",
    "is_greater_than",
    "is_less_than",
    "is_negative",
    "is_not_even",
    "is_not_odd",
    "is_odd",
    "is_positive",
    "is_prime",
    "is_zero",
]
