"""Number theory helpers: factorials, Fibonacci, divisibility and base conversion"""

import math
import string

from number_toolkit.errors import InvalidArgumentError
from number_toolkit.logging import get_logger, log_invalid_argument

logger = get_logger(__name__)

_BASE_DIGITS = string.digits + string.ascii_lowercase


def factorial(number: int) -> int:
    """
    Calculate n! iteratively.

    Args:
        number: Non-negative integer

    Returns:
        n!, with 0! == 1! == 1

    Raises:
        InvalidArgumentError: If number is negative
    """
    if number < 0:
        log_invalid_argument(logger, "factorial", "number", number, "negative input")
        raise InvalidArgumentError("Input must be non-negative.", argument="number", value=number)

    result = 1
    for i in range(2, number + 1):
        result *= i

    return result


def fibonacci(n: int) -> int:
    """
    n-th Fibonacci number, F(0) = 0 and F(1) = 1.

    Non-positive indices return 0.
    """
    if n <= 0:
        return 0

    prev, curr = 0, 1
    for _ in range(n - 1):
        prev, curr = curr, prev + curr

    return curr


def fibonacci_sequence(count: int) -> list[int]:
    """The first count Fibonacci numbers, starting at F(0)."""
    sequence = []
    prev, curr = 0, 1
    for _ in range(count):
        sequence.append(prev)
        prev, curr = curr, prev + curr
    return sequence


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm, always >= 0."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple; 0 if either argument is 0."""
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // gcd(a, b)


def prime_factors(number: int) -> list[int]:
    """Prime factorisation with multiplicity, ascending. Below 2 gives []."""
    factors = []
    if number < 2:
        return factors

    while number % 2 == 0:
        factors.append(2)
        number //= 2

    i = 3
    while i * i <= number:
        while number % i == 0:
            factors.append(i)
            number //= i
        i += 2

    # Whatever remains above 1 is itself prime
    if number > 1:
        factors.append(number)

    return factors


def divisors(number: int) -> list[int]:
    """All positive divisors of abs(number), ascending. 0 gives []."""
    number = abs(number)
    small, large = [], []

    i = 1
    while i * i <= number:
        if number % i == 0:
            small.append(i)
            if i != number // i:
                large.append(number // i)
        i += 1

    return small + large[::-1]


def is_perfect(number: int) -> bool:
    """True when number equals the sum of its proper divisors (6, 28, 496...)."""
    if number < 2:
        return False
    return sum(divisors(number)[:-1]) == number


def is_perfect_square(number: int) -> bool:
    if number < 0:
        return False
    root = math.isqrt(number)
    return root * root == number


def _integer_cbrt(number: int) -> int:
    """Floor of the cube root of a non-negative int, by Newton iteration on ints."""
    if number < 2:
        return number

    # 2 ** ceil(bits / 3) is never below the true root
    root = 1 << ((number.bit_length() + 2) // 3)
    while True:
        candidate = (2 * root + number // (root * root)) // 3
        if candidate >= root:
            return root
        root = candidate


def is_perfect_cube(number: int) -> bool:
    """Integer cube check, negative cubes included. Exact for ints of any size."""
    magnitude = abs(number)
    return _integer_cbrt(magnitude) ** 3 == magnitude


def permutations(n: int, r: int) -> int:
    """nPr = n! / (n-r)!; 0 when r is out of range."""
    if r < 0 or r > n:
        return 0
    return factorial(n) // factorial(n - r)


def combinations(n: int, r: int) -> int:
    """nCr = n! / (r! (n-r)!); 0 when r is out of range."""
    if r < 0 or r > n:
        return 0
    return factorial(n) // (factorial(r) * factorial(n - r))


def primes_up_to(limit: int) -> list[int]:
    """All primes <= limit by the sieve of Eratosthenes."""
    if limit < 2:
        return []

    sieve = [True] * (limit + 1)
    sieve[0] = sieve[1] = False
    for i in range(2, math.isqrt(limit) + 1):
        if sieve[i]:
            sieve[i * i::i] = [False] * len(range(i * i, limit + 1, i))

    return [i for i, prime in enumerate(sieve) if prime]


def _check_base(base: int, argument: str) -> None:
    if not 2 <= base <= 36:
        log_invalid_argument(logger, "base_convert", argument, base, "base outside 2..36")
        raise InvalidArgumentError(
            f"Base must be between 2 and 36, got {base}.", argument=argument, value=base
        )


def _to_base(number: int, base: int) -> str:
    if number == 0:
        return "0"

    sign = "-" if number < 0 else ""
    number = abs(number)
    digits = []
    while number:
        number, remainder = divmod(number, base)
        digits.append(_BASE_DIGITS[remainder])

    return sign + "".join(reversed(digits))


def base_convert(value: str, from_base: int, to_base: int) -> str:
    """
    Convert a number written in one positional base to another.

    Args:
        value: Digits in from_base, optionally signed (case-insensitive)
        from_base: Source base, 2..36
        to_base: Target base, 2..36

    Returns:
        Lower-case digit string in to_base

    Raises:
        InvalidArgumentError: If a base is out of range or value has
            digits that are invalid for from_base
    """
    _check_base(from_base, "from_base")
    _check_base(to_base, "to_base")

    try:
        number = int(value.strip(), from_base)
    except ValueError as e:
        log_invalid_argument(logger, "base_convert", "value", value, f"not a base-{from_base} number")
        raise InvalidArgumentError(
            f"{value!r} is not a valid base-{from_base} number.", argument="value", value=value
        ) from e

    return _to_base(number, to_base)


def to_binary(number: int) -> str:
    return _to_base(number, 2)


def to_octal(number: int) -> str:
    return _to_base(number, 8)


def to_hex(number: int) -> str:
    return _to_base(number, 16)
