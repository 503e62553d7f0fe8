"""
Random number and one-time password generation.

All values come from the secrets module, which draws on the operating
system's CSPRNG. When the platform cannot provide entropy the failure is
reported as RandomSourceError rather than falling back to a predictable
generator.
"""

import secrets
from typing import Callable, Optional, TypeVar

from number_toolkit.errors import InvalidArgumentError, RandomSourceError
from number_toolkit.logging import get_logger, log_invalid_argument

logger = get_logger(__name__)

T = TypeVar("T")

_system_random = secrets.SystemRandom()


def _draw(operation: str, generator: Callable[[], T]) -> T:
    """Run a draw against the OS random source, classifying platform failures."""
    try:
        return generator()
    except (NotImplementedError, OSError) as e:
        logger.error("Secure random source unavailable", operation=operation, error=str(e))
        raise RandomSourceError(
            f"Secure random source unavailable: {e}",
            source="os.urandom",
            context={"operation": operation},
        ) from e


def _random_int(minimum: int, maximum: int, operation: str) -> int:
    """Uniform integer in [minimum, maximum]."""
    return _draw(operation, lambda: minimum + secrets.randbelow(maximum - minimum + 1))


def generate_random_integer(min_digits: int, max_digits: Optional[int] = None) -> int:
    """
    Generate a random integer whose digit count lies between the bounds.

    The digit length is chosen uniformly first, then the value uniformly
    among the numbers of that length, so generate_random_integer(2, 4)
    is as likely to return a 2-digit number as a 4-digit one.

    Args:
        min_digits: Minimum number of digits, >= 1
        max_digits: Maximum number of digits, defaults to min_digits

    Returns:
        Integer in [10**(L-1), 10**L - 1] for the chosen length L

    Raises:
        InvalidArgumentError: If min_digits < 1 or max_digits < min_digits
        RandomSourceError: If the secure random source is unavailable
    """
    if min_digits < 1:
        log_invalid_argument(logger, "generate_random_integer", "min_digits", min_digits,
                             "fewer than one digit")
        raise InvalidArgumentError("Minimum number of digits must be >= 1.",
                                   argument="min_digits", value=min_digits)

    if max_digits is None:
        max_digits = min_digits

    if max_digits < min_digits:
        log_invalid_argument(logger, "generate_random_integer", "max_digits", max_digits,
                             "below min_digits", context={"min_digits": min_digits})
        raise InvalidArgumentError("Maximum digits cannot be less than minimum digits.",
                                   argument="max_digits", value=max_digits)

    length = _random_int(min_digits, max_digits, "generate_random_integer")
    return _random_int(10 ** (length - 1), 10 ** length - 1, "generate_random_integer")


def generate_otp(digits: int = 6) -> int:
    """
    Generate a numeric one-time password.

    Args:
        digits: OTP length; the default yields a value in [100000, 999999]

    Raises:
        InvalidArgumentError: If digits < 1
        RandomSourceError: If the secure random source is unavailable
    """
    if digits < 1:
        log_invalid_argument(logger, "generate_otp", "digits", digits, "fewer than one digit")
        raise InvalidArgumentError("OTP length must be >= 1.", argument="digits", value=digits)

    return _random_int(10 ** (digits - 1), 10 ** digits - 1, "generate_otp")


def random_float(minimum: float = 0.0, maximum: float = 1.0) -> float:
    """
    Uniform float in [minimum, maximum).

    Raises:
        InvalidArgumentError: If maximum < minimum
        RandomSourceError: If the secure random source is unavailable
    """
    if maximum < minimum:
        log_invalid_argument(logger, "random_float", "maximum", maximum, "below minimum",
                             context={"minimum": minimum})
        raise InvalidArgumentError("Maximum cannot be less than minimum.",
                                   argument="maximum", value=maximum)

    return minimum + (maximum - minimum) * _draw("random_float", _system_random.random)
