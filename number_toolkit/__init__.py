"""
Number Toolkit - stateless numeric utilities

Digit script conversion, parity and comparison checks, arithmetic
wrappers, human readable formatting, descriptive statistics, number
theory, trigonometry, interpolation and secure random number generation.
Every function is pure; the package never configures logging on import.
"""

from .arithmetic import (
    absolute_value, add, approximately, base_convert, clamp, combinations,
    decrement, divide, divisors, factorial, fibonacci, fibonacci_sequence, gcd,
    increment, inverse_lerp, is_between, is_even, is_greater_than, is_less_than,
    is_negative, is_not_even, is_not_odd, is_odd, is_perfect, is_perfect_cube,
    is_perfect_square, is_positive, is_prime, is_zero, lcm, lerp, map_range, mod,
    modulo, multiply, normalize, permutations, prime_factors, primes_up_to,
    raise_to_power, sign, subtract, sum_of_digits, to_binary, to_hex, to_octal,
    trig, wrap,
)
from .arithmetic.trig import (
    acos, asin, atan, atan2, cbrt, cos, deg_to_rad, exp, log, log2, log10, power,
    rad_to_deg, sin, sqrt, tan,
)
from .errors import InvalidArgumentError, RandomSourceError, SystemFailureError
from .formatting import (
    NumberFormatter, abbreviate, currency, duration, file_size, format_bytes,
    from_roman, from_scientific, humanize, ordinal, percentage, roman, shorten,
    to_scientific, to_words,
)
from .generators import generate_otp, generate_random_integer, random_float
from .numerals import (
    convert_numerals, convert_to_arabic_numerals, convert_to_bengali_numerals,
    convert_to_chinese_numerals, convert_to_devanagari_numerals,
    convert_to_english_numerals, convert_to_persian_numerals, find_all_numbers,
    find_first_number, find_last_number, parse, supported_numeral_systems,
    to_numeral_system,
)
from .stats import (
    average, maximum, median, minimum, mode, product, standard_deviation, total,
    value_range, variance,
)

__version__ = "0.1.0"
__author__ = "Number Toolkit Team"
