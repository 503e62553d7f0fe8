"""
Magnitude formatting: K/M/B abbreviations and byte sizes.

Numbers are scaled by the largest unit not exceeding their magnitude. When
rounding pushes a mantissa up to the next unit's threshold (999_999 with
one decimal) the next unit is used instead, so "1,000.0K" never appears.
Scaling is done in Decimal, so ints far beyond float range still format.
"""

import math
from decimal import Decimal, localcontext
from typing import Sequence, Union

from number_toolkit.constants import ABBREVIATION_UNITS, BINARY_SIZE_UNITS, FILE_SIZE_UNITS

Number = Union[int, float]

def _is_non_finite(number: Number) -> bool:
    return isinstance(number, float) and not math.isfinite(number)

def _working_precision(value: Decimal, precision: int) -> int:
    """Context precision that keeps every integer digit plus the requested decimals."""
    return max(28, value.adjusted() + precision + 40)

def format_decimal(value: Number, precision: int, strip_zeros: bool = False,
                   grouping: bool = True) -> str:
    """
    Fixed-point formatting with optional thousands separators.

    Args:
        value: Number to format
        precision: Digits after the decimal point
        strip_zeros: Drop trailing zeros and a dangling decimal point
        grouping: Insert "," thousands separators

    Returns:
        Formatted string such as "1,234.5"
    """
    text = f"{value:,.{precision}f}" if grouping else f"{value:.{precision}f}"
    if strip_zeros and "." in text:
        text = text.rstrip("0").rstrip(".")
    return text

def _scale(number: Number, precision: int, long_names: bool, strip_zeros: bool) -> str:
    if _is_non_finite(number):
        return str(number)

    magnitude = abs(number)
    exact = Decimal(number)

    for index, (threshold, short, long) in enumerate(ABBREVIATION_UNITS):
        if magnitude < threshold:
            continue

        with localcontext() as ctx:
            ctx.prec = _working_precision(exact, precision)
            if index > 0 and round(abs(exact) / threshold, precision) >= 1000:
                threshold, short, long = ABBREVIATION_UNITS[index - 1]
            mantissa = format_decimal(exact / threshold, precision, strip_zeros)

        return f"{mantissa} {long}" if long_names else f"{mantissa}{short}"

    return str(number)

def abbreviate(number: Number, precision: int = 1) -> str:
    """
    Abbreviate large numbers with K, M, B, T and Q suffixes.

    abbreviate(1500) == "1.5K", abbreviate(2_500_000) == "2.5M",
    abbreviate(999) == "999". The sign is kept, so -1500 gives "-1.5K".
    """
    return _scale(number, precision, long_names=False, strip_zeros=False)

def shorten(number: Number, precision: int = 1) -> str:
    """Like abbreviate() without trailing zeros: 1000 -> "1K", 1500 -> "1.5K"."""
    return _scale(number, precision, long_names=False, strip_zeros=True)

def humanize(number: Number, precision: int = 1) -> str:
    """Scale with words: 1500 -> "1.5 thousand", 2_000_000 -> "2 million"."""
    return _scale(number, precision, long_names=True, strip_zeros=True)

def _format_size(size: Number, precision: int, base: int, units: Sequence[str]) -> str:
    if _is_non_finite(size):
        return str(size)

    if size < 0:
        return "-" + _format_size(-size, precision, base, units)

    exponent = 0
    scaled = Decimal(size)

    with localcontext() as ctx:
        ctx.prec = _working_precision(scaled, precision) + 10 * len(units)

        while scaled >= base and exponent < len(units) - 1:
            scaled /= base
            exponent += 1

        if exponent == 0:
            return f"{format_decimal(size, precision, strip_zeros=True, grouping=False)} {units[0]}"

        if round(scaled, precision) >= base and exponent < len(units) - 1:
            scaled /= base
            exponent += 1

        value = round(scaled, precision)
        return f"{format_decimal(value, precision, strip_zeros=True, grouping=False)} {units[exponent]}"

def file_size(size: Number, precision: int = 1) -> str:
    """
    Human readable byte count using 1024-based KB, MB, GB...

    file_size(500) == "500 B", file_size(1500) == "1.5 KB",
    file_size(2048) == "2 KB". Negative sizes get a leading minus sign.
    """
    return _format_size(size, precision, 1024, FILE_SIZE_UNITS)

def format_bytes(size: Number, precision: int = 1, binary: bool = False) -> str:
    """
    Human readable byte count in decimal or binary units.

    Args:
        size: Byte count
        precision: Digits after the decimal point
        binary: Use 1024-based KiB/MiB labels instead of 1000-based KB/MB

    Returns:
        Formatted size such as "1.5 KB" or "1.5 KiB"
    """
    if binary:
        return _format_size(size, precision, 1024, BINARY_SIZE_UNITS)
    return _format_size(size, precision, 1000, FILE_SIZE_UNITS)
