"""English ordinals, Roman numerals and spelled-out numbers"""

import math
from decimal import Decimal
from typing import Union

from number_toolkit.constants import ONES, ROMAN_NUMERALS, SCALES, TENS

Number = Union[int, float]

_ROMAN_VALUES = {symbol: value for value, symbol in ROMAN_NUMERALS if len(symbol) == 1}


def ordinal(number: int) -> str:
    """
    Append the English ordinal suffix: 1st, 2nd, 3rd, 4th, 11th, 112th, 121st.
    """
    magnitude = abs(number)
    if magnitude % 100 in (11, 12, 13):
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(magnitude % 10, "th")
    return f"{number}{suffix}"


def roman(number: int) -> str:
    """
    Roman numeral in subtractive notation.

    Only 1..3999 can be written; anything else is returned as its plain
    decimal string.
    """
    if number <= 0 or number >= 4000:
        return str(number)

    parts = []
    for value, symbol in ROMAN_NUMERALS:
        count, number = divmod(number, value)
        parts.append(symbol * count)

    return "".join(parts)


def from_roman(text: str) -> int:
    """
    Decode a Roman numeral, case-insensitively.

    Characters that are not Roman symbols count as 0.
    """
    values = [_ROMAN_VALUES.get(ch, 0) for ch in text.upper()]

    result = 0
    for i, value in enumerate(values):
        if i + 1 < len(values) and value < values[i + 1]:
            result -= value
        else:
            result += value

    return result


def _group_words(group: int) -> str:
    """Words for 1..999."""
    words = []
    hundreds, rest = divmod(group, 100)

    if hundreds:
        words.append(f"{ONES[hundreds]} hundred")

    if rest:
        if rest < 20:
            words.append(ONES[rest])
        else:
            tens, ones = divmod(rest, 10)
            words.append(TENS[tens] + (f"-{ONES[ones]}" if ones else ""))

    return " ".join(words)


def _integer_words(number: int) -> str:
    if number == 0:
        return ONES[0]

    groups = []
    scale = 0
    while number:
        number, group = divmod(number, 1000)
        if group:
            name = SCALES[scale]
            groups.append(f"{_group_words(group)} {name}" if name else _group_words(group))
        scale += 1

    return " ".join(reversed(groups))


def to_words(number: Number) -> str:
    """
    Spell a number out in English.

    to_words(0) == "zero", to_words(-42) == "negative forty-two",
    to_words(1_000_001) == "one million one", to_words(3.14) ==
    "three point one four". Values beyond the decillions, NaN and
    infinities are returned as plain strings.
    """
    if isinstance(number, float) and not math.isfinite(number):
        return str(number)

    text = format(Decimal(repr(abs(number))), "f")
    whole, _, fraction = text.partition(".")
    whole_number = int(whole)

    if whole_number >= 1000 ** len(SCALES):
        return str(number)

    words = _integer_words(whole_number)

    fraction = fraction.rstrip("0")
    if fraction:
        words += " point " + " ".join(ONES[int(digit)] for digit in fraction)

    if number < 0:
        words = "negative " + words

    return words
