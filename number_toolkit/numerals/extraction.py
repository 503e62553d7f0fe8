"""
Number extraction and lenient parsing from free text.

Extraction returns the raw digit runs as strings so leading zeros survive;
parse() turns formatted amounts such as "$1,234.50" or "(12%)" into numbers.
"""

import re
from typing import Optional, Union

from number_toolkit.constants import CURRENCY_SYMBOLS

from .conversion import convert_to_english_numerals

DIGIT_RUN = re.compile(r"[0-9]+")
NUMERIC_LITERAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")

# Longest first so "R$" is removed before "$"
_STRIP_TOKENS = sorted(
    {symbol for symbol in CURRENCY_SYMBOLS.values()} | {",", "%", "٬", " ", " ", "_", "'"},
    key=len,
    reverse=True,
)


def find_first_number(text: str) -> Optional[str]:
    """First run of ASCII digits in text, or None."""
    match = DIGIT_RUN.search(text)
    return match.group(0) if match else None


def find_all_numbers(text: str) -> list[str]:
    """All runs of ASCII digits in text, in order of appearance."""
    return DIGIT_RUN.findall(text)


def find_last_number(text: str) -> Optional[str]:
    """Last run of ASCII digits in text, or None."""
    matches = DIGIT_RUN.findall(text)
    return matches[-1] if matches else None


def parse(text: str) -> Optional[Union[int, float]]:
    """
    Parse a human formatted number.

    Handles thousands separators, spaces, currency symbols, percent signs,
    non-Western digits and accounting negatives written in parentheses.

    Args:
        text: Formatted number such as "$1,234.50", "(300)" or "۱۲٫۵%"

    Returns:
        int for integer literals, float for decimals and exponents,
        None when the cleaned text is not numeric
    """
    cleaned = convert_to_english_numerals(text.strip()).replace("٫", ".")

    negative = False
    if cleaned.startswith("(") and cleaned.endswith(")"):
        negative = True
        cleaned = cleaned[1:-1]

    for token in _STRIP_TOKENS:
        cleaned = cleaned.replace(token, "")

    if not NUMERIC_LITERAL.fullmatch(cleaned):
        return None

    value: Union[int, float]
    if INTEGER_LITERAL.fullmatch(cleaned):
        value = int(cleaned)
    else:
        value = float(cleaned)

    return -value if negative else value
