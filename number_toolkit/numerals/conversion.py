"""
Digit script transliteration.

Converts between Western-Arabic digits and other digit scripts using
fixed code-point substitution tables. Every character that is not a digit
of the source script passes through unchanged.
"""

from typing import Union

from number_toolkit.constants import (
    ARABIC_INDIC_DIGITS,
    BENGALI_DIGITS,
    CHINESE_DIGITS,
    DEVANAGARI_DIGITS,
    NUMERAL_SYSTEMS,
    PERSIAN_DIGITS,
    WESTERN_DIGITS,
)

# Chinese digits double as ordinary CJK characters (一, 三...) and are opt-in
_FOREIGN_SCRIPTS = (
    PERSIAN_DIGITS,
    ARABIC_INDIC_DIGITS,
    BENGALI_DIGITS,
    DEVANAGARI_DIGITS,
)

# Persian, Arabic-Indic, Bengali, Devanagari -> Western digits
TO_ENGLISH = str.maketrans("".join(_FOREIGN_SCRIPTS), WESTERN_DIGITS * len(_FOREIGN_SCRIPTS))
TO_ENGLISH_WITH_CHINESE = str.maketrans(
    "".join(_FOREIGN_SCRIPTS) + CHINESE_DIGITS, WESTERN_DIGITS * (len(_FOREIGN_SCRIPTS) + 1)
)

# Western digits -> named script
FROM_ENGLISH: dict[str, dict[int, int]] = {
    name: str.maketrans(WESTERN_DIGITS, digits) for name, digits in NUMERAL_SYSTEMS.items()
}


def convert_to_english_numerals(text: str, include_chinese: bool = False) -> str:
    """
    Replace Persian, Arabic-Indic, Bengali and Devanagari digits with 0-9.

    Chinese numerals are only read with include_chinese=True: the same
    characters spell ordinary words, so by default "三国" stays "三国".
    """
    if include_chinese:
        return text.translate(TO_ENGLISH_WITH_CHINESE)
    return text.translate(TO_ENGLISH)


def convert_to_persian_numerals(text: str) -> str:
    """Replace 0-9 with Persian digits."""
    return text.translate(FROM_ENGLISH["persian"])


def convert_to_arabic_numerals(text: str) -> str:
    """Replace 0-9 with Arabic-Indic digits."""
    return text.translate(FROM_ENGLISH["arabic-indic"])


def convert_to_bengali_numerals(text: str) -> str:
    return text.translate(FROM_ENGLISH["bengali"])


def convert_to_devanagari_numerals(text: str) -> str:
    return text.translate(FROM_ENGLISH["devanagari"])


def convert_to_chinese_numerals(text: str) -> str:
    return text.translate(FROM_ENGLISH["chinese"])


def convert_numerals(text: str, system: str) -> str:
    """
    Replace 0-9 in text with the digits of the named system.

    Args:
        text: Text containing Western digits
        system: One of supported_numeral_systems()

    Returns:
        Converted text, or the text unchanged for an unknown system
    """
    table = FROM_ENGLISH.get(system.lower())
    if table is None:
        return text
    return text.translate(table)


def to_numeral_system(number: Union[int, float], system: str) -> str:
    """
    Render a number with the digits of another script.

    Sign and decimal point are kept as-is; an unsupported system name
    yields the plain decimal string.
    """
    plain = str(number)
    digits = NUMERAL_SYSTEMS.get(system.lower())
    if digits is None:
        return plain
    return "".join(digits[int(ch)] if ch in WESTERN_DIGITS else ch for ch in plain)


def supported_numeral_systems() -> tuple[str, ...]:
    """Names accepted by convert_numerals() and to_numeral_system()."""
    return tuple(NUMERAL_SYSTEMS)
