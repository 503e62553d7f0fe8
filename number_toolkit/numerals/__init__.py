"""Digit script conversion and number extraction from text"""

from .conversion import (
    convert_numerals,
    convert_to_arabic_numerals,
    convert_to_bengali_numerals,
    convert_to_chinese_numerals,
    convert_to_devanagari_numerals,
    convert_to_english_numerals,
    convert_to_persian_numerals,
    supported_numeral_systems,
    to_numeral_system,
)
from .extraction import find_all_numbers, find_first_number, find_last_number, parse

__all__ = [
    "convert_numerals",
    "convert_to_arabic_numerals",
    "convert_to_bengali_numerals",
    "convert_to_chinese_numerals",
    "convert_to_devanagari_numerals",
    "convert_to_english_numerals",
    "convert_to_persian_numerals",
    "supported_numeral_systems",
    "to_numeral_system",
    "find_all_numbers",
    "find_first_number",
    "find_last_number",
    "parse",
]
