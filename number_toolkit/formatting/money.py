"""Currency and percentage formatting"""

from typing import Mapping, Optional, Sequence, Union

from number_toolkit.constants import CURRENCY_SYMBOLS, PREFIX_SYMBOL_LOCALES

from .magnitude import format_decimal

Number = Union[int, float]


def _places_symbol_first(locale: str, prefix_locales: Sequence[str]) -> bool:
    normalized = locale.replace("-", "_")
    language = normalized.split("_")[0].lower()
    return language in prefix_locales or normalized in prefix_locales


def currency(
    amount: Number,
    code: str = "USD",
    locale: str = "en_US",
    decimals: int = 2,
    symbols: Optional[Mapping[str, str]] = None,
    prefix_locales: Optional[Sequence[str]] = None,
) -> str:
    """
    Format a monetary amount with its currency symbol.

    Args:
        amount: Amount to format
        code: ISO 4217 currency code; unknown codes are printed as-is
        locale: Locale name such as "en_US" or "de-DE"; English locales put
            the symbol before the amount, all others after it
        decimals: Digits after the decimal point
        symbols: Currency code to symbol table, defaults to the built-in one
        prefix_locales: Languages/locales that put the symbol first

    Returns:
        Formatted amount, e.g. "$1,234.50", "1,234.50 €" or "XYZ 10.00"
    """
    code = code.upper()
    table = CURRENCY_SYMBOLS if symbols is None else symbols
    prefixes = PREFIX_SYMBOL_LOCALES if prefix_locales is None else prefix_locales

    # Sign follows the rounded amount, so -0.001 renders without a minus
    rounded = round(amount, decimals)
    formatted = format_decimal(abs(rounded), decimals)
    sign = "-" if rounded < 0 else ""
    symbol = table.get(code)

    if _places_symbol_first(locale, prefixes):
        body = f"{symbol}{formatted}" if symbol else f"{code} {formatted}"
    else:
        body = f"{formatted} {symbol or code}"

    return sign + body


def percentage(value: Number, decimals: int = 2, include_sign: bool = True) -> str:
    """Format a value already expressed in percent: percentage(12.346) == "12.35%"."""
    text = f"{value:.{decimals}f}"
    return f"{text}%" if include_sign else text
