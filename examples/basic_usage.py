#!/usr/bin/env python3
"""
Basic Usage Example - Number Toolkit

This script walks through the main areas of the toolkit:
- Reading numbers written in other digit scripts
- Human readable formatting, directly and through a configured formatter
- Descriptive statistics and number theory helpers
- Secure random numbers and the error hierarchy

Run: python examples/basic_usage.py
"""

from number_toolkit import (
    InvalidArgumentError,
    NumberFormatter,
    abbreviate,
    average,
    convert_to_persian_numerals,
    currency,
    divide,
    file_size,
    find_all_numbers,
    generate_otp,
    is_prime,
    median,
    ordinal,
    parse,
    prime_factors,
    roman,
    standard_deviation,
    to_words,
)
from number_toolkit.logging import configure_logging


def main():
    """Run the basic usage demo."""
    configure_logging(level="WARNING")

    print("🔢 Number Toolkit - Basic Usage Demo")
    print("=" * 50)

    print("1. Digit scripts")
    invoice = "Invoice ۱۲۳۴ due in ۳۰ days"
    print(f"   Text: {invoice}")
    print(f"   Numbers found: {find_all_numbers(invoice)}")
    print(f"   Parsed '(١٬٢٣٤٫٥)': {parse('(١٬٢٣٤٫٥)')}")
    print(f"   2024 in Persian digits: {convert_to_persian_numerals('2024')}")
    print()

    print("2. Formatting")
    print(f"   abbreviate(1_250_000) = {abbreviate(1_250_000)}")
    print(f"   file_size(5_368_709) = {file_size(5_368_709)}")
    print(f"   currency(1234.5) = {currency(1234.5)}")
    print(f"   currency(1234.5, 'EUR', 'de_DE') = {currency(1234.5, 'EUR', 'de_DE')}")
    print(f"   ordinal(22) = {ordinal(22)}, roman(1994) = {roman(1994)}")
    print(f"   to_words(-1042) = {to_words(-1042)}")
    print()

    print("3. Configured formatter (persian profile)")
    formatter = NumberFormatter.from_profile("persian")
    print(f"   currency(1_250_000) = {formatter.currency(1_250_000)}")
    print(f"   abbreviate(1_000_000) = {formatter.abbreviate(1_000_000)}")
    print(f"   numerals(1404) = {formatter.numerals(1404, 'persian')}")
    print()

    print("4. Statistics and number theory")
    samples = [2, 4, 4, 4, 5, 5, 7, 9]
    print(f"   samples = {samples}")
    print(f"   average = {average(samples)}, median = {median(samples)}")
    print(f"   population std dev = {standard_deviation(samples, population=True)}")
    print(f"   is_prime(97) = {is_prime(97)}, prime_factors(360) = {prime_factors(360)}")
    print()

    print("5. Random numbers and errors")
    print(f"   generate_otp() = {generate_otp()}")
    try:
        divide(1, 0)
    except InvalidArgumentError as e:
        print(f"   divide(1, 0) rejected: {e} (argument={e.argument}, recoverable={e.recoverable})")
    print()

    print("✅ Demo completed successfully!")


if __name__ == "__main__":
    main()
