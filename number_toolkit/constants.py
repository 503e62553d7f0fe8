"""Shared lookup tables: digit scripts, unit labels, currency symbols and words."""

# Digit scripts, index i holds the glyph for digit i
WESTERN_DIGITS = "0123456789"
PERSIAN_DIGITS = "۰۱۲۳۴۵۶۷۸۹"
ARABIC_INDIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"
BENGALI_DIGITS = "০১২৩৪৫৬৭৮৯"
DEVANAGARI_DIGITS = "०१२३४५६७८९"
CHINESE_DIGITS = "〇一二三四五六七八九"

NUMERAL_SYSTEMS: dict[str, str] = {
    "arabic": WESTERN_DIGITS,
    "bengali": BENGALI_DIGITS,
    "devanagari": DEVANAGARI_DIGITS,
    "persian": PERSIAN_DIGITS,
    "arabic-indic": ARABIC_INDIC_DIGITS,
    "chinese": CHINESE_DIGITS,
}

# Magnitude suffixes, (threshold, short, long)
ABBREVIATION_UNITS: tuple[tuple[int, str, str], ...] = (
    (10**15, "Q", "quadrillion"),
    (10**12, "T", "trillion"),
    (10**9, "B", "billion"),
    (10**6, "M", "million"),
    (10**3, "K", "thousand"),
)

FILE_SIZE_UNITS = ("B", "KB", "MB", "GB", "TB", "PB", "EB")
BINARY_SIZE_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB")

CURRENCY_SYMBOLS: dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "CNY": "¥",
    "INR": "₹",
    "IRR": "﷼",
    "RUB": "₽",
    "KRW": "₩",
    "TRY": "₺",
    "BRL": "R$",
    "AUD": "A$",
    "CAD": "C$",
    "CHF": "CHF",
    "BDT": "৳",
    "NGN": "₦",
    "ILS": "₪",
    "VND": "₫",
    "THB": "฿",
    "UAH": "₴",
}

# Locales that place the currency symbol before the amount
PREFIX_SYMBOL_LOCALES = ("en",)

ROMAN_NUMERALS: tuple[tuple[int, str], ...] = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

ONES = (
    "zero", "one", "two", "three", "four", "five", "six", "seven", "eight",
    "nine", "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen",
    "sixteen", "seventeen", "eighteen", "nineteen",
)

TENS = (
    "", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy",
    "eighty", "ninety",
)

SCALES = (
    "", "thousand", "million", "billion", "trillion", "quadrillion",
    "quintillion", "sextillion", "septillion", "octillion", "nonillion",
    "decillion",
)

# Duration units in seconds, largest first (365-day year, 30-day month)
DURATION_UNITS: tuple[tuple[str, int], ...] = (
    ("year", 31_536_000),
    ("month", 2_592_000),
    ("week", 604_800),
    ("day", 86_400),
    ("hour", 3_600),
    ("minute", 60),
    ("second", 1),
)
