"""Human readable number formatting"""

from ..numerals.conversion import to_numeral_system
from .duration import duration
from .formatter import NumberFormatter
from .magnitude import abbreviate, file_size, format_bytes, humanize, shorten
from .money import currency, percentage
from .scientific import from_scientific, to_scientific
from .words import from_roman, ordinal, roman, to_words

__all__ = [
    "NumberFormatter",
    "abbreviate",
    "currency",
    "duration",
    "file_size",
    "format_bytes",
    "from_roman",
    "from_scientific",
    "humanize",
    "ordinal",
    "percentage",
    "roman",
    "shorten",
    "to_numeral_system",
    "to_scientific",
    "to_words",
]
