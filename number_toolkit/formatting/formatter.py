"""Configured formatter coordinating the formatting functions"""

from pathlib import Path
from typing import Iterable, Optional, Union

from ..arithmetic.interpolation import approximately
from ..config import ConfigLoader, DefaultConfig, get_default_config
from ..generators.random_numbers import generate_otp
from ..logging import get_logger
from ..numerals.conversion import to_numeral_system
from ..stats.descriptive import standard_deviation, variance
from .duration import duration
from .magnitude import abbreviate, file_size, format_bytes, humanize, shorten
from .money import currency, percentage
from .scientific import to_scientific
from .words import ordinal, to_words

logger = get_logger(__name__)

Number = Union[int, float]


class NumberFormatter:
    """
    Applies one configuration to every configurable call.

    The module-level functions take their style as arguments; this class
    supplies those arguments from a DefaultConfig so an application can
    pick precisions, currency, unit style, OTP length, comparison tolerance
    and the variance divisor once.
    """

    def __init__(self, config: Optional[DefaultConfig] = None):
        self.config = config or get_default_config()
        self.formatting = self.config.formatting
        self.currency_params = self.config.currency
        self.random_params = self.config.random
        self.tolerance = self.config.tolerance
        self.statistics = self.config.statistics

        logger.debug(
            "Number formatter initialised",
            currency=self.currency_params.default_code,
            locale=self.currency_params.default_locale,
            binary_sizes=self.formatting.binary_sizes,
        )

    @classmethod
    def from_profile(cls, profile: str, config_dir: Optional[Path] = None) -> "NumberFormatter":
        """
        Build a formatter from a named profile in profiles.yaml.

        Raises:
            InvalidArgumentError: If the profile holds invalid values
        """
        loader = ConfigLoader.create(config_dir)
        return cls(loader.build_config(profile=profile))

    def abbreviate(self, number: Number, precision: Optional[int] = None) -> str:
        if precision is None:
            precision = self.formatting.abbreviate_precision
        if self.formatting.strip_trailing_zeros:
            return shorten(number, precision)
        return abbreviate(number, precision)

    def humanize(self, number: Number, precision: Optional[int] = None) -> str:
        if precision is None:
            precision = self.formatting.abbreviate_precision
        return humanize(number, precision)

    def file_size(self, size: Number, precision: Optional[int] = None) -> str:
        """Byte count in KB/MB, or KiB/MiB when binary_sizes is set."""
        if precision is None:
            precision = self.formatting.file_size_precision
        if self.formatting.binary_sizes:
            return format_bytes(size, precision, binary=True)
        return file_size(size, precision)

    def currency(self, amount: Number, code: Optional[str] = None,
                 locale: Optional[str] = None) -> str:
        params = self.currency_params
        return currency(
            amount,
            code=code or params.default_code,
            locale=locale or params.default_locale,
            decimals=params.decimals,
            symbols=params.symbols,
            prefix_locales=params.prefix_locales,
        )

    def percentage(self, value: Number, decimals: Optional[int] = None,
                   include_sign: bool = True) -> str:
        if decimals is None:
            decimals = self.formatting.percentage_decimals
        return percentage(value, decimals, include_sign)

    def scientific(self, number: Number, precision: Optional[int] = None) -> str:
        if precision is None:
            precision = self.formatting.scientific_precision
        return to_scientific(number, precision)

    def ordinal(self, number: int) -> str:
        return ordinal(number)

    def words(self, number: Number) -> str:
        return to_words(number)

    def duration(self, seconds: Number) -> str:
        return duration(seconds)

    def numerals(self, number: Number, system: str) -> str:
        return to_numeral_system(number, system)

    def otp(self, digits: Optional[int] = None) -> int:
        """
        One-time password of the configured length.

        Raises:
            InvalidArgumentError: If digits < 1
            RandomSourceError: If the secure random source is unavailable
        """
        if digits is None:
            digits = self.random_params.otp_digits
        return generate_otp(digits)

    def variance(self, values: Iterable[Number], population: Optional[bool] = None) -> float:
        if population is None:
            population = self.statistics.population
        return variance(values, population=population)

    def standard_deviation(self, values: Iterable[Number],
                           population: Optional[bool] = None) -> float:
        if population is None:
            population = self.statistics.population
        return standard_deviation(values, population=population)

    def approximately(self, a: Number, b: Number, epsilon: Optional[float] = None) -> bool:
        """Equality within the configured absolute tolerance."""
        if epsilon is None:
            epsilon = self.tolerance.epsilon
        return approximately(a, b, epsilon)
