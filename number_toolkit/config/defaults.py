"""Default configuration parameters for the number toolkit."""

from dataclasses import dataclass, field

from number_toolkit.constants import CURRENCY_SYMBOLS, PREFIX_SYMBOL_LOCALES


@dataclass(frozen=True)
class FormattingParams:
    """Precision and style defaults used by NumberFormatter."""
    abbreviate_precision: int = 1                    # Decimals on K/M/B mantissas
    file_size_precision: int = 1                     # Decimals on KB/MB values
    percentage_decimals: int = 2
    scientific_precision: int = 2                    # Digits after the point
    binary_sizes: bool = False                       # KiB/MiB instead of KB/MB
    strip_trailing_zeros: bool = False               # "1K" instead of "1.0K"


@dataclass(frozen=True)
class CurrencyParams:
    """Currency formatting parameters."""
    default_code: str = "USD"
    default_locale: str = "en_US"
    decimals: int = 2
    symbols: dict[str, str] = field(default_factory=lambda: dict(CURRENCY_SYMBOLS))
    prefix_locales: tuple[str, ...] = PREFIX_SYMBOL_LOCALES


@dataclass(frozen=True)
class RandomParams:
    """Random number generation parameters."""
    otp_digits: int = 6


@dataclass(frozen=True)
class ToleranceParams:
    """Floating point comparison parameters."""
    epsilon: float = 1e-9


@dataclass(frozen=True)
class StatisticsParams:
    """Descriptive statistics parameters."""
    population: bool = False                         # n divisor instead of n-1


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    formatting: FormattingParams
    currency: CurrencyParams
    random: RandomParams
    tolerance: ToleranceParams
    statistics: StatisticsParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        formatting=FormattingParams(),
        currency=CurrencyParams(),
        random=RandomParams(),
        tolerance=ToleranceParams(),
        statistics=StatisticsParams(),
    )
