"""Tests for the configured NumberFormatter"""

import pytest

from number_toolkit.config.defaults import get_default_config
from number_toolkit.config.loader import ConfigLoader
from number_toolkit.errors import InvalidArgumentError
from number_toolkit.formatting.formatter import NumberFormatter


class TestDefaultFormatter:
    """Test a formatter built from the default configuration"""

    def setup_method(self):
        self.formatter = NumberFormatter()

    def test_uses_default_config(self):
        assert self.formatter.config == get_default_config()

    def test_magnitudes(self):
        assert self.formatter.abbreviate(1500) == "1.5K"
        assert self.formatter.humanize(1500) == "1.5 thousand"
        assert self.formatter.file_size(1500) == "1.5 KB"

    def test_currency_defaults(self):
        assert self.formatter.currency(1234.5) == "$1,234.50"
        assert self.formatter.currency(5, "EUR", "de_DE") == "5.00 €"

    def test_percentage_and_scientific(self):
        assert self.formatter.percentage(12.5) == "12.50%"
        assert self.formatter.scientific(12345) == "1.23e+04"

    def test_passthroughs(self):
        assert self.formatter.ordinal(22) == "22nd"
        assert self.formatter.words(21) == "twenty-one"
        assert self.formatter.duration(3600) == "1 hour"
        assert self.formatter.numerals(15, "bengali") == "১৫"

    def test_explicit_precision_wins(self):
        assert self.formatter.abbreviate(1234, precision=2) == "1.23K"
        assert self.formatter.file_size(1500, precision=3) == "1.465 KB"

    def test_configured_entry_points(self):
        data = [2, 4, 4, 4, 5, 5, 7, 9]
        assert self.formatter.variance(data) == pytest.approx(32 / 7)
        assert self.formatter.standard_deviation(data, population=True) == 2
        assert self.formatter.approximately(1.0, 1.0 + 1e-10)
        assert 100_000 <= self.formatter.otp() <= 999_999


class TestConfiguredFormatter:
    """Test configuration changes formatter output"""

    def test_overrides(self, sample_overrides):
        config = ConfigLoader.create().build_config(overrides=sample_overrides)
        formatter = NumberFormatter(config)

        assert formatter.abbreviate(1000) == "1K"
        assert formatter.percentage(12.25) == "12.2%"
        assert formatter.currency(2, "BTC") == "₿2.00"
        assert formatter.currency(2, "USD") == "$2.00"

    def test_from_profile(self, profiles_dir):
        formatter = NumberFormatter.from_profile("euro", config_dir=profiles_dir)

        assert formatter.currency(1234.5) == "1,234.50 €"
        assert formatter.abbreviate(1234) == "1.23K"

    def test_binary_profile(self, profiles_dir):
        formatter = NumberFormatter.from_profile("binary", config_dir=profiles_dir)

        assert formatter.file_size(1536) == "1.5 KiB"
        assert formatter.file_size(1_500_000) == "1.43 MiB"

    def test_invalid_profile_rejected(self, profiles_dir):
        with pytest.raises(InvalidArgumentError) as exc_info:
            NumberFormatter.from_profile("broken", config_dir=profiles_dir)

        assert exc_info.value.argument == "otp_digits"

    def test_bundled_persian_profile(self):
        formatter = NumberFormatter.from_profile("persian")

        assert formatter.currency(1_250_000) == "1,250,000 ﷼"
        assert formatter.abbreviate(2_000_000) == "2M"

    def test_scientific_profile_changes_statistics_and_tolerance(self):
        """Test population variance and the tighter epsilon come from the profile"""
        formatter = NumberFormatter.from_profile("scientific")
        data = [2, 4, 4, 4, 5, 5, 7, 9]

        assert formatter.variance(data) == 4
        assert formatter.standard_deviation(data) == 2
        assert not formatter.approximately(1.0, 1.0 + 1e-10)
        assert formatter.approximately(1.0, 1.0 + 1e-13)
        assert formatter.scientific(12345) == "1.2345e+04"

    def test_otp_length_from_overrides(self):
        config = ConfigLoader.create().build_config(overrides={"random": {"otp_digits": 4}})
        formatter = NumberFormatter(config)

        for _ in range(50):
            assert 1000 <= formatter.otp() <= 9999
        assert 10 <= formatter.otp(2) <= 99
