"""Tests for scientific notation and durations"""

import pytest

from number_toolkit.formatting.duration import duration
from number_toolkit.formatting.scientific import from_scientific, to_scientific


class TestScientific:
    """Test scientific notation formatting and parsing"""

    def test_to_scientific(self):
        assert to_scientific(12345) == "1.23e+04"
        assert to_scientific(0.000123, precision=1) == "1.2e-04"
        assert to_scientific(-5) == "-5.00e+00"

    def test_from_scientific(self):
        assert from_scientific("1.23e+04") == 12300.0
        assert from_scientific(" 5E-3 ") == 0.005

    def test_from_scientific_invalid(self):
        assert from_scientific("abc") is None
        assert from_scientific("") is None


class TestDuration:
    """Test greedy duration decomposition"""

    @pytest.mark.parametrize("seconds,expected", [
        (0, "0 seconds"),
        (1, "1 second"),
        (59, "59 seconds"),
        (60, "1 minute"),
        (3661, "1 hour, 1 minute, 1 second"),
        (90_000, "1 day, 1 hour"),
        (604_800, "1 week"),
        (2_592_000, "1 month"),
        (31_536_000, "1 year"),
        (63_072_000 + 2 * 86_400, "2 years, 2 days"),
    ])
    def test_duration(self, seconds, expected):
        assert duration(seconds) == expected

    def test_fraction_and_sign(self):
        assert duration(61.9) == "1 minute, 1 second"
        assert duration(-120) == "2 minutes"
        assert duration(0.4) == "0 seconds"
