"""Tests for secure random number and OTP generation"""

from unittest.mock import patch

import pytest

from number_toolkit.errors import InvalidArgumentError, RandomSourceError
from number_toolkit.generators.random_numbers import (
    generate_otp,
    generate_random_integer,
    random_float,
)


class TestGenerateRandomInteger:
    """Test digit-bounded random integers"""

    def test_fixed_length(self):
        for _ in range(200):
            number = generate_random_integer(3)
            assert isinstance(number, int)
            assert 100 <= number <= 999

    def test_length_range(self):
        for _ in range(200):
            number = generate_random_integer(2, 4)
            assert 10 <= number <= 9999

    def test_single_digit(self):
        for _ in range(50):
            assert 1 <= generate_random_integer(1) <= 9

    def test_every_length_reachable(self):
        """Test digit length is chosen uniformly before the value"""
        lengths = {len(str(generate_random_integer(1, 3))) for _ in range(300)}
        assert lengths == {1, 2, 3}

    def test_zero_min_digits_rejected(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            generate_random_integer(0)
        assert exc_info.value.argument == "min_digits"

    def test_inverted_bounds_rejected(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            generate_random_integer(3, 2)
        assert exc_info.value.argument == "max_digits"


class TestGenerateOTP:
    """Test one-time password generation"""

    def test_default_six_digits(self):
        for _ in range(200):
            otp = generate_otp()
            assert isinstance(otp, int)
            assert 100_000 <= otp <= 999_999

    def test_custom_length(self):
        assert 1000 <= generate_otp(4) <= 9999

    def test_invalid_length(self):
        with pytest.raises(InvalidArgumentError):
            generate_otp(0)


class TestRandomFloat:
    """Test uniform floats"""

    def test_bounds(self):
        for _ in range(200):
            value = random_float(-2.0, 3.0)
            assert -2.0 <= value < 3.0

    def test_inverted_bounds_rejected(self):
        with pytest.raises(InvalidArgumentError):
            random_float(1.0, 0.0)


class TestRandomSourceFailure:
    """Test unavailable OS entropy is reported, not hidden"""

    def test_randbelow_failure(self):
        with patch("number_toolkit.generators.random_numbers.secrets.randbelow",
                   side_effect=NotImplementedError("no urandom")):
            with pytest.raises(RandomSourceError) as exc_info:
                generate_otp()

        error = exc_info.value
        assert error.recoverable is False
        assert error.source == "os.urandom"
        assert error.context["operation"] == "generate_otp"
        assert isinstance(error.__cause__, NotImplementedError)

    def test_system_random_failure(self):
        with patch("number_toolkit.generators.random_numbers._system_random.random",
                   side_effect=OSError("entropy pool unavailable")):
            with pytest.raises(RandomSourceError):
                random_float()

    def test_failure_is_logged(self):
        with patch("number_toolkit.generators.random_numbers.secrets.randbelow",
                   side_effect=OSError("gone")), \
             patch("number_toolkit.generators.random_numbers.logger") as mock_logger:
            with pytest.raises(RandomSourceError):
                generate_random_integer(3)

        mock_logger.error.assert_called_once()
