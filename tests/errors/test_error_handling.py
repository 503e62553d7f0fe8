"""
Error handling tests for the number toolkit.

Covers the error classification hierarchy and the operations that raise
instead of falling back to a permissive result.
"""

import math
import pytest
from unittest.mock import patch

from number_toolkit import (
    InvalidArgumentError,
    RandomSourceError,
    SystemFailureError,
    divide,
    factorial,
    from_roman,
    generate_random_integer,
    map_range,
    median,
    roman,
    to_numeral_system,
)


class TestErrorClassification:
    """Test error classification system."""

    def test_invalid_argument_error(self):
        """Test invalid argument errors carry structured context."""
        error = InvalidArgumentError("bad", argument="divisor", value=0, context={"op": "divide"})
        assert isinstance(error, ValueError)
        assert error.recoverable is True
        assert error.argument == "divisor"
        assert error.value == 0
        assert error.context == {"op": "divide"}
        assert str(error) == "bad"

    def test_invalid_argument_defaults(self):
        """Test optional attributes default to empty values."""
        error = InvalidArgumentError("bad")
        assert error.argument is None
        assert error.value is None
        assert error.context == {}

    def test_system_failure_error_hierarchy(self):
        """Test that system failure errors have proper hierarchy."""
        base_error = SystemFailureError("base error")
        assert base_error.recoverable is False
        assert base_error.context == {}

        random_error = RandomSourceError("no entropy", source="os.urandom", context={"attempt": 1})
        assert isinstance(random_error, SystemFailureError)
        assert random_error.source == "os.urandom"
        assert random_error.context == {"attempt": 1}
        assert random_error.recoverable is False

    def test_failure_kinds_are_distinct(self):
        """Test a caller error is never mistaken for a platform failure."""
        assert not issubclass(InvalidArgumentError, SystemFailureError)
        assert not issubclass(RandomSourceError, ValueError)


class TestRaisingOperations:
    """Test the operations that reject their input."""

    def test_divide_by_zero(self):
        with pytest.raises(InvalidArgumentError):
            divide(5, 0)

    def test_negative_factorial(self):
        with pytest.raises(InvalidArgumentError):
            factorial(-1)

    def test_random_digit_bounds(self):
        with pytest.raises(InvalidArgumentError):
            generate_random_integer(0)
        with pytest.raises(InvalidArgumentError):
            generate_random_integer(-2, 5)
        with pytest.raises(InvalidArgumentError):
            generate_random_integer(4, 3)

    def test_random_source_unavailable(self):
        with patch("number_toolkit.generators.random_numbers.secrets.randbelow",
                   side_effect=OSError("no entropy")):
            with pytest.raises(SystemFailureError):
                generate_random_integer(2)


class TestPermissiveFallbacks:
    """Test functions outside the raising set stay total."""

    def test_empty_statistics(self):
        assert median([]) == 0

    def test_out_of_range_roman(self):
        assert roman(0) == "0"
        assert roman(4000) == "4000"
        assert from_roman("???") == 0

    def test_unknown_numeral_system(self):
        assert to_numeral_system(12, "unknown") == "12"

    def test_degenerate_map_range(self):
        assert math.isinf(map_range(2, 1, 1, 0, 10))
