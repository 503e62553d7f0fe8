"""Tests for arithmetic wrappers"""

import pytest

from number_toolkit.arithmetic.basic import (
    absolute_value,
    add,
    decrement,
    divide,
    increment,
    modulo,
    multiply,
    raise_to_power,
    subtract,
    sum_of_digits,
)
from number_toolkit.errors import InvalidArgumentError


class TestBasicOperations:
    """Test add, subtract, multiply and power"""

    def test_add(self):
        assert add(5, 3) == 8
        assert add(-1, 3) == 2
        assert add(-1, -3) == -4

    def test_subtract(self):
        assert subtract(5, 3) == 2
        assert subtract(-1, 3) == -4
        assert subtract(-1, -3) == 2

    def test_multiply(self):
        assert multiply(5, 3) == 15
        assert multiply(-5, 3) == -15
        assert multiply(-5, -3) == 15

    def test_raise_to_power(self):
        assert raise_to_power(2, 3) == 8
        assert raise_to_power(2, 0) == 1
        assert raise_to_power(2, -3) == 0.125

    def test_modulo_follows_divisor_sign(self):
        assert modulo(5, 2) == 1
        assert modulo(6, 2) == 0
        assert modulo(-5, 2) == 1
        assert modulo(5, -2) == -1


class TestDivide:
    """Test guarded division"""

    def test_divide(self):
        assert divide(5, 2) == 2.5
        assert divide(-5, 2) == -2.5
        assert divide(-5, -2) == 2.5

    def test_divide_returns_float(self):
        assert isinstance(divide(4, 2), float)

    def test_divide_by_zero_rejected(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            divide(5, 0)

        assert exc_info.value.argument == "divisor"
        assert exc_info.value.value == 0

    def test_zero_divisor_is_a_value_error(self):
        """Test callers catching ValueError also catch the rejection"""
        with pytest.raises(ValueError):
            divide(1.0, 0.0)


class TestIncrementDecrement:
    """Test the value-returning increment pair"""

    def test_increment(self):
        number = 5
        number = increment(number)
        assert number == 6

    def test_decrement(self):
        assert decrement(5) == 4
        assert decrement(0) == -1


class TestDigitHelpers:
    """Test absolute value and digit sums"""

    def test_absolute_value(self):
        assert absolute_value(5) == 5
        assert absolute_value(-5) == 5
        assert absolute_value(0) == 0

    def test_sum_of_digits(self):
        assert sum_of_digits(12345) == 15
        assert sum_of_digits(-12345) == 15
        assert sum_of_digits(0) == 0
