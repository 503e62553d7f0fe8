"""Tests for trigonometric and logarithmic wrappers"""

import math

import pytest

from number_toolkit.arithmetic import trig


class TestTrigonometry:
    """Test angle functions in radians and degrees"""

    def test_radians(self):
        assert trig.sin(0) == 0
        assert trig.cos(0) == 1
        assert trig.sin(math.pi / 2) == pytest.approx(1)

    def test_degrees(self):
        assert trig.sin(30, degrees=True) == pytest.approx(0.5)
        assert trig.cos(60, degrees=True) == pytest.approx(0.5)
        assert trig.tan(45, degrees=True) == pytest.approx(1)

    def test_inverse_functions(self):
        assert trig.asin(1, degrees=True) == pytest.approx(90)
        assert trig.acos(1) == 0
        assert trig.atan(1, degrees=True) == pytest.approx(45)
        assert trig.atan2(1, -1, degrees=True) == pytest.approx(135)

    def test_inverse_out_of_domain(self):
        assert math.isnan(trig.asin(2))
        assert math.isnan(trig.acos(-1.5))

    def test_conversions(self):
        assert trig.deg_to_rad(180) == pytest.approx(math.pi)
        assert trig.rad_to_deg(math.pi) == pytest.approx(180)


class TestLogarithms:
    """Test logarithms and their domain fallbacks"""

    def test_natural_log(self):
        assert trig.log(math.e) == pytest.approx(1)

    def test_bases(self):
        assert trig.log(8, 2) == pytest.approx(3)
        assert trig.log10(1000) == 3
        assert trig.log2(1024) == 10

    def test_zero_gives_negative_infinity(self):
        assert trig.log(0) == -math.inf
        assert trig.log10(0) == -math.inf

    def test_negative_gives_nan(self):
        assert math.isnan(trig.log(-1))
        assert math.isnan(trig.log2(-8))

    def test_invalid_base_gives_nan(self):
        assert math.isnan(trig.log(10, 1))
        assert math.isnan(trig.log(10, -2))


class TestPowers:
    """Test roots, powers and exponentials"""

    def test_sqrt(self):
        assert trig.sqrt(16) == 4
        assert math.isnan(trig.sqrt(-1))

    def test_cbrt(self):
        assert trig.cbrt(27) == pytest.approx(3)
        assert trig.cbrt(-8) == pytest.approx(-2)

    def test_power(self):
        assert trig.power(2, 10) == 1024
        assert math.isnan(trig.power(-8, 1 / 3))
        assert trig.power(10, 400) == math.inf

    def test_exp(self):
        assert trig.exp(0) == 1
        assert trig.exp(1000) == math.inf
