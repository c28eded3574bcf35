# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for angle normalization and numeric helpers."""
import math

import pytest

from helion.domain.angles import (
    asin_degrees,
    atan2_degrees,
    cos_degrees,
    normalize_degrees,
    normalize_radians,
    sin_degrees,
    tan_degrees,
)
from helion.domain.numeric import horner, round_half_up


# ── Normalization ─────────────────────────────────────────────────

class TestNormalizeDegrees:

    @pytest.mark.parametrize("angle, expected", [
        (0.0, 0.0),
        (360.0, 0.0),
        (725.0, 5.0),
        (-90.0, 270.0),
        (-720.0, 0.0),
        (359.5, 359.5),
    ])
    def test_known_values(self, angle, expected):
        assert normalize_degrees(angle) == pytest.approx(expected)

    @pytest.mark.parametrize("angle", [
        -1e-17, -1e-300, -5e-14, 1e-17, -359.99999999999994,
        123456789.123, -987654321.987, 1e15, -1e15,
    ])
    def test_result_in_half_open_range(self, angle):
        result = normalize_degrees(angle)
        assert 0.0 <= result < 360.0

    def test_range_over_sweep(self):
        angle = -10000.0
        while angle < 10000.0:
            result = normalize_degrees(angle)
            assert 0.0 <= result < 360.0
            angle += 7.123456789


class TestNormalizeRadians:

    def test_known_values(self):
        assert normalize_radians(-math.pi / 2) == pytest.approx(1.5 * math.pi)
        assert normalize_radians(5 * math.pi) == pytest.approx(math.pi)

    @pytest.mark.parametrize("angle", [-1e-17, -2 * math.pi, 4 * math.pi, -43.63484796])
    def test_result_in_half_open_range(self, angle):
        result = normalize_radians(angle)
        assert 0.0 <= result < 2 * math.pi


# ── Degree trigonometry ───────────────────────────────────────────

class TestDegreeTrig:

    def test_sin_cos_tan(self):
        assert sin_degrees(30.0) == pytest.approx(0.5)
        assert cos_degrees(60.0) == pytest.approx(0.5)
        assert tan_degrees(45.0) == pytest.approx(1.0)

    def test_inverse(self):
        assert asin_degrees(0.5) == pytest.approx(30.0)
        assert atan2_degrees(1.0, -1.0) == pytest.approx(135.0)
        assert atan2_degrees(-1.0, -1.0) == pytest.approx(-135.0)

    def test_returns_builtin_float(self):
        assert type(sin_degrees(10.0)) is float
        assert type(atan2_degrees(1.0, 2.0)) is float


# ── Numeric helpers ───────────────────────────────────────────────

class TestHorner:

    def test_ascending_coefficients(self):
        # 1 + 2x + 3x^2 at x = 2
        assert horner(2.0, (1.0, 2.0, 3.0)) == pytest.approx(17.0)

    def test_constant(self):
        assert horner(123.0, (4.5,)) == 4.5


class TestRoundHalfUp:

    def test_ties_round_towards_positive_infinity(self):
        assert round_half_up(2.5) == 3.0
        assert round_half_up(-2.5) == -2.0
        assert round_half_up(0.5) == 1.0

    def test_decimals(self):
        assert round_half_up(1.25, 1) == pytest.approx(1.3)
        assert round_half_up(-27.2785 / 10.0, 1) == pytest.approx(-2.7)
        assert round_half_up(63.8738327, 2) == pytest.approx(63.87)

    def test_differs_from_bankers_rounding(self):
        assert round(2.5) == 2
        assert round_half_up(2.5) == 3.0
