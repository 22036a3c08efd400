#!/usr/bin/env python3
"""
Tests for the parametric extrapolation strategies

Verifies:
1. Constant padding repeats the boundary sample on each side
2. Linear extrapolation continues the edge slope (RIGHT, LEFT, SYMMETRIC)
3. Polynomial extrapolation reproduces low-order polynomials and falls
   back gracefully when the fit is under-determined
4. Antisymmetric padding (half-point and whole-point)
5. Constructor validation
"""

import sys
from pathlib import Path

import numpy as np
import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from wavepad import (
    AntisymmetricPaddingStrategy,
    ConstantPaddingStrategy,
    InvalidArgumentError,
    LinearExtrapolationStrategy,
    NumericDegeneracyError,
    PaddingMode,
    PolynomialExtrapolationStrategy,
    SymmetryType,
)
from wavepad.extrapolation import vandermonde_fit


# =============================================================================
# Constant
# =============================================================================

def test_constant_right():
    padded = ConstantPaddingStrategy().pad([1, 2, 3, 4], 7)
    assert np.array_equal(padded, [1, 2, 3, 4, 4, 4, 4])


def test_constant_left():
    padded = ConstantPaddingStrategy(PaddingMode.LEFT).pad([1, 2, 3, 4], 7)
    assert np.array_equal(padded, [1, 1, 1, 1, 2, 3, 4])


def test_constant_symmetric_puts_extra_sample_right():
    padded = ConstantPaddingStrategy(PaddingMode.SYMMETRIC).pad([1, 2, 3, 4], 7)
    assert np.array_equal(padded, [1, 1, 2, 3, 4, 4, 4])


def test_constant_trim_follows_mode():
    x = np.array([1.0, 2.0, 3.0, 4.0])
    for mode in PaddingMode:
        strategy = ConstantPaddingStrategy(mode)
        assert np.array_equal(strategy.trim(strategy.pad(x, 9), 4), x)


# =============================================================================
# Linear
# =============================================================================

def test_linear_right():
    padded = LinearExtrapolationStrategy(2).pad([1, 2, 3, 4], 8)
    assert np.allclose(padded, [1, 2, 3, 4, 5, 6, 7, 8])


def test_linear_decreasing():
    padded = LinearExtrapolationStrategy(2).pad([10, 8, 6, 4], 6)
    assert np.allclose(padded, [10, 8, 6, 4, 2, 0])


def test_linear_left():
    strategy = LinearExtrapolationStrategy(2, PaddingMode.LEFT)
    padded = strategy.pad([4, 6, 8, 10], 8)
    assert np.allclose(padded, [-4, -2, 0, 2, 4, 6, 8, 10])


def test_linear_symmetric():
    strategy = LinearExtrapolationStrategy(2, PaddingMode.SYMMETRIC)
    padded = strategy.pad([2, 4, 6, 8], 8)
    assert np.allclose(padded, [-2, 0, 2, 4, 6, 8, 10, 12])


def test_linear_least_squares_fit():
    padded = LinearExtrapolationStrategy(3).pad([1, 2, 3, 4], 8)
    assert np.allclose(padded[4:], [5, 6, 7, 8])


def test_linear_fit_points_clipped_to_signal():
    padded = LinearExtrapolationStrategy(10).pad([0.0, 1.0, 2.0], 5)
    assert np.allclose(padded, [0, 1, 2, 3, 4])


def test_linear_single_sample_is_constant():
    padded = LinearExtrapolationStrategy(2).pad([3.0], 4)
    assert np.allclose(padded, [3, 3, 3, 3])


def test_linear_invalid_fit_points():
    with pytest.raises(InvalidArgumentError):
        LinearExtrapolationStrategy(1)


# =============================================================================
# Polynomial
# =============================================================================

def test_polynomial_reproduces_quadratic():
    t = np.arange(10, dtype=float)
    x = 0.5 * t ** 2 - 2 * t + 1
    padded = PolynomialExtrapolationStrategy(2).pad(x, 14)
    t_new = np.arange(10, 14, dtype=float)
    assert np.allclose(padded[10:], 0.5 * t_new ** 2 - 2 * t_new + 1, rtol=1e-6)


def test_polynomial_reproduces_cubic_left():
    t = np.arange(12, dtype=float)
    x = 0.1 * t ** 3 - t
    padded = PolynomialExtrapolationStrategy(3, mode=PaddingMode.LEFT).pad(x, 15)
    t_new = np.arange(-3, 0, dtype=float)
    assert np.allclose(padded[:3], 0.1 * t_new ** 3 - t_new, rtol=1e-6)


def test_polynomial_short_signal_falls_back():
    padded = PolynomialExtrapolationStrategy(5).pad([5.0, 5.0, 5.0], 8)
    assert len(padded) == 8
    assert np.all(np.abs(padded - 5.0) < 0.1)


def test_polynomial_default_fit_points():
    assert PolynomialExtrapolationStrategy(3).fit_points == 6
    assert PolynomialExtrapolationStrategy(8).fit_points == 10
    assert PolynomialExtrapolationStrategy(10).fit_points == 11


@pytest.mark.parametrize("order", [0, -1, 11])
def test_polynomial_invalid_order(order):
    with pytest.raises(InvalidArgumentError):
        PolynomialExtrapolationStrategy(order)


def test_polynomial_too_few_fit_points():
    with pytest.raises(InvalidArgumentError):
        PolynomialExtrapolationStrategy(3, fit_points=3)


def test_polynomial_description_names_order():
    assert "cubic" in PolynomialExtrapolationStrategy(3).description
    assert PolynomialExtrapolationStrategy(2).name == "polynomial-2-right"


def test_vandermonde_fit_rejects_ill_conditioned():
    with pytest.raises(NumericDegeneracyError):
        vandermonde_fit(np.linspace(0, 1, 200), 40)


def test_vandermonde_fit_exact_line():
    coeffs = vandermonde_fit(np.array([1.0, 2.0, 3.0]), 1)
    assert np.allclose(coeffs, [1.0, 2.0])


# =============================================================================
# Antisymmetric
# =============================================================================

def test_antisymmetric_half_point():
    padded = AntisymmetricPaddingStrategy().pad([1, 2, 3], 6)
    assert np.array_equal(padded, [1, 2, 3, -3, -2, -1])


def test_antisymmetric_whole_point():
    strategy = AntisymmetricPaddingStrategy(SymmetryType.WHOLE_POINT)
    padded = strategy.pad([1, 2, 3], 7)
    assert np.array_equal(padded, [1, 2, 3, -2, -1, 2, 3])


def test_antisymmetric_single_sample():
    padded = AntisymmetricPaddingStrategy().pad([5.0], 3)
    assert np.array_equal(padded, [5, -5, -5])


def test_antisymmetric_names():
    assert AntisymmetricPaddingStrategy().name == "antisymmetric-half-point"
    assert AntisymmetricPaddingStrategy(SymmetryType.WHOLE_POINT).name == "antisymmetric-whole-point"


def test_invalid_mode_and_symmetry():
    with pytest.raises(InvalidArgumentError):
        ConstantPaddingStrategy("left")
    with pytest.raises(InvalidArgumentError):
        AntisymmetricPaddingStrategy("half")
