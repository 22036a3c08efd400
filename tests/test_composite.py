#!/usr/bin/env python3
"""
Tests for composite (per-edge) padding
"""

import sys
from pathlib import Path

import numpy as np
import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from wavepad import (
    CompositePaddingStrategy,
    ConstantPaddingStrategy,
    InvalidArgumentError,
    LinearExtrapolationStrategy,
    PaddingMode,
    SymmetricPaddingStrategy,
    ZeroPaddingStrategy,
)


def test_split_rounds_left_down():
    composite = CompositePaddingStrategy(ZeroPaddingStrategy(), ConstantPaddingStrategy(), 0.25)
    padded = composite.pad([1, 2, 3, 4], 8)
    assert len(padded) == 8
    assert padded[0] == 0
    assert padded[7] == 4
    assert np.array_equal(padded, [0, 1, 2, 3, 4, 4, 4, 4])


def test_constant_left_linear_right():
    composite = CompositePaddingStrategy(
        ConstantPaddingStrategy(PaddingMode.LEFT),
        LinearExtrapolationStrategy(2),
    )
    padded = composite.pad([5, 6, 7, 8], 8)
    assert np.allclose(padded, [5, 5, 5, 6, 7, 8, 9, 10])


@pytest.mark.parametrize("ratio, left", [(0.0, 0), (1.0, 5), (0.5, 2), (0.99, 4)])
def test_ratio_extremes(ratio, left):
    composite = CompositePaddingStrategy(ZeroPaddingStrategy(), SymmetricPaddingStrategy(), ratio)
    x = np.array([1.0, 2.0, 3.0])
    padded = composite.pad(x, 8)
    assert np.array_equal(padded[left:left + 3], x)
    assert np.array_equal(composite.trim(padded, 3), x)


def test_original_samples_untouched():
    rng = np.random.default_rng(2)
    x = rng.normal(size=33)
    composite = CompositePaddingStrategy(SymmetricPaddingStrategy(), LinearExtrapolationStrategy(3), 0.3)
    padded = composite.pad(x, 64)
    left = int(31 * 0.3)
    assert np.array_equal(padded[left:left + 33], x)


def test_builder():
    composite = (
        CompositePaddingStrategy.builder()
        .left_strategy(ZeroPaddingStrategy())
        .right_strategy(SymmetricPaddingStrategy())
        .left_ratio(0.25)
        .build()
    )
    assert composite == CompositePaddingStrategy(ZeroPaddingStrategy(), SymmetricPaddingStrategy(), 0.25)
    assert composite.name == "composite-zero-symmetric"
    assert "25%" in composite.description


def test_builder_requires_both_sides():
    with pytest.raises(InvalidArgumentError):
        CompositePaddingStrategy.builder().left_strategy(ZeroPaddingStrategy()).build()
    with pytest.raises(InvalidArgumentError):
        CompositePaddingStrategy.builder().right_strategy(ZeroPaddingStrategy()).build()


@pytest.mark.parametrize("ratio", [-0.1, 1.5, float("nan"), "half"])
def test_invalid_ratio(ratio):
    with pytest.raises(InvalidArgumentError):
        CompositePaddingStrategy(ZeroPaddingStrategy(), ZeroPaddingStrategy(), ratio)
    with pytest.raises(InvalidArgumentError):
        CompositePaddingStrategy.builder().left_ratio(ratio)


def test_missing_strategy():
    with pytest.raises(InvalidArgumentError):
        CompositePaddingStrategy(None, ZeroPaddingStrategy())
    with pytest.raises(InvalidArgumentError):
        CompositePaddingStrategy(ZeroPaddingStrategy(), "zero")
