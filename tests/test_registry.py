#!/usr/bin/env python3
"""
Tests for the shared-instance registry
"""

import sys
from pathlib import Path

import numpy as np
import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from wavepad import (
    AdaptivePaddingStrategy,
    InvalidArgumentError,
    PaddingStrategy,
    SymmetricPaddingStrategy,
    available_strategies,
    get_strategy,
)
from wavepad.registry import STRATEGIES


def test_known_names():
    assert available_strategies() == [
        "zero", "symmetric", "reflect", "periodic", "constant", "linear",
        "polynomial", "antisymmetric", "mean", "median", "trend", "adaptive",
    ]


def test_shared_instances():
    assert get_strategy("symmetric") is get_strategy("symmetric")
    assert isinstance(get_strategy("symmetric"), SymmetricPaddingStrategy)
    assert isinstance(get_strategy("adaptive"), AdaptivePaddingStrategy)


@pytest.mark.parametrize("name", available_strategies())
def test_every_entry_pads(name):
    strategy = get_strategy(name)
    assert isinstance(strategy, PaddingStrategy)
    padded = strategy.pad([1.0, 3.0, 2.0, 5.0, 4.0, 6.0], 10)
    assert padded.shape == (10,)
    assert np.all(np.isfinite(padded))


def test_unknown_name_lists_choices():
    with pytest.raises(InvalidArgumentError, match="symmetric"):
        get_strategy("mirror")


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        STRATEGIES["mirror"] = SymmetricPaddingStrategy()
