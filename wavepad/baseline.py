"""
Baseline Padding Strategies

Parameter-free boundary extensions. They only copy (or zero) samples, so
``trim(pad(x, n), len(x))`` gives back ``x`` exactly.

    zero       1 2 3 4 | 0 0 0 0
    symmetric  1 2 3 4 | 4 3 2 1 | 1 2 ...   (boundary sample repeated)
    reflect    1 2 3 4 | 3 2 1 2 | 3 4 ...   (boundary sample not repeated)
    periodic   1 2 3 4 | 1 2 3 4 | 1 2 ...
"""

from dataclasses import dataclass

import numpy as np

from .base import PaddingStrategy


def _cyclic(base: np.ndarray, start: int, count: int) -> np.ndarray:
    """Samples ``start .. start+count-1`` of the periodic extension of ``base``."""
    return base[(start + np.arange(count)) % len(base)]


@dataclass(frozen=True)
class ZeroPaddingStrategy(PaddingStrategy):
    """Extends the signal with zeros."""

    @property
    def name(self) -> str:
        return "zero"

    @property
    def description(self) -> str:
        return "Zero padding - extends signal with zeros"

    def _extend_right(self, x, count):
        return np.zeros(count, dtype=np.float64)

    def _extend_left(self, x, count):
        return np.zeros(count, dtype=np.float64)


@dataclass(frozen=True)
class SymmetricPaddingStrategy(PaddingStrategy):
    """Mirrors the signal, duplicating the boundary sample (period 2n)."""

    @property
    def name(self) -> str:
        return "symmetric"

    @property
    def description(self) -> str:
        return "Symmetric padding - mirrors signal with boundary duplication"

    def _extend_right(self, x, count):
        return _cyclic(np.concatenate([x, x[::-1]]), len(x), count)


@dataclass(frozen=True)
class ReflectPaddingStrategy(PaddingStrategy):
    """Mirrors the signal about the boundary sample (period 2n - 2)."""

    @property
    def name(self) -> str:
        return "reflect"

    @property
    def description(self) -> str:
        return "Reflect padding - mirrors signal without boundary duplication"

    def _extend_right(self, x, count):
        if len(x) == 1:
            return np.full(count, x[0], dtype=np.float64)
        return _cyclic(np.concatenate([x, x[-2:0:-1]]), len(x), count)


@dataclass(frozen=True)
class PeriodicPaddingStrategy(PaddingStrategy):
    """Wraps the signal around cyclically."""

    @property
    def name(self) -> str:
        return "periodic"

    @property
    def description(self) -> str:
        return "Periodic padding - wraps signal cyclically"

    def _extend_right(self, x, count):
        return _cyclic(x, len(x), count)
