"""
Statistical Padding Strategies

Fill the padding region with a statistic of the signal rather than a
continuation of its edge:

    MEAN              global mean
    MEDIAN            global median (robust to outliers)
    WEIGHTED_MEAN     exponentially weighted mean of the edge window
    TREND             least-squares line over the signal (or edge window),
                      evaluated at the new indices
    VARIANCE_MATCHED  Gaussian draws with the signal's mean and std
    LOCAL_MEAN        plain mean of the edge window

VARIANCE_MATCHED is reproducible: each call builds its own generator seeded
from a digest of the signal bytes, the side being padded and the optional
``seed`` field. Equal inputs give equal outputs and no generator state is
shared between calls or threads.
"""

import enum
import hashlib
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .base import PaddingMode, PaddingStrategy, check_mode, fit_line, normalize, rescale
from .exceptions import InvalidArgumentError

DEFAULT_WINDOW = 10
WEIGHT_DECAY = 0.9


class StatMethod(enum.Enum):
    """Statistic used to fill the padding region."""
    MEAN = "mean"
    MEDIAN = "median"
    WEIGHTED_MEAN = "weighted_mean"
    TREND = "trend"
    VARIANCE_MATCHED = "variance_matched"
    LOCAL_MEAN = "local_mean"


_METHOD_DESCRIPTIONS = {
    StatMethod.MEAN: "global mean",
    StatMethod.MEDIAN: "global median",
    StatMethod.WEIGHTED_MEAN: "weighted mean",
    StatMethod.TREND: "trend extrapolation",
    StatMethod.VARIANCE_MATCHED: "variance-matched random",
    StatMethod.LOCAL_MEAN: "local mean",
}

_WINDOWED = (StatMethod.WEIGHTED_MEAN, StatMethod.LOCAL_MEAN)


@dataclass(frozen=True)
class StatisticalPaddingStrategy(PaddingStrategy):
    """
    Pads with a statistic of the signal.

    Parameters
    ----------
    method : StatMethod
        Statistic to pad with
    window_size : int, optional
        Edge window for WEIGHTED_MEAN and LOCAL_MEAN (default 10). Other
        methods use the whole signal unless a window is given.
    mode : PaddingMode
        Which side(s) to pad
    seed : int, optional
        Extra seed material for VARIANCE_MATCHED
    """
    method: StatMethod = StatMethod.MEAN
    window_size: Optional[int] = None
    mode: PaddingMode = PaddingMode.RIGHT
    seed: Optional[int] = None

    def __post_init__(self):
        if not isinstance(self.method, StatMethod):
            raise InvalidArgumentError(f"method must be a StatMethod, got {self.method!r}")
        if self.window_size is None:
            if self.method in _WINDOWED:
                object.__setattr__(self, "window_size", DEFAULT_WINDOW)
        elif isinstance(self.window_size, bool) or not isinstance(self.window_size, (int, np.integer)):
            raise InvalidArgumentError(f"window_size must be an integer, got {self.window_size!r}")
        elif self.window_size < 1:
            raise InvalidArgumentError(f"Window size must be positive, got {self.window_size}")
        check_mode(self.mode)

    @property
    def name(self) -> str:
        return f"statistical-{self.method.value}-{self.mode.value}"

    @property
    def description(self) -> str:
        window = "all" if self.window_size is None else self.window_size
        return (
            f"Statistical padding ({_METHOD_DESCRIPTIONS[self.method]}, "
            f"window={window}, {self.mode.value} mode)"
        )

    def _extend_right(self, x, count):
        return self._fill(x, count, PaddingMode.RIGHT)

    def _extend_left(self, x, count):
        return self._fill(x, count, PaddingMode.LEFT)

    def _window(self, scaled: np.ndarray, side: PaddingMode) -> np.ndarray:
        """Edge window ordered so the sample nearest the padding comes last."""
        if self.window_size is None or self.window_size >= len(scaled):
            window = scaled
        elif side is PaddingMode.RIGHT:
            window = scaled[-self.window_size:]
        else:
            window = scaled[:self.window_size]
        return window if side is PaddingMode.RIGHT else window[::-1]

    def _fill(self, x: np.ndarray, count: int, side: PaddingMode) -> np.ndarray:
        scaled, scale = normalize(x)
        method = self.method

        if method is StatMethod.TREND:
            # line fitted over the edge window, window index 0 at its first sample
            w = len(scaled) if self.window_size is None else min(self.window_size, len(scaled))
            if side is PaddingMode.RIGHT:
                intercept, slope = fit_line(scaled[-w:])
                positions = w + np.arange(count, dtype=np.float64)
            else:
                intercept, slope = fit_line(scaled[:w])
                positions = np.arange(-count, 0, dtype=np.float64)
            return rescale(intercept + slope * positions, scale)

        if method is StatMethod.VARIANCE_MATCHED:
            window = self._window(scaled, side)
            rng = np.random.default_rng(self._seed_for(x, side))
            draws = window.mean() + window.std() * rng.standard_normal(count)
            return rescale(draws, scale)

        if method is StatMethod.MEAN:
            value = self._window(scaled, side).mean()
        elif method is StatMethod.MEDIAN:
            value = np.median(self._window(scaled, side))
        elif method is StatMethod.LOCAL_MEAN:
            value = self._window(scaled, side).mean()
        else:
            window = self._window(scaled, side)
            weights = WEIGHT_DECAY ** np.arange(len(window) - 1, -1, -1, dtype=np.float64)
            value = np.dot(weights, window) / weights.sum()
        return rescale(np.full(count, value), scale)

    def _seed_for(self, x: np.ndarray, side: PaddingMode) -> int:
        digest = hashlib.sha256(np.ascontiguousarray(x).tobytes())
        digest.update(side.value.encode())
        if self.seed is not None:
            digest.update(str(int(self.seed)).encode())
        return int.from_bytes(digest.digest()[:16], "little")
