"""
Padding Strategy Base

Every padding strategy extends a finite 1-D signal to a target length and
can undo that with ``trim``. Concrete strategies only describe how new
samples continue the signal past its right edge (and optionally its left
edge); splitting the padding between the sides, validation and assembly of
the output live here.

Conventions:
    - Inputs are never mutated; every ``pad``/``extend`` call returns a
      freshly allocated float64 array.
    - ``trim`` returns its argument untouched when no trimming is needed.
    - Strategies are frozen dataclasses, so a single instance can be shared
      between threads.
"""

import enum
import operator
from abc import ABC, abstractmethod
from typing import Tuple

import numpy as np

from .exceptions import InvalidArgumentError

FLOAT_MAX = np.finfo(np.float64).max


class PaddingMode(enum.Enum):
    """Where padding samples go relative to the original signal."""
    LEFT = "left"
    RIGHT = "right"
    SYMMETRIC = "symmetric"


# =============================================================================
# Validation
# =============================================================================

def as_signal(signal) -> np.ndarray:
    """
    Validate a signal and view it as a float64 array.

    Parameters
    ----------
    signal : array_like
        1-D sequence of samples

    Returns
    -------
    x : ndarray
        float64 array (may share memory with ``signal``; callers must not
        write to it)
    """
    if signal is None:
        raise InvalidArgumentError("Signal cannot be None")
    x = np.asarray(signal, dtype=np.float64)
    if x.ndim != 1:
        raise InvalidArgumentError(
            f"Signal must be one-dimensional, got shape {x.shape}"
        )
    if x.size == 0:
        raise InvalidArgumentError("Signal cannot be empty")
    return x


def _as_length(value, what: str) -> int:
    try:
        length = operator.index(value)
    except TypeError:
        raise InvalidArgumentError(
            f"{what} must be an integer, got {type(value).__name__}"
        ) from None
    if length < 0:
        raise InvalidArgumentError(f"{what} must be non-negative, got {length}")
    return length


def check_target_length(signal_length: int, target_length) -> int:
    """Validate ``target_length`` against the signal it will pad."""
    target_length = _as_length(target_length, "Target length")
    if target_length < signal_length:
        raise InvalidArgumentError(
            f"Target length {target_length} must be >= signal length {signal_length}"
        )
    return target_length


def split_padding(total: int, mode: PaddingMode) -> Tuple[int, int]:
    """Return (left, right) sample counts for ``total`` padding samples."""
    if mode is PaddingMode.RIGHT:
        return 0, total
    if mode is PaddingMode.LEFT:
        return total, 0
    if mode is PaddingMode.SYMMETRIC:
        left = total // 2
        return left, total - left
    raise InvalidArgumentError(f"Unknown padding mode: {mode!r}")


def check_mode(mode) -> PaddingMode:
    if not isinstance(mode, PaddingMode):
        raise InvalidArgumentError(
            f"mode must be a PaddingMode, got {mode!r}"
        )
    return mode


# =============================================================================
# Numeric helpers
# =============================================================================

def normalize(x: np.ndarray) -> Tuple[np.ndarray, float]:
    """
    Scale samples into [-1, 1].

    Statistics and fits run on the scaled samples so intermediate sums
    and squares cannot overflow, whatever the input magnitude.

    Returns
    -------
    scaled : ndarray
        ``x / scale`` (a new array)
    scale : float
        Largest magnitude in ``x``, or 1.0 for an all-zero signal
    """
    scale = float(np.max(np.abs(x)))
    if scale == 0.0 or not np.isfinite(scale):
        return np.array(x, dtype=np.float64), 1.0
    return x / scale, scale


def saturate(values: np.ndarray) -> np.ndarray:
    """Clamp overflowed samples to the largest finite float64."""
    return np.nan_to_num(values, nan=0.0, posinf=FLOAT_MAX, neginf=-FLOAT_MAX)


def rescale(scaled: np.ndarray, scale: float) -> np.ndarray:
    """Undo :func:`normalize`, saturating instead of overflowing."""
    with np.errstate(over="ignore", invalid="ignore"):
        values = np.asarray(scaled, dtype=np.float64) * scale
    return saturate(values)


def fit_line(y: np.ndarray) -> Tuple[float, float]:
    """
    Least-squares line through ``y`` sampled at t = 0, 1, ..., m-1.

    Returns
    -------
    intercept, slope : float
        Value at t = 0 and change per sample. A single sample gives
        slope 0.
    """
    m = len(y)
    t = np.arange(m, dtype=np.float64)
    t_mean = t.mean()
    y_mean = float(np.mean(y))
    dt = t - t_mean
    denominator = float(np.dot(dt, dt))
    if denominator == 0.0:
        return y_mean, 0.0
    slope = float(np.dot(dt, y - y_mean)) / denominator
    return y_mean - slope * t_mean, slope


# =============================================================================
# Strategy base class
# =============================================================================

class PaddingStrategy(ABC):
    """
    Boundary-extension policy.

    Subclasses implement :meth:`_extend_right`; the left edge defaults to
    extending the mirrored signal and mirroring the result back, which is
    the correct continuation for every edge-symmetric rule.

    Attributes
    ----------
    mode : PaddingMode
        Placement of new samples used by :meth:`pad` and :meth:`trim`.
        Strategies without a ``mode`` field pad on the right.
    """

    mode = PaddingMode.RIGHT

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier, e.g. ``"symmetric"``."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable one-line summary."""

    @abstractmethod
    def _extend_right(self, x: np.ndarray, count: int) -> np.ndarray:
        """Return ``count`` samples that continue ``x`` past ``x[-1]``."""

    def _extend_left(self, x: np.ndarray, count: int) -> np.ndarray:
        """Return ``count`` samples that lead into ``x[0]``."""
        return self._extend_right(x[::-1], count)[::-1]

    def _padding_split(self, total: int) -> Tuple[int, int]:
        return split_padding(total, self.mode)

    def pad(self, signal, target_length: int) -> np.ndarray:
        """
        Extend ``signal`` to ``target_length`` samples.

        Parameters
        ----------
        signal : array_like
            Non-empty 1-D signal
        target_length : int
            Desired length, at least ``len(signal)``

        Returns
        -------
        padded : ndarray, shape (target_length,)
            New array; a copy of ``signal`` when no padding is needed
        """
        x = as_signal(signal)
        target_length = check_target_length(len(x), target_length)
        if target_length == len(x):
            return x.copy()
        left, right = self._padding_split(target_length - len(x))
        return self._assemble(x, left, right)

    def _assemble(self, x: np.ndarray, left: int, right: int) -> np.ndarray:
        n = len(x)
        padded = np.empty(left + n + right, dtype=np.float64)
        if left:
            padded[:left] = self._extend_left(x, left)
        padded[left:left + n] = x
        if right:
            padded[left + n:] = self._extend_right(x, right)
        return padded

    def extend(self, signal, count: int, side: PaddingMode) -> np.ndarray:
        """
        Compute only the new samples on one side of ``signal``.

        Parameters
        ----------
        signal : array_like
            Non-empty 1-D signal
        count : int
            Number of samples to synthesise
        side : PaddingMode
            ``PaddingMode.LEFT`` or ``PaddingMode.RIGHT``

        Returns
        -------
        extension : ndarray, shape (count,)
            In natural order: a left extension ends next to ``signal[0]``,
            a right extension starts next to ``signal[-1]``.
        """
        x = as_signal(signal)
        count = _as_length(count, "Extension count")
        if side is PaddingMode.LEFT:
            extend = self._extend_left
        elif side is PaddingMode.RIGHT:
            extend = self._extend_right
        else:
            raise InvalidArgumentError(
                f"side must be PaddingMode.LEFT or PaddingMode.RIGHT, got {side!r}"
            )
        if count == 0:
            return np.empty(0, dtype=np.float64)
        return np.array(extend(x, count), dtype=np.float64)

    def trim(self, extended, original_length: int) -> np.ndarray:
        """
        Recover the original-length part of a padded signal.

        Returns ``extended`` itself when it already has ``original_length``
        samples, otherwise a new array with the samples this strategy's
        :meth:`pad` left in place.
        """
        if extended is None:
            raise InvalidArgumentError("Extended signal cannot be None")
        available = len(extended)
        original_length = _as_length(original_length, "Original length")
        if original_length > available:
            raise InvalidArgumentError(
                f"Original length {original_length} exceeds result length {available}"
            )
        if original_length == available:
            return extended
        left, _ = self._padding_split(available - original_length)
        return np.array(extended[left:left + original_length], dtype=np.float64)

    def __str__(self):
        return self.name
