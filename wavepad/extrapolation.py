"""
Parametric Extrapolation Strategies

Fit a local model to the samples at an edge and continue it:

    constant       repeat the boundary sample
    linear         least-squares slope through the last k samples
    polynomial     least-squares Vandermonde fit of order d through k samples
    antisymmetric  negated mirror image (half-point or whole-point)

Numerical policy (polynomial):
    The fit runs on edge coordinates mapped to [0, 1] and on samples scaled
    by the edge's largest magnitude. A design matrix whose condition number
    exceeds MAX_CONDITION, a singular normal-equation system, or a fit that
    extrapolates to non-finite values is treated as degenerate and retried
    one order lower. Order 0 is the boundary sample itself, which is always
    finite.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .base import (
    PaddingMode,
    PaddingStrategy,
    check_mode,
    fit_line,
    normalize,
    rescale,
)
from .exceptions import InvalidArgumentError, NumericDegeneracyError

logger = logging.getLogger(__name__)

MAX_POLYNOMIAL_ORDER = 10
MAX_CONDITION = 1e8

_ORDER_NAMES = {1: "linear", 2: "quadratic", 3: "cubic", 4: "quartic", 5: "quintic"}


def _check_count_field(value, what: str, minimum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidArgumentError(f"{what} must be an integer, got {value!r}")
    if value < minimum:
        raise InvalidArgumentError(f"{what} must be at least {minimum}, got {value}")
    return int(value)


# =============================================================================
# Constant
# =============================================================================

@dataclass(frozen=True)
class ConstantPaddingStrategy(PaddingStrategy):
    """Repeats the boundary sample (first sample on the left, last on the right)."""
    mode: PaddingMode = PaddingMode.RIGHT

    def __post_init__(self):
        check_mode(self.mode)

    @property
    def name(self) -> str:
        return f"constant-{self.mode.value}"

    @property
    def description(self) -> str:
        return f"Constant padding - repeats the boundary value ({self.mode.value} mode)"

    def _extend_right(self, x, count):
        return np.full(count, x[-1], dtype=np.float64)

    def _extend_left(self, x, count):
        return np.full(count, x[0], dtype=np.float64)


# =============================================================================
# Linear extrapolation
# =============================================================================

@dataclass(frozen=True)
class LinearExtrapolationStrategy(PaddingStrategy):
    """
    Continues the edge slope.

    Parameters
    ----------
    fit_points : int
        Number of edge samples in the least-squares slope fit (>= 2).
        Clipped to the signal length; two points give the plain difference.
    mode : PaddingMode
        Which side(s) to pad. SYMMETRIC fits both edges independently.

    Example
    -------
    >>> LinearExtrapolationStrategy(2).pad([1, 2, 3, 4], 8)
    array([1., 2., 3., 4., 5., 6., 7., 8.])
    """
    fit_points: int = 2
    mode: PaddingMode = PaddingMode.RIGHT

    def __post_init__(self):
        _check_count_field(self.fit_points, "fit_points", 2)
        check_mode(self.mode)

    @property
    def name(self) -> str:
        return f"linear-{self.fit_points}-{self.mode.value}"

    @property
    def description(self) -> str:
        return (
            f"Linear extrapolation padding ({self.fit_points} fit points, "
            f"{self.mode.value} mode) - extrapolates based on edge slopes"
        )

    def _extend_right(self, x, count):
        window, scale = normalize(x[-min(self.fit_points, len(x)):])
        if len(window) == 2:
            slope = window[1] - window[0]
        else:
            _, slope = fit_line(window)
        steps = np.arange(1, count + 1, dtype=np.float64)
        return rescale(window[-1] + slope * steps, scale)


# =============================================================================
# Polynomial extrapolation
# =============================================================================

def _edge_coordinates(m: int) -> np.ndarray:
    return np.arange(m, dtype=np.float64) / max(m - 1, 1)


def vandermonde_fit(y: np.ndarray, order: int) -> np.ndarray:
    """
    Least-squares polynomial through ``y`` via the normal equations.

    Samples are placed at t = i / (m - 1), i = 0..m-1.

    Parameters
    ----------
    y : ndarray, shape (m,)
        Edge samples, ideally scaled into [-1, 1]
    order : int
        Polynomial order, at most m - 1

    Returns
    -------
    coeffs : ndarray, shape (order + 1,)
        Increasing-power coefficients

    Raises
    ------
    NumericDegeneracyError
        Ill-conditioned or singular design, or a non-finite solution
    """
    t = _edge_coordinates(len(y))
    design = np.vander(t, order + 1, increasing=True)
    with np.errstate(all="ignore"):
        condition = np.linalg.cond(design)
    if not np.isfinite(condition) or condition > MAX_CONDITION:
        raise NumericDegeneracyError(
            f"order-{order} design matrix is ill-conditioned (cond={condition:.3g})"
        )
    gram = design.T @ design
    rhs = design.T @ y
    try:
        with np.errstate(all="ignore"):
            coeffs = np.linalg.solve(gram, rhs)
    except np.linalg.LinAlgError as exc:
        raise NumericDegeneracyError(f"order-{order} normal equations are singular") from exc
    if not np.all(np.isfinite(coeffs)):
        raise NumericDegeneracyError(f"order-{order} fit produced non-finite coefficients")
    return coeffs


@dataclass(frozen=True)
class PolynomialExtrapolationStrategy(PaddingStrategy):
    """
    Continues a least-squares polynomial fitted to the edge samples.

    Parameters
    ----------
    order : int
        Polynomial order, 1..10
    fit_points : int, optional
        Edge samples used in the fit, at least ``order + 1``. Defaults to
        ``order + 3`` capped at 10 (but never below ``order + 1``).
    mode : PaddingMode
        Which side(s) to pad

    Notes
    -----
    Signals shorter than ``order + 1`` samples are fitted at order
    ``len(signal) - 1``; degenerate fits drop one order at a time down to
    the constant boundary value.
    """
    order: int = 3
    fit_points: Optional[int] = None
    mode: PaddingMode = PaddingMode.RIGHT

    def __post_init__(self):
        order = _check_count_field(self.order, "order", 1)
        if order > MAX_POLYNOMIAL_ORDER:
            raise InvalidArgumentError(
                f"Polynomial order should not exceed {MAX_POLYNOMIAL_ORDER} "
                f"to avoid numerical instability, got {order}"
            )
        if self.fit_points is None:
            object.__setattr__(self, "fit_points", max(order + 1, min(order + 3, 10)))
        else:
            fit_points = _check_count_field(self.fit_points, "fit_points", 1)
            if fit_points < order + 1:
                raise InvalidArgumentError(
                    f"Need at least {order + 1} fit_points for order {order} "
                    f"polynomial, got {fit_points}"
                )
        check_mode(self.mode)

    @property
    def name(self) -> str:
        return f"polynomial-{self.order}-{self.mode.value}"

    @property
    def description(self) -> str:
        order_name = _ORDER_NAMES.get(self.order, f"order-{self.order}")
        return (
            f"Polynomial extrapolation padding ({order_name}, "
            f"{self.fit_points} fit points, {self.mode.value} mode)"
        )

    def _extend_right(self, x, count):
        window, scale = normalize(x[-min(self.fit_points, len(x)):])
        m = len(window)
        h = max(m - 1, 1)
        t_new = (m - 1 + np.arange(1, count + 1, dtype=np.float64)) / h

        order = min(self.order, m - 1)
        while order > 0:
            try:
                coeffs = vandermonde_fit(window, order)
                with np.errstate(all="ignore"):
                    values = np.polynomial.polynomial.polyval(t_new, coeffs) * scale
                if not np.all(np.isfinite(values)):
                    raise NumericDegeneracyError(
                        f"order-{order} extrapolation overflowed"
                    )
                return values
            except NumericDegeneracyError as exc:
                logger.debug("%s: %s, retrying at order %d", self.name, exc, order - 1)
                order -= 1
        return np.full(count, x[-1], dtype=np.float64)


# =============================================================================
# Antisymmetric
# =============================================================================

class SymmetryType(enum.Enum):
    """Mirror point for antisymmetric extension."""
    HALF_POINT = "half-point"
    WHOLE_POINT = "whole-point"


@dataclass(frozen=True)
class AntisymmetricPaddingStrategy(PaddingStrategy):
    """
    Extends with negated mirror images of the signal.

    HALF_POINT mirrors between samples:
        s0 .. s[n-1] | -s[n-1] .. -s0 | s0 ..        (period 2n)
    WHOLE_POINT mirrors about the boundary sample:
        s0 .. s[n-1] | -s[n-2] .. -s0 | s1 ..        (period 2n - 2)

    A single-sample signal extends as its negation repeated.
    """
    symmetry_type: SymmetryType = SymmetryType.HALF_POINT

    def __post_init__(self):
        if not isinstance(self.symmetry_type, SymmetryType):
            raise InvalidArgumentError(
                f"symmetry_type must be a SymmetryType, got {self.symmetry_type!r}"
            )

    @property
    def name(self) -> str:
        return f"antisymmetric-{self.symmetry_type.value}"

    @property
    def description(self) -> str:
        return (
            f"Antisymmetric padding ({self.symmetry_type.value}) - "
            "mirrors signal with sign inversion"
        )

    def _extend_right(self, x, count):
        n = len(x)
        if n == 1:
            return np.full(count, -x[0], dtype=np.float64)
        steps = np.arange(count)
        if self.symmetry_type is SymmetryType.HALF_POINT:
            base = np.concatenate([x, -x[::-1]])
            return base[(n + steps) % (2 * n)]
        base = np.concatenate([x[1:], -x[-2::-1]])
        return base[(n - 1 + steps) % (2 * n - 2)]
