"""
Adaptive Padding Selection

Chooses a padding strategy per signal from its features:

    length < min_length                          -> symmetric (safe baseline)
    periodicity > periodic                       -> periodic
    edge discontinuity, smoothness < rough       -> zero
    trend > linear_trend, noise < linear_noise   -> linear extrapolation
    smoothness > smooth, noise < smooth_noise    -> polynomial extrapolation
    trend > noisy_trend                          -> statistical trend
    stationarity > stationary, noise > noisy     -> statistical mean
    stationarity > stationary                    -> constant
    noise > noisy                                -> statistical mean
    otherwise                                    -> symmetric

The first matching rule wins. If the chosen candidate raises or produces
non-finite samples from a finite signal, the remaining candidates are tried
(symmetric ones first) and the selection reason records the fallback.
"""

import logging
from dataclasses import dataclass, fields
from typing import Callable, Optional, Sequence, Tuple

import numpy as np

from .analysis import SignalFeatures, analyze_signal
from .base import PaddingMode, PaddingStrategy, as_signal, check_target_length
from .baseline import PeriodicPaddingStrategy, SymmetricPaddingStrategy, ZeroPaddingStrategy
from .exceptions import InvalidArgumentError
from .extrapolation import (
    AntisymmetricPaddingStrategy,
    ConstantPaddingStrategy,
    LinearExtrapolationStrategy,
    PolynomialExtrapolationStrategy,
)
from .statistical import StatisticalPaddingStrategy, StatMethod

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectionThresholds:
    """
    Decision thresholds of the adaptive selector.

    Parameters
    ----------
    min_length : int
        Signals shorter than this always get symmetric padding
    periodic : float
        Periodicity score above which periodic padding is chosen
    rough : float
        Signals with an edge discontinuity and smoothness below this get
        zero padding
    linear_trend, linear_noise : float
        Linear extrapolation needs trend above / noise below these
    smooth, smooth_noise : float
        Polynomial extrapolation needs smoothness above / noise below these
    noisy_trend : float
        Trend strength above which a statistical trend fit is used
    stationary : float
        Stationarity above which the signal level is continued (constant,
        or the statistical mean when noisy)
    noisy : float
        Noise level above which the statistical mean is used
    """
    min_length: int = 5
    periodic: float = 0.7
    rough: float = 0.3
    linear_trend: float = 0.98
    linear_noise: float = 0.2
    smooth: float = 0.7
    smooth_noise: float = 0.3
    noisy_trend: float = 0.6
    stationary: float = 0.7
    noisy: float = 0.5

    def __post_init__(self):
        if isinstance(self.min_length, bool) or not isinstance(self.min_length, int) or self.min_length < 1:
            raise InvalidArgumentError(f"min_length must be a positive integer, got {self.min_length!r}")
        for f in fields(self):
            if f.name == "min_length":
                continue
            value = getattr(self, f.name)
            if not isinstance(value, (int, float)) or not 0.0 <= value <= 1.0:
                raise InvalidArgumentError(f"{f.name} threshold must be in [0, 1], got {value!r}")


@dataclass(frozen=True, eq=False)
class AdaptivePaddingResult:
    """
    Outcome of one adaptive padding call.

    Two results compare equal when their strategies, reasons and padded
    samples are equal; ``features`` is informational. ``padded_signal`` is
    a read-only view.
    """
    padded_signal: np.ndarray
    selected_strategy: PaddingStrategy
    selection_reason: str
    features: Optional[SignalFeatures] = None

    def __post_init__(self):
        view = np.asarray(self.padded_signal, dtype=np.float64).view()
        view.setflags(write=False)
        object.__setattr__(self, "padded_signal", view)

    def __eq__(self, other):
        if not isinstance(other, AdaptivePaddingResult):
            return NotImplemented
        return (
            self.selected_strategy == other.selected_strategy
            and self.selection_reason == other.selection_reason
            and np.array_equal(self.padded_signal, other.padded_signal)
        )

    __hash__ = None


def _default_candidates() -> Tuple[PaddingStrategy, ...]:
    return (
        ZeroPaddingStrategy(),
        ConstantPaddingStrategy(),
        SymmetricPaddingStrategy(),
        PeriodicPaddingStrategy(),
        LinearExtrapolationStrategy(3),
        PolynomialExtrapolationStrategy(3),
        StatisticalPaddingStrategy(StatMethod.MEAN),
        StatisticalPaddingStrategy(StatMethod.TREND),
        AntisymmetricPaddingStrategy(),
    )


@dataclass(frozen=True)
class AdaptivePaddingStrategy(PaddingStrategy):
    """
    Picks a padding strategy per signal from its analysed features.

    Parameters
    ----------
    candidates : sequence of PaddingStrategy, optional
        Strategies to choose from, in fallback order. Defaults to zero,
        constant, symmetric, periodic, linear(3), polynomial(3),
        statistical mean, statistical trend and antisymmetric.
    thresholds : SelectionThresholds, optional
        Decision thresholds

    Example
    -------
    >>> result = AdaptivePaddingStrategy().pad_with_details(signal, 128)
    >>> result.selected_strategy.name, result.selection_reason
    """
    candidates: Optional[Sequence[PaddingStrategy]] = None
    thresholds: Optional[SelectionThresholds] = None

    def __post_init__(self):
        if self.candidates is None:
            candidates = _default_candidates()
        else:
            candidates = tuple(self.candidates)
            if not candidates:
                raise InvalidArgumentError("Candidate strategies cannot be empty")
            for candidate in candidates:
                if not isinstance(candidate, PaddingStrategy):
                    raise InvalidArgumentError(
                        f"Candidates must be PaddingStrategy instances, got {candidate!r}"
                    )
        object.__setattr__(self, "candidates", candidates)
        if self.thresholds is None:
            object.__setattr__(self, "thresholds", SelectionThresholds())
        elif not isinstance(self.thresholds, SelectionThresholds):
            raise InvalidArgumentError(
                f"thresholds must be SelectionThresholds, got {self.thresholds!r}"
            )

    @property
    def name(self) -> str:
        return "adaptive"

    @property
    def description(self) -> str:
        return "Adaptive padding - automatically selects optimal strategy based on signal characteristics"

    # -------------------------------------------------------------------------
    # Selection
    # -------------------------------------------------------------------------

    def _find(self, cls, method: Optional[StatMethod] = None) -> PaddingStrategy:
        """First candidate of type ``cls`` (and ``method``), else the first candidate."""
        for candidate in self.candidates:
            if isinstance(candidate, cls) and (method is None or candidate.method is method):
                return candidate
        for candidate in self.candidates:
            if isinstance(candidate, cls):
                return candidate
        return self.candidates[0]

    def _select(self, features: SignalFeatures) -> Tuple[PaddingStrategy, str]:
        th = self.thresholds
        if features.length < th.min_length:
            return self._find(SymmetricPaddingStrategy), f"short signal ({features.length} samples)"
        if features.periodicity > th.periodic:
            return (
                self._find(PeriodicPaddingStrategy),
                f"strong periodicity detected ({features.periodicity:.2f})",
            )
        if features.has_discontinuity and features.smoothness < th.rough:
            return (
                self._find(ZeroPaddingStrategy),
                f"edge discontinuity in a rough, non-smooth signal (smoothness={features.smoothness:.2f})",
            )
        if features.trend_strength > th.linear_trend and features.noise_level < th.linear_noise:
            return (
                self._find(LinearExtrapolationStrategy),
                f"strong linear trend (r2={features.trend_strength:.2f}) with low noise",
            )
        if features.smoothness > th.smooth and features.noise_level < th.smooth_noise:
            return (
                self._find(PolynomialExtrapolationStrategy),
                f"smooth signal (smoothness={features.smoothness:.2f}) with low noise",
            )
        if features.trend_strength > th.noisy_trend:
            return (
                self._find(StatisticalPaddingStrategy, StatMethod.TREND),
                f"noisy trend (r2={features.trend_strength:.2f})",
            )
        if features.stationarity > th.stationary:
            if features.noise_level > th.noisy:
                return (
                    self._find(StatisticalPaddingStrategy, StatMethod.MEAN),
                    f"noisy stationary signal (stationarity={features.stationarity:.2f}) without trend",
                )
            return (
                self._find(ConstantPaddingStrategy),
                f"stationary signal (stationarity={features.stationarity:.2f}) without trend",
            )
        if features.noise_level > th.noisy:
            return (
                self._find(StatisticalPaddingStrategy, StatMethod.MEAN),
                f"noisy signal (noise={features.noise_level:.2f}) with weak trend",
            )
        return (
            self._find(SymmetricPaddingStrategy),
            "mixed characteristics (no dominant periodic, trend or smooth feature)",
        )

    def _fallback_order(self, preferred: PaddingStrategy) -> Tuple[PaddingStrategy, ...]:
        symmetric = [c for c in self.candidates
                     if isinstance(c, SymmetricPaddingStrategy) and c is not preferred]
        rest = [c for c in self.candidates
                if not isinstance(c, SymmetricPaddingStrategy) and c is not preferred]
        return (preferred, *symmetric, *rest)

    def _run(
        self,
        x: np.ndarray,
        operation: Callable[[PaddingStrategy], np.ndarray],
    ) -> AdaptivePaddingResult:
        features = analyze_signal(x)
        preferred, cause = self._select(features)
        logger.debug("selected %s for %d samples: %s", preferred.name, len(x), cause)

        finite_input = bool(np.all(np.isfinite(x)))
        last_error: Optional[Exception] = None
        for attempt in self._fallback_order(preferred):
            try:
                values = operation(attempt)
                if finite_input and not np.all(np.isfinite(values)):
                    raise ArithmeticError(f"{attempt.name} produced non-finite samples")
            except Exception as exc:
                logger.warning("adaptive candidate %s failed: %s", attempt.name, exc)
                last_error = exc
                continue
            if attempt is preferred:
                reason = f"{cause} - using {attempt.name} padding"
            else:
                reason = f"{cause} - {preferred.name} failed, falling back to {attempt.name} padding"
            return AdaptivePaddingResult(values, attempt, reason, features)
        raise last_error

    # -------------------------------------------------------------------------
    # Padding
    # -------------------------------------------------------------------------

    def pad_with_details(self, signal, target_length: int) -> AdaptivePaddingResult:
        """
        Pad ``signal`` and report which strategy was used and why.

        Parameters
        ----------
        signal : array_like
            Non-empty 1-D signal
        target_length : int
            Desired length, at least ``len(signal)``

        Returns
        -------
        result : AdaptivePaddingResult
        """
        x = as_signal(signal)
        target_length = check_target_length(len(x), target_length)
        return self._run(x, lambda s: s.pad(x, target_length))

    def pad(self, signal, target_length: int) -> np.ndarray:
        return self.pad_with_details(signal, target_length).padded_signal.copy()

    def _extend_right(self, x, count):
        return self._run(x, lambda s: s.extend(x, count, PaddingMode.RIGHT)).padded_signal

    def _extend_left(self, x, count):
        return self._run(x, lambda s: s.extend(x, count, PaddingMode.LEFT)).padded_signal
