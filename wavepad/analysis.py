"""
Signal Feature Analysis

Extracts the features the adaptive selector decides on.

Periodicity:
    The signal is scaled into [-1, 1], optionally detrended (linear fit
    removed), and its normalised autocorrelation

        r[lag] = sum_i x[i] x[i + lag] / sum_i x[i]^2

    is scanned for the strongest local maximum among lags 2..min(n/2, 50).
    Short signals (n < FFT_LENGTH_THRESHOLD) compute r directly; longer
    ones use the Wiener-Khinchin route, r = IFFT(|FFT(x)|^2) on a
    zero-padded power-of-two grid, which is O(n log n). Both routes give
    the same r to within AUTOCORRELATION_TOLERANCE.

    A candidate period scoring above MIN_PEAK_SCORE is confirmed in the
    time domain by how little x[i] and x[i + period] differ.

Other features:
    trend_strength     R^2 of a whole-signal linear fit
    smoothness         exp(-second-difference energy / signal energy)
    noise_level        MAD-based noise sigma from second differences,
                       relative to the signal standard deviation
    stationarity       how little quarter-segment means and variances
                       drift relative to the signal spread
    has_discontinuity  an edge step much larger than the typical step
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .base import as_signal, fit_line, normalize
from .exceptions import InvalidArgumentError

MIN_PERIODICITY_LENGTH = 10
FFT_LENGTH_THRESHOLD = 32
MAX_PERIOD = 50
MIN_PEAK_SCORE = 0.3
RESIDUAL_VARIANCE_FLOOR = 1e-6
AUTOCORRELATION_TOLERANCE = 1e-9

# MAD -> sigma for a Gaussian; second differences of white noise have variance 6 sigma^2
_MAD_TO_SIGMA = 1.0 / 0.6745
_SECOND_DIFF_GAIN = np.sqrt(6.0)


@dataclass(frozen=True)
class SignalFeatures:
    """Features of one signal, each score in [0, 1]."""
    length: int
    periodicity: float
    trend_strength: float
    smoothness: float
    noise_level: float
    stationarity: float
    has_discontinuity: bool


# =============================================================================
# Autocorrelation
# =============================================================================

def _autocorrelation_direct(x: np.ndarray, max_lag: int) -> np.ndarray:
    n = len(x)
    return np.array([np.dot(x[:n - lag], x[lag:]) for lag in range(max_lag + 1)])


def _autocorrelation_fft(x: np.ndarray, max_lag: int) -> np.ndarray:
    n = len(x)
    size = 1 << (2 * n - 1).bit_length()
    spectrum = np.fft.rfft(x, size)
    power = spectrum.real ** 2 + spectrum.imag ** 2
    return np.fft.irfft(power, size)[:max_lag + 1]


def autocorrelation(x, max_lag: int, method: str = "fft") -> np.ndarray:
    """
    Normalised autocorrelation for lags 0..max_lag.

    Parameters
    ----------
    x : array_like
        Zero-mean (or detrended) signal
    max_lag : int
        Largest lag; clipped to len(x) - 1
    method : str
        "direct" (O(n * max_lag)) or "fft" (O(n log n))

    Returns
    -------
    r : ndarray, shape (max_lag + 1,)
        r[0] == 1 unless ``x`` is all zeros, in which case r is all zeros
    """
    x = as_signal(x)
    max_lag = max(0, min(int(max_lag), len(x) - 1))
    if method == "direct":
        acf = _autocorrelation_direct(x, max_lag)
    elif method == "fft":
        acf = _autocorrelation_fft(x, max_lag)
    else:
        raise InvalidArgumentError(f"Unknown autocorrelation method: {method!r}")
    energy = float(np.dot(x, x))
    if energy <= 0.0:
        return np.zeros(max_lag + 1)
    return acf / energy


# =============================================================================
# Periodicity
# =============================================================================

def _residual(x: np.ndarray, detrend: bool) -> np.ndarray:
    if detrend:
        intercept, slope = fit_line(x)
        return x - (intercept + slope * np.arange(len(x)))
    return x - x.mean()


def periodicity(signal, detrend: bool = True, method: Optional[str] = None) -> float:
    """
    Periodicity score of a signal.

    Parameters
    ----------
    signal : array_like
        1-D signal
    detrend : bool
        Remove the linear trend before scanning (otherwise only the mean)
    method : str, optional
        Force "direct" or "fft"; by default chosen from the length alone

    Returns
    -------
    score : float
        0 = no repeating structure, 1 = perfectly periodic. Signals shorter
        than MIN_PERIODICITY_LENGTH, constant signals and pure trends
        score 0.
    """
    x = as_signal(signal)
    n = len(x)
    if n < MIN_PERIODICITY_LENGTH:
        return 0.0
    if method is None:
        method = "direct" if n < FFT_LENGTH_THRESHOLD else "fft"

    x, _ = normalize(x)
    centered = x - x.mean()
    total_var = float(np.mean(centered ** 2))
    if total_var == 0.0:
        return 0.0
    residual = _residual(x, detrend)
    var = float(np.mean(residual ** 2))
    if var <= RESIDUAL_VARIANCE_FLOOR * total_var:
        return 0.0

    max_period = min(n // 2, MAX_PERIOD)
    acf = autocorrelation(residual, max_period + 1, method)

    best_score = 0.0
    best_lag = 0
    for lag in range(2, min(max_period, len(acf) - 2) + 1):
        if not (acf[lag] > acf[lag - 1] and acf[lag] > acf[lag + 1]):
            continue
        weight = min(1.0, (n // lag) / 3.0)
        score = max(float(acf[lag]), 0.0) * weight
        if score > best_score:
            best_score = score
            best_lag = lag

    if best_lag and best_score > MIN_PEAK_SCORE:
        diffs = residual[:-best_lag] - residual[best_lag:]
        validation = 1.0 - min(1.0, float(np.mean(diffs ** 2)) / (2.0 * var))
        best_score = max(best_score, validation)

    return float(np.clip(best_score, 0.0, 1.0))


# =============================================================================
# Other features
# =============================================================================

def trend_strength(signal) -> float:
    """R^2 of a least-squares line through the whole signal (0 if constant)."""
    x, _ = normalize(as_signal(signal))
    centered = x - x.mean()
    ss_total = float(np.dot(centered, centered))
    if ss_total == 0.0:
        return 0.0
    intercept, slope = fit_line(x)
    residual = x - (intercept + slope * np.arange(len(x)))
    return float(np.clip(1.0 - float(np.dot(residual, residual)) / ss_total, 0.0, 1.0))


def smoothness(signal) -> float:
    """exp(-E2 / E): E2 second-difference energy, E mean-removed energy."""
    x, _ = normalize(as_signal(signal))
    if len(x) < 3:
        return 1.0
    centered = x - x.mean()
    energy = float(np.dot(centered, centered))
    if energy == 0.0:
        return 1.0
    d2 = np.diff(x, 2)
    return float(np.exp(-float(np.dot(d2, d2)) / energy))


def noise_level(signal) -> float:
    """Robust noise sigma relative to the signal standard deviation."""
    x, _ = normalize(as_signal(signal))
    if len(x) < 4:
        return 0.0
    std = float(np.std(x))
    if std == 0.0:
        return 0.0
    d2 = np.diff(x, 2)
    mad = float(np.median(np.abs(d2 - np.median(d2))))
    sigma = mad * _MAD_TO_SIGMA / _SECOND_DIFF_GAIN
    return float(min(1.0, sigma / std))


def stationarity(signal, segments: int = 4) -> float:
    """
    How stable mean and variance are across ``segments`` equal pieces.

    Returns 0.5 (undecided) for signals shorter than 20 samples and 1 for
    constant signals.
    """
    x, _ = normalize(as_signal(signal))
    if len(x) < 20:
        return 0.5
    std = float(x.std())
    if std == 0.0:
        return 1.0
    pieces = np.array_split(x, segments)
    means = np.array([piece.mean() for piece in pieces])
    variances = np.array([piece.var() for piece in pieces])
    mean_variation = float(means.std()) / std
    mean_var = float(variances.mean())
    var_variation = float(variances.std()) / mean_var if mean_var > 1e-10 else 0.0
    return float(np.exp(-(mean_variation + var_variation)))


def has_discontinuity(signal) -> bool:
    """True if a step at either edge exceeds three times the mean step."""
    x, _ = normalize(as_signal(signal))
    if len(x) < 3:
        return False
    steps = np.abs(np.diff(x))
    typical = float(steps.mean())
    return bool(steps[0] > 3 * typical or steps[-1] > 3 * typical)


def analyze_signal(signal, detrend: bool = True) -> SignalFeatures:
    """
    Extract all selection features from a signal.

    Parameters
    ----------
    signal : array_like
        Non-empty 1-D signal
    detrend : bool
        Passed to :func:`periodicity`

    Returns
    -------
    features : SignalFeatures
    """
    x = as_signal(signal)
    return SignalFeatures(
        length=len(x),
        periodicity=periodicity(x, detrend=detrend),
        trend_strength=trend_strength(x),
        smoothness=smoothness(x),
        noise_level=noise_level(x),
        stationarity=stationarity(x),
        has_discontinuity=has_discontinuity(x),
    )
