"""
wavepad - Adaptive Signal Padding for Wavelet Transforms

Boundary extension of finite 1-D signals to the length a wavelet transform
needs, with an adaptive selector that picks the extension from the signal's
features (periodicity, trend, smoothness, noise).

Basic usage:
    >>> from wavepad import SymmetricPaddingStrategy
    >>> padding = SymmetricPaddingStrategy()
    >>> padded = padding.pad(signal, 128)
    >>> original = padding.trim(padded, len(signal))

Adaptive selection:
    >>> from wavepad import AdaptivePaddingStrategy
    >>> result = AdaptivePaddingStrategy().pad_with_details(signal, 128)
    >>> print(result.selected_strategy.name, result.selection_reason)

Different strategies per edge:
    >>> from wavepad import CompositePaddingStrategy, ConstantPaddingStrategy, LinearExtrapolationStrategy
    >>> composite = CompositePaddingStrategy(ConstantPaddingStrategy(), LinearExtrapolationStrategy(2))

Signal features:
    >>> from wavepad import analyze_signal, periodicity
    >>> features = analyze_signal(signal)
"""

__version__ = "0.1.0"

from .exceptions import (
    PaddingError,
    InvalidArgumentError,
    NumericDegeneracyError,
)

from .base import (
    PaddingMode,
    PaddingStrategy,
)

from .baseline import (
    ZeroPaddingStrategy,
    SymmetricPaddingStrategy,
    ReflectPaddingStrategy,
    PeriodicPaddingStrategy,
)

from .extrapolation import (
    ConstantPaddingStrategy,
    LinearExtrapolationStrategy,
    PolynomialExtrapolationStrategy,
    AntisymmetricPaddingStrategy,
    SymmetryType,
)

from .statistical import (
    StatisticalPaddingStrategy,
    StatMethod,
)

from .analysis import (
    SignalFeatures,
    analyze_signal,
    autocorrelation,
    periodicity,
)

from .adaptive import (
    AdaptivePaddingStrategy,
    AdaptivePaddingResult,
    SelectionThresholds,
)

from .composite import CompositePaddingStrategy

from .registry import (
    get_strategy,
    available_strategies,
)

__all__ = [
    # Errors
    "PaddingError",
    "InvalidArgumentError",
    "NumericDegeneracyError",
    # Contract
    "PaddingMode",
    "PaddingStrategy",
    # Baseline
    "ZeroPaddingStrategy",
    "SymmetricPaddingStrategy",
    "ReflectPaddingStrategy",
    "PeriodicPaddingStrategy",
    # Extrapolation
    "ConstantPaddingStrategy",
    "LinearExtrapolationStrategy",
    "PolynomialExtrapolationStrategy",
    "AntisymmetricPaddingStrategy",
    "SymmetryType",
    # Statistical
    "StatisticalPaddingStrategy",
    "StatMethod",
    # Analysis
    "SignalFeatures",
    "analyze_signal",
    "autocorrelation",
    "periodicity",
    # Adaptive / composite
    "AdaptivePaddingStrategy",
    "AdaptivePaddingResult",
    "SelectionThresholds",
    "CompositePaddingStrategy",
    # Registry
    "get_strategy",
    "available_strategies",
]
