"""
Error types for wavepad.

InvalidArgumentError is what callers see for bad signals, lengths and
configuration. NumericDegeneracyError is raised inside the extrapolation
fits and recovered there; it does not escape ``pad``.
"""


class PaddingError(Exception):
    """Base class for all wavepad errors."""


class InvalidArgumentError(PaddingError, ValueError):
    """Invalid signal, length or strategy configuration."""


class NumericDegeneracyError(PaddingError, ArithmeticError):
    """Singular or ill-conditioned fit, or a non-finite fitted result."""
