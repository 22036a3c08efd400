"""
Shared strategy instances, looked up by name.

Strategies are immutable, so one instance per name serves every caller.
"""

from types import MappingProxyType
from typing import List

from .adaptive import AdaptivePaddingStrategy
from .base import PaddingStrategy
from .baseline import (
    PeriodicPaddingStrategy,
    ReflectPaddingStrategy,
    SymmetricPaddingStrategy,
    ZeroPaddingStrategy,
)
from .exceptions import InvalidArgumentError
from .extrapolation import (
    AntisymmetricPaddingStrategy,
    ConstantPaddingStrategy,
    LinearExtrapolationStrategy,
    PolynomialExtrapolationStrategy,
)
from .statistical import StatisticalPaddingStrategy, StatMethod

STRATEGIES = MappingProxyType({
    "zero": ZeroPaddingStrategy(),
    "symmetric": SymmetricPaddingStrategy(),
    "reflect": ReflectPaddingStrategy(),
    "periodic": PeriodicPaddingStrategy(),
    "constant": ConstantPaddingStrategy(),
    "linear": LinearExtrapolationStrategy(),
    "polynomial": PolynomialExtrapolationStrategy(),
    "antisymmetric": AntisymmetricPaddingStrategy(),
    "mean": StatisticalPaddingStrategy(StatMethod.MEAN),
    "median": StatisticalPaddingStrategy(StatMethod.MEDIAN),
    "trend": StatisticalPaddingStrategy(StatMethod.TREND),
    "adaptive": AdaptivePaddingStrategy(),
})


def get_strategy(name: str) -> PaddingStrategy:
    """
    Shared instance registered under ``name``.

    Raises
    ------
    InvalidArgumentError
        Unknown name; the message lists the available ones
    """
    try:
        return STRATEGIES[name]
    except KeyError:
        raise InvalidArgumentError(
            f"Unknown padding strategy {name!r}; available: {', '.join(STRATEGIES)}"
        ) from None


def available_strategies() -> List[str]:
    return list(STRATEGIES)
