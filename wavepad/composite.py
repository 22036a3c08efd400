"""
Composite Padding

Pads each side of a signal with a different strategy:

    [ left_strategy ... | original samples | ... right_strategy ]

``left_ratio`` of the total padding (rounded down) goes on the left, the
rest on the right.
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from .base import PaddingMode, PaddingStrategy
from .exceptions import InvalidArgumentError


def _check_ratio(ratio) -> float:
    if isinstance(ratio, bool) or not isinstance(ratio, (int, float)):
        raise InvalidArgumentError(f"left_ratio must be a number, got {ratio!r}")
    ratio = float(ratio)
    if not 0.0 <= ratio <= 1.0:
        raise InvalidArgumentError(f"Left ratio must be between 0.0 and 1.0, got {ratio}")
    return ratio


def _check_side(strategy, side: str) -> None:
    if strategy is None:
        raise InvalidArgumentError(f"{side} strategy cannot be None")
    if not isinstance(strategy, PaddingStrategy):
        raise InvalidArgumentError(
            f"{side} strategy must be a PaddingStrategy, got {strategy!r}"
        )


@dataclass(frozen=True)
class CompositePaddingStrategy(PaddingStrategy):
    """
    Combines two strategies, one per edge.

    Parameters
    ----------
    left_strategy : PaddingStrategy
        Produces the samples before the signal
    right_strategy : PaddingStrategy
        Produces the samples after the signal
    left_ratio : float
        Share of the padding placed on the left, 0.0-1.0

    Example
    -------
    >>> CompositePaddingStrategy(ZeroPaddingStrategy(), ConstantPaddingStrategy(), 0.25).pad([1, 2, 3, 4], 8)
    array([0., 1., 2., 3., 4., 4., 4., 4.])
    """
    left_strategy: PaddingStrategy
    right_strategy: PaddingStrategy
    left_ratio: float = 0.5

    def __post_init__(self):
        _check_side(self.left_strategy, "Left")
        _check_side(self.right_strategy, "Right")
        object.__setattr__(self, "left_ratio", _check_ratio(self.left_ratio))

    @property
    def name(self) -> str:
        return f"composite-{self.left_strategy.name}-{self.right_strategy.name}"

    @property
    def description(self) -> str:
        left = round(self.left_ratio * 100)
        return (
            f"Composite padding (left: {self.left_strategy.name} {left}%, "
            f"right: {self.right_strategy.name} {100 - left}%)"
        )

    def _padding_split(self, total: int) -> Tuple[int, int]:
        left = math.floor(total * self.left_ratio)
        return left, total - left

    def _extend_left(self, x, count):
        return self.left_strategy.extend(x, count, PaddingMode.LEFT)

    def _extend_right(self, x, count):
        return self.right_strategy.extend(x, count, PaddingMode.RIGHT)

    @classmethod
    def builder(cls) -> "CompositePaddingStrategy.Builder":
        return cls.Builder()

    class Builder:
        """Step-by-step construction of a :class:`CompositePaddingStrategy`."""

        def __init__(self):
            self._left: Optional[PaddingStrategy] = None
            self._right: Optional[PaddingStrategy] = None
            self._ratio = 0.5

        def left_strategy(self, strategy: PaddingStrategy) -> "CompositePaddingStrategy.Builder":
            self._left = strategy
            return self

        def right_strategy(self, strategy: PaddingStrategy) -> "CompositePaddingStrategy.Builder":
            self._right = strategy
            return self

        def left_ratio(self, ratio: float) -> "CompositePaddingStrategy.Builder":
            self._ratio = _check_ratio(ratio)
            return self

        def build(self) -> "CompositePaddingStrategy":
            if self._left is None or self._right is None:
                raise InvalidArgumentError("Both left and right strategies must be set")
            return CompositePaddingStrategy(self._left, self._right, self._ratio)
