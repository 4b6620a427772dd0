"""Exception types for bounded summation.

Raised by ``bounded_sum()``; callers that prefer inspecting a result use
``try_bounded_sum()`` instead.
"""

from __future__ import annotations

from .bounds import IntBounds


class SumRangeError(OverflowError):
    """Raised when a running sum leaves the range of the narrow result type."""

    kind = ""

    def __init__(self, *, index: int, partial_sum: int, bounds: IntBounds) -> None:
        self.index = index
        self.partial_sum = partial_sum
        self.bounds = bounds
        super().__init__(
            f"sum {self.kind}ed {bounds.name} at index {index}: "
            f"partial sum {partial_sum} not in [{bounds.min_value}, {bounds.max_value}]"
        )


class SumOverflowError(SumRangeError):
    """Running sum exceeded the maximum representable value."""

    kind = "overflow"


class SumUnderflowError(SumRangeError):
    """Running sum fell below the minimum representable value."""

    kind = "underflow"
