"""`checked_sum`: overflow-checked summation of fixed-width integers.

Public API:
- `bounded_sum(values, *, bounds=INT32) -> int` (raises on range violation)
- `try_bounded_sum(values, *, bounds=INT32) -> BoundedSumResult`
- `bounds_for(name) -> IntBounds` (named domains such as "int32", "uint8")
"""

from .core import (
    INT32,
    IntBounds,
    SumOverflowError,
    SumRangeError,
    SumUnderflowError,
    bounded_sum,
    bounds_for,
    known_domains,
    try_bounded_sum,
)
from .kernels.python.bounded_sum_v1 import BoundedSumResult

__all__ = [
    "bounded_sum",
    "try_bounded_sum",
    "BoundedSumResult",
    "INT32",
    "IntBounds",
    "bounds_for",
    "known_domains",
    "SumRangeError",
    "SumOverflowError",
    "SumUnderflowError",
]
