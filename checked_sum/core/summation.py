"""
Bounded integer summation.

Sums a sequence of fixed-width integers (int32 by default) and fails instead of
wrapping when a running sum leaves the representable range.

Semantics:
- `None` and empty inputs sum to 0.
- The range is checked after *every* addition, so a sequence whose running sum
  leaves the range and later comes back (e.g. [MAX, MAX, -MAX]) is still rejected
  at the first offending prefix.
- The accumulator is a Python int, so the check itself can never overflow.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..kernels.python.bounded_sum_v1 import OVERFLOW, BoundedSumResult
from ..kernels.python.bounded_sum_v1 import sum_checked as _kernel_sum_checked_v1
from .bounds import INT32, IntBounds
from .errors import SumOverflowError, SumRangeError, SumUnderflowError

logger = logging.getLogger(__name__)


def try_bounded_sum(values: Optional[Iterable[int]], *, bounds: IntBounds = INT32) -> BoundedSumResult:
    """
    Non-raising variant: returns a `BoundedSumResult`.

    On success `ok` is True and `value` holds the sum. On a range violation `ok` is
    False, `code` is "overflow" or "underflow", and `index`/`partial_sum` locate the
    first out-of-range prefix.

    Raises TypeError/ValueError for malformed inputs (non-int elements, or elements
    outside `bounds`).
    """
    if not isinstance(bounds, IntBounds):
        raise TypeError("bounds must be an IntBounds")
    res = _kernel_sum_checked_v1(values=values, min_value=bounds.min_value, max_value=bounds.max_value)
    if not res.ok:
        logger.debug(
            "bounded sum rejected: %s %s at index %s (partial sum %s)",
            bounds.name,
            res.code,
            res.index,
            res.partial_sum,
        )
    return res


def bounded_sum(values: Optional[Iterable[int]], *, bounds: IntBounds = INT32) -> int:
    """
    Sum `values`, raising when a running sum leaves `bounds`.

    Args:
        values: Integers to add, in order. `None` is treated as empty.
        bounds: Range of the narrow result type (int32 by default).

    Returns:
        The exact sum, guaranteed to lie within `bounds`.

    Raises:
        SumOverflowError: A prefix sum exceeded `bounds.max_value`.
        SumUnderflowError: A prefix sum fell below `bounds.min_value`.
        TypeError: `values` is not iterable or holds a non-int.
        ValueError: An element is itself outside `bounds`.
    """
    res = try_bounded_sum(values, bounds=bounds)
    if res.ok:
        if res.value is None:
            raise AssertionError("internal error: accepted result without a value")
        return res.value

    if res.index is None or res.partial_sum is None:
        raise AssertionError("internal error: rejected result without a location")
    err_cls: type[SumRangeError] = SumOverflowError if res.code == OVERFLOW else SumUnderflowError
    raise err_cls(index=res.index, partial_sum=res.partial_sum, bounds=bounds)
