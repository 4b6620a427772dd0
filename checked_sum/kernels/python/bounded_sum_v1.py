"""
Bounded summation kernel (v1 semantics).

This implements the semantics described in `checked_sum/kernels/specs/bounded_sum_v1.yaml`:
- Elements are added left to right into an unbounded accumulator.
- Every prefix sum is checked against [min_value, max_value], not only the total.
- The first out-of-range prefix rejects the whole sum (no wrapping, no clamping).

The kernel never raises on a range violation; it returns a typed result and
leaves the choice of exception to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional


OVERFLOW = "overflow"
UNDERFLOW = "underflow"


def _require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


@dataclass(frozen=True)
class BoundedSumResult:
    ok: bool
    value: Optional[int] = None
    code: Optional[str] = None
    index: Optional[int] = None
    partial_sum: Optional[int] = None


def sum_checked(
    *,
    values: Optional[Iterable[int]],
    min_value: int,
    max_value: int,
) -> BoundedSumResult:
    """
    Sum `values` with a range check after every addition.

    `None` and empty inputs sum to 0. On rejection, `index` is the position of the
    element whose addition left the range and `partial_sum` is that prefix sum.

    Raises TypeError/ValueError only for malformed inputs (non-int elements,
    elements that are not themselves in range, inverted bounds).
    """
    _require_int("min_value", min_value)
    _require_int("max_value", max_value)
    if min_value > 0 or max_value < 0:
        raise ValueError("bounds must contain 0")
    if min_value > max_value:
        raise ValueError("min_value must be <= max_value")

    if values is None:
        return BoundedSumResult(ok=True, value=0)
    try:
        it = iter(values)
    except TypeError:
        raise TypeError("values must be an iterable of ints or None") from None

    acc = 0
    for i, x in enumerate(it):
        _require_int(f"values[{i}]", x)
        if not (min_value <= x <= max_value):
            raise ValueError(f"values[{i}] out of range [{min_value}, {max_value}]: {x}")

        acc += x
        if acc > max_value:
            return BoundedSumResult(ok=False, code=OVERFLOW, index=i, partial_sum=acc)
        if acc < min_value:
            return BoundedSumResult(ok=False, code=UNDERFLOW, index=i, partial_sum=acc)

    if not (min_value <= acc <= max_value):
        raise AssertionError("internal error: accepted sum out of range")
    return BoundedSumResult(ok=True, value=acc)
