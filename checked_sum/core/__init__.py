"""
Core summation API
"""

from .summation import bounded_sum, try_bounded_sum
from .bounds import INT32, IntBounds, bounds_for, known_domains
from .errors import SumOverflowError, SumRangeError, SumUnderflowError

__all__ = [
    "bounded_sum",
    "try_bounded_sum",
    "INT32",
    "IntBounds",
    "bounds_for",
    "known_domains",
    "SumRangeError",
    "SumOverflowError",
    "SumUnderflowError",
]
