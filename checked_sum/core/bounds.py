"""
Fixed-width integer domains for bounded summation.

`IntBounds` describes the narrow result type. Named widths are declared in the
kernel spec `checked_sum/kernels/specs/bounded_sum_v1.yaml`, which is loaded once
and cached.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IntBounds:
    bits: int
    signed: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.bits, int) or isinstance(self.bits, bool):
            raise TypeError("bits must be an int")
        if not isinstance(self.signed, bool):
            raise TypeError("signed must be a bool")
        if self.bits <= 0:
            raise ValueError(f"bits must be positive: {self.bits}")

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    @property
    def name(self) -> str:
        return f"{'int' if self.signed else 'uint'}{self.bits}"

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value


INT32 = IntBounds(bits=32, signed=True)


def _spec_path() -> Path:
    # checked_sum/core/bounds.py -> checked_sum/ -> kernels/specs/bounded_sum_v1.yaml
    return Path(__file__).resolve().parents[1] / "kernels" / "specs" / "bounded_sum_v1.yaml"


def parse_bounds_table(obj: Any) -> Dict[str, IntBounds]:
    """
    Build the name -> IntBounds table from a parsed kernel spec.

    Raises TypeError/ValueError on a malformed spec.
    """
    if not isinstance(obj, Mapping):
        raise TypeError("kernel spec must be a mapping")
    types = obj.get("types")
    if not isinstance(types, Mapping) or not types:
        raise ValueError("kernel spec must declare a non-empty 'types' mapping")

    table: Dict[str, IntBounds] = {}
    for name, entry in types.items():
        if not isinstance(name, str) or not name:
            raise TypeError("type names must be non-empty strings")
        if not isinstance(entry, Mapping):
            raise TypeError(f"types.{name} must be a mapping")
        if "bits" not in entry:
            raise ValueError(f"types.{name} is missing 'bits'")
        table[name] = IntBounds(bits=entry["bits"], signed=entry.get("signed", True))

    default = obj.get("default")
    if default is not None and default not in table:
        raise ValueError(f"default type {default!r} is not declared")
    return table


@lru_cache(maxsize=1)
def _bounds_table() -> Dict[str, IntBounds]:
    path = _spec_path()
    obj = yaml.safe_load(path.read_text(encoding="utf-8"))
    table = parse_bounds_table(obj)
    logger.debug("loaded %d integer domains from %s", len(table), path)
    return table


def bounds_for(name: str) -> IntBounds:
    """Look up a named domain (e.g. ``"int32"``, ``"uint8"``). Raises KeyError if unknown."""
    table = _bounds_table()
    try:
        return table[name]
    except KeyError:
        raise KeyError(f"unknown integer domain: {name!r} (known: {', '.join(sorted(table))})") from None


def known_domains() -> list[str]:
    return sorted(_bounds_table())
