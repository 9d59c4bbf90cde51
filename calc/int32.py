"""
Fixed-width signed 32-bit arithmetic.

Python integers are unbounded, so every result is reduced back into
[INT32_MIN, INT32_MAX] with two's-complement wraparound.
"""

from __future__ import annotations

import operator
from typing import Any

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1

_MASK = (1 << 32) - 1
_SIGN = 1 << 31


def wrap(value: int) -> int:
    """Reduce an arbitrary integer to the signed 32-bit range."""
    v = value & _MASK
    return v - (1 << 32) if v & _SIGN else v


def coerce(value: Any) -> int:
    """
    Convert an operand to a 32-bit int.

    Accepts anything implementing __index__ (int, bool, numpy integers);
    floats and strings raise TypeError. Out-of-range values are narrowed,
    not rejected.
    """
    return wrap(operator.index(value))


def add(a: int, b: int) -> int:
    return wrap(a + b)


def mul(a: int, b: int) -> int:
    return wrap(a * b)


__all__ = ["INT32_MIN", "INT32_MAX", "wrap", "coerce", "add", "mul"]
