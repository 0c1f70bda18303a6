"""Integer helpers for fixed-width unsigned arithmetic."""
from __future__ import annotations

import functools
import logging
import numbers
from typing import Any, Type

import numpy as np

_LOGGER = logging.getLogger(__name__)

UIntType = Type[np.unsignedinteger]


def ensure_uint(value: Any, dtype: UIntType, *, name: str) -> int:
    """Convert *value* to ``int`` when it fits in *dtype*."""
    if not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be an integer, got {type(value)!r}")
    info = np.iinfo(dtype)
    result = int(value)
    if result < 0 or result > info.max:
        raise ValueError(
            f"{name} must be in [0, {info.max}] for {info.bits}-bit values, got {result}"
        )
    return result


def wrap(value: int, dtype: UIntType, *, operation: str = "arithmetic") -> int:
    """Reduce *value* modulo ``2**bits`` of *dtype*."""
    info = np.iinfo(dtype)
    wrapped = value & int(info.max)
    if wrapped != value:
        _LOGGER.debug(
            "%s wrapped %d to %d (%d-bit)", operation, value, wrapped, info.bits
        )
    return wrapped


def gcd(a: Any, b: Any, *, dtype: UIntType = np.uint64) -> int:
    """Greatest common divisor of two unsigned integers of width *dtype*.

    Iterative Euclid: ``gcd(a, 0) == a``, ``gcd(0, b) == b`` and
    ``gcd(0, 0) == 0``.
    """
    a = ensure_uint(a, dtype, name="a")
    b = ensure_uint(b, dtype, name="b")
    while b != 0:
        a, b = b, a % b
    return a


gcd_u8 = functools.partial(gcd, dtype=np.uint8)
gcd_u16 = functools.partial(gcd, dtype=np.uint16)
gcd_u32 = functools.partial(gcd, dtype=np.uint32)
gcd_u64 = functools.partial(gcd, dtype=np.uint64)


__all__ = [
    "ensure_uint",
    "wrap",
    "gcd",
    "gcd_u8",
    "gcd_u16",
    "gcd_u32",
    "gcd_u64",
]
