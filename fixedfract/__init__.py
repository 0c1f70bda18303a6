"""Fixed-width unsigned fraction arithmetic."""

from .fraction import (
    FRACTION_TYPES,
    SUPPORTED_WIDTHS,
    FixedFraction,
    Fraction8,
    Fraction16,
    Fraction32,
    Fraction64,
    fraction_type,
)
from .utils import gcd, gcd_u8, gcd_u16, gcd_u32, gcd_u64

__all__ = [
    "FixedFraction",
    "Fraction8",
    "Fraction16",
    "Fraction32",
    "Fraction64",
    "FRACTION_TYPES",
    "SUPPORTED_WIDTHS",
    "fraction_type",
    "gcd",
    "gcd_u8",
    "gcd_u16",
    "gcd_u32",
    "gcd_u64",
]
