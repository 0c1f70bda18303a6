"""Fixed-width unsigned fractions backed by NumPy integer widths."""
from __future__ import annotations

import numbers
from fractions import Fraction
from typing import Any, Callable, Dict, Optional, Type

import numpy as np

from .utils import ensure_uint, gcd, wrap

SUPPORTED_WIDTHS = (8, 16, 32, 64)


class FixedFraction:
    """Numerator/denominator pair stored in one unsigned integer width.

    Values are kept exactly as given: nothing is reduced on construction and
    every sum, difference and product wraps modulo ``2**bits``. Equality is
    structural, so ``Fraction8(1, 2) != Fraction8(2, 4)``; use
    :meth:`value_equals` to compare the rational values instead.

    Subclasses set ``dtype`` to a NumPy unsigned integer type and
    ``float_dtype`` to the NumPy float type :meth:`to_float` returns.
    """

    __slots__ = ("_numerator", "_denominator")

    dtype: Optional[Type[np.unsignedinteger]] = None
    float_dtype: Type[np.floating] = np.float64

    def __init__(self, numerator: Any = 0, denominator: Any = 1) -> None:
        if self.dtype is None:
            raise TypeError(
                f"{type(self).__name__} has no integer width; use Fraction8, "
                "Fraction16, Fraction32 or Fraction64"
            )
        self._numerator = ensure_uint(numerator, self.dtype, name="numerator")
        self._denominator = ensure_uint(denominator, self.dtype, name="denominator")

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def from_integer(cls, value: Any) -> "FixedFraction":
        """Promote an integer to ``value/1``."""
        return cls(value, 1)

    @classmethod
    def _from_wrapped(cls, numerator: int, denominator: int, operation: str):
        return cls(
            wrap(numerator, cls.dtype, operation=operation),
            wrap(denominator, cls.dtype, operation=operation),
        )

    # ------------------------------------------------------------------
    # Properties and helpers
    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    @classmethod
    def bits(cls) -> int:
        return np.iinfo(cls.dtype).bits

    def as_fraction(self) -> Fraction:
        """Return the exact :class:`fractions.Fraction` value.

        Raises :class:`ZeroDivisionError` when the denominator is zero.
        """
        return Fraction(self._numerator, self._denominator)

    def value_equals(self, other: Any) -> bool:
        """Compare rational values by cross multiplication, without wrapping."""
        other_frac = self._coerce_operand(other)
        if other_frac is None:
            raise TypeError(
                f"cannot compare {type(self).__name__} with {type(other).__name__}"
            )
        return (
            self._numerator * other_frac._denominator
            == other_frac._numerator * self._denominator
        )

    # ------------------------------------------------------------------
    # Fraction operations
    def to_float(self) -> np.floating:
        """Return ``numerator / denominator`` as ``float_dtype``.

        A zero denominator gives ``inf`` (or ``nan`` for ``0/0``) following
        IEEE 754; no warning is emitted.
        """
        with np.errstate(divide="ignore", invalid="ignore"):
            return self.float_dtype(self._numerator) / self.float_dtype(self._denominator)

    def invert(self) -> "FixedFraction":
        """Swap numerator and denominator. A zero numerator is not rejected."""
        return type(self)(self._denominator, self._numerator)

    def expand(self, factor: Any) -> "FixedFraction":
        """Multiply numerator and denominator by *factor*, wrapping on overflow."""
        factor = ensure_uint(factor, self.dtype, name="factor")
        return self._from_wrapped(
            self._numerator * factor, self._denominator * factor, "expand"
        )

    def reduce(self) -> "FixedFraction":
        """Divide numerator and denominator by their greatest common divisor.

        ``0/0`` has no divisor to reduce by and raises :class:`ZeroDivisionError`.
        """
        divisor = gcd(self._numerator, self._denominator, dtype=self.dtype)
        if divisor == 0:
            raise ZeroDivisionError(f"cannot reduce {self!r}: gcd is zero")
        return type(self)(self._numerator // divisor, self._denominator // divisor)

    def _align(self, rhs: "FixedFraction"):
        if self._denominator == rhs._denominator:
            return self, rhs
        return self.expand(rhs._denominator), rhs.expand(self._denominator)

    def add(self, rhs: "FixedFraction") -> "FixedFraction":
        """Sum over the product of the denominators when they differ."""
        lhs, rhs = self._align(self._require_same_width(rhs, "add"))
        return self._from_wrapped(
            lhs._numerator + rhs._numerator, lhs._denominator, "add"
        )

    def subtract(self, rhs: "FixedFraction") -> "FixedFraction":
        lhs, rhs = self._align(self._require_same_width(rhs, "subtract"))
        return self._from_wrapped(
            lhs._numerator - rhs._numerator, lhs._denominator, "subtract"
        )

    def multiply(self, rhs: "FixedFraction") -> "FixedFraction":
        rhs = self._require_same_width(rhs, "multiply")
        return self._from_wrapped(
            self._numerator * rhs._numerator,
            self._denominator * rhs._denominator,
            "multiply",
        )

    def divide(self, rhs: "FixedFraction") -> "FixedFraction":
        return self.multiply(self._require_same_width(rhs, "divide").invert())

    # ------------------------------------------------------------------
    # Numeric protocol
    def __float__(self) -> float:
        return float(self.to_float())

    # ------------------------------------------------------------------
    # Representation
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._numerator}, {self._denominator})"

    def __str__(self) -> str:
        return f"{self._numerator}/{self._denominator}"

    # ------------------------------------------------------------------
    # Internal helpers
    def _coerce_operand(self, value: Any) -> Optional["FixedFraction"]:
        if type(value) is type(self):
            return value
        if isinstance(value, FixedFraction):
            return None
        if isinstance(value, numbers.Integral):
            return self.from_integer(value)
        return None

    def _require_same_width(self, value: Any, operation: str) -> "FixedFraction":
        if type(value) is not type(self):
            raise TypeError(
                f"{operation} expects {type(self).__name__}, got {type(value).__name__}"
            )
        return value

    def _binary_operation(self, other: Any, op: Callable, *, reflected: bool = False):
        other_frac = self._coerce_operand(other)
        if other_frac is None:
            return NotImplemented
        if reflected:
            return op(other_frac, self)
        return op(self, other_frac)

    # ------------------------------------------------------------------
    # Arithmetic operators
    def __add__(self, other: Any) -> Any:
        return self._binary_operation(other, FixedFraction.add)

    def __radd__(self, other: Any) -> Any:
        return self._binary_operation(other, FixedFraction.add, reflected=True)

    def __sub__(self, other: Any) -> Any:
        return self._binary_operation(other, FixedFraction.subtract)

    def __rsub__(self, other: Any) -> Any:
        return self._binary_operation(other, FixedFraction.subtract, reflected=True)

    def __mul__(self, other: Any) -> Any:
        return self._binary_operation(other, FixedFraction.multiply)

    def __rmul__(self, other: Any) -> Any:
        return self._binary_operation(other, FixedFraction.multiply, reflected=True)

    def __truediv__(self, other: Any) -> Any:
        return self._binary_operation(other, FixedFraction.divide)

    def __rtruediv__(self, other: Any) -> Any:
        return self._binary_operation(other, FixedFraction.divide, reflected=True)

    # ------------------------------------------------------------------
    # Comparisons
    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (
            self._numerator == other._numerator
            and self._denominator == other._denominator
        )

    def __hash__(self) -> int:
        return hash((type(self), self._numerator, self._denominator))


class Fraction8(FixedFraction):
    __slots__ = ()
    dtype = np.uint8
    float_dtype = np.float32


class Fraction16(FixedFraction):
    __slots__ = ()
    dtype = np.uint16
    float_dtype = np.float32


class Fraction32(FixedFraction):
    __slots__ = ()
    dtype = np.uint32
    float_dtype = np.float32


class Fraction64(FixedFraction):
    __slots__ = ()
    dtype = np.uint64
    float_dtype = np.float64


FRACTION_TYPES: Dict[int, Type[FixedFraction]] = {
    8: Fraction8,
    16: Fraction16,
    32: Fraction32,
    64: Fraction64,
}


def fraction_type(bits: int) -> Type[FixedFraction]:
    """Return the fraction class for an integer width in bits."""
    try:
        return FRACTION_TYPES[bits]
    except KeyError:
        raise ValueError(
            f"unsupported width {bits!r}; expected one of {SUPPORTED_WIDTHS}"
        ) from None


__all__ = [
    "FixedFraction",
    "Fraction8",
    "Fraction16",
    "Fraction32",
    "Fraction64",
    "FRACTION_TYPES",
    "SUPPORTED_WIDTHS",
    "fraction_type",
]
