"""Rational value type with explicit, in-place reduction."""
from __future__ import annotations

import logging
import math
import numbers
import operator
from fractions import Fraction
from typing import Any, Tuple, Union

import numpy as np

logger = logging.getLogger(__name__)

RationalLike = Union["Rational", Fraction, numbers.Integral]

_FLOAT_PRESENTATION = frozenset("eEfFgGn%")


class InvalidArgument(ValueError):
    """Raised when a :class:`Rational` is built with a zero denominator."""


def _ensure_int(value: Any, *, name: str) -> int:
    """Convert *value* to ``int`` when it represents an integer."""
    if isinstance(value, numbers.Integral):
        return int(value)
    raise TypeError(f"{name} must be an integer, got {type(value)!r}")


def _lowest_terms(num: int, den: int) -> Tuple[int, int]:
    # Sign lives in the numerator; math.gcd works on magnitudes.
    if den < 0:
        num, den = -num, -den
    gcd = math.gcd(num, den)
    return num // gcd, den // gcd


class Rational:
    """A signed rational number ``numerator/denominator``.

    The stored pair is kept exactly as given. Nothing is simplified until
    :meth:`reduce` is called, but equality is by value, so ``Rational(1, 2)``
    and ``Rational(2, 4)`` compare equal.
    """

    __slots__ = ("_numerator", "_denominator")
    __array_priority__ = 1000.0  # Prefer Rational semantics in NumPy expressions.

    def __init__(
        self,
        numerator: Union[int, numbers.Integral],
        denominator: Union[int, numbers.Integral] = 1,
    ) -> None:
        num = _ensure_int(numerator, name="numerator")
        den = _ensure_int(denominator, name="denominator")
        if den == 0:
            logger.debug("rejecting Rational(%d, 0)", num)
            raise InvalidArgument("denominator must be non-zero")

        self._numerator = num
        self._denominator = den

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def from_fraction(cls, value: Fraction) -> "Rational":
        """Create a :class:`Rational` from :class:`fractions.Fraction`."""
        return cls(value.numerator, value.denominator)

    @classmethod
    def rationalize(cls, value: RationalLike) -> "Rational":
        """Coerce an exact numeric value into :class:`Rational`."""
        if isinstance(value, Rational):
            return value
        if isinstance(value, Fraction):
            return cls.from_fraction(value)
        if isinstance(value, numbers.Integral):
            return cls(int(value), 1)
        raise TypeError(f"Cannot convert {type(value)!r} to Rational")

    # ------------------------------------------------------------------
    # Properties and helpers
    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def as_fraction(self) -> Fraction:
        """Return a :class:`Fraction` with the same value."""
        return Fraction(self._numerator, self._denominator)

    # ------------------------------------------------------------------
    # Simplification
    def reduce(self) -> None:
        """Rewrite this value in lowest terms, in place.

        The denominator is made positive, so ``Rational(3, -6)`` becomes
        ``-1/2`` and any zero becomes ``0/1``.
        """
        num, den = _lowest_terms(self._numerator, self._denominator)
        if (num, den) != (self._numerator, self._denominator):
            logger.debug(
                "reduced %d/%d to %d/%d", self._numerator, self._denominator, num, den
            )
        self._numerator = num
        self._denominator = den

    def reduced(self) -> "Rational":
        """Return a reduced copy, leaving this value untouched."""
        return Rational(*_lowest_terms(self._numerator, self._denominator))

    # ------------------------------------------------------------------
    # Arithmetic
    def add(self, other: RationalLike) -> "Rational":
        """Return ``self + other`` without reducing the result."""
        other_rat = Rational.rationalize(other)
        return Rational(
            self._numerator * other_rat._denominator
            + self._denominator * other_rat._numerator,
            self._denominator * other_rat._denominator,
        )

    def multiply(self, other: RationalLike) -> "Rational":
        """Return ``self * other`` without reducing the result."""
        other_rat = Rational.rationalize(other)
        return Rational(
            self._numerator * other_rat._numerator,
            self._denominator * other_rat._denominator,
        )

    def _binary_operation(self, other: Any, op):
        if isinstance(other, np.ndarray):
            vectorised = np.vectorize(lambda x: op(self, x), otypes=[object])
            return vectorised(other)
        try:
            return op(self, other)
        except TypeError:
            return NotImplemented

    def __add__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational.add)

    def __radd__(self, other: Any) -> Any:
        return self.__add__(other)

    def __mul__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational.multiply)

    def __rmul__(self, other: Any) -> Any:
        return self.__mul__(other)

    # ------------------------------------------------------------------
    # Equality
    def equals(self, other: Any) -> bool:
        """Value equality by cross-multiplication.

        ``None`` and values that are not :class:`Rational` are never equal.
        """
        if other is self:
            return True
        if not isinstance(other, Rational):
            return False
        return (
            self._numerator * other._denominator
            == self._denominator * other._numerator
        )

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(_lowest_terms(self._numerator, self._denominator))

    # ------------------------------------------------------------------
    # Numeric protocol
    def __float__(self) -> float:
        return self._numerator / self._denominator

    def __bool__(self) -> bool:
        return self._numerator != 0

    # ------------------------------------------------------------------
    # Representation
    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"

    def __str__(self) -> str:
        return f"{self._numerator}/{self._denominator}"

    def __format__(self, format_spec: str) -> str:
        """Float presentation types (``e``, ``f``, ``g``, ``%`` ...) format the
        value as a float; anything else pads or aligns the ``n/d`` text."""
        if format_spec in ("", "r", "R"):
            return str(self)
        if format_spec[-1] in _FLOAT_PRESENTATION:
            return format(float(self), format_spec)
        return format(str(self), format_spec)

    # ------------------------------------------------------------------
    # NumPy interoperability
    _UFUNC_DISPATCH = {
        np.add: operator.add,
        np.multiply: operator.mul,
    }

    def __array_ufunc__(self, ufunc, method, *inputs, **kwargs):
        if method != "__call__":
            return NotImplemented
        if kwargs.get("out") is not None:
            raise NotImplementedError("`out` argument is not supported for Rational ufuncs")
        op = self._UFUNC_DISPATCH.get(ufunc)
        if op is None:
            return NotImplemented

        coerced = []
        has_array = False
        for value in inputs:
            if isinstance(value, np.ndarray):
                vectorised = np.vectorize(Rational.rationalize, otypes=[object])
                coerced.append(vectorised(value))
                has_array = True
            else:
                coerced.append(Rational.rationalize(value))
        if has_array:
            vectorised = np.vectorize(lambda *args: op(*args), otypes=[object])
            return vectorised(*coerced)
        return op(*coerced)


def rationalize(value: RationalLike) -> Rational:
    """Public helper to convert *value* into :class:`Rational`."""

    return Rational.rationalize(value)


__all__ = ["Rational", "InvalidArgument", "rationalize"]
