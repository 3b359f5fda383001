"""NumPy object-array helpers for :class:`~ratnum.rational.Rational` values."""
from __future__ import annotations

from typing import Any

import numpy as np

from .rational import Rational


def as_rational_array(values: Any, *, copy: bool = True) -> np.ndarray:
    """Return a ``numpy.ndarray`` of :class:`Rational` values.

    ``values`` can be any (possibly nested) iterable of rational-like entries
    (``Rational``, ``Fraction`` or integers) or an existing NumPy array. With
    ``copy`` set, every element is a fresh :class:`Rational`, so reducing the
    result never touches the caller's values. When ``copy`` is ``False`` and
    ``values`` is already an object array holding only :class:`Rational`
    instances, that same array is returned.
    """

    if not isinstance(values, np.ndarray):
        if not isinstance(values, (list, tuple)):
            values = list(values)
        values = np.array(values, dtype=object)

    if not copy and values.dtype == object:
        if all(isinstance(item, Rational) for item in values.flat):
            return values

    convert = _copied if copy else Rational.rationalize
    vectorised = np.vectorize(convert, otypes=[object])
    return vectorised(values)


def _copied(item: Any) -> Rational:
    value = Rational.rationalize(item)
    if value is item:
        return Rational(value.numerator, value.denominator)
    return value


def zeros(length: int) -> np.ndarray:
    """Return a one-dimensional array of length ``length`` filled with ``0/1``."""

    if length < 0:
        raise ValueError("length must be non-negative")
    return as_rational_array([Rational(0, 1) for _ in range(length)])


def zeros_like(values: Any) -> np.ndarray:
    """Return a zero-filled array that matches the shape of ``values``."""

    shape = np.shape(values)
    flat = np.empty(int(np.prod(shape, dtype=int)), dtype=object)
    for index in range(flat.size):
        flat[index] = Rational(0, 1)
    return flat.reshape(shape)


def reduce_all(values: np.ndarray) -> np.ndarray:
    """Call :meth:`Rational.reduce` on every element of ``values`` in place."""

    for item in values.flat:
        item.reduce()
    return values


__all__ = ["as_rational_array", "zeros", "zeros_like", "reduce_all"]
