"""Rational number value type."""

from .arrays import as_rational_array, reduce_all, zeros, zeros_like
from .rational import InvalidArgument, Rational, rationalize

__all__ = [
    "Rational",
    "InvalidArgument",
    "rationalize",
    "as_rational_array",
    "zeros",
    "zeros_like",
    "reduce_all",
]
