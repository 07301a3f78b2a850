"""Vectors and matrices of Decimals."""

from __future__ import annotations

from ..number.ring import DECIMAL_RING
from .matrix import AbstractContextMatrix
from .vector import AbstractContextVector


class DecimalVector(AbstractContextVector):
    """
    Vector of Decimals.

    ints are accepted and promoted. Equality compares numerically, so
    ``Decimal("1.0")`` and ``Decimal("1")`` are the same element.
    """

    ring = DECIMAL_RING

    @classmethod
    def matrix_class(cls) -> type:
        return DecimalMatrix


class DecimalMatrix(AbstractContextMatrix):
    ring = DECIMAL_RING

    @classmethod
    def vector_class(cls) -> type:
        return DecimalVector
