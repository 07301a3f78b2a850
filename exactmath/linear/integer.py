"""Vectors and matrices of ints."""

from __future__ import annotations

from ..number.ring import INTEGER_RING
from .matrix import AbstractMatrix
from .vector import AbstractVector


class IntegerVector(AbstractVector):
    """Vector of ints; norms are ints, the euclidean norm is a Decimal."""

    ring = INTEGER_RING

    @classmethod
    def matrix_class(cls) -> type:
        return IntegerMatrix


class IntegerMatrix(AbstractMatrix):
    """Matrix of ints; invertible means determinant 1 or -1."""

    ring = INTEGER_RING

    @classmethod
    def vector_class(cls) -> type:
        return IntegerVector
