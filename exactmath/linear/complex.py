"""
Vectors and matrices of complex numbers.

Norms are Decimals computed through square roots of the squared absolute
values; pass a SquareRootContext to control them.
"""

from __future__ import annotations

from ..number.ring import REAL_COMPLEX_RING, SIMPLE_COMPLEX_RING
from .matrix import AbstractContextMatrix, AbstractMatrix
from .vector import AbstractContextVector, AbstractVector


class SimpleComplexNumberVector(AbstractVector):
    """Vector of SimpleComplexNumbers; euclidean_norm_pow2 is an int."""

    ring = SIMPLE_COMPLEX_RING

    @classmethod
    def matrix_class(cls) -> type:
        return SimpleComplexNumberMatrix


class SimpleComplexNumberMatrix(AbstractMatrix):
    """Matrix of SimpleComplexNumbers; invertible means determinant 1, -1, i or -i."""

    ring = SIMPLE_COMPLEX_RING

    @classmethod
    def vector_class(cls) -> type:
        return SimpleComplexNumberVector


class RealComplexNumberVector(AbstractContextVector):
    ring = REAL_COMPLEX_RING

    @classmethod
    def matrix_class(cls) -> type:
        return RealComplexNumberMatrix


class RealComplexNumberMatrix(AbstractContextMatrix):
    ring = REAL_COMPLEX_RING

    @classmethod
    def vector_class(cls) -> type:
        return RealComplexNumberVector
