"""Vectors and matrices of Fractions."""

from __future__ import annotations

from ..number.ring import FRACTION_RING
from .matrix import AbstractMatrix
from .vector import AbstractVector


class FractionVector(AbstractVector):
    ring = FRACTION_RING

    @classmethod
    def matrix_class(cls) -> type:
        return FractionMatrix


class FractionMatrix(AbstractMatrix):
    """Matrix of Fractions with exact determinants."""

    ring = FRACTION_RING

    @classmethod
    def vector_class(cls) -> type:
        return FractionVector
