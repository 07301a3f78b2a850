"""Generic vectors and matrices over exact and approximate rings."""

from .builder import MatrixBuilder, VectorBuilder
from .complex import (
    RealComplexNumberMatrix,
    RealComplexNumberVector,
    SimpleComplexNumberMatrix,
    SimpleComplexNumberVector,
)
from .decimals import DecimalMatrix, DecimalVector
from .factories import build_identity_matrix, build_zero_matrix, build_zero_vector
from .fraction import FractionMatrix, FractionVector
from .integer import IntegerMatrix, IntegerVector
from .matrix import AbstractContextMatrix, AbstractMatrix, Cell
from .vector import AbstractContextVector, AbstractVector

__all__ = [
    "AbstractVector",
    "AbstractContextVector",
    "AbstractMatrix",
    "AbstractContextMatrix",
    "Cell",
    "VectorBuilder",
    "MatrixBuilder",
    "IntegerVector",
    "IntegerMatrix",
    "DecimalVector",
    "DecimalMatrix",
    "FractionVector",
    "FractionMatrix",
    "SimpleComplexNumberVector",
    "SimpleComplexNumberMatrix",
    "RealComplexNumberVector",
    "RealComplexNumberMatrix",
    "build_zero_vector",
    "build_zero_matrix",
    "build_identity_matrix",
]
