"""exactmath - exact numbers and generic linear algebra.

Subpackages:
- exactmath.number: Fraction, complex numbers and their element rings
- exactmath.sqrt: precision contexts and Heron's square root
- exactmath.linear: vectors, matrices, builders and factories
- exactmath.core: settings, errors and logging
"""

import logging

from .core.errors import (
    DimensionMismatchError,
    ExactMathError,
    IncompleteConstructionError,
    InvalidArgumentError,
    InvalidStateError,
    MatrixNotSquareError,
    NotInvertibleError,
    NullArgumentError,
    OutOfRangeError,
)
from .linear import (
    DecimalMatrix,
    DecimalVector,
    FractionMatrix,
    FractionVector,
    IntegerMatrix,
    IntegerVector,
    RealComplexNumberMatrix,
    RealComplexNumberVector,
    SimpleComplexNumberMatrix,
    SimpleComplexNumberVector,
    build_identity_matrix,
    build_zero_matrix,
    build_zero_vector,
)
from .number import Fraction, PolarForm, RealComplexNumber, SimpleComplexNumber
from .sqrt import PrecisionContext, SquareRootContext, sqrt

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Fraction",
    "SimpleComplexNumber",
    "RealComplexNumber",
    "PolarForm",
    "PrecisionContext",
    "SquareRootContext",
    "sqrt",
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
    "ExactMathError",
    "NullArgumentError",
    "InvalidArgumentError",
    "DimensionMismatchError",
    "OutOfRangeError",
    "InvalidStateError",
    "MatrixNotSquareError",
    "NotInvertibleError",
    "IncompleteConstructionError",
]
