"""Exact numeric element types and their rings."""

from .complex import AbstractComplexNumber, PolarForm, RealComplexNumber, SimpleComplexNumber
from .fraction import Fraction, reduce_fraction
from .ring import (
    DECIMAL_RING,
    FRACTION_RING,
    INTEGER_RING,
    REAL_COMPLEX_RING,
    SIMPLE_COMPLEX_RING,
    ElementRing,
)
from .value import MathNumber

__all__ = [
    "MathNumber",
    "Fraction",
    "reduce_fraction",
    "AbstractComplexNumber",
    "SimpleComplexNumber",
    "RealComplexNumber",
    "PolarForm",
    "ElementRing",
    "INTEGER_RING",
    "DECIMAL_RING",
    "FRACTION_RING",
    "SIMPLE_COMPLEX_RING",
    "REAL_COMPLEX_RING",
]
