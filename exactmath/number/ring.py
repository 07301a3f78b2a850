"""
Element rings.

An ``ElementRing`` bundles everything the vector/matrix engine needs to
know about an element type: its identities, arithmetic, absolute value
(norm type N), squared absolute value (squared norm type P), units and the
square root of P values. Vectors and matrices hold one ring as a class
attribute instead of carrying the types as parameters.

Decimal arithmetic runs under ``arithmetic_scope``: exact for a ``None``
context, rounded to the PrecisionContext otherwise.
"""

from __future__ import annotations

import numbers
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, Iterable, Optional

from ..core.errors import InvalidArgumentError, require_not_none
from ..sqrt import PrecisionContext, SquareRootContext, arithmetic_scope, sqrt
from .complex import RealComplexNumber, SimpleComplexNumber
from .fraction import Fraction


def precision_of(context: Optional[SquareRootContext]) -> Optional[PrecisionContext]:
    """PrecisionContext carried by a SquareRootContext, if any."""
    return context.precision_context if context is not None else None


def _is_integral(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


class ElementRing(ABC):
    """
    Arithmetic capability set of one element type.

    Attributes:
        name: Display name used in error messages
        element_type: Python type of the elements
        zero: Additive identity
        one: Multiplicative identity
        norm_zero: Zero of the norm type N
        pow2_zero: Zero of the squared norm type P
    """

    name: str
    element_type: type
    zero: Any
    one: Any
    norm_zero: Any
    pow2_zero: Any

    @abstractmethod
    def _convert(self, value: Any) -> Any:
        """Return value as an element, or None if it has the wrong type."""

    def accepts(self, value: Any) -> bool:
        return value is not None and self._convert(value) is not None

    def coerce(self, value: Any, name: str = "element") -> Any:
        """
        Convert value to an element of this ring.

        Raises:
            NullArgumentError: if value is None
            InvalidArgumentError: if value has an unsupported type
        """
        require_not_none(value, name)
        converted = self._convert(value)
        if converted is None:
            raise InvalidArgumentError(name, f"an element of {self.name}", type(value).__name__)
        return converted

    # Element arithmetic

    def add(self, a: Any, b: Any, context: Optional[PrecisionContext] = None) -> Any:
        with arithmetic_scope(context):
            return a + b

    def subtract(self, a: Any, b: Any, context: Optional[PrecisionContext] = None) -> Any:
        with arithmetic_scope(context):
            return a - b

    def multiply(self, a: Any, b: Any, context: Optional[PrecisionContext] = None) -> Any:
        with arithmetic_scope(context):
            return a * b

    def negate(self, a: Any, context: Optional[PrecisionContext] = None) -> Any:
        with arithmetic_scope(context):
            return -a

    def sum(self, elements: Iterable[Any], context: Optional[PrecisionContext] = None) -> Any:
        """Left-to-right sum of elements, starting at zero."""
        total = self.zero
        for element in elements:
            total = self.add(total, element, context)
        return total

    # Norm support

    def abs(self, a: Any, context: Optional[SquareRootContext] = None) -> Any:
        """Absolute value of type N."""
        with arithmetic_scope(precision_of(context)):
            return abs(a)

    def abs_pow2(self, a: Any, context: Optional[PrecisionContext] = None) -> Any:
        """Squared absolute value of type P."""
        with arithmetic_scope(context):
            return a * a

    def add_values(self, a: Any, b: Any, context: Optional[PrecisionContext] = None) -> Any:
        """Add two N or P values."""
        with arithmetic_scope(context):
            return a + b

    def sqrt(self, value: Any, context: Optional[SquareRootContext] = None) -> Decimal:
        """Square root of a P value."""
        return sqrt(value, context)

    # Predicates

    def equal(self, a: Any, b: Any) -> bool:
        return a == b

    def is_zero(self, a: Any) -> bool:
        return self.equal(a, self.zero)

    def is_one(self, a: Any) -> bool:
        return self.equal(a, self.one)

    def is_unit(self, a: Any) -> bool:
        """True if a is invertible within the ring."""
        return self.equal(a, self.one) or self.equal(a, self.negate(self.one))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


class IntegerRing(ElementRing):
    name = "int"
    element_type = int
    zero = 0
    one = 1
    norm_zero = 0
    pow2_zero = 0

    def _convert(self, value: Any) -> Any:
        return int(value) if _is_integral(value) else None


class DecimalRing(ElementRing):
    name = "Decimal"
    element_type = Decimal
    zero = Decimal(0)
    one = Decimal(1)
    norm_zero = Decimal(0)
    pow2_zero = Decimal(0)

    def _convert(self, value: Any) -> Any:
        if isinstance(value, Decimal):
            return value
        if _is_integral(value):
            return Decimal(int(value))
        return None


class FractionRing(ElementRing):
    name = "Fraction"
    element_type = Fraction
    zero = Fraction.ZERO
    one = Fraction.ONE
    norm_zero = Fraction.ZERO
    pow2_zero = Fraction.ZERO

    def _convert(self, value: Any) -> Any:
        if isinstance(value, Fraction):
            return value
        if _is_integral(value):
            return Fraction(int(value))
        return None


class SimpleComplexRing(ElementRing):
    """Gaussian integers; N is Decimal, P is int."""

    name = "SimpleComplexNumber"
    element_type = SimpleComplexNumber
    zero = SimpleComplexNumber.ZERO
    one = SimpleComplexNumber.ONE
    norm_zero = Decimal(0)
    pow2_zero = 0

    def _convert(self, value: Any) -> Any:
        if isinstance(value, SimpleComplexNumber):
            return value
        if _is_integral(value):
            return SimpleComplexNumber(int(value))
        return None

    def abs(self, a: Any, context: Optional[SquareRootContext] = None) -> Decimal:
        return a.abs(context)

    def abs_pow2(self, a: Any, context: Optional[PrecisionContext] = None) -> int:
        return a.abs_pow2()

    def is_unit(self, a: Any) -> bool:
        return a.is_unit()


class RealComplexRing(ElementRing):
    """Complex numbers with Decimal parts; N and P are Decimal."""

    name = "RealComplexNumber"
    element_type = RealComplexNumber
    zero = RealComplexNumber.ZERO
    one = RealComplexNumber.ONE
    norm_zero = Decimal(0)
    pow2_zero = Decimal(0)

    def _convert(self, value: Any) -> Any:
        if isinstance(value, RealComplexNumber):
            return value
        if isinstance(value, SimpleComplexNumber):
            return RealComplexNumber.of(value)
        if isinstance(value, Decimal):
            return RealComplexNumber(value)
        if _is_integral(value):
            return RealComplexNumber(int(value))
        return None

    def add(self, a: Any, b: Any, context: Optional[PrecisionContext] = None) -> RealComplexNumber:
        return a.add(b, context)

    def subtract(self, a: Any, b: Any, context: Optional[PrecisionContext] = None) -> RealComplexNumber:
        return a.subtract(b, context)

    def multiply(self, a: Any, b: Any, context: Optional[PrecisionContext] = None) -> RealComplexNumber:
        return a.multiply(b, context)

    def negate(self, a: Any, context: Optional[PrecisionContext] = None) -> RealComplexNumber:
        return a.negate(context)

    def abs(self, a: Any, context: Optional[SquareRootContext] = None) -> Decimal:
        return a.abs(context)

    def abs_pow2(self, a: Any, context: Optional[PrecisionContext] = None) -> Decimal:
        return a.abs_pow2(context)

    def is_unit(self, a: Any) -> bool:
        return a.is_unit()


INTEGER_RING = IntegerRing()
DECIMAL_RING = DecimalRing()
FRACTION_RING = FractionRing()
SIMPLE_COMPLEX_RING = SimpleComplexRing()
REAL_COMPLEX_RING = RealComplexRing()
