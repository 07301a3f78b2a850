"""
Fraction type.

Stores numerator and denominator as ints, always reduced to lowest terms
with a positive denominator, so equal values compare and hash equal.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from ..core.errors import InvalidArgumentError, NotInvertibleError, require_not_none
from .value import MathNumber


def reduce_fraction(numerator: int, denominator: int) -> tuple[int, int]:
    """Lowest terms with a positive denominator; 0 becomes 0/1."""
    divisor = math.gcd(numerator, denominator)
    if denominator < 0:
        divisor = -divisor
    return numerator // divisor, denominator // divisor


def _check_int(value: Any, name: str) -> int:
    require_not_none(value, name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(name, "an int", type(value).__name__)
    return value


class Fraction(BaseModel, MathNumber):
    """
    Fraction represents a rational number as numerator/denominator.

    Examples:
        >>> Fraction(1, 2)  # 1/2
        >>> Fraction(2, -4)  # -1/2
        >>> Fraction(5)  # 5/1
    """

    model_config = ConfigDict(frozen=True)

    numerator: int = Field(description="The numerator")
    denominator: int = Field(description="The denominator, always > 0")

    ZERO: ClassVar[Fraction]
    ONE: ClassVar[Fraction]

    def __init__(self, numerator: int, denominator: int = 1, **kwargs: Any):
        """
        Create a Fraction.

        Args:
            numerator: Numerator
            denominator: Denominator (default 1), must not be 0

        Raises:
            InvalidArgumentError: if denominator is 0 or a part is not an int
        """
        _check_int(numerator, "numerator")
        _check_int(denominator, "denominator")
        if denominator == 0:
            raise InvalidArgumentError("denominator", "denominator != 0", denominator)
        num, den = reduce_fraction(numerator, denominator)
        super().__init__(numerator=num, denominator=den, **kwargs)

    @classmethod
    def of(cls, numerator: int, denominator: int = 1) -> Fraction:
        return cls(numerator, denominator)

    def _operand(self, other: Any) -> Fraction | None:
        if isinstance(other, Fraction):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return Fraction(other)
        return None

    def _require(self, other: Any, name: str) -> Fraction:
        require_not_none(other, name)
        operand = self._operand(other)
        if operand is None:
            raise InvalidArgumentError(name, "a Fraction or int", type(other).__name__)
        return operand

    # Capability set

    def add(self, summand: Any) -> Fraction:
        summand = self._require(summand, "summand")
        common = math.lcm(self.denominator, summand.denominator)
        return Fraction(
            self.numerator * (common // self.denominator) + summand.numerator * (common // summand.denominator),
            common,
        )

    def subtract(self, subtrahend: Any) -> Fraction:
        return self.add(self._require(subtrahend, "subtrahend").negate())

    def multiply(self, factor: Any) -> Fraction:
        factor = self._require(factor, "factor")
        return Fraction(self.numerator * factor.numerator, self.denominator * factor.denominator)

    def divide(self, divisor: Any) -> Fraction:
        divisor = self._require(divisor, "divisor")
        if not divisor.is_invertible():
            raise NotInvertibleError(divisor)
        return self.multiply(divisor.invert())

    def pow(self, exponent: int) -> Fraction:
        _check_int(exponent, "exponent")
        if exponent < 0:
            raise InvalidArgumentError("exponent", "exponent > -1", exponent)
        return Fraction(self.numerator ** exponent, self.denominator ** exponent)

    def negate(self) -> Fraction:
        return Fraction(-self.numerator, self.denominator)

    def invert(self) -> Fraction:
        if not self.is_invertible():
            raise NotInvertibleError(self)
        return Fraction(self.denominator, self.numerator)

    def is_invertible(self) -> bool:
        return self.numerator != 0

    def abs(self) -> Fraction:
        return Fraction(abs(self.numerator), self.denominator)

    # Ordering helpers

    def signum(self) -> int:
        """Return -1, 0 or 1."""
        return (self.numerator > 0) - (self.numerator < 0)

    def min(self, other: Any) -> Fraction:
        other = self._require(other, "other")
        return other if self > other else self

    def max(self, other: Any) -> Fraction:
        other = self._require(other, "other")
        return other if self < other else self

    def to_decimal(self, context=None) -> Decimal:
        """
        Decimal approximation under a PrecisionContext.

        Args:
            context: PrecisionContext (None = DEFAULT_PRECISION_CONTEXT)
        """
        from ..sqrt.context import precision_scope

        with precision_scope(context):
            return Decimal(self.numerator) / Decimal(self.denominator)

    def to_string(self) -> str:
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"

    def to_tex(self) -> str:
        if self.denominator == 1:
            return str(self.numerator)
        return f"\\frac{{{self.numerator}}}{{{self.denominator}}}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Fraction({self.numerator}, {self.denominator})"

    def __lt__(self, other: Any) -> bool:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self.numerator * operand.denominator < operand.numerator * self.denominator

    def __le__(self, other: Any) -> bool:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self.numerator * operand.denominator <= operand.numerator * self.denominator

    def __gt__(self, other: Any) -> bool:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self.numerator * operand.denominator > operand.numerator * self.denominator

    def __ge__(self, other: Any) -> bool:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self.numerator * operand.denominator >= operand.numerator * self.denominator


Fraction.ZERO = Fraction(0)
Fraction.ONE = Fraction(1)
