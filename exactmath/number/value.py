"""
Base class for the exact number types.

Every number type offers the same capability set (add, subtract, multiply,
divide, pow, negate, invert, is_invertible, abs) as named methods, and maps
the Python operators onto them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class MathNumber(ABC):
    """
    Arithmetic capability set shared by Fraction and the complex numbers.

    Subclasses must implement the named operations and ``_operand``; the
    operator overloads are derived from them.

    Note: Concrete subclasses inherit from both BaseModel and MathNumber,
    e.g. ``class Fraction(BaseModel, MathNumber):``.
    """

    @abstractmethod
    def add(self, summand: Any) -> MathNumber:
        """Return self + summand."""

    @abstractmethod
    def subtract(self, subtrahend: Any) -> MathNumber:
        """Return self - subtrahend."""

    @abstractmethod
    def multiply(self, factor: Any) -> MathNumber:
        """Return self * factor."""

    @abstractmethod
    def divide(self, divisor: Any) -> MathNumber:
        """Return self / divisor, failing for non-invertible divisors."""

    @abstractmethod
    def pow(self, exponent: int) -> MathNumber:
        """Return self ** exponent for exponent >= 0."""

    @abstractmethod
    def negate(self) -> MathNumber:
        """Return -self."""

    @abstractmethod
    def invert(self) -> MathNumber:
        """Return the multiplicative inverse."""

    @abstractmethod
    def is_invertible(self) -> bool:
        """True if invert() would succeed."""

    @abstractmethod
    def abs(self) -> Any:
        """Absolute value."""

    @abstractmethod
    def to_string(self) -> str:
        """Convert to human-readable string."""

    @abstractmethod
    def to_tex(self) -> str:
        """Convert to LaTeX representation."""

    def _operand(self, other: Any) -> Any:
        """
        Convert an operator operand to this type.

        Returns None when the operand is not supported, so the operator can
        return NotImplemented.
        """
        return other if isinstance(other, type(self)) else None

    # Operator overloading

    def __add__(self, other: Any) -> MathNumber:
        operand = self._operand(other)
        return NotImplemented if operand is None else self.add(operand)

    def __radd__(self, other: Any) -> MathNumber:
        operand = self._operand(other)
        return NotImplemented if operand is None else operand.add(self)

    def __sub__(self, other: Any) -> MathNumber:
        operand = self._operand(other)
        return NotImplemented if operand is None else self.subtract(operand)

    def __rsub__(self, other: Any) -> MathNumber:
        operand = self._operand(other)
        return NotImplemented if operand is None else operand.subtract(self)

    def __mul__(self, other: Any) -> MathNumber:
        operand = self._operand(other)
        return NotImplemented if operand is None else self.multiply(operand)

    def __rmul__(self, other: Any) -> MathNumber:
        operand = self._operand(other)
        return NotImplemented if operand is None else operand.multiply(self)

    def __truediv__(self, other: Any) -> MathNumber:
        operand = self._operand(other)
        return NotImplemented if operand is None else self.divide(operand)

    def __rtruediv__(self, other: Any) -> MathNumber:
        operand = self._operand(other)
        return NotImplemented if operand is None else operand.divide(self)

    def __pow__(self, exponent: Any) -> MathNumber:
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self) -> MathNumber:
        return self.negate()

    def __pos__(self) -> MathNumber:
        return self

    def __abs__(self) -> Any:
        return self.abs()
