"""
Complex number types.

SimpleComplexNumber: Gaussian integers, exact for add/subtract/multiply
RealComplexNumber: Decimal parts, exact unless a PrecisionContext is given
PolarForm: radial/angular pair converting back to RealComplexNumber
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any, ClassVar

import sympy
from pydantic import BaseModel, ConfigDict, Field

from ..core.errors import InvalidArgumentError, InvalidStateError, NotInvertibleError, require_not_none
from ..sqrt import PrecisionContext, SquareRootContext, arithmetic_scope, precision_scope, sqrt
from ..sqrt.context import DEFAULT_PRECISION_CONTEXT
from .value import MathNumber

if TYPE_CHECKING:
    from ..linear.decimals import DecimalMatrix
    from ..linear.integer import IntegerMatrix

# extra digits carried through sympy before rounding to the context
GUARD_DIGITS = 5


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_exponent(exponent: Any) -> int:
    require_not_none(exponent, "exponent")
    if not _is_int(exponent):
        raise InvalidArgumentError("exponent", "an int", type(exponent).__name__)
    if exponent < 0:
        raise InvalidArgumentError("exponent", "exponent > -1", exponent)
    return exponent


def _to_rational(value: Decimal) -> sympy.Rational:
    return sympy.Rational(*value.as_integer_ratio())


def _evaluate(expression: Any, context: PrecisionContext | None) -> Decimal:
    """Evaluate a sympy expression and round it to ``context``."""
    context = context if context is not None else DEFAULT_PRECISION_CONTEXT
    evaluated = sympy.N(expression, context.precision + GUARD_DIGITS)
    with precision_scope(context):
        return +Decimal(str(evaluated))


class AbstractComplexNumber(MathNumber):
    """
    Shared behaviour of complex numbers with parts ``real`` and ``imaginary``.

    Subclasses are pydantic models declaring both fields.
    """

    def is_invertible(self) -> bool:
        return self.real != 0 or self.imaginary != 0

    def is_unit(self) -> bool:
        """True for 1, -1, i and -i."""
        if self.imaginary == 0:
            return self.real in (1, -1)
        return self.real == 0 and self.imaginary in (1, -1)

    def _require(self, other: Any, name: str) -> Any:
        require_not_none(other, name)
        operand = self._operand(other)
        if operand is None:
            raise InvalidArgumentError(name, f"a {type(self).__name__}", type(other).__name__)
        return operand

    def to_string(self) -> str:
        if self.imaginary == 0:
            return str(self.real)
        if self.real == 0:
            return f"{self.imaginary}i"
        sign = "-" if self.imaginary < 0 else "+"
        return f"{self.real} {sign} {str(self.imaginary).lstrip('-')}i"

    def to_tex(self) -> str:
        return self.to_string().replace("i", "\\mathrm{i}")


class SimpleComplexNumber(BaseModel, AbstractComplexNumber):
    """
    Complex number with int parts.

    Examples:
        >>> SimpleComplexNumber(1, 2) * SimpleComplexNumber(3, -1)
        SimpleComplexNumber(5, 5)
    """

    model_config = ConfigDict(frozen=True)

    real: int = Field(description="Real part")
    imaginary: int = Field(default=0, description="Imaginary part")

    ZERO: ClassVar[SimpleComplexNumber]
    ONE: ClassVar[SimpleComplexNumber]
    IMAGINARY: ClassVar[SimpleComplexNumber]

    def __init__(self, real: int, imaginary: int = 0, **kwargs: Any):
        for name, part in (("real", real), ("imaginary", imaginary)):
            require_not_none(part, name)
            if not _is_int(part):
                raise InvalidArgumentError(name, "an int", type(part).__name__)
        super().__init__(real=real, imaginary=imaginary, **kwargs)

    @classmethod
    def of(cls, real: int, imaginary: int = 0) -> SimpleComplexNumber:
        return cls(real, imaginary)

    def _operand(self, other: Any) -> SimpleComplexNumber | None:
        if isinstance(other, SimpleComplexNumber):
            return other
        if _is_int(other):
            return SimpleComplexNumber(other)
        return None

    def add(self, summand: Any) -> SimpleComplexNumber:
        summand = self._require(summand, "summand")
        return SimpleComplexNumber(self.real + summand.real, self.imaginary + summand.imaginary)

    def subtract(self, subtrahend: Any) -> SimpleComplexNumber:
        subtrahend = self._require(subtrahend, "subtrahend")
        return SimpleComplexNumber(self.real - subtrahend.real, self.imaginary - subtrahend.imaginary)

    def multiply(self, factor: Any) -> SimpleComplexNumber:
        factor = self._require(factor, "factor")
        return SimpleComplexNumber(
            self.real * factor.real - self.imaginary * factor.imaginary,
            self.real * factor.imaginary + self.imaginary * factor.real,
        )

    def divide(self, divisor: Any, context: PrecisionContext | None = None) -> RealComplexNumber:
        """
        Divide, leaving the Gaussian integers.

        Args:
            divisor: SimpleComplexNumber or int
            context: PrecisionContext for the quotient (None = default)

        Raises:
            NotInvertibleError: if divisor is zero
        """
        divisor = self._require(divisor, "divisor")
        if not divisor.is_invertible():
            raise NotInvertibleError(divisor)
        return RealComplexNumber.of(self).divide(RealComplexNumber.of(divisor), context)

    def pow(self, exponent: int) -> SimpleComplexNumber:
        _check_exponent(exponent)
        result = SimpleComplexNumber.ONE
        for _ in range(exponent):
            result = result.multiply(self)
        return result

    def negate(self) -> SimpleComplexNumber:
        return SimpleComplexNumber(-self.real, -self.imaginary)

    def invert(self, context: PrecisionContext | None = None) -> RealComplexNumber:
        if not self.is_invertible():
            raise NotInvertibleError(self)
        return RealComplexNumber.ONE.divide(RealComplexNumber.of(self), context)

    def abs(self, context: SquareRootContext | None = None) -> Decimal:
        return sqrt(self.abs_pow2(), context)

    def abs_pow2(self) -> int:
        return self.real * self.real + self.imaginary * self.imaginary

    def conjugate(self) -> SimpleComplexNumber:
        return SimpleComplexNumber(self.real, -self.imaginary)

    def argument(self, context: PrecisionContext | None = None) -> Decimal:
        return RealComplexNumber.of(self).argument(context)

    def polar_form(self, context: PrecisionContext | None = None) -> PolarForm:
        return RealComplexNumber.of(self).polar_form(context)

    def matrix(self) -> IntegerMatrix:
        """Real 2x2 representation ``[[re, -im], [im, re]]`` as IntegerMatrix."""
        from ..linear.integer import IntegerMatrix

        return IntegerMatrix.from_rows([[self.real, -self.imaginary], [self.imaginary, self.real]])

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"SimpleComplexNumber({self.real}, {self.imaginary})"


class RealComplexNumber(BaseModel, AbstractComplexNumber):
    """
    Complex number with Decimal parts.

    Every arithmetic method takes an optional PrecisionContext. Without one,
    add, subtract, multiply, pow and negate are exact, while divide, abs and
    argument round to DEFAULT_PRECISION_CONTEXT.
    """

    model_config = ConfigDict(frozen=True)

    real: Decimal = Field(description="Real part")
    imaginary: Decimal = Field(default=Decimal(0), description="Imaginary part")

    ZERO: ClassVar[RealComplexNumber]
    ONE: ClassVar[RealComplexNumber]
    IMAGINARY: ClassVar[RealComplexNumber]

    def __init__(self, real: Any, imaginary: Any = 0, **kwargs: Any):
        parts = {}
        for name, part in (("real", real), ("imaginary", imaginary)):
            require_not_none(part, name)
            if _is_int(part):
                part = Decimal(part)
            elif not isinstance(part, Decimal):
                raise InvalidArgumentError(name, "an int or Decimal", type(part).__name__)
            parts[name] = part
        super().__init__(**parts, **kwargs)

    @classmethod
    def of(cls, real: Any, imaginary: Any = 0) -> RealComplexNumber:
        """Create from parts, or convert a SimpleComplexNumber."""
        if isinstance(real, SimpleComplexNumber):
            return cls(real.real, real.imaginary)
        return cls(real, imaginary)

    def _operand(self, other: Any) -> RealComplexNumber | None:
        if isinstance(other, RealComplexNumber):
            return other
        if isinstance(other, SimpleComplexNumber):
            return RealComplexNumber.of(other)
        if _is_int(other) or isinstance(other, Decimal):
            return RealComplexNumber(other)
        return None

    def add(self, summand: Any, context: PrecisionContext | None = None) -> RealComplexNumber:
        summand = self._require(summand, "summand")
        with arithmetic_scope(context):
            return RealComplexNumber(self.real + summand.real, self.imaginary + summand.imaginary)

    def subtract(self, subtrahend: Any, context: PrecisionContext | None = None) -> RealComplexNumber:
        subtrahend = self._require(subtrahend, "subtrahend")
        with arithmetic_scope(context):
            return RealComplexNumber(self.real - subtrahend.real, self.imaginary - subtrahend.imaginary)

    def multiply(self, factor: Any, context: PrecisionContext | None = None) -> RealComplexNumber:
        factor = self._require(factor, "factor")
        with arithmetic_scope(context):
            return RealComplexNumber(
                self.real * factor.real - self.imaginary * factor.imaginary,
                self.real * factor.imaginary + self.imaginary * factor.real,
            )

    def divide(self, divisor: Any, context: PrecisionContext | None = None) -> RealComplexNumber:
        divisor = self._require(divisor, "divisor")
        if not divisor.is_invertible():
            raise NotInvertibleError(divisor)
        with precision_scope(context):
            denominator = divisor.real * divisor.real + divisor.imaginary * divisor.imaginary
            real = (self.real * divisor.real + self.imaginary * divisor.imaginary) / denominator
            imaginary = (self.imaginary * divisor.real - self.real * divisor.imaginary) / denominator
            return RealComplexNumber(real, imaginary)

    def pow(self, exponent: int, context: PrecisionContext | None = None) -> RealComplexNumber:
        _check_exponent(exponent)
        result = RealComplexNumber.ONE
        for _ in range(exponent):
            result = result.multiply(self, context)
        return result

    def negate(self, context: PrecisionContext | None = None) -> RealComplexNumber:
        with arithmetic_scope(context):
            return RealComplexNumber(-self.real, -self.imaginary)

    def invert(self, context: PrecisionContext | None = None) -> RealComplexNumber:
        if not self.is_invertible():
            raise NotInvertibleError(self)
        return RealComplexNumber.ONE.divide(self, context)

    def abs(self, context: SquareRootContext | None = None) -> Decimal:
        precision_context = context.precision_context if context is not None else None
        return sqrt(self.abs_pow2(precision_context), context)

    def abs_pow2(self, context: PrecisionContext | None = None) -> Decimal:
        with arithmetic_scope(context):
            return self.real * self.real + self.imaginary * self.imaginary

    def conjugate(self) -> RealComplexNumber:
        with arithmetic_scope():
            return RealComplexNumber(self.real, -self.imaginary)

    def argument(self, context: PrecisionContext | None = None) -> Decimal:
        """
        Angle to the positive real axis in (-pi, pi].

        Raises:
            InvalidStateError: if this is zero
        """
        if not self.is_invertible():
            raise InvalidStateError("expected non-zero complex number for argument", value=self)
        return _evaluate(sympy.atan2(_to_rational(self.imaginary), _to_rational(self.real)), context)

    def polar_form(self, context: PrecisionContext | None = None) -> PolarForm:
        square_root_context = SquareRootContext(precision_context=context) if context is not None else None
        return PolarForm(self.abs(square_root_context), self.argument(context))

    def equals_by_comparing_parts(self, other: RealComplexNumber) -> bool:
        """Compare numerically, ignoring the scale of the parts."""
        require_not_none(other, "other")
        return self.real.compare(other.real) == 0 and self.imaginary.compare(other.imaginary) == 0

    def matrix(self) -> DecimalMatrix:
        """Real 2x2 representation ``[[re, -im], [im, re]]`` as DecimalMatrix."""
        from ..linear.decimals import DecimalMatrix

        with arithmetic_scope():
            negated = -self.imaginary
        return DecimalMatrix.from_rows([[self.real, negated], [self.imaginary, self.real]])

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"RealComplexNumber({self.real!r}, {self.imaginary!r})"


class PolarForm(BaseModel):
    """Complex number as radial distance and angle in radians."""

    model_config = ConfigDict(frozen=True)

    radial: Decimal
    angular: Decimal

    def __init__(self, radial: Decimal, angular: Decimal, **kwargs: Any):
        require_not_none(radial, "radial")
        require_not_none(angular, "angular")
        super().__init__(radial=radial, angular=angular, **kwargs)

    def complex_number(self, context: PrecisionContext | None = None) -> RealComplexNumber:
        """Convert to ``radial * (cos(angular) + i sin(angular))``."""
        radial = _to_rational(self.radial)
        angular = _to_rational(self.angular)
        return RealComplexNumber(
            _evaluate(radial * sympy.cos(angular), context),
            _evaluate(radial * sympy.sin(angular), context),
        )

    def __str__(self) -> str:
        return f"{self.radial} (cos {self.angular} + i sin {self.angular})"

    def __repr__(self) -> str:
        return f"PolarForm({self.radial!r}, {self.angular!r})"


SimpleComplexNumber.ZERO = SimpleComplexNumber(0, 0)
SimpleComplexNumber.ONE = SimpleComplexNumber(1, 0)
SimpleComplexNumber.IMAGINARY = SimpleComplexNumber(0, 1)

RealComplexNumber.ZERO = RealComplexNumber(0, 0)
RealComplexNumber.ONE = RealComplexNumber(1, 0)
RealComplexNumber.IMAGINARY = RealComplexNumber(0, 1)
