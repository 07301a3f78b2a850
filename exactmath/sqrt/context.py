"""
Precision and rounding bundles for approximate computations.

``PrecisionContext`` pairs a number of significant digits with a rounding
mode and is threaded through decimal arithmetic. Without one, addition,
subtraction and multiplication run under ``arithmetic_scope`` and are exact;
division and square roots fall back to ``DEFAULT_PRECISION_CONTEXT``.
``SquareRootContext`` adds the stopping rules of Heron's method on top of it.
"""

from __future__ import annotations

import decimal
from contextlib import contextmanager
from decimal import Decimal
from typing import Iterator

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.config import settings
from ..core.errors import InvalidArgumentError

ROUNDING_MODES = frozenset(
    {
        decimal.ROUND_CEILING,
        decimal.ROUND_DOWN,
        decimal.ROUND_FLOOR,
        decimal.ROUND_HALF_DOWN,
        decimal.ROUND_HALF_EVEN,
        decimal.ROUND_HALF_UP,
        decimal.ROUND_UP,
        decimal.ROUND_05UP,
    }
)


class PrecisionContext(BaseModel):
    """
    Immutable precision/rounding pair.

    Examples:
        >>> PrecisionContext(precision=10, rounding="ROUND_HALF_UP")
        >>> DEFAULT_PRECISION_CONTEXT.precision
        34
    """

    model_config = ConfigDict(frozen=True)

    precision: int = Field(description="Number of significant digits")
    rounding: str = Field(default=decimal.ROUND_HALF_EVEN, description="decimal rounding mode name")

    @field_validator("precision")
    @classmethod
    def _validate_precision(cls, value: int) -> int:
        if value < 1:
            raise InvalidArgumentError("precision", "precision > 0", value)
        return value

    @field_validator("rounding")
    @classmethod
    def _validate_rounding(cls, value: str) -> str:
        if value not in ROUNDING_MODES:
            raise InvalidArgumentError("rounding", f"one of {sorted(ROUNDING_MODES)}", value)
        return value

    @classmethod
    def from_decimal_context(cls, context: decimal.Context) -> PrecisionContext:
        """Capture precision and rounding of a ``decimal.Context``."""
        return cls(precision=context.prec, rounding=context.rounding)

    def decimal_context(self) -> decimal.Context:
        """Return a fresh ``decimal.Context`` with this precision and rounding."""
        return decimal.Context(prec=self.precision, rounding=self.rounding)

    def scope(self):
        """Context manager running decimal arithmetic under this context."""
        return decimal.localcontext(self.decimal_context())


DEFAULT_PRECISION_CONTEXT = PrecisionContext(
    precision=settings.DEFAULT_PRECISION, rounding=settings.DEFAULT_ROUNDING
)


@contextmanager
def precision_scope(context: PrecisionContext | None = None) -> Iterator[decimal.Context]:
    """
    Run the enclosed decimal arithmetic under ``context``.

    ``None`` means ``DEFAULT_PRECISION_CONTEXT``.
    """
    context = context if context is not None else DEFAULT_PRECISION_CONTEXT
    if not isinstance(context, PrecisionContext):
        raise InvalidArgumentError("context", "a PrecisionContext", type(context).__name__)
    with context.scope() as active:
        yield active


# Enough digits that add, subtract and multiply never round.
EXACT_DECIMAL_CONTEXT = decimal.Context(
    prec=decimal.MAX_PREC,
    Emax=decimal.MAX_EMAX,
    Emin=decimal.MIN_EMIN,
    rounding=decimal.ROUND_HALF_EVEN,
    traps=[decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow],
)


def arithmetic_scope(context: PrecisionContext | None = None):
    """
    Scope for ring arithmetic (add, subtract, multiply, negate).

    ``None`` computes exactly; a PrecisionContext rounds every step to it.
    Never divide inside the exact scope.
    """
    if context is None:
        return decimal.localcontext(EXACT_DECIMAL_CONTEXT)
    return precision_scope(context)


class SquareRootContext(BaseModel):
    """
    Stopping rules and precision for Heron's method.

    Attributes:
        abort_criterion: stop once two iterates differ by at most this, in (0, 1)
        max_iterations: iteration budget, > 0
        initial_scale: decimal places the radicand is rounded to first, >= 0
        precision_context: precision and rounding of every iteration step
    """

    model_config = ConfigDict(frozen=True)

    abort_criterion: Decimal = Field(default=settings.SQRT_ABORT_CRITERION)
    max_iterations: int = Field(default=settings.SQRT_MAX_ITERATIONS)
    initial_scale: int = Field(default=settings.SQRT_INITIAL_SCALE)
    precision_context: PrecisionContext = Field(default=DEFAULT_PRECISION_CONTEXT)

    @field_validator("abort_criterion")
    @classmethod
    def _validate_abort_criterion(cls, value: Decimal) -> Decimal:
        if not Decimal(0) < value < Decimal(1):
            raise InvalidArgumentError("abort_criterion", "abort_criterion in (0, 1)", value)
        return value

    @field_validator("max_iterations")
    @classmethod
    def _validate_max_iterations(cls, value: int) -> int:
        if value < 1:
            raise InvalidArgumentError("max_iterations", "max_iterations > 0", value)
        return value

    @field_validator("initial_scale")
    @classmethod
    def _validate_initial_scale(cls, value: int) -> int:
        if value < 0:
            raise InvalidArgumentError("initial_scale", "initial_scale > -1", value)
        return value


DEFAULT_SQUARE_ROOT_CONTEXT = SquareRootContext()
