"""
Square roots of exact values as decimal approximations.

Uses Heron's method: starting from the integer square root of the radicand
(or ``(x + 1) / 2`` for radicands below 1) the iterate
``(p * p + x) / (2 * p)`` is repeated until two successive values differ by
at most the abort criterion of the ``SquareRootContext`` or its iteration
budget is used up.
"""

from __future__ import annotations

import decimal
import logging
import math
from decimal import Decimal
from typing import Any

from ..core.errors import InvalidArgumentError, require_not_none
from ..core.logging import get_context_logger
from .context import DEFAULT_SQUARE_ROOT_CONTEXT, SquareRootContext


def _to_decimal(value: Any, context: decimal.Context) -> Decimal:
    from ..number.fraction import Fraction

    if isinstance(value, bool):
        raise InvalidArgumentError("value", "an int, Decimal or Fraction", type(value).__name__)
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, Fraction):
        return context.divide(Decimal(value.numerator), Decimal(value.denominator))
    raise InvalidArgumentError("value", "an int, Decimal or Fraction", type(value).__name__)


def sqrt(value: Any, context: SquareRootContext | None = None) -> Decimal:
    """
    Approximate the square root of a non-negative value.

    Args:
        value: int, Decimal or Fraction, must be >= 0
        context: SquareRootContext (None = DEFAULT_SQUARE_ROOT_CONTEXT)

    Returns:
        Decimal approximation rounded under the context's precision

    Raises:
        NullArgumentError: if value is None
        InvalidArgumentError: if value is negative or not a supported type
    """
    require_not_none(value, "value")
    if context is None:
        context = DEFAULT_SQUARE_ROOT_CONTEXT
    elif not isinstance(context, SquareRootContext):
        raise InvalidArgumentError("context", "a SquareRootContext", type(context).__name__)

    math_context = context.precision_context.decimal_context()
    radicand = _to_decimal(value, math_context)
    if radicand < 0:
        raise InvalidArgumentError("value", "value >= 0", value)
    if radicand == 0:
        return Decimal(0)
    return _herons_method(radicand, context, math_context)


def _herons_method(radicand: Decimal, context: SquareRootContext, math_context: decimal.Context) -> Decimal:
    abort_criterion = context.abort_criterion
    log = get_context_logger(__name__, radicand=str(radicand), abort_criterion=str(abort_criterion))
    log.debug("calculating square root for %s with precision = %s", radicand, abort_criterion)

    # quantize needs enough digits for the integral part plus the scale
    digits = max(radicand.adjusted(), 0) + 1 + context.initial_scale
    scaling_context = decimal.Context(prec=max(math_context.prec, digits), rounding=math_context.rounding)
    scaled = radicand.quantize(Decimal(1).scaleb(-context.initial_scale), context=scaling_context)

    predecessor = _seed(scaled, math_context)
    log.debug("seed value = %s", predecessor)
    successor = _successor(predecessor, scaled, abort_criterion, math_context, log)
    iterations = 1
    while (
        math_context.abs(math_context.subtract(successor, predecessor)) > abort_criterion
        and iterations <= context.max_iterations
    ):
        predecessor = successor
        successor = _successor(successor, scaled, abort_criterion, math_context, log)
        iterations += 1
    log.debug("terminated after %s iterations", iterations)
    if math_context.abs(math_context.subtract(successor, predecessor)) > abort_criterion:
        log.warning(
            "iteration budget of %s spent before two iterates differed by at most %s",
            context.max_iterations,
            abort_criterion,
        )
    log.debug("sqrt(%s) = %s", radicand, successor)
    return successor


def _seed(scaled: Decimal, math_context: decimal.Context) -> Decimal:
    # the integer square root is within 1 of the result, so only the
    # quadratic phase of the iteration remains
    if scaled >= 1:
        return math_context.plus(Decimal(math.isqrt(int(scaled))))
    return math_context.divide(math_context.add(scaled, Decimal(1)), Decimal(2))


def _successor(
    predecessor: Decimal,
    radicand: Decimal,
    abort_criterion: Decimal,
    math_context: decimal.Context,
    log: logging.LoggerAdapter,
) -> Decimal:
    divisor = math_context.multiply(Decimal(2), predecessor)
    if divisor == 0:
        return abort_criterion
    numerator = math_context.add(math_context.multiply(predecessor, predecessor), radicand)
    successor = math_context.divide(numerator, divisor)
    log.debug("predecessor = %s, successor = %s", predecessor, successor)
    return successor


def is_perfect_square(integer: int) -> bool:
    """Return True if integer is the square of an int."""
    require_not_none(integer, "integer")
    if isinstance(integer, bool) or not isinstance(integer, int):
        raise InvalidArgumentError("integer", "an int", type(integer).__name__)
    if integer < 0:
        raise InvalidArgumentError("integer", "integer >= 0", integer)
    root = math.isqrt(integer)
    return root * root == integer


def sqrt_of_perfect_square(integer: int) -> int:
    """Exact square root of a perfect square."""
    if not is_perfect_square(integer):
        raise InvalidArgumentError("integer", "a perfect square", integer)
    return math.isqrt(integer)
