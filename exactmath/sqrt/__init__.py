"""Square roots and the precision contexts that control them."""

from .calculator import is_perfect_square, sqrt, sqrt_of_perfect_square
from .context import (
    DEFAULT_PRECISION_CONTEXT,
    DEFAULT_SQUARE_ROOT_CONTEXT,
    PrecisionContext,
    SquareRootContext,
    arithmetic_scope,
    precision_scope,
)

__all__ = [
    "sqrt",
    "is_perfect_square",
    "sqrt_of_perfect_square",
    "PrecisionContext",
    "SquareRootContext",
    "precision_scope",
    "arithmetic_scope",
    "DEFAULT_PRECISION_CONTEXT",
    "DEFAULT_SQUARE_ROOT_CONTEXT",
]
