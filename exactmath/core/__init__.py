"""Cross-cutting concerns: configuration, errors, logging."""

from .config import Settings, get_settings
from .errors import (
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
from .logging import get_context_logger, get_logger, setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "ExactMathError",
    "NullArgumentError",
    "InvalidArgumentError",
    "DimensionMismatchError",
    "OutOfRangeError",
    "InvalidStateError",
    "MatrixNotSquareError",
    "NotInvertibleError",
    "IncompleteConstructionError",
    "get_logger",
    "get_context_logger",
    "setup_logging",
]
