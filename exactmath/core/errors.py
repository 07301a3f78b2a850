"""
Library exceptions.

Every failure carries a readable message with the offending values
interpolated, plus the same values as attributes and in ``details`` so
callers can inspect them programmatically.
"""

from typing import Any, Dict, Iterable, Optional


class ExactMathError(Exception):
    """Base exception for exactmath errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class NullArgumentError(ExactMathError, TypeError):
    """Raised when a required argument is None"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            message=f"{name} must not be None",
            details={"name": name}
        )


class InvalidArgumentError(ExactMathError):
    """Raised when an argument lies outside its declared domain"""

    def __init__(self, name: str, expected: str, actual: Any):
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(
            message=f"expected {expected} but actual {actual}",
            details={"name": name, "expected": expected, "actual": actual}
        )


class DimensionMismatchError(ExactMathError, ValueError):
    """Raised when operand dimensions are incompatible"""

    def __init__(self, description: str, left: int, right: int):
        self.description = description
        self.left = left
        self.right = right
        super().__init__(
            message=f"expected {description} but actual {left} != {right}",
            details={"description": description, "left": left, "right": right}
        )


class OutOfRangeError(ExactMathError, IndexError):
    """Raised when an index falls outside [lower, upper]"""

    def __init__(self, name: str, lower: int, upper: int, actual: Any):
        self.name = name
        self.lower = lower
        self.upper = upper
        self.actual = actual
        super().__init__(
            message=f"expected {name} in [{lower}, {upper}] but actual {actual}",
            details={"name": name, "lower": lower, "upper": upper, "actual": actual}
        )


class InvalidStateError(ExactMathError):
    """Raised when a structural precondition of the receiver fails"""

    def __init__(self, message: str, **details: Any):
        super().__init__(message=message, details=details)


class MatrixNotSquareError(InvalidStateError):
    """Raised by trace and determinant on non-square matrices"""

    def __init__(self, row_size: int, column_size: int):
        self.row_size = row_size
        self.column_size = column_size
        super().__init__(
            f"expected square matrix but actual {row_size} x {column_size}",
            row_size=row_size,
            column_size=column_size,
        )


class NotInvertibleError(InvalidStateError, ZeroDivisionError):
    """Raised when dividing by or inverting a non-invertible value"""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"expected invertible value but actual {value}", value=value)


class IncompleteConstructionError(ExactMathError):
    """Raised by build() while declared positions are still unset"""

    def __init__(self, missing: Iterable[Any]):
        self.missing = tuple(missing)
        preview = ", ".join(str(position) for position in self.missing[:10])
        if len(self.missing) > 10:
            preview += ", ..."
        super().__init__(
            message=f"expected every position to be set but {len(self.missing)} missing: {preview}",
            details={"missing": self.missing}
        )


def require_not_none(value: Any, name: str) -> Any:
    """Return value, raising NullArgumentError when it is None."""
    if value is None:
        raise NullArgumentError(name)
    return value


def check_index(index: Any, upper: int, name: str = "index") -> int:
    """Validate a 1-based index against [1, upper]."""
    require_not_none(index, name)
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidArgumentError(name, "an int", type(index).__name__)
    if not 1 <= index <= upper:
        raise OutOfRangeError(name, 1, upper, index)
    return index


def check_size(size: Any, name: str = "size") -> int:
    """Validate a positive dimension."""
    require_not_none(size, name)
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidArgumentError(name, "an int", type(size).__name__)
    if size < 1:
        raise InvalidArgumentError(name, f"{name} > 0", size)
    return size
