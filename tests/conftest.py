"""
Shared pytest fixtures for the exactmath test-suite.

This module provides:
- Tolerance helpers for Decimal approximations
- Common matrices and vectors used across test modules
- Logging isolation for tests that configure handlers
"""

import logging
from decimal import Decimal

import pytest

from exactmath.linear import DecimalMatrix, IntegerMatrix, IntegerVector
from exactmath.sqrt import PrecisionContext, SquareRootContext


@pytest.fixture
def assert_decimal_close():
    """Helper to assert that a Decimal approximation is within a tolerance."""
    def _assert_close(actual: Decimal, expected, tolerance: str = "1E-9") -> None:
        """
        Assert ``|actual - expected| <= tolerance``.

        Args:
            actual: Computed Decimal
            expected: Expected value (Decimal, int or str)
            tolerance: Allowed absolute difference
        """
        assert isinstance(actual, Decimal), f"expected Decimal but got {type(actual).__name__}"
        difference = abs(actual - Decimal(expected))
        assert difference <= Decimal(tolerance), f"{actual} differs from {expected} by {difference}"

    return _assert_close


@pytest.fixture
def int_matrix_2x2() -> IntegerMatrix:
    """The matrix [[1, 2], [3, 4]]."""
    return IntegerMatrix.from_rows([[1, 2], [3, 4]])


@pytest.fixture
def int_matrix_3x3() -> IntegerMatrix:
    """A non-triangular 3x3 integer matrix with determinant 6."""
    return IntegerMatrix.from_rows([[2, 0, 1], [1, 3, 2], [1, 1, 2]])


@pytest.fixture
def int_matrix_4x4() -> IntegerMatrix:
    """A non-triangular 4x4 integer matrix with determinant 30."""
    return IntegerMatrix.from_rows([[1, 0, 2, -1], [3, 0, 0, 5], [2, 1, 4, -3], [1, 0, 5, 0]])


@pytest.fixture
def decimal_matrix_2x2() -> DecimalMatrix:
    return DecimalMatrix.from_rows([[Decimal("1.5"), Decimal("2")], [Decimal("0.5"), Decimal("4")]])


@pytest.fixture
def vector_3_4() -> IntegerVector:
    return IntegerVector.of(3, 4)


@pytest.fixture
def low_precision() -> PrecisionContext:
    """Five significant digits, rounding half up."""
    return PrecisionContext(precision=5, rounding="ROUND_HALF_UP")


@pytest.fixture
def tight_sqrt_context() -> SquareRootContext:
    """Square roots accurate to roughly 20 decimal places."""
    return SquareRootContext(abort_criterion=Decimal("1E-20"), initial_scale=25)


@pytest.fixture
def isolated_package_logger():
    """Restore handlers and level of the ``exactmath`` logger after the test."""
    package_logger = logging.getLogger("exactmath")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield package_logger
    for handler in list(package_logger.handlers):
        if handler not in handlers:
            package_logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in package_logger.handlers:
            package_logger.addHandler(handler)
    package_logger.setLevel(level)


pytestmark = [
    pytest.mark.filterwarnings("ignore::DeprecationWarning"),
]
