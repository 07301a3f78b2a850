"""
Zero and identity constructors.

Each factory validates its sizes through the builder and defaults the
elements to the class ring's zero and one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from ..core.errors import check_size, require_not_none

if TYPE_CHECKING:
    from .matrix import AbstractMatrix
    from .vector import AbstractVector


def build_zero_vector(vector_class: type, size: int, element_zero: Optional[Any] = None) -> AbstractVector:
    """
    Vector of the given size with every element zero.

    Args:
        vector_class: Concrete vector class, e.g. IntegerVector
        size: Number of elements, > 0
        element_zero: Zero to use (default: ``vector_class.ring.zero``)
    """
    require_not_none(vector_class, "vector_class")
    check_size(size)
    builder = vector_class.builder(size)
    zero = element_zero if element_zero is not None else vector_class.ring.zero
    return builder.put_all(zero).build()


def build_zero_matrix(
    matrix_class: type, row_size: int, column_size: int, element_zero: Optional[Any] = None
) -> AbstractMatrix:
    """Matrix of the given shape with every cell zero."""
    require_not_none(matrix_class, "matrix_class")
    check_size(row_size, "row_size")
    check_size(column_size, "column_size")
    builder = matrix_class.builder(row_size, column_size)
    zero = element_zero if element_zero is not None else matrix_class.ring.zero
    return builder.put_all(zero).build()


def build_identity_matrix(
    matrix_class: type,
    size: int,
    element_zero: Optional[Any] = None,
    element_one: Optional[Any] = None,
) -> AbstractMatrix:
    """Square matrix with one on the diagonal and zero elsewhere."""
    require_not_none(matrix_class, "matrix_class")
    check_size(size)
    builder = matrix_class.builder(size, size)
    one = element_one if element_one is not None else matrix_class.ring.one
    zero = element_zero if element_zero is not None else matrix_class.ring.zero
    for index in range(1, size + 1):
        builder.put(index, index, one)
    return builder.nulls_to_element(zero).build()
