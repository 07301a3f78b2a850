"""
Builders for vectors and matrices.

A builder is a mutable staging area with a fixed declared size. Every
``put`` is bounds-checked and its element coerced through the target
class's ring; ``build()`` fails with IncompleteConstructionError until
every position has been written, then copies into an immutable instance.
Builders stay usable after ``build()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterator

from ..core.errors import (
    IncompleteConstructionError,
    InvalidArgumentError,
    InvalidStateError,
    check_index,
    check_size,
    require_not_none,
)
from ..number.ring import ElementRing

if TYPE_CHECKING:
    from .matrix import AbstractMatrix
    from .vector import AbstractVector


def _check_target(target_class: Any, name: str) -> type:
    require_not_none(target_class, name)
    if not isinstance(getattr(target_class, "ring", None), ElementRing):
        raise InvalidArgumentError(name, "a concrete vector or matrix class", target_class)
    return target_class


class VectorBuilder:
    """
    Staging area for a vector of fixed size.

    Examples:
        >>> IntegerVector.builder(3).put(1, 5).append(6).append(7).build()
        IntegerVector([5, 6, 7])
    """

    def __init__(self, vector_class: type, size: int):
        self.vector_class = _check_target(vector_class, "vector_class")
        self.size = check_size(size)
        self._elements: dict[int, Any] = {}
        # every index below the cursor is set
        self._cursor = 1

    def _coerce(self, element: Any) -> Any:
        return self.vector_class.ring.coerce(element)

    def append(self, element: Any) -> VectorBuilder:
        """
        Put element at the lowest index not yet set.

        Raises:
            InvalidStateError: if every index is already set
        """
        require_not_none(element, "element")
        element = self._coerce(element)
        while self._cursor in self._elements:
            self._cursor += 1
        if self._cursor > self.size:
            raise InvalidStateError(f"expected a free index but all {self.size} are set", size=self.size)
        self._elements[self._cursor] = element
        self._cursor += 1
        return self

    def put(self, index: int, element: Any) -> VectorBuilder:
        """Set the element at a 1-based index; the last write wins."""
        require_not_none(index, "index")
        require_not_none(element, "element")
        check_index(index, self.size)
        self._elements[index] = self._coerce(element)
        return self

    def put_all(self, element: Any) -> VectorBuilder:
        """Set every index to element."""
        element = self._coerce(element)
        for index in range(1, self.size + 1):
            self._elements[index] = element
        return self

    def nulls_to_element(self, element: Any) -> VectorBuilder:
        """Set every index not yet written to element."""
        element = self._coerce(element)
        for index in range(1, self.size + 1):
            self._elements.setdefault(index, element)
        return self

    def missing(self) -> list[int]:
        return [index for index in range(1, self.size + 1) if index not in self._elements]

    def build(self) -> AbstractVector:
        missing = self.missing()
        if missing:
            raise IncompleteConstructionError(missing)
        return self.vector_class(tuple(self._elements[index] for index in range(1, self.size + 1)))

    def __repr__(self) -> str:
        return f"VectorBuilder({self.vector_class.__name__}, size={self.size}, set={len(self._elements)})"


class MatrixBuilder:
    """
    Staging area for a matrix of fixed row and column size.

    Examples:
        >>> IntegerMatrix.builder(2, 2).put(1, 1, 1).put(2, 2, 1).nulls_to_element(0).build()
    """

    def __init__(self, matrix_class: type, row_size: int, column_size: int):
        self.matrix_class = _check_target(matrix_class, "matrix_class")
        self.row_size = check_size(row_size, "row_size")
        self.column_size = check_size(column_size, "column_size")
        self._cells: dict[tuple[int, int], Any] = {}

    def _coerce(self, element: Any) -> Any:
        return self.matrix_class.ring.coerce(element)

    def _positions(self) -> Iterator[tuple[int, int]]:
        for row in range(1, self.row_size + 1):
            for column in range(1, self.column_size + 1):
                yield row, column

    def put(self, row: int, column: int, element: Any) -> MatrixBuilder:
        """Set the cell at 1-based (row, column); the last write wins."""
        require_not_none(row, "row")
        require_not_none(column, "column")
        require_not_none(element, "element")
        check_index(row, self.row_size, "row")
        check_index(column, self.column_size, "column")
        self._cells[(row, column)] = self._coerce(element)
        return self

    def put_all(self, element: Any) -> MatrixBuilder:
        element = self._coerce(element)
        for position in self._positions():
            self._cells[position] = element
        return self

    def nulls_to_element(self, element: Any) -> MatrixBuilder:
        """Set every cell not yet written to element."""
        element = self._coerce(element)
        for position in self._positions():
            self._cells.setdefault(position, element)
        return self

    def missing(self) -> list[tuple[int, int]]:
        return [position for position in self._positions() if position not in self._cells]

    def build(self) -> AbstractMatrix:
        missing = self.missing()
        if missing:
            raise IncompleteConstructionError(missing)
        table = tuple(
            tuple(self._cells[(row, column)] for column in range(1, self.column_size + 1))
            for row in range(1, self.row_size + 1)
        )
        return self.matrix_class(table)

    def __repr__(self) -> str:
        return (
            f"MatrixBuilder({self.matrix_class.__name__}, row_size={self.row_size}, "
            f"column_size={self.column_size}, set={len(self._cells)})"
        )
