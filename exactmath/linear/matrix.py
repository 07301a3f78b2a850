"""
Generic dense matrices.

A matrix is an immutable rectangular table of elements of one ring,
addressed by 1-based (row, column) indexes. Structural properties such as
triangularity or invertibility are derived from the table on every call.

Determinant dispatch:
    triangular  -> product of the diagonal
    size > 3    -> Leibniz formula over all permutations
    size == 3   -> rule of Sarrus
    size == 2   -> a11 * a22 - a12 * a21
"""

from __future__ import annotations

import itertools
from abc import abstractmethod
from decimal import Decimal
from types import MappingProxyType
from typing import Any, ClassVar, Iterable, Iterator, Mapping, NamedTuple

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.errors import (
    DimensionMismatchError,
    InvalidArgumentError,
    InvalidStateError,
    MatrixNotSquareError,
    check_index,
    require_not_none,
)
from ..core.logging import get_logger
from ..number.ring import ElementRing, precision_of
from ..sqrt import PrecisionContext, SquareRootContext
from .builder import MatrixBuilder
from .vector import AbstractVector, check_precision_context, check_square_root_context

logger = get_logger(__name__)


class Cell(NamedTuple):
    """One matrix cell."""

    row: int
    column: int
    value: Any


def inversions(permutation: Iterable[int]) -> int:
    """Number of pairs i < j with permutation[i] > permutation[j]."""
    values = list(permutation)
    return sum(
        1 for i, j in itertools.combinations(range(len(values)), 2) if values[i] > values[j]
    )


class AbstractMatrix(BaseModel):
    """
    Immutable matrix over the elements of ``ring``.

    Subclasses set ``ring`` and implement ``vector_class`` naming their
    partner vector type.

    Examples:
        >>> m = IntegerMatrix.from_rows([[1, 2], [3, 4]])
        >>> m.determinant()
        -2
        >>> m.trace()
        5
    """

    model_config = ConfigDict(frozen=True)

    ring: ClassVar[ElementRing]

    table: tuple[tuple[Any, ...], ...] = Field(description="Rows of cells, top to bottom")

    def __init__(self, table: Iterable[Iterable[Any]], **kwargs: Any):
        require_not_none(table, "table")
        super().__init__(table=tuple(tuple(row) for row in table), **kwargs)

    @field_validator("table")
    @classmethod
    def _validate_table(cls, value: tuple[tuple[Any, ...], ...]) -> tuple[tuple[Any, ...], ...]:
        if not value:
            raise InvalidArgumentError("row_size", "row_size > 0", 0)
        column_size = len(value[0])
        if column_size == 0:
            raise InvalidArgumentError("column_size", "column_size > 0", 0)
        for row in value:
            if len(row) != column_size:
                raise InvalidArgumentError("table", f"rows of length {column_size}", len(row))
        return tuple(
            tuple(
                cls.ring.coerce(element, f"element ({row_index}, {column_index})")
                for column_index, element in enumerate(row, 1)
            )
            for row_index, row in enumerate(value, 1)
        )

    # Construction

    @classmethod
    def builder(cls, row_size: int, column_size: int) -> MatrixBuilder:
        """Return a MatrixBuilder producing instances of this class."""
        return MatrixBuilder(cls, row_size, column_size)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Any]] | np.ndarray) -> AbstractMatrix:
        """
        Build a matrix from nested iterables or a two-dimensional numpy array.

        Raises:
            InvalidArgumentError: if rows are empty or ragged
        """
        require_not_none(rows, "rows")
        if isinstance(rows, np.ndarray):
            if rows.ndim != 2:
                raise InvalidArgumentError("rows", "a two-dimensional array", f"{rows.ndim} dimensions")
            rows = rows.tolist()
        materialized = [list(row) for row in rows]
        if not materialized:
            raise InvalidArgumentError("row_size", "row_size > 0", 0)
        column_size = len(materialized[0])
        for row in materialized:
            if len(row) != column_size:
                raise InvalidArgumentError("rows", f"rows of length {column_size}", len(row))
        builder = cls.builder(len(materialized), column_size)
        for row_index, row in enumerate(materialized, 1):
            for column_index, element in enumerate(row, 1):
                builder.put(row_index, column_index, element)
        return builder.build()

    @classmethod
    @abstractmethod
    def vector_class(cls) -> type:
        """Vector type of rows, columns and matrix-vector products."""

    # Accessors

    @property
    def row_size(self) -> int:
        return len(self.table)

    @property
    def column_size(self) -> int:
        return len(self.table[0])

    @property
    def size(self) -> int:
        return self.row_size * self.column_size

    def row_indexes(self) -> range:
        return range(1, self.row_size + 1)

    def column_indexes(self) -> range:
        return range(1, self.column_size + 1)

    def element(self, row: int, column: int) -> Any:
        """
        Return the cell at 1-based (row, column).

        Raises:
            OutOfRangeError: if an index is outside its range
        """
        require_not_none(row, "row")
        require_not_none(column, "column")
        check_index(row, self.row_size, "row")
        check_index(column, self.column_size, "column")
        return self.table[row - 1][column - 1]

    def row(self, index: int) -> AbstractVector:
        check_index(index, self.row_size, "row")
        return self.vector_class()(self.table[index - 1])

    def column(self, index: int) -> AbstractVector:
        check_index(index, self.column_size, "column")
        return self.vector_class()(row[index - 1] for row in self.table)

    def rows(self) -> Mapping[int, AbstractVector]:
        return MappingProxyType({index: self.row(index) for index in self.row_indexes()})

    def columns(self) -> Mapping[int, AbstractVector]:
        return MappingProxyType({index: self.column(index) for index in self.column_indexes()})

    def cells(self) -> tuple[Cell, ...]:
        """All cells in row-major order."""
        return tuple(
            Cell(row_index, column_index, element)
            for row_index, row in enumerate(self.table, 1)
            for column_index, element in enumerate(row, 1)
        )

    def elements(self) -> tuple[Any, ...]:
        return tuple(element for row in self.table for element in row)

    def diagonal_elements(self) -> tuple[Any, ...]:
        return tuple(self.table[i][i] for i in range(min(self.row_size, self.column_size)))

    def to_numpy(self) -> np.ndarray:
        """Object array of shape (row_size, column_size)."""
        array = np.empty((self.row_size, self.column_size), dtype=object)
        for cell in self.cells():
            array[cell.row - 1, cell.column - 1] = cell.value
        return array

    # Validation

    def _check_matrix(self, other: Any, name: str) -> AbstractMatrix:
        require_not_none(other, name)
        if not isinstance(other, type(self)):
            raise InvalidArgumentError(name, f"a {type(self).__name__}", type(other).__name__)
        return other

    def _check_same_shape(self, other: Any, name: str) -> AbstractMatrix:
        other = self._check_matrix(other, name)
        if self.row_size != other.row_size:
            raise DimensionMismatchError("equal row sizes", self.row_size, other.row_size)
        if self.column_size != other.column_size:
            raise DimensionMismatchError("equal column sizes", self.column_size, other.column_size)
        return other

    def _check_factor(self, factor: Any) -> AbstractMatrix:
        factor = self._check_matrix(factor, "factor")
        if self.column_size != factor.row_size:
            raise DimensionMismatchError("column_size == factor.row_size", self.column_size, factor.row_size)
        return factor

    def _check_vector(self, vector: Any) -> AbstractVector:
        require_not_none(vector, "vector")
        if not isinstance(vector, self.vector_class()):
            raise InvalidArgumentError("vector", f"a {self.vector_class().__name__}", type(vector).__name__)
        if self.column_size != vector.size:
            raise DimensionMismatchError("column_size == vector.size", self.column_size, vector.size)
        return vector

    def _check_square(self) -> None:
        if not self.is_square():
            raise MatrixNotSquareError(self.row_size, self.column_size)

    def _new(self, rows: Iterable[Iterable[Any]]) -> AbstractMatrix:
        return type(self).from_rows(rows)

    # Arithmetic

    def _add(self, summand: AbstractMatrix, context: PrecisionContext | None) -> AbstractMatrix:
        return self._new(
            [self.ring.add(a, b, context) for a, b in zip(own, other)]
            for own, other in zip(self.table, summand.table)
        )

    def _subtract(self, subtrahend: AbstractMatrix, context: PrecisionContext | None) -> AbstractMatrix:
        return self._new(
            [self.ring.subtract(a, b, context) for a, b in zip(own, other)]
            for own, other in zip(self.table, subtrahend.table)
        )

    def _row_times_column(self, row: Iterable[Any], column: Iterable[Any], context: PrecisionContext | None) -> Any:
        return self.ring.sum((self.ring.multiply(a, b, context) for a, b in zip(row, column)), context)

    def _multiply(self, factor: AbstractMatrix, context: PrecisionContext | None) -> AbstractMatrix:
        columns = [tuple(row[j] for row in factor.table) for j in range(factor.column_size)]
        return self._new(
            [self._row_times_column(row, column, context) for column in columns] for row in self.table
        )

    def _multiply_vector(self, vector: AbstractVector, context: PrecisionContext | None) -> AbstractVector:
        return self.vector_class().from_iterable(
            self._row_times_column(row, vector.components, context) for row in self.table
        )

    def _scalar_multiply(self, scalar: Any, context: PrecisionContext | None) -> AbstractMatrix:
        return self._new([self.ring.multiply(scalar, element, context) for element in row] for row in self.table)

    def _negate(self, context: PrecisionContext | None) -> AbstractMatrix:
        return self._new([self.ring.negate(element, context) for element in row] for row in self.table)

    def _trace(self, context: PrecisionContext | None) -> Any:
        return self.ring.sum(self.diagonal_elements(), context)

    def add(self, summand: AbstractMatrix) -> AbstractMatrix:
        """
        Cellwise sum.

        Raises:
            DimensionMismatchError: if row or column sizes differ
        """
        summand = self._check_same_shape(summand, "summand")
        return self._add(summand, None)

    def subtract(self, subtrahend: AbstractMatrix) -> AbstractMatrix:
        subtrahend = self._check_same_shape(subtrahend, "subtrahend")
        return self._subtract(subtrahend, None)

    def multiply(self, factor: AbstractMatrix) -> AbstractMatrix:
        """
        Matrix product ``self * factor``.

        Raises:
            DimensionMismatchError: if column_size != factor.row_size
        """
        factor = self._check_factor(factor)
        return self._multiply(factor, None)

    def multiply_vector(self, vector: AbstractVector) -> AbstractVector:
        vector = self._check_vector(vector)
        return self._multiply_vector(vector, None)

    def multiply_row_with_column(self, row: Iterable[Any], column: Iterable[Any]) -> Any:
        """Sum of ``row[k] * column[k]`` over the shared dimension."""
        require_not_none(row, "row")
        require_not_none(column, "column")
        row = tuple(self.ring.coerce(element) for element in row)
        column = tuple(self.ring.coerce(element) for element in column)
        if len(row) != len(column):
            raise DimensionMismatchError("equal sizes of row and column", len(row), len(column))
        return self._row_times_column(row, column, None)

    def scalar_multiply(self, scalar: Any) -> AbstractMatrix:
        scalar = self.ring.coerce(scalar, "scalar")
        return self._scalar_multiply(scalar, None)

    def negate(self) -> AbstractMatrix:
        return self._negate(None)

    def trace(self) -> Any:
        """
        Sum of the diagonal.

        Raises:
            MatrixNotSquareError: if the matrix is not square
        """
        self._check_square()
        return self._trace(None)

    def transpose(self) -> AbstractMatrix:
        return self._new(zip(*self.table))

    def minor(self, row_index: int, column_index: int) -> AbstractMatrix:
        """
        Matrix without the given row and column, re-indexed from 1.

        Raises:
            OutOfRangeError: if an index is outside its range
            InvalidStateError: if the matrix has a single row or column
        """
        require_not_none(row_index, "row_index")
        require_not_none(column_index, "column_index")
        check_index(row_index, self.row_size, "row_index")
        check_index(column_index, self.column_size, "column_index")
        if self.row_size == 1 or self.column_size == 1:
            raise InvalidStateError(
                f"expected at least 2 rows and columns but actual {self.row_size} x {self.column_size}",
                row_size=self.row_size,
                column_size=self.column_size,
            )
        return self._new(
            [element for j, element in enumerate(row, 1) if j != column_index]
            for i, row in enumerate(self.table, 1)
            if i != row_index
        )

    # Determinant

    def _determinant(self, context: PrecisionContext | None) -> Any:
        size = self.row_size
        if self.is_triangular():
            logger.debug("determinant of triangular %sx%s matrix via diagonal product", size, size)
            product = self.ring.one
            for element in self.diagonal_elements():
                product = self.ring.multiply(product, element, context)
            return product
        if size > 3:
            logger.debug("determinant of %sx%s matrix via Leibniz formula", size, size)
            return self._leibniz_formula(context)
        if size == 3:
            logger.debug("determinant of 3x3 matrix via rule of Sarrus")
            return self._rule_of_sarrus(context)
        logger.debug("determinant of 2x2 matrix via closed formula")
        return self._two_by_two(context)

    def _leibniz_formula(self, context: PrecisionContext | None) -> Any:
        ring = self.ring
        total = ring.zero
        for permutation in itertools.permutations(range(self.row_size)):
            product = ring.one
            for column, row in enumerate(permutation):
                product = ring.multiply(product, self.table[row][column], context)
            if inversions(permutation) % 2:
                product = ring.negate(product, context)
            total = ring.add(total, product, context)
        return total

    def _rule_of_sarrus(self, context: PrecisionContext | None) -> Any:
        ring = self.ring
        t = self.table

        def product(*positions: tuple[int, int]) -> Any:
            result = ring.one
            for row, column in positions:
                result = ring.multiply(result, t[row - 1][column - 1], context)
            return result

        positive = ring.add(
            ring.add(product((1, 1), (2, 2), (3, 3)), product((1, 2), (2, 3), (3, 1)), context),
            product((1, 3), (2, 1), (3, 2)),
            context,
        )
        negative = ring.add(
            ring.add(product((3, 1), (2, 2), (1, 3)), product((3, 2), (2, 3), (1, 1)), context),
            product((3, 3), (2, 1), (1, 2)),
            context,
        )
        return ring.subtract(positive, negative, context)

    def _two_by_two(self, context: PrecisionContext | None) -> Any:
        ring = self.ring
        (a, b), (c, d) = self.table
        return ring.subtract(ring.multiply(a, d, context), ring.multiply(b, c, context), context)

    def determinant(self) -> Any:
        """
        Determinant of a square matrix.

        Raises:
            MatrixNotSquareError: if the matrix is not square
        """
        self._check_square()
        return self._determinant(None)

    def leibniz_formula(self) -> Any:
        """Determinant by summing over all permutations, for any square size."""
        self._check_square()
        return self._leibniz_formula(None)

    def rule_of_sarrus(self) -> Any:
        """
        Determinant of a 3x3 matrix by the rule of Sarrus.

        Raises:
            InvalidStateError: if the matrix is not 3x3
        """
        if self.row_size != 3 or self.column_size != 3:
            raise InvalidStateError(
                f"expected 3 x 3 matrix but actual {self.row_size} x {self.column_size}",
                row_size=self.row_size,
                column_size=self.column_size,
            )
        return self._rule_of_sarrus(None)

    # Norms

    def _abs_sum(self, elements: Iterable[Any], context: SquareRootContext | None) -> Any:
        total = self.ring.norm_zero
        for element in elements:
            total = self.ring.add_values(total, self.ring.abs(element, context), precision_of(context))
        return total

    def _frobenius_norm_pow2(self, context: PrecisionContext | None) -> Any:
        total = self.ring.pow2_zero
        for element in self.elements():
            total = self.ring.add_values(total, self.ring.abs_pow2(element, context), context)
        return total

    def max_abs_column_sum_norm(self, context: SquareRootContext | None = None) -> Any:
        """Largest column sum of absolute values."""
        context = check_square_root_context(context)
        return max(self._abs_sum((row[j] for row in self.table), context) for j in range(self.column_size))

    def max_abs_row_sum_norm(self, context: SquareRootContext | None = None) -> Any:
        """Largest row sum of absolute values."""
        context = check_square_root_context(context)
        return max(self._abs_sum(row, context) for row in self.table)

    def frobenius_norm_pow2(self) -> Any:
        return self._frobenius_norm_pow2(None)

    def frobenius_norm(self, context: SquareRootContext | None = None) -> Decimal:
        context = check_square_root_context(context)
        return self.ring.sqrt(self._frobenius_norm_pow2(precision_of(context)), context)

    def max_norm(self, context: SquareRootContext | None = None) -> Any:
        context = check_square_root_context(context)
        return max(self.ring.abs(element, context) for element in self.elements())

    # Predicates

    def is_square(self) -> bool:
        return self.row_size == self.column_size

    def is_upper_triangular(self) -> bool:
        """Square with only zeros below the diagonal."""
        if not self.is_square():
            return False
        return all(self.ring.is_zero(cell.value) for cell in self.cells() if cell.row > cell.column)

    def is_lower_triangular(self) -> bool:
        """Square with only zeros above the diagonal."""
        if not self.is_square():
            return False
        return all(self.ring.is_zero(cell.value) for cell in self.cells() if cell.row < cell.column)

    def is_triangular(self) -> bool:
        return self.is_upper_triangular() or self.is_lower_triangular()

    def is_diagonal(self) -> bool:
        return self.is_upper_triangular() and self.is_lower_triangular()

    def is_identity(self) -> bool:
        return self.is_diagonal() and all(self.ring.is_one(element) for element in self.diagonal_elements())

    def is_symmetric(self) -> bool:
        return self.is_square() and self == self.transpose()

    def is_skew_symmetric(self) -> bool:
        return self.is_square() and self.transpose() == self.negate()

    def is_invertible(self) -> bool:
        """Square with a determinant that is a unit of the ring."""
        return self.is_square() and self.ring.is_unit(self.determinant())

    # Python protocol

    def __add__(self, other: Any) -> AbstractMatrix:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> AbstractMatrix:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Any) -> AbstractMatrix:
        if not self.ring.accepts(other):
            return NotImplemented
        return self.scalar_multiply(other)

    __rmul__ = __mul__

    def __matmul__(self, other: Any) -> Any:
        if isinstance(other, type(self)):
            return self.multiply(other)
        if isinstance(other, self.vector_class()):
            return self.multiply_vector(other)
        return NotImplemented

    def __neg__(self) -> AbstractMatrix:
        return self.negate()

    def __pos__(self) -> AbstractMatrix:
        return self

    def __iter__(self) -> Iterator[tuple[Any, ...]]:
        return iter(self.table)

    def __str__(self) -> str:
        return "[" + ", ".join("[" + ", ".join(str(e) for e in row) + "]" for row in self.table) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[list(row) for row in self.table]!r})"


class AbstractContextMatrix(AbstractMatrix):
    """
    Matrix whose elements are approximate.

    The arithmetic methods take an optional PrecisionContext. Without one
    they are exact; only norms round, to DEFAULT_PRECISION_CONTEXT.
    """

    def add(self, summand: AbstractMatrix, context: PrecisionContext | None = None) -> AbstractMatrix:
        summand = self._check_same_shape(summand, "summand")
        return self._add(summand, check_precision_context(context))

    def subtract(self, subtrahend: AbstractMatrix, context: PrecisionContext | None = None) -> AbstractMatrix:
        subtrahend = self._check_same_shape(subtrahend, "subtrahend")
        return self._subtract(subtrahend, check_precision_context(context))

    def multiply(self, factor: AbstractMatrix, context: PrecisionContext | None = None) -> AbstractMatrix:
        factor = self._check_factor(factor)
        return self._multiply(factor, check_precision_context(context))

    def multiply_vector(self, vector: AbstractVector, context: PrecisionContext | None = None) -> AbstractVector:
        vector = self._check_vector(vector)
        return self._multiply_vector(vector, check_precision_context(context))

    def scalar_multiply(self, scalar: Any, context: PrecisionContext | None = None) -> AbstractMatrix:
        scalar = self.ring.coerce(scalar, "scalar")
        return self._scalar_multiply(scalar, check_precision_context(context))

    def negate(self, context: PrecisionContext | None = None) -> AbstractMatrix:
        return self._negate(check_precision_context(context))

    def trace(self, context: PrecisionContext | None = None) -> Any:
        self._check_square()
        return self._trace(check_precision_context(context))

    def determinant(self, context: PrecisionContext | None = None) -> Any:
        self._check_square()
        return self._determinant(check_precision_context(context))

    def frobenius_norm_pow2(self, context: PrecisionContext | None = None) -> Any:
        return self._frobenius_norm_pow2(check_precision_context(context))
