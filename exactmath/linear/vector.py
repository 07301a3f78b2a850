"""
Generic dense vectors.

A vector is an immutable, 1-indexed sequence of elements of one ring. All
arithmetic goes through the class-level ``ring`` so the same code serves
int, Decimal, Fraction and complex elements. Every operation returns a new
vector built through ``VectorBuilder``.
"""

from __future__ import annotations

from abc import abstractmethod
from types import MappingProxyType
from decimal import Decimal
from typing import TYPE_CHECKING, Any, ClassVar, Iterable, Iterator, Mapping

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.errors import (
    DimensionMismatchError,
    InvalidArgumentError,
    check_index,
    require_not_none,
)
from ..number.ring import ElementRing, precision_of
from ..sqrt import PrecisionContext, SquareRootContext
from .builder import VectorBuilder

if TYPE_CHECKING:
    from .matrix import AbstractMatrix


def check_precision_context(context: Any) -> PrecisionContext | None:
    if context is not None and not isinstance(context, PrecisionContext):
        raise InvalidArgumentError("context", "a PrecisionContext", type(context).__name__)
    return context


def check_square_root_context(context: Any) -> SquareRootContext | None:
    if context is not None and not isinstance(context, SquareRootContext):
        raise InvalidArgumentError("context", "a SquareRootContext", type(context).__name__)
    return context


def square_root_context_for(context: PrecisionContext | None) -> SquareRootContext | None:
    """SquareRootContext using the given precision, or None for the default."""
    return SquareRootContext(precision_context=context) if context is not None else None


class AbstractVector(BaseModel):
    """
    Immutable vector over the elements of ``ring``.

    Subclasses set ``ring`` and implement ``matrix_class`` naming their
    partner matrix type.

    Examples:
        >>> v = IntegerVector.of(3, 4)
        >>> v.taxicab_norm()
        7
        >>> v @ IntegerVector.of(1, 1)
        7
    """

    model_config = ConfigDict(frozen=True)

    ring: ClassVar[ElementRing]

    components: tuple[Any, ...] = Field(description="Elements in index order")

    def __init__(self, components: Iterable[Any], **kwargs: Any):
        require_not_none(components, "components")
        super().__init__(components=tuple(components), **kwargs)

    @field_validator("components")
    @classmethod
    def _validate_components(cls, value: tuple[Any, ...]) -> tuple[Any, ...]:
        if not value:
            raise InvalidArgumentError("size", "size > 0", 0)
        return tuple(cls.ring.coerce(element, f"element {index}") for index, element in enumerate(value, 1))

    # Construction

    @classmethod
    def builder(cls, size: int) -> VectorBuilder:
        """Return a VectorBuilder producing instances of this class."""
        return VectorBuilder(cls, size)

    @classmethod
    def of(cls, *elements: Any) -> AbstractVector:
        return cls.from_iterable(elements)

    @classmethod
    def from_iterable(cls, values: Iterable[Any] | np.ndarray) -> AbstractVector:
        """Build a vector from an iterable or a one-dimensional numpy array."""
        require_not_none(values, "values")
        if isinstance(values, np.ndarray):
            if values.ndim != 1:
                raise InvalidArgumentError("values", "a one-dimensional array", f"{values.ndim} dimensions")
            values = values.tolist()
        elements = list(values)
        if not elements:
            raise InvalidArgumentError("size", "size > 0", 0)
        builder = cls.builder(len(elements))
        for element in elements:
            builder.append(element)
        return builder.build()

    @classmethod
    @abstractmethod
    def matrix_class(cls) -> type:
        """Matrix type produced by dyadic_product."""

    # Accessors

    @property
    def size(self) -> int:
        return len(self.components)

    def indexes(self) -> range:
        return range(1, self.size + 1)

    def element(self, index: int) -> Any:
        """
        Return the element at a 1-based index.

        Raises:
            OutOfRangeError: if index is not in [1, size]
        """
        check_index(index, self.size)
        return self.components[index - 1]

    def entries(self) -> Mapping[int, Any]:
        """Read-only mapping of index to element in index order."""
        return MappingProxyType(dict(zip(self.indexes(), self.components)))

    def elements(self) -> tuple[Any, ...]:
        return self.components

    def to_numpy(self) -> np.ndarray:
        """Object array holding the elements."""
        array = np.empty(self.size, dtype=object)
        for position, element in enumerate(self.components):
            array[position] = element
        return array

    # Validation

    def _check_vector(self, other: Any, name: str) -> AbstractVector:
        require_not_none(other, name)
        if not isinstance(other, type(self)):
            raise InvalidArgumentError(name, f"a {type(self).__name__}", type(other).__name__)
        return other

    def _check_same_size(self, other: Any, name: str) -> AbstractVector:
        other = self._check_vector(other, name)
        if self.size != other.size:
            raise DimensionMismatchError("equal sizes", self.size, other.size)
        return other

    def _new(self, elements: Iterable[Any]) -> AbstractVector:
        return type(self).from_iterable(elements)

    # Arithmetic

    def _add(self, summand: AbstractVector, context: PrecisionContext | None) -> AbstractVector:
        return self._new(self.ring.add(a, b, context) for a, b in zip(self.components, summand.components))

    def _subtract(self, subtrahend: AbstractVector, context: PrecisionContext | None) -> AbstractVector:
        return self._new(self.ring.subtract(a, b, context) for a, b in zip(self.components, subtrahend.components))

    def _scalar_multiply(self, scalar: Any, context: PrecisionContext | None) -> AbstractVector:
        return self._new(self.ring.multiply(scalar, element, context) for element in self.components)

    def _negate(self, context: PrecisionContext | None) -> AbstractVector:
        return self._new(self.ring.negate(element, context) for element in self.components)

    def _dot_product(self, other: AbstractVector, context: PrecisionContext | None) -> Any:
        return self.ring.sum(
            (self.ring.multiply(a, b, context) for a, b in zip(self.components, other.components)), context
        )

    def _dyadic_product(self, other: AbstractVector, context: PrecisionContext | None) -> AbstractMatrix:
        rows = [[self.ring.multiply(a, b, context) for b in other.components] for a in self.components]
        return self.matrix_class().from_rows(rows)

    def add(self, summand: AbstractVector) -> AbstractVector:
        """
        Elementwise sum.

        Raises:
            DimensionMismatchError: if the sizes differ
        """
        summand = self._check_same_size(summand, "summand")
        return self._add(summand, None)

    def subtract(self, subtrahend: AbstractVector) -> AbstractVector:
        """
        Elementwise difference.

        Raises:
            DimensionMismatchError: if the sizes differ
        """
        subtrahend = self._check_same_size(subtrahend, "subtrahend")
        return self._subtract(subtrahend, None)

    def scalar_multiply(self, scalar: Any) -> AbstractVector:
        scalar = self.ring.coerce(scalar, "scalar")
        return self._scalar_multiply(scalar, None)

    def negate(self) -> AbstractVector:
        return self._negate(None)

    def dot_product(self, other: AbstractVector) -> Any:
        """Sum of ``element(i) * other.element(i)`` from index 1 up."""
        other = self._check_same_size(other, "other")
        return self._dot_product(other, None)

    def dyadic_product(self, other: AbstractVector) -> AbstractMatrix:
        """``size x other.size`` matrix with cells ``element(i) * other.element(j)``."""
        other = self._check_vector(other, "other")
        return self._dyadic_product(other, None)

    def is_orthogonal_to(self, other: AbstractVector) -> bool:
        return self.ring.is_zero(self.dot_product(other))

    # Norms

    def _taxicab_norm(self, context: SquareRootContext | None) -> Any:
        total = self.ring.norm_zero
        for element in self.components:
            total = self.ring.add_values(total, self.ring.abs(element, context), precision_of(context))
        return total

    def _euclidean_norm_pow2(self, context: PrecisionContext | None) -> Any:
        total = self.ring.pow2_zero
        for element in self.components:
            total = self.ring.add_values(total, self.ring.abs_pow2(element, context), context)
        return total

    def _max_norm(self, context: SquareRootContext | None) -> Any:
        return max(self.ring.abs(element, context) for element in self.components)

    def taxicab_norm(self, context: SquareRootContext | None = None) -> Any:
        """Sum of the absolute values."""
        return self._taxicab_norm(check_square_root_context(context))

    def euclidean_norm_pow2(self) -> Any:
        """Sum of the squared absolute values."""
        return self._euclidean_norm_pow2(None)

    def euclidean_norm(self, context: SquareRootContext | None = None) -> Decimal:
        """Square root of ``euclidean_norm_pow2`` as a Decimal."""
        context = check_square_root_context(context)
        return self.ring.sqrt(self._euclidean_norm_pow2(precision_of(context)), context)

    def max_norm(self, context: SquareRootContext | None = None) -> Any:
        """Largest absolute value."""
        return self._max_norm(check_square_root_context(context))

    # Distances

    def taxicab_distance(self, other: AbstractVector, context: SquareRootContext | None = None) -> Any:
        other = self._check_same_size(other, "other")
        context = check_square_root_context(context)
        return self._subtract(other, precision_of(context))._taxicab_norm(context)

    def euclidean_distance_pow2(self, other: AbstractVector) -> Any:
        other = self._check_same_size(other, "other")
        return self._subtract(other, None)._euclidean_norm_pow2(None)

    def euclidean_distance(self, other: AbstractVector, context: SquareRootContext | None = None) -> Decimal:
        other = self._check_same_size(other, "other")
        context = check_square_root_context(context)
        precision = precision_of(context)
        return self.ring.sqrt(self._subtract(other, precision)._euclidean_norm_pow2(precision), context)

    def max_distance(self, other: AbstractVector, context: SquareRootContext | None = None) -> Any:
        other = self._check_same_size(other, "other")
        context = check_square_root_context(context)
        return self._subtract(other, precision_of(context))._max_norm(context)

    # Python protocol

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[Any]:
        return iter(self.components)

    def __add__(self, other: Any) -> AbstractVector:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> AbstractVector:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Any) -> AbstractVector:
        if not self.ring.accepts(other):
            return NotImplemented
        return self.scalar_multiply(other)

    __rmul__ = __mul__

    def __matmul__(self, other: Any) -> Any:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.dot_product(other)

    def __neg__(self) -> AbstractVector:
        return self.negate()

    def __pos__(self) -> AbstractVector:
        return self

    def __str__(self) -> str:
        return "(" + ", ".join(str(element) for element in self.components) + ")"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.components)!r})"


class AbstractContextVector(AbstractVector):
    """
    Vector whose elements are approximate.

    The arithmetic methods take an optional PrecisionContext that controls
    precision and rounding of every step. Without one they are exact; only
    norms and distances round, to DEFAULT_PRECISION_CONTEXT.
    """

    def add(self, summand: AbstractVector, context: PrecisionContext | None = None) -> AbstractVector:
        summand = self._check_same_size(summand, "summand")
        return self._add(summand, check_precision_context(context))

    def subtract(self, subtrahend: AbstractVector, context: PrecisionContext | None = None) -> AbstractVector:
        subtrahend = self._check_same_size(subtrahend, "subtrahend")
        return self._subtract(subtrahend, check_precision_context(context))

    def scalar_multiply(self, scalar: Any, context: PrecisionContext | None = None) -> AbstractVector:
        scalar = self.ring.coerce(scalar, "scalar")
        return self._scalar_multiply(scalar, check_precision_context(context))

    def negate(self, context: PrecisionContext | None = None) -> AbstractVector:
        return self._negate(check_precision_context(context))

    def dot_product(self, other: AbstractVector, context: PrecisionContext | None = None) -> Any:
        other = self._check_same_size(other, "other")
        return self._dot_product(other, check_precision_context(context))

    def dyadic_product(self, other: AbstractVector, context: PrecisionContext | None = None) -> AbstractMatrix:
        other = self._check_vector(other, "other")
        return self._dyadic_product(other, check_precision_context(context))

    def is_orthogonal_to(self, other: AbstractVector, context: PrecisionContext | None = None) -> bool:
        return self.ring.is_zero(self.dot_product(other, context))

    def euclidean_norm_pow2(self, context: PrecisionContext | None = None) -> Any:
        return self._euclidean_norm_pow2(check_precision_context(context))

    def taxicab_distance(self, other: AbstractVector, context: PrecisionContext | None = None) -> Any:
        other = self._check_same_size(other, "other")
        context = check_precision_context(context)
        return self._subtract(other, context)._taxicab_norm(square_root_context_for(context))

    def euclidean_distance_pow2(self, other: AbstractVector, context: PrecisionContext | None = None) -> Any:
        other = self._check_same_size(other, "other")
        context = check_precision_context(context)
        return self._subtract(other, context)._euclidean_norm_pow2(context)

    def max_distance(self, other: AbstractVector, context: PrecisionContext | None = None) -> Any:
        other = self._check_same_size(other, "other")
        context = check_precision_context(context)
        return self._subtract(other, context)._max_norm(square_root_context_for(context))
