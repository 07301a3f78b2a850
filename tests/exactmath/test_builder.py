"""Tests for VectorBuilder and MatrixBuilder."""

from decimal import Decimal

import pytest

from exactmath.core.errors import (
    IncompleteConstructionError,
    InvalidArgumentError,
    InvalidStateError,
    NullArgumentError,
    OutOfRangeError,
)
from exactmath.linear import (
    DecimalVector,
    FractionMatrix,
    IntegerMatrix,
    IntegerVector,
    MatrixBuilder,
    VectorBuilder,
)
from exactmath.number import Fraction


class TestVectorBuilder:
    """Test staged construction of vectors."""

    def test_put_and_build(self):
        """Test every index set gives a vector."""
        vector = IntegerVector.builder(3).put(3, 30).put(1, 10).put(2, 20).build()
        assert vector == IntegerVector.of(10, 20, 30)

    def test_append_fills_lowest_free_index(self):
        """Test append writes the lowest index not yet set."""
        vector = IntegerVector.builder(3).put(2, 20).append(10).append(30).build()
        assert vector == IntegerVector.of(10, 20, 30)

    def test_append_when_full(self):
        """Test append on a full builder raises InvalidStateError."""
        builder = IntegerVector.builder(1).append(1)
        with pytest.raises(InvalidStateError):
            builder.append(2)

    def test_append_skips_indexes_set_by_put(self):
        """Test append after puts ahead of it fills only the gaps."""
        builder = IntegerVector.builder(5).put(1, 10).put(3, 30).put(4, 40)
        vector = builder.append(20).append(50).build()
        assert vector == IntegerVector.of(10, 20, 30, 40, 50)
        with pytest.raises(InvalidStateError):
            builder.append(60)

    def test_append_builds_long_vectors(self):
        """Test a 20000 element vector built by append and added to itself."""
        size = 20000
        builder = IntegerVector.builder(size)
        for value in range(size):
            builder.append(value)
        vector = builder.build()
        total = vector.add(vector)
        assert total.size == size
        assert total.element(size) == 2 * (size - 1)
        assert IntegerVector.from_iterable(range(size)) == vector

    def test_last_put_wins(self):
        """Test overwriting an index."""
        assert IntegerVector.builder(1).put(1, 5).put(1, 6).build() == IntegerVector.of(6)

    def test_incomplete_build(self):
        """Test build lists the missing indexes."""
        builder = IntegerVector.builder(3).put(2, 1)
        with pytest.raises(IncompleteConstructionError) as exc_info:
            builder.build()
        assert exc_info.value.missing == (1, 3)

    @pytest.mark.parametrize("index", [0, 4])
    def test_put_out_of_range(self, index):
        """Test indexes outside [1, size] raise OutOfRangeError."""
        with pytest.raises(OutOfRangeError):
            IntegerVector.builder(3).put(index, 1)

    def test_put_none(self):
        """Test None index or element raises NullArgumentError."""
        builder = IntegerVector.builder(2)
        with pytest.raises(NullArgumentError):
            builder.put(None, 1)
        with pytest.raises(NullArgumentError):
            builder.put(1, None)
        with pytest.raises(NullArgumentError):
            builder.append(None)

    def test_put_wrong_type(self):
        """Test elements are checked against the ring."""
        with pytest.raises(InvalidArgumentError):
            IntegerVector.builder(2).put(1, Decimal("1.5"))

    def test_int_promoted_for_decimal(self):
        """Test ints are converted for DecimalVector."""
        vector = DecimalVector.builder(1).put(1, 3).build()
        assert isinstance(vector.element(1), Decimal)

    def test_put_all_and_nulls_to_element(self):
        """Test bulk setters."""
        assert IntegerVector.builder(3).put_all(7).build() == IntegerVector.of(7, 7, 7)
        assert IntegerVector.builder(3).put(2, 5).nulls_to_element(0).build() == IntegerVector.of(0, 5, 0)

    def test_reusable_after_build(self):
        """Test the builder can keep building after build()."""
        builder = IntegerVector.builder(2).put_all(1)
        first = builder.build()
        second = builder.put(2, 9).build()
        assert first == IntegerVector.of(1, 1)
        assert second == IntegerVector.of(1, 9)

    @pytest.mark.parametrize("size", [0, -1])
    def test_invalid_size(self, size):
        """Test size must be positive."""
        with pytest.raises(InvalidArgumentError):
            IntegerVector.builder(size)

    def test_target_must_be_concrete(self):
        """Test the target class needs a ring."""
        with pytest.raises(InvalidArgumentError):
            VectorBuilder(list, 2)

    def test_missing(self):
        """Test missing() before and after puts."""
        builder = IntegerVector.builder(2)
        assert builder.missing() == [1, 2]
        builder.put(1, 0)
        assert builder.missing() == [2]


class TestMatrixBuilder:
    """Test staged construction of matrices."""

    def test_put_and_build(self):
        """Test every cell set gives a matrix."""
        builder = IntegerMatrix.builder(2, 2)
        builder.put(1, 1, 1).put(1, 2, 2).put(2, 1, 3).put(2, 2, 4)
        assert builder.build() == IntegerMatrix.from_rows([[1, 2], [3, 4]])

    def test_single_put_is_incomplete(self):
        """Test a (2, 2) builder with only (1, 1) set fails at build."""
        builder = IntegerMatrix.builder(2, 2).put(1, 1, 5)
        with pytest.raises(IncompleteConstructionError) as exc_info:
            builder.build()
        assert exc_info.value.missing == ((1, 2), (2, 1), (2, 2))

    @pytest.mark.parametrize("row, column", [(0, 1), (3, 1), (1, 0), (1, 4)])
    def test_put_out_of_range(self, row, column):
        """Test row and column are bounds-checked."""
        with pytest.raises(OutOfRangeError):
            IntegerMatrix.builder(2, 3).put(row, column, 1)

    def test_put_wrong_type(self):
        """Test cells are checked against the ring."""
        with pytest.raises(InvalidArgumentError):
            FractionMatrix.builder(1, 1).put(1, 1, Decimal("0.5"))

    def test_put_none(self):
        """Test None arguments raise NullArgumentError."""
        builder = IntegerMatrix.builder(1, 1)
        with pytest.raises(NullArgumentError):
            builder.put(None, 1, 1)
        with pytest.raises(NullArgumentError):
            builder.put(1, 1, None)

    def test_nulls_to_element(self):
        """Test unset cells are filled."""
        matrix = FractionMatrix.builder(2, 2).put(1, 2, Fraction(1, 2)).nulls_to_element(0).build()
        assert matrix == FractionMatrix.from_rows([[0, Fraction(1, 2)], [0, 0]])

    def test_put_all(self):
        """Test every cell set to one element."""
        assert IntegerMatrix.builder(1, 2).put_all(3).build() == IntegerMatrix.from_rows([[3, 3]])

    def test_invalid_sizes(self):
        """Test row and column sizes must be positive."""
        with pytest.raises(InvalidArgumentError):
            MatrixBuilder(IntegerMatrix, 0, 1)
        with pytest.raises(InvalidArgumentError):
            IntegerMatrix.builder(1, 0)

    def test_reusable_after_build(self):
        """Test the builder can keep building after build()."""
        builder = IntegerMatrix.builder(1, 1).put(1, 1, 1)
        assert builder.build() == IntegerMatrix.from_rows([[1]])
        assert builder.put(1, 1, 2).build() == IntegerMatrix.from_rows([[2]])
