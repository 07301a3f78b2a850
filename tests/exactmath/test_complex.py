"""Tests for SimpleComplexNumber, RealComplexNumber and PolarForm."""

from decimal import Decimal

import pytest

from exactmath.core.errors import (
    InvalidArgumentError,
    InvalidStateError,
    NotInvertibleError,
    NullArgumentError,
)
from exactmath.linear import DecimalMatrix, IntegerMatrix
from exactmath.number import PolarForm, RealComplexNumber, SimpleComplexNumber

PI = Decimal("3.14159265358979323846264338327950288")


class TestSimpleComplexNumberInstantiation:
    """Test construction of Gaussian integers."""

    def test_parts(self):
        """Test real and imaginary parts are stored."""
        z = SimpleComplexNumber(2, -3)
        assert z.real == 2
        assert z.imaginary == -3

    def test_imaginary_defaults_to_zero(self):
        """Test the imaginary part is optional."""
        assert SimpleComplexNumber(4) == SimpleComplexNumber(4, 0)

    def test_non_int_rejected(self):
        """Test non-int parts raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            SimpleComplexNumber(1.5, 0)

    def test_none_rejected(self):
        """Test None parts raise NullArgumentError."""
        with pytest.raises(NullArgumentError):
            SimpleComplexNumber(1, None)

    def test_constants(self):
        """Test ZERO, ONE and IMAGINARY."""
        assert SimpleComplexNumber.ZERO == SimpleComplexNumber(0, 0)
        assert SimpleComplexNumber.ONE == SimpleComplexNumber(1, 0)
        assert SimpleComplexNumber.IMAGINARY == SimpleComplexNumber(0, 1)


class TestSimpleComplexNumberArithmetic:
    """Test exact arithmetic on Gaussian integers."""

    def test_add_subtract(self):
        """Test componentwise addition and subtraction."""
        a = SimpleComplexNumber(1, 2)
        b = SimpleComplexNumber(3, -1)
        assert a.add(b) == SimpleComplexNumber(4, 1)
        assert a.subtract(b) == SimpleComplexNumber(-2, 3)

    def test_multiply(self):
        """Test (1 + 2i)(3 - i) = 5 + 5i."""
        assert SimpleComplexNumber(1, 2).multiply(SimpleComplexNumber(3, -1)) == SimpleComplexNumber(5, 5)

    def test_pow(self):
        """Test (1 + i)^2 = 2i and i^4 = 1."""
        assert SimpleComplexNumber(1, 1).pow(2) == SimpleComplexNumber(0, 2)
        assert SimpleComplexNumber.IMAGINARY.pow(4) == SimpleComplexNumber.ONE
        assert SimpleComplexNumber(5, 7).pow(0) == SimpleComplexNumber.ONE

    def test_negative_exponent_rejected(self):
        """Test negative exponents raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            SimpleComplexNumber(1, 1).pow(-2)

    def test_divide_returns_real_complex_number(self):
        """Test (1 + 2i) / (1 + i) = 1.5 + 0.5i."""
        quotient = SimpleComplexNumber(1, 2).divide(SimpleComplexNumber(1, 1))
        assert isinstance(quotient, RealComplexNumber)
        assert quotient == RealComplexNumber(Decimal("1.5"), Decimal("0.5"))

    def test_divide_by_zero(self):
        """Test division by zero raises NotInvertibleError."""
        with pytest.raises(NotInvertibleError):
            SimpleComplexNumber(1, 2).divide(SimpleComplexNumber.ZERO)

    def test_invert(self):
        """Test 1 / i = -i."""
        assert SimpleComplexNumber.IMAGINARY.invert() == RealComplexNumber(0, -1)

    def test_operators(self):
        """Test Python operators with int operands."""
        z = SimpleComplexNumber(1, 1)
        assert z + 1 == SimpleComplexNumber(2, 1)
        assert 2 * z == SimpleComplexNumber(2, 2)
        assert -z == SimpleComplexNumber(-1, -1)
        assert z ** 2 == SimpleComplexNumber(0, 2)

    def test_conjugate(self):
        """Test conjugation flips the imaginary sign."""
        assert SimpleComplexNumber(3, 4).conjugate() == SimpleComplexNumber(3, -4)

    def test_units(self):
        """Test that exactly 1, -1, i and -i are units."""
        for unit in [(1, 0), (-1, 0), (0, 1), (0, -1)]:
            assert SimpleComplexNumber(*unit).is_unit()
        assert not SimpleComplexNumber(1, 1).is_unit()
        assert not SimpleComplexNumber.ZERO.is_invertible()


class TestSimpleComplexNumberAbs:
    """Test absolute values."""

    def test_abs_pow2_is_exact(self):
        """Test |3 + 4i|^2 = 25 as int."""
        assert SimpleComplexNumber(3, 4).abs_pow2() == 25

    def test_abs(self, assert_decimal_close):
        """Test |3 + 4i| = 5 via square root."""
        assert_decimal_close(SimpleComplexNumber(3, 4).abs(), 5)
        assert_decimal_close(abs(SimpleComplexNumber(3, 4)), 5)

    def test_abs_with_context(self, tight_sqrt_context, assert_decimal_close):
        """Test |1 + i| = sqrt(2) to 20 places."""
        value = SimpleComplexNumber(1, 1).abs(tight_sqrt_context)
        assert_decimal_close(value, "1.41421356237309504880", "1E-19")


class TestSimpleComplexNumberConversion:
    """Test string and matrix representations."""

    def test_to_string(self):
        """Test readable output."""
        assert str(SimpleComplexNumber(1, -2)) == "1 - 2i"
        assert str(SimpleComplexNumber(0, 3)) == "3i"
        assert str(SimpleComplexNumber(4, 0)) == "4"

    def test_repr(self):
        """Test repr shows the constructor call."""
        assert repr(SimpleComplexNumber(5, 5)) == "SimpleComplexNumber(5, 5)"

    def test_matrix(self):
        """Test the 2x2 real representation."""
        assert SimpleComplexNumber(2, 3).matrix() == IntegerMatrix.from_rows([[2, -3], [3, 2]])

    def test_matrix_multiplication_matches_number_multiplication(self):
        """Test matrix() is a ring homomorphism on a sample."""
        a = SimpleComplexNumber(1, 2)
        b = SimpleComplexNumber(3, -1)
        assert a.matrix().multiply(b.matrix()) == a.multiply(b).matrix()


class TestRealComplexNumber:
    """Test Decimal-valued complex numbers."""

    def test_int_parts_promoted(self):
        """Test ints become Decimals."""
        z = RealComplexNumber(1, 2)
        assert isinstance(z.real, Decimal)
        assert z.imaginary == Decimal(2)

    def test_of_simple_complex_number(self):
        """Test conversion from SimpleComplexNumber."""
        assert RealComplexNumber.of(SimpleComplexNumber(3, -4)) == RealComplexNumber(3, -4)

    def test_float_rejected(self):
        """Test floats raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            RealComplexNumber(0.5, 0)

    def test_arithmetic(self):
        """Test add, subtract and multiply."""
        a = RealComplexNumber(Decimal("1.5"), Decimal("2"))
        b = RealComplexNumber(Decimal("0.5"), Decimal("-1"))
        assert a.add(b) == RealComplexNumber(2, 1)
        assert a.subtract(b) == RealComplexNumber(1, 3)
        assert a.multiply(b) == RealComplexNumber(Decimal("2.75"), Decimal("-0.5"))

    def test_arithmetic_without_context_is_exact(self):
        """Test parts beyond 34 digits are not rounded."""
        a = RealComplexNumber(Decimal("1E+40"), Decimal("100000000000000000001"))
        b = RealComplexNumber(1, 0)
        total = a.add(b)
        assert total.real == Decimal("10000000000000000000000000000000000000001")
        assert a.subtract(b).real == Decimal("9999999999999999999999999999999999999999")
        assert a.abs_pow2() == Decimal("100000000000000000000000000000000000000010000000000000000000200000000000000000001")
        assert a.negate().negate() == a

    def test_explicit_context_still_rounds(self, low_precision):
        """Test a PrecisionContext rounds the exact operations."""
        a = RealComplexNumber(Decimal("1E+40"), 0)
        assert a.add(RealComplexNumber(1, 0), low_precision).real == Decimal("1.0000E+40")

    def test_long_parts_unit_and_conjugate(self):
        """Test unit detection and conjugation keep every digit."""
        near_one = RealComplexNumber(Decimal("1.000000000000000000000000000000000000001"), 0)
        assert not near_one.is_unit()
        long_part = Decimal("1234567890123456789012345678901234567891")
        z = RealComplexNumber(1, long_part)
        assert z.conjugate().imaginary == Decimal("-1234567890123456789012345678901234567891")
        assert z.conjugate().conjugate() == z
        assert z.to_string() == "1 + 1234567890123456789012345678901234567891i"

    def test_divide_honours_context(self, low_precision):
        """Test division rounds to the given precision."""
        quotient = RealComplexNumber(1, 0).divide(RealComplexNumber(3, 0), low_precision)
        assert quotient.real == Decimal("0.33333")
        assert quotient.imaginary == 0

    def test_divide_by_zero(self):
        """Test division by zero raises NotInvertibleError."""
        with pytest.raises(NotInvertibleError):
            RealComplexNumber(1, 1).divide(RealComplexNumber.ZERO)

    def test_invert(self):
        """Test 1 / (1 + i) = 0.5 - 0.5i."""
        assert RealComplexNumber(1, 1).invert() == RealComplexNumber(Decimal("0.5"), Decimal("-0.5"))

    def test_pow_with_context(self, low_precision):
        """Test pow under a precision context."""
        assert RealComplexNumber(0, 1).pow(2, low_precision) == RealComplexNumber(-1, 0)

    def test_abs_pow2(self):
        """Test |1.5 + 2i|^2 = 6.25."""
        assert RealComplexNumber(Decimal("1.5"), 2).abs_pow2() == Decimal("6.25")

    def test_abs(self, assert_decimal_close):
        """Test |1.5 + 2i| = 2.5."""
        assert_decimal_close(RealComplexNumber(Decimal("1.5"), 2).abs(), "2.5")

    def test_equals_by_comparing_parts(self):
        """Test comparison ignores Decimal scale."""
        a = RealComplexNumber(Decimal("1.0"), Decimal("2.00"))
        b = RealComplexNumber(1, 2)
        assert a.equals_by_comparing_parts(b)
        assert a == b

    def test_matrix(self):
        """Test the 2x2 real representation."""
        z = RealComplexNumber(Decimal("1.5"), 2)
        expected = DecimalMatrix.from_rows([[Decimal("1.5"), -2], [2, Decimal("1.5")]])
        assert z.matrix() == expected

    def test_operators(self):
        """Test operators mixing RealComplexNumber, SimpleComplexNumber and int."""
        z = RealComplexNumber(1, 1)
        assert z + SimpleComplexNumber(1, 0) == RealComplexNumber(2, 1)
        assert z - 1 == RealComplexNumber(0, 1)
        assert z / 2 == RealComplexNumber(Decimal("0.5"), Decimal("0.5"))


class TestArgumentAndPolarForm:
    """Test angles and the polar representation."""

    def test_argument_first_quadrant(self, assert_decimal_close):
        """Test arg(1 + i) = pi / 4."""
        assert_decimal_close(RealComplexNumber(1, 1).argument(), PI / 4, "1E-25")

    def test_argument_negative_real_axis(self, assert_decimal_close):
        """Test arg(-1) = pi."""
        assert_decimal_close(RealComplexNumber(-1, 0).argument(), PI, "1E-30")

    def test_argument_negative_imaginary_axis(self, assert_decimal_close):
        """Test arg(-i) = -pi / 2."""
        assert_decimal_close(SimpleComplexNumber(0, -1).argument(), -PI / 2, "1E-25")

    def test_argument_respects_precision(self, low_precision):
        """Test the argument is rounded to the context precision."""
        assert RealComplexNumber(1, 1).argument(low_precision) == Decimal("0.78540")

    def test_argument_of_zero_rejected(self):
        """Test zero has no argument."""
        with pytest.raises(InvalidStateError):
            RealComplexNumber.ZERO.argument()

    def test_polar_form(self, assert_decimal_close):
        """Test polar form of 3 + 4i."""
        polar = SimpleComplexNumber(3, 4).polar_form()
        assert isinstance(polar, PolarForm)
        assert_decimal_close(polar.radial, 5)
        assert_decimal_close(polar.angular, "0.927295218001612232428512462922428804", "1E-25")

    def test_polar_form_round_trip(self, assert_decimal_close):
        """Test converting back to a complex number."""
        z = RealComplexNumber(Decimal("-2.5"), Decimal("1.25")).polar_form().complex_number()
        assert_decimal_close(z.real, "-2.5", "1E-8")
        assert_decimal_close(z.imaginary, "1.25", "1E-8")

    def test_complex_number_from_exact_angle(self):
        """Test radial 2 at angle 0 is 2."""
        z = PolarForm(Decimal(2), Decimal(0)).complex_number()
        assert z == RealComplexNumber(2, 0)
