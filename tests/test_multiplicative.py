"""Tests for log-domain multiplicative uncertain values."""

import math

import pytest

from errbar.core.value import UncertainValue
from errbar.errors import (
    InvalidMultiplicativeErrorError,
    InvalidScaleError,
    NegativeInputError,
    NonFiniteError,
    ZeroInputError,
)
from errbar.multiplicative.value import MultiplicativeUncertainValue as MUV
from errbar.norms import L1, L2
from errbar.signum import Signum


def assert_muv_close(a, b, rel_tol=1e-12):
    assert a.sign is b.sign
    assert math.isclose(a.value, b.value, rel_tol=rel_tol)
    assert math.isclose(a.multiplicative_error, b.multiplicative_error, rel_tol=rel_tol)


class TestConstruction:
    def test_from_value(self):
        muv = MUV.from_value(-8.0, 1.5)
        assert muv.sign is Signum.NEGATIVE
        assert math.isclose(muv.value, -8.0)
        assert math.isclose(muv.multiplicative_error, 1.5)
        assert math.isclose(muv.relative_error, 0.5)

    def test_default_error_is_exact(self):
        muv = MUV.from_value(3.0)
        assert muv.multiplicative_error == 1.0
        assert muv.relative_error == 0.0

    def test_zero_rejected(self):
        with pytest.raises(ZeroInputError):
            MUV.from_value(0.0, 1.1)
        with pytest.raises(ZeroInputError):
            MUV(UncertainValue(0.0, 0.0), Signum.ZERO)

    def test_factor_below_one_rejected(self):
        with pytest.raises(InvalidMultiplicativeErrorError, match=">= 1"):
            MUV.from_value(2.0, 0.9)

    def test_non_finite_rejected(self):
        with pytest.raises(NonFiniteError):
            MUV.from_value(math.inf, 1.1)
        with pytest.raises(NonFiniteError):
            MUV.from_value(2.0, math.nan)
        with pytest.raises(NonFiniteError):
            MUV(UncertainValue(math.inf, 0.0))

    def test_exp_and_one(self):
        muv = MUV.exp(UncertainValue(math.log(5.0), math.log(1.2)), Signum.NEGATIVE)
        assert math.isclose(muv.value, -5.0)
        assert MUV.one().value == 1.0
        assert MUV.one().multiplicative_error == 1.0


class TestAccessors:
    def test_bounds_positive(self):
        muv = MUV.from_value(10.0, 2.0)
        lower, upper = muv.bounds
        assert math.isclose(lower, 5.0)
        assert math.isclose(upper, 20.0)

    def test_bounds_negative(self):
        muv = MUV.from_value(-10.0, 2.0)
        assert math.isclose(muv.lower_bound, -20.0)
        assert math.isclose(muv.upper_bound, -5.0)

    def test_absolute_and_negative(self):
        muv = MUV.from_value(-4.0, 1.1)
        assert muv.absolute.sign is Signum.POSITIVE
        assert muv.absolute.absolute == muv.absolute
        assert muv.negative.negative == muv
        assert muv.signum is Signum.NEGATIVE

    def test_value_overflow_is_infinite(self):
        muv = MUV(UncertainValue(1000.0, 0.0))
        assert muv.value == math.inf


class TestProduct:
    def test_values_multiply_and_errors_combine_in_log_space(self):
        a = MUV.from_value(2.0, math.exp(0.3))
        b = MUV.from_value(-3.0, math.exp(0.4))
        result = a.multiplying(b, L2)
        assert math.isclose(result.value, -6.0)
        assert math.isclose(math.log(result.multiplicative_error), 0.5, rel_tol=1e-12)

    def test_sign_parity(self):
        values = [MUV.from_value(-2.0), MUV.from_value(-3.0), MUV.from_value(4.0)]
        result = MUV.product(values, L1)
        assert result.sign is Signum.POSITIVE
        assert math.isclose(result.value, 24.0)

    def test_identities(self):
        a = MUV.from_value(7.0, 1.3)
        assert MUV.product([], L2) == MUV.one()
        assert MUV.product([a], L2) == a

    def test_product_overflowing_log_range(self):
        big = MUV(UncertainValue(1e308, 0.0))
        with pytest.raises(NonFiniteError):
            MUV.product([big, big], L1)

    def test_dividing(self):
        a = MUV.from_value(6.0, 1.1)
        b = MUV.from_value(-2.0, 1.1)
        result = a.dividing(b, L1)
        assert math.isclose(result.value, -3.0)
        assert math.isclose(result.multiplicative_error, 1.21)


class TestReciprocal:
    def test_involution(self):
        muv = MUV.from_value(-0.25, 1.7)
        assert_muv_close(muv.reciprocal().reciprocal(), muv)

    def test_reciprocal_keeps_error(self):
        result = MUV.from_value(4.0, 1.5).reciprocal()
        assert math.isclose(result.value, 0.25)
        assert math.isclose(result.multiplicative_error, 1.5)

    def test_tiny_value_never_fails(self):
        result = MUV.from_value(1e-300, 1.0).reciprocal()
        assert math.isclose(result.value, 1e300)


class TestScaling:
    def test_scaled_up(self):
        result = MUV.from_value(3.0, 1.2).scaled_up(-2.0)
        assert math.isclose(result.value, -6.0)
        assert math.isclose(result.multiplicative_error, 1.2)

    def test_scaled_down_is_inverse(self):
        muv = MUV.from_value(3.0, 1.2)
        assert_muv_close(muv.scaled_up(7.0).scaled_down(7.0), muv)

    @pytest.mark.parametrize("factor", [0.0, math.inf, math.nan])
    def test_invalid_scale(self, factor):
        muv = MUV.from_value(3.0, 1.2)
        with pytest.raises(InvalidScaleError):
            muv.scaled_up(factor)
        with pytest.raises(InvalidScaleError):
            muv.scaled_down(factor)


class TestPowers:
    def test_real_power(self):
        result = MUV.from_value(9.0, 1.21).raised(0.5)
        assert math.isclose(result.value, 3.0)
        assert math.isclose(result.multiplicative_error, 1.1)

    def test_real_power_of_negative(self):
        with pytest.raises(NegativeInputError):
            MUV.from_value(-9.0, 1.2).raised(0.5)

    def test_real_power_overflow(self):
        with pytest.raises(NonFiniteError):
            MUV.from_value(10.0, 1.0).raised(1e308)

    @pytest.mark.parametrize("n, expected", [(2, 4.0), (3, -8.0), (-1, -0.5), (0, 1.0)])
    def test_integer_power_sign_parity(self, n, expected):
        result = MUV.from_value(-2.0, 1.1).raised_to_integer(n)
        assert math.isclose(result.value, expected)
        assert math.isclose(math.log(result.multiplicative_error), abs(n) * math.log(1.1))


class TestOperators:
    def test_operators(self):
        a = MUV.from_value(2.0, 1.1)
        b = MUV.from_value(4.0, 1.2)
        assert a * b == a.multiplying(b, L2)
        assert a / b == a.dividing(b, L2)
        assert math.isclose((a * 3).value, 6.0)
        assert math.isclose((3 * a).value, 6.0)
        assert math.isclose((a / 4).value, 0.5)
        assert math.isclose((1 / a).value, 0.5)
        assert math.isclose((-a).value, -2.0)
        assert abs(-a) == a
        assert math.isclose((b**2).value, 16.0)
        assert math.isclose((b**0.5).value, 2.0)

    def test_str(self):
        assert str(MUV.from_value(2.0, 1.5)) == "2 */ 1.5"
