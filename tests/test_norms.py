"""Tests for the norms used to combine independent error terms."""

import math

import pytest

from errbar.errors import InvalidValueError, NonFiniteError
from errbar.norms import DEFAULT_NORM, L1, L2, NormStrategy, norm, norm1, norm2, normp


class TestNorm2:
    def test_three_four_five(self):
        assert norm2([3.0, 4.0]) == 5.0

    def test_empty_and_single(self):
        assert norm2([]) == 0.0
        assert norm2([-2.5]) == 2.5

    def test_three_terms(self):
        assert math.isclose(norm2([1.0, 2.0, 2.0]), 3.0, rel_tol=1e-15)

    def test_long_input_is_scaled(self):
        assert math.isclose(norm2([1.0] * 5), math.sqrt(5.0), rel_tol=1e-15)
        assert math.isclose(norm2([1e200] * 4), 2e200, rel_tol=1e-15)
        assert math.isclose(norm2([1e-200] * 4), 2e-200, rel_tol=1e-15)

    def test_all_zero(self):
        assert norm2([0.0, 0.0, 0.0, 0.0, 0.0]) == 0.0

    @pytest.mark.parametrize("x", [1e100, 1e-100, 1e300])
    def test_extreme_magnitudes_do_not_overflow(self, x):
        result = norm(([x, x]), L2)
        assert result == norm2([x, x])
        assert math.isclose(result, x * math.sqrt(2.0), rel_tol=1e-15)


class TestNormp:
    def test_non_positive_exponent_gives_zero(self):
        assert normp([1.0, 2.0], 0) == 0.0
        assert normp([1.0, 2.0], -1.5) == 0.0

    def test_tiny_exponent_overflow(self):
        with pytest.raises(NonFiniteError, match="overflows"):
            norm([1.0, 1.0], NormStrategy.lp(1e-4))

    def test_single_element(self):
        assert normp([-7.0], 3.0) == 7.0

    def test_agrees_with_l1_and_l2(self):
        xs = [0.3, -1.2, 4.0, 0.05, 2.2]
        assert math.isclose(normp(xs, 1.0), norm1(xs), rel_tol=1e-14)
        assert math.isclose(normp(xs, 2.0), norm2(xs), rel_tol=1e-14)

    def test_large_p_approaches_max(self):
        assert math.isclose(normp([1.0, 3.0, 2.0], 200.0), 3.0, rel_tol=1e-6)


def test_norm1_sums_magnitudes():
    assert norm1([3.0, -4.0]) == 7.0
    assert norm1([]) == 0.0


def test_norm_dispatch():
    xs = [3.0, 4.0]
    assert norm(xs, L1) == 7.0
    assert norm(xs, L2) == 5.0
    assert math.isclose(norm(xs, NormStrategy.lp(3)), (27.0 + 64.0) ** (1 / 3))


class TestNormStrategy:
    def test_default_is_l2(self):
        assert DEFAULT_NORM == NormStrategy.L2
        assert L1 == NormStrategy("l1")

    def test_parse(self):
        assert NormStrategy.parse("L1") == L1
        assert NormStrategy.parse(" l2 ") == L2
        assert NormStrategy.parse("lp:3") == NormStrategy.lp(3.0)

    def test_str(self):
        assert str(L2) == "l2"
        assert str(NormStrategy.lp(3)) == "lp:3"

    def test_invalid(self):
        with pytest.raises(InvalidValueError, match="Unknown norm strategy"):
            NormStrategy.parse("max")
        with pytest.raises(InvalidValueError, match="Invalid Lp exponent"):
            NormStrategy.parse("lp:abc")
        with pytest.raises(InvalidValueError, match="requires an exponent"):
            NormStrategy("lp")
        with pytest.raises(InvalidValueError, match="takes no exponent"):
            NormStrategy("l2", 2.0)
