import math

import pytest

from errbar.bounds import BoundedValue, bounded, bounded_frame
from errbar.core.value import UncertainValue
from errbar.errors import InvalidValueError
from errbar.multiplicative.value import MultiplicativeUncertainValue


def test_plain_float_is_degenerate():
    assert bounded(2.5) == BoundedValue(2.5, 2.5, 2.5)
    assert bounded(3) == BoundedValue(3.0, 3.0, 3.0)


def test_uncertain_value():
    b = bounded(UncertainValue(5.0, 0.5))
    assert b == BoundedValue(5.0, 4.5, 5.5)
    assert b.half_width == 0.5


def test_multiplicative_value():
    b = bounded(MultiplicativeUncertainValue.from_value(-10.0, 2.0))
    assert math.isclose(b.value, -10.0)
    assert math.isclose(b.lower_bound, -20.0)
    assert math.isclose(b.upper_bound, -5.0)


@pytest.mark.parametrize("bad", [True, "1.0", None])
def test_unsupported_types(bad):
    with pytest.raises(InvalidValueError, match="Cannot derive bounds"):
        bounded(bad)


def test_bounded_frame():
    frame = bounded_frame({"length": UncertainValue(5.0, 0.5), "count": 7.0})
    assert list(frame.index) == ["length", "count"]
    assert list(frame.columns) == ["value", "lower_bound", "upper_bound"]
    assert frame.loc["length", "lower_bound"] == 4.5
    assert frame.loc["count", "upper_bound"] == 7.0
