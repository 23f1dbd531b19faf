"""Conversions between additive and multiplicative representations.

additive -> multiplicative:
    ln|x| ± ln(1 + Δx/|x|), sign taken from x.
multiplicative -> additive:
    x ± |x|·(m - 1), where m is the multiplicative error factor.

A round trip reproduces the original value and absolute error to floating
point precision for any finite, non-zero input.
"""

from __future__ import annotations

import math

from ..core.value import UncertainValue
from ..errors import InvalidMultiplicativeErrorError, NonFiniteError, ZeroInputError
from ..signum import Signum
from .value import MultiplicativeUncertainValue


def to_multiplicative(uv: UncertainValue) -> MultiplicativeUncertainValue:
    """Convert an additive value to log-domain form.

    Args:
        uv: Additive value with a finite, non-zero central value.

    Returns:
        MultiplicativeUncertainValue: Value with error factor
        ``1 + uv.relative_error``.

    Raises:
        ZeroInputError: If ``uv.value`` is exactly zero.
        NonFiniteError: If the value, relative error or error factor is not
            finite.
        InvalidMultiplicativeErrorError: If the error factor is below 1.
    """
    value = uv.value
    if value == 0:
        raise ZeroInputError("Cannot convert zero to a multiplicative value")
    if not math.isfinite(value):
        raise NonFiniteError(f"Cannot convert non-finite value {value!r}")
    rel = uv.relative_error
    if not math.isfinite(rel):
        raise NonFiniteError(f"Relative error {rel!r} is not finite")
    factor = 1.0 + rel
    if not math.isfinite(factor):
        raise NonFiniteError(f"Multiplicative error {factor!r} is not finite")
    if factor < 1:
        raise InvalidMultiplicativeErrorError(
            f"Multiplicative error must be >= 1, got {factor!r}"
        )
    return MultiplicativeUncertainValue(
        UncertainValue(math.log(abs(value)), math.log(factor)), Signum.of(value)
    )


def to_uncertain_value(muv: MultiplicativeUncertainValue) -> UncertainValue:
    """Convert a log-domain value back to additive form. Never fails."""
    return UncertainValue.with_relative_error(muv.value, muv.relative_error)
