"""Geometric mean as the arithmetic mean of logarithms.

The result is a ``MultiplicativeUncertainValue`` whose ``log_abs`` *is*
``arithmetic_mean(ln|x|)``: the log-space sample standard deviation becomes
the log of the multiplicative error factor.
"""

from __future__ import annotations

import math
from typing import Callable, Sequence

import numpy as np

from ..core.value import UncertainValue
from ..errors import MixedSignsError, ZeroInputError
from ..multiplicative.value import MultiplicativeUncertainValue
from ..signum import Signum
from ._validation import as_finite_array
from .mean import arithmetic_mean, arithmetic_mean_fast


def _common_sign(arr: np.ndarray) -> Signum:
    if np.any(arr == 0):
        raise ZeroInputError("Geometric mean is undefined for zero elements")
    if np.all(arr > 0):
        return Signum.POSITIVE
    if np.all(arr < 0):
        return Signum.NEGATIVE
    raise MixedSignsError("Geometric mean requires values of a single sign")


def _geometric_mean(
    values: Sequence[float], mean: Callable[[Sequence[float]], UncertainValue]
) -> MultiplicativeUncertainValue:
    arr = as_finite_array(values)
    sign = _common_sign(arr)
    log_mean = mean([math.log(abs(x)) for x in arr.tolist()])
    return MultiplicativeUncertainValue(log_mean, sign)


def geometric_mean(values: Sequence[float]) -> MultiplicativeUncertainValue:
    """Geometric mean with log-space sample standard deviation.

    Args:
        values: At least two finite, non-zero values, all positive or all
            negative.

    Returns:
        MultiplicativeUncertainValue: ``exp(mean(ln|x|))`` with the common
        sign reapplied.

    Raises:
        InsufficientElementsError: If fewer than two values are given.
        NonFiniteError: If any value is NaN or infinite.
        ZeroInputError: If any value is zero.
        MixedSignsError: If positive and negative values are mixed.
    """
    return _geometric_mean(values, arithmetic_mean)


def geometric_mean_fast(values: Sequence[float]) -> MultiplicativeUncertainValue:
    """``geometric_mean`` built on ``arithmetic_mean_fast``."""
    return _geometric_mean(values, arithmetic_mean_fast)
