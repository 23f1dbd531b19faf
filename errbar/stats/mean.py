"""Arithmetic mean with the sample standard deviation as its uncertainty.

Two implementations are provided for plain floats:

- ``arithmetic_mean``: direct formula. Values are divided by the largest
  magnitude before summing, the deviations are combined with ``norm2`` and
  everything is scaled back, so inputs near the floating-point limits stay in
  range.
- ``arithmetic_mean_fast``: numpy reductions over the same normalized
  vector. Both agree to near machine precision.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from ..core.value import UncertainValue
from ..errors import EmptyCollectionError
from ..norms import DEFAULT_NORM, NormStrategy, norm2
from ._validation import as_finite_array


def arithmetic_mean(values: Sequence[float]) -> UncertainValue:
    """Mean ± sample standard deviation.

    Args:
        values: At least two finite measurements.

    Returns:
        UncertainValue: ``value`` is the mean, ``absolute_error`` the sample
        standard deviation ``norm2(x - mean) / sqrt(n - 1)``.

    Raises:
        InsufficientElementsError: If fewer than two values are given.
        NonFiniteError: If any value is NaN or infinite.
    """
    xs = as_finite_array(values).tolist()
    n = len(xs)

    scale = max(abs(x) for x in xs)
    if scale == 0:
        return UncertainValue(0.0, 0.0)

    normalized = [x / scale for x in xs]
    total = 0.0
    for x in normalized:
        total += x
    normalized_mean = total / n

    deviations = [x - normalized_mean for x in normalized]
    normalized_sd = norm2(deviations) / math.sqrt(n - 1)
    return UncertainValue(scale * normalized_mean, scale * normalized_sd)


def arithmetic_mean_fast(values: Sequence[float]) -> UncertainValue:
    """Vectorized ``arithmetic_mean``: mean and RMS deviation via numpy.

    The RMS of the deviations is converted to the sample standard deviation
    with ``sqrt(n / (n - 1))``.
    """
    arr = as_finite_array(values)
    n = arr.size

    scale = float(np.max(np.abs(arr)))
    if scale == 0:
        return UncertainValue(0.0, 0.0)

    normalized = arr / scale
    mean = float(np.mean(normalized))
    rms = float(np.sqrt(np.mean(np.square(normalized - mean))))
    sd = rms * math.sqrt(n / (n - 1))
    return UncertainValue(scale * mean, scale * sd)


def uncertain_mean(
    values: Sequence[UncertainValue], strategy: NormStrategy = DEFAULT_NORM
) -> UncertainValue:
    """Mean of uncertain values: one n-ary ``sum`` divided by the count.

    Equivalent to adding the values pairwise and dividing by n.

    Raises:
        EmptyCollectionError: If ``values`` is empty.
    """
    values = list(values)
    if not values:
        raise EmptyCollectionError("Mean of an empty list is undefined")
    return UncertainValue.sum(values, strategy).divide_by(len(values))
