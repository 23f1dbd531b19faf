"""Sample standard deviation, sqrt(Σ(x - mean)² / (n - 1))."""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

import numpy as np

from ..core.value import UncertainValue
from ..norms import norm2
from ._validation import as_finite_array, stable_mean


def _normalized_deviations(xs: Sequence[float]) -> Tuple[float, List[float]]:
    """Return ``(scale, (x - mean) / scale)`` with ``scale = max|x|``.

    The mean and the differences are taken on values already divided by
    ``scale``, so neither can overflow for finite input.
    """
    scale = max(abs(x) for x in xs)
    if scale == 0:
        return 0.0, [0.0] * len(xs)
    normalized = [x / scale for x in xs]
    mean = stable_mean(normalized)
    return scale, [x - mean for x in normalized]


def sample_standard_deviation(values: Sequence[float]) -> float:
    """Sample standard deviation of at least two finite values.

    Values are divided by their largest magnitude before the mean and the
    deviations are taken; the L2 norm is scaled back afterwards.

    Raises:
        InsufficientElementsError: If fewer than two values are given.
        NonFiniteError: If any value is NaN or infinite.
    """
    xs = as_finite_array(values).tolist()
    n = len(xs)
    scale, deviations = _normalized_deviations(xs)
    if scale == 0:
        return 0.0
    return scale * (norm2(deviations) / math.sqrt(n - 1))


def sample_standard_deviation_fast(values: Sequence[float]) -> float:
    """numpy counterpart of ``sample_standard_deviation``."""
    arr = as_finite_array(values)
    scale = float(np.max(np.abs(arr)))
    if scale == 0:
        return 0.0
    return scale * float(np.std(arr / scale, ddof=1))


def uncertain_sample_standard_deviation(
    values: Sequence[UncertainValue],
) -> UncertainValue:
    """Sample standard deviation of central values with propagated error.

    Error: norm2 of ``(x_i - mean) / sqrt(n - 1) · Δx_i``, evaluated on the
    normalized deviations and scaled back.

    Raises:
        InsufficientElementsError: If fewer than two values are given.
        NonFiniteError: If any central value is NaN or infinite.
    """
    values = list(values)
    centrals = [v.value for v in values]
    result = sample_standard_deviation(centrals)

    scale, deviations = _normalized_deviations(centrals)
    if scale == 0:
        return UncertainValue(result, 0.0)
    root = math.sqrt(len(values) - 1)
    scaled_errors = [d / root * v.absolute_error for d, v in zip(deviations, values)]
    return UncertainValue(result, scale * norm2(scaled_errors))
