"""Input checks shared by the estimators."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from ..errors import InsufficientElementsError, InvalidValueError, NonFiniteError


def as_finite_array(values: Sequence[float], required: int = 2) -> np.ndarray:
    """Return ``values`` as a 1-D float array after size and finiteness checks.

    Raises:
        InvalidValueError: If the input is not one-dimensional.
        InsufficientElementsError: If fewer than ``required`` values are given.
        NonFiniteError: If any value is NaN or infinite.
    """
    arr = np.asarray(values, dtype=float)
    if arr.ndim != 1:
        raise InvalidValueError(f"Expected a 1-D sequence, got shape {arr.shape}")
    n = int(arr.size)
    if n < required:
        raise InsufficientElementsError(required, n)
    if not np.all(np.isfinite(arr)):
        raise NonFiniteError("Estimator input contains NaN or infinite values")
    return arr


def stable_mean(xs: Sequence[float]) -> float:
    """Mean computed on values divided by their largest magnitude."""
    n = len(xs)
    m = max((abs(x) for x in xs), default=0.0)
    if not m > 0:
        return 0.0
    total = 0.0
    for x in xs:
        total += x / m
    return m * (total / n)
