"""
List helpers over plain floats and uncertain values.

Selection helpers (``max_value``, ``min_value``, ``abs_max``) choose by central
value; a tie keeps the candidate with the larger absolute error.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..errors import EmptyCollectionError
from ..norms import NormStrategy, norm
from .value import UncertainValue


# -- plain floats ---------------------------------------------------------


def abs_max(xs: Sequence[float]) -> Optional[float]:
    """Largest magnitude in ``xs`` (non-negative), ``None`` when empty."""
    if len(xs) == 0:
        return None
    return max(abs(float(x)) for x in xs)


def fsum_values(xs: Sequence[float]) -> float:
    total = 0.0
    for x in xs:
        total += float(x)
    return total


def product_values(xs: Sequence[float]) -> float:
    result = 1.0
    for x in xs:
        result *= float(x)
    return result


# -- uncertain values -----------------------------------------------------


def values(uvs: Sequence[UncertainValue]) -> List[float]:
    return [uv.value for uv in uvs]


def absolute_errors(uvs: Sequence[UncertainValue]) -> List[float]:
    return [uv.absolute_error for uv in uvs]


def relative_errors(uvs: Sequence[UncertainValue]) -> List[float]:
    return [uv.relative_error for uv in uvs]


def values_sum(uvs: Sequence[UncertainValue]) -> float:
    return fsum_values(values(uvs))


def values_product(uvs: Sequence[UncertainValue]) -> float:
    return product_values(values(uvs))


def values_max(uvs: Sequence[UncertainValue]) -> Optional[float]:
    return max(values(uvs), default=None)


def values_min(uvs: Sequence[UncertainValue]) -> Optional[float]:
    return min(values(uvs), default=None)


def values_abs_max(uvs: Sequence[UncertainValue]) -> Optional[float]:
    return abs_max(values(uvs))


def _require_elements(uvs: Sequence[UncertainValue], operation: str) -> None:
    if len(uvs) == 0:
        raise EmptyCollectionError(f"{operation} of an empty list is undefined")


def max_value(uvs: Sequence[UncertainValue]) -> UncertainValue:
    """Element with the largest value; ties go to the larger error."""
    _require_elements(uvs, "max_value")
    return max(uvs, key=lambda uv: (uv.value, uv.absolute_error))


def min_value(uvs: Sequence[UncertainValue]) -> UncertainValue:
    """Element with the smallest value; ties go to the larger error."""
    _require_elements(uvs, "min_value")
    return min(uvs, key=lambda uv: (uv.value, -uv.absolute_error))


def abs_max_value(uvs: Sequence[UncertainValue]) -> UncertainValue:
    """``max_value`` over the absolute-valued elements."""
    _require_elements(uvs, "abs_max_value")
    return max_value([uv.absolute for uv in uvs])


def absolute_error_vector_length(
    uvs: Sequence[UncertainValue], strategy: NormStrategy
) -> float:
    return norm(absolute_errors(uvs), strategy)


def relative_error_vector_length(
    uvs: Sequence[UncertainValue], strategy: NormStrategy
) -> float:
    return norm(relative_errors(uvs), strategy)


def mean(uvs: Sequence[UncertainValue], strategy: NormStrategy) -> UncertainValue:
    """Sum with ``strategy`` divided by the count."""
    _require_elements(uvs, "mean")
    return UncertainValue.sum(uvs, strategy).divide_by(len(uvs))


def euclidean_length(
    uvs: Sequence[UncertainValue], strategy: NormStrategy
) -> UncertainValue:
    """sqrt(Σx_i²) with propagated error.

    Every element is divided by the largest |value| before squaring and the
    result is scaled back, so extreme magnitudes stay in range.
    """
    if len(uvs) == 0:
        return UncertainValue.zero()
    scale = values_abs_max(uvs)
    if not scale > 0:
        return UncertainValue.zero()
    squares = [uv.divide_by(scale).raised_to_integer(2) for uv in uvs]
    return UncertainValue.sum(squares, strategy).raised(0.5).multiply_by(scale)
