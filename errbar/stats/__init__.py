"""
Estimators that turn raw samples into uncertain values.

Modules:
    mean:
        Arithmetic mean ± sample standard deviation for floats (direct and
        numpy implementations) and the mean of uncertain values.

    deviation:
        Sample standard deviation for floats and for uncertain values.

    geometric:
        Geometric mean as a multiplicative uncertain value.
"""

from .deviation import (
    sample_standard_deviation,
    sample_standard_deviation_fast,
    uncertain_sample_standard_deviation,
)
from .geometric import geometric_mean, geometric_mean_fast
from .mean import arithmetic_mean, arithmetic_mean_fast, uncertain_mean

__all__ = [
    "arithmetic_mean",
    "arithmetic_mean_fast",
    "uncertain_mean",
    "sample_standard_deviation",
    "sample_standard_deviation_fast",
    "uncertain_sample_standard_deviation",
    "geometric_mean",
    "geometric_mean_fast",
]
