"""
A Python package for propagating measurement uncertainty through arithmetic.

Values carry either an additive (absolute) error or a multiplicative error
factor; independent errors are combined with a selectable vector norm.

Modules:
    - norms: L1, L2 and Lp norms used to combine independent errors.
    - core: ``UncertainValue`` and the functions defined on it.
    - multiplicative: ``MultiplicativeUncertainValue`` and conversions.
    - stats: Arithmetic mean, sample standard deviation and geometric mean.
    - bounds: Value / lower / upper bound triples for presentation.
    - reporting: Significant-figure formatting and summary tables.
"""

__version__ = "1.0.0"

from .bounds import BoundedValue, bounded, bounded_frame
from .core import E, PI, UncertainValue, functions, lists
from .errors import (
    DivisionByZeroError,
    EmptyCollectionError,
    InsufficientElementsError,
    InvalidMultiplicativeErrorError,
    InvalidScaleError,
    InvalidValueError,
    MixedSignsError,
    NegativeInputError,
    NonFiniteError,
    NonPositiveInputError,
    UncertainValueError,
    ZeroInputError,
)
from .multiplicative import (
    MultiplicativeUncertainValue,
    to_multiplicative,
    to_uncertain_value,
)
from .norms import DEFAULT_NORM, L1, L2, NormStrategy, norm, norm1, norm2, normp
from .signum import Signum, sign_product
from .stats import (
    arithmetic_mean,
    arithmetic_mean_fast,
    geometric_mean,
    geometric_mean_fast,
    sample_standard_deviation,
    sample_standard_deviation_fast,
    uncertain_mean,
    uncertain_sample_standard_deviation,
)

__all__ = [
    # Values
    "UncertainValue",
    "MultiplicativeUncertainValue",
    "Signum",
    "PI",
    "E",
    "to_multiplicative",
    "to_uncertain_value",
    "sign_product",
    "functions",
    "lists",
    # Norms
    "NormStrategy",
    "DEFAULT_NORM",
    "L1",
    "L2",
    "norm",
    "norm1",
    "norm2",
    "normp",
    # Statistics
    "arithmetic_mean",
    "arithmetic_mean_fast",
    "uncertain_mean",
    "sample_standard_deviation",
    "sample_standard_deviation_fast",
    "uncertain_sample_standard_deviation",
    "geometric_mean",
    "geometric_mean_fast",
    # Presentation
    "BoundedValue",
    "bounded",
    "bounded_frame",
    # Errors
    "UncertainValueError",
    "DivisionByZeroError",
    "ZeroInputError",
    "NonFiniteError",
    "NegativeInputError",
    "NonPositiveInputError",
    "InvalidScaleError",
    "InvalidMultiplicativeErrorError",
    "InvalidValueError",
    "InsufficientElementsError",
    "EmptyCollectionError",
    "MixedSignsError",
]
