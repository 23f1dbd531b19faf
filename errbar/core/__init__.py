"""
Additive error-propagation engine.

Modules:
    value:
        ``UncertainValue`` (central value + absolute error) with the n-ary
        ``sum``/``product`` primitives, constant operations, reciprocal and
        powers.

    functions:
        ln, exp, sin, cos and multi-input functions (sigmoid, Lorentz
        factor, polynomial, normalization, average step width).

    lists:
        Selection and reduction helpers over lists of floats and
        uncertain values.
"""

from . import functions, lists
from .value import E, PI, UncertainValue

__all__ = ["UncertainValue", "PI", "E", "functions", "lists"]
