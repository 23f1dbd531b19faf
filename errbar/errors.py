"""Exception taxonomy for uncertainty propagation.

Every failure is raised at the point of detection. All exceptions derive
from :class:`UncertainValueError`, itself a :class:`ValueError`, so callers
that only care about "bad numeric input" can catch a single type.
"""

from __future__ import annotations


class UncertainValueError(ValueError):
    """Base class for invalid numeric domains in propagation."""


class DivisionByZeroError(UncertainValueError, ZeroDivisionError):
    """Reciprocal or division of an exactly-zero additive value."""


class ZeroInputError(UncertainValueError):
    """A zero central value where the representation excludes zero."""


class NonFiniteError(UncertainValueError):
    """A result or required intermediate is NaN or infinite."""


class NegativeInputError(UncertainValueError):
    """Real power of a negative base."""


class NonPositiveInputError(UncertainValueError):
    """Logarithm of a value that is zero or negative."""


class InvalidScaleError(UncertainValueError):
    """Scale factor is zero or non-finite."""


class InvalidMultiplicativeErrorError(UncertainValueError):
    """Multiplicative error factor below 1."""


class InvalidValueError(UncertainValueError):
    """Value violates a structural domain constraint."""


class EmptyCollectionError(UncertainValueError):
    """Operation requires at least one element."""


class InsufficientElementsError(UncertainValueError):
    """Operation requires more elements than were supplied."""

    def __init__(self, required: int, actual: int):
        self.required = int(required)
        self.actual = int(actual)
        super().__init__(
            f"Operation requires at least {self.required} elements, got {self.actual}"
        )

    def __reduce__(self):
        return (type(self), (self.required, self.actual))


class MixedSignsError(UncertainValueError):
    """Input mixes positive and negative values."""
