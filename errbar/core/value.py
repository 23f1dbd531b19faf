"""
Additive uncertain values: a central value plus a non-negative absolute error.

Propagation rules (first-order, independent errors):
- Sum: Δy = norm(Δx_i)
- Product: Δy/|y| = norm(Δx_i/|x_i|)
- Constant shift: Δy = Δx; constant scale c: Δy = |c|·Δx
- Power: Δy/|y| = |p|·(Δx/|x|)
- Reciprocal: relative error preserved

Zero is representable, so reciprocal, division and some powers can fail.
"""

from __future__ import annotations

import math
import numbers
import operator
from dataclasses import dataclass
from typing import Sequence, Tuple

from ..algebra import NormProductable, NormSummable
from ..errors import (
    DivisionByZeroError,
    InvalidValueError,
    NegativeInputError,
    NonFiniteError,
)
from ..norms import DEFAULT_NORM, NormStrategy, norm
from ..signum import Signum


@dataclass(frozen=True)
class UncertainValue(NormSummable, NormProductable):
    """A measured value with absolute 1-sigma uncertainty.

    Attributes:
        value: Central value.
        absolute_error: Absolute uncertainty in the same unit as ``value``.
            The sign of whatever is passed in is discarded.
    """

    value: float
    absolute_error: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "value", float(self.value))
        object.__setattr__(self, "absolute_error", abs(float(self.absolute_error)))

    # -- construction -----------------------------------------------------

    @classmethod
    def with_relative_error(cls, value: float, relative_error: float) -> "UncertainValue":
        """Build from a fractional error: ``absolute_error = |value·relative_error|``."""
        return cls(value, abs(float(value) * float(relative_error)))

    @classmethod
    def with_combined_errors(
        cls, value: float, absolute_error: float, relative_error: float
    ) -> "UncertainValue":
        """Build from ``|absolute_error| + |value·relative_error|``."""
        total = abs(float(absolute_error)) + abs(float(value) * float(relative_error))
        return cls(value, total)

    @classmethod
    def zero(cls) -> "UncertainValue":
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> "UncertainValue":
        return cls(1.0, 0.0)

    # -- derived accessors ------------------------------------------------

    @property
    def relative_error(self) -> float:
        """Δx/|x|; 0 for an exact zero, +inf for a zero with error."""
        denom = abs(self.value)
        if not denom > 0:
            return 0.0 if self.absolute_error == 0 else math.inf
        return self.absolute_error / denom

    @property
    def variance(self) -> float:
        return self.absolute_error * self.absolute_error

    @property
    def absolute_value(self) -> float:
        return abs(self.value)

    @property
    def is_error_free(self) -> bool:
        return self.relative_error == 0.0

    @property
    def signum(self) -> Signum:
        return Signum.of(self.value)

    @property
    def lower_bound(self) -> float:
        return self.value - self.absolute_error

    @property
    def upper_bound(self) -> float:
        return self.value + self.absolute_error

    @property
    def bounds(self) -> Tuple[float, float]:
        return self.lower_bound, self.upper_bound

    @property
    def negative(self) -> "UncertainValue":
        return UncertainValue(-self.value, self.absolute_error)

    @property
    def absolute(self) -> "UncertainValue":
        return UncertainValue(abs(self.value), self.absolute_error)

    # -- n-ary primitives -------------------------------------------------

    @classmethod
    def sum(
        cls, values: Sequence["UncertainValue"], strategy: NormStrategy
    ) -> "UncertainValue":
        """Σ values with error ``norm(absolute errors)``; empty gives zero."""
        values = list(values)
        if not values:
            return cls.zero()
        total = 0.0
        for v in values:
            total += v.value
        return cls(total, norm([v.absolute_error for v in values], strategy))

    @classmethod
    def product(
        cls, values: Sequence["UncertainValue"], strategy: NormStrategy
    ) -> "UncertainValue":
        """Π values with relative error ``norm(relative errors)``; empty gives one.

        A zero factor has infinite relative error, so a zero product falls
        back to the partial-derivative form ``norm(|Π_{j≠i} x_j|·Δx_i)``.

        Raises:
            NonFiniteError: If the product overflows.
        """
        values = list(values)
        if not values:
            return cls.one()
        result = 1.0
        for v in values:
            result *= v.value
        if not math.isfinite(result):
            raise NonFiniteError(f"Product of {len(values)} values is not finite")
        if result != 0:
            rel = norm([v.relative_error for v in values], strategy)
            return cls.with_relative_error(result, rel)

        contributions = []
        for i, v in enumerate(values):
            others = 1.0
            for j, w in enumerate(values):
                if j != i:
                    others *= w.value
            contributions.append(abs(others) * v.absolute_error)
        return cls(result, norm(contributions, strategy))

    # -- single error source: no norm needed ------------------------------

    def add_constant(self, constant: float) -> "UncertainValue":
        return UncertainValue(self.value + float(constant), self.absolute_error)

    def subtract_constant(self, constant: float) -> "UncertainValue":
        return self.add_constant(-float(constant))

    def multiply_by(self, constant: float) -> "UncertainValue":
        c = float(constant)
        return UncertainValue(self.value * c, self.absolute_error * abs(c))

    def divide_by(self, constant: float) -> "UncertainValue":
        c = float(constant)
        if c == 0:
            raise DivisionByZeroError("Cannot divide an uncertain value by zero")
        return UncertainValue(self.value / c, self.absolute_error / abs(c))

    # -- reciprocal and powers --------------------------------------------

    def reciprocal(self) -> "UncertainValue":
        """1/x with the same relative error.

        Raises:
            DivisionByZeroError: If the central value is exactly zero.
            NonFiniteError: If 1/x overflows.
        """
        if self.value == 0:
            raise DivisionByZeroError("Reciprocal of zero is undefined")
        try:
            inv = 1.0 / self.value
        except OverflowError:
            inv = math.inf
        if not math.isfinite(inv):
            raise NonFiniteError(f"Reciprocal of {self.value!r} is not finite")
        return UncertainValue.with_relative_error(inv, self.relative_error)

    def raised(self, power: float) -> "UncertainValue":
        """Real power x^p with ``Δy/|y| = |p|·Δx/|x|``.

        Raises:
            InvalidValueError: If x is zero and either x carries error or
                ``p <= 0``.
            NegativeInputError: If x is negative.
            NonFiniteError: If the value or error is not finite.
        """
        p = float(power)
        if self.value == 0:
            if self.absolute_error == 0 and p > 0:
                return UncertainValue.zero()
            raise InvalidValueError(
                f"Power {p:g} of zero with error {self.absolute_error:g} is undefined"
            )
        if self.value < 0:
            raise NegativeInputError(
                f"Real power of negative value {self.value!r} is undefined"
            )
        try:
            result = self.value**p
        except OverflowError:
            raise NonFiniteError(f"{self.value!r} ** {p:g} overflows") from None
        rel = abs(p) * self.relative_error
        if not (math.isfinite(result) and math.isfinite(rel)):
            raise NonFiniteError(f"{self.value!r} ** {p:g} is not finite")
        return UncertainValue.with_relative_error(result, rel)

    def raised_to_integer(self, n: int) -> "UncertainValue":
        """Integer power; negative bases are handled by sign parity.

        |x|^n is computed on the real path, then negated when x < 0 and n is
        odd.
        """
        n = operator.index(n)
        if self.value < 0:
            result = self.absolute.raised(float(n))
            return result.negative if n % 2 else result
        return self.raised(float(n))

    def as_multiplicative(self):
        """Convert to the log-domain representation (see ``to_multiplicative``)."""
        from ..multiplicative.conversions import to_multiplicative

        return to_multiplicative(self)

    # -- operators (L2) ---------------------------------------------------

    def __add__(self, other):
        if isinstance(other, UncertainValue):
            return self.adding(other, DEFAULT_NORM)
        if isinstance(other, numbers.Real):
            return self.add_constant(other)
        return NotImplemented

    def __radd__(self, other):
        if isinstance(other, numbers.Real):
            return self.add_constant(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, UncertainValue):
            return self.subtracting(other, DEFAULT_NORM)
        if isinstance(other, numbers.Real):
            return self.subtract_constant(other)
        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, numbers.Real):
            return self.negative.add_constant(other)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, UncertainValue):
            return self.multiplying(other, DEFAULT_NORM)
        if isinstance(other, numbers.Real):
            return self.multiply_by(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            return self.multiply_by(other)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, UncertainValue):
            return self.dividing(other, DEFAULT_NORM)
        if isinstance(other, numbers.Real):
            return self.divide_by(other)
        return NotImplemented

    def __rtruediv__(self, other):
        if isinstance(other, numbers.Real):
            return self.reciprocal().multiply_by(other)
        return NotImplemented

    def __pow__(self, other):
        if isinstance(other, numbers.Integral):
            return self.raised_to_integer(int(other))
        if isinstance(other, numbers.Real):
            return self.raised(other)
        return NotImplemented

    def __neg__(self):
        return self.negative

    def __abs__(self):
        return self.absolute

    def __str__(self) -> str:
        return f"{self.value:.6g} ± {self.absolute_error:.6g}"


PI = UncertainValue(math.pi, 0.0)
E = UncertainValue(math.e, 0.0)
