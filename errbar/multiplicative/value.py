"""
Log-domain representation of multiplicative uncertainty.

A value x is stored as its sign and ``log_abs = ln|x| ± ln(m)`` where
``m >= 1`` is the multiplicative error factor. Multiplication becomes
addition in log-space, so products combine ``log_abs`` with the additive
``sum`` primitive.

Zero cannot be represented, so reciprocal and division never fail.
"""

from __future__ import annotations

import math
import numbers
import operator
from dataclasses import dataclass
from typing import Sequence, Tuple

from ..algebra import NormProductable
from ..core.value import UncertainValue
from ..errors import (
    InvalidMultiplicativeErrorError,
    InvalidScaleError,
    NegativeInputError,
    NonFiniteError,
    ZeroInputError,
)
from ..norms import DEFAULT_NORM, NormStrategy
from ..signum import Signum, sign_product


def _exp_or_inf(x: float) -> float:
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


@dataclass(frozen=True)
class MultiplicativeUncertainValue(NormProductable):
    """Non-zero value with multiplicative (log-domain) uncertainty.

    Attributes:
        log_abs: ``ln|x|`` with the log of the error factor as its absolute
            error. Both components must be finite.
        sign: ``Signum.POSITIVE`` or ``Signum.NEGATIVE``.
    """

    log_abs: UncertainValue
    sign: Signum = Signum.POSITIVE

    def __post_init__(self):
        sign = Signum(self.sign)
        if sign is Signum.ZERO:
            raise ZeroInputError("Multiplicative values cannot carry a zero sign")
        if not (
            math.isfinite(self.log_abs.value) and math.isfinite(self.log_abs.absolute_error)
        ):
            raise NonFiniteError(f"log_abs must be finite, got {self.log_abs!r}")
        object.__setattr__(self, "sign", sign)

    @classmethod
    def from_value(
        cls, value: float, multiplicative_error: float = 1.0
    ) -> "MultiplicativeUncertainValue":
        """Build from a central value and an error factor ``>= 1``.

        Raises:
            ZeroInputError: If ``value`` is zero.
            NonFiniteError: If ``value`` or ``multiplicative_error`` is not
                finite.
            InvalidMultiplicativeErrorError: If ``multiplicative_error < 1``.
        """
        value = float(value)
        m = float(multiplicative_error)
        if not math.isfinite(value):
            raise NonFiniteError(f"Value must be finite, got {value!r}")
        if value == 0:
            raise ZeroInputError("Multiplicative values cannot represent zero")
        if not math.isfinite(m):
            raise NonFiniteError(f"Multiplicative error must be finite, got {m!r}")
        if m < 1:
            raise InvalidMultiplicativeErrorError(
                f"Multiplicative error must be >= 1, got {m!r}"
            )
        return cls(UncertainValue(math.log(abs(value)), math.log(m)), Signum.of(value))

    @classmethod
    def exp(
        cls, log_abs: UncertainValue, sign: Signum = Signum.POSITIVE
    ) -> "MultiplicativeUncertainValue":
        """Value whose log-magnitude is ``log_abs``."""
        return cls(log_abs, sign)

    @classmethod
    def one(cls) -> "MultiplicativeUncertainValue":
        return cls(UncertainValue.zero(), Signum.POSITIVE)

    # -- derived accessors ------------------------------------------------

    @property
    def value(self) -> float:
        magnitude = _exp_or_inf(self.log_abs.value)
        return -magnitude if self.sign is Signum.NEGATIVE else magnitude

    @property
    def multiplicative_error(self) -> float:
        return _exp_or_inf(self.log_abs.absolute_error)

    @property
    def relative_error(self) -> float:
        return self.multiplicative_error - 1.0

    @property
    def signum(self) -> Signum:
        return self.sign

    @property
    def lower_bound(self) -> float:
        v, m = self.value, self.multiplicative_error
        return min(v * m, v / m)

    @property
    def upper_bound(self) -> float:
        v, m = self.value, self.multiplicative_error
        return max(v * m, v / m)

    @property
    def bounds(self) -> Tuple[float, float]:
        return self.lower_bound, self.upper_bound

    @property
    def absolute(self) -> "MultiplicativeUncertainValue":
        return MultiplicativeUncertainValue(self.log_abs, Signum.POSITIVE)

    @property
    def negative(self) -> "MultiplicativeUncertainValue":
        return MultiplicativeUncertainValue(self.log_abs, self.sign.flipped)

    # -- primitives -------------------------------------------------------

    def reciprocal(self) -> "MultiplicativeUncertainValue":
        """1/x: negated log-magnitude, same sign and error. Never fails."""
        return MultiplicativeUncertainValue(self.log_abs.negative, self.sign)

    @classmethod
    def product(
        cls, values: Sequence["MultiplicativeUncertainValue"], strategy: NormStrategy
    ) -> "MultiplicativeUncertainValue":
        """Sum of log-magnitudes under ``strategy``, sign by parity of negatives."""
        values = list(values)
        if not values:
            return cls.one()
        log_abs = UncertainValue.sum([v.log_abs for v in values], strategy)
        if not (math.isfinite(log_abs.value) and math.isfinite(log_abs.absolute_error)):
            raise NonFiniteError("Product leaves the representable log range")
        return cls(log_abs, sign_product(v.sign for v in values))

    def scaled_up(self, factor: float) -> "MultiplicativeUncertainValue":
        """Multiply by a constant; the log-space error is unchanged.

        Raises:
            InvalidScaleError: If ``factor`` is zero or not finite.
        """
        a = float(factor)
        if a == 0 or not math.isfinite(a):
            raise InvalidScaleError(f"Scale factor must be finite and non-zero, got {a!r}")
        log_abs = self.log_abs.add_constant(math.log(abs(a)))
        sign = self.sign.flipped if a < 0 else self.sign
        return MultiplicativeUncertainValue(log_abs, sign)

    def scaled_down(self, factor: float) -> "MultiplicativeUncertainValue":
        a = float(factor)
        if a == 0 or not math.isfinite(a):
            raise InvalidScaleError(f"Scale factor must be finite and non-zero, got {a!r}")
        return self.scaled_up(1.0 / a)

    def raised(self, power: float) -> "MultiplicativeUncertainValue":
        """Real power: both log components scale by ``power``.

        Raises:
            NegativeInputError: If the value is negative.
            NonFiniteError: If the result leaves the finite range.
        """
        p = float(power)
        if self.sign is Signum.NEGATIVE:
            raise NegativeInputError("Real power of a negative value is undefined")
        log_abs = self.log_abs.multiply_by(p)
        if not (math.isfinite(log_abs.value) and math.isfinite(log_abs.absolute_error)):
            raise NonFiniteError(f"Power {p:g} is not finite")
        return MultiplicativeUncertainValue(log_abs, Signum.POSITIVE)

    def raised_to_integer(self, n: int) -> "MultiplicativeUncertainValue":
        """|x|^n on the real path, positive for even n, original sign for odd n."""
        n = operator.index(n)
        magnitude = self.absolute.raised(float(n))
        sign = Signum.POSITIVE if n % 2 == 0 else self.sign
        return MultiplicativeUncertainValue(magnitude.log_abs, sign)

    def as_uncertain_value(self) -> UncertainValue:
        """Additive form; always succeeds."""
        from .conversions import to_uncertain_value

        return to_uncertain_value(self)

    # -- operators (L2) ---------------------------------------------------

    def __mul__(self, other):
        if isinstance(other, MultiplicativeUncertainValue):
            return self.multiplying(other, DEFAULT_NORM)
        if isinstance(other, numbers.Real):
            return self.scaled_up(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            return self.scaled_up(other)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, MultiplicativeUncertainValue):
            return self.dividing(other, DEFAULT_NORM)
        if isinstance(other, numbers.Real):
            return self.scaled_down(other)
        return NotImplemented

    def __rtruediv__(self, other):
        if isinstance(other, numbers.Real):
            return self.reciprocal().scaled_up(other)
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
        return f"{self.value:.6g} */ {self.multiplicative_error:.6g}"
