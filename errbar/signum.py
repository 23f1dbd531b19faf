"""Three-valued sign used to track signs of log-domain values."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Iterable

from .errors import NonFiniteError


class Signum(IntEnum):
    NEGATIVE = -1
    ZERO = 0
    POSITIVE = 1

    @classmethod
    def of(cls, x: float) -> "Signum":
        x = float(x)
        if math.isnan(x):
            raise NonFiniteError("Sign of NaN is undefined")
        if x > 0:
            return cls.POSITIVE
        if x < 0:
            return cls.NEGATIVE
        return cls.ZERO

    @property
    def flipped(self) -> "Signum":
        return Signum(-int(self))

    def times(self, other: "Signum") -> "Signum":
        # zero absorbs
        return Signum(int(self) * int(other))


def sign_product(signs: Iterable[Signum]) -> Signum:
    """Product of signs: parity of negatives, zero if any sign is zero."""
    result = Signum.POSITIVE
    for s in signs:
        result = result.times(Signum(s))
        if result is Signum.ZERO:
            return result
    return result
