"""
Norm strategies for combining independent error contributions.

A norm collapses a list of scalar error terms into one magnitude:
- L1: Σ|x_i| (worst-case linear accumulation)
- L2: sqrt(Σx_i²) (uncorrelated Gaussian errors)
- Lp: (Σ|x_i|^p)^(1/p)

L2 and Lp divide every term by the largest magnitude before combining and
scale the result back up, so x² never leaves floating-point range.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

from .errors import InvalidValueError, NonFiniteError


@dataclass(frozen=True)
class NormStrategy:
    kind: str
    p: Optional[float] = None

    def __post_init__(self):
        if self.kind not in {"l1", "l2", "lp"}:
            raise InvalidValueError(f"Unknown norm kind '{self.kind}'")
        if self.kind == "lp":
            if self.p is None:
                raise InvalidValueError("Lp norm requires an exponent p")
            object.__setattr__(self, "p", float(self.p))
        elif self.p is not None:
            raise InvalidValueError(f"{self.kind.upper()} norm takes no exponent")

    @classmethod
    def lp(cls, p: float) -> "NormStrategy":
        return cls("lp", p)

    @classmethod
    def parse(cls, text: str) -> "NormStrategy":
        """Parse ``'l1'``, ``'l2'`` or ``'lp:<p>'`` (case-insensitive)."""
        key = text.strip().lower()
        if key in {"l1", "l2"}:
            return cls(key)
        if key.startswith("lp:"):
            try:
                p = float(key[3:])
            except ValueError:
                raise InvalidValueError(f"Invalid Lp exponent in '{text}'") from None
            return cls.lp(p)
        raise InvalidValueError(f"Unknown norm strategy '{text}'")

    def __str__(self) -> str:
        if self.kind == "lp":
            return f"lp:{self.p:g}"
        return self.kind


NormStrategy.L1 = NormStrategy("l1")
NormStrategy.L2 = NormStrategy("l2")

L1 = NormStrategy.L1
L2 = NormStrategy.L2
DEFAULT_NORM = L2


def _abs_max(xs: Sequence[float]) -> float:
    return max((abs(x) for x in xs), default=0.0)


def norm1(xs: Sequence[float]) -> float:
    """Manhattan norm Σ|x_i|."""
    return float(sum(abs(float(x)) for x in xs))


def norm2(xs: Sequence[float]) -> float:
    """Euclidean norm with closed forms for up to three terms."""
    xs = [float(x) for x in xs]
    n = len(xs)
    if n == 0:
        return 0.0
    if n == 1:
        return abs(xs[0])
    if n == 2:
        return math.hypot(xs[0], xs[1])
    if n == 3:
        return math.hypot(math.hypot(xs[0], xs[1]), xs[2])

    m = _abs_max(xs)
    if not m > 0:
        return 0.0
    s = 0.0
    for x in xs:
        t = abs(x) / m
        s += t * t
    return m * math.sqrt(s)


def normp(xs: Sequence[float], p: float) -> float:
    """Generalized Lp norm; non-positive ``p`` yields 0.

    Raises:
        NonFiniteError: If the combined magnitude overflows, as it does for
            several terms and a tiny ``p``.
    """
    p = float(p)
    if not p > 0:
        return 0.0
    xs = [float(x) for x in xs]
    n = len(xs)
    if n == 0:
        return 0.0
    if n == 1:
        return abs(xs[0])

    m = _abs_max(xs)
    if not m > 0:
        return 0.0
    s = 0.0
    for x in xs:
        s += (abs(x) / m) ** p
    try:
        result = m * s ** (1.0 / p)
    except OverflowError:
        raise NonFiniteError(f"Lp norm with p={p:g} overflows") from None
    if not math.isfinite(result):
        raise NonFiniteError(f"Lp norm with p={p:g} overflows")
    return result


def norm(xs: Sequence[float], strategy: NormStrategy) -> float:
    """Combine ``xs`` into one magnitude using ``strategy``."""
    if strategy.kind == "l1":
        return norm1(xs)
    if strategy.kind == "l2":
        return norm2(xs)
    return normp(xs, strategy.p)
