"""
Capability interfaces shared by the value types.

Two small bases carry the n-ary primitives:

- ``NormSummable``: ``zero()``, ``negative`` and ``sum(values, strategy)``.
- ``NormProductable``: ``one()``, ``reciprocal()`` and
  ``product(values, strategy)``.

Binary operations are derived from the n-ary primitive applied to two
elements, so ``a.adding(b, s) == type(a).sum([a, b], s)`` holds exactly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence, Type, TypeVar

from .errors import EmptyCollectionError
from .norms import NormStrategy

S = TypeVar("S", bound="NormSummable")
P = TypeVar("P", bound="NormProductable")


class NormSummable(ABC):
    @classmethod
    @abstractmethod
    def zero(cls: Type[S]) -> S:
        ...

    @property
    @abstractmethod
    def negative(self: S) -> S:
        ...

    @classmethod
    @abstractmethod
    def sum(cls: Type[S], values: Sequence[S], strategy: NormStrategy) -> S:
        ...

    def adding(self: S, other: S, strategy: NormStrategy) -> S:
        return type(self).sum([self, other], strategy)

    def subtracting(self: S, other: S, strategy: NormStrategy) -> S:
        return self.adding(other.negative, strategy)


class NormProductable(ABC):
    @classmethod
    @abstractmethod
    def one(cls: Type[P]) -> P:
        ...

    @abstractmethod
    def reciprocal(self: P) -> P:
        ...

    @classmethod
    @abstractmethod
    def product(cls: Type[P], values: Sequence[P], strategy: NormStrategy) -> P:
        ...

    def multiplying(self: P, other: P, strategy: NormStrategy) -> P:
        return type(self).product([self, other], strategy)

    def dividing(self: P, other: P, strategy: NormStrategy) -> P:
        return self.multiplying(other.reciprocal(), strategy)


def _element_type(values: Sequence, kind: Optional[type], operation: str) -> type:
    if kind is not None:
        return kind
    if not values:
        raise EmptyCollectionError(
            f"Cannot infer the element type of an empty {operation}; pass kind="
        )
    return type(values[0])


def total(
    values: Sequence[S], strategy: NormStrategy, kind: Optional[Type[S]] = None
) -> S:
    """Dispatch to ``kind.sum``; ``kind`` defaults to the first element's type."""
    cls = _element_type(values, kind, "sum")
    return cls.sum(list(values), strategy)


def product_of(
    values: Sequence[P], strategy: NormStrategy, kind: Optional[Type[P]] = None
) -> P:
    """Dispatch to ``kind.product``; ``kind`` defaults to the first element's type."""
    cls = _element_type(values, kind, "product")
    return cls.product(list(values), strategy)
