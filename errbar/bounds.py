"""Value / lower bound / upper bound triples for presentation layers.

Plotting or tabulating code only needs a central value and an interval; this
module reduces plain floats, additive and multiplicative uncertain values to
that common shape.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Mapping, Union

import pandas as pd

from .core.value import UncertainValue
from .errors import InvalidValueError
from .multiplicative.value import MultiplicativeUncertainValue

Boundable = Union[float, UncertainValue, MultiplicativeUncertainValue]


@dataclass(frozen=True)
class BoundedValue:
    """Central value with the interval it is reported in."""

    value: float
    lower_bound: float
    upper_bound: float

    @property
    def half_width(self) -> float:
        return (self.upper_bound - self.lower_bound) / 2.0


def bounded(x: Boundable) -> BoundedValue:
    """Convert ``x`` to a ``BoundedValue``.

    Args:
        x: A real number (degenerate interval), an ``UncertainValue``
            (value ∓ absolute error) or a ``MultiplicativeUncertainValue``
            (value scaled down and up by the error factor).

    Returns:
        BoundedValue: Triple with ``lower_bound <= value <= upper_bound``.

    Raises:
        InvalidValueError: If ``x`` is of an unsupported type.
    """
    if isinstance(x, (UncertainValue, MultiplicativeUncertainValue)):
        lower, upper = x.bounds
        return BoundedValue(x.value, lower, upper)
    if isinstance(x, Real) and not isinstance(x, bool):
        v = float(x)
        return BoundedValue(v, v, v)
    raise InvalidValueError(f"Cannot derive bounds from {type(x).__name__}")


def bounded_frame(items: Mapping[str, Boundable]) -> pd.DataFrame:
    """Tabulate named values as ``value`` / ``lower_bound`` / ``upper_bound``.

    The mapping order is kept; names become the index.
    """
    rows = {name: bounded(x) for name, x in items.items()}
    return pd.DataFrame(
        {
            "value": [b.value for b in rows.values()],
            "lower_bound": [b.lower_bound for b in rows.values()],
            "upper_bound": [b.upper_bound for b in rows.values()],
        },
        index=pd.Index(list(rows.keys()), name="quantity"),
    )
