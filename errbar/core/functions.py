"""Transcendental and multi-input functions with first-order error propagation.

Single-input functions use the derivative of the function at the central
value:

- ln x: Δy = Δx/|x|
- e^x: Δy/|y| = Δx
- sin x: Δy = |cos x|·Δx
- cos x: Δy = |sin x|·Δx

Multi-input functions combine the partial-derivative contributions of each
input with a caller-selected norm.
"""

from __future__ import annotations

import math
from typing import List, Sequence

from ..errors import (
    DivisionByZeroError,
    EmptyCollectionError,
    InsufficientElementsError,
    InvalidValueError,
    NonFiniteError,
    NonPositiveInputError,
)
from ..norms import NormStrategy, norm
from .value import UncertainValue


def log(uv: UncertainValue) -> UncertainValue:
    """Natural logarithm.

    Raises:
        NonPositiveInputError: If the central value is zero or negative.
    """
    if not uv.value > 0:
        raise NonPositiveInputError(f"Logarithm requires a positive value, got {uv.value!r}")
    return UncertainValue(math.log(uv.value), uv.relative_error)


def log_each(values: Sequence[UncertainValue]) -> List[UncertainValue]:
    return [log(v) for v in values]


def exp(uv: UncertainValue) -> UncertainValue:
    """Exponential; the absolute error of x becomes the relative error of e^x.

    Raises:
        NonFiniteError: If e^x overflows.
    """
    try:
        result = math.exp(uv.value)
    except OverflowError:
        raise NonFiniteError(f"exp({uv.value!r}) overflows") from None
    return UncertainValue.with_relative_error(result, uv.absolute_error)


def exp_each(values: Sequence[UncertainValue]) -> List[UncertainValue]:
    return [exp(v) for v in values]


def sin(uv: UncertainValue) -> UncertainValue:
    return UncertainValue(math.sin(uv.value), abs(math.cos(uv.value)) * uv.absolute_error)


def cos(uv: UncertainValue) -> UncertainValue:
    return UncertainValue(math.cos(uv.value), abs(math.sin(uv.value)) * uv.absolute_error)


def reciprocal(uv: UncertainValue) -> UncertainValue:
    return uv.reciprocal()


def sigmoid(
    x: UncertainValue,
    x0: UncertainValue,
    k: UncertainValue,
    strategy: NormStrategy,
) -> UncertainValue:
    """Logistic function σ = 1 / (1 + exp(-k·(x - x0))).

    Error: σ(1-σ)·norm(k·Δx, k·Δx0, (x - x0)·Δk).
    """
    diff = x.value - x0.value
    exponent = -k.value * diff
    # exp(+large) overflows; σ -> 0 there
    if exponent > 709.0:
        sigma = 0.0
    else:
        sigma = 1.0 / (1.0 + math.exp(exponent))

    sigma_prime = sigma * (1.0 - sigma)
    contributions = [
        k.value * x.absolute_error,
        k.value * x0.absolute_error,
        diff * k.absolute_error,
    ]
    return UncertainValue(sigma, sigma_prime * norm(contributions, strategy))


def lorentz_factor(
    x: UncertainValue, y: UncertainValue, strategy: NormStrategy
) -> UncertainValue:
    """f(x, y) = 1/sqrt(1 - (x/y)²).

    Error: norm(f³·|x|/y²·Δx, f³·x²/|y|³·Δy), i.e. f³(x/y)²·norm of the
    relative errors when x is non-zero.

    Raises:
        DivisionByZeroError: If y is zero.
        InvalidValueError: If |x/y| >= 1.
    """
    if not abs(y.value) > 0:
        raise DivisionByZeroError("Lorentz factor denominator is zero")

    ratio = x.value / y.value
    ratio_sq = ratio * ratio
    if not ratio_sq < 1.0:
        raise InvalidValueError(f"Lorentz factor requires |x/y| < 1, got {abs(ratio):g}")

    f = 1.0 / math.sqrt(1.0 - ratio_sq)
    f3 = f * f * f
    contributions = [
        f3 * abs(ratio / y.value) * x.absolute_error,
        f3 * ratio_sq / abs(y.value) * y.absolute_error,
    ]
    return UncertainValue(f, norm(contributions, strategy))


def polynomial(
    coefficients: Sequence[UncertainValue],
    x: UncertainValue,
    strategy: NormStrategy,
) -> UncertainValue:
    """P(x) = a0 + a1·x + a2·x² + ...

    Each term a_i·x^i is propagated as a product, then the terms are summed
    with the same norm.

    Raises:
        EmptyCollectionError: If ``coefficients`` is empty.
        UncertainValueError: Any failure of ``x.raised_to_integer(i)``.
    """
    if not coefficients:
        raise EmptyCollectionError("Polynomial requires at least one coefficient")

    terms = []
    for i, a in enumerate(coefficients):
        if i == 0:
            terms.append(a)
        else:
            terms.append(x.raised_to_integer(i).multiplying(a, strategy))
    return UncertainValue.sum(terms, strategy)


def normalize(
    values: Sequence[UncertainValue],
    denominator: UncertainValue,
    strategy: NormStrategy,
) -> List[UncertainValue]:
    """Divide every value by ``denominator``.

    Raises:
        DivisionByZeroError: If ``denominator`` is zero.
    """
    return [v.dividing(denominator, strategy) for v in values]


def normalize_by_first(
    values: Sequence[UncertainValue], strategy: NormStrategy
) -> List[UncertainValue]:
    """Divide by the first element, which becomes exactly 1 with no error."""
    if not values:
        return []
    normalized = normalize(values, values[0], strategy)
    normalized[0] = UncertainValue.one()
    return normalized


def average_step_width(
    values: Sequence[UncertainValue], strategy: NormStrategy
) -> UncertainValue:
    """(last - first) / (n - 1).

    Raises:
        InsufficientElementsError: If fewer than two values are given.
    """
    n = len(values)
    if n < 2:
        raise InsufficientElementsError(2, n)
    return values[-1].subtracting(values[0], strategy).divide_by(n - 1)
