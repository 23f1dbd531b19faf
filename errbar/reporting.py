"""Round, format and tabulate uncertain values for exported reports.

This module is used after the numerical work is done. Numbers are kept at full
precision in every numeric column; only the ``reported`` string columns are
rounded to the precision implied by the uncertainty.
"""

from __future__ import annotations

import logging
from typing import Mapping, Sequence

import numpy as np
import pandas as pd

from .core.value import UncertainValue
from .errors import InsufficientElementsError, MixedSignsError, ZeroInputError
from .stats import (
    arithmetic_mean,
    arithmetic_mean_fast,
    geometric_mean,
    geometric_mean_fast,
)

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = [
    "n",
    "mean",
    "sd",
    "relative_error",
    "geometric_mean",
    "multiplicative_error",
    "reported",
]


def _round_uncertainty(uncertainty: float) -> tuple[float, int]:
    """Round an uncertainty to the figures it is reported with.

    The rounded uncertainty keeps two significant figures when it starts
    with 1 and one otherwise. The rule is applied to the rounded text, so a
    carry into the next decade (0.96 to 1) is reported as ``1.0``.

    Args:
        uncertainty (float): Absolute uncertainty.

    Returns:
        tuple[float, int]: Rounded uncertainty and the ``round`` digit count
        of its last kept figure (negative for uncertainties of ten or more).

    Raises:
        ValueError: If uncertainty is non-finite or non-positive.
    """
    u = float(uncertainty)
    if not np.isfinite(u) or u <= 0:
        raise ValueError(f"Uncertainty must be finite and > 0, got {uncertainty!r}")

    text = f"{u:.1e}"
    if not text.startswith("1"):
        text = f"{u:.0e}"
        if text.startswith("1"):
            text = f"{float(text):.1e}"
    mantissa, exponent = text.split("e")
    ndigits = len(mantissa.replace(".", "")) - 1 - int(exponent)
    return float(text), ndigits


def uncertainty_decimal_places(uncertainty: float) -> int:
    """Return the decimal places a value paired with ``uncertainty`` should use.

    Args:
        uncertainty (float): Absolute uncertainty of the reported value.

    Returns:
        int: Number of decimal places, zero for uncertainties of one or more.
    """
    _, ndigits = _round_uncertainty(uncertainty)
    return max(0, ndigits)


def round_value_to_uncertainty(value: float, uncertainty: float) -> tuple[float, float]:
    """Round a value and its uncertainty to the same last significant place.

    Example: ``(1234.5, 23.0)`` becomes ``(1230.0, 20.0)`` and
    ``(3.0, 1.5811)`` becomes ``(3.0, 1.6)``.
    """
    rounded_u, ndigits = _round_uncertainty(uncertainty)
    return float(round(float(value), ndigits)), rounded_u


def format_value_with_uncertainty(uv: UncertainValue) -> str:
    """Format ``uv`` as ``"value ± uncertainty"`` at reporting precision.

    Args:
        uv (UncertainValue): Value to format.

    Returns:
        str: Rounded text such as ``"3.0 ± 1.6"``. Error-free or non-finite
        values fall back to ``str(uv)``.
    """
    if not np.isfinite(uv.value) or not np.isfinite(uv.absolute_error):
        return str(uv)
    if uv.absolute_error == 0:
        return str(uv)

    value, uncertainty = round_value_to_uncertainty(uv.value, uv.absolute_error)
    dp = uncertainty_decimal_places(uv.absolute_error)
    return f"{value:.{dp}f} ± {uncertainty:.{dp}f}"


def uncertainty_forms(uv: UncertainValue) -> tuple[float, float]:
    """Return fractional and percentage uncertainty of ``uv``.

    Note:
        Returns ``(nan, nan)`` when the value is zero or non-finite.
    """
    if uv.value == 0 or not np.isfinite(uv.value) or not np.isfinite(uv.absolute_error):
        return np.nan, np.nan
    frac = uv.relative_error
    return float(frac), float(frac * 100.0)


def summarize_samples(samples: Sequence[float], fast: bool = False) -> dict:
    """Summarize one group of replicate measurements.

    Args:
        samples (Sequence[float]): Finite replicate values, at least two.
        fast (bool, optional): Use the numpy estimators. Defaults to False.

    Returns:
        dict: Row with the keys of ``SUMMARY_COLUMNS``. Geometric-mean
        entries are NaN when the samples contain zero or mixed signs.

    Raises:
        InsufficientElementsError: If fewer than two samples are given.
        NonFiniteError: If any sample is NaN or infinite.
    """
    mean_fn = arithmetic_mean_fast if fast else arithmetic_mean
    geo_fn = geometric_mean_fast if fast else geometric_mean

    mean = mean_fn(samples)
    frac, _ = uncertainty_forms(mean)
    row = {
        "n": len(samples),
        "mean": mean.value,
        "sd": mean.absolute_error,
        "relative_error": frac,
        "geometric_mean": np.nan,
        "multiplicative_error": np.nan,
        "reported": format_value_with_uncertainty(mean),
    }

    try:
        geo = geo_fn(samples)
    except (ZeroInputError, MixedSignsError) as exc:
        logger.debug("Geometric mean undefined: %s", exc)
    else:
        row["geometric_mean"] = geo.value
        row["multiplicative_error"] = geo.multiplicative_error
    return row


def summary_frame(
    groups: Mapping[str, Sequence[float]], fast: bool = False
) -> pd.DataFrame:
    """Build a summary table with one row per named group of replicates.

    Groups with fewer than two finite values are skipped with a warning.

    Args:
        groups (Mapping[str, Sequence[float]]): Replicate values by quantity
            name. NaN entries are dropped before summarizing.
        fast (bool, optional): Use the numpy estimators. Defaults to False.

    Returns:
        pandas.DataFrame: Indexed by quantity, columns ``SUMMARY_COLUMNS``.
    """
    rows = {}
    for name, samples in groups.items():
        arr = np.asarray(samples, dtype=float)
        finite = arr[np.isfinite(arr)]
        if finite.size != arr.size:
            logger.warning(
                "Dropped %d non-finite values from '%s'", arr.size - finite.size, name
            )
        try:
            rows[name] = summarize_samples(finite.tolist(), fast=fast)
        except InsufficientElementsError as exc:
            logger.warning("Skipping '%s': %s", name, exc)

    frame = pd.DataFrame.from_dict(rows, orient="index", columns=SUMMARY_COLUMNS)
    frame.index.name = "quantity"
    return frame


def summary_frame_from_table(df: pd.DataFrame, fast: bool = False) -> pd.DataFrame:
    """Summarize every numeric column of ``df`` (one column per quantity)."""
    groups = {}
    for col in df.columns:
        values = pd.to_numeric(df[col], errors="coerce")
        if values.notna().sum() == 0:
            logger.debug("Skipping non-numeric column '%s'", col)
            continue
        groups[str(col)] = values.to_numpy(dtype=float)
    return summary_frame(groups, fast=fast)
