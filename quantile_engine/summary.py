"""
Quantile-based summaries of batches: quartiles, boxplots and q-q pairs.

Everything here is built on `quantile_engine.engine.quantile`, so a boxplot's
hinges always agree with the 0.25/0.75 quantiles for the same method.
"""

from collections.abc import Iterable, Sequence

import numpy as np
import pandas as pd
from scipy.stats import norm as _norm_dist

from .engine import MethodLike, as_batch, quantile, resolve_method
from .methods import CLEVELAND
from .types import BoxplotStats, QQPair
from .utils.config import default_whis
from .utils.exceptions import InvalidInput
from .utils.logging import get_logger, log_function_call

logger = get_logger(__name__)

Batch = Iterable[float] | np.ndarray | pd.Series


def quartiles(batch: Batch, method: MethodLike = None) -> tuple[float, float, float]:
    """Return (q1, median, q3)."""
    q1, median, q3 = quantile(batch, [0.25, 0.5, 0.75], resolve_method(method))
    return q1, median, q3


def iqr(batch: Batch, method: MethodLike = None) -> float:
    """Interquartile range, q3 - q1."""
    q1, q3 = quantile(batch, [0.25, 0.75], resolve_method(method))
    return q3 - q1


@log_function_call
def boxplot_stats(batch: Batch, method: MethodLike = None, whis: float | None = None) -> BoxplotStats:
    """
    Compute the numbers behind a Tukey boxplot.

    Args:
        batch: Numeric observations (n >= 1)
        method: Quantile convention used for the hinges
        whis: Fence multiplier; defaults to the configured value (1.5)

    Returns:
        BoxplotStats with the five-number summary, IQR, fences
        (q1 - whis*IQR, q3 + whis*IQR), whisker ends (the most extreme
        values inside the fences, never inside the box) and outliers
        (values outside the fences, ascending).

    Raises:
        InvalidInput: If the batch is invalid or whis is negative
    """
    if whis is None:
        whis = default_whis()
    if not np.isfinite(whis) or whis < 0:
        raise InvalidInput(f"whis must be a non-negative number, got {whis}")

    values = np.sort(as_batch(batch), kind="stable")
    plotting = resolve_method(method)
    q1, median, q3 = quantile(values, [0.25, 0.5, 0.75], plotting)
    spread = q3 - q1
    lower_fence = q1 - whis * spread
    upper_fence = q3 + whis * spread

    # whiskers never end inside the box
    lower_whisker = min(float(values[values >= lower_fence].min()), q1)
    upper_whisker = max(float(values[values <= upper_fence].max()), q3)
    outliers = values[(values < lower_fence) | (values > upper_fence)]
    if outliers.size:
        logger.debug(f"{outliers.size} of {values.size} values outside fences [{lower_fence}, {upper_fence}]")

    return {
        "n": int(values.size),
        "method": plotting.name,
        "min": float(values[0]),
        "q1": q1,
        "median": median,
        "q3": q3,
        "max": float(values[-1]),
        "iqr": spread,
        "lower_fence": float(lower_fence),
        "upper_fence": float(upper_fence),
        "lower_whisker": lower_whisker,
        "upper_whisker": upper_whisker,
        "outliers": [float(v) for v in outliers],
    }


def qq_pairs(x: Batch, y: Batch, method: MethodLike = CLEVELAND) -> list[QQPair]:
    """Pair matching quantiles of two batches for an empirical q-q plot.

    When the batches differ in size, the smaller one keeps its sorted values
    and the larger one is interpolated at the smaller one's f-values.
    """
    xs = np.sort(as_batch(x), kind="stable")
    ys = np.sort(as_batch(y), kind="stable")
    plotting = resolve_method(method)

    if xs.size == ys.size:
        return [QQPair(float(a), float(b)) for a, b in zip(xs, ys)]

    if xs.size < ys.size:
        fs = plotting.fractions(xs.size)
        ys = np.asarray(quantile(ys, fs, plotting))
    else:
        fs = plotting.fractions(ys.size)
        xs = np.asarray(quantile(xs, fs, plotting))
    return [QQPair(float(a), float(b)) for a, b in zip(xs, ys)]


def normal_qq(batch: Batch, method: MethodLike = CLEVELAND) -> list[QQPair]:
    """Pair a sorted batch with standard-normal quantiles of its f-values.

    Returns:
        QQPair(x=theoretical normal quantile, y=sample value) per element

    Raises:
        InvalidInput: If the method assigns a fraction of 0 or 1 (e.g.
                      ``linear``), which has no finite normal quantile
    """
    values = np.sort(as_batch(batch), kind="stable")
    plotting = resolve_method(method)
    fs = plotting.fractions(values.size)
    if fs[0] <= 0.0 or fs[-1] >= 1.0:
        raise InvalidInput(
            f"method {plotting.name!r} assigns fractions of 0 or 1; use e.g. 'cleveland' for a normal q-q plot"
        )
    theoretical = _norm_dist.ppf(fs)
    return [QQPair(float(t), float(v)) for t, v in zip(theoretical, values)]


@log_function_call
def grouped_quantiles(
    frame: pd.DataFrame,
    value_col: str,
    group_col: str,
    fractions: float | Sequence[float] = (0.25, 0.5, 0.75),
    method: MethodLike = None,
) -> pd.DataFrame:
    """Quantiles of one column for every group of another.

    Missing values are dropped per group. Rows with a missing group label
    are kept as a group of their own, indexed by NaN and placed last.

    Returns:
        DataFrame indexed by group, one column per requested fraction

    Raises:
        InvalidInput: If a column is missing or a group has no values left
    """
    missing = [c for c in (value_col, group_col) if c not in frame.columns]
    if missing:
        raise InvalidInput(f"columns not found in frame: {missing}")

    fs = [float(f) for f in np.atleast_1d(fractions)]
    plotting = resolve_method(method)

    rows: dict[object, list[float]] = {}
    for key, series in frame.groupby(group_col, sort=True, dropna=False)[value_col]:
        clean = series.dropna()
        if clean.empty:
            raise InvalidInput(f"group {key!r} has no values in column {value_col!r}")
        rows[key] = quantile(clean.to_numpy(), fs, plotting)

    result = pd.DataFrame.from_dict(rows, orient="index", columns=fs)
    result.index.name = group_col
    return result
