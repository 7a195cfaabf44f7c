"""
Empirical f-quantiles of a numeric batch.

The engine sorts a batch, assigns every order statistic an empirical fraction
under a plotting-position convention, and reads quantiles off the resulting
piecewise-linear curve.

Typical use:
    quantile([12, 9, 14, 8, 15, 15, 15, 10, 9, 13], 0.5, "cleveland")  # 12.5
    quantile(batch, [0.25, 0.5, 0.75])                                  # linear default

Boundary policy:
    Fractions below the smallest (above the largest) empirical fraction
    return the batch minimum (maximum). This is what numpy's
    ``np.quantile(..., method=...)`` does for the same conventions.
"""

import warnings
from collections.abc import Iterable, Sequence
from typing import Any, overload

import numpy as np
import pandas as pd

from .methods import CLEVELAND, PlottingPositionProtocol, get_method
from .types import FractionPair
from .utils.config import default_method
from .utils.exceptions import InvalidInput, NumericDegenerate
from .utils.logging import get_logger

logger = get_logger(__name__)

MethodLike = str | PlottingPositionProtocol | None


def resolve_method(method: MethodLike) -> PlottingPositionProtocol:
    """Turn a method selector into a plotting-position object.

    Args:
        method: Method name or alias, a PlottingPosition, or None for the
                configured default

    Raises:
        InvalidInput: If the selector is unknown
    """
    if method is None:
        return get_method(default_method())
    if isinstance(method, PlottingPositionProtocol):
        return method
    return get_method(method)


def as_batch(batch: Iterable[float] | np.ndarray | pd.Series) -> np.ndarray:
    """Coerce a batch to a 1-D float array without touching the caller's data.

    Raises:
        InvalidInput: If the batch is empty, not one-dimensional, not numeric
                      or contains NaN/inf
    """
    if isinstance(batch, (str, bytes)):
        raise InvalidInput("batch must be a sequence of numbers, not a string")
    if not isinstance(batch, (np.ndarray, pd.Series, Sequence)):
        batch = list(batch)
    try:
        values = np.array(batch, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidInput(f"batch must contain only numbers: {e}")

    if values.ndim != 1:
        raise InvalidInput(f"batch must be one-dimensional, got shape {values.shape}")
    if values.size == 0:
        raise InvalidInput("batch is empty")
    if not np.all(np.isfinite(values)):
        raise InvalidInput("batch contains NaN or infinite values")
    return values


def _as_fractions(f: Any) -> tuple[np.ndarray, bool]:
    scalar = np.ndim(f) == 0
    try:
        fs = np.atleast_1d(np.asarray(f, dtype=float))
    except (TypeError, ValueError) as e:
        raise InvalidInput(f"fractions must be numbers: {e}")
    if fs.ndim != 1:
        raise InvalidInput(f"fractions must be a scalar or a flat sequence, got shape {fs.shape}")
    bad = fs[~((fs >= 0.0) & (fs <= 1.0))]
    if bad.size:
        raise InvalidInput(f"fraction {bad[0]!r} is outside [0, 1]")
    return fs, scalar


def _sorted_positions(
    batch: Iterable[float] | np.ndarray | pd.Series, method: MethodLike
) -> tuple[np.ndarray, np.ndarray, PlottingPositionProtocol]:
    values = np.sort(as_batch(batch), kind="stable")
    plotting = resolve_method(method)
    if values.size == 1:
        warnings.warn(
            "batch has a single element; every fraction maps to its value",
            NumericDegenerate,
            stacklevel=3,
        )
    return values, plotting.fractions(values.size), plotting


def _interpolate(x: np.ndarray, xp: np.ndarray, fp: np.ndarray) -> np.ndarray:
    """Piecewise-linear interpolation of fp over increasing xp, clamped at both ends.

    Same results as ``np.interp`` except that each point is a convex
    combination (1 - t) * a + t * b of its bracketing values, so values near
    the float limits never overflow.
    """
    if xp.size == 1:
        return np.full(x.shape, fp[0])
    j = np.clip(np.searchsorted(xp, x, side="right") - 1, 0, xp.size - 2)
    lo, hi = xp[j], xp[j + 1]
    with np.errstate(over="ignore", invalid="ignore"):
        span = hi - lo
        t = (x - lo) / span
        # spans too wide for a float are measured at half scale
        wide = ~np.isfinite(span)
        t[wide] = (x[wide] / 2 - lo[wide] / 2) / (hi[wide] / 2 - lo[wide] / 2)
    t = np.clip(t, 0.0, 1.0)
    a, b = fp[j], fp[j + 1]
    with np.errstate(over="ignore"):
        result = (1.0 - t) * a + t * b
    # rounding must not carry a result past its bracketing values
    return np.clip(result, np.minimum(a, b), np.maximum(a, b))


def empirical_fractions(
    batch: Iterable[float] | np.ndarray | pd.Series, method: MethodLike = CLEVELAND
) -> list[FractionPair]:
    """Sort a batch and pair each value with its empirical fraction.

    Under Cleveland's convention the i-th smallest of n values gets
    f_i = (i - 0.5) / n. Ties keep a stable order; the multiset of values is
    unchanged.

    Args:
        batch: Numeric observations (n >= 1)
        method: Plotting-position convention, Cleveland by default

    Returns:
        List of n FractionPair(value, f), ascending by value

    Raises:
        InvalidInput: If the batch is empty or the method is unknown
    """
    values, fractions, _ = _sorted_positions(batch, method)
    return [FractionPair(float(v), float(p)) for v, p in zip(values, fractions)]


def fractions_frame(
    batch: Iterable[float] | np.ndarray | pd.Series, method: MethodLike = CLEVELAND
) -> pd.DataFrame:
    """Empirical fractions as a DataFrame with columns ``value`` and ``f``."""
    values, fractions, _ = _sorted_positions(batch, method)
    return pd.DataFrame({"value": values, "f": fractions})


@overload
def quantile(batch: Iterable[float] | np.ndarray | pd.Series, f: float, method: MethodLike = None) -> float: ...


@overload
def quantile(
    batch: Iterable[float] | np.ndarray | pd.Series, f: Sequence[float] | np.ndarray, method: MethodLike = None
) -> list[float]: ...


def quantile(batch, f, method=None):
    """Compute the f-quantile(s) of a batch.

    Args:
        batch: Numeric observations (n >= 1); never modified
        f: Target fraction in [0, 1], or a sequence of them
        method: Plotting-position convention (name, alias or object). None
                uses the configured default, ``linear`` unless overridden

    Returns:
        A float for a scalar fraction, otherwise a list of floats in the
        order the fractions were given

    Raises:
        InvalidInput: If the batch is empty, a fraction is outside [0, 1] or
                      the method is unknown

    Notes:
        - A fraction equal to an empirical fraction returns that order
          statistic exactly; fractions in between interpolate linearly.
        - Fractions beyond the extreme empirical fractions clamp to the
          batch minimum/maximum.
    """
    fs, scalar = _as_fractions(f)
    values, fractions, plotting = _sorted_positions(batch, method)
    result = _interpolate(fs, fractions, values)
    logger.debug(f"quantile[{plotting.name}] n={values.size} f={fs.tolist()} -> {result.tolist()}")
    if scalar:
        return float(result[0])
    return [float(x) for x in result]


def fraction_of(
    batch: Iterable[float] | np.ndarray | pd.Series, value: Any, method: MethodLike = CLEVELAND
) -> float | list[float]:
    """Find the f-value at which a value sits within a batch.

    This is the inverse of `quantile`: interpolate linearly on the empirical
    fractions. Tied batch values share the mean of their fractions. Values
    outside the batch clamp to the fraction of its minimum/maximum.

    Raises:
        InvalidInput: If the batch is empty, a value is not finite or the
                      method is unknown
    """
    scalar = np.ndim(value) == 0
    try:
        xs = np.atleast_1d(np.asarray(value, dtype=float))
    except (TypeError, ValueError) as e:
        raise InvalidInput(f"values must be numbers: {e}")
    if not np.all(np.isfinite(xs)):
        raise InvalidInput("values must be finite")

    values, fractions, _ = _sorted_positions(batch, method)
    unique, inverse = np.unique(values, return_inverse=True)
    tied = np.bincount(inverse, weights=fractions) / np.bincount(inverse)
    result = _interpolate(xs, unique, tied)
    if scalar:
        return float(result[0])
    return [float(x) for x in result]
