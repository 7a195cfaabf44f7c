"""
Type definitions for the quantile-engine project.
"""

from typing import NamedTuple, TypedDict


class FractionPair(NamedTuple):
    """A sorted batch value together with its empirical fraction."""

    value: float
    f: float


class QQPair(NamedTuple):
    """Matching quantiles of two batches (or of a batch and a distribution)."""

    x: float
    y: float


class BoxplotStats(TypedDict):
    """Boxplot summary of a batch."""

    n: int
    method: str
    min: float
    q1: float
    median: float
    q3: float
    max: float
    iqr: float
    lower_fence: float
    upper_fence: float
    lower_whisker: float
    upper_whisker: float
    outliers: list[float]
