"""
Empirical f-quantiles with explicit plotting-position conventions.

This package computes quantiles of numeric batches the way exploratory data
analysis reads them off an f-quantile plot: Cleveland's (i - 0.5)/n rule,
the linear rule shared with numpy and R, and the other Hyndman & Fan
conventions, together with boxplot statistics and q-q pairs built on them.
"""

from .engine import as_batch, empirical_fractions, fraction_of, fractions_frame, quantile, resolve_method
from .methods import (
    CLEVELAND,
    LINEAR,
    MethodRegistry,
    PlottingPosition,
    get_method,
    get_method_names,
    register_method,
)
from .summary import boxplot_stats, grouped_quantiles, iqr, normal_qq, qq_pairs, quartiles
from .types import BoxplotStats, FractionPair, QQPair
from .utils.exceptions import ConfigurationError, InvalidInput, NumericDegenerate, QuantileEngineError

__version__ = "0.1.0"

__all__ = [
    "quantile",
    "empirical_fractions",
    "fraction_of",
    "fractions_frame",
    "as_batch",
    "resolve_method",
    "quartiles",
    "iqr",
    "boxplot_stats",
    "qq_pairs",
    "normal_qq",
    "grouped_quantiles",
    "PlottingPosition",
    "MethodRegistry",
    "register_method",
    "get_method",
    "get_method_names",
    "CLEVELAND",
    "LINEAR",
    "FractionPair",
    "QQPair",
    "BoxplotStats",
    "QuantileEngineError",
    "InvalidInput",
    "ConfigurationError",
    "NumericDegenerate",
]
