"""
Plotting-position conventions for empirical quantiles.

This package enumerates the supported ranking rules (Cleveland's
(i - 0.5)/n, the linear default shared with numpy and R, and the other
members of the Hyndman & Fan family) and registers them for lookup by name.
"""

from .base import (
    BUILTIN_METHODS,
    CLEVELAND,
    LINEAR,
    MEDIAN_UNBIASED,
    NORMAL_UNBIASED,
    WEIBULL,
    PlottingPosition,
    PlottingPositionProtocol,
)
from .registry import (
    MethodRegistry,
    get_method,
    get_method_names,
    get_registry,
    is_method_registered,
    register_method,
)

# Register all built-in methods
for _method in BUILTIN_METHODS:
    register_method(_method, _method.aliases)

__all__ = [
    "PlottingPositionProtocol",
    "PlottingPosition",
    "MethodRegistry",
    "register_method",
    "get_method",
    "get_method_names",
    "is_method_registered",
    "get_registry",
    "CLEVELAND",
    "LINEAR",
    "WEIBULL",
    "MEDIAN_UNBIASED",
    "NORMAL_UNBIASED",
    "BUILTIN_METHODS",
]
