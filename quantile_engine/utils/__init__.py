"""
Utility modules for the quantile engine.
"""

from .config import default_method, default_whis, get_config_value, load_config, validate_config
from .exceptions import (
    ConfigurationError,
    InvalidInput,
    NumericDegenerate,
    QuantileEngineError,
)
from .logging import get_logger, log_function_call, setup_logging

__all__ = [
    "QuantileEngineError",
    "InvalidInput",
    "ConfigurationError",
    "NumericDegenerate",
    "setup_logging",
    "get_logger",
    "log_function_call",
    "load_config",
    "get_config_value",
    "validate_config",
    "default_method",
    "default_whis",
]
