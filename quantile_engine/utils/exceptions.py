"""
Custom exceptions for the quantile engine.
"""


class QuantileEngineError(Exception):
    """Base exception for all quantile engine errors."""

    pass


class InvalidInput(QuantileEngineError, ValueError):
    """Exception raised for an empty batch, an out-of-range fraction or an unknown method."""

    pass


class ConfigurationError(QuantileEngineError):
    """Exception raised for configuration errors."""

    pass


class NumericDegenerate(UserWarning):
    """Warning issued when a batch has a single element.

    Every fraction maps to that element's value; the result is still valid.
    """

    pass
