"""
Logging utilities for the quantile engine.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar, cast

from .exceptions import ConfigurationError, InvalidInput

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(log_level: str = "INFO", log_file: str | None = None) -> None:
    """Set up logging configuration."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Invalid log level: {log_level}")
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=handlers,
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)


F = TypeVar("F", bound=Callable[..., Any])


def log_function_call(func: F) -> F:
    """Decorator to log function calls."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = get_logger(func.__module__)
        logger.debug(f"Calling {func.__name__} with {len(args)} args, kwargs={kwargs}")
        try:
            result = func(*args, **kwargs)
            logger.debug(f"{func.__name__} completed successfully")
            return result
        except InvalidInput as e:
            logger.debug(f"{func.__name__} rejected its input: {e}")
            raise
        except Exception as e:
            logger.error(f"{func.__name__} failed with error: {e}")
            raise

    return cast(F, wrapper)
