"""
Configuration management for the quantile engine.
"""

import json
import math
import os
from pathlib import Path
from typing import Any

from dotenv import dotenv_values

from .exceptions import ConfigurationError

DEFAULT_METHOD = "linear"
DEFAULT_WHIS = 1.5
CONFIG_KEYS = ("QUANTILE_ENGINE_METHOD", "QUANTILE_ENGINE_WHIS", "LOG_LEVEL", "LOG_FILE")


def load_config(config_file: Path | None = None, env_file: Path | None = None) -> dict[str, Any]:
    """Load configuration from file, .env file and environment variables.

    Later sources win: JSON config file, then the .env file (only when
    given), then the process environment. Nothing is written back to
    os.environ.
    """
    config: dict[str, Any] = {}

    # Load from file if provided
    if config_file and config_file.exists():
        try:
            with open(config_file) as f:
                config.update(json.load(f))
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Failed to load config file {config_file}: {e}")

    # Load .env file if provided
    if env_file and env_file.exists():
        dotenv_config = dotenv_values(env_file)
        config.update({k: v for k, v in dotenv_config.items() if k in CONFIG_KEYS and v is not None})

    # Load from environment variables
    env_config = {key: os.getenv(key) for key in CONFIG_KEYS}

    # Filter out None values
    env_config = {k: v for k, v in env_config.items() if v is not None}
    config.update(env_config)

    config.setdefault("QUANTILE_ENGINE_METHOD", DEFAULT_METHOD)
    config.setdefault("QUANTILE_ENGINE_WHIS", DEFAULT_WHIS)
    config.setdefault("LOG_LEVEL", "INFO")

    return config


def get_config_value(key: str, default: Any = None) -> Any:
    """Get a configuration value."""
    config = load_config()
    return config.get(key, default)


def validate_config(config: dict[str, Any]) -> list[str]:
    """Validate configuration and return list of errors."""
    from ..methods.registry import is_method_registered

    errors = []

    method = config.get("QUANTILE_ENGINE_METHOD")
    if not isinstance(method, str) or not is_method_registered(method):
        errors.append(f"Unknown quantile method: {method!r}")

    whis = config.get("QUANTILE_ENGINE_WHIS")
    try:
        value = float(whis)
        if not math.isfinite(value) or value < 0:
            errors.append(f"Whisker multiplier must be a non-negative number: {whis}")
    except (ValueError, TypeError):
        errors.append(f"Invalid numeric value for QUANTILE_ENGINE_WHIS: {whis}")

    level = config.get("LOG_LEVEL")
    if str(level).upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        errors.append(f"Invalid log level: {level}")

    return errors


def default_method(config: dict[str, Any] | None = None) -> str:
    """Return the configured default quantile method selector."""
    from ..methods.registry import is_method_registered

    config = config if config is not None else load_config()
    method = config.get("QUANTILE_ENGINE_METHOD", DEFAULT_METHOD)
    if not isinstance(method, str) or not is_method_registered(method):
        raise ConfigurationError(f"Unknown quantile method: {method!r}")
    return method


def default_whis(config: dict[str, Any] | None = None) -> float:
    """Return the configured boxplot whisker multiplier."""
    config = config if config is not None else load_config()
    whis = config.get("QUANTILE_ENGINE_WHIS", DEFAULT_WHIS)
    try:
        value = float(whis)
    except (ValueError, TypeError):
        raise ConfigurationError(f"Invalid numeric value for QUANTILE_ENGINE_WHIS: {whis}")
    if not math.isfinite(value) or value < 0:
        raise ConfigurationError(f"Whisker multiplier must be a non-negative number: {whis}")
    return value
