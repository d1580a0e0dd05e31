"""Blossom configuration subpackage (YAML files validated against a JSON schema)."""

from blossom.config.loader import (
    Config,
    ConfigError,
    LoggingConfig,
    OutputConfig,
    load_config,
    validate_config,
)
from blossom.config.logs import setup_logging

__all__ = [
    "Config",
    "ConfigError",
    "LoggingConfig",
    "OutputConfig",
    "load_config",
    "validate_config",
    "setup_logging",
]
