"""Load and validate ``blossom.yaml`` configuration files."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import jsonschema
import yaml

SCHEMA_PATH = Path(__file__).parent / "schema.json"


class ConfigError(Exception):
    """Raised when a configuration file cannot be loaded or is invalid."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path


@dataclass(frozen=True)
class LoggingConfig:
    """Where and how verbosely the ``blossom`` logger writes."""

    level: str = "WARNING"
    file: str | None = None  # None logs to stderr
    thread_names: bool = True


@dataclass(frozen=True)
class OutputConfig:
    tokens: bool = False
    indent: int = 2


@dataclass(frozen=True)
class Config:
    """Top-level configuration. Every field has a default."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    trace: bool = False


def load_schema() -> dict[str, Any]:
    """Load the JSON schema shipped with the package."""
    with open(SCHEMA_PATH, "r", encoding="utf-8") as f:
        return json.load(f)


def validate_config(data: dict[str, Any], schema: dict[str, Any] | None = None) -> list[str]:
    """Validate raw config data against the schema. Returns a list of errors."""
    validator = jsonschema.Draft7Validator(schema or load_schema())
    errors = []
    for error in sorted(validator.iter_errors(data), key=lambda e: list(e.path)):
        where = "/".join(str(p) for p in error.path) or "<root>"
        errors.append(f"{where}: {error.message}")
    return errors


def config_from_dict(data: dict[str, Any]) -> Config:
    """Build a ``Config`` from already-validated data."""
    return Config(
        logging=LoggingConfig(**data.get("logging", {})),
        output=OutputConfig(**data.get("output", {})),
        trace=data.get("trace", False),
    )


def load_config(path: str | Path | None = None) -> Config:
    """Load configuration from *path*, or return the defaults when it is None.

    Raises:
        ConfigError: If the file is missing, is not valid YAML, or does not
            match the schema.
    """
    if path is None:
        return Config()

    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigError("File not found", path) from None
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}", path) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("Top-level value must be a mapping", path)

    errors = validate_config(data)
    if errors:
        raise ConfigError("; ".join(errors), path)
    return config_from_dict(data)
