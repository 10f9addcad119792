"""YAML configuration file loading with Pydantic validation."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import SerializerOptions

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when configuration loading or validation fails."""


def load_yaml(path: Path) -> dict:
    """Load a YAML file and return its contents as a dict.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed YAML contents.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
            if data is None:
                return {}
            return data
    except FileNotFoundError:
        raise ConfigError(f"Configuration file not found: {path}") from None
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"Configuration file {path} is not valid UTF-8: {e}") from e


def load_options(path: Path) -> SerializerOptions:
    """Load serializer options from a YAML file.

    Raises:
        ConfigError: If the file is missing, malformed, or fails validation.
    """
    data = load_yaml(path)
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration in {path} must be a mapping")
    try:
        options = SerializerOptions(**data)
    except ValidationError as e:
        raise ConfigError(f"Configuration validation failed for {path}: {e}") from e
    logger.debug(f"Loaded serializer options from {path}: {options}")
    return options
