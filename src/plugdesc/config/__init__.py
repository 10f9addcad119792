"""Configuration for plugdesc."""

from .loader import ConfigError, load_options, load_yaml
from .models import SerializerOptions

__all__ = ["ConfigError", "SerializerOptions", "load_options", "load_yaml"]
