"""Plugin description parsing, validation, and serialization."""

from .errors import InvalidDescriptionError, MissingFieldError, WrongTypeError
from .loader import load_description, parse
from .models import PluginDescription
from .writer import dumps, save, save_description, to_mapping

__all__ = [
    "InvalidDescriptionError",
    "MissingFieldError",
    "PluginDescription",
    "WrongTypeError",
    "dumps",
    "load_description",
    "parse",
    "save",
    "save_description",
    "to_mapping",
]
