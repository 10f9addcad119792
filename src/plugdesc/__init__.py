"""plugdesc - read, validate, and write plugin description files."""

__version__ = "1.0.0"

from .config import ConfigError, SerializerOptions  # noqa: E402
from .descriptor import (  # noqa: E402
    InvalidDescriptionError,
    MissingFieldError,
    PluginDescription,
    WrongTypeError,
    dumps,
    load_description,
    parse,
    save,
    save_description,
    to_mapping,
)
from .permissions import (  # noqa: E402
    InvalidPermissionError,
    Permission,
    PermissionDefault,
    PermissionSet,
)

__all__ = [
    "ConfigError",
    "InvalidDescriptionError",
    "InvalidPermissionError",
    "MissingFieldError",
    "Permission",
    "PermissionDefault",
    "PermissionSet",
    "PluginDescription",
    "SerializerOptions",
    "WrongTypeError",
    "__version__",
    "dumps",
    "load_description",
    "parse",
    "save",
    "save_description",
    "to_mapping",
]
