"""Reading plugin descriptions from YAML documents."""

import logging
import os
from collections.abc import Mapping
from datetime import date
from pathlib import Path
from typing import IO, Any, Dict, List, Optional, Union

import yaml
from pydantic import ValidationError

from plugdesc.permissions import InvalidPermissionError, PermissionFactory, PermissionSet

from .errors import InvalidDescriptionError, MissingFieldError, WrongTypeError
from .models import PluginDescription

logger = logging.getLogger(__name__)

KNOWN_KEYS = (
    "name",
    "version",
    "main",
    "commands",
    "website",
    "description",
    "author",
    "authors",
    "permissions",
)

Source = Union[Mapping, str, bytes, IO, os.PathLike]


def _decode(source: Source) -> Any:
    """Turn any supported source into a decoded YAML document."""
    if isinstance(source, Mapping):
        return source
    if isinstance(source, os.PathLike):
        try:
            with open(source, "rb") as f:
                return yaml.safe_load(f)
        except FileNotFoundError:
            raise InvalidDescriptionError(f"description file not found: {source}") from None
        except OSError as e:
            raise InvalidDescriptionError(f"cannot read description file: {source}: {e}") from e
    return yaml.safe_load(source)


def _required_string(document: Mapping, key: str) -> str:
    value = document.get(key)
    if value is None:
        raise MissingFieldError(key)
    if isinstance(value, (Mapping, list, tuple, set)):
        raise WrongTypeError(key)

    if isinstance(value, bool):
        text = "true" if value else "false"
    elif isinstance(value, (str, int, float, date)):
        text = str(value)
    else:
        raise WrongTypeError(key)

    if not text:
        raise MissingFieldError(key)
    return text


def _optional_string(document: Mapping, key: str) -> Optional[str]:
    value = document.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise WrongTypeError(key)
    return value


def _read_authors(document: Mapping) -> List[str]:
    authors: List[str] = []

    author = _optional_string(document, "author")
    if author is not None:
        authors.append(author)

    extra = document.get("authors")
    if extra is not None:
        if not isinstance(extra, list) or not all(isinstance(a, str) for a in extra):
            raise WrongTypeError("authors")
        authors.extend(extra)

    return authors


def _read_permissions(document: Mapping, factory: PermissionFactory) -> Any:
    perms = document.get("permissions")
    if perms is None:
        return None
    if not isinstance(perms, Mapping):
        raise WrongTypeError("permissions")
    try:
        return factory(perms)
    except (InvalidPermissionError, ValidationError, TypeError, ValueError) as e:
        raise WrongTypeError("permissions") from e


def parse(
    source: Source,
    permission_factory: Optional[PermissionFactory] = None,
) -> PluginDescription:
    """Parse and validate a plugin description.

    Args:
        source: A decoded mapping, YAML text or bytes, a readable stream, or a
            path to a YAML file.
        permission_factory: Builds the permissions object from the nested
            ``permissions`` mapping. Defaults to ``PermissionSet.from_mapping``.

    Returns:
        The validated PluginDescription.

    Raises:
        InvalidDescriptionError: On the first field that is missing or has the
            wrong type, or if the document itself cannot be read.
    """
    factory = permission_factory or PermissionSet.from_mapping

    try:
        document = _decode(source)
    except yaml.YAMLError as e:
        raise InvalidDescriptionError(f"invalid YAML: {e}") from e
    except UnicodeDecodeError as e:
        raise InvalidDescriptionError(f"description is not valid UTF-8: {e}") from e

    if not isinstance(document, Mapping):
        raise InvalidDescriptionError("description must be a mapping")

    try:
        fields: Dict[str, Any] = {
            "name": _required_string(document, "name"),
            "version": _required_string(document, "version"),
            "main": _required_string(document, "main"),
        }
        if document.get("commands") is not None:
            fields["commands"] = document["commands"]
        fields["website"] = _optional_string(document, "website")
        fields["description"] = _optional_string(document, "description")
        fields["authors"] = _read_authors(document)
        fields["permissions"] = _read_permissions(document, factory)
    except InvalidDescriptionError as e:
        logger.debug(f"Rejected plugin description: {e}")
        raise

    for key in document:
        if key not in KNOWN_KEYS:
            logger.debug(f"Ignoring unknown key in plugin description: {key!r}")

    description = PluginDescription(**fields)
    logger.debug(f"Parsed plugin description {description.name} {description.version}")
    return description


def load_description(
    path: Union[str, os.PathLike],
    permission_factory: Optional[PermissionFactory] = None,
) -> PluginDescription:
    """Read and validate a plugin description file."""
    return parse(Path(path), permission_factory=permission_factory)
