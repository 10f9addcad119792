"""Writing plugin descriptions back to YAML."""

import io
import logging
import os
from typing import IO, Any, Dict, Optional, Union

import yaml

from plugdesc.config import SerializerOptions

from .models import PluginDescription

logger = logging.getLogger(__name__)


def to_mapping(
    description: PluginDescription,
    options: Optional[SerializerOptions] = None,
) -> Dict[str, Any]:
    """Build the document form of a description.

    By default commands are written under the singular ``command`` key and
    permissions are left out, which is the layout existing hosts read. With
    ``options.symmetric`` the output parses back to an equal description.
    """
    options = options or SerializerOptions()

    data: Dict[str, Any] = {
        "name": description.name,
        "main": description.main,
        "version": description.version,
    }

    if description.commands is not None:
        data["commands" if options.symmetric else "command"] = description.commands
    if description.website is not None:
        data["website"] = description.website
    if description.description is not None:
        data["description"] = description.description

    if len(description.authors) == 1:
        data["author"] = description.authors[0]
    elif len(description.authors) > 1:
        data["authors"] = list(description.authors)

    if options.symmetric and description.permissions is not None:
        to_perm_mapping = getattr(description.permissions, "to_mapping", None)
        if callable(to_perm_mapping):
            data["permissions"] = to_perm_mapping()
        else:
            logger.warning(
                f"Permissions of {description.name} cannot be serialized "
                f"({type(description.permissions).__name__} has no to_mapping)"
            )

    return data


def save(
    description: PluginDescription,
    sink: IO[str],
    options: Optional[SerializerOptions] = None,
) -> None:
    """Write a description as YAML to an open text stream.

    The caller owns the stream. Errors raised by the stream propagate as is.
    """
    options = options or SerializerOptions()
    yaml.safe_dump(
        to_mapping(description, options),
        sink,
        sort_keys=False,
        default_flow_style=False,
        indent=options.indent,
        allow_unicode=options.allow_unicode,
    )


def dumps(
    description: PluginDescription,
    options: Optional[SerializerOptions] = None,
) -> str:
    """Return the YAML text of a description."""
    buffer = io.StringIO()
    save(description, buffer, options)
    return buffer.getvalue()


def save_description(
    description: PluginDescription,
    path: Union[str, os.PathLike],
    options: Optional[SerializerOptions] = None,
) -> None:
    """Write a description to a YAML file, replacing any existing content."""
    with open(path, "w", encoding="utf-8") as f:
        save(description, f, options)
    logger.info(f"Wrote plugin description for {description.name} to {path}")
