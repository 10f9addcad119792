"""Plugin description model."""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PluginDescription(BaseModel):
    """Metadata describing a plugin, as declared in its plugin.yml.

    Instances are frozen once built. Use ``plugdesc.parse`` to read one from a
    document, or ``PluginDescription.build`` when the required values are
    already known.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    version: str
    main: str = Field(description="Qualified entry point, e.g. 'mypackage.plugin:MyPlugin'")
    commands: Optional[Any] = None
    description: Optional[str] = None
    authors: List[str] = Field(default_factory=list)
    website: Optional[str] = None
    permissions: Optional[Any] = None

    @classmethod
    def build(cls, name: str, version: str, main: str) -> "PluginDescription":
        """Create a description from its three required values."""
        return cls(name=name, version=version, main=main)

    def get_name(self) -> str:
        return self.name

    def get_version(self) -> str:
        return self.version

    def get_main(self) -> str:
        return self.main

    def get_commands(self) -> Optional[Any]:
        return self.commands

    def get_description(self) -> Optional[str]:
        return self.description

    def get_authors(self) -> List[str]:
        """Authors in declaration order; a copy, so callers cannot alter the record."""
        return list(self.authors)

    def get_website(self) -> Optional[str]:
        return self.website

    def get_permissions(self) -> Optional[Any]:
        return self.permissions
