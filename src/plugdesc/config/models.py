"""Pydantic models for plugdesc configuration."""

from pydantic import BaseModel, Field


class SerializerOptions(BaseModel):
    """Controls how a PluginDescription is written back to YAML."""

    symmetric: bool = Field(
        default=False,
        description=(
            "Write commands under 'commands' and include permissions, so the "
            "output parses back to the same description"
        ),
    )
    indent: int = Field(default=2, ge=2, le=9)
    allow_unicode: bool = True
