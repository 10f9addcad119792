"""Permission declarations carried by a plugin description."""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class InvalidPermissionError(ValueError):
    """Raised when a permissions block cannot be turned into a PermissionSet."""


class PermissionDefault(str, Enum):
    """Who holds a permission when nothing else grants or denies it."""

    TRUE = "true"
    FALSE = "false"
    OP = "op"
    NOT_OP = "not op"

    @classmethod
    def lookup(cls, value: Any) -> "PermissionDefault":
        """Resolve a YAML value to a PermissionDefault.

        Accepts booleans and the usual spellings ("yes", "isop", "!op", ...),
        case-insensitively.

        Raises:
            InvalidPermissionError: If the value matches no known default.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.TRUE if value else cls.FALSE
        if isinstance(value, str):
            found = _DEFAULT_ALIASES.get(value.strip().lower())
            if found is not None:
                return found
        raise InvalidPermissionError(f"Unknown permission default: {value!r}")

    def to_yaml(self) -> Any:
        if self is PermissionDefault.TRUE:
            return True
        if self is PermissionDefault.FALSE:
            return False
        return self.value


_DEFAULT_ALIASES = {
    "true": PermissionDefault.TRUE,
    "yes": PermissionDefault.TRUE,
    "false": PermissionDefault.FALSE,
    "no": PermissionDefault.FALSE,
    "op": PermissionDefault.OP,
    "isop": PermissionDefault.OP,
    "operator": PermissionDefault.OP,
    "notop": PermissionDefault.NOT_OP,
    "!op": PermissionDefault.NOT_OP,
    "not op": PermissionDefault.NOT_OP,
    "not operator": PermissionDefault.NOT_OP,
}


class Permission(BaseModel):
    """A single declared permission node."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: Optional[str] = None
    default: PermissionDefault = PermissionDefault.OP
    children: Dict[str, bool] = Field(default_factory=dict)

    @field_validator("default", mode="before")
    @classmethod
    def coerce_default(cls, value: Any) -> PermissionDefault:
        return PermissionDefault.lookup(value)

    @field_validator("children", mode="before")
    @classmethod
    def coerce_children(cls, value: Any) -> Any:
        # A bare list of names grants every child
        if isinstance(value, list):
            return {child: True for child in value}
        return value

    def to_mapping(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.description is not None:
            data["description"] = self.description
        data["default"] = self.default.to_yaml()
        if self.children:
            data["children"] = dict(self.children)
        return data


class PermissionSet(BaseModel):
    """Ordered collection of permissions declared by one plugin."""

    model_config = ConfigDict(frozen=True)

    permissions: Dict[str, Permission] = Field(default_factory=dict)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "PermissionSet":
        """Build a PermissionSet from the ``permissions`` block of a description.

        Args:
            mapping: Permission name -> settings mapping (or None for defaults).

        Returns:
            The validated PermissionSet.

        Raises:
            InvalidPermissionError: If a name or entry has the wrong shape.
            pydantic.ValidationError: If an entry's settings fail validation.
        """
        if not isinstance(mapping, Mapping):
            raise InvalidPermissionError(
                f"Permissions must be a mapping, got {type(mapping).__name__}"
            )

        entries: Dict[str, Permission] = {}
        for name, body in mapping.items():
            if not isinstance(name, str) or not name:
                raise InvalidPermissionError(f"Invalid permission name: {name!r}")
            if body is None:
                body = {}
            if not isinstance(body, Mapping):
                raise InvalidPermissionError(f"Permission '{name}' must be a mapping")

            settings = {
                key: body[key]
                for key in ("description", "default", "children")
                if body.get(key) is not None
            }
            entries[name] = Permission(name=name, **settings)

        return cls(permissions=entries)

    def to_mapping(self) -> Dict[str, Dict[str, Any]]:
        """Inverse of from_mapping."""
        return {name: perm.to_mapping() for name, perm in self.permissions.items()}

    def names(self) -> List[str]:
        return list(self.permissions)

    def get(self, name: str) -> Optional[Permission]:
        return self.permissions.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self.permissions

    def __len__(self) -> int:
        return len(self.permissions)


# Anything that turns a permissions mapping into a permission object
PermissionFactory = Callable[[Mapping[str, Any]], Any]
