"""Permission declarations and the factory seam used by the description parser."""

from .models import (
    InvalidPermissionError,
    Permission,
    PermissionDefault,
    PermissionFactory,
    PermissionSet,
)

__all__ = [
    "InvalidPermissionError",
    "Permission",
    "PermissionDefault",
    "PermissionFactory",
    "PermissionSet",
]
