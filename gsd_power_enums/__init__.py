"""
Regenerate the constant tables of the gnome-settings-daemon power plugin.

Prints the inhibitor flags and presence status values as `NAME = VALUE;`
lines, flags first.
"""

from .errors import GsdPowerEnumsError, TypeKindError, UnknownTypeError
from .registry import EnumerantEntry, EnumRegistry, TypeKind, default_registry
from .types import InhibitorFlag, PresenceStatus

__all__ = [
    "EnumerantEntry",
    "EnumRegistry",
    "TypeKind",
    "default_registry",
    "InhibitorFlag",
    "PresenceStatus",
    "GsdPowerEnumsError",
    "UnknownTypeError",
    "TypeKindError",
]
