"""
Lookup of named constant groups by their C type name.

Each group is a Python enum class registered under an opaque identifier.
Looking an identifier up yields the group's entries in declaration order,
the same order in which the daemon's type definitions declare them.
"""

import logging
from dataclasses import dataclass
from enum import Enum, Flag
from typing import Dict, Iterator, List, Type

from gsd_power_enums.errors import EntryValueError, TypeKindError, UnknownTypeError
from gsd_power_enums.globals import DEFAULT_ENUM_TYPE, DEFAULT_FLAGS_TYPE, INT32_MAX, INT32_MIN, UINT32_MAX
from gsd_power_enums.types import InhibitorFlag, PresenceStatus

log = logging.getLogger(__name__)


class TypeKind(Enum):
    FLAGS = "flags"
    ENUM = "enum"


@dataclass(frozen=True)
class EnumerantEntry:
    name: str
    value: int

    def __post_init__(self):
        if not self.name:
            raise EntryValueError("Enumerant name must not be empty")
        if not (INT32_MIN <= self.value <= INT32_MAX):
            raise EntryValueError(f'Value {self.value} of "{self.name}" does not fit a 32-bit signed integer')


def kind_of(enum_cls: Type[Enum]) -> TypeKind:
    return TypeKind.FLAGS if issubclass(enum_cls, Flag) else TypeKind.ENUM


def as_signed32(value: int) -> int:
    """Reinterpret an unsigned 32-bit flags value the way `%d` prints a guint"""
    return value - (UINT32_MAX + 1) if INT32_MAX < value <= UINT32_MAX else value


class EnumRegistry:
    def __init__(self):
        self._types: Dict[str, Type[Enum]] = {}

    def register(self, type_id: str, enum_cls: Type[Enum]) -> None:
        if not (isinstance(enum_cls, type) and issubclass(enum_cls, Enum)):
            raise TypeError(f'"{type_id}" must be registered with an Enum subclass, got {enum_cls!r}')
        for name, member in enum_cls.__members__.items():
            if isinstance(member.value, bool) or not isinstance(member.value, int):
                raise TypeError(f'"{type_id}" member {name} has non-integer value {member.value!r}')
        if type_id in self._types:
            raise ValueError(f'Type "{type_id}" is already registered')
        self._types[type_id] = enum_cls
        log.debug("Registered %s type %s (%s)", kind_of(enum_cls).value, type_id, enum_cls.__name__)

    def __contains__(self, type_id: str) -> bool: return type_id in self._types

    def __iter__(self) -> Iterator[str]: return iter(self._types)

    def type_ids(self) -> List[str]: return list(self._types)

    def _get(self, type_id: str) -> Type[Enum]:
        try: return self._types[type_id]
        except KeyError: raise UnknownTypeError(type_id) from None

    def kind(self, type_id: str) -> TypeKind: return kind_of(self._get(type_id))

    def lookup(self, type_id: str) -> List[EnumerantEntry]:
        enum_cls = self._get(type_id)
        is_flags = kind_of(enum_cls) is TypeKind.FLAGS
        # __members__ keeps declaration order; aliases map to a member with another name
        entries = [
            EnumerantEntry(name, as_signed32(member.value) if is_flags else int(member.value))
            for name, member in enum_cls.__members__.items()
            if member.name == name
        ]
        log.debug("Found %d entries for %s", len(entries), type_id)
        return entries

    def _lookup_kind(self, type_id: str, expected: TypeKind) -> List[EnumerantEntry]:
        actual = self.kind(type_id)
        if actual is not expected: raise TypeKindError(type_id, expected, actual)
        return self.lookup(type_id)

    def lookup_flags(self, type_id: str) -> List[EnumerantEntry]: return self._lookup_kind(type_id, TypeKind.FLAGS)

    def lookup_enum(self, type_id: str) -> List[EnumerantEntry]: return self._lookup_kind(type_id, TypeKind.ENUM)


def default_registry() -> EnumRegistry:
    registry = EnumRegistry()
    registry.register(DEFAULT_FLAGS_TYPE, InhibitorFlag)
    registry.register(DEFAULT_ENUM_TYPE, PresenceStatus)
    return registry
