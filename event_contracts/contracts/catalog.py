from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Type, TypeVar

E = TypeVar("E", bound=Enum)


def catalog_mapping(enum_cls: Type[Enum]) -> Mapping[str, str]:
    """Read-only `SYMBOLIC_KEY -> canonical-value` view of a catalog enum."""
    return MappingProxyType({m.name: m.value for m in enum_cls})


def coerce(enum_cls: Type[E], value: object) -> Optional[E]:
    """Return the member of `enum_cls` whose canonical value equals `value`, else None.

    Members are returned as-is; lookups are case-sensitive.
    """
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except (ValueError, TypeError):
        return None
