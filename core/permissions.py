"""Container SAS permission letters."""

from __future__ import annotations

from enum import Enum
from typing import FrozenSet, Iterable, Union


class SasPermission(str, Enum):
    """Container permissions, declared in the order the service expects them."""

    READ = "r"
    ADD = "a"
    CREATE = "c"
    WRITE = "w"
    DELETE = "d"
    DELETE_PREVIOUS_VERSION = "x"
    PERMANENT_DELETE = "y"
    LIST = "l"
    TAG = "t"
    FILTER_BY_TAGS = "f"
    MOVE = "m"
    EXECUTE = "e"
    SET_IMMUTABILITY_POLICY = "i"


PermissionInput = Union[str, Iterable[Union[SasPermission, str]]]


def parse_permissions(value: PermissionInput) -> FrozenSet[SasPermission]:
    """Return the permission set for a letter string or an iterable of permissions.

    Raises :class:`ValueError` for unknown letters.
    """

    items = list(value) if not isinstance(value, SasPermission) else [value]
    resolved = set()
    for item in items:
        if isinstance(item, SasPermission):
            resolved.add(item)
            continue
        try:
            resolved.add(SasPermission(item))
        except ValueError:
            raise ValueError(f"Unknown SAS permission '{item}'.") from None
    return frozenset(resolved)


def format_permissions(permissions: Iterable[SasPermission]) -> str:
    """Serialize permissions as an ordered, deduplicated letter string."""

    wanted = set(permissions)
    return "".join(permission.value for permission in SasPermission if permission in wanted)


__all__ = ["PermissionInput", "SasPermission", "format_permissions", "parse_permissions"]
