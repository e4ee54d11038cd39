"""Helpers for safely working with dynamic (untyped) structures.

Use these at the boundary where GitHub JSON payloads come in. They provide
runtime validation and static type narrowing.
"""

from __future__ import annotations

from typing import Mapping, TypeGuard, cast

StrDict = dict[str, object]
ObjList = list[object]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    """Return True if obj is a dict with string keys."""
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    if is_str_dict(obj):
        return obj
    return None


def as_obj_list(obj: object) -> ObjList | None:
    if isinstance(obj, list):
        return cast(ObjList, obj)
    return None


def get_str(table: Mapping[str, object], key: str) -> str | None:
    """Get a non-empty string value from a mapping.

    Tag names are significant byte for byte, so unlike config values they
    are not stripped. Returns None if missing, not a str, or empty.
    """
    value = table.get(key)
    if not isinstance(value, str) or not value:
        return None
    return value


def get_int(table: Mapping[str, object], key: str) -> int | None:
    """Get an int value from a mapping. Booleans are rejected."""
    value = table.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value
