"""
Field access for records of arbitrary type.

A record supports a field when the field names a readable, public member:
a mapping key, an instance attribute, a class attribute or property, or a
method callable without arguments. Methods are called on access; every
other member is returned as-is.
"""

import functools
import inspect
from collections.abc import Mapping

KEY = "key"
ATTR = "attr"
CALL = "call"


def normalize_field(name):
    """Return the field name as a string, or None for null/empty names."""
    if name is None:
        return None
    name = str(name)
    if not name:
        return None
    return name


def _all_optional(params):
    return all(
        p.default is not inspect.Parameter.empty
        or p.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
        for p in params
    )


@functools.lru_cache(maxsize=2048)
def class_member_kind(cls, field):
    """How a class-level member named *field* is read, or None if unreadable."""
    try:
        static = inspect.getattr_static(cls, field)
    except AttributeError:
        return None
    if isinstance(static, (staticmethod, classmethod)):
        try:
            params = list(inspect.signature(getattr(cls, field)).parameters.values())
        except (TypeError, ValueError):
            return None
        return CALL if _all_optional(params) else None
    if inspect.isroutine(static):
        try:
            params = list(inspect.signature(static).parameters.values())
        except (TypeError, ValueError):
            return None
        # first parameter is the instance
        return CALL if _all_optional(params[1:]) else None
    return ATTR


def member_kind(record, field):
    if isinstance(record, Mapping):
        return KEY if field in record else None
    instance_dict = getattr(record, "__dict__", None)
    if isinstance(instance_dict, dict) and field in instance_dict:
        return ATTR
    return class_member_kind(type(record), field)


def supports(record, field):
    """True when *record* has a readable public member called *field*."""
    field = normalize_field(field)
    if field is None or field.startswith("_"):
        return False
    return member_kind(record, field) is not None


def get_value(record, field):
    """Read *field* from *record*; unsupported fields read as None."""
    field = normalize_field(field)
    if field is None or field.startswith("_"):
        return None
    kind = member_kind(record, field)
    if kind == KEY:
        return record[field]
    if kind == ATTR:
        return getattr(record, field, None)
    if kind == CALL:
        return getattr(record, field)()
    return None
