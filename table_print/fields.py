"""
Field selection: which fields of a record set become columns.

The default set comes from the first record's type; `only`, `include`
and `except` then adjust it. Every requested name is validated against
the first record, so unknown names are dropped rather than reported.
"""

import dataclasses
import functools
import inspect
import types
from collections.abc import Mapping
from decimal import Decimal
from numbers import Number

from table_print._utils import wrap
from table_print.accessor import CALL, class_member_kind, normalize_field, supports

# Built-in value types with nothing worth introspecting.
PRIMITIVE_TYPES = (
    Number,
    Decimal,
    str,
    bytes,
    bytearray,
    list,
    tuple,
    set,
    frozenset,
    range,
    Mapping,
    type(None),
)

WRITER_PREFIX = "set_"

_declared_columns = {}


# ---------------------------------------------------------------------------
# Declared-column enumerators (ORM and schema adapters)
# ---------------------------------------------------------------------------


def register_declared_columns(cls, enumerate_columns):
    """Register a callable returning the declared column names of *cls*.

    The callable receives the record's class and applies to subclasses
    too. Registering None removes an earlier registration.
    """
    if enumerate_columns is None:
        _declared_columns.pop(cls, None)
    else:
        _declared_columns[cls] = enumerate_columns


def _declared_columns_for(cls):
    for klass in cls.__mro__:
        enumerate_columns = _declared_columns.get(klass)
        if enumerate_columns is not None:
            return enumerate_columns
    return None


# ---------------------------------------------------------------------------
# Default fields
# ---------------------------------------------------------------------------


def _is_public(name):
    return not name.startswith("_") and not name.startswith(WRITER_PREFIX)


@functools.lru_cache(maxsize=512)
def _class_fields(cls):
    """Public properties, slots and zero-argument methods of *cls*."""
    names = []
    for klass in cls.__mro__:
        if klass is object:
            continue
        for name, member in vars(klass).items():
            if not _is_public(name) or name in names:
                continue
            if isinstance(member, (property, functools.cached_property, types.MemberDescriptorType)):
                names.append(name)
            elif inspect.isfunction(member) and class_member_kind(cls, name) == CALL:
                names.append(name)
    return tuple(names)


def default_fields(record):
    """Ordered field names shown for *record* when no `only` applies."""
    cls = type(record)
    enumerate_columns = _declared_columns_for(cls)
    if enumerate_columns is not None:
        return _unique(normalize_field(n) for n in enumerate_columns(cls))
    explicit = getattr(cls, "__table_fields__", None)
    if explicit is not None:
        return _unique(normalize_field(n) for n in wrap(explicit))
    if isinstance(record, tuple) and hasattr(cls, "_fields"):
        return [f for f in cls._fields if _is_public(f)]
    if isinstance(record, PRIMITIVE_TYPES):
        return []
    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        return [f.name for f in dataclasses.fields(record) if _is_public(f.name)]

    names = []
    instance_dict = getattr(record, "__dict__", None)
    if isinstance(instance_dict, dict):
        # cached properties keep their class position once computed
        names.extend(
            name
            for name in instance_dict
            if _is_public(name)
            and not isinstance(
                inspect.getattr_static(cls, name, None), functools.cached_property
            )
        )
    names.extend(_class_fields(cls))
    return _unique(names)


def _unique(names):
    seen = []
    for name in names:
        if name is not None and name not in seen:
            seen.append(name)
    return seen


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------


def clean_fields(record, names):
    """Validate requested names against *record*: drop null, empty,
    unsupported and repeated names, keeping first-seen order."""
    return _unique(
        name for name in (normalize_field(n) for n in wrap(names)) if name and supports(record, name)
    )


def select_fields(records, only=None, include=None, exclude=None, defaults=None):
    """Ordered, de-duplicated field names to display for *records*.

    A non-empty validated `only` wins outright. Otherwise the result is
    `defaults + include - exclude`, where *defaults* falls back to
    default_fields() of the first record.
    """
    first = next((r for r in records if r is not None), None)
    if first is None:
        return []

    if only is not None:
        fields = clean_fields(first, only)
        if fields:
            return fields

    included = clean_fields(first, include)
    excluded = clean_fields(first, exclude)
    base = default_fields(first) if defaults is None else [normalize_field(n) for n in wrap(defaults)]
    return [name for name in _unique(base + included) if name not in excluded]
