"""
Shared pure-utility functions for table-print.

These helpers have no business logic. The only side effect is
log_event(), which writes to stderr when logging is enabled.
"""

import json
import sys
from collections.abc import Iterator
from datetime import date, datetime, time

from table_print import config

TIMESTAMP_TYPES = (datetime, date, time)


def wrap(value):
    """Normalize a value to a list of records.

    None becomes []; lists, plain tuples, sets and iterators/generators are
    listed. Anything else, namedtuples and other iterable records included,
    becomes a one-item list.
    """
    if value is None:
        return []
    if isinstance(value, tuple) and hasattr(type(value), "_fields"):
        return [value]
    if isinstance(value, (list, tuple, set, frozenset, Iterator)):
        return list(value)
    return [value]


def stringify(value):
    """Textual representation used for measuring and rendering cells."""
    if value is None:
        return ""
    return str(value)


def is_timestamp(value):
    return isinstance(value, TIMESTAMP_TYPES)


def log_event(event, **fields):
    """Emit a structured diagnostic line to stderr when enabled."""
    if not config.LOG_ENABLED:
        return
    fields["event"] = event
    print("[TP] " + json.dumps(fields, ensure_ascii=False, sort_keys=True, default=str), file=sys.stderr)
