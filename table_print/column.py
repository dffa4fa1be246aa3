"""
Columns and width estimation.

A column's width comes from a bounded scan over the records: the scan
stops at the first fixed-width value (timestamp or boolean), once the
width reaches the column cap, or when the time budget runs out. Records
after that point are truncated to fit.
"""

import time
from collections.abc import Mapping
from dataclasses import dataclass

from table_print import config
from table_print._utils import is_timestamp, log_event, stringify
from table_print.accessor import get_value
from table_print.exceptions import OptionsError
from table_print.formatting import format_cell

BOOLEAN_WIDTH = len("false")


# ---------------------------------------------------------------------------
# Per-field options
# ---------------------------------------------------------------------------


def _int_option(field, key, value):
    if value is None:
        return None
    if isinstance(value, bool):
        raise OptionsError(f"[ERROR] Option '{key}' for field '{field}' must be an integer.")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise OptionsError(
            f"[ERROR] Option '{key}' for field '{field}' must be an integer, got {value!r}."
        ) from None


@dataclass(frozen=True)
class ColumnOptions:
    """Validated per-field overrides: display name, width cap, fixed width."""

    name: str | None = None
    max_field_length: int | None = None
    field_length: int | None = None

    @classmethod
    def from_value(cls, field, value):
        if value is None:
            return cls()
        if isinstance(value, ColumnOptions):
            return value
        if not isinstance(value, Mapping):
            raise OptionsError(
                f"[ERROR] Options for field '{field}' must be a mapping, "
                f"got {type(value).__name__}."
            )
        name = value.get("name")
        return cls(
            name=None if name is None else str(name),
            max_field_length=_int_option(field, "max_field_length", value.get("max_field_length")),
            field_length=_int_option(field, "field_length", value.get("field_length")),
        )


# ---------------------------------------------------------------------------
# Width estimation
# ---------------------------------------------------------------------------


def estimate_width(
    records, field, display_name, max_width, explicit_width=None, clock=None, budget=None
):
    """Width needed to show *field* across *records*, capped at *max_width*.

    A positive *explicit_width* skips the scan. *clock* and *budget*
    default to time.monotonic and config.SAMPLE_TIME_BUDGET (seconds).
    A timestamp widens to its text length but never below the header,
    rather than replacing the width outright.
    """
    max_width = max(1, max_width)
    if explicit_width is not None and explicit_width > 0:
        return min(explicit_width, max_width)

    clock = clock or time.monotonic
    budget = config.SAMPLE_TIME_BUDGET if budget is None else budget

    length = len(display_name)
    scanned = 0
    start = clock()
    for record in records:
        if record is None:
            continue
        scanned += 1
        value = get_value(record, field)

        # fixed-width values settle the width on sight
        if is_timestamp(value):
            length = max(length, len(stringify(value)))
            break
        if isinstance(value, bool):
            length = max(length, BOOLEAN_WIDTH)
            break

        length = max(length, len(stringify(value)))
        if length >= max_width:
            break
        if clock() - start > budget:
            log_event("sample_budget_hit", field=field, scanned=scanned, width=length)
            break

    return max(1, min(length, max_width))


# ---------------------------------------------------------------------------
# Column
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Column:
    """One rendered column, bound to a field with a fixed width."""

    name: str
    field: str
    width: int
    max_width: int

    @classmethod
    def build(cls, records, field, options=None, clock=None, budget=None):
        opts = ColumnOptions.from_value(field, options)
        name = opts.name if opts.name is not None else field.replace("_", " ")
        max_width = opts.max_field_length
        if max_width is None:
            max_width = config.MAX_FIELD_LENGTH
        max_width = max(1, max_width)
        width = estimate_width(
            records,
            field,
            name,
            max_width,
            explicit_width=opts.field_length,
            clock=clock,
            budget=budget,
        )
        return cls(name=name, field=field, width=width, max_width=max_width)

    def formatted_header(self):
        return format_cell(self.name.upper(), self.width, self.max_width)

    def formatted_value(self, record):
        return format_cell(stringify(get_value(record, self.field)), self.width, self.max_width)
