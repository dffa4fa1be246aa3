"""
Table rendering: records in, aligned text table out.

Usage:
    from table_print import render
    print(render(users, {"only": ["name", "email"], "email": {"max_field_length": 20}}))
"""

from collections.abc import Mapping

from table_print import config
from table_print._utils import log_event, wrap
from table_print.column import Column
from table_print.exceptions import OptionsError
from table_print.fields import select_fields

SELECTION_KEYS = ("only", "include", "except")


def _normalize_options(options, extra):
    if options is None:
        options = {}
    elif not isinstance(options, Mapping):
        raise OptionsError(f"[ERROR] Options must be a mapping, got {type(options).__name__}.")
    merged = dict(options)
    merged.update(extra)
    # `except` is a keyword, so callers may spell it except_
    if "except_" in merged:
        merged.setdefault("except", merged.pop("except_"))
    return merged


def _field_options(options, field):
    # a field named like a selection key cannot carry overrides
    if field in SELECTION_KEYS:
        return None
    return options.get(field)


class TablePrint:
    """Renders record sets as text tables.

    *clock* and *budget* are handed to every column's width scan.
    """

    def __init__(self, clock=None, budget=None):
        self.clock = clock
        self.budget = budget

    def tp(self, data, options=None, **extra):
        options = _normalize_options(options, extra)
        records = [r for r in wrap(data) if r is not None]

        # nothing to see here
        if not records:
            return config.NO_DATA

        fields = select_fields(
            records,
            only=options.get("only"),
            include=options.get("include"),
            exclude=options.get("except"),
        )
        if not fields:
            log_event("raw_dump_fallback", record_type=type(records[0]).__name__)
            return repr(records)

        columns = [
            Column.build(
                records, f, _field_options(options, f), clock=self.clock, budget=self.budget
            )
            for f in fields
        ]
        log_event("render", records=len(records), columns=len(columns))

        header = config.SEPARATOR.join(c.formatted_header() for c in columns)
        lines = [header, "-" * len(header)]
        for record in records:
            lines.append(config.SEPARATOR.join(c.formatted_value(record) for c in columns))
        return "\n".join(lines)


def render(data, options=None, **extra):
    """Render *data* with a fresh TablePrint. See TablePrint.tp."""
    return TablePrint().tp(data, options, **extra)
