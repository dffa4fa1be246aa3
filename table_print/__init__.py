"""table-print — render lists of records as aligned text tables."""

from table_print.accessor import get_value, supports
from table_print.column import Column, ColumnOptions, estimate_width
from table_print.config import VERSION
from table_print.exceptions import InputError, OptionsError, TablePrintError
from table_print.fields import (
    default_fields,
    register_declared_columns,
    select_fields,
)
from table_print.formatting import format_cell, truncate
from table_print.printing import tp
from table_print.renderer import TablePrint, render

__all__ = [
    "VERSION",
    "Column",
    "ColumnOptions",
    "InputError",
    "OptionsError",
    "TablePrint",
    "TablePrintError",
    "default_fields",
    "estimate_width",
    "format_cell",
    "get_value",
    "register_declared_columns",
    "render",
    "select_fields",
    "supports",
    "tp",
    "truncate",
]
