"""
table-print exception hierarchy.

All custom exceptions live here to avoid circular imports.
The rendering core never raises for data conditions; these cover
caller mistakes and command-line input.
"""


class TablePrintError(Exception):
    """Exit code 1 — invalid options or usage."""

    exit_code = 1


class OptionsError(TablePrintError):
    """Per-field options that are not a mapping of known keys."""


class InputError(TablePrintError):
    """Exit code 2 — unreadable or malformed input data."""

    exit_code = 2
