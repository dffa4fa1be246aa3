"""
table-print — render JSON records as an aligned text table
"""

import argparse
import json
import sys
import types

from table_print import config
from table_print.exceptions import InputError, TablePrintError
from table_print.printing import tp

FIELD_OPTION_KEYS = {"name", "max_field_length", "field_length"}
_INT_OPTION_KEYS = {"max_field_length", "field_length"}

EPILOG = """\
Examples:
  table-print users.json
  table-print users.json --only name,email --field email:max_field_length=20
  cat events.json | table-print --except payload --field created_at:name=when
"""


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


class _Parser(argparse.ArgumentParser):
    """Parser that raises TablePrintError instead of exiting on bad usage."""

    def error(self, message):
        raise TablePrintError(f"[ERROR] {message}")


def _positive_int(value):
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("must be a positive integer") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return parsed


def _names(value):
    return [v.strip() for v in value.split(",") if v.strip()]


def build_parser():
    parser = _Parser(
        prog="table-print",
        description="Render a JSON array of objects as an aligned text table.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("file", nargs="?", default="-", help='JSON input (default/"-": stdin)')
    parser.add_argument("--only", type=_names, help="show only these fields (comma-separated)")
    parser.add_argument("--include", type=_names, help="add fields to the defaults")
    parser.add_argument("--except", type=_names, dest="except_", help="drop fields")
    parser.add_argument(
        "--max-width", type=_positive_int, dest="max_width", help="default column width cap"
    )
    parser.add_argument(
        "--field",
        action="append",
        default=[],
        metavar="FIELD:KEY=VALUE",
        help="per-field override: name, max_field_length or field_length",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="log diagnostics to stderr")
    parser.add_argument("--version", action="version", version=f"table-print {config.VERSION}")
    return parser


# ---------------------------------------------------------------------------
# Input and options
# ---------------------------------------------------------------------------


def _parse_field_override(raw):
    """Parse FIELD:KEY=VALUE into (field, key, value)."""
    field, sep, rest = raw.partition(":")
    key, eq, value = rest.partition("=")
    field, key = field.strip(), key.strip()
    if not sep or not eq or not field or not key:
        raise TablePrintError(f"[ERROR] Invalid --field '{raw}'. Use FIELD:KEY=VALUE.")
    if key not in FIELD_OPTION_KEYS:
        raise TablePrintError(
            f"[ERROR] Invalid --field key '{key}'. Valid: {', '.join(sorted(FIELD_OPTION_KEYS))}"
        )
    if key in _INT_OPTION_KEYS:
        try:
            value = _positive_int(value)
        except argparse.ArgumentTypeError as e:
            raise TablePrintError(f"[ERROR] --field {field}:{key} {e}.") from None
    return field, key, value


def build_options(ns):
    options = {}
    if ns.only:
        options["only"] = ns.only
    if ns.include:
        options["include"] = ns.include
    if ns.except_:
        options["except"] = ns.except_
    for raw in ns.field:
        field, key, value = _parse_field_override(raw)
        options.setdefault(field, {})[key] = value
    return options


def _to_record(item):
    # objects become attribute records so their keys are the default fields
    if isinstance(item, dict):
        return types.SimpleNamespace(**item)
    return item


def load_records(path, stdin=None):
    """Read a JSON array (or single value) and convert it to records."""
    try:
        if path == "-":
            text = (stdin or sys.stdin).read()
        else:
            with open(path, encoding="utf-8") as f:
                text = f.read()
    except OSError as e:
        raise InputError(f"[ERROR] Cannot read '{path}': {e.strerror}") from None
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InputError(
            f"[ERROR] Invalid JSON in {'stdin' if path == '-' else path}: "
            f"{e.msg} at position {e.pos}"
        ) from None
    if isinstance(data, list):
        return [_to_record(item) for item in data]
    return _to_record(data)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv=None):
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")

    try:
        ns = build_parser().parse_args(argv)
        if ns.verbose:
            config.LOG_ENABLED = True
        if ns.max_width:
            config.MAX_FIELD_LENGTH = ns.max_width
        options = build_options(ns)
        records = load_records(ns.file)
        tp(records, options)
    except TablePrintError as e:
        print(str(e), file=sys.stderr)
        sys.exit(e.exit_code)


if __name__ == "__main__":
    main()
