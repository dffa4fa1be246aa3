"""Print-and-time helper kept outside the rendering core."""

import sys
import time

from table_print.renderer import TablePrint


def tp(data, options=None, out=None, **extra):
    """Render *data*, write it to *out* (stdout by default) and return
    the elapsed wall-clock seconds."""
    start = time.monotonic()
    table = TablePrint().tp(data, options, **extra)
    print(table, file=out or sys.stdout)
    return time.monotonic() - start
