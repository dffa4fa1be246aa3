"""Fixed-width cell rendering (stdlib only)."""

from table_print import config


def truncate(text, max_width):
    """Cut *text* to *max_width* chars, ending in an ellipsis when cut.

    Widths of 3 or less are cut without an ellipsis.
    """
    if len(text) <= max_width:
        return text
    cut = text[:max_width]
    if max_width <= len(config.ELLIPSIS):
        return cut
    return cut[: -len(config.ELLIPSIS)] + config.ELLIPSIS


def format_cell(text, width, max_width):
    """Left-justify *text* in a field of exactly *width* chars.

    Text longer than *max_width*, or than a narrower *width*, is truncated
    so every cell of a column lines up.
    """
    return f"{truncate(text, min(width, max_width)):<{width}}"
