"""Layout calculation functions."""

# Rows used outside the option list: top border, header, bottom border, status line
CHROME_ROWS = 4

# Row of the first option in every pane
FIRST_OPTION_ROW = 2

# Index of the column each pane level is drawn in
COLUMNS = ("artist", "album", "track")


def calculate_layout(term_width: int, term_height: int) -> dict[str, int]:
    """
    Pure function: calculate column positions and sizes.

    The artist and album columns each take one fifth of the terminal width;
    the track column takes the remainder. Every column is a box whose
    interior holds a header row and `pane_height` option rows.

    Args:
        term_width: Terminal width in cells
        term_height: Terminal height in rows

    Returns:
        Dictionary with per-column box x/width, interior (pane) x/width,
        pane height, and the status line row
    """
    term_width = max(0, term_width)
    term_height = max(0, term_height)

    share = term_width // 5
    widths = {
        "artist": share,
        "album": share,
        "track": term_width - 2 * share,
    }

    layout = {
        "pane_y": FIRST_OPTION_ROW,
        "pane_height": max(1, term_height - CHROME_ROWS),
        "status_y": max(0, term_height - 1),
    }

    x = 0
    for name in COLUMNS:
        layout[f"{name}_box_x"] = x
        layout[f"{name}_box_width"] = widths[name]
        layout[f"{name}_x"] = x + 1
        layout[f"{name}_width"] = max(0, widths[name] - 2)
        x += widths[name]

    return layout
