"""Pure helper functions for scrolling and selection in list-based panes."""


def step_viewport(
    reference: int,
    cursor: int,
    delta: int,
    height: int,
    total_items: int,
) -> tuple[int, int]:
    """Move the selection one row up or down within a scrolling viewport.

    The cursor moves while it is not on the first/last visible row. Once it
    is, the viewport shifts by one instead, as long as options remain
    off-screen in that direction. There is no wraparound.

    Args:
        reference: Index of the first visible option (0-based)
        cursor: Selected row within the viewport (0-based)
        delta: -1 for up, +1 for down
        height: Number of visible rows
        total_items: Total number of options

    Returns:
        New (reference, cursor) pair

    Examples:
        >>> # Cursor moves freely inside the viewport
        >>> step_viewport(reference=0, cursor=2, delta=1, height=5, total_items=20)
        (0, 3)

        >>> # Cursor on last row - viewport scrolls instead
        >>> step_viewport(reference=0, cursor=4, delta=1, height=5, total_items=20)
        (1, 4)

        >>> # Last option already selected - nothing happens
        >>> step_viewport(reference=15, cursor=4, delta=1, height=5, total_items=20)
        (15, 4)

        >>> # Empty pane
        >>> step_viewport(reference=0, cursor=0, delta=1, height=5, total_items=0)
        (0, 0)
    """
    if total_items == 0 or height < 1 or delta == 0:
        return reference, cursor

    if delta > 0:
        if reference + cursor >= total_items - 1:
            return reference, cursor
        if cursor < height - 1:
            return reference, cursor + 1
        return reference + 1, cursor

    if cursor > 0:
        return reference, cursor - 1
    if reference > 0:
        return reference - 1, cursor
    return reference, cursor


def clamp_viewport(
    reference: int,
    cursor: int,
    height: int,
    total_items: int,
) -> tuple[int, int]:
    """Re-clamp a viewport after its height or option count changed.

    Keeps the same option selected when it still exists, scrolling just far
    enough to keep it visible.

    Args:
        reference: Index of the first visible option (0-based)
        cursor: Selected row within the viewport (0-based)
        height: Number of visible rows
        total_items: Total number of options

    Returns:
        (reference, cursor) satisfying 0 <= cursor < min(height, total_items)
        and 0 <= reference <= max(0, total_items - height)

    Examples:
        >>> # Terminal shrank below the cursor row
        >>> clamp_viewport(reference=0, cursor=8, height=5, total_items=20)
        (4, 4)

        >>> # Terminal grew past the end of the list
        >>> clamp_viewport(reference=15, cursor=4, height=10, total_items=20)
        (10, 9)
    """
    if total_items == 0 or height < 1:
        return 0, 0

    selected = max(0, min(reference + cursor, total_items - 1))
    reference = max(0, min(reference, total_items - height))

    if selected < reference:
        reference = selected
    elif selected >= reference + height:
        reference = selected - height + 1

    return reference, selected - reference
