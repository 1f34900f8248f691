"""Rendering functions for blessed UI."""

from .columns import (
    DrawInstruction,
    paint,
    pane_header,
    render_columns,
    render_pane,
    truncate_option,
)

__all__ = [
    "DrawInstruction",
    "paint",
    "pane_header",
    "render_columns",
    "render_pane",
    "truncate_option",
]
