"""Blessed UI helper functions."""

from .layout import calculate_layout
from .scrolling import clamp_viewport, step_viewport

__all__ = ["calculate_layout", "clamp_viewport", "step_viewport"]
