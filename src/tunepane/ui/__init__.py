"""UI layer for tunepane.

Contains:
- blessed: three-column terminal browser (state, rendering, key handling)
"""

__all__ = []
