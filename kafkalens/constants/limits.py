"""Limit and threshold constants for the console."""

from typing import Final

# ============================================================================
# Display limits
# ============================================================================

MAX_HISTORY_DISPLAY: Final = 100

# ============================================================================
# Layout
# ============================================================================

# Extra cell added to every measured column so values never touch.
COLUMN_PADDING: Final = 1

__all__ = [
    "COLUMN_PADDING",
    "MAX_HISTORY_DISPLAY",
]
