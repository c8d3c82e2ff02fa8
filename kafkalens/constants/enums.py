"""All enum definitions for the console.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Session Enums
# =============================================================================

class InputMode(Enum):
    """Input mode of the interactive session."""

    NORMAL = "normal"
    COMMAND_ENTRY = "command_entry"


class NotificationKind(Enum):
    """Severity of the notification overlay."""

    INFO = "info"
    ERROR = "error"


# =============================================================================
# Table Enums
# =============================================================================

class ColumnSizing(Enum):
    """How a column claims horizontal space."""

    FILL = "fill"
    MIN = "min"


__all__ = [
    "ColumnSizing",
    "InputMode",
    "NotificationKind",
]
