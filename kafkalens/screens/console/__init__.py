"""Interactive console screen."""

from kafkalens.screens.console.console_screen import ConsoleScreen

__all__ = [
    "ConsoleScreen",
]
