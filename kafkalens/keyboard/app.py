"""App-level keyboard bindings.

Every other key is routed to the session state machine by the console
screen; only keys Textual would otherwise consume are bound here.
"""

from textual.binding import Binding

# ============================================================================
# Textual Binding objects for app-level bindings
# ============================================================================

APP_BINDINGS: list[Binding] = [
    Binding("ctrl+c", "interrupt", "Quit", show=False, priority=True),
]

__all__ = [
    "APP_BINDINGS",
]
