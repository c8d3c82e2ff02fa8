"""Key names understood by the session state machine.

Names follow Textual's key naming so console events map one to one.
"""

from typing import Final

# ============================================================================
# Named keys
# ============================================================================

KEY_ESCAPE: Final = "escape"
KEY_ENTER: Final = "enter"
KEY_UP: Final = "up"
KEY_DOWN: Final = "down"
KEY_LEFT: Final = "left"
KEY_RIGHT: Final = "right"
KEY_HOME: Final = "home"
KEY_END: Final = "end"
KEY_BACKSPACE: Final = "backspace"
KEY_DELETE: Final = "delete"
KEY_SPACE: Final = "space"
KEY_CTRL_C: Final = "ctrl+c"

# ============================================================================
# Character commands
# ============================================================================

CHAR_QUIT: Final = "q"
CHAR_COMMAND_MODE: Final = ":"
CHAR_SELECT: Final = " "
CHAR_DELETE_SELECTED: Final = "d"

__all__ = [
    "CHAR_COMMAND_MODE",
    "CHAR_DELETE_SELECTED",
    "CHAR_QUIT",
    "CHAR_SELECT",
    "KEY_BACKSPACE",
    "KEY_CTRL_C",
    "KEY_DELETE",
    "KEY_DOWN",
    "KEY_END",
    "KEY_ENTER",
    "KEY_ESCAPE",
    "KEY_HOME",
    "KEY_LEFT",
    "KEY_RIGHT",
    "KEY_SPACE",
    "KEY_UP",
]
