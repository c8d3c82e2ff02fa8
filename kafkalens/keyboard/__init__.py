"""Keyboard bindings module.

- app: Textual bindings for the application (APP_BINDINGS)
- session: key names consumed by the session state machine
"""

from kafkalens.keyboard.app import APP_BINDINGS
from kafkalens.keyboard.session import (
    CHAR_COMMAND_MODE,
    CHAR_DELETE_SELECTED,
    CHAR_QUIT,
    CHAR_SELECT,
    KEY_CTRL_C,
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_SPACE,
    KEY_UP,
)

__all__ = [
    "APP_BINDINGS",
    "CHAR_COMMAND_MODE",
    "CHAR_DELETE_SELECTED",
    "CHAR_QUIT",
    "CHAR_SELECT",
    "KEY_CTRL_C",
    "KEY_DOWN",
    "KEY_ENTER",
    "KEY_ESCAPE",
    "KEY_SPACE",
    "KEY_UP",
]
