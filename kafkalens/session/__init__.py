"""Interactive session engine.

- events: key events
- state: session state, input buffer, notifications
- table: selectable table view model
- registry: command kinds and parsing
- machine: the ``update`` state machine
"""

from kafkalens.session.events import KeyEvent
from kafkalens.session.machine import activate_command, submit_command, update
from kafkalens.session.registry import CommandKind, CommandRegistry, ParsedCommand
from kafkalens.session.state import InputBuffer, Notification, SessionState
from kafkalens.session.table import (
    ColumnHint,
    ColumnSpec,
    TableData,
    TableDefinition,
    TableRow,
    TableViewModel,
)

__all__ = [
    "ColumnHint",
    "ColumnSpec",
    "CommandKind",
    "CommandRegistry",
    "InputBuffer",
    "KeyEvent",
    "Notification",
    "ParsedCommand",
    "SessionState",
    "TableData",
    "TableDefinition",
    "TableRow",
    "TableViewModel",
    "activate_command",
    "submit_command",
    "update",
]
