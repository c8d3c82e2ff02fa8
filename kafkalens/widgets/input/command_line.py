"""Command line at the bottom of the console.

Shows the entry buffer with its cursor in command entry mode and a key hint
otherwise. Input is not typed into this widget; the state machine edits the
buffer and the screen pushes it here.
"""

from __future__ import annotations

from rich.text import Text
from textual.widgets import Static

from kafkalens.constants.enums import InputMode
from kafkalens.session.state import InputBuffer

NORMAL_HINT = ": command  ↑/↓ move  space select  d delete  q quit"


class CommandLine(Static):
    DEFAULT_CSS = """
    CommandLine {
        dock: bottom;
        height: 1;
        width: 1fr;
        padding: 0 1;
        background: $panel;
    }
    CommandLine.-entry {
        background: $boost;
    }
    """

    def __init__(self, *, id: str | None = None) -> None:
        super().__init__(NORMAL_HINT, id=id, classes="widget-command-line")

    def show_input(self, mode: InputMode, buffer: InputBuffer) -> None:
        entry = mode is InputMode.COMMAND_ENTRY
        self.set_class(entry, "-entry")
        if not entry:
            self.update(Text(NORMAL_HINT, style="dim"))
            return
        text = Text(":")
        text.append(buffer.value[: buffer.cursor])
        cursor_char = buffer.value[buffer.cursor : buffer.cursor + 1] or " "
        text.append(cursor_char, style="reverse")
        text.append(buffer.value[buffer.cursor + 1 :])
        self.update(text)
