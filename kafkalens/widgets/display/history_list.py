"""List of accepted commands shown while no command is active."""

from __future__ import annotations

from rich.text import Text
from textual.widgets import Static

from kafkalens.constants.limits import MAX_HISTORY_DISPLAY


class HistoryList(Static):
    DEFAULT_CSS = """
    HistoryList {
        height: 1fr;
        width: 1fr;
        padding: 1 2;
    }
    """

    def __init__(self, *, id: str | None = None) -> None:
        super().__init__("", id=id, classes="widget-history-list")
        self.entries: list[str] = []

    def show_history(self, history: list[str]) -> None:
        self.entries = list(history[-MAX_HISTORY_DISPLAY:])
        if not self.entries:
            self.update(Text("Type : followed by a command name, e.g. :list-topics", style="dim"))
            return
        text = Text()
        for position, entry in enumerate(self.entries):
            if position:
                text.append("\n")
            text.append(entry)
        self.update(text)
