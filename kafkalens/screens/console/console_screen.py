"""Console screen: feeds key presses into the session and renders its state."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from textual import events
from textual.screen import Screen
from textual.widgets import Header

from kafkalens.controllers.base import BaseController
from kafkalens.session import KeyEvent, SessionState, update
from kafkalens.widgets import CommandLine, HistoryList, NotificationPanel, SessionTable

if TYPE_CHECKING:
    from textual.app import ComposeResult

logger = logging.getLogger(__name__)


class ConsoleScreen(Screen[None]):
    """The single screen of the interactive console.

    Every key reaches ``on_key``, is converted to a ``KeyEvent`` and applied
    with ``update``. Gateway calls run inline, so the screen does not repaint
    until a cluster call returns.
    """

    def __init__(self, gateway: BaseController, state: SessionState | None = None) -> None:
        super().__init__()
        self.gateway = gateway
        self.state = state or SessionState()

    def compose(self) -> ComposeResult:
        yield Header()
        yield SessionTable(id="session-table")
        yield HistoryList(id="history-list")
        yield NotificationPanel(id="notification-panel")
        yield CommandLine(id="command-line")

    def on_mount(self) -> None:
        self.refresh_view()

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        self.dispatch_key(KeyEvent(event.key, event.character))

    def dispatch_key(self, key_event: KeyEvent) -> None:
        """Apply one key to the session, then repaint or exit."""
        update(self.state, key_event, self.gateway)
        if self.state.exit:
            logger.debug("Session exit requested")
            self.app.exit()
            return
        self.refresh_view()

    def refresh_view(self) -> None:
        state = self.state
        table = self.query_one(SessionTable)
        history = self.query_one(HistoryList)

        command = state.active_command
        table.display = command is not None
        history.display = command is None
        if command is None:
            self.sub_title = ""
            history.show_history(state.history)
        else:
            self.sub_title = command.title
            table.show(state.table)

        self.query_one(NotificationPanel).show_notification(state.notification)
        self.query_one(CommandLine).show_input(state.mode, state.input)
