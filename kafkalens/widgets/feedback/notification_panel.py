"""Notification panel shown over the console until dismissed.

CSS Classes: widget-notification-panel, -info, -error
"""

from __future__ import annotations

from rich.text import Text
from textual.widgets import Static

from kafkalens.session.state import Notification


class NotificationPanel(Static):
    """Renders the session's current notification, hidden when there is none."""

    DEFAULT_CSS = """
    NotificationPanel {
        dock: bottom;
        width: 1fr;
        height: auto;
        max-height: 50%;
        padding: 1 2;
        margin: 0 4 1 4;
        display: none;
    }
    NotificationPanel.-info {
        border: round $success;
        background: $surface;
    }
    NotificationPanel.-error {
        border: round $error;
        background: $surface;
    }
    """

    def __init__(self, *, id: str | None = None) -> None:
        super().__init__("", id=id, classes="widget-notification-panel")
        self.notification: Notification | None = None

    def show_notification(self, notification: Notification | None) -> None:
        self.notification = notification
        self.set_class(notification is not None and not notification.is_error, "-info")
        self.set_class(notification is not None and notification.is_error, "-error")
        self.display = notification is not None
        if notification is None:
            self.update("")
            return
        title = "Error" if notification.is_error else "Info"
        self.border_title = title
        self.border_subtitle = "Esc to dismiss"
        self.update(Text(notification.message))
