"""Main application class for the KafkaLens console."""

from __future__ import annotations

from textual.app import App
from textual.binding import Binding

from kafkalens.constants import APP_TITLE
from kafkalens.controllers.base import BaseController
from kafkalens.keyboard.app import APP_BINDINGS
from kafkalens.keyboard.session import KEY_CTRL_C
from kafkalens.screens import ConsoleScreen
from kafkalens.session import KeyEvent, SessionState


class KafkaLensApp(App[None]):
    """Interactive console over one Kafka cluster."""

    TITLE = APP_TITLE
    CSS_PATH = "css/app.tcss"
    BINDINGS: list[Binding] = APP_BINDINGS

    state: SessionState

    def __init__(self, gateway: BaseController, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.gateway = gateway
        self.state = SessionState()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.push_screen(ConsoleScreen(self.gateway, self.state))

    def action_interrupt(self) -> None:
        """Ctrl-C always reaches the session, whatever holds focus."""
        for screen in self.screen_stack:
            if isinstance(screen, ConsoleScreen):
                screen.dispatch_key(KeyEvent(KEY_CTRL_C))
                return
        self.exit()


__all__ = [
    "KafkaLensApp",
]
