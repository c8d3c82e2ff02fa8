"""Session state: input mode, command buffer, notification, active command."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from kafkalens.constants.enums import InputMode, NotificationKind
from kafkalens.session.table import TableViewModel

if TYPE_CHECKING:
    from kafkalens.session.commands.base import CommandHandler


@dataclass(frozen=True)
class Notification:
    """Modal message shown over the session until dismissed."""

    kind: NotificationKind
    message: str

    @classmethod
    def info(cls, message: str) -> Notification:
        return cls(NotificationKind.INFO, message)

    @classmethod
    def error(cls, message: str) -> Notification:
        return cls(NotificationKind.ERROR, message)

    @property
    def is_error(self) -> bool:
        return self.kind is NotificationKind.ERROR


@dataclass
class InputBuffer:
    """Single-line editable text with a cursor position."""

    value: str = ""
    cursor: int = 0

    def insert(self, text: str) -> None:
        self.value = self.value[: self.cursor] + text + self.value[self.cursor :]
        self.cursor += len(text)

    def backspace(self) -> None:
        if self.cursor == 0:
            return
        self.value = self.value[: self.cursor - 1] + self.value[self.cursor :]
        self.cursor -= 1

    def delete(self) -> None:
        self.value = self.value[: self.cursor] + self.value[self.cursor + 1 :]

    def move_left(self) -> None:
        self.cursor = max(self.cursor - 1, 0)

    def move_right(self) -> None:
        self.cursor = min(self.cursor + 1, len(self.value))

    def home(self) -> None:
        self.cursor = 0

    def end(self) -> None:
        self.cursor = len(self.value)

    def reset(self) -> None:
        self.value = ""
        self.cursor = 0


@dataclass
class SessionState:
    """Everything the console renders.

    ``input`` only carries meaning in ``InputMode.COMMAND_ENTRY``.
    """

    mode: InputMode = InputMode.NORMAL
    input: InputBuffer = field(default_factory=InputBuffer)
    active_command: CommandHandler | None = None
    notification: Notification | None = None
    exit: bool = False
    table: TableViewModel = field(default_factory=TableViewModel)
    history: list[str] = field(default_factory=list)

    def notify_info(self, message: str) -> None:
        self.notification = Notification.info(message)

    def notify_error(self, message: str) -> None:
        self.notification = Notification.error(message)

    def dismiss_notification(self) -> None:
        self.notification = None
