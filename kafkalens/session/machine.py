"""Session state machine.

``update`` applies one key event to an explicit ``SessionState``. It is the
only place mode transitions happen; gateway calls made on the way are
synchronous.
"""

from __future__ import annotations

import logging

from kafkalens.constants.enums import InputMode
from kafkalens.constants.values import MSG_UNKNOWN_COMMAND
from kafkalens.controllers.base import BaseController
from kafkalens.controllers.errors import GatewayError
from kafkalens.keyboard.session import (
    CHAR_COMMAND_MODE,
    CHAR_QUIT,
    CHAR_SELECT,
    KEY_BACKSPACE,
    KEY_CTRL_C,
    KEY_DELETE,
    KEY_DOWN,
    KEY_END,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_HOME,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_SPACE,
    KEY_UP,
)
from kafkalens.session.commands import CommandHandler
from kafkalens.session.events import KeyEvent
from kafkalens.session.registry import CommandRegistry
from kafkalens.session.state import InputBuffer, SessionState
from kafkalens.session.table import TableData

logger = logging.getLogger(__name__)

DEFAULT_REGISTRY = CommandRegistry()


def update(
    state: SessionState,
    event: KeyEvent,
    gateway: BaseController,
    registry: CommandRegistry | None = None,
) -> None:
    """Apply one key event to ``state``."""
    if state.exit:
        return
    if event.key == KEY_CTRL_C:
        state.exit = True
        return
    if state.mode is InputMode.COMMAND_ENTRY:
        _handle_command_entry(state, event, gateway, registry or DEFAULT_REGISTRY)
    else:
        _handle_normal(state, event, gateway)


def _handle_normal(state: SessionState, event: KeyEvent, gateway: BaseController) -> None:
    if state.notification is not None:
        if event.key == KEY_ESCAPE:
            state.dismiss_notification()
        return

    if event.character == CHAR_QUIT:
        state.exit = True
    elif event.character == CHAR_COMMAND_MODE:
        state.mode = InputMode.COMMAND_ENTRY
        state.input.reset()
    elif state.active_command is None:
        return
    elif event.key == KEY_UP:
        state.table.select_previous()
    elif event.key == KEY_DOWN:
        state.table.select_next()
    elif event.key == KEY_SPACE or event.character == CHAR_SELECT:
        state.table.toggle_selected()
    else:
        state.active_command.handle_key(event, state, gateway)


def _handle_command_entry(
    state: SessionState,
    event: KeyEvent,
    gateway: BaseController,
    registry: CommandRegistry,
) -> None:
    if event.key == KEY_ESCAPE:
        if state.notification is not None:
            state.dismiss_notification()
        else:
            state.mode = InputMode.NORMAL
            state.input.reset()
        return

    if state.notification is not None:
        return

    if event.key == KEY_ENTER:
        submit_command(state, state.input.value, gateway, registry)
        return

    _edit_input(state.input, event)


def _edit_input(buffer: InputBuffer, event: KeyEvent) -> None:
    if event.key == KEY_BACKSPACE:
        buffer.backspace()
    elif event.key == KEY_DELETE:
        buffer.delete()
    elif event.key == KEY_LEFT:
        buffer.move_left()
    elif event.key == KEY_RIGHT:
        buffer.move_right()
    elif event.key == KEY_HOME:
        buffer.home()
    elif event.key == KEY_END:
        buffer.end()
    elif event.is_printable:
        buffer.insert(event.character or "")


def submit_command(
    state: SessionState,
    text: str,
    gateway: BaseController,
    registry: CommandRegistry | None = None,
) -> None:
    """Parse ``text`` and activate the matching command.

    Unknown text only raises an error notification; the rest of the state,
    the entry buffer included, is left untouched.
    """
    parsed = (registry or DEFAULT_REGISTRY).parse(text)
    if parsed is None:
        logger.info("Unknown command %r", text)
        state.notify_error(MSG_UNKNOWN_COMMAND.format(text=text))
        return

    state.input.reset()
    state.mode = InputMode.NORMAL
    state.dismiss_notification()
    state.history.append(text)
    activate_command(state, (registry or DEFAULT_REGISTRY).create(parsed), gateway)


def activate_command(
    state: SessionState, handler: CommandHandler, gateway: BaseController
) -> None:
    """Make ``handler`` the active command and load its rows.

    On a gateway failure the command stays active with an empty table and
    the error is shown as a notification.
    """
    state.active_command = handler
    try:
        data = handler.activate(gateway)
    except GatewayError as exc:
        logger.warning("Command %s failed: %s", type(handler).__name__, exc)
        state.table.replace(handler.definition, TableData())
        state.notify_error(str(exc))
        return
    state.table.replace(handler.definition, data)
