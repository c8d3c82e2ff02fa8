"""Command handler interface shared by every console command."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from kafkalens.models.cluster.delete_result import failed_outcomes, format_failures
from kafkalens.session.state import Notification

if TYPE_CHECKING:
    from kafkalens.controllers.base import BaseController
    from kafkalens.models.cluster import DeleteOutcome
    from kafkalens.session.events import KeyEvent
    from kafkalens.session.state import SessionState
    from kafkalens.session.table import TableData, TableDefinition

logger = logging.getLogger(__name__)


class CommandHandler(ABC):
    """One active console command.

    ``activate`` fetches the command's data and returns the rows to show.
    ``handle_key`` receives keys the state machine does not consume itself.
    Gateway failures raised from ``activate`` are reported by the caller;
    ``handle_key`` reports its own through ``state.notification``.
    """

    title: ClassVar[str] = ""

    @property
    @abstractmethod
    def definition(self) -> TableDefinition:
        """Columns of the command's table."""
        ...

    @abstractmethod
    def activate(self, gateway: BaseController) -> TableData:
        """Fetch fresh data and build the table rows."""
        ...

    def handle_key(
        self, event: KeyEvent, state: SessionState, gateway: BaseController
    ) -> None:
        """Command-specific keys. Ignored by default."""
        return None


def outcome_notification(
    outcomes: list[DeleteOutcome], success_message: str
) -> Notification:
    """Info when every delete succeeded, otherwise one error line per failure."""
    if failed_outcomes(outcomes):
        return Notification.error(format_failures(outcomes))
    return Notification.info(success_message)
