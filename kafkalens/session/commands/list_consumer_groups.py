"""``list-consumer-groups [PREFIX]``: groups table with prefix delete.

The delete key removes every group matching the prefix the command was
started with, not a row selection. Without a prefix that is every group of
the cluster.
"""

from __future__ import annotations

import logging

from kafkalens.constants.values import MSG_GROUPS_DELETED, MSG_NO_GROUPS_MATCHED
from kafkalens.controllers.base import BaseController
from kafkalens.controllers.errors import GatewayError
from kafkalens.keyboard.session import CHAR_DELETE_SELECTED
from kafkalens.models.cluster import ConsumerGroupSummary
from kafkalens.session.commands.base import CommandHandler, outcome_notification
from kafkalens.session.events import KeyEvent
from kafkalens.session.state import SessionState
from kafkalens.session.table import (
    ColumnHint,
    ColumnSpec,
    TableData,
    TableDefinition,
    TableRow,
    padded_width,
)

logger = logging.getLogger(__name__)

GROUPS_TABLE = TableDefinition(
    columns=(ColumnSpec("Name"), ColumnSpec("State")),
)


def group_rows(groups: list[ConsumerGroupSummary]) -> TableData:
    rows = tuple(TableRow(cells=(group.name, group.state)) for group in groups)
    hints = (ColumnHint.fill(), ColumnHint.min(padded_width(rows, 1)))
    return TableData(rows=rows, hints=hints)


class ListConsumerGroupsCommand(CommandHandler):
    title = "Consumer Groups"

    def __init__(self, name_prefix: str | None = None) -> None:
        self.name_prefix = name_prefix or None
        self.groups: list[ConsumerGroupSummary] = []

    @property
    def definition(self) -> TableDefinition:
        return GROUPS_TABLE

    def activate(self, gateway: BaseController) -> TableData:
        self.groups = sorted(
            gateway.list_consumer_groups(self.name_prefix),
            key=lambda group: group.name,
        )
        return group_rows(self.groups)

    def handle_key(
        self, event: KeyEvent, state: SessionState, gateway: BaseController
    ) -> None:
        if event.character != CHAR_DELETE_SELECTED:
            return
        try:
            outcomes = gateway.delete_consumer_groups(self.name_prefix)
        except GatewayError as exc:
            logger.warning("Consumer group delete failed: %s", exc)
            state.notify_error(str(exc))
            return
        if not outcomes:
            state.notify_info(MSG_NO_GROUPS_MATCHED)
            return
        state.notification = outcome_notification(outcomes, MSG_GROUPS_DELETED)
