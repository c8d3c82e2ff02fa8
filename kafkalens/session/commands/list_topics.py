"""``list-topics``: topic statistics with multi-select delete."""

from __future__ import annotations

import logging

from kafkalens.constants.values import (
    INTERNAL_TOPIC_PREFIX,
    MSG_NO_TOPICS_SELECTED,
    MSG_TOPICS_DELETED,
)
from kafkalens.controllers.base import BaseController
from kafkalens.controllers.errors import GatewayError
from kafkalens.keyboard.session import CHAR_DELETE_SELECTED
from kafkalens.models.cluster import TopicSummary
from kafkalens.session.commands.base import CommandHandler, outcome_notification
from kafkalens.session.events import KeyEvent
from kafkalens.session.state import SessionState
from kafkalens.session.table import (
    ColumnHint,
    ColumnSpec,
    TableData,
    TableDefinition,
    TableRow,
    longest_cell,
    padded_width,
)

logger = logging.getLogger(__name__)

TOPICS_TABLE = TableDefinition(
    columns=(
        ColumnSpec("Name"),
        ColumnSpec("Partitions", numeric=True),
        ColumnSpec("Replication Factor", numeric=True),
        ColumnSpec("Message Count", numeric=True),
        ColumnSpec("Size", numeric=True),
    ),
    selectable=True,
)


def topic_rows(topics: list[TopicSummary]) -> TableData:
    """Build rows in the given order; internal topics are muted."""
    rows = tuple(
        TableRow(
            cells=(
                topic.name,
                str(topic.partitions),
                str(topic.replication_factor),
                str(topic.message_count),
                str(topic.size_bytes),
            ),
            muted=topic.name.startswith(INTERNAL_TOPIC_PREFIX),
        )
        for topic in topics
    )
    hints = (
        ColumnHint.fill(),
        ColumnHint.min(padded_width(rows, 1)),
        ColumnHint.min(padded_width(rows, 2)),
        ColumnHint.min(padded_width(rows, 3)),
        ColumnHint.min(longest_cell(rows, 4)),
    )
    return TableData(rows=rows, hints=hints)


class ListTopicsCommand(CommandHandler):
    title = "Topics"

    def __init__(self) -> None:
        self.topics: list[TopicSummary] = []

    @property
    def definition(self) -> TableDefinition:
        return TOPICS_TABLE

    def activate(self, gateway: BaseController) -> TableData:
        self.topics = sorted(gateway.list_topics(), key=lambda topic: topic.name)
        return topic_rows(self.topics)

    def selected_names(self, state: SessionState) -> list[str]:
        return [
            self.topics[index].name
            for index in state.table.selected_indices()
            if index < len(self.topics)
        ]

    def handle_key(
        self, event: KeyEvent, state: SessionState, gateway: BaseController
    ) -> None:
        if event.character != CHAR_DELETE_SELECTED:
            return
        names = self.selected_names(state)
        if not names:
            state.notify_info(MSG_NO_TOPICS_SELECTED)
            return
        try:
            outcomes = gateway.delete_topics(names)
        except GatewayError as exc:
            logger.warning("Topic delete failed: %s", exc)
            state.notify_error(str(exc))
            return
        state.notification = outcome_notification(outcomes, MSG_TOPICS_DELETED)
