"""Tests for the list-topics handler."""

from __future__ import annotations

from kafkalens.constants.enums import ColumnSizing, NotificationKind
from kafkalens.controllers.errors import DeleteError
from kafkalens.models.cluster import TopicSummary
from kafkalens.session import KeyEvent, SessionState
from kafkalens.session.commands import ListTopicsCommand
from kafkalens.session.commands.list_topics import TOPICS_TABLE, topic_rows
from kafkalens.session.machine import activate_command
from kafkalens.session.state import Notification

DELETE = KeyEvent.char("d")


def activated(gateway) -> tuple[ListTopicsCommand, SessionState]:
    state = SessionState()
    handler = ListTopicsCommand()
    activate_command(state, handler, gateway)
    return handler, state


class TestActivate:
    """Tests for ListTopicsCommand.activate."""

    def test_rows_sorted_by_name(self, gateway) -> None:
        gateway.topics.append(TopicSummary(name="Zeta"))
        gateway.topics.append(TopicSummary(name="alpha"))
        handler = ListTopicsCommand()
        data = handler.activate(gateway)
        names = [row.cells[0] for row in data.rows]
        assert names == sorted(names)
        assert names[:2] == ["Zeta", "__consumer_offsets"]

    def test_internal_topics_are_muted(self, gateway) -> None:
        data = ListTopicsCommand().activate(gateway)
        muted = {row.cells[0]: row.muted for row in data.rows}
        assert muted == {"__consumer_offsets": True, "orders": False, "payments": False}

    def test_cells(self, gateway) -> None:
        data = ListTopicsCommand().activate(gateway)
        assert data.rows[1].cells == ("orders", "2", "2", "150", "0")

    def test_definition_is_selectable(self) -> None:
        assert ListTopicsCommand().definition is TOPICS_TABLE
        assert TOPICS_TABLE.selectable is True
        assert TOPICS_TABLE.labels == [
            "Name",
            "Partitions",
            "Replication Factor",
            "Message Count",
            "Size",
        ]


class TestWidthHints:
    """Tests for per-column width hints."""

    def test_hints(self) -> None:
        data = topic_rows(
            [
                TopicSummary(name="a", partitions=12, replication_factor=3, message_count=12345),
                TopicSummary(name="b", partitions=1, replication_factor=3, message_count=7),
            ]
        )
        sizings = [hint.sizing for hint in data.hints]
        widths = [hint.width for hint in data.hints]
        assert sizings == [
            ColumnSizing.FILL,
            ColumnSizing.MIN,
            ColumnSizing.MIN,
            ColumnSizing.MIN,
            ColumnSizing.MIN,
        ]
        assert widths[1:] == [3, 2, 6, 1]

    def test_hints_for_no_topics(self) -> None:
        data = topic_rows([])
        assert [hint.width for hint in data.hints[1:]] == [1, 1, 1, 0]


class TestDeleteKey:
    """Tests for the delete key."""

    def test_deletes_selected_names(self, gateway) -> None:
        handler, state = activated(gateway)
        state.table.select_next()
        state.table.toggle_selected()
        state.table.select_next()
        state.table.toggle_selected()

        handler.handle_key(DELETE, state, gateway)

        assert gateway.calls_named("delete_topics") == [
            ("delete_topics", ["orders", "payments"])
        ]
        assert state.notification == Notification.info("Topics deleted successfully")

    def test_view_is_not_refreshed(self, gateway) -> None:
        handler, state = activated(gateway)
        state.table.toggle_selected()
        rows = state.table.rows
        handler.handle_key(DELETE, state, gateway)
        assert state.table.rows == rows
        assert len(gateway.calls_named("list_topics")) == 1

    def test_failures_are_listed(self, gateway) -> None:
        gateway.failures = {
            "orders": "Broker: Topic authorization failed",
            "payments": "Broker: Unknown topic or partition",
        }
        handler, state = activated(gateway)
        for _ in range(3):
            state.table.toggle_selected()
            state.table.select_next()

        handler.handle_key(DELETE, state, gateway)

        assert state.notification is not None
        assert state.notification.kind is NotificationKind.ERROR
        assert state.notification.message == (
            "orders: Broker: Topic authorization failed\n"
            "payments: Broker: Unknown topic or partition"
        )

    def test_no_selection_calls_nothing(self, gateway) -> None:
        handler, state = activated(gateway)
        handler.handle_key(DELETE, state, gateway)
        assert gateway.calls_named("delete_topics") == []
        assert state.notification == Notification.info("No topics selected")

    def test_request_failure_becomes_error(self, gateway) -> None:
        handler, state = activated(gateway)
        state.table.toggle_selected()
        gateway.error = DeleteError("Failed to delete topics: timed out")
        handler.handle_key(DELETE, state, gateway)
        assert state.notification == Notification.error("Failed to delete topics: timed out")

    def test_other_keys_ignored(self, gateway) -> None:
        handler, state = activated(gateway)
        state.table.toggle_selected()
        handler.handle_key(KeyEvent.char("x"), state, gateway)
        assert gateway.calls_named("delete_topics") == []
        assert state.notification is None
