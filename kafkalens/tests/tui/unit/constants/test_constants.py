"""Tests for constants modules."""

from __future__ import annotations

import kafkalens.constants as constants
from kafkalens.constants.enums import ColumnSizing, InputMode, NotificationKind
from kafkalens.constants.values import (
    INTERNAL_TOPIC_PREFIX,
    MSG_GROUPS_DELETED,
    MSG_TOPICS_DELETED,
    MSG_UNKNOWN_COMMAND,
)


class TestValues:
    def test_messages(self) -> None:
        assert MSG_TOPICS_DELETED == "Topics deleted successfully"
        assert MSG_GROUPS_DELETED == "Consumer groups deleted successfully"
        assert MSG_UNKNOWN_COMMAND.format(text="list-foo") == "Unknown command 'list-foo'"

    def test_internal_prefix(self) -> None:
        assert INTERNAL_TOPIC_PREFIX == "_"


class TestDefaults:
    def test_connection_defaults(self) -> None:
        assert constants.TIMEOUT_MS_DEFAULT == 10_000
        assert constants.AWS_REGION_DEFAULT == "eu-west-1"
        assert constants.IAM_AUTH_DEFAULT is False
        assert constants.LOG_LEVEL_DEFAULT == "INFO"


class TestEnums:
    def test_members(self) -> None:
        assert {mode.value for mode in InputMode} == {"normal", "command_entry"}
        assert {kind.value for kind in NotificationKind} == {"info", "error"}
        assert {sizing.value for sizing in ColumnSizing} == {"fill", "min"}


class TestExports:
    def test_all_names_resolve(self) -> None:
        for name in constants.__all__:
            assert hasattr(constants, name), name
