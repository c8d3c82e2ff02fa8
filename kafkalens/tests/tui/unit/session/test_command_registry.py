"""Tests for command parsing and handler construction."""

from __future__ import annotations

import pytest

from kafkalens.session.commands import (
    ListBrokersCommand,
    ListConsumerGroupsCommand,
    ListTopicsCommand,
)
from kafkalens.session.registry import CommandKind, CommandRegistry, ParsedCommand


@pytest.fixture
def registry() -> CommandRegistry:
    return CommandRegistry()


class TestCommandKind:
    def test_command_names_are_kebab_case(self) -> None:
        assert CommandKind.LIST_TOPICS.command_name == "list-topics"
        assert CommandKind.LIST_BROKERS.command_name == "list-brokers"
        assert CommandKind.LIST_CONSUMER_GROUPS.command_name == "list-consumer-groups"


class TestParse:
    """Tests for CommandRegistry.parse."""

    @pytest.mark.parametrize(
        ("text", "kind"),
        [
            ("list-topics", CommandKind.LIST_TOPICS),
            ("list-brokers", CommandKind.LIST_BROKERS),
            ("list-consumer-groups", CommandKind.LIST_CONSUMER_GROUPS),
        ],
    )
    def test_exact_names(self, registry: CommandRegistry, text: str, kind: CommandKind) -> None:
        assert registry.parse(text) == ParsedCommand(kind)

    @pytest.mark.parametrize(
        "text",
        ["list-foo", "", "List-Topics", "LIST-TOPICS", " list-topics", "list-topic", "list_topics"],
    )
    def test_unknown_text(self, registry: CommandRegistry, text: str) -> None:
        """Matching is exact and case-sensitive."""
        assert registry.parse(text) is None

    def test_group_prefix_argument(self, registry: CommandRegistry) -> None:
        parsed = registry.parse("list-consumer-groups payments")
        assert parsed == ParsedCommand(CommandKind.LIST_CONSUMER_GROUPS, "payments")

    def test_commands_without_arguments_reject_trailing_text(
        self, registry: CommandRegistry
    ) -> None:
        assert registry.parse("list-topics payments") is None
        assert registry.parse("list-brokers 1") is None

    def test_trailing_space_without_argument_is_unknown(
        self, registry: CommandRegistry
    ) -> None:
        assert registry.parse("list-consumer-groups ") is None


class TestCreate:
    """Tests for CommandRegistry.create."""

    def test_creates_fresh_handlers(self, registry: CommandRegistry) -> None:
        parsed = ParsedCommand(CommandKind.LIST_TOPICS)
        first = registry.create(parsed)
        second = registry.create(parsed)
        assert isinstance(first, ListTopicsCommand)
        assert first is not second

    def test_brokers_handler(self, registry: CommandRegistry) -> None:
        handler = registry.create(ParsedCommand(CommandKind.LIST_BROKERS))
        assert isinstance(handler, ListBrokersCommand)

    def test_group_handler_receives_prefix(self, registry: CommandRegistry) -> None:
        handler = registry.create(ParsedCommand(CommandKind.LIST_CONSUMER_GROUPS, "pay"))
        assert isinstance(handler, ListConsumerGroupsCommand)
        assert handler.name_prefix == "pay"

    def test_custom_factories(self) -> None:
        sentinel = ListBrokersCommand()
        registry = CommandRegistry({CommandKind.LIST_BROKERS: lambda _argument: sentinel})
        assert registry.create(ParsedCommand(CommandKind.LIST_BROKERS)) is sentinel
