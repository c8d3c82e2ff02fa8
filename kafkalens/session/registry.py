"""Command registry: the closed set of console commands and their parser."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum

from kafkalens.session.commands import (
    CommandHandler,
    ListBrokersCommand,
    ListConsumerGroupsCommand,
    ListTopicsCommand,
)


class CommandKind(Enum):
    """Every command the console accepts."""

    LIST_TOPICS = "list_topics"
    LIST_BROKERS = "list_brokers"
    LIST_CONSUMER_GROUPS = "list_consumer_groups"

    @property
    def command_name(self) -> str:
        """Name typed by the operator: the kebab-case of the member name."""
        return self.name.lower().replace("_", "-")


@dataclass(frozen=True)
class ParsedCommand:
    kind: CommandKind
    argument: str | None = None


HandlerFactory = Callable[[str | None], CommandHandler]

DEFAULT_FACTORIES: Mapping[CommandKind, HandlerFactory] = {
    CommandKind.LIST_TOPICS: lambda _argument: ListTopicsCommand(),
    CommandKind.LIST_BROKERS: lambda _argument: ListBrokersCommand(),
    CommandKind.LIST_CONSUMER_GROUPS: ListConsumerGroupsCommand,
}

# Commands that take one trailing argument after the command word.
ARGUMENT_COMMANDS = frozenset({CommandKind.LIST_CONSUMER_GROUPS})


class CommandRegistry:
    """Maps typed command text to a fresh handler.

    Matching is exact and case-sensitive on the command word.
    """

    def __init__(
        self, factories: Mapping[CommandKind, HandlerFactory] | None = None
    ) -> None:
        self._factories = dict(factories or DEFAULT_FACTORIES)
        self._by_name = {kind.command_name: kind for kind in CommandKind}

    def parse(self, text: str) -> ParsedCommand | None:
        word, separator, rest = text.partition(" ")
        kind = self._by_name.get(word)
        if kind is None:
            return None
        if not separator:
            return ParsedCommand(kind)
        argument = rest.strip()
        if kind not in ARGUMENT_COMMANDS or not argument:
            return None
        return ParsedCommand(kind, argument)

    def create(self, parsed: ParsedCommand) -> CommandHandler:
        return self._factories[parsed.kind](parsed.argument)
