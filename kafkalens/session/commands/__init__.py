"""Console command handlers."""

from kafkalens.session.commands.base import CommandHandler, outcome_notification
from kafkalens.session.commands.list_brokers import ListBrokersCommand
from kafkalens.session.commands.list_consumer_groups import ListConsumerGroupsCommand
from kafkalens.session.commands.list_topics import ListTopicsCommand

__all__ = [
    "CommandHandler",
    "ListBrokersCommand",
    "ListConsumerGroupsCommand",
    "ListTopicsCommand",
    "outcome_notification",
]
