"""Base controller defining the cluster gateway used by the console.

Concrete controllers talk to a real cluster; tests substitute in-memory
subclasses. Every method is synchronous and returns fresh data.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from kafkalens.models.cluster import (
    BrokerSummary,
    ConsumerGroupSummary,
    DeleteOutcome,
    TopicSummary,
)

logger = logging.getLogger(__name__)


def matches_prefix(name: str, prefix: str | None) -> bool:
    """Case-sensitive prefix filter; an absent or empty prefix matches all."""
    if not prefix:
        return True
    return name.startswith(prefix)


class BaseController(ABC):
    """Base class for cluster gateways.

    Subclasses implement the fetch and delete operations. Failures are raised
    as ``kafkalens.controllers.errors.GatewayError`` subclasses.
    """

    @abstractmethod
    def list_brokers(self) -> list[BrokerSummary]:
        """Return the brokers of the cluster."""
        ...

    @abstractmethod
    def list_topics(self) -> list[TopicSummary]:
        """Return topic statistics sorted by name."""
        ...

    @abstractmethod
    def list_topic_names(self) -> list[str]:
        """Return topic names only, sorted."""
        ...

    @abstractmethod
    def delete_topics(self, names: list[str]) -> list[DeleteOutcome]:
        """Delete the named topics, one outcome per requested name."""
        ...

    @abstractmethod
    def list_consumer_groups(
        self, name_prefix: str | None = None
    ) -> list[ConsumerGroupSummary]:
        """Return consumer groups matching ``name_prefix``, sorted by name."""
        ...

    @abstractmethod
    def delete_consumer_groups(
        self, name_prefix: str | None = None
    ) -> list[DeleteOutcome]:
        """Delete every consumer group matching ``name_prefix``.

        An absent prefix targets all groups of the cluster.
        """
        ...

    def topic_deletion_candidates(self, name_prefix: str | None = None) -> list[str]:
        """Return the topic names a prefix delete would target."""
        return [
            name for name in self.list_topic_names() if matches_prefix(name, name_prefix)
        ]
