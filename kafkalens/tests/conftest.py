"""Shared fixtures: an in-memory cluster gateway."""

from __future__ import annotations

import pytest

from kafkalens.controllers.base import BaseController, matches_prefix
from kafkalens.controllers.errors import GatewayError
from kafkalens.models.cluster import (
    BrokerSummary,
    ConsumerGroupSummary,
    DeleteOutcome,
    TopicSummary,
)


class FakeGateway(BaseController):
    """Cluster gateway backed by plain lists.

    ``failures`` maps an entity name to the reason its delete fails.
    ``error`` is raised from every call while set.
    """

    def __init__(self) -> None:
        self.brokers: list[BrokerSummary] = []
        self.topics: list[TopicSummary] = []
        self.groups: list[ConsumerGroupSummary] = []
        self.failures: dict[str, str] = {}
        self.error: GatewayError | None = None
        self.calls: list[tuple] = []

    def _record(self, *call: object) -> None:
        self.calls.append(call)
        if self.error is not None:
            raise self.error

    def calls_named(self, name: str) -> list[tuple]:
        return [call for call in self.calls if call[0] == name]

    def list_brokers(self) -> list[BrokerSummary]:
        self._record("list_brokers")
        return sorted(self.brokers, key=lambda broker: broker.id)

    def list_topics(self) -> list[TopicSummary]:
        self._record("list_topics")
        return sorted(self.topics, key=lambda topic: topic.name)

    def list_topic_names(self) -> list[str]:
        self._record("list_topic_names")
        return sorted(topic.name for topic in self.topics)

    def delete_topics(self, names: list[str]) -> list[DeleteOutcome]:
        self._record("delete_topics", list(names))
        return [DeleteOutcome(name=name, error=self.failures.get(name)) for name in names]

    def _matching_groups(self, name_prefix: str | None) -> list[ConsumerGroupSummary]:
        return sorted(
            (group for group in self.groups if matches_prefix(group.name, name_prefix)),
            key=lambda group: group.name,
        )

    def list_consumer_groups(
        self, name_prefix: str | None = None
    ) -> list[ConsumerGroupSummary]:
        self._record("list_consumer_groups", name_prefix)
        return self._matching_groups(name_prefix)

    def delete_consumer_groups(
        self, name_prefix: str | None = None
    ) -> list[DeleteOutcome]:
        self._record("delete_consumer_groups", name_prefix)
        return [
            DeleteOutcome(name=group.name, error=self.failures.get(group.name))
            for group in self._matching_groups(name_prefix)
        ]


@pytest.fixture
def gateway() -> FakeGateway:
    """Gateway preloaded with a small cluster."""
    fake = FakeGateway()
    fake.brokers = [
        BrokerSummary(id=2, host="b-2.kafka.local", port=9092),
        BrokerSummary(id=1, host="b-1.kafka.local", port=9092),
    ]
    fake.topics = [
        TopicSummary(name="payments", partitions=3, replication_factor=3, message_count=1200),
        TopicSummary(name="__consumer_offsets", partitions=50, replication_factor=3),
        TopicSummary(name="orders", partitions=2, replication_factor=2, message_count=150),
    ]
    fake.groups = [
        ConsumerGroupSummary(name="payments-v1", state="Stable"),
        ConsumerGroupSummary(name="audit", state="Empty"),
        ConsumerGroupSummary(name="payments-v2", state="Empty"),
    ]
    return fake


@pytest.fixture
def empty_gateway() -> FakeGateway:
    return FakeGateway()
