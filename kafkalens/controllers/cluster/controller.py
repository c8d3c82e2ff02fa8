"""Cluster controller for Kafka data operations.

This module serves as the orchestrator for cluster operations, delegating
requests to fetchers and turning raw client objects into models through the
parsers. Every call builds its own client and returns fresh data.
"""

from __future__ import annotations

import logging
from typing import Any

from confluent_kafka import KafkaException

from kafkalens.controllers.auth import IamTokenProvider
from kafkalens.controllers.base import BaseController, matches_prefix
from kafkalens.controllers.cluster.client_factory import ClientFactory
from kafkalens.controllers.cluster.fetchers import (
    GroupFetcher,
    MetadataFetcher,
    WatermarkFetcher,
)
from kafkalens.controllers.cluster.parsers import (
    BrokerParser,
    GroupParser,
    TopicParser,
    aggregate_topic_summaries,
)
from kafkalens.controllers.errors import DeleteError
from kafkalens.models.cluster import (
    BrokerSummary,
    ConsumerGroupSummary,
    DeleteOutcome,
    TopicSummary,
)
from kafkalens.models.state.app_settings import ConnectionSettings

logger = logging.getLogger(__name__)


def describe_kafka_exception(exc: BaseException) -> str:
    """Return the broker's error text for a ``KafkaException``."""
    error = exc.args[0] if exc.args else None
    describe = getattr(error, "str", None)
    if callable(describe):
        return str(describe())
    return str(exc)


class KafkaClusterController(BaseController):
    """Kafka cluster gateway.

    Delegates to:
    - MetadataFetcher / WatermarkFetcher: brokers, topics, offsets
    - GroupFetcher: consumer group listings
    - TopicParser / BrokerParser / GroupParser: model construction
    """

    def __init__(
        self,
        settings: ConnectionSettings,
        *,
        client_factory: ClientFactory | None = None,
        token_provider: IamTokenProvider | None = None,
    ) -> None:
        self.settings = settings
        self._clients = client_factory or ClientFactory(settings, token_provider)
        self._metadata_fetcher = MetadataFetcher()
        self._watermark_fetcher = WatermarkFetcher()
        self._group_fetcher = GroupFetcher()
        self._topic_parser = TopicParser()
        self._broker_parser = BrokerParser()
        self._group_parser = GroupParser()

    @property
    def timeout(self) -> float:
        return self.settings.timeout_seconds

    # =========================================================================
    # Brokers
    # =========================================================================

    def list_brokers(self) -> list[BrokerSummary]:
        with self._clients.consumer() as consumer:
            metadata = self._metadata_fetcher.fetch_cluster_metadata(consumer, self.timeout)
        return self._broker_parser.parse_brokers(metadata)

    # =========================================================================
    # Topics
    # =========================================================================

    def list_topics(self) -> list[TopicSummary]:
        with self._clients.consumer() as consumer:
            metadata = self._metadata_fetcher.fetch_cluster_metadata(consumer, self.timeout)
            topics = self._topic_parser.parse_cluster_topics(metadata)
            watermarks = self._watermark_fetcher.fetch_watermarks(
                consumer, topics, self.timeout
            )
        summaries = aggregate_topic_summaries(topics, watermarks)
        logger.info("Listed %d topics", len(summaries))
        return summaries

    def list_topic_names(self) -> list[str]:
        with self._clients.consumer() as consumer:
            metadata = self._metadata_fetcher.fetch_cluster_metadata(consumer, self.timeout)
        return sorted(metadata.topics)

    def delete_topics(self, names: list[str]) -> list[DeleteOutcome]:
        if not names:
            return []
        logger.info("Deleting topics: %s", names)
        with self._clients.admin() as admin:
            try:
                futures = admin.delete_topics(
                    list(names),
                    operation_timeout=self.timeout,
                    request_timeout=self.timeout,
                )
            except (KafkaException, ValueError, TypeError) as exc:
                raise DeleteError(f"Failed to delete topics: {exc}") from exc
            return [self._resolve_outcome(name, futures.get(name)) for name in names]

    # =========================================================================
    # Consumer groups
    # =========================================================================

    def _fetch_groups(self) -> list[ConsumerGroupSummary]:
        with self._clients.admin() as admin:
            listings = self._group_fetcher.fetch_group_listings(admin, self.timeout)
        return [self._group_parser.parse_group(listing) for listing in listings]

    def list_consumer_groups(
        self, name_prefix: str | None = None
    ) -> list[ConsumerGroupSummary]:
        groups = [
            group for group in self._fetch_groups() if matches_prefix(group.name, name_prefix)
        ]
        groups.sort(key=lambda group: group.name)
        return groups

    def delete_consumer_groups(
        self, name_prefix: str | None = None
    ) -> list[DeleteOutcome]:
        names = [group.name for group in self.list_consumer_groups(name_prefix)]
        if not names:
            return []
        logger.info("Deleting consumer groups: %s", names)
        with self._clients.admin() as admin:
            try:
                futures = admin.delete_consumer_groups(names, request_timeout=self.timeout)
            except (KafkaException, ValueError, TypeError) as exc:
                raise DeleteError(f"Could not delete groups: {exc}") from exc
            return [self._resolve_outcome(name, futures.get(name)) for name in names]

    # =========================================================================
    # Helpers
    # =========================================================================

    def _resolve_outcome(self, name: str, future: Any) -> DeleteOutcome:
        """Wait for one per-entity admin future."""
        if future is None:
            return DeleteOutcome(name=name, error="no result returned by the cluster")
        try:
            future.result()
        except KafkaException as exc:
            reason = describe_kafka_exception(exc)
            logger.warning("Unable to delete %s: %s", name, reason)
            return DeleteOutcome(name=name, error=reason)
        return DeleteOutcome(name=name)
