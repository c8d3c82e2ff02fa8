"""Metadata fetcher - cluster metadata (brokers, topics, partitions)."""

from __future__ import annotations

import logging
from typing import Any

from confluent_kafka import KafkaException

from kafkalens.controllers.errors import FetchError

logger = logging.getLogger(__name__)


class MetadataFetcher:
    """Fetches cluster metadata with one request."""

    def fetch_cluster_metadata(self, client: Any, timeout: float) -> Any:
        """Fetch metadata for all brokers and topics.

        Args:
            client: Consumer exposing ``list_topics``.
            timeout: Request timeout in seconds.

        Returns:
            The client's ``ClusterMetadata`` object.

        Raises:
            FetchError: The request failed or timed out.
        """
        try:
            metadata = client.list_topics(timeout=timeout)
        except KafkaException as exc:
            raise FetchError(f"Failed to fetch metadata: {exc}") from exc
        logger.debug(
            "Fetched metadata: %d brokers, %d topics",
            len(metadata.brokers),
            len(metadata.topics),
        )
        return metadata
