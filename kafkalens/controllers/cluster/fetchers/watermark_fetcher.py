"""Watermark fetcher - best-effort low/high offsets per partition."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from confluent_kafka import KafkaException, TopicPartition

from kafkalens.models.cluster.topic_info import TopicMetadataInfo, WatermarkInfo

logger = logging.getLogger(__name__)


class WatermarkFetcher:
    """Fetches partition watermarks one round trip at a time.

    A failed or timed out partition is skipped; it never aborts the others.
    """

    def fetch_partition_watermark(
        self, client: Any, topic: str, partition_id: int, timeout: float
    ) -> WatermarkInfo | None:
        """Return the watermark of one partition, or None when unavailable."""
        try:
            offsets = client.get_watermark_offsets(
                TopicPartition(topic, partition_id), timeout=timeout
            )
        except KafkaException as exc:
            logger.debug("Watermark fetch failed for %s[%d]: %s", topic, partition_id, exc)
            return None
        if offsets is None:
            logger.debug("Watermark fetch timed out for %s[%d]", topic, partition_id)
            return None
        low, high = offsets
        return WatermarkInfo(low=low, high=high)

    def fetch_watermarks(
        self,
        client: Any,
        topics: Iterable[TopicMetadataInfo],
        timeout: float,
    ) -> dict[tuple[str, int], WatermarkInfo]:
        """Fetch watermarks for every partition of ``topics``.

        Returns:
            Mapping of (topic, partition id) to watermark, failed ones absent.
        """
        watermarks: dict[tuple[str, int], WatermarkInfo] = {}
        failed = 0
        for topic in topics:
            for partition in topic.partitions:
                watermark = self.fetch_partition_watermark(
                    client, topic.name, partition.partition_id, timeout
                )
                if watermark is None:
                    failed += 1
                    continue
                watermarks[(topic.name, partition.partition_id)] = watermark
        if failed:
            logger.info("Watermarks unavailable for %d partitions", failed)
        return watermarks
