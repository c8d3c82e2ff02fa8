"""Topic parser - turns raw partition facts into topic summary rows."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from kafkalens.models.cluster.topic_info import (
    PartitionMetadataInfo,
    TopicMetadataInfo,
    TopicSummary,
    WatermarkInfo,
)

# (topic name, partition id) -> watermark of that partition. A missing key
# means the watermark fetch for that partition failed.
WatermarkMap = Mapping[tuple[str, int], WatermarkInfo]


def aggregate_topic_summaries(
    topics: Iterable[TopicMetadataInfo],
    watermarks: WatermarkMap,
) -> list[TopicSummary]:
    """Aggregate per-partition facts into one summary per topic.

    Partitions without a watermark contribute nothing to ``message_count``
    and never fail the topic. Rows are sorted by name in code point order.

    Args:
        topics: Topic metadata with partition and replica lists.
        watermarks: Best-effort watermark per (topic, partition).

    Returns:
        Topic summaries sorted ascending by name.
    """
    summaries = [_summarize_topic(topic, watermarks) for topic in topics]
    summaries.sort(key=lambda summary: summary.name)
    return summaries


def _summarize_topic(topic: TopicMetadataInfo, watermarks: WatermarkMap) -> TopicSummary:
    message_count = 0
    for partition in topic.partitions:
        watermark = watermarks.get((topic.name, partition.partition_id))
        if watermark is not None:
            message_count += watermark.retained

    return TopicSummary(
        name=topic.name,
        partitions=len(topic.partitions),
        replication_factor=max(
            (len(partition.replicas) for partition in topic.partitions), default=0
        ),
        message_count=message_count,
        size_bytes=0,
    )


class TopicParser:
    """Parses cluster metadata objects into topic models."""

    def parse_topic_metadata(self, topic: Any) -> TopicMetadataInfo:
        """Parse one client ``TopicMetadata`` object.

        Args:
            topic: Object exposing ``topic`` and a ``partitions`` mapping of
                partition id to objects with ``id`` and ``replicas``.

        Returns:
            TopicMetadataInfo with partitions ordered by id.
        """
        partitions = [
            PartitionMetadataInfo(
                partition_id=partition.id,
                replicas=list(partition.replicas or []),
            )
            for partition in sorted(topic.partitions.values(), key=lambda p: p.id)
        ]
        return TopicMetadataInfo(name=topic.topic, partitions=partitions)

    def parse_cluster_topics(self, metadata: Any) -> list[TopicMetadataInfo]:
        """Parse every topic of a ``ClusterMetadata`` object."""
        return [self.parse_topic_metadata(topic) for topic in metadata.topics.values()]
