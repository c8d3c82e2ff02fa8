"""Cluster entity models."""

from kafkalens.models.cluster.broker_info import BrokerSummary
from kafkalens.models.cluster.delete_result import (
    DeleteOutcome,
    failed_outcomes,
    format_failures,
)
from kafkalens.models.cluster.group_info import ConsumerGroupSummary
from kafkalens.models.cluster.topic_info import (
    PartitionMetadataInfo,
    TopicMetadataInfo,
    TopicSummary,
    WatermarkInfo,
)

__all__ = [
    "BrokerSummary",
    "ConsumerGroupSummary",
    "DeleteOutcome",
    "PartitionMetadataInfo",
    "TopicMetadataInfo",
    "TopicSummary",
    "WatermarkInfo",
    "failed_outcomes",
    "format_failures",
]
