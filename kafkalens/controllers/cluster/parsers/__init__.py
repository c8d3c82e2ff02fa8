"""Parsers turning client metadata objects into models."""

from kafkalens.controllers.cluster.parsers.broker_parser import BrokerParser
from kafkalens.controllers.cluster.parsers.group_parser import GroupParser
from kafkalens.controllers.cluster.parsers.topic_parser import (
    TopicParser,
    WatermarkMap,
    aggregate_topic_summaries,
)

__all__ = [
    "BrokerParser",
    "GroupParser",
    "TopicParser",
    "WatermarkMap",
    "aggregate_topic_summaries",
]
