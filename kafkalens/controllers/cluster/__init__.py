"""Kafka cluster gateway: controller, client factory, fetchers and parsers."""

from kafkalens.controllers.cluster.client_factory import ClientFactory
from kafkalens.controllers.cluster.controller import (
    KafkaClusterController,
    describe_kafka_exception,
)
from kafkalens.controllers.cluster.fetchers import (
    GroupFetcher,
    MetadataFetcher,
    WatermarkFetcher,
)
from kafkalens.controllers.cluster.parsers import (
    BrokerParser,
    GroupParser,
    TopicParser,
)

__all__ = [
    "BrokerParser",
    "ClientFactory",
    "GroupFetcher",
    "GroupParser",
    "KafkaClusterController",
    "MetadataFetcher",
    "TopicParser",
    "WatermarkFetcher",
    "describe_kafka_exception",
]
