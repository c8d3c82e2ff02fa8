"""Broker parser for cluster metadata."""

from __future__ import annotations

from typing import Any

from kafkalens.models.cluster.broker_info import BrokerSummary


class BrokerParser:
    """Parses broker metadata into structured formats."""

    def parse_brokers(self, metadata: Any) -> list[BrokerSummary]:
        """Parse the brokers of a ``ClusterMetadata`` object, sorted by id."""
        brokers = [
            BrokerSummary(id=broker.id, host=broker.host, port=broker.port)
            for broker in metadata.brokers.values()
        ]
        brokers.sort(key=lambda broker: broker.id)
        return brokers
