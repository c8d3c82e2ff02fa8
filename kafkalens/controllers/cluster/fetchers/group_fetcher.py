"""Group fetcher - consumer group listings."""

from __future__ import annotations

import logging
from typing import Any

from confluent_kafka import KafkaException

from kafkalens.controllers.errors import FetchError

logger = logging.getLogger(__name__)


class GroupFetcher:
    """Fetches consumer group listings through the admin API."""

    def fetch_group_listings(self, admin: Any, timeout: float) -> list[Any]:
        """Return ``ConsumerGroupListing`` objects for the whole cluster.

        Raises:
            FetchError: The listing request failed.
        """
        try:
            result = admin.list_consumer_groups(request_timeout=timeout).result()
        except KafkaException as exc:
            raise FetchError(f"Could not fetch group list: {exc}") from exc
        for error in getattr(result, "errors", None) or []:
            logger.warning("Partial consumer group listing error: %s", error)
        return list(result.valid or [])
