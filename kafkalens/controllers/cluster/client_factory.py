"""Builds short-lived Kafka clients from the shared connection settings."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from confluent_kafka import Consumer, KafkaException
from confluent_kafka.admin import AdminClient

from kafkalens.constants.values import (
    CLIENT_ID,
    IAM_SASL_MECHANISM,
    IAM_SECURITY_PROTOCOL,
    INSPECT_GROUP_ID,
)
from kafkalens.controllers.auth import IamTokenProvider
from kafkalens.controllers.errors import ClusterConnectionError, GatewayError
from kafkalens.models.state.app_settings import ConnectionSettings

logger = logging.getLogger(__name__)


class ClientFactory:
    """Creates one consumer or admin client per gateway call.

    Clients are never shared between calls; each is closed (consumers) or
    dropped (admin clients) when the call returns.
    """

    def __init__(
        self,
        settings: ConnectionSettings,
        token_provider: IamTokenProvider | None = None,
    ) -> None:
        self.settings = settings
        if settings.iam_auth and token_provider is None:
            token_provider = IamTokenProvider(settings.aws_region)
        self._token_provider = token_provider if settings.iam_auth else None

    def base_config(self) -> dict[str, Any]:
        """Return the librdkafka configuration common to all clients."""
        config: dict[str, Any] = {
            "bootstrap.servers": self.settings.bootstrap,
            "client.id": CLIENT_ID,
            "socket.timeout.ms": self.settings.timeout_ms,
        }
        if self._token_provider is not None:
            logger.info("Using IAM authentication (region %s)", self.settings.aws_region)
            config["security.protocol"] = IAM_SECURITY_PROTOCOL
            config["sasl.mechanism"] = IAM_SASL_MECHANISM
            config["oauth_cb"] = self._token_provider.oauth_cb
        return config

    def consumer_config(self) -> dict[str, Any]:
        return {
            **self.base_config(),
            "group.id": INSPECT_GROUP_ID,
            "enable.auto.commit": False,
        }

    def _serve_token_callback(self, client: Any) -> None:
        """Give the client a chance to run ``oauth_cb`` before the first request."""
        if self._token_provider is None:
            return
        try:
            client.poll(0)
        except GatewayError:
            raise
        except KafkaException as exc:
            raise ClusterConnectionError(f"Authentication failed: {exc}") from exc

    @contextmanager
    def consumer(self) -> Iterator[Consumer]:
        """Yield a metadata consumer and close it afterwards."""
        try:
            client = Consumer(self.consumer_config())
        except (KafkaException, ValueError, TypeError) as exc:
            raise ClusterConnectionError(f"Consumer creation failed: {exc}") from exc
        try:
            self._serve_token_callback(client)
            yield client
        finally:
            client.close()

    @contextmanager
    def admin(self) -> Iterator[AdminClient]:
        """Yield an admin client for one delete or group request."""
        try:
            client = AdminClient(self.base_config())
        except (KafkaException, ValueError, TypeError) as exc:
            raise ClusterConnectionError(f"Admin client creation failed: {exc}") from exc
        self._serve_token_callback(client)
        yield client
