"""Tests for ClientFactory configuration and client lifecycle."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
from confluent_kafka import KafkaException

from kafkalens.controllers.auth import IamTokenProvider
from kafkalens.controllers.cluster.client_factory import ClientFactory
from kafkalens.controllers.errors import AuthTokenError, ClusterConnectionError
from kafkalens.models.state import ConnectionSettings


@pytest.fixture
def plain_settings() -> ConnectionSettings:
    return ConnectionSettings(bootstrap_servers="b-1:9092,b-2:9092", timeout_ms=3000)


@pytest.fixture
def iam_settings() -> ConnectionSettings:
    return ConnectionSettings(
        bootstrap_servers="b-1:9098", iam_auth=True, aws_region="us-east-1"
    )


class TestConfig:
    """Tests for the librdkafka configuration."""

    def test_plain_config(self, plain_settings: ConnectionSettings) -> None:
        config = ClientFactory(plain_settings).base_config()
        assert config["bootstrap.servers"] == "b-1:9092,b-2:9092"
        assert config["socket.timeout.ms"] == 3000
        assert "security.protocol" not in config
        assert "oauth_cb" not in config

    def test_iam_config(self, iam_settings: ConnectionSettings) -> None:
        provider = IamTokenProvider("us-east-1", generator=lambda region: ("t", 1000))
        config = ClientFactory(iam_settings, provider).base_config()
        assert config["security.protocol"] == "SASL_SSL"
        assert config["sasl.mechanism"] == "OAUTHBEARER"
        assert config["oauth_cb"] == provider.oauth_cb

    def test_iam_creates_default_provider(self, iam_settings: ConnectionSettings) -> None:
        config = ClientFactory(iam_settings).base_config()
        assert config["oauth_cb"].__self__.region == "us-east-1"

    def test_provider_ignored_without_iam(self, plain_settings: ConnectionSettings) -> None:
        provider = IamTokenProvider("us-east-1", generator=lambda region: ("t", 1000))
        assert "oauth_cb" not in ClientFactory(plain_settings, provider).base_config()

    def test_consumer_config_never_commits(self, plain_settings: ConnectionSettings) -> None:
        config = ClientFactory(plain_settings).consumer_config()
        assert config["enable.auto.commit"] is False
        assert config["group.id"]


class TestClients:
    """Tests for the client context managers."""

    def test_consumer_is_closed(self, plain_settings: ConnectionSettings) -> None:
        with patch("kafkalens.controllers.cluster.client_factory.Consumer") as consumer_cls:
            with ClientFactory(plain_settings).consumer() as consumer:
                assert consumer is consumer_cls.return_value
            consumer_cls.return_value.close.assert_called_once()

    def test_consumer_is_closed_on_error(self, plain_settings: ConnectionSettings) -> None:
        with patch("kafkalens.controllers.cluster.client_factory.Consumer") as consumer_cls:
            with pytest.raises(RuntimeError):
                with ClientFactory(plain_settings).consumer():
                    raise RuntimeError("boom")
            consumer_cls.return_value.close.assert_called_once()

    def test_consumer_creation_failure(self, plain_settings: ConnectionSettings) -> None:
        with patch(
            "kafkalens.controllers.cluster.client_factory.Consumer",
            side_effect=KafkaException("bad config"),
        ):
            with pytest.raises(ClusterConnectionError, match="Consumer creation failed"):
                with ClientFactory(plain_settings).consumer():
                    pass

    def test_admin_creation_failure(self, plain_settings: ConnectionSettings) -> None:
        with patch(
            "kafkalens.controllers.cluster.client_factory.AdminClient",
            side_effect=ValueError("bad config"),
        ):
            with pytest.raises(ClusterConnectionError, match="Admin client creation failed"):
                with ClientFactory(plain_settings).admin():
                    pass

    def test_iam_polls_for_token(self, iam_settings: ConnectionSettings) -> None:
        provider = IamTokenProvider("us-east-1", generator=lambda region: ("t", 1000))
        with patch("kafkalens.controllers.cluster.client_factory.AdminClient") as admin_cls:
            with ClientFactory(iam_settings, provider).admin():
                pass
            admin_cls.return_value.poll.assert_called_once_with(0)

    def test_token_failure_propagates(self, iam_settings: ConnectionSettings) -> None:
        provider = IamTokenProvider("us-east-1", generator=lambda region: ("t", 1000))
        admin = MagicMock()
        admin.poll.side_effect = AuthTokenError("timed out")
        with patch(
            "kafkalens.controllers.cluster.client_factory.AdminClient", return_value=admin
        ):
            with pytest.raises(AuthTokenError):
                with ClientFactory(iam_settings, provider).admin():
                    pass

    def test_plain_does_not_poll(self, plain_settings: ConnectionSettings) -> None:
        with patch("kafkalens.controllers.cluster.client_factory.AdminClient") as admin_cls:
            with ClientFactory(plain_settings).admin():
                pass
            admin_cls.return_value.poll.assert_not_called()
