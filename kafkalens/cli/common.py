"""Shared state of the batch commands."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path

import click
from rich.console import Console

from kafkalens.constants.defaults import LOG_LEVEL_DEFAULT
from kafkalens.controllers import BaseController, GatewayError, KafkaClusterController
from kafkalens.models.state import ConfigError, ConfigManager, ConnectionSettings

logger = logging.getLogger(__name__)


@dataclass
class CliContext:
    """Options of the top-level group, resolved lazily into a gateway."""

    bootstrap_servers: str | None = None
    iam_auth: bool | None = None
    timeout_ms: int | None = None
    aws_region: str | None = None
    config_path: Path | None = None
    log_level: str = LOG_LEVEL_DEFAULT
    console: Console = field(default_factory=Console)
    _controller: BaseController | None = None

    def settings(self) -> ConnectionSettings:
        with cli_errors():
            return ConfigManager.build_settings(
                self.config_path,
                bootstrap_servers=self.bootstrap_servers,
                iam_auth=self.iam_auth,
                timeout_ms=self.timeout_ms,
                aws_region=self.aws_region,
            )

    def controller(self) -> BaseController:
        if self._controller is None:
            settings = self.settings()
            logger.debug("Connecting to %s", settings.bootstrap)
            with cli_errors():
                self._controller = KafkaClusterController(settings)
        return self._controller


@contextmanager
def cli_errors() -> Iterator[None]:
    """Turn gateway and config failures into a clean command error."""
    try:
        yield
    except (GatewayError, ConfigError) as exc:
        raise click.ClickException(str(exc)) from exc


pass_cli_context = click.make_pass_decorator(CliContext)
