"""Top-level ``kafkalens`` command group."""

from __future__ import annotations

from pathlib import Path

import click

from kafkalens import __version__
from kafkalens.cli.cluster import cluster
from kafkalens.cli.common import CliContext
from kafkalens.cli.console import console
from kafkalens.cli.consumers import consumers
from kafkalens.cli.topics import topics
from kafkalens.constants.defaults import (
    AWS_REGION_DEFAULT,
    LOG_LEVEL_DEFAULT,
    TIMEOUT_MS_DEFAULT,
)
from kafkalens.constants.values import CLI_NAME
from kafkalens.utils.logging_setup import configure_logging

LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


@click.group()
@click.option(
    "--bootstrap-servers",
    "-b",
    envvar="KAFKALENS_BOOTSTRAP_SERVERS",
    help="Comma separated list of brokers. Required unless set in --config.",
)
@click.option(
    "--iam-auth/--no-iam-auth",
    default=None,
    help="Authenticate with AWS MSK IAM tokens.",
)
@click.option(
    "--timeout",
    "timeout_ms",
    type=click.IntRange(min=1),
    default=None,
    help=f"Request timeout in milliseconds. [default: {TIMEOUT_MS_DEFAULT}]",
)
@click.option(
    "--aws-region",
    default=None,
    help=f"Region used to sign IAM tokens. [default: {AWS_REGION_DEFAULT}]",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="YAML file providing any of the connection options.",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=LOG_LEVEL_DEFAULT,
    show_default=True,
)
@click.version_option(__version__, prog_name=CLI_NAME)
@click.pass_context
def main(
    ctx: click.Context,
    bootstrap_servers: str | None,
    iam_auth: bool | None,
    timeout_ms: int | None,
    aws_region: str | None,
    config_path: Path | None,
    log_level: str,
) -> None:
    """Inspect and clean up a Kafka cluster."""
    configure_logging(log_level)
    ctx.obj = CliContext(
        bootstrap_servers=bootstrap_servers,
        iam_auth=iam_auth,
        timeout_ms=timeout_ms,
        aws_region=aws_region,
        config_path=config_path,
        log_level=log_level,
    )


main.add_command(cluster)
main.add_command(topics)
main.add_command(consumers)
main.add_command(console)
