"""``kafkalens console``: launch the interactive console."""

from __future__ import annotations

import click

from kafkalens.cli.common import CliContext, pass_cli_context
from kafkalens.utils.logging_setup import configure_logging


@click.command()
@pass_cli_context
def console(ctx: CliContext) -> None:
    """Open the interactive console."""
    from kafkalens.app import KafkaLensApp

    controller = ctx.controller()
    configure_logging(ctx.log_level, console=True)
    KafkaLensApp(controller).run()
