"""``kafkalens cluster``: cluster-level inspection."""

from __future__ import annotations

import click

from kafkalens.cli.common import CliContext, cli_errors, pass_cli_context


@click.group()
def cluster() -> None:
    """Inspect the cluster."""


@cluster.command()
@pass_cli_context
def brokers(ctx: CliContext) -> None:
    """List the brokers of the cluster."""
    with cli_errors():
        found = ctx.controller().list_brokers()
    for broker in found:
        ctx.console.print(f"[{broker.id}] {broker.address}", markup=False, highlight=False)
