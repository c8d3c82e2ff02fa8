"""``kafkalens consumers``: list and delete consumer groups."""

from __future__ import annotations

import click
from rich.table import Table

from kafkalens.cli.common import CliContext, cli_errors, pass_cli_context
from kafkalens.models.cluster import ConsumerGroupSummary

prefix_option = click.option(
    "--consumer-group",
    default=None,
    help="Only groups whose name starts with this prefix. Defaults to every group.",
)


def groups_table(groups: list[ConsumerGroupSummary]) -> Table:
    table = Table(header_style="black on white", box=None, pad_edge=False)
    table.add_column("Name", no_wrap=True)
    table.add_column("State")
    for group in groups:
        table.add_row(group.name, group.state)
    return table


@click.group()
def consumers() -> None:
    """List and delete consumer groups."""


@consumers.command("list")
@prefix_option
@pass_cli_context
def list_groups(ctx: CliContext, consumer_group: str | None) -> None:
    """Print consumer group names and states."""
    with cli_errors():
        groups = ctx.controller().list_consumer_groups(consumer_group)
    ctx.console.print(groups_table(groups))


@consumers.command("delete")
@prefix_option
@pass_cli_context
def delete_groups(ctx: CliContext, consumer_group: str | None) -> None:
    """Delete consumer groups by name prefix. There is no dry run."""
    with cli_errors():
        outcomes = ctx.controller().delete_consumer_groups(consumer_group)
    if not outcomes:
        ctx.console.print("No consumer groups matched", markup=False, highlight=False)
    for outcome in outcomes:
        if outcome.ok:
            message = f"Deleted consumer group {outcome.name}"
        else:
            message = f"Unable to delete consumer group {outcome.name}: {outcome.error}"
        ctx.console.print(message, markup=False, highlight=False)
