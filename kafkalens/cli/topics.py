"""``kafkalens topics``: list and delete topics."""

from __future__ import annotations

import logging

import click
from rich.table import Table

from kafkalens.cli.common import CliContext, cli_errors, pass_cli_context
from kafkalens.models.cluster import TopicSummary

logger = logging.getLogger(__name__)


def topics_table(summaries: list[TopicSummary]) -> Table:
    table = Table(header_style="black on white", box=None, pad_edge=False)
    table.add_column("Name", no_wrap=True)
    table.add_column("Partitions", justify="right")
    table.add_column("Replication Factor", justify="right")
    table.add_column("Message Count", justify="right")
    table.add_column("Size", justify="right")
    for summary in summaries:
        table.add_row(
            summary.name,
            str(summary.partitions),
            str(summary.replication_factor),
            str(summary.message_count),
            str(summary.size_bytes),
        )
    return table


@click.group()
def topics() -> None:
    """List and delete topics."""


@topics.command("list")
@pass_cli_context
def list_topics(ctx: CliContext) -> None:
    """Print per-topic statistics."""
    with cli_errors():
        summaries = ctx.controller().list_topics()
    ctx.console.print(topics_table(summaries))


@topics.command("delete")
@click.option(
    "--topic-name",
    default=None,
    help="Only topics whose name starts with this prefix. Defaults to every topic.",
)
@click.option("--run", is_flag=True, help="Actually delete. Without it only a dry run is printed.")
@pass_cli_context
def delete_topics(ctx: CliContext, topic_name: str | None, run: bool) -> None:
    """Delete topics by name prefix (dry run unless --run)."""
    controller = ctx.controller()
    with cli_errors():
        candidates = controller.topic_deletion_candidates(topic_name)

    if not run:
        ctx.console.print(f"Dry run: {candidates}", markup=False, highlight=False)
        return

    ctx.console.print(f"Deleting topics: {candidates}", markup=False, highlight=False)
    with cli_errors():
        outcomes = controller.delete_topics(candidates)
    for outcome in outcomes:
        if not outcome.ok:
            ctx.console.print(
                f"Unable to delete topic {outcome.name}: {outcome.error}",
                markup=False,
                highlight=False,
            )
