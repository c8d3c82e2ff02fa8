"""``list-brokers``: read-only broker table."""

from __future__ import annotations

from kafkalens.controllers.base import BaseController
from kafkalens.models.cluster import BrokerSummary
from kafkalens.session.commands.base import CommandHandler
from kafkalens.session.table import (
    ColumnHint,
    ColumnSpec,
    TableData,
    TableDefinition,
    TableRow,
    padded_width,
)

BROKERS_TABLE = TableDefinition(
    columns=(
        ColumnSpec("Id", numeric=True),
        ColumnSpec("Host"),
        ColumnSpec("Port", numeric=True),
    ),
)


def broker_rows(brokers: list[BrokerSummary]) -> TableData:
    rows = tuple(
        TableRow(cells=(str(broker.id), broker.host, str(broker.port)))
        for broker in brokers
    )
    hints = (
        ColumnHint.min(padded_width(rows, 0)),
        ColumnHint.fill(),
        ColumnHint.min(padded_width(rows, 2)),
    )
    return TableData(rows=rows, hints=hints)


class ListBrokersCommand(CommandHandler):
    title = "Brokers"

    def __init__(self) -> None:
        self.brokers: list[BrokerSummary] = []

    @property
    def definition(self) -> TableDefinition:
        return BROKERS_TABLE

    def activate(self, gateway: BaseController) -> TableData:
        self.brokers = sorted(gateway.list_brokers(), key=lambda broker: broker.id)
        return broker_rows(self.brokers)
