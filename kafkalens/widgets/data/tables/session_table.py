"""SessionTable widget - renders a TableViewModel through Textual's DataTable."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.text import Text
from textual.containers import Container
from textual.widgets import DataTable as TextualDataTable

from kafkalens.constants.enums import ColumnSizing
from kafkalens.constants.values import SELECTED_MARKER, UNSELECTED_MARKER
from kafkalens.session.table import ColumnHint, TableViewModel

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from textual.app import ComposeResult

SELECTION_COLUMN_KEY = "__selected__"


class SessionTable(Container):
    """Read-only view of the active command's table.

    The inner DataTable never takes focus: cursor movement and selection are
    owned by the session state machine and pushed here with ``show``.

    CSS Classes: widget-session-table
    """

    DEFAULT_CSS = """
    SessionTable {
        height: 1fr;
        width: 1fr;
        min-height: 3;
        background: $surface;
    }
    SessionTable > DataTable {
        height: 1fr;
        width: 1fr;
        border: none;
        background: transparent;
    }
    """

    def __init__(self, *, id: str | None = None, classes: str = "") -> None:
        super().__init__(id=id, classes=f"widget-session-table {classes}".strip())
        self._inner_widget: TextualDataTable | None = None

    def compose(self) -> ComposeResult:
        table = TextualDataTable(cursor_type="row", show_cursor=True)
        table.can_focus = False
        table.styles.scrollbar_size_vertical = 1
        self._inner_widget = table
        yield table

    @property
    def data_table(self) -> TextualDataTable | None:
        return self._inner_widget

    @property
    def row_count(self) -> int:
        if self._inner_widget is None:
            return 0
        return self._inner_widget.row_count

    def show(self, model: TableViewModel) -> None:
        """Rebuild columns and rows from ``model``."""
        table = self._inner_widget
        if table is None:
            return

        logger.debug("Rendering %d rows", model.row_count)
        with self.app.batch_update():
            table.clear(columns=True)
            if model.definition.selectable:
                table.add_column("", width=1, key=SELECTION_COLUMN_KEY)
            for index, column in enumerate(model.definition.columns):
                label = Text(column.label, justify="right" if column.numeric else "left")
                table.add_column(
                    label,
                    width=_column_width(model.data.hints, index, column.label),
                    key=str(index),
                )

            for index, row in enumerate(model.rows):
                style = "dim" if row.muted else ""
                cells: list[Text] = [
                    Text(
                        cell,
                        style=style,
                        justify="right" if column.numeric else "left",
                    )
                    for cell, column in zip(row.cells, model.definition.columns)
                ]
                if model.definition.selectable:
                    marker = SELECTED_MARKER if model.is_selected(index) else UNSELECTED_MARKER
                    cells.insert(0, Text(marker, style="bold"))
                table.add_row(*cells, key=str(index))

        table.show_cursor = model.cursor is not None
        if model.cursor is not None and model.cursor < table.row_count:
            table.move_cursor(row=model.cursor)


def _column_width(hints: tuple[ColumnHint, ...], index: int, label: str) -> int | None:
    """Fixed width for ``min`` hints; ``fill`` columns size to content."""
    if index >= len(hints) or hints[index].sizing is ColumnSizing.FILL:
        return None
    return max(hints[index].width, len(label))
