"""Selectable table view model shared by every command.

The model tracks the column definition, the rendered rows, a cursor and the
set of selected row indices. Replacing the data clears the selection in the
same step, so indices never outlive the rows they pointed at.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from rich.cells import cell_len

from kafkalens.constants.enums import ColumnSizing
from kafkalens.constants.limits import COLUMN_PADDING


@dataclass(frozen=True)
class ColumnSpec:
    """Header label and alignment of one column."""

    label: str
    numeric: bool = False


@dataclass(frozen=True)
class TableDefinition:
    """Ordered columns and whether rows can be multi-selected."""

    columns: tuple[ColumnSpec, ...] = ()
    selectable: bool = False

    @property
    def labels(self) -> list[str]:
        return [column.label for column in self.columns]


@dataclass(frozen=True)
class TableRow:
    """Display cells of one row. Muted rows render de-emphasised."""

    cells: tuple[str, ...]
    muted: bool = False


@dataclass(frozen=True)
class ColumnHint:
    """Width request of a column: take the remaining space or a minimum."""

    sizing: ColumnSizing
    width: int = 0

    @classmethod
    def fill(cls) -> ColumnHint:
        return cls(ColumnSizing.FILL)

    @classmethod
    def min(cls, width: int) -> ColumnHint:
        return cls(ColumnSizing.MIN, width)


@dataclass(frozen=True)
class TableData:
    """Rows and one width hint per column."""

    rows: tuple[TableRow, ...] = ()
    hints: tuple[ColumnHint, ...] = ()

    @property
    def row_count(self) -> int:
        return len(self.rows)


def longest_cell(rows: Iterable[TableRow], column: int) -> int:
    """Display width of the widest cell in ``column``."""
    return max((cell_len(row.cells[column]) for row in rows), default=0)


def padded_width(rows: Iterable[TableRow], column: int) -> int:
    return longest_cell(rows, column) + COLUMN_PADDING


@dataclass
class TableViewModel:
    """Cursor and selection state over the active command's rows."""

    definition: TableDefinition = field(default_factory=TableDefinition)
    data: TableData = field(default_factory=TableData)
    cursor: int | None = None
    _selected: set[int] = field(default_factory=set)

    @property
    def row_count(self) -> int:
        return self.data.row_count

    @property
    def rows(self) -> tuple[TableRow, ...]:
        return self.data.rows

    def replace(self, definition: TableDefinition, data: TableData) -> None:
        """Swap in new rows. Selection is cleared, cursor goes to the top."""
        self.definition = definition
        self.data = data
        self._selected = set()
        self.cursor = 0 if data.rows else None

    def select_next(self) -> None:
        if not self.data.rows:
            self.cursor = None
            return
        if self.cursor is None:
            self.cursor = 0
            return
        self.cursor = min(self.cursor + 1, self.row_count - 1)

    def select_previous(self) -> None:
        if not self.data.rows:
            self.cursor = None
            return
        if self.cursor is None:
            self.cursor = 0
            return
        self.cursor = max(self.cursor - 1, 0)

    def toggle_selected(self) -> None:
        """Flip membership of the cursor row. No-op without a cursor."""
        if not self.definition.selectable or self.cursor is None:
            return
        self._check_index(self.cursor)
        if self.cursor in self._selected:
            self._selected.remove(self.cursor)
        else:
            self._selected.add(self.cursor)

    def is_selected(self, index: int) -> bool:
        return index in self._selected

    def selected_indices(self) -> list[int]:
        return sorted(self._selected)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.row_count:
            raise IndexError(f"row index {index} out of range for {self.row_count} rows")
