"""Table widgets."""

from kafkalens.widgets.data.tables.session_table import SessionTable

__all__ = [
    "SessionTable",
]
