"""Data display widgets."""

from kafkalens.widgets.data.tables import SessionTable

__all__ = [
    "SessionTable",
]
