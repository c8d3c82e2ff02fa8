"""Display widgets."""

from kafkalens.widgets.display.history_list import HistoryList

__all__ = [
    "HistoryList",
]
