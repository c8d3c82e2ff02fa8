"""Widgets module for the KafkaLens console.

- data: SessionTable
- display: HistoryList
- feedback: NotificationPanel
- input: CommandLine
"""

from kafkalens.widgets.data import SessionTable
from kafkalens.widgets.display import HistoryList
from kafkalens.widgets.feedback import NotificationPanel
from kafkalens.widgets.input import CommandLine

__all__ = [
    "CommandLine",
    "HistoryList",
    "NotificationPanel",
    "SessionTable",
]
