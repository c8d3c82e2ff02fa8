"""Screens for the KafkaLens console."""

from kafkalens.screens.console import ConsoleScreen

__all__ = [
    "ConsoleScreen",
]
