"""Utility helpers."""

from kafkalens.utils.logging_setup import configure_logging

__all__ = [
    "configure_logging",
]
