"""Command line interface."""

from kafkalens.cli.main import main

__all__ = [
    "main",
]
