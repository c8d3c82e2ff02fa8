"""Input widgets."""

from kafkalens.widgets.input.command_line import NORMAL_HINT, CommandLine

__all__ = [
    "NORMAL_HINT",
    "CommandLine",
]
