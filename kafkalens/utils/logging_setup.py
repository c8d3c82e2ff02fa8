"""Root logger configuration for the batch commands and the console."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from textual.logging import TextualHandler

from kafkalens.constants.defaults import LOG_LEVEL_DEFAULT


def configure_logging(level: str = LOG_LEVEL_DEFAULT, *, console: bool = False) -> None:
    """Install one handler on the root logger.

    Batch commands log to stderr so stdout stays clean for command output.
    The console sends records to Textual's devtools log instead of the
    terminal the app is drawing on.
    """
    handler: logging.Handler
    if console:
        handler = TextualHandler()
    else:
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            markup=False,
        )
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
