"""Logger setup and wiring."""

from __future__ import annotations

import logging

from rich.console import Console

from tapehead.io.filters import TagFilter
from tapehead.io.handlers import DisplayHandler
from tapehead.io.tags import DISPLAY_TAGS
from tapehead.ui.console import console as default_console

LOGGER_NAME = "tapehead"


def setup_logging(console: Console | None = None) -> logging.Logger:
    """Configure the tapehead logger to print diagnostics on console.

    Any display handler from an earlier call is replaced.
    """
    if console is None:
        console = default_console

    log = logging.getLogger(LOGGER_NAME)
    log.setLevel(logging.INFO)
    log.propagate = False

    for handler in [h for h in log.handlers if isinstance(h, DisplayHandler)]:
        log.removeHandler(handler)

    display = DisplayHandler(console)
    display.addFilter(TagFilter(DISPLAY_TAGS))
    log.addHandler(display)

    return log
