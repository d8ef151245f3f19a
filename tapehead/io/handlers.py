"""Logging handlers for message routing."""

import logging

from rich.console import Console

from tapehead.io.formatters import RichFormatter
from tapehead.io.tags import INLINE_TAGS


class DisplayHandler(logging.Handler):
    """Routes messages to the diagnostic console."""

    def __init__(self, console: Console) -> None:
        super().__init__()
        self.console = console
        self.setFormatter(RichFormatter())

    def emit(self, record: logging.LogRecord) -> None:
        end = "" if record.tag in INLINE_TAGS else "\n"
        self.console.print(self.format(record), end=end, soft_wrap=True, highlight=False, emoji=False)
