"""Diagnostic output routed through logging with tag-based handlers."""

from tapehead.io.filters import TagFilter
from tapehead.io.formatters import RichFormatter
from tapehead.io.handlers import DisplayHandler
from tapehead.io.setup import LOGGER_NAME, setup_logging
from tapehead.io.tags import DISPLAY_TAGS, INLINE_TAGS, TAGS

__all__ = [
    "TAGS",
    "DISPLAY_TAGS",
    "INLINE_TAGS",
    "TagFilter",
    "RichFormatter",
    "DisplayHandler",
    "LOGGER_NAME",
    "setup_logging",
]
