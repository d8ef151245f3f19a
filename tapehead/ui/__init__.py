"""Terminal rendering: console, hexdump and banner/help text."""

from tapehead.ui.console import console
from tapehead.ui.hexdump import COLUMNS, render_hexdump, render_row
from tapehead.ui.panels import banner_text, file_info_text, help_text, usage_text

__all__ = [
    "console",
    "COLUMNS",
    "render_hexdump",
    "render_row",
    "banner_text",
    "file_info_text",
    "help_text",
    "usage_text",
]
