"""Logging formatters for the diagnostic stream."""

import logging

from rich.markup import escape


class RichFormatter(logging.Formatter):
    """Formats log messages with Rich markup based on tag.

    Message content is escaped, so brackets typed by the user or shown in
    the prompt are printed literally.
    """

    def format(self, record: logging.LogRecord) -> str:
        content = escape(record.getMessage())

        match record.tag:
            case "prompt":
                return f"[bold cyan]{content}[/]"
            case "error":
                return f"[bold red]error:[/] {content}"
            case "fatal":
                return f"[bold red]{content}[/]"
            case "banner":
                return f"[bold]{content}[/]"
            case _:
                return content
