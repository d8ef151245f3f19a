"""Banner and help text."""

from __future__ import annotations

from tapehead.config import TapeheadConfig

HELP_BODY = """\
Commands (keywords are case-insensitive):

  read     <seek> [count]      Print count bytes raw (default: to end of file).
  readhex  <seek> [count]      Print count bytes as a hexdump.
  write    <seek> <text>       Write everything after the seek argument, verbatim.
  writehex <seek> <byte>...    Write bytes given as two hex digits each, e.g. 0a ff 3C.
  seek     <seek>              Move the cursor.
  help                         Show this help.
  quit                         Exit. End of input (Ctrl-D) also exits.

Seek argument:

  .        Stay at the current position.
  <        End of file.
  +N, -N   N bytes forwards or backwards from the current position.
  N        Absolute offset N.
  N<       N bytes before the end of file.

The prompt shows the bytes read (in) and written (out) by the last command
and the current position (pos). A position of * means the file cannot report
one; use `.` as the seek argument for such files."""


def banner_text(config: TapeheadConfig) -> str:
    """Startup banner shown before the first prompt."""
    return (
        f"TapeHead v{config.version}\n\n"
        "Author: Emmanuel Amoah (https://emamoah.com/)\n\n"
        'Enter "help" for more information.\n'
    )


def file_info_text(path: str, size: int, mode: str) -> str:
    """Describe the opened file, e.g. `File: "a.bin" (1 byte) [RW]`."""
    unit = "byte" if size == 1 else "bytes"
    return f'File: "{path}" ({size} {unit}) [{mode}]\n'


def help_text(config: TapeheadConfig) -> str:
    return (
        f"TapeHead v{config.version}\n\n"
        "Visit https://github.com/emamoah/tapehead for official documentation.\n\n"
        f"{HELP_BODY}\n"
    )


def usage_text(config: TapeheadConfig) -> str:
    return f"TapeHead v{config.version}\n\nUsage: {config.progname or 'tapehead'} <file>"
