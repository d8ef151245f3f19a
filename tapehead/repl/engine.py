"""The command loop: prompt, read a line, parse it, apply it to the store."""

from __future__ import annotations

import logging
import sys
from enum import Enum, auto
from typing import BinaryIO

from tapehead.config import TapeheadConfig
from tapehead.core.commands import Command, Help, Nop, Quit, Read, ReadHex, Seek, Write, WriteHex
from tapehead.core.errors import ParseError, StoreError
from tapehead.core.parser import parse_input
from tapehead.core.seek import SeekDescriptor
from tapehead.core.state import SessionState
from tapehead.core.store import apply_seek, current_position, read_into, write_all
from tapehead.io.setup import LOGGER_NAME
from tapehead.ui.hexdump import render_hexdump
from tapehead.ui.panels import help_text

ENTER_HELP_FOR_USAGE = 'Enter "help" for usage.'


class EngineState(Enum):
    """States of the command loop."""

    PROMPTING = auto()
    AWAITING_LINE = auto()
    DISPATCHING = auto()
    STOPPED = auto()


def format_prompt(read_count: int, write_count: int, pos: int | None) -> str:
    """Build the status prompt, e.g. `[in:4, out:2, pos:10]> `.

    Args:
        read_count: Bytes read by the last command; omitted when 0.
        write_count: Bytes written by the last command; omitted when 0.
        pos: Current store position, or None if unknown.
    """
    parts = []
    if read_count > 0:
        parts.append(f"in:{read_count}, ")
    if write_count > 0:
        parts.append(f"out:{write_count}, ")
    parts.append(f"pos:{'*' if pos is None else pos}")
    return f"[{''.join(parts)}]> "


class Engine:
    """REPL over one byte store.

    The engine exclusively owns the store for its lifetime. Diagnostics go
    to the `tapehead` logger; dumped bytes go to `stdout`.

    Attributes:
        store: Open binary file object to inspect and patch.
        config: Program identity used by the help text.
        session: Scratch buffer and last-iteration counters.
        state: Current loop state.
    """

    def __init__(
        self,
        store: BinaryIO,
        config: TapeheadConfig | None = None,
        stdin: BinaryIO | None = None,
        stdout: BinaryIO | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        self.store = store
        self.config = config or TapeheadConfig()
        self.stdin = stdin if stdin is not None else sys.stdin.buffer
        self.stdout = stdout if stdout is not None else sys.stdout.buffer
        self.log = log or logging.getLogger(LOGGER_NAME)
        self.session = SessionState.with_capacity(self.config.buffer_capacity)
        self.state = EngineState.PROMPTING
        self._handlers = {
            EngineState.PROMPTING: self._handle_prompting,
            EngineState.AWAITING_LINE: self._handle_awaiting_line,
            EngineState.DISPATCHING: self._handle_dispatching,
        }

    def run(self) -> None:
        """Run until quit or end of input, then flush."""
        while self.state is not EngineState.STOPPED:
            self.state = self._handlers[self.state]()
        self._flush()

    def _error(self, message: object) -> None:
        self.log.error(str(message), extra={"tag": "error"})

    def _newline(self) -> None:
        self.log.info("", extra={"tag": "status"})

    def _handle_prompting(self) -> EngineState:
        pos = current_position(self.store)
        prompt = format_prompt(self.session.read_count, self.session.write_count, pos)
        self.log.info(prompt, extra={"tag": "prompt"})
        self.session.reset_counters()
        return EngineState.AWAITING_LINE

    def _handle_awaiting_line(self) -> EngineState:
        try:
            line = self.stdin.readline()
        except OSError as e:
            self._error(e)
            return EngineState.PROMPTING

        if not line:
            self._newline()
            return EngineState.STOPPED

        if line.endswith(b"\n"):
            line = line[:-1]
        else:
            # Input ended without a newline; keep the next prompt on its own line.
            self._newline()

        self.session.buffer.load(line)
        return EngineState.DISPATCHING

    def _handle_dispatching(self) -> EngineState:
        try:
            command = parse_input(self.session.buffer.getvalue())
        except ParseError as e:
            self._error(f"{e} {ENTER_HELP_FOR_USAGE}")
            return EngineState.PROMPTING

        try:
            return self.execute(command)
        except StoreError as e:
            self._error(e)
            return EngineState.PROMPTING

    def execute(self, command: Command) -> EngineState:
        """Apply one parsed command and return the next loop state.

        Raises:
            StoreError: Seeking, reading or writing the store failed.
        """
        match command:
            case Nop():
                pass
            case Quit():
                return EngineState.STOPPED
            case Help():
                self.log.info(help_text(self.config), extra={"tag": "help"})
            case Seek(seek=seek):
                apply_seek(self.store, seek)
            case Read(seek=seek, count=count):
                self._read(seek, count)
            case ReadHex(seek=seek, count=count):
                self._read_hex(seek, count)
            case Write(seek=seek, payload_offset=payload_offset):
                self._write(seek, self.session.buffer.getvalue(payload_offset))
            case WriteHex(seek=seek, data=data):
                apply_seek(self.store, seek)
                self.session.write_count = write_all(self.store, data)
        return EngineState.PROMPTING

    def _read(self, seek: SeekDescriptor, count: int | None) -> None:
        apply_seek(self.store, seek)
        self.session.read_count = read_into(self.store, self.session.buffer, count)

        self._output(self.session.buffer.getvalue())
        if self.session.read_count > 0:
            # Prompt on a new line.
            self._newline()

    def _read_hex(self, seek: SeekDescriptor, count: int | None) -> None:
        start = apply_seek(self.store, seek)
        self.session.read_count = read_into(self.store, self.session.buffer, count)

        dump = render_hexdump(self.session.buffer.getvalue(), start or 0)
        self._output(dump.encode("ascii"))

    def _write(self, seek: SeekDescriptor, payload: bytes) -> None:
        if not payload:
            return
        apply_seek(self.store, seek)
        self.session.write_count = write_all(self.store, payload)

    def _output(self, data: bytes) -> None:
        try:
            self.stdout.write(data)
            self.stdout.flush()
        except OSError as e:
            self._error(e)

    def _flush(self) -> None:
        for stream in (self.store, self.stdout):
            try:
                stream.flush()
            except (OSError, ValueError) as e:
                self._error(e)
