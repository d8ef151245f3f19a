"""Core components: seek resolution, command parsing, session state and store access."""

from tapehead.core.commands import Command, Help, Nop, Quit, Read, ReadHex, Seek, Write, WriteHex
from tapehead.core.errors import (
    InvalidByteArgument,
    InvalidDigitInCountArgument,
    InvalidDigitInSeekArgument,
    InvalidSeekArgument,
    MissingSeekArgument,
    NotSeekableError,
    ParseError,
    StoreError,
    TapeheadError,
    UnrecognizedCommand,
)
from tapehead.core.parser import parse_input
from tapehead.core.seek import STAY, Absolute, FromEnd, Relative, SeekDescriptor, resolve_seek
from tapehead.core.state import ScratchBuffer, SessionState

__all__ = [
    "Absolute",
    "Relative",
    "FromEnd",
    "SeekDescriptor",
    "STAY",
    "resolve_seek",
    "Command",
    "Read",
    "ReadHex",
    "Write",
    "WriteHex",
    "Seek",
    "Help",
    "Quit",
    "Nop",
    "parse_input",
    "ScratchBuffer",
    "SessionState",
    "TapeheadError",
    "ParseError",
    "MissingSeekArgument",
    "InvalidSeekArgument",
    "InvalidDigitInSeekArgument",
    "InvalidDigitInCountArgument",
    "InvalidByteArgument",
    "UnrecognizedCommand",
    "StoreError",
    "NotSeekableError",
]
