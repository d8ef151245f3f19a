"""Parse one raw input line into a Command."""

from __future__ import annotations

import re

from tapehead.core.commands import Command, Help, Nop, Quit, Read, ReadHex, Seek, Write, WriteHex
from tapehead.core.errors import (
    InvalidByteArgument,
    InvalidDigitInCountArgument,
    MissingSeekArgument,
    UnrecognizedCommand,
)
from tapehead.core.seek import SeekDescriptor, resolve_seek

# ASCII whitespace as used for word splitting: space, \t, \n, \f, \r.
WORD = re.compile(rb"[^ \t\n\x0c\r]+")
HEX_BYTE = re.compile(rb"[0-9A-Fa-f]{2}")


def split_words(line: bytes) -> list[re.Match[bytes]]:
    """Return the whitespace-delimited words of line as match objects.

    Each match keeps its span in the original line so callers can recover
    exact byte offsets.
    """
    return list(WORD.finditer(line))


def _seek_arg(words: list[re.Match[bytes]]) -> SeekDescriptor:
    if len(words) < 2:
        raise MissingSeekArgument()
    return resolve_seek(words[1].group())


def _count_arg(words: list[re.Match[bytes]]) -> int | None:
    if len(words) < 3:
        return None
    token = words[2].group()
    if not token.isdigit():
        raise InvalidDigitInCountArgument()
    return int(token)


def _payload_offset(line: bytes, words: list[re.Match[bytes]]) -> int:
    if len(words) < 3:
        return len(line)
    return words[2].start()


def _hex_bytes(words: list[re.Match[bytes]]) -> bytes:
    tokens = [word.group() for word in words[2:]]
    if not all(HEX_BYTE.fullmatch(token) for token in tokens):
        raise InvalidByteArgument()
    return bytes.fromhex(b"".join(tokens).decode("ascii"))


def parse_input(line: bytes) -> Command:
    """Parse a raw command line.

    Args:
        line: The input line without its trailing newline.

    Returns:
        The parsed Command. An empty line yields Nop.

    Raises:
        ParseError: A subclass naming what was wrong with the line.
    """
    if not line:
        return Nop()

    words = split_words(line)
    if not words:
        raise UnrecognizedCommand()

    op = words[0].group().lower()

    match op:
        case b"read":
            seek = _seek_arg(words)
            return Read(seek=seek, count=_count_arg(words))
        case b"readhex":
            seek = _seek_arg(words)
            return ReadHex(seek=seek, count=_count_arg(words))
        case b"write":
            seek = _seek_arg(words)
            return Write(seek=seek, payload_offset=_payload_offset(line, words))
        case b"writehex":
            seek = _seek_arg(words)
            return WriteHex(seek=seek, data=_hex_bytes(words))
        case b"seek":
            return Seek(seek=_seek_arg(words))
        case b"help":
            return Help()
        case b"quit":
            return Quit()
        case _:
            raise UnrecognizedCommand()
