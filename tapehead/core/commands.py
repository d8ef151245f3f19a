"""Command variants produced by the parser and consumed by the engine."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from tapehead.core.seek import SeekDescriptor


class Command(BaseModel):
    """Base for every parsed command line."""

    model_config = ConfigDict(frozen=True)


class Read(Command):
    """Dump bytes raw. A count of None reads to the end of the store."""

    seek: SeekDescriptor
    count: int | None = Field(default=None, ge=0)


class ReadHex(Command):
    """Dump bytes as a hexdump. Same arguments as Read."""

    seek: SeekDescriptor
    count: int | None = Field(default=None, ge=0)


class Write(Command):
    """Write the tail of the input line starting at payload_offset, verbatim."""

    seek: SeekDescriptor
    payload_offset: int = Field(ge=0)


class WriteHex(Command):
    """Write bytes decoded from two-digit hex tokens."""

    seek: SeekDescriptor
    data: bytes = b""


class Seek(Command):
    """Move the cursor only."""

    seek: SeekDescriptor


class Help(Command):
    pass


class Quit(Command):
    pass


class Nop(Command):
    """Empty input line."""
