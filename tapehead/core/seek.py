"""Seek arguments: the `<seek>` token grammar and its resolved descriptors.

Grammar, checked in order:

    .          stay at the current position
    <          end of store
    [+-]N      N bytes relative to the current position
    N<         N bytes before the end of store
    N          absolute offset N
"""

from __future__ import annotations

import os
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from tapehead.core.errors import InvalidDigitInSeekArgument, InvalidSeekArgument, MissingSeekArgument

U64_MAX = 2**64 - 1
I64_MIN = -(2**63)
I64_MAX = 2**63 - 1


class SeekDescriptor(BaseModel):
    """Base for resolved seek arguments."""

    model_config = ConfigDict(frozen=True)

    whence: ClassVar[int]

    def as_seek_args(self) -> tuple[int, int]:
        """Return the (offset, whence) pair accepted by file.seek()."""
        raise NotImplementedError


class Absolute(SeekDescriptor):
    """Offset from the start of the store."""

    whence: ClassVar[int] = os.SEEK_SET
    offset: int = Field(ge=0, le=U64_MAX)

    def as_seek_args(self) -> tuple[int, int]:
        return self.offset, self.whence


class Relative(SeekDescriptor):
    """Offset from the current cursor. A zero delta means stay."""

    whence: ClassVar[int] = os.SEEK_CUR
    delta: int = Field(ge=I64_MIN, le=I64_MAX)

    def as_seek_args(self) -> tuple[int, int]:
        return self.delta, self.whence


class FromEnd(SeekDescriptor):
    """Offset from the end of the store, zero or negative in practice."""

    whence: ClassVar[int] = os.SEEK_END
    delta: int = Field(ge=I64_MIN, le=I64_MAX)

    def as_seek_args(self) -> tuple[int, int]:
        return self.delta, self.whence


STAY = Relative(delta=0)


def _parse_unsigned(digits: bytes, limit: int) -> int:
    if not digits.isdigit():
        raise InvalidDigitInSeekArgument()
    value = int(digits)
    if value > limit:
        raise InvalidDigitInSeekArgument()
    return value


def _parse_signed(token: bytes) -> int:
    sign, digits = token[:1], token[1:]
    magnitude = _parse_unsigned(digits, I64_MAX + 1)
    value = -magnitude if sign == b"-" else magnitude
    if value > I64_MAX:
        raise InvalidDigitInSeekArgument()
    return value


def resolve_seek(token: bytes) -> SeekDescriptor:
    """Resolve one whitespace-free seek token.

    Args:
        token: Raw token bytes from the command line.

    Returns:
        The matching Absolute, Relative or FromEnd descriptor.

    Raises:
        MissingSeekArgument: The token is empty.
        InvalidDigitInSeekArgument: A numeric form has a bad digit or overflows.
        InvalidSeekArgument: The token matches no form of the grammar.
    """
    if not token:
        raise MissingSeekArgument()

    if token == b".":
        return STAY
    if token == b"<":
        return FromEnd(delta=0)

    first = token[:1]
    if first in (b"+", b"-"):
        return Relative(delta=_parse_signed(token))
    if first.isdigit():
        if token.endswith(b"<"):
            return FromEnd(delta=-_parse_unsigned(token[:-1], I64_MAX))
        return Absolute(offset=_parse_unsigned(token, U64_MAX))

    raise InvalidSeekArgument()
