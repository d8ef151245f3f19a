"""Session state owned by the engine."""

from __future__ import annotations

from typing import BinaryIO

from pydantic import BaseModel, ConfigDict, Field

READ_CHUNK = 8192


class ScratchBuffer:
    """Reusable byte buffer. Capacity only grows; `length` marks the valid prefix."""

    def __init__(self, capacity: int = 8192) -> None:
        self._data = bytearray(capacity)
        self.length = 0

    @property
    def capacity(self) -> int:
        return len(self._data)

    def clear(self) -> None:
        self.length = 0

    def reserve(self, size: int) -> None:
        """Grow capacity to at least size bytes."""
        if size > len(self._data):
            self._data.extend(bytes(size - len(self._data)))

    def load(self, data: bytes) -> None:
        """Replace the contents with data."""
        self.reserve(len(data))
        self._data[: len(data)] = data
        self.length = len(data)

    def fill(self, source: BinaryIO, count: int) -> int:
        """Read up to count bytes from source, stopping early only at EOF."""
        self.clear()
        while self.length < count:
            # Capacity grows at most one chunk past the bytes read so far.
            self.reserve(min(count, self.length + READ_CHUNK))
            end = min(count, len(self._data))
            with memoryview(self._data) as view:
                n = source.readinto(view[self.length : end])
            if not n:
                break
            self.length += n
        return self.length

    def fill_to_end(self, source: BinaryIO) -> int:
        """Read from source until EOF."""
        self.clear()
        while True:
            self.reserve(self.length + READ_CHUNK)
            with memoryview(self._data) as view:
                n = source.readinto(view[self.length :])
            if not n:
                return self.length
            self.length += n

    def getvalue(self, start: int = 0) -> bytes:
        """Return a copy of the valid bytes from start onwards."""
        return bytes(self._data[start : self.length])


class SessionState(BaseModel):
    """Per-session engine state.

    The counters describe the last loop iteration only and are reset at the
    top of every iteration. The cursor position lives in the store itself.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    buffer: ScratchBuffer = Field(default_factory=ScratchBuffer)
    read_count: int = 0
    write_count: int = 0

    @classmethod
    def with_capacity(cls, capacity: int) -> SessionState:
        return cls(buffer=ScratchBuffer(capacity))

    def reset_counters(self) -> None:
        self.read_count = 0
        self.write_count = 0
