"""Seek, read and write operations against the byte store.

The store is any binary file object. Every OS-level failure is converted to a
StoreError so the engine can report it and carry on.
"""

from __future__ import annotations

import io
from typing import BinaryIO

from tapehead.core.errors import NotSeekableError, StoreError
from tapehead.core.seek import STAY, SeekDescriptor
from tapehead.core.state import ScratchBuffer


def _is_seekable(store: BinaryIO) -> bool:
    try:
        return store.seekable()
    except (OSError, ValueError):
        return False


def apply_seek(store: BinaryIO, seek: SeekDescriptor) -> int | None:
    """Move the store's cursor.

    Returns:
        The new absolute position, or None when a stay seek fails because
        the store cannot report its position.

    Raises:
        NotSeekableError: Any other seek on a store that is not seekable.
        StoreError: The seek failed for another reason.
    """
    offset, whence = seek.as_seek_args()
    try:
        return store.seek(offset, whence)
    except (OSError, ValueError, OverflowError) as e:
        if seek == STAY:
            return None
        if not _is_seekable(store):
            raise NotSeekableError() from e
        raise StoreError(str(e)) from e


def current_position(store: BinaryIO) -> int | None:
    """Query the cursor with a stay seek. None if unknown."""
    return apply_seek(store, STAY)


def read_into(store: BinaryIO, buffer: ScratchBuffer, count: int | None) -> int:
    """Fill buffer with count bytes, or everything up to EOF when count is None."""
    try:
        if count is None:
            return buffer.fill_to_end(store)
        return buffer.fill(store, count)
    except MemoryError as e:
        raise StoreError(f"Cannot allocate {count} bytes.") from e
    except io.UnsupportedOperation as e:
        raise StoreError(f"File not readable ({e}).") from e
    except (OSError, ValueError) as e:
        raise StoreError(str(e)) from e


def write_all(store: BinaryIO, data: bytes) -> int:
    """Write data in full and flush it through to the store."""
    try:
        view = memoryview(data)
        written = 0
        while written < len(data):
            n = store.write(view[written:])
            if not n:
                raise StoreError("Write made no progress.")
            written += n
        store.flush()
    except io.UnsupportedOperation as e:
        raise StoreError(f"File not writable ({e}).") from e
    except (OSError, ValueError) as e:
        raise StoreError(str(e)) from e
    return written
