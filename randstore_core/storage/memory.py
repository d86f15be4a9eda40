"""randstore Memory Store - In-Memory Random-Access Store.

A test double for a disk-backed random-access file. The backing
bytearray always has exactly the logical file length and is grown
only as far as each write needs; nothing is buffered or cached.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import Optional

from randstore_core.errors import AlreadyOpenError
from randstore_core.storage.backend import (
    EOF,
    Buffer,
    Destination,
    RandomAccessStore,
    StoreConfig,
    StoreState,
)

logger = logging.getLogger(__name__)


class MemoryStore(RandomAccessStore):
    """In-memory random-access store.

    Starts closed and empty; call open() before use. Reopening keeps the
    existing content and moves the cursor back to 0.
    """

    def __init__(self, config: StoreConfig = None):
        super().__init__(config)
        self._buffer = bytearray()
        self._pos = 0

    @property
    def buffer(self) -> bytearray:
        """The live backing array.

        Exposed for test inspection only. Mutating it bypasses every
        invariant the store maintains.
        """
        return self._buffer

    def getvalue(self) -> bytes:
        """Get a copy of the current content."""
        return bytes(self._buffer)

    def _grow(self, new_size: int) -> None:
        logger.debug(f"{self!r}: growing {len(self._buffer)} -> {new_size} bytes")
        self._buffer.extend(bytes(new_size - len(self._buffer)))

    # Lifecycle

    def open(self) -> None:
        if self._state is StoreState.OPEN:
            raise AlreadyOpenError()
        self._state = StoreState.OPEN
        self._pos = 0
        logger.debug(f"{self!r}: opened with {len(self._buffer)} bytes")

    def close(self) -> None:
        self._state = StoreState.CLOSED
        logger.debug(f"{self!r}: closed")

    # Reads

    def read(self) -> int:
        self._ensure_open()
        if self._pos >= len(self._buffer):
            return EOF
        value = self._buffer[self._pos]
        self._pos += 1
        return value

    def read_into(self, dst: Destination, off: int = 0, length: Optional[int] = None) -> int:
        self._ensure_open()
        length = self._check_bounds(dst, off, length)

        count = min(length, len(self._buffer) - self._pos)
        if count < 1:
            return EOF

        dst[off:off + count] = self._buffer[self._pos:self._pos + count]
        self._pos += count
        return count

    # Writes

    def write_byte(self, value: int) -> None:
        self._ensure_open()
        if len(self._buffer) < self._pos + 1:
            self._grow(self._pos + 1)
        self._buffer[self._pos] = value & 0xFF
        self._pos += 1

    def write(self, src: Buffer, off: int = 0, length: Optional[int] = None) -> None:
        self._ensure_open()
        length = self._check_bounds(src, off, length)

        # Grows one byte past the written range.
        if len(self._buffer) <= self._pos + length:
            self._grow(self._pos + 1 + length)

        self._buffer[self._pos:self._pos + length] = src[off:off + length]
        self._pos += length

    # Positioning

    def tell(self) -> int:
        self._ensure_open()
        return self._pos

    def seek(self, pos: int) -> None:
        self._ensure_open()
        self._check_position(pos)
        self._pos = pos

    def length(self) -> int:
        self._ensure_open()
        return len(self._buffer)

    def set_length(self, new_length: int) -> None:
        self._ensure_open()
        self._check_position(new_length, "length")

        if new_length < len(self._buffer):
            logger.debug(f"{self!r}: truncating {len(self._buffer)} -> {new_length} bytes")
            del self._buffer[new_length:]
        elif new_length > len(self._buffer):
            self._grow(new_length)

        if self._pos > new_length:
            self._pos = new_length


__all__ = ["MemoryStore"]
