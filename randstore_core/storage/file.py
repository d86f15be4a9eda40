"""randstore File Store - Disk-Backed Random-Access Store.

Pass-through to a real OS file with the same contract as MemoryStore.
The file is opened on construction and read/written unbuffered, so every
operation reaches the operating system directly.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import os
from dataclasses import replace
from typing import BinaryIO, Optional

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

_O_BINARY = getattr(os, "O_BINARY", 0)

# mode -> (os.open flags, file object mode)
_MODES = {
    "r": (os.O_RDONLY | _O_BINARY, "rb"),
    "rw": (os.O_RDWR | os.O_CREAT | _O_BINARY, "r+b"),
    "rws": (os.O_RDWR | os.O_CREAT | _O_BINARY | getattr(os, "O_SYNC", 0), "r+b"),
    "rwd": (
        os.O_RDWR | os.O_CREAT | _O_BINARY | getattr(os, "O_DSYNC", getattr(os, "O_SYNC", 0)),
        "r+b",
    ),
}


class FileStore(RandomAccessStore):
    """File-backed random-access store.

    Modes:
        r: read only; the file must exist
        rw: read/write; the file is created if missing
        rws/rwd: like rw, with synchronous content (and metadata) updates
    """

    def __init__(
        self,
        path: Optional[str] = None,
        mode: Optional[str] = None,
        config: StoreConfig = None,
    ):
        """Open the file.

        Args:
            path: File path, overrides config.path
            mode: Access mode, overrides config.mode
            config: Store configuration
        """
        super().__init__(config)
        if path is not None:
            self.config = replace(self.config, path=os.fspath(path))
        if mode is not None:
            self.config = replace(self.config, mode=mode)
        if self.config.mode not in _MODES:
            raise ValueError(
                f'Illegal mode "{self.config.mode}" must be one of "r", "rw", "rws", or "rwd"'
            )
        if not self.config.name:
            self.config = replace(self.config, name=os.path.basename(self.config.path))

        self._file: Optional[BinaryIO] = None
        self.open()

    def _open_file(self) -> BinaryIO:
        flags, file_mode = _MODES[self.config.mode]
        fd = os.open(self.config.path, flags, 0o666)
        return os.fdopen(fd, file_mode, buffering=0)

    # Lifecycle

    def open(self) -> None:
        if self._state is StoreState.OPEN:
            raise AlreadyOpenError()
        self._file = self._open_file()
        self._state = StoreState.OPEN
        logger.info(f"Opened {self.config.path} (mode {self.config.mode})")

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
        self._state = StoreState.CLOSED
        logger.debug(f"Closed {self.config.path}")

    # Reads

    def read(self) -> int:
        self._ensure_open()
        data = self._file.read(1)
        return data[0] if data else EOF

    def read_into(self, dst: Destination, off: int = 0, length: Optional[int] = None) -> int:
        self._ensure_open()
        length = self._check_bounds(dst, off, length)
        if length == 0:
            return EOF

        count = self._file.readinto(memoryview(dst)[off:off + length])
        return count if count else EOF

    # Writes

    def write_byte(self, value: int) -> None:
        self._ensure_open()
        self._file.write(bytes((value & 0xFF,)))

    def write(self, src: Buffer, off: int = 0, length: Optional[int] = None) -> None:
        self._ensure_open()
        length = self._check_bounds(src, off, length)

        pending = memoryview(src)[off:off + length]
        while pending:
            written = self._file.write(pending)
            pending = pending[written:]

    # Positioning

    def tell(self) -> int:
        self._ensure_open()
        return self._file.tell()

    def seek(self, pos: int) -> None:
        self._ensure_open()
        self._check_position(pos)
        self._file.seek(pos)

    def length(self) -> int:
        self._ensure_open()
        return os.fstat(self._file.fileno()).st_size

    def set_length(self, new_length: int) -> None:
        self._ensure_open()
        self._check_position(new_length, "length")

        logger.debug(f"Resizing {self.config.path} to {new_length} bytes")
        self._file.truncate(new_length)
        if self._file.tell() > new_length:
            self._file.seek(new_length)


__all__ = ["FileStore"]
