"""randstore Store Backend - Abstract Random-Access Store Interface.

Application code depends on RandomAccessStore only, so an in-memory
store and a disk-backed one can be wired in interchangeably. Concrete
stores implement the primitive byte operations and the lifecycle; the
typed operations below are built once on top of those primitives.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union

from randstore_core.codec import numeric
from randstore_core.codec.mutf8 import (
    decode_modified_utf8,
    encode_modified_utf8,
    utf16_units,
)
from randstore_core.errors import (
    BoundsError,
    ClosedError,
    EndOfDataError,
    NegativeSeekError,
    PositionOverflowError,
)

# Returned by the raw reads when no data is left.
EOF = -1

# Sources for writes may be immutable; read destinations must be writable.
Buffer = Union[bytes, bytearray, memoryview]
Destination = Union[bytearray, memoryview]


class StoreState(Enum):
    """Store lifecycle state."""

    CLOSED = auto()
    OPEN = auto()


@dataclass
class StoreConfig:
    """Store configuration.

    Attributes:
        name: Label used in log lines and repr
        max_position: Highest addressable position
        path: File path (file-backed stores only)
        mode: "r", "rw", "rws" or "rwd" (file-backed stores only)
    """

    name: str = ""
    max_position: int = 2**31 - 1
    path: str = ""
    mode: str = "rw"


class RandomAccessStore(ABC):
    """Abstract random-access store.

    A byte sequence with a cursor. Every data operation requires the
    store to be open and raises ClosedError otherwise.
    """

    def __init__(self, config: StoreConfig = None):
        self.config = config or StoreConfig()
        self._state = StoreState.CLOSED

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def state(self) -> StoreState:
        return self._state

    @property
    def closed(self) -> bool:
        return self._state is StoreState.CLOSED

    def _ensure_open(self) -> None:
        if self._state is not StoreState.OPEN:
            raise ClosedError()

    @abstractmethod
    def open(self) -> None:
        """(Re)open the store and move the cursor to 0."""

    @abstractmethod
    def close(self) -> None:
        """Close the store. Closing a closed store does nothing."""

    def __enter__(self) -> "RandomAccessStore":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        label = f" {self.config.name!r}" if self.config.name else ""
        return f"<{type(self).__name__}{label} {self._state.name.lower()}>"

    # ------------------------------------------------------------------
    # Primitive operations
    # ------------------------------------------------------------------

    @abstractmethod
    def read(self) -> int:
        """Read one byte (0-255), or EOF at end of data."""

    @abstractmethod
    def read_into(self, dst: Destination, off: int = 0, length: Optional[int] = None) -> int:
        """Read up to ``length`` bytes into ``dst[off:]``.

        Returns:
            Number of bytes read, or EOF when nothing could be read
        """

    @abstractmethod
    def write_byte(self, value: int) -> None:
        """Write the low 8 bits of ``value``."""

    @abstractmethod
    def write(self, src: Buffer, off: int = 0, length: Optional[int] = None) -> None:
        """Write ``length`` bytes from ``src[off:]``."""

    @abstractmethod
    def tell(self) -> int:
        """Get the cursor position."""

    @abstractmethod
    def seek(self, pos: int) -> None:
        """Move the cursor to ``pos``; seeking past the end is allowed."""

    @abstractmethod
    def length(self) -> int:
        """Get the store length in bytes."""

    @abstractmethod
    def set_length(self, new_length: int) -> None:
        """Truncate or zero-extend the store, clamping the cursor."""

    # ------------------------------------------------------------------
    # Argument checks shared by implementations
    # ------------------------------------------------------------------

    def _check_position(self, pos: int, what: str = "seek offset") -> None:
        if pos < 0:
            raise NegativeSeekError(f"Negative {what} {pos}")
        if pos > self.config.max_position:
            raise PositionOverflowError(f"{what} {pos} exceeds {self.config.max_position}")

    @staticmethod
    def _check_bounds(buf: Buffer, off: int, length: Optional[int]) -> int:
        """Validate an (off, length) window of ``buf``.

        Returns:
            The resolved length
        """
        if length is None:
            length = len(buf) - off
        if off < 0 or length < 0 or off + length > len(buf):
            raise BoundsError(f"offset {off}, length {length}, buffer size {len(buf)}")
        return length

    # ------------------------------------------------------------------
    # Derived byte operations
    # ------------------------------------------------------------------

    def read_fully(self, dst: Destination, off: int = 0, length: Optional[int] = None) -> None:
        """Fill exactly ``length`` bytes of ``dst`` starting at ``off``.

        Raises:
            EndOfDataError: If fewer than ``length`` bytes remain
        """
        self._ensure_open()
        length = self._check_bounds(dst, off, length)
        if length == 0:
            return
        if length > self.length() - self.tell():
            raise EndOfDataError(f"{length} bytes requested at position {self.tell()}")

        done = 0
        while done < length:
            count = self.read_into(dst, off + done, length - done)
            if count == EOF:
                raise EndOfDataError(f"{length - done} bytes missing")
            done += count

    def skip(self, n: int) -> int:
        """Advance the cursor by up to ``n`` bytes without passing the end.

        Returns:
            Distance actually moved (0 when ``n`` is not positive)
        """
        self._ensure_open()
        if n <= 0:
            return 0
        pos = self.tell()
        new_pos = min(pos + n, self.length())
        self.seek(new_pos)
        return new_pos - pos

    def _read_exact(self, count: int) -> bytes:
        data = bytearray()
        for _ in range(count):
            ch = self.read()
            if ch == EOF:
                raise EndOfDataError(f"{count - len(data)} bytes missing")
            data.append(ch)
        return bytes(data)

    def _write_octets(self, data: bytes) -> None:
        for octet in data:
            self.write_byte(octet)

    # ------------------------------------------------------------------
    # Typed reads
    # ------------------------------------------------------------------

    def read_boolean(self) -> bool:
        self._ensure_open()
        return numeric.unpack_boolean(self._read_exact(1))

    def read_int8(self) -> int:
        self._ensure_open()
        return numeric.unpack_int8(self._read_exact(1))

    def read_uint8(self) -> int:
        self._ensure_open()
        return numeric.unpack_uint8(self._read_exact(1))

    def read_int16(self) -> int:
        self._ensure_open()
        return numeric.unpack_int16(self._read_exact(2))

    def read_uint16(self) -> int:
        self._ensure_open()
        return numeric.unpack_uint16(self._read_exact(2))

    def read_char(self) -> str:
        """Read one UTF-16 code unit as a single-character string."""
        self._ensure_open()
        return chr(numeric.unpack_uint16(self._read_exact(2)))

    def read_int32(self) -> int:
        self._ensure_open()
        return numeric.unpack_int32(self._read_exact(4))

    def read_int64(self) -> int:
        self._ensure_open()
        return numeric.unpack_int64(self._read_exact(8))

    def read_float32(self) -> float:
        self._ensure_open()
        return numeric.unpack_float32(self._read_exact(4))

    def read_float64(self) -> float:
        self._ensure_open()
        return numeric.unpack_float64(self._read_exact(8))

    def read_line(self) -> Optional[str]:
        """Read a Latin-1 line terminated by LF, CR, CRLF or end of data.

        Returns:
            The line without its terminator, or None when already at end
        """
        self._ensure_open()
        chars = []
        while True:
            c = self.read()
            if c == EOF or c == 0x0A:
                break
            if c == 0x0D:
                cur = self.tell()
                if self.read() != 0x0A:
                    self.seek(cur)
                break
            chars.append(chr(c))

        if c == EOF and not chars:
            return None
        return "".join(chars)

    def read_modified_utf8(self) -> str:
        """Read a uint16 length prefix followed by modified UTF-8 bytes."""
        self._ensure_open()
        body = bytearray(self.read_uint16())
        self.read_fully(body)
        return decode_modified_utf8(bytes(body))

    # ------------------------------------------------------------------
    # Typed writes
    # ------------------------------------------------------------------

    def write_boolean(self, value: bool) -> None:
        self._ensure_open()
        self._write_octets(numeric.pack_boolean(value))

    def write_int8(self, value: int) -> None:
        self._ensure_open()
        self._write_octets(numeric.pack_int8(value))

    def write_int16(self, value: int) -> None:
        self._ensure_open()
        self._write_octets(numeric.pack_int16(value))

    def write_char(self, value: Union[int, str]) -> None:
        """Write a UTF-16 code unit, given as an int or a 1-char string.

        Raises:
            ValueError: If a string is not exactly one UTF-16 code unit
        """
        self._ensure_open()
        if isinstance(value, str):
            units = utf16_units(value)
            if len(units) != 1:
                raise ValueError(
                    f"expected one UTF-16 code unit, got {len(units)}: {value!r}"
                )
            value = units[0]
        self._write_octets(numeric.pack_int16(value))

    def write_int32(self, value: int) -> None:
        self._ensure_open()
        self._write_octets(numeric.pack_int32(value))

    def write_int64(self, value: int) -> None:
        self._ensure_open()
        self._write_octets(numeric.pack_int64(value))

    def write_float32(self, value: float) -> None:
        self._ensure_open()
        self._write_octets(numeric.pack_float32(value))

    def write_float64(self, value: float) -> None:
        self._ensure_open()
        self._write_octets(numeric.pack_float64(value))

    def write_latin1_bytes(self, text: str) -> None:
        """Write the low 8 bits of every UTF-16 code unit, no prefix."""
        self._ensure_open()
        self.write(bytes(unit & 0xFF for unit in utf16_units(text)))

    def write_utf16_chars(self, text: str) -> None:
        """Write every UTF-16 code unit big-endian, no prefix."""
        self._ensure_open()
        self.write(text.encode("utf-16-be", "surrogatepass"))

    def write_modified_utf8(self, text: str) -> None:
        """Write a uint16 byte count followed by the modified UTF-8 bytes.

        Raises:
            StringTooLongError: If the encoded form exceeds 65535 bytes
        """
        self._ensure_open()
        self.write(encode_modified_utf8(text))


__all__ = ["EOF", "RandomAccessStore", "StoreConfig", "StoreState"]
