"""randstore Numeric Codec - Fixed-Width Big-Endian Encodings.

Pure functions converting Python numbers to and from the big-endian
octet layouts used by the store's typed read/write operations.

Packing follows two's-complement truncation: any int is accepted and
only its low bits for the target width are kept, so ``pack_int16(-1)``
and ``pack_int16(0xFFFF)`` produce the same two bytes.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import math
import struct

_U8 = struct.Struct(">B")
_I8 = struct.Struct(">b")
_U16 = struct.Struct(">H")
_I16 = struct.Struct(">h")
_U32 = struct.Struct(">I")
_I32 = struct.Struct(">i")
_U64 = struct.Struct(">Q")
_I64 = struct.Struct(">q")
_F32 = struct.Struct(">f")
_F64 = struct.Struct(">d")


def pack_boolean(value: bool) -> bytes:
    return _U8.pack(1 if value else 0)


def pack_int8(value: int) -> bytes:
    return _U8.pack(value & 0xFF)


def pack_int16(value: int) -> bytes:
    return _U16.pack(value & 0xFFFF)


def pack_int32(value: int) -> bytes:
    return _U32.pack(value & 0xFFFFFFFF)


def pack_int64(value: int) -> bytes:
    return _U64.pack(value & 0xFFFFFFFFFFFFFFFF)


def pack_float32(value: float) -> bytes:
    """Pack as IEEE-754 single precision.

    Values beyond the single-precision range narrow to a signed infinity
    instead of failing.
    """
    try:
        return _F32.pack(value)
    except OverflowError:
        return _F32.pack(math.copysign(math.inf, value))


def pack_float64(value: float) -> bytes:
    return _F64.pack(value)


def unpack_boolean(data: bytes) -> bool:
    return _U8.unpack(data)[0] != 0


def unpack_int8(data: bytes) -> int:
    return _I8.unpack(data)[0]


def unpack_uint8(data: bytes) -> int:
    return _U8.unpack(data)[0]


def unpack_int16(data: bytes) -> int:
    return _I16.unpack(data)[0]


def unpack_uint16(data: bytes) -> int:
    return _U16.unpack(data)[0]


def unpack_int32(data: bytes) -> int:
    return _I32.unpack(data)[0]


def unpack_int64(data: bytes) -> int:
    """Unpack eight bytes as (high32 << 32) | (low32 & 0xFFFFFFFF)."""
    high = _I32.unpack(data[:4])[0]
    low = _U32.unpack(data[4:])[0]
    return (high << 32) | low


def unpack_float32(data: bytes) -> float:
    return _F32.unpack(data)[0]


def unpack_float64(data: bytes) -> float:
    return _F64.unpack(data)[0]


def float32_bits(value: float) -> int:
    """Get the int32 bit pattern of a single-precision value."""
    return _I32.unpack(pack_float32(value))[0]


def float64_bits(value: float) -> int:
    """Get the int64 bit pattern of a double-precision value."""
    return _I64.unpack(pack_float64(value))[0]


__all__ = [
    "pack_boolean",
    "pack_int8",
    "pack_int16",
    "pack_int32",
    "pack_int64",
    "pack_float32",
    "pack_float64",
    "unpack_boolean",
    "unpack_int8",
    "unpack_uint8",
    "unpack_int16",
    "unpack_uint16",
    "unpack_int32",
    "unpack_int64",
    "unpack_float32",
    "unpack_float64",
    "float32_bits",
    "float64_bits",
]
