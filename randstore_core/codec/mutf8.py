"""randstore Modified UTF-8 Codec.

Strings are written in the length-prefixed "modified UTF-8" format of
Java's DataOutput: a big-endian uint16 byte count followed by the
encoded UTF-16 code units, where

- U+0001..U+007F take one byte,
- U+0000 and U+0080..U+07FF take two bytes,
- U+0800..U+FFFF take three bytes.

Characters outside the BMP are first split into a surrogate pair and
each surrogate is encoded separately (three bytes each), so the format
never contains four-byte sequences.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import List

from randstore_core.errors import MalformedStringError, StringTooLongError

MAX_ENCODED_LENGTH = 0xFFFF


def utf16_units(text: str) -> List[int]:
    """Split a string into UTF-16 code units.

    Args:
        text: Source string (lone surrogates are passed through)

    Returns:
        List of 16-bit code units
    """
    raw = text.encode("utf-16-be", "surrogatepass")
    return [(raw[i] << 8) | raw[i + 1] for i in range(0, len(raw), 2)]


def from_utf16_units(units: List[int]) -> str:
    """Join UTF-16 code units back into a string."""
    raw = bytearray()
    for unit in units:
        raw.append((unit >> 8) & 0xFF)
        raw.append(unit & 0xFF)
    return raw.decode("utf-16-be", "surrogatepass")


def encoded_length(text: str) -> int:
    """Get the modified UTF-8 byte count of a string, prefix excluded."""
    length = 0
    for unit in utf16_units(text):
        if 0x0001 <= unit <= 0x007F:
            length += 1
        elif unit >= 0x0800:
            length += 3
        else:
            length += 2
    return length


def _too_long_message(text: str, length: int) -> str:
    return f"encoded string ({text[:8]}...{text[-8:]}) too long: {length} bytes"


def encode_modified_utf8(text: str) -> bytes:
    """Encode a string with its two-byte length prefix.

    Args:
        text: String to encode

    Returns:
        Prefix plus encoded bytes

    Raises:
        StringTooLongError: If the encoded form exceeds 65535 bytes
    """
    units = utf16_units(text)
    length = encoded_length(text)
    if length > MAX_ENCODED_LENGTH:
        raise StringTooLongError(_too_long_message(text, length))

    out = bytearray(length + 2)
    out[0] = (length >> 8) & 0xFF
    out[1] = length & 0xFF
    count = 2

    for unit in units:
        if 0x0001 <= unit <= 0x007F:
            out[count] = unit
            count += 1
        elif unit >= 0x0800:
            out[count] = 0xE0 | ((unit >> 12) & 0x0F)
            out[count + 1] = 0x80 | ((unit >> 6) & 0x3F)
            out[count + 2] = 0x80 | (unit & 0x3F)
            count += 3
        else:
            out[count] = 0xC0 | ((unit >> 6) & 0x1F)
            out[count + 1] = 0x80 | (unit & 0x3F)
            count += 2

    return bytes(out)


def decode_modified_utf8(data: bytes) -> str:
    """Decode a modified UTF-8 body (no length prefix).

    Args:
        data: Encoded bytes

    Returns:
        Decoded string

    Raises:
        MalformedStringError: On truncated or invalid sequences
    """
    units: List[int] = []
    total = len(data)
    count = 0

    while count < total:
        c = data[count]
        kind = c >> 4
        if kind <= 7:
            # 0xxxxxxx
            count += 1
            units.append(c)
        elif kind in (12, 13):
            # 110x xxxx  10xx xxxx
            count += 2
            if count > total:
                raise MalformedStringError("malformed input: partial character at end")
            c2 = data[count - 1]
            if (c2 & 0xC0) != 0x80:
                raise MalformedStringError(f"malformed input around byte {count}")
            units.append(((c & 0x1F) << 6) | (c2 & 0x3F))
        elif kind == 14:
            # 1110 xxxx  10xx xxxx  10xx xxxx
            count += 3
            if count > total:
                raise MalformedStringError("malformed input: partial character at end")
            c2 = data[count - 2]
            c3 = data[count - 1]
            if (c2 & 0xC0) != 0x80 or (c3 & 0xC0) != 0x80:
                raise MalformedStringError(f"malformed input around byte {count - 1}")
            units.append(((c & 0x0F) << 12) | ((c2 & 0x3F) << 6) | (c3 & 0x3F))
        else:
            # 10xx xxxx, 1111 xxxx
            raise MalformedStringError(f"malformed input around byte {count}")

    return from_utf16_units(units)


__all__ = [
    "MAX_ENCODED_LENGTH",
    "utf16_units",
    "from_utf16_units",
    "encoded_length",
    "encode_modified_utf8",
    "decode_modified_utf8",
]
