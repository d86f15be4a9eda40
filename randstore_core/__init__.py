"""randstore - In-Memory Random-Access File Double.

A growable byte buffer with a cursor that reproduces the read/write/seek
contract of a random-access file, including big-endian typed I/O for
every fixed-width numeric type, booleans, lines and length-prefixed
modified UTF-8 strings. Application code written against
RandomAccessStore runs unchanged on the in-memory double in tests and on
a real file in production.

Architecture:
┌───────────────────────────────────────────────────────────────────┐
│                        RandomAccessStore                          │
├───────────────────────────────────────────────────────────────────┤
│                                                                   │
│   ┌───────────────────────────────────────────────────────────┐   │
│   │                     Typed Operations                      │   │
│   │  ┌──────────┐  ┌──────────┐  ┌──────────┐  ┌──────────┐   │   │
│   │  │ Numeric  │  │ Boolean  │  │   Line   │  │ Modified │   │   │
│   │  │  Codec   │  │          │  │  Reader  │  │  UTF-8   │   │   │
│   │  └──────────┘  └──────────┘  └──────────┘  └──────────┘   │   │
│   └───────────────────────────────────────────────────────────┘   │
│                                                                   │
│   ┌───────────────────────────────────────────────────────────┐   │
│   │                    Primitive Operations                   │   │
│   │  read / read_into / write_byte / write / tell / seek /    │   │
│   │  length / set_length                                      │   │
│   └───────────────────────────────────────────────────────────┘   │
│                                                                   │
│   ┌──────────────────────────┐      ┌──────────────────────────┐  │
│   │       MemoryStore        │      │        FileStore         │  │
│   │  bytearray + cursor      │      │  unbuffered OS file      │  │
│   └──────────────────────────┘      └──────────────────────────┘  │
│                                                                   │
└───────────────────────────────────────────────────────────────────┘

Key Features:
- Exact-size buffer growth, zero-filled gaps after seeking past the end
- Explicit open/closed lifecycle guarding every operation
- EOF sentinel for raw reads, EndOfDataError for fully/typed reads
- Byte-identical encodings across the memory and file stores

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

__version__ = "1.0.0"
__author__ = "BlackRoad OS"
__license__ = "Proprietary"

# Errors
from randstore_core.errors import (
    StoreError,
    ClosedError,
    AlreadyOpenError,
    NegativeSeekError,
    PositionOverflowError,
    EndOfDataError,
    StringTooLongError,
    MalformedStringError,
    BoundsError,
)

# Codecs
from randstore_core.codec import numeric
from randstore_core.codec.mutf8 import (
    decode_modified_utf8,
    encode_modified_utf8,
    encoded_length,
)

# Storage
from randstore_core.storage.backend import (
    EOF,
    RandomAccessStore,
    StoreConfig,
    StoreState,
)
from randstore_core.storage.memory import MemoryStore
from randstore_core.storage.file import FileStore

__all__ = [
    # Version
    "__version__",
    "__author__",
    "__license__",
    # Errors
    "StoreError",
    "ClosedError",
    "AlreadyOpenError",
    "NegativeSeekError",
    "PositionOverflowError",
    "EndOfDataError",
    "StringTooLongError",
    "MalformedStringError",
    "BoundsError",
    # Codecs
    "numeric",
    "decode_modified_utf8",
    "encode_modified_utf8",
    "encoded_length",
    # Storage
    "EOF",
    "RandomAccessStore",
    "StoreConfig",
    "StoreState",
    "MemoryStore",
    "FileStore",
]
