"""randstore Errors - Store Exception Hierarchy.

Every failure a store reports derives from StoreError, itself an OSError,
so callers written against real files keep working. The more specific
classes also derive from the matching builtin (EOFError, ValueError, ...)
where one exists.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations


class StoreError(OSError):
    """Base class for random-access store errors."""


class ClosedError(StoreError):
    """Operation attempted on a closed store."""

    def __init__(self, message: str = "already closed"):
        super().__init__(message)


class AlreadyOpenError(StoreError):
    """open() called on a store that is already open."""

    def __init__(self, message: str = "file already/concurrent open"):
        super().__init__(message)


class NegativeSeekError(StoreError, ValueError):
    """A position or length below zero was requested."""


class PositionOverflowError(StoreError, OverflowError):
    """A position exceeds the addressable range of the store."""


class EndOfDataError(StoreError, EOFError):
    """Not enough bytes remain for a fully/typed read."""


class StringTooLongError(StoreError, ValueError):
    """Encoded string does not fit the 16-bit length prefix."""


class MalformedStringError(StoreError, ValueError):
    """Bytes are not valid modified UTF-8."""


class BoundsError(StoreError, IndexError):
    """Offset/length arguments are inconsistent with the given buffer."""


__all__ = [
    "StoreError",
    "ClosedError",
    "AlreadyOpenError",
    "NegativeSeekError",
    "PositionOverflowError",
    "EndOfDataError",
    "StringTooLongError",
    "MalformedStringError",
    "BoundsError",
]
