"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from randstore_core import FileStore, MemoryStore, RandomAccessStore


def fill(store: RandomAccessStore, data: bytes) -> RandomAccessStore:
    """Write ``data`` byte by byte (exact growth) and rewind."""
    for octet in data:
        store.write_byte(octet)
    store.seek(0)
    return store


@pytest.fixture
def store() -> MemoryStore:
    """An opened, empty memory store."""
    s = MemoryStore()
    s.open()
    return s


@pytest.fixture
def file_store(tmp_path) -> FileStore:
    """A file store on a fresh file under tmp_path."""
    s = FileStore(str(tmp_path / "store.bin"), "rw")
    yield s
    s.close()


@pytest.fixture(params=["memory", "file"])
def any_store(request, tmp_path) -> RandomAccessStore:
    """An opened, empty store of each implementation."""
    if request.param == "memory":
        s = MemoryStore()
        s.open()
    else:
        s = FileStore(str(tmp_path / "any.bin"), "rw")
    yield s
    s.close()
