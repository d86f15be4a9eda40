"""Tests for FileStore and its interchangeability with MemoryStore."""

from __future__ import annotations

import pytest

from randstore_core import (
    EOF,
    AlreadyOpenError,
    FileStore,
    MemoryStore,
    RandomAccessStore,
    StoreConfig,
)


def write_records(store: RandomAccessStore) -> None:
    store.write_boolean(True)
    store.write_int8(-3)
    store.write_int16(-300)
    store.write_char("Z")
    store.write_int32(123456789)
    store.write_int64(-(2**50))
    store.write_float32(0.5)
    store.write_float64(-1.25)


def test_opens_on_construction(file_store):
    assert not file_store.closed
    assert file_store.tell() == 0
    assert file_store.length() == 0


def test_name_defaults_to_file_name(file_store):
    assert file_store.config.name == "store.bin"
    assert repr(file_store) == "<FileStore 'store.bin' open>"


def test_config_supplies_path_and_mode(tmp_path):
    path = tmp_path / "cfg.bin"
    config = StoreConfig(path=str(path), mode="rw")
    with FileStore(config=config) as s:
        s.write_int32(9)
    assert path.read_bytes() == b"\x00\x00\x00\x09"
    assert config.name == ""


def test_content_reaches_disk(file_store, tmp_path):
    file_store.write_int32(0x0A0B0C0D)
    assert (tmp_path / "store.bin").read_bytes() == b"\x0a\x0b\x0c\x0d"


def test_read_only_mode_reads_existing_file(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"\x00\x00\x01\x00rest")
    with FileStore(str(path), "r") as s:
        assert s.read_int32() == 256
        assert s.length() == 8
        with pytest.raises(OSError):
            s.write_byte(1)


def test_read_only_mode_requires_existing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        FileStore(str(tmp_path / "missing.bin"), "r")


def test_illegal_mode(tmp_path):
    with pytest.raises(ValueError, match="Illegal mode"):
        FileStore(str(tmp_path / "x.bin"), "w")


@pytest.mark.parametrize("mode", ["rws", "rwd"])
def test_sync_modes_write(tmp_path, mode):
    path = tmp_path / "sync.bin"
    with FileStore(str(path), mode) as s:
        s.write_int16(7)
    assert path.read_bytes() == b"\x00\x07"


def test_reopen_after_close(file_store):
    file_store.write_int64(42)
    file_store.close()
    file_store.open()
    assert file_store.tell() == 0
    assert file_store.read_int64() == 42


def test_open_while_open_fails(file_store):
    with pytest.raises(AlreadyOpenError):
        file_store.open()


def test_ranged_write_grows_exactly(file_store):
    file_store.write(b"abc")
    assert file_store.length() == 3


def test_read_into_and_eof(file_store):
    file_store.write(b"abc")
    file_store.seek(0)
    dst = bytearray(5)
    assert file_store.read_into(dst, 1, 4) == 3
    assert dst == b"\x00abc\x00"
    assert file_store.read_into(dst) == EOF
    assert file_store.read() == EOF


def test_seek_past_end_then_write(file_store):
    file_store.seek(3)
    assert file_store.length() == 0
    file_store.write_byte(0x41)
    file_store.seek(0)
    dst = bytearray(4)
    file_store.read_fully(dst)
    assert dst == b"\x00\x00\x00A"


def test_set_length_truncates_and_extends(file_store):
    file_store.write(b"0123456789")
    file_store.seek(8)
    file_store.set_length(4)
    assert file_store.tell() == 4
    assert file_store.length() == 4
    file_store.set_length(7)
    assert file_store.tell() == 4
    dst = bytearray(3)
    file_store.read_fully(dst)
    assert dst == bytes(3)


def test_skip_clamps_to_end(file_store):
    file_store.write(b"0123456789")
    file_store.seek(7)
    assert file_store.skip(10) == 3
    assert file_store.tell() == 10


def test_numeric_encodings_match_memory_store(file_store, tmp_path):
    memory = MemoryStore()
    memory.open()
    write_records(memory)
    write_records(file_store)
    assert (tmp_path / "store.bin").read_bytes() == memory.getvalue()


@pytest.mark.parametrize(
    "writer,text",
    [
        ("write_modified_utf8", "h\x00é€\U0001f600"),
        ("write_utf16_chars", "A☺\U0001f600"),
        ("write_latin1_bytes", "caf\xe9"),
    ],
)
def test_string_encodings_match_memory_store(file_store, tmp_path, writer, text):
    memory = MemoryStore()
    memory.open()
    getattr(memory, writer)(text)
    getattr(file_store, writer)(text)

    on_disk = (tmp_path / "store.bin").read_bytes()
    # The memory store's ranged write leaves one zero byte past the data.
    assert memory.getvalue() == on_disk + b"\x00"
    assert memory.tell() == file_store.tell()
