"""Tests for read_line terminator handling."""

from __future__ import annotations

import pytest

from conftest import fill


def read_all_lines(store):
    lines = []
    while True:
        line = store.read_line()
        if line is None:
            return lines
        lines.append(line)


@pytest.mark.parametrize(
    "data,expected",
    [
        (b"a\r\nb", ["a", "b"]),
        (b"a\rb", ["a", "b"]),
        (b"a\nb\n", ["a", "b"]),
        (b"a\n\nb", ["a", "", "b"]),
        (b"a\r\rb", ["a", "", "b"]),
        (b"\n", [""]),
        (b"tail\r", ["tail"]),
        (b"", []),
    ],
)
def test_line_terminators(any_store, data, expected):
    fill(any_store, data)
    assert read_all_lines(any_store) == expected


def test_lone_cr_rewinds_one_byte(any_store):
    fill(any_store, b"a\rb")
    assert any_store.read_line() == "a"
    assert any_store.tell() == 2
    assert any_store.read() == ord("b")


def test_crlf_consumes_both(any_store):
    fill(any_store, b"a\r\nb")
    any_store.read_line()
    assert any_store.tell() == 3


def test_line_bytes_are_latin1(any_store):
    fill(any_store, b"caf\xe9\xff\n")
    assert any_store.read_line() == "caféÿ"


def test_no_line_at_end(any_store):
    fill(any_store, b"x")
    assert any_store.read_line() == "x"
    assert any_store.read_line() is None
    assert any_store.read_line() is None
