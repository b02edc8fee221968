"""Tests for files.line_reader module."""

from __future__ import annotations

import io
import logging

import pytest

from common.exceptions import LineDecodeError, WordFreqError
from files.line_reader import decode_line, iter_lines


@pytest.mark.parametrize(
    "raw,expected",
    [
        (b"hello\n", "hello"),
        (b"hello\r\n", "hello"),
        (b"hello", "hello"),
        (b"\n", ""),
        (b"caf\xc3\xa9\n", "café"),
    ],
)
def test_decode_line(raw: bytes, expected: str):
    assert decode_line(raw) == expected


def test_decode_line_invalid_utf8():
    with pytest.raises(LineDecodeError) as excinfo:
        decode_line(b"bad \xff\xfe\n", line_number=7)

    assert excinfo.value.line_number == 7
    assert "line 7" in str(excinfo.value)
    assert isinstance(excinfo.value, WordFreqError)


def test_decode_line_other_encoding():
    assert decode_line(b"caf\xe9\n", encoding="latin-1") == "café"


def test_iter_lines_basic(byte_stream):
    assert list(iter_lines(byte_stream("Hello\nWorld"))) == ["Hello", "World"]


def test_iter_lines_trailing_newline(byte_stream):
    assert list(iter_lines(byte_stream("one\ntwo\n"))) == ["one", "two"]


def test_iter_lines_empty():
    assert list(iter_lines(io.BytesIO(b""))) == []


def test_iter_lines_skips_undecodable(caplog):
    stream = io.BytesIO(b"first\n\xff\xfe broken\nlast\n")

    with caplog.at_level(logging.DEBUG, logger="files.line_reader"):
        lines = list(iter_lines(stream))

    assert lines == ["first", "last"]
    assert "line 2" in caplog.text


def test_iter_lines_is_lazy():
    stream = io.BytesIO(b"a\nb\nc\n")
    lines = iter_lines(stream)

    assert next(lines) == "a"
    assert stream.tell() == 2


def test_iter_lines_stops_on_read_error(failing_stream, caplog):
    stream = failing_stream([b"one\n", b"two\n"])

    with caplog.at_level(logging.WARNING, logger="files.line_reader"):
        lines = list(iter_lines(stream))

    assert lines == ["one", "two"]
    assert "device not ready" in caplog.text
